"""
Service Protocol Definitions

This module defines typing.Protocol interfaces for services used in the Timeline
Reader application. These protocols enable loose coupling, dependency injection,
and easier testing.

Protocols defined:
- TimelineServiceProtocol: Interface for downloading timeline documents
"""

from typing import Protocol


class TimelineServiceProtocol(Protocol):
    """Protocol defining the interface for timeline download services.

    Implementations should provide methods for:
    - Downloading a URL into memory in a single attempt
    - Releasing any connection resources when the run is over
    """

    def fetch(self, url: str) -> bytes:
        """Download the full response body for a URL.

        Args:
            url: The URL to download.

        Returns:
            The response body as bytes.

        Raises:
            TimelineFetchError: If the download failed.
        """
        ...

    def close(self) -> None:
        """Release the resources held by the service."""
        ...
