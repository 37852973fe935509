"""
Custom Exception Classes for Timeline Reader

This module defines custom exceptions for better error handling and
categorization of failures across the application.
"""

from typing import Optional


class TimelineReaderError(Exception):
    """Base exception for all Timeline Reader application errors."""
    pass


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(TimelineReaderError):
    """Raised when configuration validation fails or settings are invalid."""
    pass


# =============================================================================
# Timeline Errors
# =============================================================================

class TimelineFetchError(TimelineReaderError):
    """Raised when the timeline cannot be downloaded.

    Attributes:
        url: The URL that failed to download, when known.
    """

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class DocumentParseError(TimelineReaderError):
    """Raised when a timeline response is not well-formed XML."""
    pass
