"""
Timeline Service Module

This module handles downloading a user's timeline from the timeline endpoint.
It owns the HTTP session used for the run and returns the raw response body.
"""

from typing import Optional, Dict
from urllib.parse import quote

import requests

from config import settings
from utils.exceptions import TimelineFetchError
from utils.logger import get_logger

logger = get_logger(__name__)


def build_timeline_url(account: str, count: int, template: Optional[str] = None) -> str:
    """
    Build the timeline request URL for an account.

    Args:
        account: The account whose timeline is requested.
        count: Number of posts to request.
        template: URL template with {account} and {count} placeholders,
            defaults to settings.TIMELINE_URL_TEMPLATE.

    Returns:
        str: The request URL.
    """
    template = template or settings.TIMELINE_URL_TEMPLATE
    return template.format(account=quote(account, safe=""), count=count)


class TimelineService:
    """Service for downloading timeline documents.

    The service is a context manager; the underlying requests session is
    closed when the block exits.
    """

    def __init__(self, session: Optional[requests.Session] = None,
                 timeout: Optional[float] = None,
                 max_response_bytes: Optional[int] = None,
                 headers: Optional[Dict[str, str]] = None):
        """Initialize the timeline service with an HTTP session."""
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.max_response_bytes = (max_response_bytes if max_response_bytes is not None
                                   else settings.MAX_RESPONSE_BYTES)
        self.chunk_size = settings.DOWNLOAD_CHUNK_SIZE
        self.headers = dict(headers or settings.REQUEST_HEADERS)
        self._owns_session = session is None
        self.session = session or requests.Session()

    def __enter__(self) -> "TimelineService":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP session if this service created it."""
        if self._owns_session and self.session is not None:
            self.session.close()
            logger.debug("HTTP session closed")
        self.session = None

    def fetch(self, url: str) -> bytes:
        """
        Download the full response body for a URL.

        The body is streamed and accumulated chunk by chunk. Nothing is
        returned unless the whole download succeeded.

        Args:
            url: The URL to download.

        Returns:
            bytes: The response body.

        Raises:
            TimelineFetchError: On connection errors, timeouts, non-2xx
                responses or when the body exceeds max_response_bytes.
        """
        if self.session is None:
            raise TimelineFetchError("Timeline service has been closed", url=url)

        logger.info(f"Downloading timeline from {url}")
        buffer = bytearray()

        try:
            with self.session.get(url, headers=self.headers, timeout=self.timeout,
                                  stream=True) as response:
                response.raise_for_status()

                for chunk in response.iter_content(chunk_size=self.chunk_size):
                    if not chunk:
                        continue

                    if self.max_response_bytes and len(buffer) + len(chunk) > self.max_response_bytes:
                        raise TimelineFetchError(
                            f"Response from \"{url}\" exceeds {self.max_response_bytes} bytes",
                            url=url
                        )

                    buffer.extend(chunk)

        except requests.RequestException as e:
            logger.error(f"An error occurred while downloading \"{url}\": {e}")
            raise TimelineFetchError(f"An error occurred while downloading \"{url}\"", url=url) from e
        except MemoryError as e:
            logger.error(f"Out of memory while downloading \"{url}\"")
            raise TimelineFetchError(f"Out of memory while downloading \"{url}\"", url=url) from e
        except TimelineFetchError as e:
            logger.error(str(e))
            raise

        logger.info(f"Downloaded {len(buffer)} bytes")
        return bytes(buffer)
