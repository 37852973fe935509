"""
Shared Test Fixtures for Timeline Reader Application

This module provides common fixtures used across all test modules.
Fixtures include sample timeline documents, fake HTTP sessions and
responses, and factories for test objects.
"""

import pytest
from unittest.mock import MagicMock
from datetime import datetime, timezone
from typing import Optional, List
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from data.models import TimelinePost


# =============================================================================
# Timeline Document Fixtures
# =============================================================================

SAMPLE_TIMELINE_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<statuses type="array">
  <status>
    <created_at>Thu May 06 06:20:06 +0000 2010</created_at>
    <id>13466544712</id>
    <text>Newest post</text>
  </status>
  <status>
    <created_at>Mon May 03 23:59:59 +0000 2010</created_at>
    <id>13466544710</id>
    <text>Oldest post</text>
  </status>
  <status>
    <created_at>Wed May 05 12:00:00 +0000 2010</created_at>
    <id>13466544711</id>
    <text>Middle post</text>
  </status>
</statuses>
"""

EMPTY_TIMELINE_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<statuses type="array">
</statuses>
"""

INCOMPLETE_TIMELINE_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<statuses type="array">
  <status>
    <text>Missing created_at</text>
  </status>
  <status>
    <created_at>Thu May 06 06:20:06 +0000 2010</created_at>
  </status>
</statuses>
"""


@pytest.fixture
def sample_timeline_xml() -> bytes:
    """A timeline with three complete statuses, out of chronological order."""
    return SAMPLE_TIMELINE_XML


@pytest.fixture
def empty_timeline_xml() -> bytes:
    """A timeline without any status entries."""
    return EMPTY_TIMELINE_XML


@pytest.fixture
def incomplete_timeline_xml() -> bytes:
    """A timeline whose statuses each lack one required field."""
    return INCOMPLETE_TIMELINE_XML


# =============================================================================
# HTTP Fixtures
# =============================================================================

@pytest.fixture
def mock_response_factory():
    """
    Factory fixture for fake streamed HTTP responses.

    Usage:
        def test_something(mock_response_factory):
            response = mock_response_factory(chunks=[b"<statuses/>"])

    Returns:
        Callable: Builds a MagicMock that behaves like a streamed requests.Response.
    """
    def _create(chunks: Optional[List[bytes]] = None, status_code: int = 200,
                raise_for_status_error: Optional[Exception] = None):
        response = MagicMock()
        response.status_code = status_code
        response.__enter__.return_value = response
        response.__exit__.return_value = False
        response.iter_content.return_value = list(chunks or [])
        if raise_for_status_error is not None:
            response.raise_for_status.side_effect = raise_for_status_error
        return response

    return _create


@pytest.fixture
def mock_session(mock_response_factory):
    """A fake requests.Session whose get() returns an empty timeline."""
    session = MagicMock()
    session.headers = {}
    session.get.return_value = mock_response_factory(chunks=[EMPTY_TIMELINE_XML])
    return session


@pytest.fixture
def mock_timeline_service():
    """A fake timeline service returning the sample timeline."""
    service = MagicMock()
    service.fetch.return_value = SAMPLE_TIMELINE_XML
    return service


# =============================================================================
# Data Factories
# =============================================================================

@pytest.fixture
def post_factory():
    """
    Factory fixture for TimelinePost objects.

    Usage:
        def test_something(post_factory):
            post = post_factory(message="hello", hour=14)
    """
    def _create(message: str = "Test post", year: int = 2010, month: int = 5,
                day: int = 6, hour: int = 6, minute: int = 20, second: int = 6):
        return TimelinePost(
            timestamp=datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc),
            message=message
        )

    return _create
