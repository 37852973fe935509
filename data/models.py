"""
Data Models for Timeline Reader

This module contains data classes and models used throughout the application.
"""

from dataclasses import dataclass
from datetime import datetime, timezone

# Timestamp given to posts whose created_at value could not be parsed
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class TimelinePost:
    """A single post read from a timeline document."""
    timestamp: datetime                # Aware datetime in UTC, EPOCH when unparsable
    message: str                       # Post text, copied verbatim

    @property
    def has_valid_timestamp(self) -> bool:
        return self.timestamp != EPOCH


@dataclass(frozen=True)
class CommandLineArgs:
    """Values read from the command line."""
    account: str
    count: int
