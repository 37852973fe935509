"""
Timeline Reader Application

This is the main entry point for the Timeline Reader application.
It downloads an account's recent posts from the timeline endpoint,
sorts them oldest first and prints one line per post.

Usage:
    python main.py [account] [count]
"""

import sys
import re
import logging
from typing import Optional, List

from config import settings
from data.models import CommandLineArgs
from utils.logger import get_logger, setup_logging
from utils.exceptions import TimelineReaderError, TimelineFetchError, ConfigurationError
from services.protocols import TimelineServiceProtocol
from services.timeline_service import TimelineService, build_timeline_url
from services.status_parser import parse_statuses
from services.post_renderer import sort_posts, render_posts

# Set up logging
logger = get_logger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)


class TimelineReader:
    """
    Main application class for the Timeline Reader.

    This class orchestrates downloading, parsing, sorting
    and printing an account's timeline.
    """

    def __init__(self, timeline_service: Optional[TimelineServiceProtocol] = None,
                 validate: bool = True):
        """
        Initialize the Timeline Reader application.

        Args:
            timeline_service: Service used to download the timeline. A
                TimelineService is created (and later closed) when omitted.
            validate: Validate settings on startup.
        """
        if validate:
            settings.validate_settings()

        self._owns_service = timeline_service is None
        self.timeline_service = timeline_service or TimelineService()

    def __enter__(self) -> "TimelineReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_service:
            self.timeline_service.close()

    def run(self, account: str, count: int) -> bool:
        """
        Run the main workflow of the Timeline Reader application.

        Args:
            account: The account whose timeline is printed.
            count: Number of posts to request.

        Returns:
            bool: True if the timeline was downloaded (even when it held no
                posts), False if the download failed.
        """
        # 1. Build the request URL
        url = build_timeline_url(account, count)

        # 2. Download the timeline
        try:
            raw = self.timeline_service.fetch(url)
        except TimelineFetchError as e:
            logger.error(f"Timeline download failed: {e}")
            return False

        # 3-5. Parse the document and build a post per status entry
        posts = parse_statuses(raw)

        if not posts:
            print(settings.NO_TWEETS_MESSAGE)
            return True

        # 6-7. Sort oldest first and print
        for line in render_posts(sort_posts(posts)):
            print(line)

        logger.info(f"Printed {len(posts)} posts for {account}")
        return True


def parse_count(value: str) -> Optional[int]:
    """
    Read the leading integer of a string, ignoring anything after it.

    Returns:
        Optional[int]: The integer, or None if the string doesn't start with one.
    """
    match = _LEADING_INT.match(value)
    if not match:
        return None
    return int(match.group(1))


def parse_arguments(argv: Optional[List[str]] = None) -> CommandLineArgs:
    """
    Parse the positional [account] [count] command line arguments.

    Notices about clamped counts and extra arguments are printed.

    Args:
        argv: Arguments without the program name, defaults to sys.argv[1:].

    Returns:
        CommandLineArgs: The account and the count to request.
    """
    if argv is None:
        argv = sys.argv[1:]

    account = settings.DEFAULT_ACCOUNT
    count = settings.DEFAULT_TWEET_COUNT

    if len(argv) > 0:
        account = argv[0]

    if len(argv) > 1:
        parsed = parse_count(argv[1])
        if parsed is None:
            logger.warning(f"Invalid count {argv[1]!r}, using {settings.DEFAULT_TWEET_COUNT}")
        elif parsed < 1:
            logger.warning(f"Count must be at least 1, using {settings.DEFAULT_TWEET_COUNT}")
        elif parsed > settings.MAX_TWEET_COUNT:
            print(settings.COUNT_CLAMPED_MESSAGE.format(max_count=settings.MAX_TWEET_COUNT))
            count = settings.MAX_TWEET_COUNT
        else:
            count = parsed

    if len(argv) > 2:
        print(settings.EXTRA_ARGUMENTS_MESSAGE)

    return CommandLineArgs(account=account, count=count)


def configure_logging() -> None:
    """
    Set up logging from the LOG_LEVEL and LOG_FILE settings.

    Raises:
        ConfigurationError: If the level is unknown or the log file can't be opened.
    """
    level = logging.getLevelName(settings.LOG_LEVEL)
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown LOG_LEVEL {settings.LOG_LEVEL!r}")

    try:
        setup_logging(level, settings.LOG_FILE)
    except OSError as e:
        raise ConfigurationError(f"Cannot open LOG_FILE {settings.LOG_FILE!r}: {e}") from e


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    # Set up logging
    try:
        configure_logging()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 2

    args = parse_arguments(argv)
    logger.info(f"Reading {args.count} posts for {args.account}")

    try:
        with TimelineReader() as reader:
            exit_code = 0 if reader.run(args.account, args.count) else 1

    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        exit_code = 2
    except TimelineReaderError as e:
        logger.error(f"Timeline reader error: {e}", exc_info=True)
        exit_code = 2
    except Exception as e:
        logger.error(f"Unhandled exception in Timeline Reader: {e}", exc_info=True)
        exit_code = 2

    logger.info(f"Timeline Reader finished with exit code {exit_code}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
