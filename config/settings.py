"""
Configuration Settings for Timeline Reader

This module centralizes all configuration settings for the Timeline Reader
application. Every value has a default; a .env file or the environment can
override them.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Determine the application root directory
APP_ROOT = Path(__file__).resolve().parent.parent

# Load environment variables from .env file
load_dotenv(dotenv_path=os.path.join(APP_ROOT, '.env'))


def _get_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _get_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


# Timeline Endpoint Settings
TIMELINE_URL_TEMPLATE = os.getenv(
    "TIMELINE_URL_TEMPLATE",
    "http://twitter.com/statuses/user_timeline/{account}.xml?count={count}"
)
DEFAULT_ACCOUNT = os.getenv("TIMELINE_DEFAULT_ACCOUNT", "jl_2")
DEFAULT_TWEET_COUNT = 10
MAX_TWEET_COUNT = 200

# HTTP Settings
REQUEST_TIMEOUT = _get_float("REQUEST_TIMEOUT", 30.0)          # seconds
MAX_RESPONSE_BYTES = _get_int("MAX_RESPONSE_BYTES", 10 * 1024 * 1024)  # 0 disables the limit
DOWNLOAD_CHUNK_SIZE = 8192
USER_AGENT = os.getenv("USER_AGENT", "TimelineReader/1.0")
REQUEST_HEADERS = {
    'User-Agent': USER_AGENT,
    'Accept': 'application/xml,text/xml;q=0.9,*/*;q=0.8',
}

# Document Settings
STATUS_ROOT_TAG = "statuses"
STATUS_QUERY = "status[text][created_at]"
TEXT_FIELD = "text"
CREATED_AT_FIELD = "created_at"
CREATED_AT_FORMAT = "%a %b %d %H:%M:%S +0000 %Y"   # Thu May 06 06:20:06 +0000 2010

# Output Settings
DISPLAY_DATE_FORMAT = "%m/%d/%Y %I:%M %p"
NO_TWEETS_MESSAGE = "No tweets found."
COUNT_CLAMPED_MESSAGE = "Can only fetch up to {max_count} tweets at a time."
EXTRA_ARGUMENTS_MESSAGE = "Ignoring extra command line arguments!"

# Logging Settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
LOG_FILE = os.getenv("LOG_FILE") or None


def validate_settings():
    """
    Validate that all settings are properly configured.

    Raises:
        ConfigurationError: If settings are invalid.
    """
    from config.validators import validate_settings as _validate
    return _validate()


def get_config_summary() -> dict:
    """
    Returns a summary of the current configuration.
    Useful for logging startup state.
    """
    from config.validators import get_config_summary as _summary
    return _summary()
