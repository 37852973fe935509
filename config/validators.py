"""
Configuration Validation for Timeline Reader

This module contains configuration validation logic.
Extracted from settings.py for better separation of concerns.
"""

from urllib.parse import urlparse

from utils.exceptions import ConfigurationError
from utils.logger import get_logger

logger = get_logger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_settings():
    """
    Validate that all settings are properly configured.

    Raises:
        ConfigurationError: If any setting is invalid. All problems are
            reported together.
    """
    # Import settings here to avoid circular imports
    from config import settings

    errors = []

    # The URL template must be an http(s) URL with both placeholders
    template = settings.TIMELINE_URL_TEMPLATE or ""
    for placeholder in ("{account}", "{count}"):
        if placeholder not in template:
            errors.append(f"TIMELINE_URL_TEMPLATE must contain {placeholder}, got {template!r}")

    parsed = urlparse(template)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        errors.append(f"TIMELINE_URL_TEMPLATE must be an http(s) URL, got {template!r}")

    if not settings.DEFAULT_ACCOUNT:
        errors.append("TIMELINE_DEFAULT_ACCOUNT must not be empty")

    # Validate numeric settings are within reasonable bounds
    if not 1 <= settings.DEFAULT_TWEET_COUNT <= settings.MAX_TWEET_COUNT:
        errors.append(
            f"DEFAULT_TWEET_COUNT must be between 1 and {settings.MAX_TWEET_COUNT}, "
            f"got {settings.DEFAULT_TWEET_COUNT}"
        )

    if settings.REQUEST_TIMEOUT <= 0:
        errors.append(f"REQUEST_TIMEOUT must be positive, got {settings.REQUEST_TIMEOUT}")

    if settings.MAX_RESPONSE_BYTES < 0:
        errors.append(f"MAX_RESPONSE_BYTES must be zero or positive, got {settings.MAX_RESPONSE_BYTES}")

    if settings.DOWNLOAD_CHUNK_SIZE <= 0:
        errors.append(f"DOWNLOAD_CHUNK_SIZE must be positive, got {settings.DOWNLOAD_CHUNK_SIZE}")

    if settings.LOG_LEVEL not in VALID_LOG_LEVELS:
        errors.append(f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, got {settings.LOG_LEVEL!r}")

    # Raise all errors at once
    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg)

    logger.debug("Configuration validated")
    return True


def get_config_summary() -> dict:
    """
    Returns a summary of current configuration.
    Useful for logging startup state.
    """
    # Import settings here to avoid circular imports
    from config import settings

    return {
        "timeline": {
            "url_template": settings.TIMELINE_URL_TEMPLATE,
            "default_account": settings.DEFAULT_ACCOUNT,
            "default_count": settings.DEFAULT_TWEET_COUNT,
            "max_count": settings.MAX_TWEET_COUNT,
        },
        "http": {
            "timeout": settings.REQUEST_TIMEOUT,
            "max_response_bytes": settings.MAX_RESPONSE_BYTES,
            "user_agent": settings.USER_AGENT,
        },
        "logging": {
            "level": settings.LOG_LEVEL,
            "file": settings.LOG_FILE,
        },
    }
