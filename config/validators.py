"""
Configuration Validation for the Club Mareva Content Layer

This module contains configuration validation logic.
Extracted from settings.py for better separation of concerns.
"""

from pathlib import Path

from utils.exceptions import ConfigurationError
from utils.helpers import is_valid_url
from utils.logger import get_logger


def validate_settings(mode=None, data_dir=None):
    """
    Validate that all required settings are properly configured.

    Args:
        mode: The ContentSourceMode actually used, when overridden.
        data_dir: The content directory actually used, when overridden.

    Raises:
        ConfigurationError: If required settings are missing or invalid.
    """
    # Import settings here to avoid circular imports
    from config import settings
    from data.models import ContentSourceMode

    logger = get_logger(__name__)
    errors = []

    mode = mode or settings.CONTENT_SOURCE_MODE
    data_dir = Path(data_dir) if data_dir else settings.CONTENT_DATA_DIR

    # The API base URL is only required when the API is actually used
    if mode is ContentSourceMode.REMOTE and not is_valid_url(settings.API_BASE_URL):
        errors.append(f"API_BASE_URL is not a valid absolute URL: {settings.API_BASE_URL!r}")

    if not is_valid_url(settings.SITE_BASE_URL):
        errors.append(f"SITE_BASE_URL is not a valid absolute URL: {settings.SITE_BASE_URL!r}")

    # The filesystem store is the fallback in both modes, but a site can run without it
    if not data_dir.is_dir():
        logger.warning(f"Content data directory not found: {data_dir}. "
                       "Filesystem content will be empty.")

    # Validate numeric settings are within reasonable bounds
    numeric_validations = [
        ("NEWS_PAGE_LIMIT", settings.NEWS_PAGE_LIMIT, 1, 1000),
        ("EVENTS_PAGE_LIMIT", settings.EVENTS_PAGE_LIMIT, 1, 1000),
        ("BRANDS_PAGE_LIMIT", settings.BRANDS_PAGE_LIMIT, 1, 1000),
        ("LATEST_POSTS_HOMEPAGE", settings.LATEST_POSTS_HOMEPAGE, 1, 100),
        ("ACTIVITY_FEED_LIMIT", settings.ACTIVITY_FEED_LIMIT, 1, 100),
        ("EXCERPT_LENGTH", settings.EXCERPT_LENGTH, 1, 2000),
        ("WORDS_PER_MINUTE", settings.WORDS_PER_MINUTE, 1, 2000),
    ]

    for name, value, min_val, max_val in numeric_validations:
        if value < min_val or value > max_val:
            errors.append(f"{name} must be between {min_val} and {max_val}, got {value}")

    # Validate timeout and freshness values are positive
    positive_settings = [
        ("API_TIMEOUT", settings.API_TIMEOUT),
        ("NEWS_REVALIDATE_SECONDS", settings.NEWS_REVALIDATE_SECONDS),
        ("EVENTS_REVALIDATE_SECONDS", settings.EVENTS_REVALIDATE_SECONDS),
        ("BRANDS_REVALIDATE_SECONDS", settings.BRANDS_REVALIDATE_SECONDS),
    ]

    for name, value in positive_settings:
        if value <= 0:
            errors.append(f"{name} must be positive, got {value}")

    # Raise all errors at once
    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg)

    return True


def get_config_summary() -> dict:
    """
    Returns a summary of current configuration (without sensitive values).
    Useful for logging startup state.
    """
    # Import settings here to avoid circular imports
    from config import settings

    return {
        "source": {
            "mode": settings.CONTENT_SOURCE_MODE.value,
            "api_base_url": settings.API_BASE_URL,
            "api_timeout": settings.API_TIMEOUT,
            "data_dir": str(settings.CONTENT_DATA_DIR),
        },
        "revalidate": {
            "news": settings.NEWS_REVALIDATE_SECONDS,
            "events": settings.EVENTS_REVALIDATE_SECONDS,
            "brands": settings.BRANDS_REVALIDATE_SECONDS,
        },
        "site": {
            "base_url": settings.SITE_BASE_URL,
            "activity_feed_limit": settings.ACTIVITY_FEED_LIMIT,
        },
    }
