"""
Configuration Settings for the Club Mareva Content Layer

This module centralizes all configuration settings for the content layer,
including environment variables, the content API location and the
application constants used when shaping content for the site.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

from data.models import ContentSourceMode

# Determine the application root directory
APP_ROOT = Path(__file__).resolve().parent.parent

# Load environment variables from .env file
load_dotenv(dotenv_path=os.path.join(APP_ROOT, '.env'))


def _env_flag(name: str, default: str = "false") -> bool:
    """Read a boolean flag from the environment. Only 'true' enables it."""
    return os.getenv(name, default).strip().lower() == "true"


def _env_number(name: str, default, cast=int):
    """Read a number from the environment, keeping the default when unparseable."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        return default


# =============================================================================
# Content Source Settings
# =============================================================================

# Remote-first with filesystem fallback when true, filesystem only otherwise
USE_API = _env_flag("USE_API")
CONTENT_SOURCE_MODE = ContentSourceMode.REMOTE if USE_API else ContentSourceMode.FILESYSTEM

# Content API
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3000/api/v1")
API_TIMEOUT = _env_number("API_TIMEOUT", 10, float)      # Seconds before a request is abandoned

# Local JSON content store
CONTENT_DATA_DIR = Path(os.getenv("CONTENT_DATA_DIR", str(APP_ROOT / "content")))

# =============================================================================
# API Request Settings
# =============================================================================

# Freshness windows for cached API responses
NEWS_REVALIDATE_SECONDS = 300        # 5 minutes
EVENTS_REVALIDATE_SECONDS = 300      # 5 minutes
BRANDS_REVALIDATE_SECONDS = 3600     # 1 hour - brands change rarely

# Page sizes requested from the API
NEWS_PAGE_LIMIT = 200
EVENTS_PAGE_LIMIT = 100
BRANDS_PAGE_LIMIT = 100

REQUEST_HEADERS = {
    'Content-Type': 'application/json',
    'Accept': 'application/json',
}

# =============================================================================
# Presentation Settings
# =============================================================================

SITE_BASE_URL = os.getenv("SITE_BASE_URL", "https://clubmarevabeirut.com")

LATEST_POSTS_HOMEPAGE = 6            # Posts shown on the landing page
ACTIVITY_FEED_LIMIT = 8              # Upcoming events + posts in the landing feed
EXCERPT_LENGTH = 150                 # Characters of text in a post card excerpt
WORDS_PER_MINUTE = 200               # Reading speed for read-time estimates

# Author stamped on posts that come from the API, which carries none
DEFAULT_AUTHOR = {'id': 0, 'name': 'Club Mareva Beirut', 'login': 'admin'}

# Static routes listed in the sitemap: (path, change frequency, priority)
STATIC_SITEMAP_PAGES = [
    ("", "weekly", 1.0),
    ("/cigars", "monthly", 0.8),
    ("/our-signature", "monthly", 0.8),
    ("/news-and-events", "daily", 0.9),
    ("/contact", "monthly", 0.7),
]

# =============================================================================
# Form Validation Settings
# =============================================================================

MIN_NAME_LENGTH = 2
MIN_MESSAGE_LENGTH = 10
MIN_PHONE_LENGTH = 6


def validate_settings(mode=None, data_dir=None):
    """Validate the current settings. See config.validators.validate_settings."""
    from config.validators import validate_settings as _validate
    return _validate(mode=mode, data_dir=data_dir)
