"""
Helper Utility Module

This module provides various helper functions used throughout the content layer.
"""

import re
from datetime import datetime, timezone
from typing import Optional, Dict, Any
from urllib.parse import urlparse

_TAG_PATTERN = re.compile(r'<[^>]*>')
_WHITESPACE_PATTERN = re.compile(r'\s+')
_EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')

_HTML_ENTITIES = (
    ('&amp;', '&'),
    ('&lt;', '<'),
    ('&gt;', '>'),
    ('&quot;', '"'),
    ('&#039;', "'"),
    ('&nbsp;', ' '),
)


def is_valid_url(url: str) -> bool:
    """
    Check if a URL is valid.

    Args:
        url: The URL to validate

    Returns:
        bool: True if the URL is valid, False otherwise
    """
    try:
        result = urlparse(url)
        return all([result.scheme, result.netloc])
    except Exception:
        return False


def is_valid_email(email: Optional[str]) -> bool:
    """Check that an email address has the basic local@domain.tld shape."""
    return bool(email) and bool(_EMAIL_PATTERN.match(email))


def strip_html(html: Optional[str]) -> str:
    """
    Remove HTML tags from markup and decode the common entities.

    Tags are dropped, then &amp; &lt; &gt; &quot; &#039; and &nbsp; are
    decoded and runs of whitespace collapse to a single space.

    Args:
        html: The markup to clean

    Returns:
        str: Plain text
    """
    if not html:
        return ''
    text = _TAG_PATTERN.sub('', html)
    for entity, char in _HTML_ENTITIES:
        text = text.replace(entity, char)
    return _WHITESPACE_PATTERN.sub(' ', text).strip()


def resolve_image_path(path: Optional[str]) -> str:
    """
    Turn a stored image reference into a display path.

    Absolute http(s) URLs are returned unchanged, anything else gets
    exactly one leading slash. Resolving a resolved path is a no-op.

    Args:
        path: Image URL or site-relative path, possibly None

    Returns:
        str: Display path, or '' when there is no image
    """
    if not path:
        return ''
    if path.startswith('http://') or path.startswith('https://'):
        return path
    return '/' + path.lstrip('/')


def parse_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp into a timezone-aware datetime.

    A trailing 'Z' is accepted and naive values are taken as UTC.

    Args:
        value: The timestamp string

    Returns:
        Optional[datetime]: The parsed datetime, or None if it cannot be parsed
    """
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace('Z', '+00:00'))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def safe_get(data: Dict[str, Any], *keys, default: Any = None) -> Any:
    """
    Safely get a value from a nested dictionary.

    Args:
        data: The dictionary to search
        *keys: The keys to follow
        default: Default value if key doesn't exist

    Returns:
        The value at the specified keys or the default value
    """
    for key in keys:
        try:
            data = data[key]
        except (KeyError, TypeError, IndexError):
            return default
    return data
