"""
Presenters Module

Turns canonical content objects into the flat view models the site renders:
news cards, the landing page activity feed, and sitemap entries.
"""

import math
from datetime import datetime
from typing import Any, Dict, List, Optional

from config import settings
from data.models import Post, UpcomingEvent
from utils.helpers import parse_iso_datetime, resolve_image_path


def format_long_date(value: str) -> str:
    """'2024-03-05T19:00:00Z' -> 'March 5, 2024'. Unparseable values pass through."""
    parsed = parse_iso_datetime(value)
    if parsed is None:
        return value or ''
    return f"{parsed.strftime('%B')} {parsed.day}, {parsed.year}"


def format_event_date(value: str) -> str:
    """'2024-03-05T19:00:00Z' -> 'Tuesday, March 5'. Unparseable values pass through."""
    parsed = parse_iso_datetime(value)
    if parsed is None:
        return value or ''
    return f"{parsed.strftime('%A')}, {parsed.strftime('%B')} {parsed.day}"


def read_time(text: str) -> str:
    """Estimated reading time, e.g. '3 min'."""
    words = len(text.split(' ')) if text else 0
    return f"{math.ceil(words / settings.WORDS_PER_MINUTE)} min"


def _featured_image_path(post: Post) -> str:
    return resolve_image_path(post.featured_image.local_path if post.featured_image else None)


def post_to_card(post: Post) -> Dict[str, Any]:
    """View model for a post in the news-and-events listing."""
    return {
        'id': post.id,
        'title': post.title,
        'date': format_long_date(post.date_created),
        'category': post.categories[0] if post.categories else 'Uncategorized',
        'image': _featured_image_path(post),
        'slug': post.slug,
        'excerpt': post.content.text[:settings.EXCERPT_LENGTH] + '...',
        'readTime': read_time(post.content.text),
    }


def event_to_feed_item(event: UpcomingEvent) -> Dict[str, Any]:
    return {
        'id': event.id,
        'title': event.title,
        'date': format_event_date(event.date),
        'category': event.category,
        'image': resolve_image_path(event.image),
        'slug': event.slug or '',
        'type': 'upcoming',
    }


def post_to_feed_item(post: Post) -> Dict[str, Any]:
    first_category = post.categories[0] if post.categories else None
    return {
        'id': post.id,
        'title': post.title,
        'date': format_long_date(post.date_created),
        'category': first_category or 'Events',
        'image': _featured_image_path(post),
        'slug': post.slug,
        'type': 'news' if first_category == 'News' else 'event',
    }


def build_activity_feed(events: List[UpcomingEvent], posts: List[Post],
                        limit: Optional[int] = None) -> List[Dict[str, Any]]:
    """
    Merge upcoming events and recent posts for the landing page carousel.

    Upcoming events come first, then posts, capped at `limit` items
    (settings.ACTIVITY_FEED_LIMIT by default).
    """
    limit = settings.ACTIVITY_FEED_LIMIT if limit is None else limit
    items = [event_to_feed_item(e) for e in events] + [post_to_feed_item(p) for p in posts]
    return items[:limit]


def build_sitemap(posts: List[Post], events: List[UpcomingEvent],
                  base_url: Optional[str] = None,
                  now: Optional[datetime] = None) -> List[Dict[str, Any]]:
    """
    Build sitemap entries for static routes, posts and upcoming events.

    Returns:
        List of {url, lastModified, changeFrequency, priority} dicts.
    """
    base_url = (base_url or settings.SITE_BASE_URL).rstrip('/')
    stamp = (now or datetime.now()).isoformat()

    entries = [
        {'url': f"{base_url}{path}", 'lastModified': stamp,
         'changeFrequency': frequency, 'priority': priority}
        for path, frequency, priority in settings.STATIC_SITEMAP_PAGES
    ]

    for post in posts:
        entries.append({
            'url': f"{base_url}/news-and-events/{post.slug}",
            'lastModified': post.date_modified or post.date_created,
            'changeFrequency': 'monthly',
            'priority': 0.6,
        })

    for event in events:
        entries.append({
            'url': f"{base_url}/news-and-events/upcoming/{event.route_slug}",
            'lastModified': stamp,
            'changeFrequency': 'weekly',
            'priority': 0.7,
        })

    return entries
