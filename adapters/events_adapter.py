"""
Events Adapter

Maps a content API event onto the canonical UpcomingEvent shape. Pure, no I/O.
"""

from typing import Any, Dict

from adapters.news_adapter import api_image_url
from data.models import UpcomingEvent
from utils.helpers import strip_html

# The API has no event category field
API_EVENT_CATEGORY = 'Event'


def api_event_to_upcoming_event(event: Dict[str, Any]) -> UpcomingEvent:
    """
    Convert a content API event into an UpcomingEvent.

    Args:
        event: Raw event record from GET /events or /events/{slug}.

    Returns:
        UpcomingEvent: The normalized event, keeping the raw HTML body for
        the detail page and a tag-free description for cards.
    """
    body = event.get('body') or ''
    return UpcomingEvent(
        id=str(event.get('id', '')),
        title=event.get('title', ''),
        slug=event.get('slug'),
        date=event.get('date', ''),
        category=API_EVENT_CATEGORY,
        description=strip_html(body),
        image=api_image_url(event),
        featured=bool(event.get('isFeatured', False)),
        location=event.get('location'),
        max_visitors=event.get('maxVisitors'),
        body=body,
    )
