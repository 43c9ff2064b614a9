"""
Remote Content Source Module

Wraps the content API client and the normalization adapters. Every method
returns Ok(canonical content) or Err(reason): exceptions from the transport,
the envelope or a malformed record stop here.
"""

from typing import Callable

from adapters.brands_adapter import api_brand_to_local_brand, api_cigar_brand_to_api_brand
from adapters.events_adapter import api_event_to_upcoming_event
from adapters.news_adapter import api_news_to_post
from data.models import Err, Ok, SourceResult
from services.api_client import ContentApiClient
from utils.exceptions import ContentSourceError
from utils.logger import get_logger

logger = get_logger(__name__)


class RemoteContentSource:
    """Content API reads, normalized to canonical shapes."""

    def __init__(self, api_client: ContentApiClient):
        self.api_client = api_client

    def _attempt(self, description: str, read: Callable[[], object]) -> SourceResult:
        try:
            return Ok(read())
        except ContentSourceError as e:
            return Err(f"API error fetching {description}: {e}", e)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            # A record the adapters cannot read
            return Err(f"Malformed API data for {description}: {e!r}", e)

    def all_posts(self) -> SourceResult:
        return self._attempt(
            "all posts",
            lambda: [api_news_to_post(a) for a in self.api_client.fetch_all_news().items],
        )

    def latest_posts(self, count: int) -> SourceResult:
        return self._attempt(
            "latest posts",
            lambda: [api_news_to_post(a) for a in self.api_client.fetch_latest_news(count).items],
        )

    def post_by_slug(self, slug: str) -> SourceResult:
        return self._attempt(
            f'post "{slug}"',
            lambda: api_news_to_post(self.api_client.fetch_news_by_slug(slug)),
        )

    def upcoming_events(self) -> SourceResult:
        return self._attempt(
            "upcoming events",
            lambda: [api_event_to_upcoming_event(e) for e in self.api_client.fetch_upcoming_events().items],
        )

    def event_by_slug(self, slug: str) -> SourceResult:
        return self._attempt(
            f'event "{slug}"',
            lambda: api_event_to_upcoming_event(self.api_client.fetch_event_by_slug(slug)),
        )

    def upcoming_event_slugs(self) -> SourceResult:
        return self._attempt(
            "event slugs",
            lambda: [e['slug'] for e in self.api_client.fetch_upcoming_events().items],
        )

    def brands(self) -> SourceResult:
        """Cigar brands in API order, reduced to {name, description, logoUrl} and enriched."""
        return self._attempt(
            "cigar brands",
            lambda: [
                api_brand_to_local_brand(api_cigar_brand_to_api_brand(b))
                for b in self.api_client.fetch_cigar_brands().items
            ],
        )

    def showcase_brands(self) -> SourceResult:
        """Minimal {name, description, logoUrl} brand records in API order."""
        return self._attempt(
            "showcase brands",
            lambda: [api_cigar_brand_to_api_brand(b) for b in self.api_client.fetch_cigar_brands().items],
        )
