"""
Content Service Module

This module is the single entry point the site uses to read content. For
each query it picks the source according to the injected mode, falls back
from the content API to the local JSON store when the API fails, memoizes
filesystem reads, and always hands back canonical content objects.

No method raises. When both sources fail, list queries return [] and
single-item queries return None.
"""

from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from config import settings
from adapters.brands_adapter import api_brand_to_showcase_brand
from data.cache import InMemoryContentCache, TTLContentCache
from data.filesystem_store import FilesystemContentStore
from data.models import (
    Author, Brand, Category, ContentSourceMode, Err, Ok, Page, Post,
    SignatureItem, SourceResult, UpcomingEvent
)
from data.protocols import ContentCache, ContentStore
from services.api_client import ContentApiClient
from services.protocols import RemoteSourceProtocol
from services.remote_source import RemoteContentSource
from utils.helpers import parse_iso_datetime
from utils.logger import get_logger

logger = get_logger(__name__)

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)

# Cache slots
POSTS_KEY = "posts"
PAGES_KEY = "pages"
EVENTS_KEY = "upcoming_events"
SIGNATURES_KEY = "signatures"
CATEGORIES_KEY = "categories"
AUTHORS_KEY = "authors"
IMAGE_MANIFEST_KEY = "image_manifest"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ContentService:
    """Façade over the content API and the local JSON content store."""

    def __init__(
        self,
        mode: ContentSourceMode,
        remote: Optional[RemoteSourceProtocol] = None,
        store: Optional[ContentStore] = None,
        cache: Optional[ContentCache] = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        """
        Initialize the content service.

        Args:
            mode: REMOTE tries the API first, FILESYSTEM never touches it.
            remote: Normalized content API reads. Required for REMOTE mode.
            store: Local JSON content store.
            cache: Memoization for filesystem reads. Defaults to a process-lifetime cache.
            clock: Returns the current aware datetime; decides which events are upcoming.
        """
        if mode is ContentSourceMode.REMOTE and remote is None:
            raise ValueError("REMOTE mode requires a remote content source")
        self.mode = mode
        self.remote = remote
        self.store = store
        self.cache = cache if cache is not None else InMemoryContentCache()
        self._clock = clock

    @property
    def uses_api(self) -> bool:
        return self.mode is ContentSourceMode.REMOTE

    # =========================================================================
    # Source selection
    # =========================================================================

    def _try_remote(self, read: Callable[[RemoteSourceProtocol], SourceResult],
                    description: str) -> SourceResult:
        """Run a remote read in REMOTE mode; log failures so the caller can fall back."""
        if not self.uses_api:
            return Err("filesystem mode")
        result = read(self.remote)
        if not result.ok:
            logger.error(f"API error fetching {description}, falling back to filesystem: {result.reason}")
        return result

    def _memoized(self, key: str, load: Callable[[ContentStore], SourceResult],
                  prepare: Optional[Callable[[Any], Any]] = None) -> SourceResult:
        """Serve a filesystem collection from the cache, loading and caching it on a miss."""
        cached = self.cache.get(key)
        if cached is not None:
            return Ok(cached)
        if self.store is None:
            return Err("no filesystem store configured")

        result = load(self.store)
        if not result.ok:
            return result

        value = prepare(result.value) if prepare else result.value
        self.cache.set(key, value)
        return Ok(value)

    @staticmethod
    def _unwrap_list(result: SourceResult, description: str) -> list:
        """A fresh list of the result, so callers never hold the cached one."""
        if result.ok:
            return list(result.value)
        logger.error(f"Error loading {description} from filesystem: {result.reason}")
        return []

    # =========================================================================
    # Posts
    # =========================================================================

    @staticmethod
    def _sort_newest_first(posts: List[Post]) -> List[Post]:
        return sorted(posts, key=lambda p: parse_iso_datetime(p.date_created) or _OLDEST, reverse=True)

    def _filesystem_posts(self) -> SourceResult:
        return self._memoized(POSTS_KEY, lambda store: store.load_posts(), self._sort_newest_first)

    def get_all_posts(self) -> List[Post]:
        """All published posts, newest first."""
        remote = self._try_remote(lambda r: r.all_posts(), "all posts")
        if remote.ok:
            return list(remote.value)
        return self._unwrap_list(self._filesystem_posts(), "posts")

    def get_post_by_slug(self, slug: str) -> Optional[Post]:
        remote = self._try_remote(lambda r: r.post_by_slug(slug), f'post "{slug}"')
        if remote.ok:
            return remote.value
        posts = self._unwrap_list(self._filesystem_posts(), "posts")
        return next((p for p in posts if p.slug == slug), None)

    def get_latest_posts(self, count: int) -> List[Post]:
        """The `count` newest posts. In REMOTE mode the API is asked for just that page."""
        if count <= 0:
            return []
        remote = self._try_remote(lambda r: r.latest_posts(count), "latest posts")
        if remote.ok:
            return remote.value[:count]
        return self._unwrap_list(self._filesystem_posts(), "posts")[:count]

    def get_posts_by_category(self, category: str) -> List[Post]:
        """Posts tagged with `category`, compared case-insensitively."""
        wanted = category.lower()
        return [
            p for p in self.get_all_posts()
            if any(cat.lower() == wanted for cat in p.categories)
        ]

    # =========================================================================
    # Events
    # =========================================================================

    def _only_upcoming(self, events: List[UpcomingEvent]) -> List[UpcomingEvent]:
        """Events strictly after now, soonest first. Undated events are dropped."""
        now = self._clock()
        dated = []
        for event in events:
            when = parse_iso_datetime(event.date)
            if when is not None and when > now:
                dated.append((when, event))
        dated.sort(key=lambda pair: pair[0])
        return [event for _, event in dated]

    def _filesystem_events(self) -> SourceResult:
        # The full list is cached; the future-only filter runs on every call
        cached = self._memoized(EVENTS_KEY, lambda store: store.load_upcoming_events())
        if not cached.ok:
            return cached
        return Ok(self._only_upcoming(cached.value))

    def get_upcoming_events(self) -> List[UpcomingEvent]:
        """Events dated strictly in the future, soonest first."""
        remote = self._try_remote(lambda r: r.upcoming_events(), "upcoming events")
        if remote.ok:
            return self._only_upcoming(remote.value)
        return self._unwrap_list(self._filesystem_events(), "upcoming events")

    def get_upcoming_event_by_slug(self, slug: str) -> Optional[UpcomingEvent]:
        """Look an event up by slug. On the filesystem an event without a slug matches by id."""
        remote = self._try_remote(lambda r: r.event_by_slug(slug), f'event "{slug}"')
        if remote.ok:
            return remote.value
        events = self._unwrap_list(self._filesystem_events(), "upcoming events")
        return next((e for e in events if e.slug == slug or e.id == slug), None)

    def get_all_upcoming_event_slugs(self) -> List[str]:
        """Routing keys of every upcoming event: the slug, or the id when there is none."""
        remote = self._try_remote(lambda r: r.upcoming_event_slugs(), "event slugs")
        if remote.ok:
            return list(remote.value)
        events = self._unwrap_list(self._filesystem_events(), "upcoming events")
        return [e.route_slug for e in events]

    # =========================================================================
    # Pages (filesystem only)
    # =========================================================================

    def get_all_pages(self) -> List[Page]:
        return self._unwrap_list(self._memoized(PAGES_KEY, lambda store: store.load_pages()), "pages")

    def get_page_by_slug(self, slug: str) -> Optional[Page]:
        return next((p for p in self.get_all_pages() if p.slug == slug), None)

    # =========================================================================
    # Images
    # =========================================================================

    def get_image_path(self, original_url: str) -> str:
        """
        Map an original image URL to the path the site serves it from.

        The API already serves CDN URLs, so REMOTE mode returns the URL as
        is. On the filesystem the image manifest maps remote URLs to local
        files.
        """
        if self.uses_api:
            return original_url
        result = self._memoized(IMAGE_MANIFEST_KEY, lambda store: store.load_image_manifest())
        manifest: Dict[str, str] = result.value if result.ok else {}
        local_path = manifest.get(original_url)
        if local_path:
            return f"/{local_path.lstrip('/')}"
        return original_url

    # =========================================================================
    # Metadata and Signatures (filesystem only)
    # =========================================================================

    def get_categories(self) -> List[Category]:
        return self._unwrap_list(
            self._memoized(CATEGORIES_KEY, lambda store: store.load_categories()), "categories")

    def get_authors(self) -> List[Author]:
        return self._unwrap_list(
            self._memoized(AUTHORS_KEY, lambda store: store.load_authors()), "authors")

    def get_signatures(self) -> List[SignatureItem]:
        """Signature items in ascending display order."""
        result = self._memoized(
            SIGNATURES_KEY,
            lambda store: store.load_signatures(),
            lambda items: sorted(items, key=lambda s: s.order),
        )
        return self._unwrap_list(result, "signatures")

    # =========================================================================
    # Brands (API only)
    # =========================================================================

    def get_brands(self) -> List[Brand]:
        """Enriched cigar brands. Empty in FILESYSTEM mode or when the API is unavailable."""
        if not self.uses_api:
            return []
        result = self.remote.brands()
        if not result.ok:
            logger.error(f"Error fetching cigar brands: {result.reason}")
            return []
        return list(result.value)

    def get_brand_showcase(self) -> List[Dict[str, str]]:
        """{name, logo} pairs for the landing page brand strip."""
        if not self.uses_api:
            return []
        result = self.remote.showcase_brands()
        if not result.ok:
            logger.error(f"Error fetching brands for showcase: {result.reason}")
            return []
        return [api_brand_to_showcase_brand(b) for b in result.value]

    # =========================================================================
    # Cache management
    # =========================================================================

    def clear_cache(self) -> None:
        """Forget every memoized filesystem read."""
        self.cache.clear()
        logger.info("Content cache cleared")


def create_content_service(
    mode: Optional[ContentSourceMode] = None,
    data_dir: Optional[str] = None,
    api_base_url: Optional[str] = None,
) -> ContentService:
    """
    Build a ContentService wired from settings.

    Args:
        mode: Overrides settings.CONTENT_SOURCE_MODE.
        data_dir: Overrides settings.CONTENT_DATA_DIR.
        api_base_url: Overrides settings.API_BASE_URL.

    Returns:
        ContentService: Ready to use.
    """
    mode = mode or settings.CONTENT_SOURCE_MODE
    store = FilesystemContentStore(data_dir or settings.CONTENT_DATA_DIR)

    remote = None
    if mode is ContentSourceMode.REMOTE:
        api_client = ContentApiClient(
            base_url=api_base_url,
            timeout=settings.API_TIMEOUT,
            response_cache=TTLContentCache(ttl_seconds=settings.NEWS_REVALIDATE_SECONDS),
        )
        remote = RemoteContentSource(api_client)

    logger.debug(f"Content service created in {mode.value} mode")
    return ContentService(mode=mode, remote=remote, store=store)
