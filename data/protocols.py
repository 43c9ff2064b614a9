"""
Data Layer Protocol Definitions

This module defines typing.Protocol interfaces for data layer operations.
These protocols enable dependency injection for caching and local storage,
making the content façade testable without module-level state.

Protocols defined:
- ContentCache: Interface for memoizing computed content collections
- ContentStore: Interface for reading the local JSON content store
"""

from typing import Any, Optional, Protocol

from data.models import SourceResult


class ContentCache(Protocol):
    """Protocol defining the interface for content caches.

    A slot is always replaced wholesale by `set`, so readers never observe a
    partially written value. Implementations may expire entries (TTL, LRU)
    but must return None for anything they no longer hold.
    """

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value for key, or None if absent or expired."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Store value under key, replacing any previous value."""
        ...

    def clear(self) -> None:
        """Drop every cached value."""
        ...


class ContentStore(Protocol):
    """Protocol defining the interface for the local content store.

    Every loader returns Ok(value) or Err(reason) rather than raising, so the
    caller decides how to degrade.
    """

    def load_posts(self) -> SourceResult:
        """Load published posts as Post objects."""
        ...

    def load_pages(self) -> SourceResult:
        """Load published pages as Page objects."""
        ...

    def load_upcoming_events(self) -> SourceResult:
        """Load every event record from upcoming-events.json."""
        ...

    def load_signatures(self) -> SourceResult:
        """Load every record from signatures.json."""
        ...

    def load_categories(self) -> SourceResult:
        """Load the category list from the metadata directory."""
        ...

    def load_authors(self) -> SourceResult:
        """Load the author list from the metadata directory."""
        ...

    def load_image_manifest(self) -> SourceResult:
        """Load the original-URL to local-path image map."""
        ...
