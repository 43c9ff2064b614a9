"""
Service Protocol Definitions

This module defines typing.Protocol interfaces for the services of the
content layer. These protocols enable loose coupling, dependency injection,
and easier testing.

Protocols defined:
- RemoteSourceProtocol: Interface for normalized reads from the content API
- SubmissionApiProtocol: Interface for the form endpoints of the content API
"""

from typing import Any, Dict, Protocol

from data.models import SourceResult


class RemoteSourceProtocol(Protocol):
    """Protocol defining the interface for remote content reads.

    Implementations return Ok(canonical content) or Err(reason) and never
    raise, so the façade can fall back explicitly.
    """

    def all_posts(self) -> SourceResult:
        """All news posts as Post objects, newest first as served by the API."""
        ...

    def latest_posts(self, count: int) -> SourceResult:
        """The first `count` posts as Post objects."""
        ...

    def post_by_slug(self, slug: str) -> SourceResult:
        """One Post looked up by slug."""
        ...

    def upcoming_events(self) -> SourceResult:
        """Upcoming events as UpcomingEvent objects."""
        ...

    def event_by_slug(self, slug: str) -> SourceResult:
        """One UpcomingEvent looked up by slug."""
        ...

    def upcoming_event_slugs(self) -> SourceResult:
        """Slugs of every upcoming event."""
        ...

    def brands(self) -> SourceResult:
        """Enriched Brand objects."""
        ...

    def showcase_brands(self) -> SourceResult:
        """Minimal {name, description, logoUrl} brand records."""
        ...


class SubmissionApiProtocol(Protocol):
    """Protocol defining the interface for form submissions to the content API.

    Implementations raise a ContentSourceError when the backend rejects or
    cannot receive the submission.
    """

    def submit_contact_form(self, data: Dict[str, str]) -> Any:
        """Deliver a contact message."""
        ...

    def register_for_event(self, event_id: str, data: Dict[str, str]) -> Any:
        """Register a guest for an event."""
        ...
