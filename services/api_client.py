"""
Content API Client Module

This module talks to the remote content API. Every response is wrapped in
an envelope of the form {"success": bool, "data": ..., "error": {...}};
the client unwraps it and turns every failure into a ContentSourceError.
"""

from typing import Any, Dict, Optional
from urllib.parse import quote, urlencode

import requests

from config import settings
from data.cache import TTLContentCache
from data.models import PaginatedResponse
from utils.exceptions import ApiError, ApiTransportError
from utils.logger import get_logger

logger = get_logger(__name__)


class ContentApiClient:
    """HTTP client for the content API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        response_cache: Optional[TTLContentCache] = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: API root, e.g. https://example.com/api/v1. Defaults to settings.API_BASE_URL.
            timeout: Seconds before a request is abandoned. Defaults to settings.API_TIMEOUT.
            response_cache: Optional cache for GET responses that carry a revalidate window.
        """
        self.base_url = (base_url or settings.API_BASE_URL).rstrip('/')
        self.timeout = timeout if timeout is not None else settings.API_TIMEOUT
        self.response_cache = response_cache

    # =========================================================================
    # Transport
    # =========================================================================

    def _build_url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    @staticmethod
    def _encode_params(params: Optional[Dict[str, Any]]) -> Dict[str, str]:
        """Drop None values and render booleans the way the API expects them."""
        encoded = {}
        for key, value in (params or {}).items():
            if value is None:
                continue
            if isinstance(value, bool):
                encoded[key] = 'true' if value else 'false'
            else:
                encoded[key] = str(value)
        return encoded

    @staticmethod
    def _error_payload(response: requests.Response) -> Optional[Any]:
        """Return the `error` member of a failed response body, if it has one."""
        try:
            body = response.json()
        except ValueError:
            return None
        return body.get('error') if isinstance(body, dict) else None

    def _read_envelope(self, response: requests.Response, url: str) -> Dict[str, Any]:
        if not 200 <= response.status_code < 300:
            raise ApiError(response.status_code, response.reason or '', self._error_payload(response))

        try:
            envelope = response.json()
        except ValueError as e:
            raise ApiTransportError(f"Malformed JSON from {url}: {e}") from e

        if not isinstance(envelope, dict) or 'success' not in envelope:
            raise ApiTransportError(f"Response from {url} is not an API envelope")
        return envelope

    def get(self, path: str, params: Optional[Dict[str, Any]] = None,
            revalidate: Optional[float] = None) -> Any:
        """
        Issue a GET request and return the envelope's data.

        Args:
            path: Endpoint path relative to the base URL.
            params: Query parameters. None values are dropped.
            revalidate: Seconds a successful response may be served from cache.

        Returns:
            The `data` member of the envelope.

        Raises:
            ApiError: On a non-2xx status or an envelope with success: false.
            ApiTransportError: On timeout, connection failure or malformed JSON.
        """
        url = self._build_url(path)
        query = self._encode_params(params)
        cache_key = f"{url}?{urlencode(sorted(query.items()))}"

        if revalidate and self.response_cache is not None:
            cached = self.response_cache.get(cache_key)
            if cached is not None:
                logger.debug(f"Serving cached response for {cache_key}")
                return cached

        try:
            response = requests.get(url, params=query, headers=settings.REQUEST_HEADERS,
                                    timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise ApiTransportError(f"GET {url} failed: {e}") from e

        envelope = self._read_envelope(response, url)
        if not envelope.get('success'):
            raise ApiError(400, 'API returned success: false', envelope.get('error'))

        data = envelope.get('data')
        if revalidate and self.response_cache is not None:
            self.response_cache.set(cache_key, data, ttl_seconds=revalidate)
        return data

    def post(self, path: str, body: Dict[str, Any]) -> Any:
        """
        Issue a POST request with a flat JSON body and return the envelope's data.

        Raises:
            ApiError: On a non-2xx status.
            ApiTransportError: On timeout, connection failure or malformed JSON.
        """
        url = self._build_url(path)
        try:
            response = requests.post(url, json=body, headers=settings.REQUEST_HEADERS,
                                     timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise ApiTransportError(f"POST {url} failed: {e}") from e

        return self._read_envelope(response, url).get('data')

    def _get_page(self, path: str, params: Dict[str, Any], revalidate: float) -> PaginatedResponse:
        data = self.get(path, params=params, revalidate=revalidate)
        if not isinstance(data, dict):
            raise ApiTransportError(f"Expected a paginated collection from {path}")
        try:
            return PaginatedResponse.from_dict(data)
        except ValueError as e:
            raise ApiTransportError(f"Malformed paginated collection from {path}: {e}") from e

    def _get_record(self, path: str, revalidate: float) -> Dict[str, Any]:
        data = self.get(path, revalidate=revalidate)
        if not isinstance(data, dict):
            raise ApiTransportError(f"Expected a single record from {path}")
        return data

    # =========================================================================
    # News
    # =========================================================================

    def fetch_all_news(self, page: int = 1, limit: Optional[int] = None) -> PaginatedResponse:
        return self._get_page('/news', {'page': page, 'limit': limit or settings.NEWS_PAGE_LIMIT},
                              settings.NEWS_REVALIDATE_SECONDS)

    def fetch_latest_news(self, limit: int = 6) -> PaginatedResponse:
        return self._get_page('/news', {'page': 1, 'limit': limit}, settings.NEWS_REVALIDATE_SECONDS)

    def fetch_news_by_slug(self, slug: str) -> Dict[str, Any]:
        return self._get_record(f"/news/{quote(slug, safe='')}", settings.NEWS_REVALIDATE_SECONDS)

    # =========================================================================
    # Events
    # =========================================================================

    def fetch_all_events(self, page: int = 1, limit: Optional[int] = None) -> PaginatedResponse:
        return self._get_page('/events', {'page': page, 'limit': limit or settings.EVENTS_PAGE_LIMIT},
                              settings.EVENTS_REVALIDATE_SECONDS)

    def fetch_upcoming_events(self, limit: Optional[int] = None) -> PaginatedResponse:
        return self._get_page(
            '/events',
            {'upcoming': True, 'page': 1, 'limit': limit or settings.EVENTS_PAGE_LIMIT},
            settings.EVENTS_REVALIDATE_SECONDS,
        )

    def fetch_event_by_slug(self, slug: str) -> Dict[str, Any]:
        return self._get_record(f"/events/{quote(slug, safe='')}", settings.EVENTS_REVALIDATE_SECONDS)

    def register_for_event(self, event_id: str, data: Dict[str, str]) -> Any:
        """POST a registration ({name, email, phone}) for an event."""
        return self.post(f"/events/{quote(str(event_id), safe='')}/register", data)

    # =========================================================================
    # Cigar Brands
    # =========================================================================

    def fetch_cigar_brands(self, limit: Optional[int] = None) -> PaginatedResponse:
        return self._get_page('/cigar-brands', {'page': 1, 'limit': limit or settings.BRANDS_PAGE_LIMIT},
                              settings.BRANDS_REVALIDATE_SECONDS)

    def fetch_cigar_brand_by_id(self, brand_id: str) -> Dict[str, Any]:
        return self._get_record(f"/cigar-brands/{quote(str(brand_id), safe='')}",
                                settings.BRANDS_REVALIDATE_SECONDS)

    # =========================================================================
    # Contact
    # =========================================================================

    def submit_contact_form(self, data: Dict[str, str]) -> Any:
        """POST a contact submission ({firstName, lastName, email, message})."""
        return self.post('/contact-submissions', data)
