"""
Shared Test Fixtures for the Club Mareva Content Layer

This module provides common fixtures used across all test modules.
Fixtures include a temporary content store, mocks for HTTP responses and
logging, a fixed clock, and data factories for raw content API records.
"""

import json
import pytest
from unittest.mock import MagicMock, patch
from datetime import datetime, timezone
from typing import Optional, Dict, Any, List
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from data.models import Err


# Every test that cares about "now" uses this instant
FIXED_NOW = datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


# =============================================================================
# Clock Fixtures
# =============================================================================

@pytest.fixture
def fixed_clock():
    """
    A clock pinned to FIXED_NOW, for deciding which events are upcoming.

    Returns:
        callable: Zero-argument function returning FIXED_NOW.
    """
    return lambda: FIXED_NOW


# =============================================================================
# Logging Fixtures
# =============================================================================

@pytest.fixture
def capture_logs():
    """
    Capture log messages for assertion in tests.

    Captures actual log records from the root logger, which every
    application logger propagates to.

    Returns:
        list: A list that will contain captured log records.
    """
    import logging

    class LogCapture(logging.Handler):
        def __init__(self):
            super().__init__()
            self.records = []

        def emit(self, record):
            self.records.append(record)

    handler = LogCapture()
    handler.setLevel(logging.DEBUG)

    root_logger = logging.getLogger()
    original_level = root_logger.level
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(handler)

    yield handler.records

    root_logger.removeHandler(handler)
    root_logger.setLevel(original_level)


# =============================================================================
# HTTP Response Fixtures
# =============================================================================

@pytest.fixture
def mock_http_response():
    """
    Factory fixture for creating mock HTTP responses.

    Usage:
        def test_http_request(mock_http_response):
            response = mock_http_response(
                status_code=200,
                json_data={'success': True, 'data': {...}},
            )

    Returns:
        callable: A factory function for creating mock responses.
    """
    def _create_response(
        status_code: int = 200,
        json_data: Optional[Any] = None,
        reason: str = 'OK',
        text: str = '',
        url: str = 'http://api.test/api/v1'
    ) -> MagicMock:
        """
        Create a mock HTTP response object.

        Args:
            status_code: HTTP status code (default 200).
            json_data: Value to return from response.json(). None makes json() raise.
            reason: HTTP reason phrase.
            text: Text content (generated from json_data if not provided).
            url: The URL of the response.

        Returns:
            MagicMock: A mock response object mimicking requests.Response.
        """
        mock_response = MagicMock()
        mock_response.status_code = status_code
        mock_response.reason = reason
        mock_response.url = url
        mock_response.ok = 200 <= status_code < 300

        if text:
            mock_response.text = text
        elif json_data is not None:
            mock_response.text = json.dumps(json_data)
        else:
            mock_response.text = ''

        if json_data is not None:
            mock_response.json.return_value = json_data
        else:
            mock_response.json.side_effect = ValueError("No JSON data")

        return mock_response

    return _create_response


@pytest.fixture
def mock_requests(mock_http_response):
    """
    Mock the requests library for HTTP testing.

    Usage:
        def test_api_call(mock_requests):
            mock_requests.get.return_value = mock_requests.response(
                json_data={'success': True, 'data': {}}
            )

    Returns:
        MagicMock: A mock requests module with response factory attached.
    """
    with patch('requests.get') as mock_get, \
         patch('requests.post') as mock_post:

        mock_req = MagicMock()
        mock_req.get = mock_get
        mock_req.post = mock_post
        mock_req.response = mock_http_response

        yield mock_req


# =============================================================================
# Raw API Record Factories
# =============================================================================

@pytest.fixture
def api_article_factory():
    """
    Factory fixture for raw /news records.

    Returns:
        callable: Builds an article dict; keyword arguments override fields.
    """
    def _create_article(**overrides) -> Dict[str, Any]:
        article = {
            'id': '12',
            'title': 'Cohiba Night',
            'slug': 'cohiba-night',
            'date': '2025-05-20T19:00:00Z',
            'body': '<p>An evening of <strong>Cohiba</strong> &amp; rum.</p>',
            'isFeatured': False,
            'createdAt': '2025-05-18T10:00:00Z',
            'updatedAt': '2025-05-19T10:00:00Z',
        }
        article.update(overrides)
        return article

    return _create_article


@pytest.fixture
def api_event_factory():
    """
    Factory fixture for raw /events records.

    Returns:
        callable: Builds an event dict; keyword arguments override fields.
    """
    def _create_event(**overrides) -> Dict[str, Any]:
        event = {
            'id': 'evt-1',
            'title': 'Whisky Pairing',
            'slug': 'whisky-pairing',
            'date': '2025-07-10T20:00:00Z',
            'location': 'Club Mareva, Beirut',
            'body': '<p>Six drams, <em>three</em> cigars.</p>',
            'isFeatured': True,
            'maxVisitors': 24,
        }
        event.update(overrides)
        return event

    return _create_event


@pytest.fixture
def api_cigar_brand_factory():
    """
    Factory fixture for raw /cigar-brands records.

    Returns:
        callable: Builds a brand dict; keyword arguments override fields.
    """
    def _create_brand(**overrides) -> Dict[str, Any]:
        brand = {
            'id': 'b-1',
            'title': 'Davidoff',
            'description': 'Swiss refinement, Dominican tobacco.',
            'logo': {'url': 'https://cdn.test/davidoff.png', 'alt': 'Davidoff'},
            'isFeatured': True,
            'displayOrder': 1,
        }
        brand.update(overrides)
        return brand

    return _create_brand


# =============================================================================
# File System Fixtures
# =============================================================================

def make_post_record(post_id: int, slug: str, date_created: str, status: str = 'publish',
                     categories: Optional[List[str]] = None, **overrides) -> Dict[str, Any]:
    """Build a post record as stored in posts/*.json."""
    record = {
        'id': post_id,
        'title': slug.replace('-', ' ').title(),
        'slug': slug,
        'status': status,
        'date_created': date_created,
        'date_modified': date_created,
        'author': {'id': 1, 'name': 'Editor', 'login': 'editor'},
        'categories': categories if categories is not None else ['News'],
        'content': {
            'raw': f'<p>{slug}</p>',
            'clean': f'<p>{slug}</p>',
            'text': f'Text of {slug}',
        },
        'featured_image': {
            'original_url': f'https://old.test/{slug}.jpg',
            'local_path': f'images/{slug}.jpg',
            'alt_text': slug,
        },
        'images': [],
    }
    record.update(overrides)
    return record


@pytest.fixture
def post_record_factory():
    """
    Factory fixture for post records as stored in posts/*.json.

    Returns:
        callable: make_post_record.
    """
    return make_post_record


@pytest.fixture
def content_dir(tmp_path):
    """
    Create a populated local content store.

    Contents:
        posts: three published (Jan, Mar, Feb 2025) and one draft
        pages: one published, one draft
        upcoming-events.json: one past, two future (out of order), one undated
        signatures.json: two items out of order
        metadata: categories, authors, image manifest

    Returns:
        pathlib.Path: The content directory.
    """
    data_dir = tmp_path / "content"
    posts_dir = data_dir / "posts"
    pages_dir = data_dir / "pages"
    metadata_dir = data_dir / "metadata"
    for directory in (posts_dir, pages_dir, metadata_dir):
        directory.mkdir(parents=True)

    posts = [
        make_post_record(1, 'new-year-cigar-social', '2025-01-05T18:00:00Z', categories=['Events']),
        make_post_record(2, 'spring-humidor-tips', '2025-03-12T09:00:00Z', categories=['News', 'Guides']),
        make_post_record(3, 'valentine-pairings', '2025-02-14T20:00:00Z', categories=['events']),
        make_post_record(4, 'unfinished-draft', '2025-04-01T09:00:00Z', status='draft'),
    ]
    for post in posts:
        (posts_dir / f"{post['slug']}.json").write_text(json.dumps(post), encoding='utf-8')

    pages = [
        make_post_record(10, 'about', '2024-01-01T00:00:00Z'),
        make_post_record(11, 'hidden', '2024-01-01T00:00:00Z', status='draft'),
    ]
    for page in pages:
        page.pop('categories')
        (pages_dir / f"{page['slug']}.json").write_text(json.dumps(page), encoding='utf-8')

    events = [
        {'id': 'past-1', 'title': 'Past Tasting', 'slug': 'past-tasting', 'date': '2025-05-01T19:00:00Z',
         'category': 'Tasting', 'description': 'Over.', 'image': 'images/past.jpg', 'featured': False},
        {'id': 'future-2', 'title': 'Summer Gala', 'slug': 'summer-gala', 'date': '2025-08-15T19:00:00Z',
         'category': 'Gala', 'description': 'Black tie.', 'image': 'images/gala.jpg', 'featured': True,
         'location': 'Rooftop', 'maxVisitors': 80},
        {'id': 'future-1', 'title': 'Rum Evening', 'date': '2025-06-20T19:00:00Z',
         'category': 'Pairing', 'description': 'Aged rums.', 'image': '/images/rum.jpg', 'featured': False},
        {'id': 'undated', 'title': 'Someday', 'slug': 'someday', 'date': 'TBA',
         'category': 'Misc', 'description': '', 'image': '', 'featured': False},
    ]
    (data_dir / "upcoming-events.json").write_text(json.dumps(events), encoding='utf-8')

    signatures = [
        {'id': 'sig-2', 'title': 'Mareva Old Fashioned', 'category': 'Pairing', 'tagline': 'Smoke and oak',
         'description': 'House cocktail.', 'image': 'images/of.jpg', 'gallery': [],
         'specs': [{'label': 'Spirit', 'value': 'Bourbon'}], 'collaborators': 'Bar team',
         'postSlug': 'old-fashioned', 'order': 2},
        {'id': 'sig-1', 'title': 'House Blend', 'category': 'Cigar', 'tagline': 'Our own',
         'description': 'Rolled for the club.', 'image': 'images/blend.jpg', 'gallery': ['images/b1.jpg'],
         'specs': [{'label': 'Wrapper', 'value': 'Habano'}], 'collaborators': 'Master roller',
         'postSlug': 'house-blend', 'order': 1,
         'contentSections': [{'heading': 'Origins', 'text': 'Grown in Esteli.', 'imageAlt': 'Field'}]},
    ]
    (data_dir / "signatures.json").write_text(json.dumps(signatures), encoding='utf-8')

    (metadata_dir / "categories.json").write_text(json.dumps({'categories': [
        {'id': 1, 'name': 'News', 'slug': 'news', 'parent': None},
        {'id': 2, 'name': 'Events', 'slug': 'events', 'parent': None},
    ]}), encoding='utf-8')
    (metadata_dir / "authors.json").write_text(json.dumps({'authors': [
        {'id': 1, 'name': 'Editor', 'login': 'editor'},
    ]}), encoding='utf-8')
    (metadata_dir / "image-manifest.json").write_text(json.dumps({
        'https://old.test/spring-humidor-tips.jpg': 'images/spring-humidor-tips.jpg',
    }), encoding='utf-8')

    return data_dir


# =============================================================================
# Dependency Injection Fixtures
# =============================================================================

class MockRemoteSource:
    """Mock implementation of RemoteSourceProtocol for testing.

    Every read returns the result configured in `results` (Err by default)
    and is recorded in `calls`.

    Usage:
        def test_with_di(mock_remote):
            mock_remote.results['all_posts'] = Ok([...])
            service = ContentService(ContentSourceMode.REMOTE, remote=mock_remote)
    """

    def __init__(self):
        """Initialize with every read failing."""
        self.results: Dict[str, Any] = {}
        self.calls: List[tuple] = []

    def _result(self, name: str, *args):
        self.calls.append((name,) + args)
        return self.results.get(name, Err(f"{name} unavailable"))

    def all_posts(self):
        return self._result('all_posts')

    def latest_posts(self, count: int):
        return self._result('latest_posts', count)

    def post_by_slug(self, slug: str):
        return self._result('post_by_slug', slug)

    def upcoming_events(self):
        return self._result('upcoming_events')

    def event_by_slug(self, slug: str):
        return self._result('event_by_slug', slug)

    def upcoming_event_slugs(self):
        return self._result('upcoming_event_slugs')

    def brands(self):
        return self._result('brands')

    def showcase_brands(self):
        return self._result('showcase_brands')

    def called(self, name: str) -> bool:
        """Check if a read was made."""
        return any(call[0] == name for call in self.calls)


@pytest.fixture
def mock_remote():
    """
    Provide a MockRemoteSource whose reads all fail until configured.

    Returns:
        MockRemoteSource: A mock remote source.
    """
    return MockRemoteSource()

