"""
Filesystem Content Store

This module reads the local JSON content store that backs the site when the
content API is disabled or unavailable. Layout under the data directory:

    posts/*.json              one published or draft post per file
    pages/*.json              one static page per file
    upcoming-events.json      list of events
    signatures.json           list of signature items
    metadata/categories.json  {"categories": [...]}
    metadata/authors.json     {"authors": [...]}
    metadata/image-manifest.json  {original remote URL: local path}

Every loader returns Ok(value) or Err(reason). A corrupt file inside a
collection directory is logged and skipped without failing the collection.
"""

import json
from pathlib import Path
from typing import Any, Callable, Optional, Union

from data.models import (
    Author, Category, Err, Ok, Page, Post, SignatureItem, SourceResult, UpcomingEvent
)
from utils.exceptions import FilesystemStoreError
from utils.logger import get_logger

logger = get_logger(__name__)

PUBLISHED_STATUS = 'publish'


class FilesystemContentStore:
    """Reader for the local JSON content store."""

    def __init__(self, data_dir: Union[str, Path]):
        """
        Initialize the store.

        Args:
            data_dir: Base content directory.
        """
        self.data_dir = Path(data_dir)
        self.posts_dir = self.data_dir / "posts"
        self.pages_dir = self.data_dir / "pages"
        self.metadata_dir = self.data_dir / "metadata"
        self.upcoming_events_file = self.data_dir / "upcoming-events.json"
        self.signatures_file = self.data_dir / "signatures.json"

    def load_json(self, file_path: Path) -> Optional[Any]:
        """
        Read and parse one JSON file.

        Args:
            file_path: The file to read.

        Returns:
            The parsed JSON value, or None if the file is missing or invalid.
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading {file_path}: {e}")
            return None

    def _load_collection(self, directory: Path, factory: Callable[[dict], Any], kind: str) -> SourceResult:
        """Load every published record in a directory of JSON files."""
        try:
            files = sorted(p for p in directory.iterdir() if p.suffix == '.json' and p.is_file())
        except OSError as e:
            error = FilesystemStoreError(f"cannot list {kind} directory {directory}: {e}")
            logger.error(f"Error listing {kind} directory {directory}: {e}")
            return Err(str(error), error)

        records = []
        for file_path in files:
            data = self.load_json(file_path)
            if not isinstance(data, dict):
                if data is not None:
                    logger.error(f"Skipping {file_path}: expected a JSON object")
                continue
            if data.get('status') != PUBLISHED_STATUS:
                continue
            try:
                records.append(factory(data))
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                logger.error(f"Skipping malformed {kind} record in {file_path}: {e}")

        logger.debug(f"Loaded {len(records)} published {kind} from {directory}")
        return Ok(records)

    def _load_list(self, file_path: Path, factory: Callable[[dict], Any], kind: str,
                   key: Optional[str] = None) -> SourceResult:
        """Load a list of records from one JSON file, optionally nested under key."""
        data = self.load_json(file_path)
        if data is None:
            error = FilesystemStoreError(f"cannot read {file_path}")
            return Err(str(error), error)
        if key is not None:
            data = data.get(key) if isinstance(data, dict) else None
        if not isinstance(data, list):
            logger.error(f"Unexpected {kind} format in {file_path}")
            return Err(f"unexpected {kind} format in {file_path}")

        records = []
        for item in data:
            try:
                records.append(factory(item))
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                logger.error(f"Skipping malformed {kind} record in {file_path}: {e}")
        return Ok(records)

    def load_posts(self) -> SourceResult:
        """Load published posts, in filename order."""
        return self._load_collection(self.posts_dir, Post.from_dict, "posts")

    def load_pages(self) -> SourceResult:
        """Load published pages, in filename order."""
        return self._load_collection(self.pages_dir, Page.from_dict, "pages")

    def load_upcoming_events(self) -> SourceResult:
        """Load every event in upcoming-events.json, past ones included."""
        return self._load_list(self.upcoming_events_file, UpcomingEvent.from_dict, "events")

    def load_signatures(self) -> SourceResult:
        """Load every signature item, in file order."""
        return self._load_list(self.signatures_file, SignatureItem.from_dict, "signatures")

    def load_categories(self) -> SourceResult:
        return self._load_list(self.metadata_dir / "categories.json", Category.from_dict,
                               "categories", key="categories")

    def load_authors(self) -> SourceResult:
        return self._load_list(self.metadata_dir / "authors.json", Author.from_dict,
                               "authors", key="authors")

    def load_image_manifest(self) -> SourceResult:
        """Load the image manifest. A missing manifest is an empty one."""
        manifest_path = self.metadata_dir / "image-manifest.json"
        if not manifest_path.exists():
            return Ok({})
        data = self.load_json(manifest_path)
        if not isinstance(data, dict):
            return Err(f"cannot read image manifest {manifest_path}")
        return Ok({str(k): str(v) for k, v in data.items()})
