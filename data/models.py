"""
Data Models for the Club Mareva Content Layer

This module contains the canonical content shapes handed to every caller,
whatever source they were read from, plus the result types returned by the
content sources.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


def _require_mapping(data: Any, kind: str) -> Dict[str, Any]:
    """Reject a record field that should be a JSON object but is not."""
    if not isinstance(data, dict):
        raise TypeError(f"{kind} must be an object, got {type(data).__name__}")
    return data


def _string_list(values: Any) -> List[str]:
    """Keep only the string entries of a JSON list."""
    if values is None:
        return []
    if not isinstance(values, list):
        raise TypeError(f"expected a list, got {type(values).__name__}")
    return [v for v in values if isinstance(v, str)]


class ContentSourceMode(Enum):
    """Which content source the façade tries first."""
    REMOTE = "remote"           # content API first, filesystem on failure
    FILESYSTEM = "filesystem"   # filesystem only


# =============================================================================
# Posts and Pages
# =============================================================================

@dataclass
class Author:
    """Author of a post or page."""
    id: int
    name: str
    login: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Author":
        data = _require_mapping(data, "author")
        return cls(
            id=data.get('id', 0),
            name=data.get('name', ''),
            login=data.get('login', ''),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'name': self.name, 'login': self.login}


@dataclass
class PostImage:
    """An image attached to a post: where it came from and where it is served."""
    original_url: str
    local_path: str
    alt_text: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["PostImage"]:
        if not data:
            return None
        data = _require_mapping(data, "image")
        return cls(
            original_url=data.get('original_url', ''),
            local_path=data.get('local_path', ''),
            alt_text=data.get('alt_text'),
        )

    def to_dict(self) -> Dict[str, Any]:
        result = {'original_url': self.original_url, 'local_path': self.local_path}
        if self.alt_text is not None:
            result['alt_text'] = self.alt_text
        return result


@dataclass
class PostContent:
    """The three parallel renditions of a body: original, sanitized, plain text."""
    raw: str
    clean: str
    text: str

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PostContent":
        data = _require_mapping(data or {}, "content")
        return cls(
            raw=data.get('raw', ''),
            clean=data.get('clean', ''),
            text=data.get('text', ''),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {'raw': self.raw, 'clean': self.clean, 'text': self.text}


@dataclass
class Embeds:
    """Third-party embed URLs found in a body."""
    youtube: List[str] = field(default_factory=list)
    instagram: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["Embeds"]:
        if data is None:
            return None
        data = _require_mapping(data, "embeds")
        return cls(
            youtube=list(data.get('youtube') or []),
            instagram=list(data.get('instagram') or []),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {'youtube': list(self.youtube), 'instagram': list(self.instagram)}


@dataclass
class Post:
    """A published news or event article.

    `slug` is the only identifier that is stable across sources: the content
    API uses string ids, the filesystem store integer ids.
    """
    id: Union[int, str]
    title: str
    slug: str
    status: str
    date_created: str
    date_modified: str
    author: Author
    categories: List[str]
    content: PostContent
    featured_image: Optional[PostImage] = None
    images: List[PostImage] = field(default_factory=list)
    embeds: Optional[Embeds] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Post":
        """Build a Post from a filesystem JSON record."""
        return cls(
            id=data.get('id', 0),
            title=data.get('title', ''),
            slug=data['slug'],
            status=data.get('status', ''),
            date_created=data.get('date_created', ''),
            date_modified=data.get('date_modified') or data.get('date_created', ''),
            author=Author.from_dict(data.get('author') or {}),
            categories=_string_list(data.get('categories')),
            content=PostContent.from_dict(data.get('content')),
            featured_image=PostImage.from_dict(data.get('featured_image')),
            images=[PostImage.from_dict(img) for img in data.get('images') or [] if img],
            embeds=Embeds.from_dict(data.get('embeds')),
        )

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'id': self.id,
            'title': self.title,
            'slug': self.slug,
            'status': self.status,
            'date_created': self.date_created,
            'date_modified': self.date_modified,
            'author': self.author.to_dict(),
            'categories': list(self.categories),
            'content': self.content.to_dict(),
            'images': [img.to_dict() for img in self.images],
        }
        if self.featured_image:
            result['featured_image'] = self.featured_image.to_dict()
        if self.embeds is not None:
            result['embeds'] = self.embeds.to_dict()
        return result


@dataclass
class Page:
    """Static informational content. Filesystem only, no category list."""
    id: Union[int, str]
    title: str
    slug: str
    status: str
    date_created: str
    date_modified: str
    author: Author
    content: PostContent
    featured_image: Optional[PostImage] = None
    images: List[PostImage] = field(default_factory=list)
    embeds: Optional[Embeds] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Page":
        return cls(
            id=data.get('id', 0),
            title=data.get('title', ''),
            slug=data['slug'],
            status=data.get('status', ''),
            date_created=data.get('date_created', ''),
            date_modified=data.get('date_modified') or data.get('date_created', ''),
            author=Author.from_dict(data.get('author') or {}),
            content=PostContent.from_dict(data.get('content')),
            featured_image=PostImage.from_dict(data.get('featured_image')),
            images=[PostImage.from_dict(img) for img in data.get('images') or [] if img],
            embeds=Embeds.from_dict(data.get('embeds')),
        )

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'id': self.id,
            'title': self.title,
            'slug': self.slug,
            'status': self.status,
            'date_created': self.date_created,
            'date_modified': self.date_modified,
            'author': self.author.to_dict(),
            'content': self.content.to_dict(),
            'images': [img.to_dict() for img in self.images],
        }
        if self.featured_image:
            result['featured_image'] = self.featured_image.to_dict()
        if self.embeds is not None:
            result['embeds'] = self.embeds.to_dict()
        return result


# =============================================================================
# Events
# =============================================================================

@dataclass
class UpcomingEvent:
    """A dated, bookable happening. Routed by `slug`, or by `id` when it has none."""
    id: str
    title: str
    date: str
    category: str
    description: str
    image: str
    featured: bool
    slug: Optional[str] = None
    location: Optional[str] = None
    max_visitors: Optional[int] = None
    body: Optional[str] = None

    @property
    def route_slug(self) -> str:
        return self.slug or self.id

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UpcomingEvent":
        """Build an event from a record of upcoming-events.json."""
        data = _require_mapping(data, "event")
        return cls(
            id=str(data.get('id', '')),
            title=data.get('title', ''),
            date=data.get('date', ''),
            category=data.get('category', ''),
            description=data.get('description', ''),
            image=data.get('image', ''),
            featured=bool(data.get('featured', False)),
            slug=data.get('slug'),
            location=data.get('location'),
            max_visitors=data.get('maxVisitors'),
            body=data.get('body'),
        )

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'id': self.id,
            'title': self.title,
            'date': self.date,
            'category': self.category,
            'description': self.description,
            'image': self.image,
            'featured': self.featured,
        }
        optional = {
            'slug': self.slug,
            'location': self.location,
            'maxVisitors': self.max_visitors,
            'body': self.body,
        }
        result.update({k: v for k, v in optional.items() if v is not None})
        return result


# =============================================================================
# Brands
# =============================================================================

@dataclass(frozen=True)
class Testimonial:
    """A member quote shown on a brand profile."""
    quote: str
    author: str
    title: str

    def to_dict(self) -> Dict[str, Any]:
        return {'quote': self.quote, 'author': self.author, 'title': self.title}


@dataclass
class Brand:
    """A cigar brand: name, description and logo from the API, the rest from the enrichment table."""
    name: str
    origin: str
    description: str
    logo: str
    established: Optional[str] = None
    hashtags: Optional[List[str]] = None
    testimonial: Optional[Testimonial] = None
    website: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'name': self.name,
            'origin': self.origin,
            'description': self.description,
            'logo': self.logo,
        }
        if self.established is not None:
            result['established'] = self.established
        if self.hashtags is not None:
            result['hashtags'] = list(self.hashtags)
        if self.testimonial is not None:
            result['testimonial'] = self.testimonial.to_dict()
        if self.website is not None:
            result['website'] = self.website
        return result


# =============================================================================
# Signatures and Metadata
# =============================================================================

@dataclass
class SignatureContentSection:
    text: str
    heading: Optional[str] = None
    image: Optional[str] = None
    image_alt: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SignatureContentSection":
        data = _require_mapping(data, "content section")
        return cls(
            text=data.get('text', ''),
            heading=data.get('heading'),
            image=data.get('image'),
            image_alt=data.get('imageAlt'),
        )

    def to_dict(self) -> Dict[str, Any]:
        result = {'text': self.text}
        optional = {'heading': self.heading, 'image': self.image, 'imageAlt': self.image_alt}
        result.update({k: v for k, v in optional.items() if v is not None})
        return result


@dataclass
class SignatureItem:
    """A house signature (blend, pairing, ritual) listed on the signature page."""
    id: str
    title: str
    category: str
    tagline: str
    description: str
    image: str
    gallery: List[str]
    specs: List[Dict[str, str]]
    collaborators: str
    post_slug: str
    order: int
    content_sections: Optional[List[SignatureContentSection]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SignatureItem":
        data = _require_mapping(data, "signature")
        sections = data.get('contentSections')
        return cls(
            id=str(data.get('id', '')),
            title=data.get('title', ''),
            category=data.get('category', ''),
            tagline=data.get('tagline', ''),
            description=data.get('description', ''),
            image=data.get('image', ''),
            gallery=list(data.get('gallery') or []),
            specs=[dict(spec) for spec in data.get('specs') or []],
            collaborators=data.get('collaborators', ''),
            post_slug=data.get('postSlug', ''),
            order=int(data.get('order') or 0),
            content_sections=(
                [SignatureContentSection.from_dict(s) for s in sections]
                if sections is not None else None
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'id': self.id,
            'title': self.title,
            'category': self.category,
            'tagline': self.tagline,
            'description': self.description,
            'image': self.image,
            'gallery': list(self.gallery),
            'specs': [dict(spec) for spec in self.specs],
            'collaborators': self.collaborators,
            'postSlug': self.post_slug,
            'order': self.order,
        }
        if self.content_sections is not None:
            result['contentSections'] = [s.to_dict() for s in self.content_sections]
        return result


@dataclass
class Category:
    id: int
    name: str
    slug: str
    parent: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Category":
        data = _require_mapping(data, "category")
        return cls(
            id=data.get('id', 0),
            name=data.get('name', ''),
            slug=data.get('slug', ''),
            parent=data.get('parent'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'name': self.name, 'slug': self.slug, 'parent': self.parent}


# =============================================================================
# API Pagination
# =============================================================================

@dataclass
class Pagination:
    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Pagination":
        data = data or {}
        return cls(
            page=data.get('page', 1),
            limit=data.get('limit', 0),
            total=data.get('total', 0),
            total_pages=data.get('totalPages', 0),
        )


@dataclass
class PaginatedResponse:
    """A page of raw API records."""
    items: List[Dict[str, Any]]
    pagination: Pagination

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PaginatedResponse":
        items = data.get('items')
        if not isinstance(items, list):
            raise ValueError("Paginated response has no 'items' list")
        return cls(items=items, pagination=Pagination.from_dict(data.get('pagination')))


# =============================================================================
# Source Results
# =============================================================================

@dataclass
class Ok:
    """A content source read that succeeded."""
    value: Any
    ok: bool = field(default=True, init=False)


@dataclass
class Err:
    """A content source read that failed, with a human-readable reason."""
    reason: str
    error: Optional[BaseException] = None
    ok: bool = field(default=False, init=False)


SourceResult = Union[Ok, Err]
