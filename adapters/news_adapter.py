"""
News Adapter

Maps a content API news article onto the canonical Post shape. Pure, no I/O.
"""

from typing import Any, Dict, Optional, Union

from config import settings
from data.models import Author, Post, PostContent, PostImage
from utils.helpers import safe_get, strip_html


def api_image_url(record: Dict[str, Any]) -> str:
    """
    Pick the image URL of an API record.

    The API moved from a flat `mainImageUrl` to a structured `image.url`;
    both still occur, so the structured field wins and the flat one is the
    fallback.
    """
    return safe_get(record, 'image', 'url') or record.get('mainImageUrl') or ''


def _coerce_post_id(raw_id: Any) -> Union[int, str]:
    """API ids are strings. Keep numeric ones as ints like the filesystem store, others become 0."""
    if isinstance(raw_id, int) and not isinstance(raw_id, bool):
        return raw_id
    try:
        return int(str(raw_id), 10)
    except (TypeError, ValueError):
        return 0


def api_news_to_post(article: Dict[str, Any]) -> Post:
    """
    Convert a content API news article into a Post.

    Args:
        article: Raw article record from GET /news or /news/{slug}.

    Returns:
        Post: The normalized post. Featured articles are categorized as
        'Events', everything else as 'News'.
    """
    body = article.get('body') or ''
    image_url = api_image_url(article)
    created = article.get('date') or article.get('createdAt') or ''

    featured_image: Optional[PostImage] = None
    if image_url:
        featured_image = PostImage(
            original_url=image_url,
            local_path=image_url,
            alt_text=safe_get(article, 'image', 'alt') or article.get('title', ''),
        )

    return Post(
        id=_coerce_post_id(article.get('id')),
        title=article.get('title', ''),
        slug=article['slug'],
        status='publish',
        date_created=created,
        date_modified=article.get('updatedAt') or created,
        author=Author.from_dict(settings.DEFAULT_AUTHOR),
        categories=['Events'] if article.get('isFeatured') else ['News'],
        content=PostContent(raw=body, clean=body, text=strip_html(body)),
        featured_image=featured_image,
        images=[],
    )
