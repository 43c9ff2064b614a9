"""
Club Mareva Content Layer

This is the command line entry point of the content layer. It resolves
posts, events, pages, brands and signatures through the content service,
exactly as the site does, and prints them as JSON. Useful for checking what
the site would render from the API or from the local content store.
"""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from config import settings
from config.validators import get_config_summary
from data.models import ContentSourceMode
from services.content_service import ContentService, create_content_service
from services.presenters import build_activity_feed, build_sitemap, post_to_card
from utils.exceptions import ContentError
from utils.logger import get_logger, setup_file_logging

# Set up logging
logger = get_logger(__name__)

COMMANDS = ('posts', 'post', 'events', 'event', 'pages', 'page', 'brands',
            'signatures', 'categories', 'feed', 'sitemap')


def _to_json(value: Any) -> Any:
    if isinstance(value, list):
        return [_to_json(v) for v in value]
    if hasattr(value, 'to_dict'):
        return value.to_dict()
    return value


class ContentSite:
    """
    Resolves the content of each site section.

    This class mirrors the queries the site's pages make, one method per
    command.
    """

    def __init__(self, content_service: Optional[ContentService] = None):
        """Initialize with an injected content service, or one built from settings."""
        self.content_service = content_service or create_content_service()

    def run(self, command: str, slug: Optional[str] = None) -> Optional[Any]:
        """
        Resolve one command.

        Args:
            command: One of COMMANDS.
            slug: Slug for the single-item commands.

        Returns:
            JSON-ready data, or None when a single item was not found.
        """
        cs = self.content_service

        if command == 'posts':
            return [post_to_card(p) for p in cs.get_all_posts()]
        if command == 'post':
            return _to_json(cs.get_post_by_slug(slug)) if slug else None
        if command == 'events':
            return _to_json(cs.get_upcoming_events())
        if command == 'event':
            return _to_json(cs.get_upcoming_event_by_slug(slug)) if slug else None
        if command == 'pages':
            return _to_json(cs.get_all_pages())
        if command == 'page':
            return _to_json(cs.get_page_by_slug(slug)) if slug else None
        if command == 'brands':
            return _to_json(cs.get_brands())
        if command == 'signatures':
            return _to_json(cs.get_signatures())
        if command == 'categories':
            return _to_json(cs.get_categories())
        if command == 'feed':
            return build_activity_feed(cs.get_upcoming_events(),
                                       cs.get_latest_posts(settings.LATEST_POSTS_HOMEPAGE))
        if command == 'sitemap':
            return build_sitemap(cs.get_all_posts(), cs.get_upcoming_events())

        raise ValueError(f"Unknown command: {command}")


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Club Mareva content layer')
    parser.add_argument('command', choices=COMMANDS, help='What to resolve')
    parser.add_argument('slug', nargs='?', default=None, help='Slug for post, event and page')
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--api', action='store_true', help='Read the content API first, fall back to files')
    source.add_argument('--filesystem', action='store_true', help='Read the local content store only')
    parser.add_argument('--data-dir', type=str, default=None, help='Local content directory')
    parser.add_argument('--log-file', type=str, default=None, help='Log file path')
    parser.add_argument('--log-level', type=str, choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        default='WARNING', help='Logging level')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    # Parse command line arguments
    args = parse_arguments(argv)

    # Set up logging
    setup_file_logging(args.log_file, getattr(logging, args.log_level))

    mode = None
    if args.api:
        mode = ContentSourceMode.REMOTE
    elif args.filesystem:
        mode = ContentSourceMode.FILESYSTEM

    try:
        settings.validate_settings(mode=mode, data_dir=args.data_dir)
        logger.debug(f"Configuration: {get_config_summary()}")
        site = ContentSite(create_content_service(mode=mode, data_dir=args.data_dir))
        result = site.run(args.command, args.slug)

        if result is None:
            logger.warning(f"Nothing found for {args.command} {args.slug or ''}".rstrip())
            exit_code = 1
        else:
            json.dump(result, sys.stdout, indent=2, ensure_ascii=False)
            sys.stdout.write("\n")
            exit_code = 0

    except ContentError as e:
        logger.error(f"Content error: {e}")
        exit_code = 2
    except Exception as e:
        logger.error(f"Unhandled exception in content layer: {e}", exc_info=True)
        exit_code = 2

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
