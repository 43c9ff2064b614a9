"""
Brands Adapter

Maps content API cigar brands onto the canonical Brand shape, joining the
static enrichment table by exact brand name. Pure, no I/O.
"""

from typing import Any, Dict

from config.brand_enrichment import get_brand_enrichment
from data.models import Brand
from utils.helpers import safe_get


def api_cigar_brand_to_api_brand(record: Dict[str, Any]) -> Dict[str, str]:
    """
    Reduce a raw /cigar-brands record to the minimal {name, description, logoUrl} form.

    The logo follows the same migration rule as article images: the
    structured `logo.url` wins over the flat `logoUrl`.
    """
    return {
        'name': record.get('title') or record.get('name') or '',
        'description': record.get('description') or '',
        'logoUrl': safe_get(record, 'logo', 'url') or record.get('logoUrl') or '',
    }


def api_brand_to_local_brand(api_brand: Dict[str, Any]) -> Brand:
    """
    Merge the enrichment table onto a minimal API brand.

    A brand missing from the table is not an error: it comes back with
    origin 'Unknown' and no other marketing fields.

    Args:
        api_brand: Dict with 'name', 'description' and 'logoUrl'.

    Returns:
        Brand: The enriched brand.
    """
    name = api_brand.get('name', '')
    enrichment = get_brand_enrichment(name)

    return Brand(
        name=name,
        origin=enrichment.origin,
        established=enrichment.established,
        description=api_brand.get('description', ''),
        logo=api_brand.get('logoUrl', ''),
        hashtags=list(enrichment.hashtags) if enrichment.hashtags is not None else None,
        testimonial=enrichment.testimonial,
        website=enrichment.website,
    )


def api_brand_to_showcase_brand(api_brand: Dict[str, Any]) -> Dict[str, str]:
    """Reduce a minimal API brand to the {name, logo} pair used by the brand showcase."""
    return {
        'name': api_brand.get('name', ''),
        'logo': api_brand.get('logoUrl', ''),
    }
