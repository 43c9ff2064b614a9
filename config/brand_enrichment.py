"""
Brand Enrichment Data for the Club Mareva Content Layer

The content API only knows a brand's name, description and logo. Origin,
founding year, hashtags, a member testimonial and the brand website are
maintained here by hand and joined onto the API record by brand name.

The join is an exact string match on the name as the API spells it. Keep it
exact: a brand the table does not know still gets listed, only with less
detail.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from data.models import Testimonial


@dataclass(frozen=True)
class BrandEnrichment:
    """Marketing metadata for one brand."""
    origin: str
    established: Optional[str] = None
    hashtags: Optional[Tuple[str, ...]] = None
    testimonial: Optional[Testimonial] = None
    website: Optional[str] = None


# Stub used for brands missing from the table
UNKNOWN_BRAND = BrandEnrichment(origin="Unknown")


BRAND_ENRICHMENT: Mapping[str, BrandEnrichment] = MappingProxyType({
    "Habanos": BrandEnrichment(
        origin="Cuba",
        established="Est. 1994",
        hashtags=("#CubanCigars", "#Habanos", "#ClubMareva"),
        testimonial=Testimonial(
            quote="The Cohiba Behike is simply unmatched. Club Mareva’s selection "
                  "and service made it an unforgettable experience.",
            author="Michel R.",
            title="Founding Member",
        ),
        website="https://www.habanos.com",
    ),
    "Davidoff": BrandEnrichment(
        origin="Dominican Republic",
        established="Est. 1968",
        hashtags=("#Davidoff", "#LuxuryCigars", "#Refinement"),
        testimonial=Testimonial(
            quote="For special occasions, nothing compares to a Davidoff. The presentation "
                  "and quality at Club Mareva elevate the entire experience.",
            author="Antoine K.",
            title="Premium Member",
        ),
        website="https://www.davidoff.com",
    ),
    "Caldwell": BrandEnrichment(
        origin="Various",
        established="Est. 2014",
        hashtags=("#Caldwell", "#BoutiqueCigars", "#Innovation"),
        testimonial=Testimonial(
            quote="Caldwell's Eastern Standard is my go-to. The staff at Club Mareva "
                  "always knows exactly what I'm looking for.",
            author="Georges M.",
            title="Regular Member",
        ),
        website="https://caldwellcigars.com",
    ),
    "Hiram & Solomon": BrandEnrichment(
        origin="Dominican Republic",
        established="Est. 2016",
        hashtags=("#HiramAndSolomon", "#MasonicHeritage", "#Craftsmanship"),
        testimonial=Testimonial(
            quote="The Traveling Man is a masterpiece. Finding it at Club Mareva was a "
                  "revelation—truly a hidden gem.",
            author="Fadi S.",
            title="Cigar Enthusiast",
        ),
        website="https://www.hiramandsolomoncigars.com",
    ),
    "Patoro": BrandEnrichment(
        origin="Dominican Republic",
        established="Est. 2005",
        hashtags=("#Patoro", "#CubanSeed", "#Elegance"),
        testimonial=Testimonial(
            quote="Patoro's Gran Añejo is pure silk. The humidor at Club Mareva keeps "
                  "them in perfect condition.",
            author="Karim H.",
            title="Connoisseur",
        ),
        website="https://www.patoro.com",
    ),
    "Drew Estate": BrandEnrichment(
        origin="Nicaragua",
        established="Est. 1996",
        hashtags=("#DrewEstate", "#LigaPrivada", "#BoldFlavors"),
        testimonial=Testimonial(
            quote="The Liga Privada No. 9 paired with aged rum—pure magic. Club "
                  "Mareva’s pairing suggestions are always spot-on.",
            author="Ziad B.",
            title="Regular Guest",
        ),
        website="https://drewestate.com",
    ),
    "Rocky Patel": BrandEnrichment(
        origin="Nicaragua/Honduras",
        established="Est. 1996",
        hashtags=("#RockyPatel", "#PremiumCigars", "#BoldFlavors"),
        testimonial=Testimonial(
            quote="The Decade is my daily companion. Consistent, reliable, and always "
                  "available at Club Mareva.",
            author="Nabil F.",
            title="Daily Visitor",
        ),
        website="https://rockypatel.com",
    ),
    "Casdagli": BrandEnrichment(
        origin="Dominican/Costa Rica",
        established="Est. 2014",
        hashtags=("#Casdagli", "#BritishHeritage", "#Refined"),
        testimonial=Testimonial(
            quote="Casdagli's Daughters of the Wind is exceptional. Club Mareva introduced "
                  "me to this brand—forever grateful.",
            author="Jean-Pierre L.",
            title="Member Since 2020",
        ),
        website="https://www.casdaglicigars.com",
    ),
    "Saga": BrandEnrichment(
        origin="Dominican Republic",
        established="Est. 2016",
        hashtags=("#SagaCigars", "#ExceptionalValue", "#Quality"),
        testimonial=Testimonial(
            quote="Perfect for a quick smoke break. Saga delivers quality at an "
                  "accessible price point.",
            author="Sami T.",
            title="Regular Guest",
        ),
        website="https://www.sagacigars.com",
    ),
    "Smoking Jacket": BrandEnrichment(
        origin="Dominican Republic",
        established="Est. 2018",
        hashtags=("#SmokingJacket", "#ModernBoutique", "#Innovation"),
        testimonial=Testimonial(
            quote="Hendrik Jr.'s vision shines through every blend. A must-try for any "
                  "serious aficionado.",
            author="Rami D.",
            title="Cigar Collector",
        ),
        website="https://www.smokingcigarjacket.com",
    ),
})


def get_brand_enrichment(name: str) -> BrandEnrichment:
    """Look up a brand by its exact name, returning the 'Unknown' stub on a miss."""
    return BRAND_ENRICHMENT.get(name, UNKNOWN_BRAND)
