"""
Product assembly — one cleanser, any number of treatments and serums, one
moisturizer, then SPF.

Cleanser and moisturizer tables are decision lists (first match wins); the
treatment table is read in full, in table order rather than the order the
concerns were ranked. The assembled list is capped at PRODUCT_LIMIT.
"""

import logging

from skinplan.schemas import (
    Concern,
    ProductCategory,
    ProductRecommendation,
    SkinType,
    SurveyResponse,
)
from skinplan.services.rules import Rule, all_matches, first_match
from skinplan.tables import (
    ALPHA_ARBUTIN_TREATMENT,
    BALANCED_DAILY_MOISTURIZER,
    BALANCED_GEL_CLEANSER,
    BROAD_SPECTRUM_SPF,
    GENTLE_HYDRATING_CLEANSER,
    HYALURONIC_B5_SERUM,
    LIGHTWEIGHT_GEL_MOISTURIZER,
    NIACINAMIDE_ZINC_SERUM,
    PRODUCT_LIMIT,
    RETINOL_NIGHT_SERUM,
    RICH_CERAMIDE_CREAM,
    SALICYLIC_FOAMING_CLEANSER,
    VITAMIN_C_SERUM,
)

logger = logging.getLogger(__name__)


def _has_any_skin_type(*skin_types: SkinType):
    return lambda s: any(s.has_skin_type(t) for t in skin_types)


def _has_any_concern(*concerns: Concern):
    return lambda s: any(s.has_concern(c) for c in concerns)


CLEANSER_RULES: tuple[Rule[ProductRecommendation], ...] = (
    Rule(_has_any_skin_type(SkinType.DRY, SkinType.SENSITIVE), GENTLE_HYDRATING_CLEANSER),
    Rule(
        lambda s: s.has_skin_type(SkinType.OILY) or s.has_concern(Concern.ACNE_PRONE),
        SALICYLIC_FOAMING_CLEANSER,
    ),
)

TREATMENT_RULES: tuple[Rule[ProductRecommendation], ...] = (
    Rule(_has_any_concern(Concern.ACNE_PRONE), NIACINAMIDE_ZINC_SERUM),
    Rule(_has_any_concern(Concern.SIGNS_OF_AGING), RETINOL_NIGHT_SERUM),
    Rule(_has_any_concern(Concern.UNEVEN_SKIN_TONE, Concern.DULLNESS), VITAMIN_C_SERUM),
    Rule(
        lambda s: s.has_concern(Concern.LACK_OF_HYDRATION) or s.has_skin_type(SkinType.DRY),
        HYALURONIC_B5_SERUM,
    ),
    Rule(_has_any_concern(Concern.SCARRING), ALPHA_ARBUTIN_TREATMENT),
)

MOISTURIZER_RULES: tuple[Rule[ProductRecommendation], ...] = (
    Rule(_has_any_skin_type(SkinType.DRY), RICH_CERAMIDE_CREAM),
    Rule(_has_any_skin_type(SkinType.OILY), LIGHTWEIGHT_GEL_MOISTURIZER),
)


def _cap(products: list[ProductRecommendation], spf_exempt_from_cap: bool) -> list[ProductRecommendation]:
    if len(products) <= PRODUCT_LIMIT:
        return products

    if spf_exempt_from_cap:
        others = [p for p in products if p.category != ProductCategory.SPF]
        spf = [p for p in products if p.category == ProductCategory.SPF]
        return others[: PRODUCT_LIMIT - len(spf)] + spf

    logger.warning(
        f"Product cap of {PRODUCT_LIMIT} dropped {len(products) - PRODUCT_LIMIT} "
        f"recommendation(s) including SPF"
    )
    return products[:PRODUCT_LIMIT]


def recommend_products(
    survey: SurveyResponse, spf_exempt_from_cap: bool = False
) -> list[ProductRecommendation]:
    """Assemble the ordered product list for a survey.

    By default the cap is a hard cut, so a survey that triggers four or more
    treatments loses the SPF entry. With `spf_exempt_from_cap` the SPF entry
    always survives in last place and the cut falls on the entries before it.
    """
    products = [
        first_match(CLEANSER_RULES, survey, default=BALANCED_GEL_CLEANSER),
        *all_matches(TREATMENT_RULES, survey),
        first_match(MOISTURIZER_RULES, survey, default=BALANCED_DAILY_MOISTURIZER),
        BROAD_SPECTRUM_SPF,
    ]
    # Catalog entries are shared; hand out copies
    products = [product.model_copy(deep=True) for product in products]
    return _cap(products, spf_exempt_from_cap)
