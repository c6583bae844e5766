"""
Plan builder — single entry point: build_plan(survey)

Runs the rule stages in a fixed order over one survey and assembles the
result. Pure: no I/O, no shared mutable state, same survey in, same plan out.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import ValidationError

from skinplan.config import Settings, get_settings
from skinplan.errors import InvalidInput
from skinplan.schemas import RecommendationPlan, SurveyResponse
from skinplan.services.ingredients import resolve_avoid_ingredients, resolve_key_ingredients
from skinplan.services.lifestyle import build_lifestyle_advice
from skinplan.services.products import recommend_products
from skinplan.services.routine import classify_routine
from skinplan.tables import PRIORITY_CONCERN_COUNT

logger = logging.getLogger(__name__)


def parse_survey(data: Mapping[str, Any]) -> SurveyResponse:
    """Validate a raw survey mapping (camelCase or snake_case keys)."""
    if not isinstance(data, Mapping):
        raise InvalidInput(f"Survey response must be a mapping, got {type(data).__name__}")
    try:
        return SurveyResponse.model_validate(data)
    except ValidationError as e:
        error = InvalidInput.from_validation_error(e)
        logger.warning(f"Rejected survey response: {len(error.errors)} error(s)")
        raise error from e


def build_plan(
    survey: Union[SurveyResponse, Mapping[str, Any]],
    settings: Optional[Settings] = None,
) -> RecommendationPlan:
    """Turn one survey response into a personalized plan."""
    settings = settings or get_settings()
    if not isinstance(survey, SurveyResponse):
        survey = parse_survey(survey)

    if not survey.skin_types:
        raise InvalidInput("skin_types: at least one skin type is required")
    if settings.require_concerns and not survey.concerns:
        raise InvalidInput("concerns: at least one concern is required")

    routine_type, routine_description = classify_routine(survey)
    plan = RecommendationPlan(
        routine_type=routine_type,
        routine_description=routine_description,
        priority_concerns=survey.concerns[:PRIORITY_CONCERN_COUNT],
        key_ingredients=resolve_key_ingredients(survey),
        avoid_ingredients=resolve_avoid_ingredients(
            survey, dedupe=settings.dedupe_avoid_ingredients
        ),
        lifestyle_advice=build_lifestyle_advice(survey),
        recommended_products=recommend_products(
            survey, spf_exempt_from_cap=settings.spf_exempt_from_cap
        ),
    )

    logger.debug(
        f"Built plan: routine={routine_type.value}, "
        f"ingredients={len(plan.key_ingredients)}, products={len(plan.recommended_products)}"
    )
    return plan
