from skinplan.config import Settings, get_settings
from skinplan.errors import InvalidInput
from skinplan.schemas import (
    PersonalizationProfile,
    ProductRecommendation,
    ProfilePreferences,
    RecommendationPlan,
    SurveyResponse,
)
from skinplan.services.plan import build_plan, parse_survey
from skinplan.services.profile import derive_profile

__all__ = [
    "Settings",
    "get_settings",
    "InvalidInput",
    "SurveyResponse",
    "RecommendationPlan",
    "ProductRecommendation",
    "PersonalizationProfile",
    "ProfilePreferences",
    "build_plan",
    "parse_survey",
    "derive_profile",
]
