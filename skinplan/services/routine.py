"""
Routine classification — picks one routine archetype per survey.

Precedence is fixed: Sensitive beats the time limit, the time limit beats
Dry, Dry beats Oily, and so on. A Sensitive + Dry survey always gets the
barrier-repair routine.
"""

from skinplan.schemas import RoutineType, SkinCareTime, SkinType, SurveyResponse
from skinplan.services.rules import Rule, first_match
from skinplan.tables import ROUTINE_DESCRIPTIONS

TIME_LIMITED = frozenset({SkinCareTime.LESS_THAN_5_MIN, SkinCareTime.FIVE_TO_TEN_MIN})


def _is_time_limited(survey: SurveyResponse) -> bool:
    return survey.lifestyle.skin_care_time in TIME_LIMITED


def _is_multi_zone(survey: SurveyResponse) -> bool:
    return len(survey.skin_types) > 1 or survey.has_skin_type(SkinType.COMBINATION)


ROUTINE_RULES: tuple[Rule[RoutineType], ...] = (
    Rule(lambda s: s.has_skin_type(SkinType.SENSITIVE), RoutineType.BARRIER_REPAIR),
    Rule(_is_time_limited, RoutineType.STREAMLINED),
    Rule(lambda s: s.has_skin_type(SkinType.DRY), RoutineType.INTENSIVE_HYDRATION),
    Rule(lambda s: s.has_skin_type(SkinType.OILY), RoutineType.BALANCING),
    Rule(_is_multi_zone, RoutineType.MULTI_ZONE),
)


def classify_routine(survey: SurveyResponse) -> tuple[RoutineType, str]:
    """Return the routine type and its fixed description."""
    routine_type = first_match(ROUTINE_RULES, survey, default=RoutineType.MAINTENANCE)
    return routine_type, ROUTINE_DESCRIPTIONS[routine_type]
