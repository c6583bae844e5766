"""
Lifestyle advice — conditional nudges first, the two standing reminders last.
"""

from skinplan.schemas import (
    ExerciseFrequency,
    SkinCareTime,
    SleepHours,
    StressLevel,
    SurveyResponse,
)
from skinplan.services.rules import Rule, all_matches
from skinplan.tables import (
    ACTIVITY_ADVICE,
    ALWAYS_ADVICE,
    MULTITASK_ADVICE,
    SLEEP_ADVICE,
    STRESS_ADVICE,
)

HIGH_STRESS = frozenset({StressLevel.HIGH, StressLevel.VERY_HIGH})
LOW_ACTIVITY = frozenset({ExerciseFrequency.NEVER, ExerciseFrequency.ONE_TO_TWO})

LIFESTYLE_RULES: tuple[Rule[str], ...] = (
    Rule(lambda s: s.lifestyle.sleep_hours == SleepHours.LESS_THAN_6, SLEEP_ADVICE),
    Rule(lambda s: s.lifestyle.stress_level in HIGH_STRESS, STRESS_ADVICE),
    Rule(lambda s: s.lifestyle.exercise in LOW_ACTIVITY, ACTIVITY_ADVICE),
    Rule(lambda s: s.lifestyle.skin_care_time == SkinCareTime.LESS_THAN_5_MIN, MULTITASK_ADVICE),
)


def build_lifestyle_advice(survey: SurveyResponse) -> list[str]:
    return all_matches(LIFESTYLE_RULES, survey) + list(ALWAYS_ADVICE)
