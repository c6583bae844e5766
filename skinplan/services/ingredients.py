"""
Ingredient resolution — what to look for and what to stay away from.
"""

from skinplan.schemas import SurveyResponse
from skinplan.services.ordered_set import OrderedSet
from skinplan.tables import (
    CONCERN_INGREDIENTS,
    INGREDIENTS_PER_CONCERN,
    KEY_INGREDIENT_LIMIT,
    PREFERENCE_EXCLUSIONS,
    SKIN_TYPE_INGREDIENTS,
)


def resolve_key_ingredients(survey: SurveyResponse) -> list[str]:
    """Key ingredients, concern rows first, then skin-type pairs.

    Every ranked concern contributes the head of its row, not just the top 3.
    The cap is applied once everything is inserted, so a long concern list
    can push the skin-type pairs out entirely.
    """
    ingredients: OrderedSet[str] = OrderedSet()
    for concern in survey.concerns:
        row = CONCERN_INGREDIENTS.get(concern, ())
        ingredients.update(row[:INGREDIENTS_PER_CONCERN])

    for skin_type, pair in SKIN_TYPE_INGREDIENTS:
        if survey.has_skin_type(skin_type):
            ingredients.update(pair)

    return ingredients.head(KEY_INGREDIENT_LIMIT)


def resolve_avoid_ingredients(survey: SurveyResponse, dedupe: bool = False) -> list[str]:
    """Allergens as given, then exclusions implied by formulation preferences.

    Repeats between the two sources are kept unless `dedupe` is set, in which
    case the first spelling of an ingredient wins (compared case-insensitively).
    """
    avoid = list(survey.allergens)
    for preference, excluded in PREFERENCE_EXCLUSIONS:
        if survey.has_preference(preference):
            avoid.extend(excluded)

    if not dedupe:
        return avoid

    seen: set[str] = set()
    unique: list[str] = []
    for ingredient in avoid:
        key = ingredient.casefold()
        if key not in seen:
            seen.add(key)
            unique.append(ingredient)
    return unique
