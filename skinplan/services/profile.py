"""
Personalization profile — the compact summary of a survey that the rest of
the product keys off (search ranking, storefront filters).
"""

from skinplan.schemas import (
    PersonalizationProfile,
    Preference,
    ProfilePreferences,
    SkinType,
    SurveyResponse,
)


def derive_profile(survey: SurveyResponse) -> PersonalizationProfile:
    """Reduce a survey to its personalization profile.

    The first listed skin type is the headline label; Normal if none.
    """
    skin_type = survey.skin_types[0] if survey.skin_types else SkinType.NORMAL
    return PersonalizationProfile(
        skin_type=skin_type,
        concerns=list(survey.concerns),
        sensitivities=list(survey.allergens),
        preferences=ProfilePreferences(
            cruelty_free=survey.has_preference(Preference.CRUELTY_FREE),
            vegan=survey.has_preference(Preference.VEGAN),
        ),
        lifestyle=survey.lifestyle,
    )
