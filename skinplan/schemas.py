"""
Pydantic schemas — the data contracts of the plan engine.

SurveyResponse is the input handed over by the survey layer, RecommendationPlan
is the output consumed by whatever renders the plan. Attribute names are
snake_case; both models accept and emit the survey layer's camelCase keys.
Models are frozen against field reassignment; list contents are left as
plain lists and the engine never mutates them.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from skinplan.services.ordered_set import OrderedSet


_MODEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# ── Enums ────────────────────────────────────────────────────────────────────


class SkinType(str, enum.Enum):
    NORMAL = "Normal"
    DRY = "Dry"
    OILY = "Oily"
    COMBINATION = "Combination"
    SENSITIVE = "Sensitive"
    MATURE = "Mature"


class Concern(str, enum.Enum):
    ACNE_PRONE = "Acne Prone"
    SIGNS_OF_AGING = "Signs of Aging"
    UNEVEN_SKIN_TONE = "Uneven Skin Tone"
    ENLARGED_PORES = "Enlarged Pores"
    LACK_OF_HYDRATION = "Lack of Hydration"
    DULLNESS = "Dullness"
    SUN_DAMAGE = "Sun Damage"
    ROSACEA = "Rosacea"
    ECZEMA = "Eczema"
    DAMAGED_SKIN_BARRIER = "Damaged Skin Barrier"
    TEXTURAL_IRREGULARITIES = "Textural Irregularities"
    DARK_CIRCLES = "Dark Circles"
    SCARRING = "Scarring"
    CONGESTED_SKIN = "Congested Skin"
    SUN_PROTECTION = "Sun Protection"
    GENTLE_PRODUCTS = "Looking for gentle products"


# Spellings the survey UI has shipped with
CONCERN_ALIASES: dict[str, Concern] = {
    "Exzema": Concern.ECZEMA,
    "Congested skin": Concern.CONGESTED_SKIN,
}


class ScarringType(str, enum.Enum):
    ICE_PICK = "Ice Pick"
    ROLLING = "Rolling"
    BOXCAR = "Boxcar"


class AcneType(str, enum.Enum):
    BLACKHEADS = "Blackheads"
    WHITEHEADS = "Whiteheads"
    PUSTULE = "Pustule"
    PAPULE = "Papule"
    CYSTIC = "Cystic"
    NODULE = "Nodule"
    FUNGAL = "Fungal"


class Complexion(str, enum.Enum):
    VERY_FAIR = "Very Fair"
    FAIR = "Fair"
    LIGHT = "Light"
    MEDIUM = "Medium"
    OLIVE = "Olive"
    DARK = "Dark"
    VERY_DARK = "Very Dark"


class Preference(str, enum.Enum):
    CHEMICALS = "Chemicals"
    VEGAN = "Vegan"
    PLANT_BASED = "Plant-Based"
    FRAGRANCE_FREE = "Fragrance-free"
    GLUTEN_FREE = "Gluten-Free"
    ALCOHOL_FREE = "Alcohol-Free"
    SILICONE_FREE = "Silicone-free"
    CRUELTY_FREE = "Cruelty-Free"


class SleepHours(str, enum.Enum):
    LESS_THAN_6 = "Less than 6"
    SIX_TO_SEVEN = "6-7"
    SEVEN_TO_EIGHT = "7-8"
    MORE_THAN_8 = "More than 8"


class StressLevel(str, enum.Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    VERY_HIGH = "Very High"


class ExerciseFrequency(str, enum.Enum):
    NEVER = "Never"
    ONE_TO_TWO = "1-2x/week"
    THREE_TO_FOUR = "3-4x/week"
    DAILY = "Daily"


class SkinCareTime(str, enum.Enum):
    LESS_THAN_5_MIN = "Less than 5 min"
    FIVE_TO_TEN_MIN = "5-10 min"
    TEN_TO_TWENTY_MIN = "10-20 min"
    MORE_THAN_20_MIN = "More than 20 min"


class ProductCategory(str, enum.Enum):
    CLEANSER = "Cleanser"
    TREATMENT = "Treatment"
    SERUM = "Serum"
    MOISTURIZER = "Moisturizer"
    SPF = "SPF"


class RoutineType(str, enum.Enum):
    BARRIER_REPAIR = "Gentle Barrier-Repair Routine"
    STREAMLINED = "Streamlined Essential Routine"
    INTENSIVE_HYDRATION = "Intensive Hydration Routine"
    BALANCING = "Balancing & Clarifying Routine"
    MULTI_ZONE = "Balanced Multi-Zone Routine"
    MAINTENANCE = "Maintenance & Prevention Routine"


# ── Survey input ─────────────────────────────────────────────────────────────


class Lifestyle(BaseModel):
    model_config = _MODEL_CONFIG

    sleep_hours: SleepHours = SleepHours.SEVEN_TO_EIGHT
    stress_level: StressLevel = StressLevel.MODERATE
    exercise: ExerciseFrequency = ExerciseFrequency.THREE_TO_FOUR
    skin_care_time: SkinCareTime = SkinCareTime.TEN_TO_TWENTY_MIN


class SurveyResponse(BaseModel):
    """One completed skin survey."""

    model_config = _MODEL_CONFIG

    skin_types: list[SkinType]
    concerns: list[Concern] = Field(default_factory=list)
    scarring_types: list[ScarringType] = Field(default_factory=list)
    acne_types: list[AcneType] = Field(default_factory=list)
    complexion: Optional[Complexion] = None
    allergens: list[str] = Field(default_factory=list)
    preferences: list[Preference] = Field(default_factory=list)
    lifestyle: Lifestyle = Field(default_factory=Lifestyle)

    @field_validator("skin_types")
    @classmethod
    def _skin_types_present(cls, value: list[SkinType]) -> list[SkinType]:
        if not value:
            raise ValueError("at least one skin type is required")
        return list(OrderedSet(value))

    @field_validator("concerns", mode="before")
    @classmethod
    def _resolve_concern_aliases(cls, value):
        if isinstance(value, (list, tuple)):
            return [CONCERN_ALIASES.get(item, item) if isinstance(item, str) else item for item in value]
        return value

    @field_validator("scarring_types", "acne_types", "preferences")
    @classmethod
    def _collapse_repeats(cls, value: list) -> list:
        return list(OrderedSet(value))

    @field_validator("allergens")
    @classmethod
    def _clean_allergens(cls, value: list[str]) -> list[str]:
        return [allergen.strip() for allergen in value if allergen.strip()]

    def has_skin_type(self, skin_type: SkinType) -> bool:
        return skin_type in self.skin_types

    def has_concern(self, concern: Concern) -> bool:
        return concern in self.concerns

    def has_preference(self, preference: Preference) -> bool:
        return preference in self.preferences


# ── Plan output ──────────────────────────────────────────────────────────────


class ProductRecommendation(BaseModel):
    """One product slot in the plan."""

    model_config = _MODEL_CONFIG

    category: ProductCategory
    name: str
    reason: str
    key_ingredients: list[str] = Field(default_factory=list)
    warning: Optional[str] = None


class RecommendationPlan(BaseModel):
    """Personalized plan built from a single survey response."""

    model_config = _MODEL_CONFIG

    routine_type: RoutineType
    routine_description: str
    priority_concerns: list[Concern] = Field(default_factory=list)
    key_ingredients: list[str] = Field(default_factory=list)
    avoid_ingredients: list[str] = Field(default_factory=list)
    lifestyle_advice: list[str] = Field(default_factory=list)
    recommended_products: list[ProductRecommendation] = Field(default_factory=list)


class ProfilePreferences(BaseModel):
    model_config = _MODEL_CONFIG

    cruelty_free: bool = False
    vegan: bool = False


class PersonalizationProfile(BaseModel):
    """Compact profile handed to downstream personalization."""

    model_config = _MODEL_CONFIG

    skin_type: SkinType = SkinType.NORMAL
    concerns: list[Concern] = Field(default_factory=list)
    sensitivities: list[str] = Field(default_factory=list)
    preferences: ProfilePreferences = Field(default_factory=ProfilePreferences)
    lifestyle: Lifestyle = Field(default_factory=Lifestyle)
