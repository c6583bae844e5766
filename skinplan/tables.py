"""
Static rule data shared by the plan stages.

Everything here is read-only: mappings are wrapped in MappingProxyType and
sequences are tuples. Product entries are copied before they go into a plan.
"""

from types import MappingProxyType

from skinplan.schemas import (
    Concern,
    Preference,
    ProductCategory,
    ProductRecommendation,
    RoutineType,
    SkinType,
)

PRIORITY_CONCERN_COUNT = 3
KEY_INGREDIENT_LIMIT = 6
INGREDIENTS_PER_CONCERN = 2
PRODUCT_LIMIT = 6


# ── Routine descriptions ─────────────────────────────────────────────────────

ROUTINE_DESCRIPTIONS = MappingProxyType({
    RoutineType.BARRIER_REPAIR: (
        "Your sensitive skin needs a minimal, soothing routine that focuses on "
        "strengthening your skin barrier and avoiding irritation."
    ),
    RoutineType.STREAMLINED: (
        "A simplified routine with multi-tasking products that deliver results "
        "without taking too much time."
    ),
    RoutineType.INTENSIVE_HYDRATION: (
        "Your dry skin needs deep hydration and moisture-locking ingredients to "
        "maintain a healthy barrier."
    ),
    RoutineType.BALANCING: (
        "Control excess oil while maintaining hydration with lightweight, "
        "non-comedogenic products."
    ),
    RoutineType.MULTI_ZONE: (
        "Address different needs across your face with targeted treatments for "
        "combination skin."
    ),
    RoutineType.MAINTENANCE: (
        "Keep your skin healthy and address specific concerns with a well-rounded routine."
    ),
})


# ── Ingredients ──────────────────────────────────────────────────────────────

# Ranked best-first; only the head of each row feeds the plan
CONCERN_INGREDIENTS = MappingProxyType({
    Concern.ACNE_PRONE: ("Salicylic Acid", "Niacinamide", "Benzoyl Peroxide", "Tea Tree Oil"),
    Concern.SIGNS_OF_AGING: ("Retinol", "Peptides", "Vitamin C", "Hyaluronic Acid"),
    Concern.UNEVEN_SKIN_TONE: ("Vitamin C", "Alpha Arbutin", "Kojic Acid", "Niacinamide"),
    Concern.ENLARGED_PORES: ("Niacinamide", "Salicylic Acid", "Retinol"),
    Concern.LACK_OF_HYDRATION: ("Hyaluronic Acid", "Glycerin", "Ceramides", "Squalane"),
    Concern.DULLNESS: ("Vitamin C", "AHA", "Niacinamide", "Vitamin E"),
    Concern.SUN_DAMAGE: ("Vitamin C", "Retinol", "Niacinamide", "SPF 50+"),
    Concern.ROSACEA: ("Centella Asiatica", "Azelaic Acid", "Niacinamide", "Green Tea Extract"),
    Concern.ECZEMA: ("Colloidal Oatmeal", "Ceramides", "Shea Butter", "Centella Asiatica"),
    Concern.DAMAGED_SKIN_BARRIER: ("Ceramides", "Centella Asiatica", "Panthenol", "Squalane"),
    Concern.TEXTURAL_IRREGULARITIES: ("AHA", "BHA", "Retinol", "Niacinamide"),
    Concern.DARK_CIRCLES: ("Caffeine", "Vitamin K", "Peptides", "Hyaluronic Acid"),
    Concern.SCARRING: ("Niacinamide", "Vitamin C", "Retinol", "Alpha Arbutin"),
    Concern.CONGESTED_SKIN: ("Salicylic Acid", "Niacinamide", "Clay", "AHA"),
})

# Checked in this order, after the concern rows
SKIN_TYPE_INGREDIENTS = (
    (SkinType.DRY, ("Hyaluronic Acid", "Ceramides")),
    (SkinType.OILY, ("Niacinamide", "Salicylic Acid")),
    (SkinType.SENSITIVE, ("Centella Asiatica", "Panthenol")),
)

PREFERENCE_EXCLUSIONS = (
    (Preference.FRAGRANCE_FREE, ("Fragrance", "Essential Oils")),
    (Preference.ALCOHOL_FREE, ("Alcohol Denat.",)),
    (Preference.SILICONE_FREE, ("Dimethicone", "Cyclopentasiloxane")),
)


# ── Lifestyle advice ─────────────────────────────────────────────────────────

SLEEP_ADVICE = "💤 Prioritize sleep: Aim for 7-8 hours to allow skin repair and regeneration"
STRESS_ADVICE = "🧘 Manage stress: High stress can trigger inflammation and breakouts"
ACTIVITY_ADVICE = "🏃 Increase activity: Exercise improves circulation and skin health"
MULTITASK_ADVICE = "⏰ Consider multi-tasking products to maximize your limited skincare time"
HYDRATION_ADVICE = "💧 Stay hydrated: Drink 8 glasses of water daily for skin health"
SPF_ADVICE = "☀️ Never skip SPF: Daily sun protection is essential for all skin types"

ALWAYS_ADVICE = (HYDRATION_ADVICE, SPF_ADVICE)


# ── Product catalog ──────────────────────────────────────────────────────────

GENTLE_HYDRATING_CLEANSER = ProductRecommendation(
    category=ProductCategory.CLEANSER,
    name="Gentle Hydrating Cleanser",
    reason="Non-stripping formula that cleanses without disrupting your skin barrier",
    key_ingredients=["Glycerin", "Ceramides", "Panthenol"],
)
SALICYLIC_FOAMING_CLEANSER = ProductRecommendation(
    category=ProductCategory.CLEANSER,
    name="Foaming Salicylic Acid Cleanser",
    reason="Gently exfoliates and unclogs pores while controlling oil",
    key_ingredients=["Salicylic Acid 2%", "Niacinamide", "Zinc"],
)
BALANCED_GEL_CLEANSER = ProductRecommendation(
    category=ProductCategory.CLEANSER,
    name="Balanced pH Gel Cleanser",
    reason="Maintains skin's natural pH while effectively removing impurities",
    key_ingredients=["Glycerin", "Allantoin", "Green Tea"],
)

NIACINAMIDE_ZINC_SERUM = ProductRecommendation(
    category=ProductCategory.TREATMENT,
    name="Niacinamide 10% + Zinc Serum",
    reason="Reduces inflammation, controls oil, and minimizes pores",
    key_ingredients=["Niacinamide 10%", "Zinc PCA"],
)
RETINOL_NIGHT_SERUM = ProductRecommendation(
    category=ProductCategory.TREATMENT,
    name="Retinol 0.5% Night Serum",
    reason="Reduces fine lines, improves texture, and boosts collagen",
    key_ingredients=["Retinol 0.5%", "Peptides", "Squalane"],
)
VITAMIN_C_SERUM = ProductRecommendation(
    category=ProductCategory.SERUM,
    name="Vitamin C 15% Brightening Serum",
    reason="Fades dark spots and brightens overall complexion",
    key_ingredients=["Vitamin C 15%", "Ferulic Acid", "Vitamin E"],
)
HYALURONIC_B5_SERUM = ProductRecommendation(
    category=ProductCategory.SERUM,
    name="Hyaluronic Acid + B5 Serum",
    reason="Deeply hydrates and plumps skin with multi-weight HA",
    key_ingredients=["Hyaluronic Acid", "Vitamin B5", "Glycerin"],
)
ALPHA_ARBUTIN_TREATMENT = ProductRecommendation(
    category=ProductCategory.TREATMENT,
    name="Alpha Arbutin 2% + HA",
    reason="Fades post-acne marks and evens skin tone gently",
    key_ingredients=["Alpha Arbutin 2%", "Hyaluronic Acid", "Kojic Acid"],
)

RICH_CERAMIDE_CREAM = ProductRecommendation(
    category=ProductCategory.MOISTURIZER,
    name="Rich Ceramide Barrier Cream",
    reason="Locks in moisture and repairs your skin barrier overnight",
    key_ingredients=["Ceramides", "Shea Butter", "Squalane"],
)
LIGHTWEIGHT_GEL_MOISTURIZER = ProductRecommendation(
    category=ProductCategory.MOISTURIZER,
    name="Lightweight Gel Moisturizer",
    reason="Hydrates without adding shine or clogging pores",
    key_ingredients=["Hyaluronic Acid", "Niacinamide", "Aloe Vera"],
)
BALANCED_DAILY_MOISTURIZER = ProductRecommendation(
    category=ProductCategory.MOISTURIZER,
    name="Balanced Daily Moisturizer",
    reason="Provides optimal hydration for your skin type",
    key_ingredients=["Ceramides", "Niacinamide", "Peptides"],
)

BROAD_SPECTRUM_SPF = ProductRecommendation(
    category=ProductCategory.SPF,
    name="Broad Spectrum SPF 50+ Sunscreen",
    reason="Essential daily protection against UV damage and premature aging",
    key_ingredients=["Zinc Oxide", "Niacinamide", "Antioxidants"],
    warning="Apply every morning as your final step!",
)
