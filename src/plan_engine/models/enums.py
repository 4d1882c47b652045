"""Enumerations and physiological constants for the plan engine.

All formula coefficients cite their published source. Enum values are the
canonical answer tokens produced by the intake layer.
"""

from enum import Enum, IntEnum, auto


class WeightUnit(Enum):
    """Unit the weight and target weight answers are expressed in."""

    KILOGRAM = "kg"
    POUND = "lbs"


class HeightUnit(Enum):
    """Unit of the height answer.

    FEET_INCHES heights are always expressed as total inches by the time
    they reach the engine (5'10" arrives as 70).
    """

    CENTIMETER = "cm"
    FEET_INCHES = "ft-in"


class Gender(Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class Goal(Enum):
    """Primary goal picked in the questionnaire."""

    LOSE_WEIGHT = "lose-weight"
    BUILD_MUSCLE = "build-muscle"
    MAINTAIN = "maintain"
    GET_TONED = "get-toned"
    IMPROVE_HEALTH = "improve-health"


class WorkoutPreference(Enum):
    """Workout styles the user enjoys (multi-select)."""

    STRENGTH = "strength"
    CARDIO = "cardio"
    HIIT = "hiit"
    PILATES = "pilates"
    YOGA = "yoga"
    CALISTHENICS = "calisthenics"
    HOME = "home"
    GYM = "gym"
    MIX = "mix"


class GymAccess(Enum):
    FULL = "full"
    NONE = "none"
    LIMITED = "limited"


class ActivityLevel(Enum):
    """Day-to-day activity outside of planned workouts, least to most active."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    VERY_ACTIVE = "very-active"


class DietRestriction(Enum):
    VEGAN = "vegan"
    VEGETARIAN = "vegetarian"
    KETO = "keto"
    LOW_CARB = "low-carb"
    HALAL = "halal"
    NONE = "none"
    OTHER = "other"


class DayBracket(IntEnum):
    """Workout frequency bracket used to key the workout template catalog."""

    UP_TO_THREE = auto()
    FOUR_PLUS = auto()


class AccessTier(IntEnum):
    """Equipment tier used to key the workout template catalog.

    Only a full gym unlocks the barbell/machine templates; limited
    equipment is treated the same as none.
    """

    FULL_GYM = auto()
    BODYWEIGHT = auto()


# ---------------------------------------------------------------------------
# Unit conversion
# ---------------------------------------------------------------------------
POUNDS_TO_KG = 0.453592
INCHES_TO_METERS = 0.0254
CM_PER_METER = 100.0

# Highest bracket offered for meals per day; 7 stands for "7+"
MEALS_PER_DAY_SEVEN_PLUS = 7

MIN_WORKOUT_DAYS = 1
MAX_WORKOUT_DAYS = 7

# Day-count threshold between the short and long workout templates
SHORT_TEMPLATE_MAX_DAYS = 3

# ---------------------------------------------------------------------------
# Basal metabolic rate: Mifflin et al. (1990), Am J Clin Nutr 51(2):241-247
# ---------------------------------------------------------------------------
BMR_WEIGHT_COEFFICIENT = 10.0
BMR_HEIGHT_COEFFICIENT = 6.25
BMR_AGE_COEFFICIENT = 5.0
BMR_MALE_OFFSET = 5.0
BMR_FEMALE_OFFSET = -161.0  # also used for "other"

# Activity factors: McArdle, Katch & Katch, Exercise Physiology
ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
}

# Energy balance adjustments applied to TDEE
WEIGHT_LOSS_CALORIE_FACTOR = 0.8  # 20% deficit
MUSCLE_GAIN_CALORIE_FACTOR = 1.1  # 10% surplus

# Atwater general factors (kcal per gram)
KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_CARB = 4
KCAL_PER_GRAM_FAT = 9

# Macro split as (protein, carb, fat) fractions of daily calories
MACRO_SPLITS = {
    Goal.LOSE_WEIGHT: (0.40, 0.30, 0.30),
    Goal.BUILD_MUSCLE: (0.30, 0.50, 0.20),
}
DEFAULT_MACRO_SPLIT = (0.25, 0.50, 0.25)

# ---------------------------------------------------------------------------
# Meal plan
# ---------------------------------------------------------------------------
# Meals per day at or below this returns only the three main meals
MAIN_MEALS_ONLY_MAX = 3
# Meals per day at or above this adds the extra snack
EXTRA_SNACK_MIN_MEALS = 5
EXTRA_SNACK_CALORIE_SHARE = 0.10

# Days until the first accountability check-in
CHECK_IN_INTERVAL_DAYS = 7
