"""Data models for the plan engine."""

from plan_engine.models.answer_record import AnswerRecord
from plan_engine.models.enums import (
    AccessTier,
    ActivityLevel,
    DayBracket,
    DietRestriction,
    Gender,
    Goal,
    GymAccess,
    HeightUnit,
    WeightUnit,
    WorkoutPreference,
)
from plan_engine.models.plan import (
    BodyMetrics,
    Meal,
    NutritionTarget,
    Plan,
    WorkoutDay,
)

__all__ = [
    "AccessTier",
    "ActivityLevel",
    "AnswerRecord",
    "BodyMetrics",
    "DayBracket",
    "DietRestriction",
    "Gender",
    "Goal",
    "GymAccess",
    "HeightUnit",
    "Meal",
    "NutritionTarget",
    "Plan",
    "WeightUnit",
    "WorkoutDay",
    "WorkoutPreference",
]
