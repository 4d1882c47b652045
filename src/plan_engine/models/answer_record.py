"""Frozen answer record — immutable snapshot of one completed questionnaire."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from plan_engine.models.enums import (
    ActivityLevel,
    DietRestriction,
    Gender,
    Goal,
    GymAccess,
    HeightUnit,
    WeightUnit,
    WorkoutPreference,
)


@dataclass(frozen=True)
class AnswerRecord:
    """Validated questionnaire answers.

    This is the sole input to PlanEngine.derive(). The intake layer
    guarantees every constraint (positive numbers, day and meal ranges,
    a non-empty preference set) before constructing one. Freezing
    prevents the engine from mutating answers.
    """

    # Body
    weight: float
    height: float
    age: int
    gender: Gender

    # Goal
    goal: Goal
    target_weight: float  # same unit as weight

    # Training
    workout_preferences: frozenset[WorkoutPreference]
    workout_days_per_week: int  # 1-7
    gym_access: GymAccess
    activity_level: ActivityLevel

    # Nutrition
    diet_restriction: DietRestriction
    meals_per_day: int  # 1-7, where 7 means "7+"

    # Contact
    biggest_struggle: str
    email: str

    weight_unit: WeightUnit = WeightUnit.KILOGRAM
    height_unit: HeightUnit = HeightUnit.CENTIMETER
    goal_date: date | None = None
    goal_timeframe: str | None = None
    other_diet_details: str | None = None
    want_coaching: bool = False

    @property
    def sorted_preferences(self) -> tuple[WorkoutPreference, ...]:
        """Preferences in a stable order, for display and serialization."""
        return tuple(sorted(self.workout_preferences, key=lambda p: p.value))
