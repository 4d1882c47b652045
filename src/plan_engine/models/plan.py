"""Plan models — the final output of the plan engine."""

from __future__ import annotations

from dataclasses import dataclass, field

from plan_engine.models.enums import CM_PER_METER, Goal


@dataclass(frozen=True)
class BodyMetrics:
    """Canonical-unit body measurements.

    ``bmi`` is None when it cannot be computed (non-positive height or a
    non-finite input). Callers must check before display.
    """

    weight_kg: float
    height_m: float
    bmi: float | None = None

    @property
    def height_cm(self) -> float:
        return self.height_m * CM_PER_METER

    @property
    def bmi_display(self) -> str:
        """BMI rounded to one decimal, or 'N/A' when undefined."""
        if self.bmi is None:
            return "N/A"
        return f"{self.bmi:.1f}"


@dataclass(frozen=True)
class NutritionTarget:
    """Daily calorie target and macro split in whole grams."""

    daily_calories: int
    protein_grams: int
    carb_grams: int
    fat_grams: int


@dataclass(frozen=True)
class WorkoutDay:
    """One day of the weekly schedule, taken verbatim from a template."""

    label: str
    focus: str
    exercises: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Meal:
    """One meal slot with its share of the daily calories.

    ``calories`` is None when the daily target itself is undefined.
    """

    label: str
    food_description: str
    calories: int | None = None


@dataclass(frozen=True)
class Plan:
    """Output of PlanEngine.derive(): metrics, nutrition and both schedules."""

    metrics: BodyMetrics
    nutrition: NutritionTarget | None
    workout_schedule: tuple[WorkoutDay, ...] = field(default_factory=tuple)
    meal_schedule: tuple[Meal, ...] = field(default_factory=tuple)

    # Goal context shown next to the numbers
    goal: Goal = Goal.MAINTAIN
    target_weight_kg: float | None = None
    timeline: str = "Not specified"

    @property
    def weight_to_goal_kg(self) -> float | None:
        """Signed distance to the target weight (negative = weight to lose)."""
        if self.target_weight_kg is None:
            return None
        return self.target_weight_kg - self.metrics.weight_kg

    @property
    def total_meal_calories(self) -> int | None:
        """Sum of per-meal calories; may differ from the daily target by rounding."""
        if any(m.calories is None for m in self.meal_schedule):
            return None
        return sum(m.calories for m in self.meal_schedule)  # type: ignore[misc]

    @property
    def workout_day_count(self) -> int:
        return len(self.workout_schedule)
