"""PlanEngine — the orchestrator that derives a Plan from an AnswerRecord."""

from __future__ import annotations

import logging
import math
from datetime import date

from plan_engine.math.metrics import compute_metrics, weight_to_kg
from plan_engine.math.nutrition import calculate_bmr, compute_nutrition
from plan_engine.models.answer_record import AnswerRecord
from plan_engine.models.plan import (
    BodyMetrics,
    Meal,
    NutritionTarget,
    Plan,
    WorkoutDay,
)
from plan_engine.selectors.meal import select_meal_plan
from plan_engine.selectors.workout import select_workout_plan

logger = logging.getLogger(__name__)

TIMELINE_NOT_SPECIFIED = "Not specified"


def format_timeline(goal_date: date | None, goal_timeframe: str | None) -> str:
    """Goal date if given, else the free-text timeframe, else 'Not specified'."""
    if goal_date is not None:
        return goal_date.isoformat()
    if goal_timeframe and goal_timeframe.strip():
        return goal_timeframe.strip()
    return TIMELINE_NOT_SPECIFIED


class PlanEngine:
    """Composes the metrics, nutrition, workout and meal calculators.

    The engine holds no state; one instance can derive any number of
    plans, from any thread.

    Usage:
        engine = PlanEngine()
        plan = engine.derive(record)
    """

    def derive(self, record: AnswerRecord) -> Plan:
        """Derive the full plan for one completed questionnaire.

        Args:
            record: Validated, frozen answers.

        Returns:
            A Plan. Undefined values (BMI, nutrition, meal calories) are
            None; the plan itself is always produced.
        """
        metrics = self.derive_metrics(record)
        nutrition = self.derive_nutrition(record, metrics)
        workouts = self.select_workout_plan(record)
        daily_calories = nutrition.daily_calories if nutrition is not None else None
        meals = self.select_meal_plan(record, daily_calories)

        return Plan(
            metrics=metrics,
            nutrition=nutrition,
            workout_schedule=workouts,
            meal_schedule=meals,
            goal=record.goal,
            target_weight_kg=weight_to_kg(record.target_weight, record.weight_unit),
            timeline=format_timeline(record.goal_date, record.goal_timeframe),
        )

    def derive_metrics(self, record: AnswerRecord) -> BodyMetrics:
        metrics = compute_metrics(
            record.weight, record.weight_unit, record.height, record.height_unit
        )
        if metrics.bmi is None:
            logger.warning(
                "BMI undefined for height %s %s", record.height, record.height_unit.value
            )
        return metrics

    def derive_nutrition(
        self, record: AnswerRecord, metrics: BodyMetrics
    ) -> NutritionTarget | None:
        """Calorie and macro targets, or None when the inputs cannot support them.

        Each value is undefined on its own: an undefined BMI does not stop
        the calorie target. Nutrition is None only when the estimated BMR
        is not a positive finite number.
        """
        bmr = calculate_bmr(record.age, record.gender, metrics.weight_kg, metrics.height_cm)
        if not math.isfinite(bmr) or bmr <= 0:
            logger.warning("BMR %.1f is not usable, nutrition left undefined", bmr)
            return None
        return compute_nutrition(
            age=record.age,
            gender=record.gender,
            weight_kg=metrics.weight_kg,
            height_cm=metrics.height_cm,
            activity_level=record.activity_level,
            goal=record.goal,
        )

    def select_workout_plan(self, record: AnswerRecord) -> tuple[WorkoutDay, ...]:
        days = select_workout_plan(
            record.goal,
            record.workout_days_per_week,
            record.gym_access,
            record.workout_preferences,
        )
        logger.debug(
            "Selected %d workout days for goal=%s days=%d gym=%s",
            len(days),
            record.goal.value,
            record.workout_days_per_week,
            record.gym_access.value,
        )
        return days

    def select_meal_plan(
        self, record: AnswerRecord, daily_calories: int | None
    ) -> tuple[Meal, ...]:
        meals = select_meal_plan(record.diet_restriction, record.meals_per_day, daily_calories)
        logger.debug(
            "Selected %d meals for diet=%s meals_per_day=%d",
            len(meals),
            record.diet_restriction.value,
            record.meals_per_day,
        )
        return meals
