"""JSON serialization for Plan objects.

Converts an internal Plan into a JSON-compatible dict for downloads and the
command-line tool. All functions are pure (no I/O).
"""

from __future__ import annotations

import json

from plan_engine.models.plan import BodyMetrics, Meal, NutritionTarget, Plan, WorkoutDay

# BMI is rounded for export; the Plan keeps full precision.
_BMI_DECIMALS = 1
_WEIGHT_DECIMALS = 2
_HEIGHT_DECIMALS = 4


def to_plan_dict(plan: Plan) -> dict:
    """Convert a Plan to a JSON-compatible dict."""
    return {
        "goal": plan.goal.value,
        "timeline": plan.timeline,
        "targetWeightKg": _round_or_none(plan.target_weight_kg, _WEIGHT_DECIMALS),
        "weightToGoalKg": _round_or_none(plan.weight_to_goal_kg, _WEIGHT_DECIMALS),
        "metrics": _convert_metrics(plan.metrics),
        "nutrition": _convert_nutrition(plan.nutrition),
        "workoutSchedule": [_convert_workout_day(d) for d in plan.workout_schedule],
        "mealSchedule": [_convert_meal(m) for m in plan.meal_schedule],
    }


def to_plan_json_string(plan: Plan, indent: int | None = 2) -> str:
    """Convert a Plan to a JSON string (single line when indent is None)."""
    return json.dumps(to_plan_dict(plan), indent=indent)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _round_or_none(value: float | None, digits: int) -> float | None:
    if value is None:
        return None
    return round(value, digits)


def _convert_metrics(metrics: BodyMetrics) -> dict:
    return {
        "bmi": _round_or_none(metrics.bmi, _BMI_DECIMALS),
        "weightKg": round(metrics.weight_kg, _WEIGHT_DECIMALS),
        "heightM": round(metrics.height_m, _HEIGHT_DECIMALS),
    }


def _convert_nutrition(nutrition: NutritionTarget | None) -> dict | None:
    if nutrition is None:
        return None
    return {
        "dailyCalories": nutrition.daily_calories,
        "proteinGrams": nutrition.protein_grams,
        "carbGrams": nutrition.carb_grams,
        "fatGrams": nutrition.fat_grams,
    }


def _convert_workout_day(day: WorkoutDay) -> dict:
    return {
        "label": day.label,
        "focus": day.focus,
        "exercises": list(day.exercises),
    }


def _convert_meal(meal: Meal) -> dict:
    return {
        "label": meal.label,
        "food": meal.food_description,
        "calories": meal.calories,
    }
