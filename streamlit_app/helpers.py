"""Utility helpers bridging the Streamlit UI and the plan engine.

Pure functions for formatting, label lookup and table construction.
"""

from __future__ import annotations

from datetime import date

import pandas as pd

from plan_engine.math.metrics import kg_to_pounds
from plan_engine.models.answer_record import AnswerRecord
from plan_engine.models.enums import (
    KCAL_PER_GRAM_CARB,
    KCAL_PER_GRAM_FAT,
    KCAL_PER_GRAM_PROTEIN,
    ActivityLevel,
    DietRestriction,
    Goal,
    WeightUnit,
)
from plan_engine.models.plan import NutritionTarget, Plan

# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------

GOAL_LABELS: dict[Goal, str] = {
    Goal.LOSE_WEIGHT: "Lose weight",
    Goal.BUILD_MUSCLE: "Build muscle",
    Goal.MAINTAIN: "Maintain",
    Goal.GET_TONED: "Get toned",
    Goal.IMPROVE_HEALTH: "Improve health",
}

ACTIVITY_LABELS: dict[ActivityLevel, str] = {
    ActivityLevel.SEDENTARY: "Sedentary",
    ActivityLevel.LIGHT: "Lightly",
    ActivityLevel.MODERATE: "Moderately",
    ActivityLevel.VERY_ACTIVE: "Very",
}

DIET_LABELS: dict[DietRestriction, str] = {
    DietRestriction.VEGAN: "Vegan",
    DietRestriction.VEGETARIAN: "Vegetarian",
    DietRestriction.KETO: "Keto",
    DietRestriction.LOW_CARB: "Low-carb",
    DietRestriction.HALAL: "Halal",
    DietRestriction.NONE: "No restrictions",
    DietRestriction.OTHER: "Other",
}

MEAL_COLORS: dict[str, str] = {
    "Breakfast": "#F9E79F",
    "Lunch": "#82E0AA",
    "Dinner": "#F5B041",
    "Snack": "#AED6F1",
    "Extra Snack": "#D7BDE2",
}

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_weight(value: float, unit: WeightUnit) -> str:
    """e.g. 70.0, KILOGRAM -> '70 kg'; 154.5, POUND -> '154.5 lbs'."""
    return f"{value:g} {unit.value}"


def format_weight_change(plan: Plan, unit: WeightUnit) -> str:
    """Distance to the target weight in the user's unit, e.g. '-5 kg'."""
    delta = plan.weight_to_goal_kg
    if delta is None:
        return "--"
    if unit == WeightUnit.POUND:
        delta = kg_to_pounds(delta)
    return f"{delta:+.1f} {unit.value}"


def format_calories(calories: int | None) -> str:
    if calories is None:
        return "--"
    return f"{calories} kcal"


def format_grams(grams: int | None) -> str:
    if grams is None:
        return "--"
    return f"{grams}g"


def format_date(value: date) -> str:
    """e.g. date(2026, 10, 26) -> 'Oct 26, 2026'."""
    return value.strftime("%b %d, %Y")


def goal_summary(record: AnswerRecord) -> str:
    """Intro sentence for the results page."""
    goal = GOAL_LABELS[record.goal].lower()
    target = format_weight(record.target_weight, record.weight_unit).replace(" ", "")
    return (
        f"Based on your goals to {goal}, we've created a customized plan "
        f"to help you reach your target weight of {target}."
    )


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


def meal_schedule_frame(plan: Plan) -> pd.DataFrame:
    """One row per meal: Meal, Food, Calories."""
    return pd.DataFrame(
        [
            {"Meal": m.label, "Food": m.food_description, "Calories": m.calories}
            for m in plan.meal_schedule
        ],
        columns=["Meal", "Food", "Calories"],
    )


def macro_breakdown_frame(nutrition: NutritionTarget) -> pd.DataFrame:
    """Grams and calories per macro, indexed by macro name."""
    grams = {
        "Protein": (nutrition.protein_grams, KCAL_PER_GRAM_PROTEIN),
        "Carbs": (nutrition.carb_grams, KCAL_PER_GRAM_CARB),
        "Fats": (nutrition.fat_grams, KCAL_PER_GRAM_FAT),
    }
    frame = pd.DataFrame(
        {
            "Grams": [g for g, _ in grams.values()],
            "Calories": [g * kcal for g, kcal in grams.values()],
        },
        index=pd.Index(list(grams.keys()), name="Macro"),
    )
    frame["Share"] = (frame["Calories"] / frame["Calories"].sum()).round(3)
    return frame
