"""Energy expenditure and macro targets.

References:
    - Mifflin et al. (1990): resting energy expenditure equation
    - McArdle, Katch & Katch: activity factors for TDEE
    - Atwater general factors: 4/4/9 kcal per gram
"""

from __future__ import annotations

import math

from plan_engine.models.enums import (
    ACTIVITY_MULTIPLIERS,
    BMR_AGE_COEFFICIENT,
    BMR_FEMALE_OFFSET,
    BMR_HEIGHT_COEFFICIENT,
    BMR_MALE_OFFSET,
    BMR_WEIGHT_COEFFICIENT,
    DEFAULT_MACRO_SPLIT,
    KCAL_PER_GRAM_CARB,
    KCAL_PER_GRAM_FAT,
    KCAL_PER_GRAM_PROTEIN,
    MACRO_SPLITS,
    MUSCLE_GAIN_CALORIE_FACTOR,
    WEIGHT_LOSS_CALORIE_FACTOR,
    ActivityLevel,
    Gender,
    Goal,
)
from plan_engine.models.plan import NutritionTarget


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up.

    Python's round() uses banker's rounding (2.5 -> 2); calorie and gram
    targets always round halves up.
    """
    return math.floor(value + 0.5)


def calculate_bmr(age: int, gender: Gender, weight_kg: float, height_cm: float) -> float:
    """Basal metabolic rate in kcal/day (Mifflin-St Jeor).

    male:          10·kg + 6.25·cm − 5·age + 5
    female/other:  10·kg + 6.25·cm − 5·age − 161
    """
    offset = BMR_MALE_OFFSET if gender == Gender.MALE else BMR_FEMALE_OFFSET
    return (
        BMR_WEIGHT_COEFFICIENT * weight_kg
        + BMR_HEIGHT_COEFFICIENT * height_cm
        - BMR_AGE_COEFFICIENT * age
        + offset
    )


def calculate_tdee(bmr: float, activity_level: ActivityLevel) -> int:
    """Total daily energy expenditure, rounded to whole kcal."""
    return round_half_up(bmr * ACTIVITY_MULTIPLIERS[activity_level])


def goal_adjusted_calories(tdee: int, goal: Goal) -> int:
    """Apply the goal's deficit or surplus to TDEE."""
    if goal == Goal.LOSE_WEIGHT:
        return round_half_up(tdee * WEIGHT_LOSS_CALORIE_FACTOR)
    if goal == Goal.BUILD_MUSCLE:
        return round_half_up(tdee * MUSCLE_GAIN_CALORIE_FACTOR)
    return tdee


def macro_split(goal: Goal) -> tuple[float, float, float]:
    """(protein, carb, fat) calorie fractions for a goal."""
    return MACRO_SPLITS.get(goal, DEFAULT_MACRO_SPLIT)


def calculate_macros(daily_calories: int, goal: Goal) -> tuple[int, int, int]:
    """Convert the goal's calorie split to whole grams.

    Each macro is rounded independently, so the grams converted back to
    calories need not add up to ``daily_calories`` exactly.
    """
    protein_pct, carb_pct, fat_pct = macro_split(goal)
    protein = round_half_up(daily_calories * protein_pct / KCAL_PER_GRAM_PROTEIN)
    carbs = round_half_up(daily_calories * carb_pct / KCAL_PER_GRAM_CARB)
    fats = round_half_up(daily_calories * fat_pct / KCAL_PER_GRAM_FAT)
    return protein, carbs, fats


def compute_nutrition(
    age: int,
    gender: Gender,
    weight_kg: float,
    height_cm: float,
    activity_level: ActivityLevel,
    goal: Goal,
) -> NutritionTarget:
    """Derive the daily calorie target and macro grams.

    Args:
        age: Age in years.
        gender: MALE uses the +5 offset; FEMALE and OTHER use −161.
        weight_kg: Body weight in kilograms.
        height_cm: Height in centimeters.
        activity_level: Selects the TDEE multiplier.
        goal: Selects the calorie adjustment and macro split.

    Returns:
        NutritionTarget with integer calories and grams.
    """
    bmr = calculate_bmr(age, gender, weight_kg, height_cm)
    tdee = calculate_tdee(bmr, activity_level)
    daily_calories = goal_adjusted_calories(tdee, goal)
    protein, carbs, fats = calculate_macros(daily_calories, goal)
    return NutritionTarget(
        daily_calories=daily_calories,
        protein_grams=protein,
        carb_grams=carbs,
        fat_grams=fats,
    )
