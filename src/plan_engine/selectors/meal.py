"""Meal plan selector: diet template lookup, meal-count adjustment, calorie shares."""

from __future__ import annotations

from plan_engine.math.nutrition import round_half_up
from plan_engine.models.enums import (
    EXTRA_SNACK_MIN_MEALS,
    MAIN_MEALS_ONLY_MAX,
    DietRestriction,
)
from plan_engine.models.plan import Meal
from plan_engine.selectors.meal_templates import EXTRA_SNACK, MealTemplate, get_template


def _to_meal(template: MealTemplate, daily_calories: int | None) -> Meal:
    calories = None
    if daily_calories is not None:
        calories = round_half_up(daily_calories * template.calorie_share)
    return Meal(
        label=template.label,
        food_description=template.food_description,
        calories=calories,
    )


def select_meal_plan(
    diet_restriction: DietRestriction,
    meals_per_day: int,
    daily_calories: int | None,
) -> tuple[Meal, ...]:
    """Build the day's meals with their calorie allocations.

    Args:
        diet_restriction: Picks the template; unmatched diets use the default.
        meals_per_day: ≤3 keeps Breakfast/Lunch/Dinner only, ≥5 adds an
            extra snack, 4 keeps the template as is.
        daily_calories: Target to distribute, or None when undefined.

    Returns:
        3, 4 or 5 meals. Each calorie value is rounded on its own, so the
        total can differ slightly from ``daily_calories``.
    """
    slots = get_template(diet_restriction)
    if meals_per_day <= MAIN_MEALS_ONLY_MAX:
        slots = slots[:3]
    elif meals_per_day >= EXTRA_SNACK_MIN_MEALS:
        slots = slots + (EXTRA_SNACK,)
    return tuple(_to_meal(slot, daily_calories) for slot in slots)
