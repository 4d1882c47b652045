"""Meal templates — four fixed meal slots per diet with their calorie shares."""

from __future__ import annotations

from dataclasses import dataclass

from plan_engine.models.enums import EXTRA_SNACK_CALORIE_SHARE, DietRestriction


@dataclass(frozen=True)
class MealTemplate:
    """A meal slot before calories are assigned.

    Attributes:
        label: Slot name (Breakfast, Lunch, Dinner, Snack).
        food_description: The suggested food for this slot.
        calorie_share: Fraction of the daily calorie target.
    """

    label: str
    food_description: str
    calorie_share: float


DEFAULT_MEALS: tuple[MealTemplate, ...] = (
    MealTemplate("Breakfast", "Oatmeal with Protein Powder and Fruit", 0.25),
    MealTemplate("Lunch", "Turkey and Avocado Sandwich with Side Salad", 0.30),
    MealTemplate("Dinner", "Grilled Chicken with Sweet Potato and Vegetables", 0.30),
    MealTemplate("Snack", "Greek Yogurt with Honey and Nuts", 0.15),
)

MEAL_TEMPLATES: dict[DietRestriction, tuple[MealTemplate, ...]] = {
    DietRestriction.VEGAN: (
        MealTemplate("Breakfast", "Tofu Scramble with Vegetables and Whole Grain Toast", 0.25),
        MealTemplate("Lunch", "Quinoa Bowl with Roasted Vegetables and Chickpeas", 0.30),
        MealTemplate("Dinner", "Lentil Pasta with Vegetable Marinara Sauce", 0.30),
        MealTemplate("Snack", "Apple with Almond Butter", 0.15),
    ),
    DietRestriction.VEGETARIAN: (
        MealTemplate("Breakfast", "Greek Yogurt with Berries and Granola", 0.25),
        MealTemplate("Lunch", "Vegetable and Cheese Wrap with Side Salad", 0.30),
        MealTemplate("Dinner", "Vegetable Stir Fry with Tofu and Brown Rice", 0.30),
        MealTemplate("Snack", "Cottage Cheese with Fruit", 0.15),
    ),
    # Keto shifts calories out of the snack into breakfast
    DietRestriction.KETO: (
        MealTemplate("Breakfast", "Avocado and Bacon Omelette", 0.30),
        MealTemplate("Lunch", "Chicken Caesar Salad (no croutons)", 0.30),
        MealTemplate("Dinner", "Salmon with Asparagus and Butter Sauce", 0.30),
        MealTemplate("Snack", "Cheese and Nuts", 0.10),
    ),
    DietRestriction.LOW_CARB: (
        MealTemplate("Breakfast", "Protein Smoothie with Berries and Almond Milk", 0.25),
        MealTemplate("Lunch", "Grilled Chicken Salad with Olive Oil Dressing", 0.30),
        MealTemplate("Dinner", "Beef Stir Fry with Vegetables (no rice)", 0.30),
        MealTemplate("Snack", "Hard-boiled Eggs and Vegetables", 0.15),
    ),
    DietRestriction.NONE: DEFAULT_MEALS,
    # HALAL and OTHER fall back to DEFAULT_MEALS
}

EXTRA_SNACK = MealTemplate("Extra Snack", "Protein Bar or Shake", EXTRA_SNACK_CALORIE_SHARE)


def get_template(diet_restriction: DietRestriction) -> tuple[MealTemplate, ...]:
    """Look up the four-slot template for a diet, defaulting to DEFAULT_MEALS."""
    return MEAL_TEMPLATES.get(diet_restriction, DEFAULT_MEALS)
