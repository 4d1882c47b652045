"""Tests for meal plan selection and calorie allocation."""

from __future__ import annotations

import pytest

from plan_engine.models.enums import DietRestriction
from plan_engine.selectors.meal import select_meal_plan
from plan_engine.selectors.meal_templates import DEFAULT_MEALS, MEAL_TEMPLATES, get_template


class TestMealTemplates:
    def test_every_template_has_four_slots(self) -> None:
        for template in MEAL_TEMPLATES.values():
            assert [m.label for m in template] == ["Breakfast", "Lunch", "Dinner", "Snack"]

    def test_shares_sum_to_one(self) -> None:
        for template in MEAL_TEMPLATES.values():
            assert sum(m.calorie_share for m in template) == pytest.approx(1.0)

    @pytest.mark.parametrize("diet", [DietRestriction.HALAL, DietRestriction.OTHER])
    def test_unmatched_diets_use_default(self, diet: DietRestriction) -> None:
        assert get_template(diet) is DEFAULT_MEALS


class TestSelectMealPlan:
    @pytest.mark.parametrize("meals_per_day,expected", [
        (1, 3), (2, 3), (3, 3), (4, 4), (5, 5), (6, 5), (7, 5),
    ])
    def test_meal_count(self, meals_per_day: int, expected: int) -> None:
        meals = select_meal_plan(DietRestriction.VEGAN, meals_per_day, 2000)
        assert len(meals) == expected

    def test_three_or_fewer_keeps_main_meals(self) -> None:
        """The snack is dropped, never a main meal."""
        meals = select_meal_plan(DietRestriction.VEGETARIAN, 2, 2000)
        assert [m.label for m in meals] == ["Breakfast", "Lunch", "Dinner"]

    def test_keto_six_meals(self) -> None:
        meals = select_meal_plan(DietRestriction.KETO, 6, 2045)
        assert len(meals) == 5
        assert meals[-1].label == "Extra Snack"
        assert meals[-1].food_description == "Protein Bar or Shake"
        # round(2045 * 0.1) = round(204.5) = 205
        assert meals[-1].calories == 205
        assert meals[0].food_description == "Avocado and Bacon Omelette"
        assert meals[0].calories == 614  # round(613.5)

    def test_calories_per_share(self) -> None:
        meals = select_meal_plan(DietRestriction.NONE, 4, 2000)
        assert [m.calories for m in meals] == [500, 600, 600, 300]

    def test_halal_falls_back_to_default_foods(self) -> None:
        meals = select_meal_plan(DietRestriction.HALAL, 4, 2000)
        assert [m.food_description for m in meals] == [t.food_description for t in DEFAULT_MEALS]

    def test_undefined_calories_propagate(self) -> None:
        meals = select_meal_plan(DietRestriction.LOW_CARB, 5, None)
        assert len(meals) == 5
        assert all(m.calories is None for m in meals)

    def test_total_close_to_target(self) -> None:
        """Per-meal rounding drifts the total by at most a couple of kcal."""
        meals = select_meal_plan(DietRestriction.VEGAN, 4, 2129)
        assert abs(sum(m.calories for m in meals) - 2129) <= 2
