"""Tests for Plan JSON export."""

from __future__ import annotations

import json
from typing import Callable

from plan_engine.engine import PlanEngine
from plan_engine.models.answer_record import AnswerRecord
from plan_engine.serialization import to_plan_dict, to_plan_json_string


class TestPlanDict:
    def test_top_level_keys(self, lose_weight_record: AnswerRecord) -> None:
        result = to_plan_dict(PlanEngine().derive(lose_weight_record))
        assert set(result) == {
            "goal",
            "timeline",
            "targetWeightKg",
            "weightToGoalKg",
            "metrics",
            "nutrition",
            "workoutSchedule",
            "mealSchedule",
        }

    def test_values(self, lose_weight_record: AnswerRecord) -> None:
        result = to_plan_dict(PlanEngine().derive(lose_weight_record))
        assert result["goal"] == "lose-weight"
        assert result["timeline"] == "2027-03-01"
        assert result["weightToGoalKg"] == -5.0
        assert result["metrics"] == {"bmi": 22.9, "weightKg": 70.0, "heightM": 1.75}
        assert result["nutrition"] == {
            "dailyCalories": 2045,
            "proteinGrams": 205,
            "carbGrams": 153,
            "fatGrams": 68,
        }

    def test_schedules(self, lose_weight_record: AnswerRecord) -> None:
        result = to_plan_dict(PlanEngine().derive(lose_weight_record))
        first_day = result["workoutSchedule"][0]
        assert first_day["label"] == "Day 1"
        assert isinstance(first_day["exercises"], list)
        assert result["mealSchedule"][0] == {
            "label": "Breakfast",
            "food": "Oatmeal with Protein Powder and Fruit",
            "calories": 511,
        }

    def test_undefined_bmi_becomes_null(
        self, record_factory: Callable[..., AnswerRecord]
    ) -> None:
        result = to_plan_dict(PlanEngine().derive(record_factory(height=0.0)))
        assert result["metrics"]["bmi"] is None
        assert result["nutrition"]["dailyCalories"] == 688

    def test_undefined_nutrition_becomes_null(
        self, record_factory: Callable[..., AnswerRecord]
    ) -> None:
        """A negative BMR leaves nutrition and every meal's calories null."""
        record = record_factory(weight=1.0, height=10.0, age=120)
        result = to_plan_dict(PlanEngine().derive(record))
        assert result["nutrition"] is None
        assert all(m["calories"] is None for m in result["mealSchedule"])


class TestPlanJsonString:
    def test_valid_json(self, lose_weight_record: AnswerRecord) -> None:
        plan = PlanEngine().derive(lose_weight_record)
        parsed = json.loads(to_plan_json_string(plan))
        assert parsed == to_plan_dict(plan)

    def test_compact_output(self, lose_weight_record: AnswerRecord) -> None:
        text = to_plan_json_string(PlanEngine().derive(lose_weight_record), indent=None)
        assert "\n" not in text
