"""Tests for building a frozen AnswerRecord from raw answers."""

from __future__ import annotations

import dataclasses
from datetime import date
from typing import Any

import pytest

from intake import AnswerValidationError, IncompleteAnswersError, build_answer_record
from intake.record import missing_fields, normalize_keys
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


class TestBuildAnswerRecord:
    def test_display_labels_parsed(self, raw_answers: dict[str, Any]) -> None:
        record = build_answer_record(raw_answers)
        assert record.weight == 70.0
        assert record.height == 175.0
        assert record.age == 30
        assert record.gender == Gender.MALE
        assert record.goal == Goal.LOSE_WEIGHT
        assert record.goal_date == date(2027, 3, 1)
        assert record.goal_timeframe is None
        assert record.workout_preferences == frozenset(
            {WorkoutPreference.STRENGTH, WorkoutPreference.HIIT}
        )
        assert record.workout_days_per_week == 3
        assert record.gym_access == GymAccess.FULL
        assert record.activity_level == ActivityLevel.MODERATE
        assert record.diet_restriction == DietRestriction.NONE
        assert record.meals_per_day == 4
        assert record.want_coaching is True

    def test_matches_fixture_record(self, raw_answers: dict[str, Any], lose_weight_record) -> None:
        assert build_answer_record(raw_answers) == lose_weight_record

    def test_record_is_frozen(self, raw_answers: dict[str, Any]) -> None:
        record = build_answer_record(raw_answers)
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.age = 31  # type: ignore[misc]

    def test_camel_case_keys(self, raw_answers: dict[str, Any]) -> None:
        """Keys sent by a JS front end are accepted."""
        raw = dict(raw_answers)
        raw["workoutDays"] = raw.pop("workout_days_per_week")
        raw["mealsPerDay"] = raw.pop("meals_per_day")
        raw["workoutPreference"] = raw.pop("workout_preferences")
        record = build_answer_record(raw)
        assert record.workout_days_per_week == 3
        assert record.meals_per_day == 4
        assert WorkoutPreference.HIIT in record.workout_preferences

    def test_units_default_to_metric(self, raw_answers: dict[str, Any]) -> None:
        raw = {k: v for k, v in raw_answers.items() if k not in ("weight_unit", "height_unit")}
        record = build_answer_record(raw)
        assert record.weight_unit == WeightUnit.KILOGRAM
        assert record.height_unit == HeightUnit.CENTIMETER

    def test_feet_inches_stored_as_total_inches(self, raw_answers: dict[str, Any]) -> None:
        raw = {**raw_answers, "height": "5'10\"", "height_unit": "ft-in"}
        record = build_answer_record(raw)
        assert record.height == 70.0
        assert record.height_unit == HeightUnit.FEET_INCHES

    def test_coaching_defaults_off(self, raw_answers: dict[str, Any]) -> None:
        raw = {k: v for k, v in raw_answers.items() if k != "want_coaching"}
        assert build_answer_record(raw).want_coaching is False

    def test_all_missing_fields_reported(self, raw_answers: dict[str, Any]) -> None:
        """Missing fields are reported together, in form order."""
        raw = {**raw_answers, "age": "", "email": None}
        del raw["gender"]
        with pytest.raises(IncompleteAnswersError) as exc_info:
            build_answer_record(raw)
        assert exc_info.value.missing_fields == ("age", "gender", "email")

    def test_invalid_answer(self, raw_answers: dict[str, Any]) -> None:
        with pytest.raises(AnswerValidationError) as exc_info:
            build_answer_record({**raw_answers, "workout_days_per_week": "9"})
        assert exc_info.value.field == "workout_days_per_week"


class TestHelpers:
    def test_normalize_keys(self) -> None:
        assert normalize_keys({"targetWeight": 65, "age": 30}) == {
            "target_weight": 65,
            "age": 30,
        }

    def test_missing_fields_skips_optional(self) -> None:
        missing = missing_fields({})
        assert "goal_date" not in missing
        assert "want_coaching" not in missing
        assert missing[0] == "weight"
        assert missing[-1] == "email"
