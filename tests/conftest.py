"""Shared test fixtures: raw questionnaire answers and frozen answer records."""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Callable

import pytest

from plan_engine.models.answer_record import AnswerRecord
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


@pytest.fixture
def raw_answers() -> dict[str, Any]:
    """Complete answers as the questionnaire shows them (display labels)."""
    return {
        "weight": "70",
        "weight_unit": "kg",
        "height": "175",
        "height_unit": "cm",
        "age": "30",
        "gender": "Male",
        "goal": "Lose weight",
        "target_weight": "65",
        "goal_date": "2027-03-01",
        "goal_timeframe": "",
        "workout_preferences": ["Strength", "HIIT"],
        "workout_days_per_week": "3",
        "gym_access": "Yes",
        "activity_level": "Moderately active (walk/workout a few times/week)",
        "diet_restriction": "No restrictions",
        "other_diet_details": "",
        "meals_per_day": "4",
        "biggest_struggle": "Staying consistent after work",
        "email": "alex@example.com",
        "want_coaching": True,
    }


@pytest.fixture
def lose_weight_record() -> AnswerRecord:
    """30-year-old male, 70 kg / 175 cm, moderately active, losing 5 kg."""
    return AnswerRecord(
        weight=70.0,
        height=175.0,
        age=30,
        gender=Gender.MALE,
        goal=Goal.LOSE_WEIGHT,
        target_weight=65.0,
        workout_preferences=frozenset({WorkoutPreference.STRENGTH, WorkoutPreference.HIIT}),
        workout_days_per_week=3,
        gym_access=GymAccess.FULL,
        activity_level=ActivityLevel.MODERATE,
        diet_restriction=DietRestriction.NONE,
        meals_per_day=4,
        biggest_struggle="Staying consistent after work",
        email="alex@example.com",
        goal_date=date(2027, 3, 1),
        want_coaching=True,
    )


@pytest.fixture
def imperial_record(lose_weight_record: AnswerRecord) -> AnswerRecord:
    """Same person answering in pounds and total inches (154.3 lbs, 5'9")."""
    return replace(
        lose_weight_record,
        weight=154.3,
        weight_unit=WeightUnit.POUND,
        target_weight=143.3,
        height=69.0,
        height_unit=HeightUnit.FEET_INCHES,
    )


@pytest.fixture
def record_factory(lose_weight_record: AnswerRecord) -> Callable[..., AnswerRecord]:
    """Factory fixture overriding fields of the lose-weight record.

    Usage:
        record = record_factory(goal=Goal.BUILD_MUSCLE, workout_days_per_week=5)
    """

    def factory(**overrides: Any) -> AnswerRecord:
        return replace(lose_weight_record, **overrides)

    return factory
