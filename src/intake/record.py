"""Build a frozen AnswerRecord from a raw answers mapping."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from intake.exceptions import IncompleteAnswersError
from intake.questions import QUESTIONS
from intake.validation import is_blank, validate_step
from plan_engine.models.answer_record import AnswerRecord

# Form defaults before the user touches anything
DEFAULT_ANSWERS: dict[str, Any] = {
    "weight_unit": "kg",
    "height_unit": "cm",
    "workout_preferences": [],
    "want_coaching": False,
}

# Key spellings used by the web form export
FIELD_ALIASES: dict[str, str] = {
    "weightUnit": "weight_unit",
    "heightUnit": "height_unit",
    "targetWeight": "target_weight",
    "goalDate": "goal_date",
    "goalTimeframe": "goal_timeframe",
    "workoutPreference": "workout_preferences",
    "workoutPreferences": "workout_preferences",
    "workoutDays": "workout_days_per_week",
    "gymAccess": "gym_access",
    "activityLevel": "activity_level",
    "dietRestriction": "diet_restriction",
    "otherDietDetails": "other_diet_details",
    "mealsPerDay": "meals_per_day",
    "biggestStruggle": "biggest_struggle",
    "wantCoaching": "want_coaching",
}


def normalize_keys(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Map camelCase form keys to AnswerRecord field names."""
    return {FIELD_ALIASES.get(key, key): value for key, value in raw.items()}


def missing_fields(answers: Mapping[str, Any]) -> list[str]:
    """Required questions with a blank answer, in questionnaire order."""
    return [
        q.field
        for q in QUESTIONS
        if not q.optional and is_blank(answers.get(q.field))
    ]


def build_answer_record(raw: Mapping[str, Any]) -> AnswerRecord:
    """Validate every answer and freeze them into an AnswerRecord.

    Args:
        raw: Answers keyed by field name (snake_case or the form's
            camelCase). Values may be display labels or canonical tokens.

    Returns:
        A fully populated AnswerRecord.

    Raises:
        IncompleteAnswersError: Listing every unanswered required question.
        AnswerValidationError: For the first invalid answer.
    """
    answers = {**DEFAULT_ANSWERS, **normalize_keys(raw)}
    missing = missing_fields(answers)
    if missing:
        raise IncompleteAnswersError(missing)

    parsed: dict[str, Any] = {}
    for question in QUESTIONS:
        parsed.update(validate_step(question, answers))
    return AnswerRecord(**parsed)
