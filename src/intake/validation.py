"""Per-field answer parsing and validation.

Every parser accepts the canonical token (``"lose-weight"``), the enum
member itself, or the questionnaire's display label (``"Lose weight"``,
``"Limited Equipment"``, ``"7+"``) and returns the typed value stored on
the AnswerRecord. Bad input raises AnswerValidationError.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Iterable, Mapping
from datetime import date, datetime
from enum import Enum
from typing import Any, TypeVar

from intake.exceptions import AnswerValidationError, IncompleteAnswersError
from intake.questions import Question
from plan_engine.models.enums import (
    MAX_WORKOUT_DAYS,
    MEALS_PER_DAY_SEVEN_PLUS,
    MIN_WORKOUT_DAYS,
    ActivityLevel,
    DietRestriction,
    Gender,
    Goal,
    GymAccess,
    HeightUnit,
    WeightUnit,
    WorkoutPreference,
)

E = TypeVar("E", bound=Enum)

MIN_AGE = 1
MAX_AGE = 120
# Upper bound accepted before folding into the "7+" bucket
MAX_MEALS_PER_DAY = 12

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_PARENTHETICAL_RE = re.compile(r"\s*\(.*\)\s*$")
# 5'10", 5' 10, 5ft 10in, 5 ft
_FEET_INCHES_RE = re.compile(
    r"^\s*(?P<feet>\d+(?:\.\d+)?)\s*(?:'|ft|feet)\s*"
    r"(?:(?P<inches>\d+(?:\.\d+)?)\s*(?:\"|''|in|inches)?)?\s*$",
    re.IGNORECASE,
)
_TRUE_STRINGS = frozenset({"true", "yes", "y", "1", "on"})
_FALSE_STRINGS = frozenset({"false", "no", "n", "0", "off", ""})

# Display labels (normalized) that differ from the enum value
_LABEL_ALIASES: dict[type[Enum], dict[str, Enum]] = {
    GymAccess: {
        "yes": GymAccess.FULL,
        "no": GymAccess.NONE,
        "limited-equipment": GymAccess.LIMITED,
    },
    ActivityLevel: {
        "lightly-active": ActivityLevel.LIGHT,
        "moderately-active": ActivityLevel.MODERATE,
    },
    DietRestriction: {
        "no-restrictions": DietRestriction.NONE,
    },
    WorkoutPreference: {
        "home-workouts": WorkoutPreference.HOME,
        "gym-workouts": WorkoutPreference.GYM,
    },
    WeightUnit: {
        "kilogram": WeightUnit.KILOGRAM,
        "lb": WeightUnit.POUND,
        "pound": WeightUnit.POUND,
    },
    HeightUnit: {
        "centimeter": HeightUnit.CENTIMETER,
        "feet-inches": HeightUnit.FEET_INCHES,
        "in": HeightUnit.FEET_INCHES,
    },
}


def is_blank(value: Any) -> bool:
    """True for None, whitespace-only strings and empty collections."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, frozenset)):
        return len(value) == 0
    return False


def normalize_token(label: str) -> str:
    """'Moderately active (walk/...)' -> 'moderately-active'."""
    text = _PARENTHETICAL_RE.sub("", label.strip()).lower()
    return re.sub(r"[\s_]+", "-", text)


def parse_choice(field: str, raw: Any, enum_cls: type[E]) -> E:
    """Parse an enum member from a member, a token or a display label."""
    if isinstance(raw, enum_cls):
        return raw
    if not isinstance(raw, str):
        raise AnswerValidationError(field, f"expected one of {_choice_list(enum_cls)}")
    token = normalize_token(raw)
    try:
        return enum_cls(token)
    except ValueError:
        pass
    alias = _LABEL_ALIASES.get(enum_cls, {}).get(token)
    if alias is None:
        raise AnswerValidationError(
            field, f"{raw!r} is not one of {_choice_list(enum_cls)}"
        )
    return alias  # type: ignore[return-value]


def _parse_number(field: str, raw: Any) -> float:
    if isinstance(raw, bool):
        raise AnswerValidationError(field, "expected a number")
    try:
        value = float(str(raw).strip()) if isinstance(raw, str) else float(raw)
    except (TypeError, ValueError):
        raise AnswerValidationError(field, f"{raw!r} is not a number") from None
    if not math.isfinite(value):
        raise AnswerValidationError(field, "must be a finite number")
    return value


def parse_positive_number(field: str, raw: Any) -> float:
    """Parse a strictly positive, finite decimal."""
    value = _parse_number(field, raw)
    if value <= 0:
        raise AnswerValidationError(field, "must be a positive number")
    return value


def parse_int_in_range(field: str, raw: Any, low: int, high: int) -> int:
    """Parse a whole number within [low, high]."""
    value = _parse_number(field, raw)
    if value != int(value):
        raise AnswerValidationError(field, "must be a whole number")
    result = int(value)
    if not low <= result <= high:
        raise AnswerValidationError(field, f"must be between {low} and {high}")
    return result


def parse_height(raw: Any, unit: HeightUnit) -> float:
    """Parse a height; feet-inches heights become total inches.

    For FEET_INCHES, ``5'10"`` style strings are accepted as well as a
    plain number of inches.
    """
    if unit == HeightUnit.FEET_INCHES and isinstance(raw, str):
        match = _FEET_INCHES_RE.match(raw)
        if match:
            feet = float(match.group("feet"))
            inches = float(match.group("inches") or 0)
            if inches >= 12:
                raise AnswerValidationError("height", "inches must be less than 12")
            total = feet * 12 + inches
            if total <= 0:
                raise AnswerValidationError("height", "must be a positive number")
            return total
    return parse_positive_number("height", raw)


def parse_goal_date(raw: Any) -> date | None:
    if is_blank(raw):
        return None
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if isinstance(raw, str):
        try:
            return date.fromisoformat(raw.strip())
        except ValueError:
            pass
    raise AnswerValidationError("goal_date", f"{raw!r} is not a date (YYYY-MM-DD)")


def parse_preferences(raw: Any) -> frozenset[WorkoutPreference]:
    """Parse the multi-select; a comma-separated string is also accepted."""
    if isinstance(raw, (str, WorkoutPreference)):
        items: Iterable[Any] = raw.split(",") if isinstance(raw, str) else [raw]
    elif isinstance(raw, Iterable):
        items = raw
    else:
        raise AnswerValidationError("workout_preferences", "expected a list of workout types")
    prefs = frozenset(
        parse_choice("workout_preferences", item, WorkoutPreference)
        for item in items
        if not is_blank(item)
    )
    if not prefs:
        raise AnswerValidationError("workout_preferences", "Select at least one workout type")
    return prefs


def parse_meals_per_day(raw: Any) -> int:
    """Parse meals per day; "7+" and anything above 7 map to 7."""
    if isinstance(raw, str) and raw.strip().endswith("+"):
        raw = raw.strip()[:-1]
    value = parse_int_in_range("meals_per_day", raw, 1, MAX_MEALS_PER_DAY)
    return min(value, MEALS_PER_DAY_SEVEN_PLUS)


def parse_required_text(field: str, raw: Any) -> str:
    if not isinstance(raw, str) or not raw.strip():
        raise AnswerValidationError(field, "an answer is required")
    return raw.strip()


def parse_optional_text(raw: Any) -> str | None:
    if is_blank(raw):
        return None
    return str(raw).strip()


def parse_email(raw: Any) -> str:
    email = parse_required_text("email", raw)
    if not _EMAIL_RE.match(email):
        raise AnswerValidationError("email", "Please enter a valid email")
    return email


def parse_bool(field: str, raw: Any) -> bool:
    if raw is None:
        return False
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        token = raw.strip().lower()
        if token in _TRUE_STRINGS:
            return True
        if token in _FALSE_STRINGS:
            return False
    raise AnswerValidationError(field, f"{raw!r} is not yes/no")


# ---------------------------------------------------------------------------
# Field table and step validation
# ---------------------------------------------------------------------------

_FIELD_PARSERS: dict[str, Callable[[Any], Any]] = {
    "weight": lambda raw: parse_positive_number("weight", raw),
    "weight_unit": lambda raw: parse_choice("weight_unit", raw, WeightUnit),
    "height_unit": lambda raw: parse_choice("height_unit", raw, HeightUnit),
    "age": lambda raw: parse_int_in_range("age", raw, MIN_AGE, MAX_AGE),
    "gender": lambda raw: parse_choice("gender", raw, Gender),
    "goal": lambda raw: parse_choice("goal", raw, Goal),
    "target_weight": lambda raw: parse_positive_number("target_weight", raw),
    "goal_date": parse_goal_date,
    "goal_timeframe": parse_optional_text,
    "workout_preferences": parse_preferences,
    "workout_days_per_week": lambda raw: parse_int_in_range(
        "workout_days_per_week", raw, MIN_WORKOUT_DAYS, MAX_WORKOUT_DAYS
    ),
    "gym_access": lambda raw: parse_choice("gym_access", raw, GymAccess),
    "activity_level": lambda raw: parse_choice("activity_level", raw, ActivityLevel),
    "diet_restriction": lambda raw: parse_choice("diet_restriction", raw, DietRestriction),
    "other_diet_details": parse_optional_text,
    "meals_per_day": parse_meals_per_day,
    "biggest_struggle": lambda raw: parse_required_text("biggest_struggle", raw),
    "email": parse_email,
    "want_coaching": lambda raw: parse_bool("want_coaching", raw),
}


def validate_field(field: str, raw: Any, answers: Mapping[str, Any] | None = None) -> Any:
    """Parse one answer.

    Args:
        field: AnswerRecord field name.
        raw: The raw answer.
        answers: Other answers, needed by ``height`` to read its unit.

    Raises:
        AnswerValidationError: If the answer is invalid.
        KeyError: If *field* is not a questionnaire field.
    """
    if field == "height":
        unit = parse_choice("height_unit", (answers or {}).get("height_unit", "cm"), HeightUnit)
        return parse_height(raw, unit)
    return _FIELD_PARSERS[field](raw)


def validate_step(question: Question, answers: Mapping[str, Any]) -> dict[str, Any]:
    """Validate every field a wizard step owns.

    Returns:
        Parsed values keyed by AnswerRecord field name.

    Raises:
        IncompleteAnswersError: If a required answer is blank.
        AnswerValidationError: If an answer is invalid.
    """
    parsed: dict[str, Any] = {}
    if question.unit_field is not None:
        parsed[question.unit_field] = validate_field(
            question.unit_field, answers.get(question.unit_field), answers
        )

    raw = answers.get(question.field)
    if is_blank(raw) and not question.optional:
        raise IncompleteAnswersError([question.field])
    parsed[question.field] = validate_field(question.field, raw, answers)

    if question.companion_field is not None:
        parsed[question.companion_field] = validate_field(
            question.companion_field, answers.get(question.companion_field), answers
        )

    if (
        parsed.get("diet_restriction") == DietRestriction.OTHER
        and parsed.get("other_diet_details") is None
    ):
        raise AnswerValidationError(
            "other_diet_details", "Please specify your dietary restrictions"
        )
    return parsed


def _choice_list(enum_cls: type[Enum]) -> str:
    return ", ".join(str(m.value) for m in enum_cls)
