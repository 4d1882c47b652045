"""The questionnaire: an ordered, fixed sequence of questions.

Each Question names the AnswerRecord field it fills, how the UI should ask
for it and which secondary fields (a unit toggle or a free-text companion)
belong to the same step.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto


class QuestionKind(IntEnum):
    """How a question is answered."""

    NUMBER = auto()
    CHOICE = auto()
    MULTI_CHOICE = auto()
    DATE_OR_TEXT = auto()
    TEXT = auto()
    EMAIL = auto()
    TOGGLE = auto()


@dataclass(frozen=True)
class Question:
    """One wizard step.

    Attributes:
        field: AnswerRecord field filled by the main answer.
        prompt: Question text.
        kind: Answer widget type.
        choices: Display labels for CHOICE / MULTI_CHOICE questions.
        unit_field: Field holding the unit toggle, if any.
        unit_choices: Display labels for the unit toggle.
        companion_field: Secondary free-text field answered on the same step.
        optional: Whether the step can be confirmed with no answer.
        placeholder: Hint text for text inputs.
    """

    field: str
    prompt: str
    kind: QuestionKind
    choices: tuple[str, ...] = ()
    unit_field: str | None = None
    unit_choices: tuple[str, ...] = ()
    companion_field: str | None = None
    optional: bool = False
    placeholder: str = ""


GENDER_CHOICES = ("Male", "Female", "Other")
GOAL_CHOICES = ("Lose weight", "Build muscle", "Maintain", "Get toned", "Improve health")
WORKOUT_PREFERENCE_CHOICES = (
    "Strength",
    "Cardio",
    "HIIT",
    "Pilates",
    "Yoga",
    "Calisthenics",
    "Home workouts",
    "Gym workouts",
    "Mix",
)
WORKOUT_DAY_CHOICES = ("1", "2", "3", "4", "5", "6", "7")
GYM_ACCESS_CHOICES = ("Yes", "No", "Limited Equipment")
ACTIVITY_LEVEL_CHOICES = (
    "Sedentary (mostly sitting)",
    "Lightly active (some movement)",
    "Moderately active (walk/workout a few times/week)",
    "Very active (daily exercise/manual labor)",
)
DIET_CHOICES = ("Vegan", "Vegetarian", "Keto", "Low-carb", "Halal", "No restrictions", "Other")
MEALS_PER_DAY_CHOICES = ("1", "2", "3", "4", "5", "6", "7+")


QUESTIONS: tuple[Question, ...] = (
    Question(
        field="weight",
        prompt="What's your current weight?",
        kind=QuestionKind.NUMBER,
        unit_field="weight_unit",
        unit_choices=("kg", "lbs"),
        placeholder="Enter your weight",
    ),
    Question(
        field="height",
        prompt="What's your height?",
        kind=QuestionKind.NUMBER,
        unit_field="height_unit",
        unit_choices=("cm", "ft-in"),
        placeholder="Enter height in cm, or inches / 5'10\" for ft-in",
    ),
    Question(
        field="age",
        prompt="What is your age?",
        kind=QuestionKind.NUMBER,
        placeholder="Enter your age",
    ),
    Question(
        field="gender",
        prompt="What is your gender?",
        kind=QuestionKind.CHOICE,
        choices=GENDER_CHOICES,
    ),
    Question(
        field="goal",
        prompt="What is your goal?",
        kind=QuestionKind.CHOICE,
        choices=GOAL_CHOICES,
    ),
    Question(
        field="target_weight",
        prompt="What's your target/goal weight?",
        kind=QuestionKind.NUMBER,
        placeholder="Enter target weight in the same unit as your weight",
    ),
    Question(
        field="goal_date",
        prompt="By when would you like to achieve this goal?",
        kind=QuestionKind.DATE_OR_TEXT,
        companion_field="goal_timeframe",
        optional=True,
        placeholder="e.g., '3 months', '6 weeks'",
    ),
    Question(
        field="workout_preferences",
        prompt="What type of workouts do you enjoy/prefer?",
        kind=QuestionKind.MULTI_CHOICE,
        choices=WORKOUT_PREFERENCE_CHOICES,
    ),
    Question(
        field="workout_days_per_week",
        prompt="How many days per week can you realistically work out?",
        kind=QuestionKind.CHOICE,
        choices=WORKOUT_DAY_CHOICES,
    ),
    Question(
        field="gym_access",
        prompt="Do you have access to a gym or home equipment?",
        kind=QuestionKind.CHOICE,
        choices=GYM_ACCESS_CHOICES,
    ),
    Question(
        field="activity_level",
        prompt="What is your current activity level?",
        kind=QuestionKind.CHOICE,
        choices=ACTIVITY_LEVEL_CHOICES,
    ),
    Question(
        field="diet_restriction",
        prompt="Do you follow a specific diet or have food restrictions?",
        kind=QuestionKind.CHOICE,
        choices=DIET_CHOICES,
        companion_field="other_diet_details",
        placeholder="Please specify your dietary restrictions",
    ),
    Question(
        field="meals_per_day",
        prompt="How many meals do you eat per day on average?",
        kind=QuestionKind.CHOICE,
        choices=MEALS_PER_DAY_CHOICES,
    ),
    Question(
        field="biggest_struggle",
        prompt="What's your biggest struggle with fitness or nutrition?",
        kind=QuestionKind.TEXT,
        placeholder="Tell us about your challenges...",
    ),
    Question(
        field="email",
        prompt="What's your email so we can send your plan?",
        kind=QuestionKind.EMAIL,
        placeholder="Enter your email",
    ),
    Question(
        field="want_coaching",
        prompt="Would you like weekly check-ins from your coach for accountability & progress?",
        kind=QuestionKind.TOGGLE,
        optional=True,
    ),
)


def question_for(field: str) -> Question:
    """Look up the question that owns *field* (main, unit or companion).

    Raises:
        KeyError: If no question owns the field.
    """
    for question in QUESTIONS:
        if field in (question.field, question.unit_field, question.companion_field):
            return question
    raise KeyError(field)
