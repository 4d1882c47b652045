"""Intake questionnaire — turns raw answers into a validated AnswerRecord."""

from intake.exceptions import (
    AnswerValidationError,
    IncompleteAnswersError,
    IntakeError,
)
from intake.questions import QUESTIONS, Question, QuestionKind
from intake.record import build_answer_record
from intake.wizard import IntakeWizard

__all__ = [
    "AnswerValidationError",
    "IncompleteAnswersError",
    "IntakeError",
    "IntakeWizard",
    "QUESTIONS",
    "Question",
    "QuestionKind",
    "build_answer_record",
]
