"""Custom exception hierarchy for the intake questionnaire."""

from __future__ import annotations


class IntakeError(Exception):
    """Base exception for all intake errors."""


class AnswerValidationError(IntakeError):
    """A single answer failed its type or range check."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class IncompleteAnswersError(IntakeError):
    """One or more required questions have no answer."""

    def __init__(self, missing_fields: list[str] | tuple[str, ...]) -> None:
        self.missing_fields = tuple(missing_fields)
        super().__init__("Missing answers: " + ", ".join(self.missing_fields))
