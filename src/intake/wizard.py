"""IntakeWizard — step-by-step questionnaire state machine."""

from __future__ import annotations

import logging
from typing import Any

from intake.questions import QUESTIONS, Question
from intake.record import DEFAULT_ANSWERS, build_answer_record
from intake.validation import validate_step
from plan_engine.models.answer_record import AnswerRecord

logger = logging.getLogger(__name__)


class IntakeWizard:
    """Walks a fixed list of questions with a validation gate per step.

    The wizard only moves forward when the current step's answers are
    valid; moving back is always allowed. Answers persist across moves so
    revisiting a step shows the previous answer.

    Usage:
        wizard = IntakeWizard()
        wizard.set_answer("weight", "70")
        wizard.advance()
        ...
        record = wizard.submit()
    """

    def __init__(self, questions: tuple[Question, ...] = QUESTIONS) -> None:
        if not questions:
            raise ValueError("IntakeWizard needs at least one question")
        self._questions = questions
        self._index = 0
        self._answers: dict[str, Any] = dict(DEFAULT_ANSWERS)

    # ------------------------------------------------------------------
    # Position
    # ------------------------------------------------------------------

    @property
    def index(self) -> int:
        """0-indexed position of the current step."""
        return self._index

    @property
    def total_steps(self) -> int:
        return len(self._questions)

    @property
    def current_question(self) -> Question:
        return self._questions[self._index]

    @property
    def is_first_step(self) -> bool:
        return self._index == 0

    @property
    def is_last_step(self) -> bool:
        return self._index == len(self._questions) - 1

    @property
    def progress(self) -> float:
        """Fraction of steps reached, counting the current one."""
        return (self._index + 1) / len(self._questions)

    @property
    def step_label(self) -> str:
        return f"Question {self._index + 1} of {len(self._questions)}"

    # ------------------------------------------------------------------
    # Answers
    # ------------------------------------------------------------------

    @property
    def answers(self) -> dict[str, Any]:
        """A copy of the raw answers collected so far."""
        return dict(self._answers)

    def get_answer(self, field: str, default: Any = None) -> Any:
        return self._answers.get(field, default)

    def set_answer(self, field: str, value: Any) -> None:
        self._answers[field] = value

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def advance(self) -> Question:
        """Validate the current step and move to the next one.

        Stays on the last step when already there.

        Returns:
            The new current question.

        Raises:
            IncompleteAnswersError: If the step's required answer is blank.
            AnswerValidationError: If an answer on this step is invalid.
        """
        validate_step(self.current_question, self._answers)
        logger.debug("Step %d (%s) accepted", self._index + 1, self.current_question.field)
        self._index = min(self._index + 1, len(self._questions) - 1)
        return self.current_question

    def go_back(self) -> Question:
        self._index = max(self._index - 1, 0)
        return self.current_question

    def submit(self) -> AnswerRecord:
        """Validate all answers and return the frozen record."""
        record = build_answer_record(self._answers)
        logger.info("Questionnaire submitted (goal=%s)", record.goal.value)
        return record

    def reset(self) -> None:
        self._index = 0
        self._answers = dict(DEFAULT_ANSWERS)
