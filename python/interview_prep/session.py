"""
Interview Session state machine.

Drives one interview from resume analysis through answering to results:

    ANALYZING -> ACTIVE -> SHOWING_RESULTS
                  ACTIVE -> COMPLETED -> SHOWING_RESULTS

The phase is a single enum value, so impossible combinations such as
"analyzing and showing results" cannot be represented.

Thread Safety:
    This class is NOT thread-safe. Use a single instance per event loop.

Last Grunted: 10/19/2026
"""

import asyncio
import logging
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Optional

from .models import InterviewReport, Question
from .report import build_report, format_time
from .scoring import AnswerScorer

if TYPE_CHECKING:
    from variants.base import VariantPlugin


__all__ = [
    "InterviewSession",
    "InvalidTransitionError",
    "SessionPhase",
    "format_time",
]


logger = logging.getLogger(__name__)


class SessionPhase(str, Enum):
    """Interview session phase."""

    ANALYZING = "analyzing"
    ACTIVE = "active"
    COMPLETED = "completed"
    SHOWING_RESULTS = "showing_results"


class InvalidTransitionError(Exception):
    """Raised when an action is not allowed in the current phase or screen."""


class InterviewSession:
    """
    State for one interview attempt.

    Responsibilities:
        - Simulate resume analysis and pick questions from the variant's bank
        - Track the current question index and the answer map
        - Count elapsed seconds while the interview is active
        - Score answers and hold the resulting report

    Example:
        >>> session = InterviewSession(load_variant("technical"), username="alice")
        >>> await session.analyze()
        >>> session.record_answer("A closure captures variables from its scope...")
        >>> session.go_next()
        >>> session.finish()
        >>> print(session.report.overall_score)
    """

    def __init__(
        self,
        variant: "VariantPlugin",
        username: str = "User",
        resume_filename: Optional[str] = None,
        analysis_delay: Optional[float] = None,
        scorer: Optional[AnswerScorer] = None,
    ) -> None:
        self.variant = variant
        self.username = username
        self.resume_filename = resume_filename
        self.analysis_delay = variant.analysis_delay if analysis_delay is None else analysis_delay
        self.scorer = scorer or AnswerScorer(variant)

        self._phase = SessionPhase.ANALYZING
        self._questions: tuple[Question, ...] = ()
        self._current_index = 0
        self._answers: dict[int, str] = {}
        self._elapsed_seconds = 0
        self._report: Optional[InterviewReport] = None
        self._stop_event = asyncio.Event()

        logger.debug("InterviewSession created: %s for '%s'", variant.variant_id, username)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    @property
    def question_count(self) -> int:
        return len(self._questions)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current_question(self) -> Optional[Question]:
        if not self._questions:
            return None
        return self._questions[self._current_index]

    @property
    def answers(self) -> dict[int, str]:
        """Copy of the answer map (question id -> answer text)."""
        return dict(self._answers)

    @property
    def answered_count(self) -> int:
        return len(self._answers)

    @property
    def elapsed_seconds(self) -> int:
        return self._elapsed_seconds

    @property
    def progress(self) -> tuple[int, int]:
        """Current position as (1-based question number, total)."""
        return (self._current_index + 1, len(self._questions))

    @property
    def is_last_question(self) -> bool:
        return self._current_index == len(self._questions) - 1

    @property
    def report(self) -> Optional[InterviewReport]:
        return self._report

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def _require(self, *phases: SessionPhase) -> None:
        if self._phase not in phases:
            allowed = ", ".join(p.value for p in phases)
            raise InvalidTransitionError(
                f"Action not allowed in phase '{self._phase.value}' (expected: {allowed})"
            )

    def _set_phase(self, phase: SessionPhase) -> None:
        if phase == self._phase:
            return
        logger.info(
            "Session %s: %s -> %s",
            self.variant.variant_id,
            self._phase.value,
            phase.value,
        )
        self._phase = phase
        if phase != SessionPhase.ACTIVE:
            self.stop_timer()

    async def analyze(self, skills: Optional[Iterable[str]] = None) -> tuple[Question, ...]:
        """
        Simulate resume analysis, select questions and enter ACTIVE.

        Args:
            skills: Skills used to pick technical questions. Defaults to the
                variant's built-in list.

        Returns:
            The selected questions.
        """
        self._require(SessionPhase.ANALYZING)
        logger.info(
            "Analyzing resume %s for %s interview",
            self.resume_filename or "(none)",
            self.variant.variant_id,
        )
        await asyncio.sleep(self.analysis_delay)

        questions = tuple(self.variant.select_questions(skills))
        if not questions:
            raise RuntimeError(f"Variant '{self.variant.variant_id}' produced no questions")

        self._questions = questions
        self._current_index = 0
        self._set_phase(SessionPhase.ACTIVE)
        return questions

    def record_answer(self, text: str) -> None:
        """Store ``text`` as the answer to the current question."""
        self._require(SessionPhase.ACTIVE)
        question = self._questions[self._current_index]
        self._answers[question.id] = text
        logger.debug("Answer recorded for question %d (%d chars)", question.id, len(text))

    def answer_for(self, question_id: int) -> str:
        return self._answers.get(question_id, "")

    def go_next(self) -> SessionPhase:
        """
        Move to the next question, or finish from the last one.

        Returns:
            The phase after the move.
        """
        self._require(SessionPhase.ACTIVE)
        if self._current_index < len(self._questions) - 1:
            self._current_index += 1
        else:
            self.finish()
        return self._phase

    def go_previous(self) -> bool:
        """Move to the previous question. No-op on the first question."""
        self._require(SessionPhase.ACTIVE)
        if self._current_index > 0:
            self._current_index -= 1
            return True
        return False

    def complete(self) -> None:
        """End answering and show the completion summary."""
        self._require(SessionPhase.ACTIVE)
        self._set_phase(SessionPhase.COMPLETED)

    def view_results(self) -> InterviewReport:
        """Score the answers from the completion summary."""
        self._require(SessionPhase.COMPLETED)
        return self._show_results()

    def finish(self) -> InterviewReport:
        """Finish the interview (early or from the last question) and score it."""
        self._require(SessionPhase.ACTIVE)
        return self._show_results()

    def _show_results(self) -> InterviewReport:
        self._set_phase(SessionPhase.SHOWING_RESULTS)
        analyses = self.scorer.analyze(self._questions, self._answers)
        self._report = build_report(
            username=self.username,
            interview_type=self.variant.interview_type,
            questions=self._questions,
            answers=self._answers,
            analyses=analyses,
            time_elapsed=self._elapsed_seconds,
        )
        return self._report

    def retake(self) -> None:
        """Start over with the same questions: clears answers, timer and report."""
        self._require(SessionPhase.COMPLETED, SessionPhase.SHOWING_RESULTS)
        self._current_index = 0
        self._answers = {}
        self._elapsed_seconds = 0
        self._report = None
        self._set_phase(SessionPhase.ACTIVE)

    # -------------------------------------------------------------------------
    # Timer
    # -------------------------------------------------------------------------

    def tick(self, seconds: int = 1) -> int:
        """Add elapsed time. Ignored unless the session is ACTIVE."""
        if self._phase == SessionPhase.ACTIVE:
            self._elapsed_seconds += seconds
        return self._elapsed_seconds

    async def run_timer(self) -> None:
        """
        Count one second at a time while ACTIVE.

        Returns when the session leaves ACTIVE or stop_timer() is called.
        """
        self._stop_event.clear()
        while self._phase == SessionPhase.ACTIVE:
            try:
                await asyncio.wait_for(self._stop_event.wait(), timeout=1.0)
                break
            except asyncio.TimeoutError:
                self.tick()
        logger.debug("Session timer stopped at %s", format_time(self._elapsed_seconds))

    def stop_timer(self) -> None:
        self._stop_event.set()

    # -------------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------------

    def summary(self) -> dict:
        """Status dictionary for display."""
        current, total = self.progress
        return {
            "interview_type": self.variant.variant_id,
            "username": self.username,
            "phase": self._phase.value,
            "current_question": current if total else 0,
            "total_questions": total,
            "answered": self.answered_count,
            "elapsed_seconds": self._elapsed_seconds,
            "elapsed": format_time(self._elapsed_seconds),
            "overall_score": self._report.overall_score if self._report else None,
        }
