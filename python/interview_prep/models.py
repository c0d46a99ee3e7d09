"""
Pydantic models for the mock interview tool.

Defines questions, user accounts, per-answer analyses and the
aggregated interview report.

Last Grunted: 10/19/2026
"""

import math
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable, Optional

from pydantic import BaseModel, Field


def utc_timestamp() -> str:
    """Return the current UTC time as ISO 8601 with a 'Z' suffix."""
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def mean_score(scores: Iterable[int]) -> int:
    """
    Arithmetic mean of ``scores`` rounded half-up.

    Returns 0 for an empty iterable.
    """
    values = list(scores)
    if not values:
        return 0
    return int(math.floor(sum(values) / len(values) + 0.5))


class InterviewType(str, Enum):
    """Supported interview flows."""

    TECHNICAL = "technical"
    BEHAVIORAL = "behavioral"
    MANAGERIAL = "managerial"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class ScoreStatus(str, Enum):
    """Status bucket derived from a numeric score."""

    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_IMPROVEMENT = "needs_improvement"
    POOR = "poor"

    @property
    def label(self) -> str:
        """Upper-case display label, e.g. 'NEEDS IMPROVEMENT'."""
        return self.value.replace("_", " ").upper()


class Question(BaseModel):
    """
    A single interview prompt from a static question bank.

    Only the tags relevant to a variant are populated: technical questions
    carry ``difficulty``, behavioral ones ``type`` and ``tip``, managerial
    ones ``type``, ``level`` and ``tip``.

    Example:
        >>> q = Question(
        ...     id=5,
        ...     question="Explain closures in JavaScript with an example.",
        ...     category="JavaScript",
        ...     difficulty="Hard",
        ... )
    """
    id: int = Field(..., description="Question identifier, unique within a bank")
    question: str = Field(..., min_length=1, description="Prompt text")
    category: str = Field(..., description="Category label, e.g. 'SQL' or 'Teamwork'")
    type: Optional[str] = Field(default=None, description="Question type tag")
    difficulty: Optional[str] = Field(default=None, description="Easy, Medium or Hard")
    level: Optional[str] = Field(default=None, description="Seniority level tag")
    tip: Optional[str] = Field(default=None, description="Answering tip shown on request")

    model_config = {"frozen": True}


class UserAccount(BaseModel):
    """A signed-up user held only for the lifetime of the process."""
    username: str = Field(..., min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    verified: bool = False


class AnswerAnalysis(BaseModel):
    """
    Heuristic analysis of one answer.

    Example:
        >>> analysis = AnswerAnalysis(
        ...     question_id=1,
        ...     score=72,
        ...     status=ScoreStatus.GOOD,
        ...     feedback="Well-structured answer.",
        ...     strengths=["Clear technical explanation"],
        ...     improvements=["Include performance metrics"],
        ... )
    """
    question_id: int = Field(..., description="Question this analysis belongs to")
    score: int = Field(..., ge=0, le=100, description="Score from 0 to 100")
    status: ScoreStatus = Field(..., description="Status bucket for the score")
    feedback: str = Field(..., description="Feedback message for the bucket")
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)
    suggested_answer: Optional[str] = Field(
        default=None,
        description="Outline of a strong answer for this interview type",
    )


class InterviewReport(BaseModel):
    """
    Scored results of a completed interview session.

    ``overall_score`` is the rounded mean of the per-question scores.
    """
    username: str = Field(default="User")
    interview_type: InterviewType
    questions: list[Question] = Field(default_factory=list)
    answers: dict[int, str] = Field(default_factory=dict)
    analyses: list[AnswerAnalysis] = Field(default_factory=list)
    overall_score: int = Field(default=0, ge=0, le=100)
    time_elapsed: int = Field(default=0, ge=0, description="Seconds spent answering")
    generated_at: str = Field(default_factory=utc_timestamp)

    def compute_overall_score(self) -> int:
        """Recompute and store ``overall_score`` from the analyses."""
        self.overall_score = mean_score(a.score for a in self.analyses)
        return self.overall_score

    @property
    def answered_count(self) -> int:
        return len(self.answers)

    def question_by_id(self, question_id: int) -> Optional[Question]:
        return next((q for q in self.questions if q.id == question_id), None)
