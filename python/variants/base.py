"""
Variant plugin contracts.

A variant bundles everything that differs between the interview flows:
the static question bank, how questions are picked from it, the scoring
keywords and the strength/improvement pools used in feedback.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterable, Protocol, runtime_checkable

from interview_prep.models import InterviewType, Question


QUESTIONS_PER_INTERVIEW = 15


@dataclass(frozen=True)
class VariantUiConfig:
    """Display strings for one interview flow."""

    title: str
    icon: str
    analyzing_message: str
    show_tips: bool = False


@runtime_checkable
class VariantPlugin(Protocol):
    """Interface every interview variant implements."""

    variant_id: str
    interview_type: InterviewType
    display_name: str
    ui: VariantUiConfig
    analysis_delay: float
    question_bank: tuple[Question, ...]
    keywords: tuple[str, ...]
    structure_cues: tuple[str, ...]
    strength_pool: tuple[str, ...]
    improvement_pool: tuple[str, ...]
    suggested_answer: str

    def select_questions(self, skills: Iterable[str] | None = None) -> list[Question]:
        ...


class BaseVariantPlugin:
    """Defaults shared by all variants: a fixed slice of the bank."""

    variant_id: ClassVar[str] = ""
    interview_type: ClassVar[InterviewType]
    display_name: ClassVar[str] = ""
    ui: ClassVar[VariantUiConfig]
    analysis_delay: ClassVar[float] = 3.0
    question_bank: ClassVar[tuple[Question, ...]] = ()
    keywords: ClassVar[tuple[str, ...]] = ()
    structure_cues: ClassVar[tuple[str, ...]] = ()
    strength_pool: ClassVar[tuple[str, ...]] = ()
    improvement_pool: ClassVar[tuple[str, ...]] = ()
    suggested_answer: ClassVar[str] = ""

    def select_questions(self, skills: Iterable[str] | None = None) -> list[Question]:
        """Return the first ``QUESTIONS_PER_INTERVIEW`` questions of the bank."""
        return list(self.question_bank[:QUESTIONS_PER_INTERVIEW])

    def __repr__(self) -> str:
        return f"{type(self).__name__}(variant_id={self.variant_id!r})"
