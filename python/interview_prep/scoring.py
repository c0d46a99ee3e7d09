"""
Heuristic answer scoring.

Scores are fabricated from surface features of the answer text: word
count, keyword hits from the interview type's keyword list, and simple
structure checks (sentences, paragraphs, length). No language understanding
is involved.

Score formula per answer:
    base       = min(words * 2, 85)
    keywords   = min(3 * matched keywords, 15)
    structure  = min(sum of structure bonuses, 10)
    score      = clamp(base + keywords + structure, 20, 100)
    score      = clamp(score + jitter, 0, 100)     # jitter is 0 by default

Last Grunted: 10/19/2026
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Final, Iterable, Mapping, Optional

from .models import AnswerAnalysis, Question, ScoreStatus, mean_score

if TYPE_CHECKING:
    from variants.base import VariantPlugin


__all__ = [
    "FEEDBACK_POOLS",
    "AnswerScorer",
    "overall_score",
    "score_status",
    "sentence_count",
    "paragraph_count",
    "status_counts",
    "word_count",
]


logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

EXCELLENT_THRESHOLD: Final[int] = 85
GOOD_THRESHOLD: Final[int] = 70
NEEDS_IMPROVEMENT_THRESHOLD: Final[int] = 50

POINTS_PER_WORD: Final[int] = 2
BASE_SCORE_CAP: Final[int] = 85
POINTS_PER_KEYWORD: Final[int] = 3
KEYWORD_BONUS_CAP: Final[int] = 15
STRUCTURE_BONUS_STEP: Final[int] = 5
STRUCTURE_BONUS_CAP: Final[int] = 10
LONG_ANSWER_CHARS: Final[int] = 200
MIN_SCORE: Final[int] = 20
MAX_SCORE: Final[int] = 100

FEEDBACK_POOLS: dict[ScoreStatus, tuple[str, ...]] = {
    ScoreStatus.EXCELLENT: (
        "Outstanding response! Your answer demonstrates deep understanding and excellent communication skills.",
        "Exceptional answer with clear structure and comprehensive coverage of key points.",
        "Excellent response showing strong analytical thinking and practical experience.",
    ),
    ScoreStatus.GOOD: (
        "Good response with solid understanding. Consider adding more specific examples.",
        "Well-structured answer. You could enhance it with more detailed explanations.",
        "Good grasp of the concept. Adding more context would make it even stronger.",
    ),
    ScoreStatus.NEEDS_IMPROVEMENT: (
        "Your answer shows basic understanding but needs more depth and specific examples.",
        "Consider providing more detailed explanations and real-world applications.",
        "The response could be improved with better structure and more comprehensive coverage.",
    ),
    ScoreStatus.POOR: (
        "This answer needs significant improvement. Consider researching the topic more thoroughly.",
        "The response lacks depth and clarity. Focus on providing specific examples and explanations.",
        "This answer would benefit from more preparation and structured thinking.",
    ),
}


# =============================================================================
# Text features
# =============================================================================

def word_count(answer: str) -> int:
    """Whitespace-delimited token count; an empty answer has 0 words."""
    return len((answer or "").split())


def sentence_count(answer: str) -> int:
    return len([s for s in (answer or "").split(".") if s.strip()])


def paragraph_count(answer: str) -> int:
    return len([p for p in (answer or "").split("\n") if p.strip()])


def score_status(score: int) -> ScoreStatus:
    """
    Map a score to its status bucket.

    >>> score_status(85), score_status(84), score_status(49)
    (<ScoreStatus.EXCELLENT: 'excellent'>, <ScoreStatus.GOOD: 'good'>, <ScoreStatus.POOR: 'poor'>)
    """
    if score >= EXCELLENT_THRESHOLD:
        return ScoreStatus.EXCELLENT
    if score >= GOOD_THRESHOLD:
        return ScoreStatus.GOOD
    if score >= NEEDS_IMPROVEMENT_THRESHOLD:
        return ScoreStatus.NEEDS_IMPROVEMENT
    return ScoreStatus.POOR


def overall_score(analyses: Iterable[AnswerAnalysis]) -> int:
    """Rounded mean of the per-question scores (0 when there are none)."""
    return mean_score(a.score for a in analyses)


def status_counts(analyses: Iterable[AnswerAnalysis]) -> dict[ScoreStatus, int]:
    counts = {status: 0 for status in ScoreStatus}
    for analysis in analyses:
        counts[analysis.status] += 1
    return counts


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


# =============================================================================
# Scorer
# =============================================================================

class AnswerScorer:
    """
    Scores answers for one interview variant.

    Args:
        variant: Supplies keywords, structure cues and feedback pools.
        jitter: Optional +/- noise amplitude in points. 0 disables it and
            makes scores reproducible.
        rng: Random source for jitter and feedback selection. Pass a seeded
            ``random.Random`` for reproducible feedback text.

    Example:
        >>> scorer = AnswerScorer(load_variant("behavioral"), rng=random.Random(7))
        >>> scorer.score_answer("")
        20
    """

    def __init__(
        self,
        variant: "VariantPlugin",
        jitter: int = 0,
        rng: Optional[random.Random] = None,
    ) -> None:
        if jitter < 0:
            raise ValueError("jitter must not be negative")
        self.variant = variant
        self.jitter = jitter
        self._rng = rng or random.Random()

    def keyword_bonus(self, answer: str) -> int:
        lower = (answer or "").lower()
        hits = sum(1 for keyword in self.variant.keywords if keyword in lower)
        return min(hits * POINTS_PER_KEYWORD, KEYWORD_BONUS_CAP)

    def structure_bonus(self, answer: str) -> int:
        answer = answer or ""
        bonus = 0
        if sentence_count(answer) >= 3:
            bonus += STRUCTURE_BONUS_STEP
        if paragraph_count(answer) >= 2:
            bonus += STRUCTURE_BONUS_STEP
        if len(answer) > LONG_ANSWER_CHARS:
            bonus += STRUCTURE_BONUS_STEP

        # cues are matched case-sensitively, unlike keywords
        if any(cue in answer for cue in self.variant.structure_cues):
            bonus += STRUCTURE_BONUS_STEP

        return min(bonus, STRUCTURE_BONUS_CAP)

    def score_answer(self, answer: str) -> int:
        """Compute the final 0-100 score for one answer."""
        base = min(word_count(answer) * POINTS_PER_WORD, BASE_SCORE_CAP)
        score = _clamp(
            base + self.keyword_bonus(answer) + self.structure_bonus(answer),
            MIN_SCORE,
            MAX_SCORE,
        )
        if self.jitter:
            score += self._rng.randint(-self.jitter, self.jitter - 1)
        return _clamp(score, 0, MAX_SCORE)

    def feedback(self, status: ScoreStatus) -> str:
        return self._rng.choice(FEEDBACK_POOLS[status])

    def strengths(self, score: int) -> list[str]:
        count = min(score // 25 + 1, 3)
        return list(self.variant.strength_pool[:count])

    def improvements(self, score: int) -> list[str]:
        count = max(1, (100 - score) // 25)
        return list(self.variant.improvement_pool[:count])

    def analyze_answer(self, question: Question, answer: str) -> AnswerAnalysis:
        score = self.score_answer(answer)
        status = score_status(score)
        return AnswerAnalysis(
            question_id=question.id,
            score=score,
            status=status,
            feedback=self.feedback(status),
            strengths=self.strengths(score),
            improvements=self.improvements(score),
            suggested_answer=self.variant.suggested_answer,
        )

    def analyze(
        self,
        questions: Iterable[Question],
        answers: Mapping[int, str],
    ) -> list[AnswerAnalysis]:
        """
        Score every question; unanswered questions score as empty answers.

        Returns:
            One AnswerAnalysis per question, in question order.
        """
        analyses = [self.analyze_answer(q, answers.get(q.id, "")) for q in questions]
        logger.info(
            "Scored %d answers for %s interview (overall %d%%)",
            len(analyses),
            self.variant.variant_id,
            overall_score(analyses),
        )
        return analyses
