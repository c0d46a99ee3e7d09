"""
Tests for the heuristic answer scorer.

Last Grunted: 10/19/2026
"""

from __future__ import annotations

import random

import pytest

from interview_prep.models import Question, ScoreStatus, mean_score
from interview_prep.scoring import (
    FEEDBACK_POOLS,
    AnswerScorer,
    overall_score,
    paragraph_count,
    score_status,
    sentence_count,
    status_counts,
    word_count,
)
from tests.mock_data import FORTY_WORD_ANSWER, SHORT_ANSWER, STAR_ANSWER, make_analysis, words
from variants import load_variant


QUESTION = Question(id=1, question="Tell me about a challenge.", category="Teamwork")


# =============================================================================
# Text features
# =============================================================================

class TestTextFeatures:
    """Word, sentence and paragraph counting."""

    def test_empty_answer_has_no_words(self):
        assert word_count("") == 0
        assert word_count("   \n ") == 0

    def test_word_count_splits_on_whitespace(self):
        assert word_count("one  two\nthree\tfour") == 4

    def test_sentence_count_ignores_empty_fragments(self):
        assert sentence_count("One. Two. Three.") == 3
        assert sentence_count("No terminator") == 1
        assert sentence_count("") == 0

    def test_paragraph_count(self):
        assert paragraph_count("First\n\nSecond") == 2
        assert paragraph_count("Single line") == 1


# =============================================================================
# Status buckets
# =============================================================================

class TestScoreStatus:
    """Fixed 85 / 70 / 50 thresholds."""

    @pytest.mark.parametrize(
        ("score", "expected"),
        [
            (100, ScoreStatus.EXCELLENT),
            (85, ScoreStatus.EXCELLENT),
            (84, ScoreStatus.GOOD),
            (70, ScoreStatus.GOOD),
            (69, ScoreStatus.NEEDS_IMPROVEMENT),
            (50, ScoreStatus.NEEDS_IMPROVEMENT),
            (49, ScoreStatus.POOR),
            (0, ScoreStatus.POOR),
        ],
    )
    def test_boundaries(self, score, expected):
        assert score_status(score) == expected

    def test_label(self):
        assert ScoreStatus.NEEDS_IMPROVEMENT.label == "NEEDS IMPROVEMENT"


# =============================================================================
# Score formula
# =============================================================================

class TestScoreAnswer:
    """Deterministic scoring with jitter disabled."""

    def test_empty_answer_scores_floor(self):
        scorer = AnswerScorer(load_variant("technical"))
        assert scorer.score_answer("") == 20

    def test_short_answer_clamped_to_floor(self):
        scorer = AnswerScorer(load_variant("technical"))
        assert scorer.score_answer(SHORT_ANSWER) == 20

    def test_base_is_two_points_per_word(self):
        scorer = AnswerScorer(load_variant("technical"))
        assert scorer.score_answer(words(15)) == 30
        assert scorer.score_answer(FORTY_WORD_ANSWER) == 80

    def test_keyword_bonus_three_per_hit(self):
        scorer = AnswerScorer(load_variant("technical"))
        answer = words(10) + " algorithm testing"
        assert scorer.keyword_bonus(answer) == 6
        assert scorer.score_answer(answer) == 24 + 6

    def test_keyword_bonus_capped(self):
        scorer = AnswerScorer(load_variant("behavioral"))
        answer = "situation task action result team challenge learned"
        assert scorer.keyword_bonus(answer) == 15

    def test_keywords_case_insensitive(self):
        scorer = AnswerScorer(load_variant("managerial"))
        assert scorer.keyword_bonus("STRATEGY and Vision") == 6

    def test_structure_bonus_capped(self):
        scorer = AnswerScorer(load_variant("behavioral"))
        assert scorer.structure_bonus(STAR_ANSWER) == 10

    def test_structure_cues_per_variant(self):
        """Behavioral rewards 'situation'/'example', technical has no cues."""
        answer = "For example it works"
        assert AnswerScorer(load_variant("behavioral")).structure_bonus(answer) == 5
        assert AnswerScorer(load_variant("technical")).structure_bonus(answer) == 0

    def test_structure_cues_case_sensitive(self):
        """Capitalized cues earn no structure bonus; keywords still count."""
        scorer = AnswerScorer(load_variant("behavioral"))
        assert scorer.structure_bonus("Situation: it works") == 0
        assert scorer.structure_bonus("the situation: it works") == 5
        assert scorer.keyword_bonus("Situation: it works") == 3

    def test_star_answer_scores_full_marks(self):
        scorer = AnswerScorer(load_variant("behavioral"))
        assert scorer.score_answer(STAR_ANSWER) == 100

    def test_deterministic_without_jitter(self):
        scorer = AnswerScorer(load_variant("technical"), rng=random.Random(1))
        assert {scorer.score_answer(FORTY_WORD_ANSWER) for _ in range(10)} == {80}

    def test_jitter_stays_in_range(self):
        scorer = AnswerScorer(load_variant("behavioral"), jitter=5, rng=random.Random(3))
        scores = [scorer.score_answer(STAR_ANSWER) for _ in range(50)]
        assert all(95 <= s <= 100 for s in scores)

    def test_negative_jitter_rejected(self):
        with pytest.raises(ValueError):
            AnswerScorer(load_variant("technical"), jitter=-1)


# =============================================================================
# Analysis
# =============================================================================

class TestAnalyze:
    """Per-question analysis and aggregation."""

    def test_analysis_fields(self):
        variant = load_variant("behavioral")
        scorer = AnswerScorer(variant, rng=random.Random(5))
        analysis = scorer.analyze_answer(QUESTION, STAR_ANSWER)

        assert analysis.question_id == 1
        assert analysis.score == 100
        assert analysis.status == ScoreStatus.EXCELLENT
        assert analysis.feedback in FEEDBACK_POOLS[ScoreStatus.EXCELLENT]
        assert analysis.strengths == list(variant.strength_pool[:3])
        assert analysis.improvements == list(variant.improvement_pool[:1])
        assert analysis.suggested_answer == variant.suggested_answer

    def test_pool_sizes_follow_score(self):
        scorer = AnswerScorer(load_variant("technical"))
        assert len(scorer.strengths(20)) == 1
        assert len(scorer.strengths(50)) == 3
        assert len(scorer.improvements(20)) == 3
        assert len(scorer.improvements(90)) == 1

    def test_unanswered_questions_score_as_empty(self):
        scorer = AnswerScorer(load_variant("technical"))
        questions = [QUESTION, Question(id=2, question="Another?", category="SQL")]

        analyses = scorer.analyze(questions, {1: FORTY_WORD_ANSWER})

        assert [a.question_id for a in analyses] == [1, 2]
        assert [a.score for a in analyses] == [80, 20]

    def test_overall_is_rounded_mean(self):
        analyses = [
            make_analysis(1, 80, ScoreStatus.GOOD),
            make_analysis(2, 71, ScoreStatus.GOOD),
        ]
        assert overall_score(analyses) == 76  # 75.5 rounds half up

    def test_mean_of_nothing_is_zero(self):
        assert mean_score([]) == 0

    def test_status_counts_include_every_bucket(self):
        counts = status_counts([make_analysis(1, 90, ScoreStatus.EXCELLENT)])
        assert counts == {
            ScoreStatus.EXCELLENT: 1,
            ScoreStatus.GOOD: 0,
            ScoreStatus.NEEDS_IMPROVEMENT: 0,
            ScoreStatus.POOR: 0,
        }
