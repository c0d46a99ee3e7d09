"""
Tests for report building, layout and export.

Last Grunted: 10/19/2026
"""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from interview_prep.models import InterviewType, ScoreStatus
from interview_prep.output import ReportExportError, ReportReadError, ReportWriter
from interview_prep.report import (
    ANSWER_PREVIEW_CHARS,
    MARGIN,
    PAGE_HEIGHT,
    RECOMMENDATIONS,
    build_report,
    format_summary,
    layout_report,
    report_filename,
)
from tests.mock_data import make_analysis, make_question, make_report


def all_text(pages) -> list[str]:
    return [line.text for page in pages for line in page.lines]


# =============================================================================
# Building
# =============================================================================

class TestBuildReport:
    """build_report() aggregation."""

    def test_overall_score_computed(self):
        report = build_report(
            username="bob",
            interview_type=InterviewType.MANAGERIAL,
            questions=[make_question(1), make_question(2)],
            answers={1: "answer"},
            analyses=[
                make_analysis(1, 90, ScoreStatus.EXCELLENT),
                make_analysis(2, 45, ScoreStatus.POOR),
            ],
            time_elapsed=61,
        )

        assert report.overall_score == 68  # 67.5 rounds half up
        assert report.answered_count == 1
        assert report.time_elapsed == 61
        assert report.generated_at.endswith("Z")

    def test_empty_report_scores_zero(self):
        report = build_report("bob", InterviewType.TECHNICAL, [], {}, [])
        assert report.overall_score == 0


class TestReportFilename:
    """Exported document naming."""

    def test_pattern(self):
        name = report_filename(InterviewType.BEHAVIORAL, "alice", date(2026, 10, 19))
        assert name == "behavioral-interview-report-alice-2026-10-19.pdf"

    def test_accepts_plain_string_type(self):
        assert report_filename("technical", "a", date(2026, 1, 2)).startswith("technical-interview-report-a-")

    def test_path_separators_replaced(self):
        name = report_filename(InterviewType.TECHNICAL, "../evil", date(2026, 1, 2))
        assert "/" not in name


class TestFormatSummary:
    """On-screen summary text."""

    def test_summary_contents(self):
        report = make_report(num_questions=2)
        text = format_summary(report, icon="💻")

        assert text.startswith("💻 Technical Interview Results")
        assert f"Overall Score: {report.overall_score}%" in text
        assert "Questions Answered: 2/2" in text
        assert "Time Taken: 02:05" in text
        assert "Q1 [" in text and "Q2 [" in text
        assert "Sample question number 2?" in text


# =============================================================================
# Layout
# =============================================================================

class TestLayout:
    """A4 pagination."""

    def test_small_report_sections_in_order(self):
        pages = layout_report(make_report(num_questions=1))
        texts = all_text(pages)

        order = [
            "Interview Performance Report",
            "Technical Interview",
            "Overall Performance",
            "Detailed Question Analysis",
            "Recommendations",
        ]
        positions = [texts.index(t) for t in order]
        assert positions == sorted(positions)
        for heading, _items in RECOMMENDATIONS:
            assert heading in texts

    def test_long_report_paginates(self):
        pages = layout_report(make_report(num_questions=15, answer_length=400))

        assert len(pages) > 1
        assert [p.number for p in pages] == list(range(1, len(pages) + 1))

    def test_lines_stay_inside_page(self):
        """Body text never runs into the bottom margin."""
        pages = layout_report(make_report(num_questions=15, answer_length=400))
        for page in pages:
            for line in page.lines:
                if line.text.startswith("Generated on"):
                    continue
                assert MARGIN <= line.y <= PAGE_HEIGHT - MARGIN

    def test_question_block_starts_with_enough_room(self):
        """A question header is never placed in the last 60mm of a page."""
        pages = layout_report(make_report(num_questions=15, answer_length=400))
        for page in pages:
            for line in page.lines:
                if line.text.startswith("Question ") and "Score:" in line.text:
                    assert line.y + 60 <= PAGE_HEIGHT - MARGIN

    def test_answer_truncated(self):
        report = make_report(num_questions=1, answer_length=ANSWER_PREVIEW_CHARS + 50)
        text = "".join(all_text(layout_report(report)))

        assert "x" * ANSWER_PREVIEW_CHARS + "..." in text
        assert "x" * (ANSWER_PREVIEW_CHARS + 1) not in text

    def test_unanswered_question_placeholder(self):
        report = make_report(num_questions=1)
        report.answers.clear()
        assert "No answer provided" in all_text(layout_report(report))

    def test_every_page_has_footer(self):
        pages = layout_report(make_report(num_questions=15, answer_length=400))
        for page in pages:
            footer = page.lines[-1]
            assert footer.text.startswith("Generated on 2026-10-19T09:30:00Z")
            assert f"Page {page.number} of {len(pages)}" in footer.text


# =============================================================================
# Writer
# =============================================================================

class TestReportWriter:
    """PDF and JSON export."""

    def test_creates_output_dir(self, tmp_path: Path):
        target = tmp_path / "nested" / "reports"
        ReportWriter(target)
        assert target.is_dir()

    def test_export_pdf(self, tmp_path: Path):
        writer = ReportWriter(tmp_path)
        report = make_report(num_questions=15, answer_length=400)

        path = writer.export_pdf(report, on_date=date(2026, 10, 19))

        assert path.name == "technical-interview-report-alice-2026-10-19.pdf"
        assert path.read_bytes().startswith(b"%PDF")
        assert writer.list_reports() == [path]

    def test_json_round_trip(self, tmp_path: Path):
        writer = ReportWriter(tmp_path)
        report = make_report(num_questions=3)

        path = writer.write_json(report, on_date=date(2026, 10, 19))
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["_meta"]["version"] == "1.0"
        assert data["interview_type"] == "technical"

        loaded = writer.load_json(path)
        assert loaded.overall_score == report.overall_score
        assert loaded.answers == report.answers
        assert loaded.analyses == report.analyses

    def test_load_invalid_json(self, tmp_path: Path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ReportReadError):
            ReportWriter(tmp_path).load_json(path)

    def test_load_missing_file(self, tmp_path: Path):
        with pytest.raises(ReportReadError):
            ReportWriter(tmp_path).load_json(tmp_path / "missing.json")

    def test_unwritable_output_dir(self, tmp_path: Path):
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")

        with pytest.raises(ReportExportError):
            ReportWriter(blocker / "reports")
