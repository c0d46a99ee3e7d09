"""
Tests for the mock-interview command line.

Last Grunted: 10/19/2026
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from interview_prep.cli import (
    DEMO_ANSWERS,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    build_parser,
    main,
    run_demo,
)
from interview_prep.config import RESULTS_ANALYSIS_DELAY_SECONDS, reset_settings
from interview_prep.models import InterviewType
from tests.mock_data import fast_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    monkeypatch.setenv("SIMULATED_LATENCY", "false")
    monkeypatch.delenv("SCORE_JITTER", raising=False)
    reset_settings()
    yield
    reset_settings()


def feed_input(monkeypatch, lines: list[str]) -> None:
    remaining = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


# =============================================================================
# Parser
# =============================================================================

class TestParser:
    """Argument parsing."""

    def test_subcommand_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_practice_defaults(self):
        args = build_parser().parse_args(["practice"])
        assert args.interview_type == "technical"
        assert args.username == "User"
        assert args.export is False

    def test_unknown_type_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["demo", "--type", "panel"])

    def test_canned_answers_for_every_type(self):
        assert set(DEMO_ANSWERS) == set(InterviewType)


# =============================================================================
# Commands
# =============================================================================

class TestVariantsCommand:
    def test_lists_all_types(self, capsys):
        assert main(["variants"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        for name in ("technical", "behavioral", "managerial"):
            assert name in out


class TestDemoCommand:
    """Scripted end-to-end run."""

    @pytest.mark.parametrize("interview_type", ["technical", "behavioral", "managerial"])
    def test_demo_exports_reports(self, tmp_path: Path, capsys, interview_type):
        exit_code = main([
            "demo",
            "--type", interview_type,
            "--username", "Jane Doe",
            "--output-dir", str(tmp_path),
            "--seed", "3",
        ])

        assert exit_code == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "Interview Results" in out
        assert "Questions Answered: 15/15" in out

        pdfs = list(tmp_path.glob(f"{interview_type}-interview-report-Jane Doe-*.pdf"))
        assert len(pdfs) == 1
        assert pdfs[0].with_suffix(".json").exists()

    def test_demo_without_export(self, tmp_path: Path):
        assert main(["demo", "--output-dir", str(tmp_path), "--no-export"]) == EXIT_SUCCESS
        assert list(tmp_path.iterdir()) == []

    def test_invalid_username_is_validation_error(self, tmp_path: Path):
        exit_code = main(["demo", "--username", "al", "--output-dir", str(tmp_path)])
        assert exit_code == EXIT_VALIDATION_ERROR

    def test_bad_environment_value_is_validation_error(self, tmp_path: Path, monkeypatch):
        """A malformed env setting returns an exit code instead of a traceback."""
        monkeypatch.setenv("SCORE_SEED", "abc")
        reset_settings()

        exit_code = main(["demo", "--output-dir", str(tmp_path)])

        assert exit_code == EXIT_VALIDATION_ERROR
        assert list(tmp_path.iterdir()) == []


class TestResultsAnalysisDelay:
    """Simulated wait before results are shown."""

    @staticmethod
    def record_sleeps(monkeypatch) -> list[float]:
        delays: list[float] = []

        async def fake_sleep(seconds, *args, **kwargs):
            delays.append(seconds)

        monkeypatch.setattr(asyncio, "sleep", fake_sleep)
        return delays

    def test_demo_waits_before_results(self, tmp_path: Path, monkeypatch, capsys):
        delays = self.record_sleeps(monkeypatch)
        settings = fast_settings(tmp_path, simulated_latency=True)

        asyncio.run(run_demo("technical", "alice", settings, export=False))

        assert delays[-1] == RESULTS_ANALYSIS_DELAY_SECONDS
        out = capsys.readouterr().out
        assert out.index("Analyzing your answers...") < out.index("Interview Results")

    def test_no_latency_skips_wait(self, tmp_path: Path, monkeypatch):
        delays = self.record_sleeps(monkeypatch)
        settings = fast_settings(tmp_path)

        asyncio.run(run_demo("behavioral", "alice", settings, export=False))

        assert delays
        assert all(d == 0 for d in delays)

    def test_practice_waits_before_results(self, tmp_path: Path, monkeypatch):
        delays = self.record_sleeps(monkeypatch)
        feed_input(monkeypatch, [])
        monkeypatch.setenv("SIMULATED_LATENCY", "true")
        reset_settings()

        assert main(["practice", "--output-dir", str(tmp_path)]) == EXIT_SUCCESS
        assert delays[-1] == RESULTS_ANALYSIS_DELAY_SECONDS


class TestPracticeCommand:
    """Interactive run with scripted stdin."""

    def test_answer_navigate_and_finish(self, tmp_path: Path, monkeypatch, capsys):
        feed_input(monkeypatch, [
            "A hash map gives constant time lookups.",
            "It trades memory for performance.",
            "",
            ":prev",
            "",
            ":finish",
            "",
        ])

        exit_code = main([
            "practice",
            "--username", "alice",
            "--output-dir", str(tmp_path),
            "--export",
        ])

        assert exit_code == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "Question 1 of 15" in out
        assert "Question 2 of 15" in out
        assert "Questions Answered: 1/15" in out
        assert len(list(tmp_path.glob("technical-interview-report-alice-*.pdf"))) == 1

    def test_end_of_input_finishes(self, tmp_path: Path, monkeypatch, capsys):
        feed_input(monkeypatch, [])

        assert main(["practice", "--type", "behavioral", "--output-dir", str(tmp_path)]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "Questions Answered: 0/15" in out
        assert list(tmp_path.iterdir()) == []

    def test_bad_resume_extension(self, tmp_path: Path, monkeypatch):
        feed_input(monkeypatch, [])
        exit_code = main(["practice", "--resume", "notes.txt", "--output-dir", str(tmp_path)])
        assert exit_code == EXIT_VALIDATION_ERROR
