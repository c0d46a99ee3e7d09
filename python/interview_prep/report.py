"""
Interview report building, text summary and page layout.

The layout works in millimetres on an A4 page with a top-left origin, the
same coordinate system the PDF export uses before flipping the y axis.
Blocks that do not fit in the remaining vertical space start a new page.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Final, Iterable, Mapping, Optional

from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit

from .models import AnswerAnalysis, InterviewReport, InterviewType, Question, ScoreStatus
from .scoring import status_counts


__all__ = [
    "RECOMMENDATIONS",
    "ReportPage",
    "TextLine",
    "build_report",
    "format_summary",
    "format_time",
    "layout_report",
    "report_filename",
]


logger = logging.getLogger(__name__)


# =============================================================================
# Page geometry (millimetres)
# =============================================================================

PAGE_WIDTH: Final[float] = 210.0
PAGE_HEIGHT: Final[float] = 297.0
MARGIN: Final[float] = 20.0
BULLET_INDENT: Final[float] = 25.0
FOOTER_OFFSET: Final[float] = 10.0
LINE_HEIGHT_FACTOR: Final[float] = 0.4  # mm of vertical advance per font point

QUESTION_BLOCK_SPACE: Final[float] = 60.0
RECOMMENDATIONS_SPACE: Final[float] = 40.0
ANSWER_PREVIEW_CHARS: Final[int] = 300

FONT_REGULAR: Final[str] = "Helvetica"
FONT_BOLD: Final[str] = "Helvetica-Bold"
FONT_ITALIC: Final[str] = "Helvetica-Oblique"

RECOMMENDATIONS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "Continue Doing:",
        (
            "• Providing structured and detailed responses",
            "• Using relevant examples and experiences",
            "• Demonstrating good understanding of concepts",
        ),
    ),
    (
        "Focus Areas:",
        (
            "• Add more specific metrics and quantifiable results",
            "• Include more detailed implementation strategies",
            "• Practice articulating complex concepts more clearly",
        ),
    ),
    (
        "Next Steps:",
        (
            "1. Review the detailed feedback for each question",
            "2. Practice answering similar questions with the suggested improvements",
            "3. Consider retaking the interview to track your progress",
            "4. Focus on the areas marked as 'needs improvement'",
        ),
    ),
)


@dataclass(frozen=True)
class TextLine:
    """One positioned line of text. ``y`` is the baseline from the page top."""

    text: str
    x: float
    y: float
    font: str = FONT_REGULAR
    size: float = 10.0
    align: str = "left"


@dataclass
class ReportPage:
    number: int
    lines: list[TextLine] = field(default_factory=list)


# =============================================================================
# Report assembly
# =============================================================================

def build_report(
    username: str,
    interview_type: InterviewType,
    questions: Iterable[Question],
    answers: Mapping[int, str],
    analyses: Iterable[AnswerAnalysis],
    time_elapsed: int = 0,
) -> InterviewReport:
    """Assemble an InterviewReport and compute its overall score."""
    report = InterviewReport(
        username=username,
        interview_type=interview_type,
        questions=list(questions),
        answers=dict(answers),
        analyses=list(analyses),
        time_elapsed=time_elapsed,
    )
    report.compute_overall_score()
    return report


def format_time(seconds: int) -> str:
    """
    Format seconds as MM:SS.

    >>> format_time(75)
    '01:15'
    """
    minutes, secs = divmod(max(0, int(seconds)), 60)
    return f"{minutes:02d}:{secs:02d}"


def _generated_date(report: InterviewReport) -> date:
    try:
        return datetime.fromisoformat(report.generated_at.replace("Z", "+00:00")).date()
    except ValueError:
        return date.today()


def report_filename(
    interview_type: InterviewType | str,
    username: str,
    on_date: Optional[date] = None,
) -> str:
    """
    Build ``{interviewType}-interview-report-{username}-{ISODate}.pdf``.

    Path separators in the username are replaced so the name stays a single
    path component.
    """
    type_value = interview_type.value if isinstance(interview_type, InterviewType) else str(interview_type)
    safe_user = username.replace("/", "_").replace("\\", "_")
    day = (on_date or date.today()).isoformat()
    return f"{type_value}-interview-report-{safe_user}-{day}.pdf"


def format_summary(report: InterviewReport, icon: str = "") -> str:
    """Render the on-screen results summary as plain text."""
    counts = status_counts(report.analyses)
    title = f"{report.interview_type.display_name} Interview Results"
    lines = [
        f"{icon} {title}".strip(),
        "=" * 60,
        f"Candidate: {report.username}",
        f"Time Taken: {format_time(report.time_elapsed)}",
        f"Overall Score: {report.overall_score}%",
        f"Questions Answered: {report.answered_count}/{len(report.questions)}",
        (
            f"Excellent: {counts[ScoreStatus.EXCELLENT]} | "
            f"Good: {counts[ScoreStatus.GOOD]} | "
            f"Needs Improvement: {counts[ScoreStatus.NEEDS_IMPROVEMENT]} | "
            f"Poor: {counts[ScoreStatus.POOR]}"
        ),
        "",
    ]

    for number, analysis in enumerate(report.analyses, start=1):
        question = report.question_by_id(analysis.question_id)
        lines.append(
            f"Q{number} [{analysis.score}% {analysis.status.label}] "
            f"{question.question if question else ''}".rstrip()
        )
        lines.append(f"    {analysis.feedback}")
        if analysis.strengths:
            lines.append(f"    Strengths: {'; '.join(analysis.strengths)}")
        if analysis.improvements:
            lines.append(f"    Improve: {'; '.join(analysis.improvements)}")
    return "\n".join(lines)


# =============================================================================
# Layout
# =============================================================================

class _PageCursor:
    """Tracks the vertical position and opens pages as content flows."""

    def __init__(self) -> None:
        self.pages: list[ReportPage] = [ReportPage(number=1)]
        self.y = MARGIN

    @property
    def page(self) -> ReportPage:
        return self.pages[-1]

    def new_page(self) -> None:
        self.pages.append(ReportPage(number=len(self.pages) + 1))
        self.y = MARGIN

    def ensure_space(self, required: float) -> None:
        if self.y + required > PAGE_HEIGHT - MARGIN:
            self.new_page()

    def text(
        self,
        text: str,
        x: float = MARGIN,
        size: float = 10.0,
        font: str = FONT_REGULAR,
        advance: float = 0.0,
        align: str = "left",
    ) -> None:
        self.ensure_space(size * LINE_HEIGHT_FACTOR)
        self.page.lines.append(TextLine(text, x, self.y, font, size, align))
        self.y += advance

    def wrapped(
        self,
        text: str,
        x: float = MARGIN,
        max_width: float = PAGE_WIDTH - 2 * MARGIN,
        size: float = 9.0,
        font: str = FONT_REGULAR,
    ) -> None:
        step = size * LINE_HEIGHT_FACTOR
        for line in simpleSplit(text, font, size, max_width * mm) or [""]:
            self.ensure_space(step)
            self.page.lines.append(TextLine(line, x, self.y, font, size))
            self.y += step


def _answer_preview(answer: str) -> str:
    if len(answer) > ANSWER_PREVIEW_CHARS:
        return answer[:ANSWER_PREVIEW_CHARS] + "..."
    return answer


def layout_report(report: InterviewReport) -> list[ReportPage]:
    """
    Lay the report out on A4 pages.

    Sections: title, candidate details, overall performance, one block per
    question, fixed recommendations. A question block needs 60mm and the
    recommendations 40mm of free space, otherwise they start a new page.

    Returns:
        Pages in order, each holding positioned text lines.
    """
    cursor = _PageCursor()
    center = PAGE_WIDTH / 2
    counts = status_counts(report.analyses)
    generated = _generated_date(report)

    cursor.text("Interview Performance Report", center, 20, FONT_BOLD, 15, "center")
    cursor.text(f"{report.interview_type.display_name} Interview", center, 14, FONT_REGULAR, 10, "center")
    cursor.text(f"Candidate: {report.username}", size=12, advance=8)
    cursor.text(f"Date: {generated.isoformat()}", size=12, advance=8)
    cursor.text(f"Time Taken: {format_time(report.time_elapsed)}", size=12, advance=15)

    cursor.text("Overall Performance", size=16, font=FONT_BOLD, advance=10)
    cursor.text(f"Overall Score: {report.overall_score}%", size=12, advance=8)
    cursor.text(
        f"Questions Answered: {report.answered_count}/{len(report.questions)}",
        size=12,
        advance=8,
    )
    cursor.text(f"Excellent Responses: {counts[ScoreStatus.EXCELLENT]}", size=12, advance=6)
    cursor.text(f"Good Responses: {counts[ScoreStatus.GOOD]}", size=12, advance=6)
    cursor.text(f"Needs Improvement: {counts[ScoreStatus.NEEDS_IMPROVEMENT]}", size=12, advance=6)
    cursor.text(f"Poor Responses: {counts[ScoreStatus.POOR]}", size=12, advance=15)

    cursor.text("Detailed Question Analysis", size=16, font=FONT_BOLD, advance=15)

    bullet_width = PAGE_WIDTH - 2 * MARGIN - (BULLET_INDENT - MARGIN)
    for number, analysis in enumerate(report.analyses, start=1):
        question = report.question_by_id(analysis.question_id)
        answer = report.answers.get(analysis.question_id) or "No answer provided"

        cursor.ensure_space(QUESTION_BLOCK_SPACE)
        cursor.text(f"Question {number} - Score: {analysis.score}%", size=14, font=FONT_BOLD, advance=8)
        cursor.text(f"Status: {analysis.status.label}", size=10, advance=8)

        cursor.text("Question:", size=10, font=FONT_BOLD, advance=5)
        cursor.wrapped(question.question if question else "")
        cursor.y += 5

        cursor.text("Your Answer:", size=10, font=FONT_BOLD, advance=5)
        cursor.wrapped(_answer_preview(answer))
        cursor.y += 5

        cursor.text("AI Feedback:", size=10, font=FONT_BOLD, advance=5)
        cursor.wrapped(analysis.feedback)
        cursor.y += 5

        for heading, items in (
            ("Strengths:", analysis.strengths),
            ("Areas for Improvement:", analysis.improvements),
        ):
            if not items:
                continue
            cursor.text(heading, size=10, font=FONT_BOLD, advance=5)
            for item in items:
                cursor.wrapped(f"• {item}", x=BULLET_INDENT, max_width=bullet_width)
            cursor.y += 3

        cursor.y += 10

    cursor.ensure_space(RECOMMENDATIONS_SPACE)
    cursor.text("Recommendations", size=16, font=FONT_BOLD, advance=15)
    for heading, items in RECOMMENDATIONS:
        cursor.text(heading, size=12, font=FONT_BOLD, advance=8)
        for item in items:
            cursor.wrapped(item, x=BULLET_INDENT, max_width=bullet_width, size=10)
        cursor.y += 10

    footer = f"Generated on {report.generated_at}"
    for page in cursor.pages:
        page.lines.append(
            TextLine(
                f"{footer} - Page {page.number} of {len(cursor.pages)}",
                center,
                PAGE_HEIGHT - FOOTER_OFFSET,
                FONT_ITALIC,
                8,
                "center",
            )
        )

    logger.debug("Laid out report over %d page(s)", len(cursor.pages))
    return cursor.pages
