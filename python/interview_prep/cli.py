"""
Mock interview command line.

Usage:
    # Answer questions interactively and export the report:
    mock-interview practice --type technical --username alice --export

    # Run a full scripted session (signup, OTP, login, upload, interview):
    mock-interview demo --type behavioral --no-latency

    # List interview types:
    mock-interview variants
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Final, Optional, Sequence

from variants import available_variants, load_variant

from .config import RESULTS_ANALYSIS_DELAY_SECONDS, Settings, get_settings
from .models import InterviewReport, InterviewType
from .navigation import AppNavigator
from .otp import OTPError
from .output import ReportExportError, ReportWriter
from .report import format_summary, format_time
from .session import InterviewSession, SessionPhase
from .validation import FormValidationError


logger: logging.Logger = logging.getLogger(__name__)


# =============================================================================
# Exit Codes
# =============================================================================

EXIT_SUCCESS: Final[int] = 0
EXIT_VALIDATION_ERROR: Final[int] = 1
EXIT_EXPORT_ERROR: Final[int] = 2
EXIT_INTERRUPTED: Final[int] = 130  # Standard SIGINT exit code


# =============================================================================
# Defaults
# =============================================================================

DEFAULT_USERNAME: Final[str] = "User"
DEFAULT_RESUME: Final[str] = "resume.pdf"
PRACTICE_PASSWORD: Final[str] = "practice"

DEMO_EMAIL_DOMAIN: Final[str] = "gmail.com"
DEMO_PHONE: Final[str] = "5550101234"
DEMO_PASSWORD: Final[str] = "demo-pass"

COMMAND_PREVIOUS: Final[str] = ":prev"
COMMAND_NEXT: Final[str] = ":next"
COMMAND_FINISH: Final[str] = ":finish"


# =============================================================================
# Canned demo answers
# =============================================================================

DEMO_ANSWERS: dict[InterviewType, tuple[str, ...]] = {
    InterviewType.TECHNICAL: (
        "I would start by clarifying the requirements and the expected load. Then I pick a data structure "
        "that keeps the hot path cheap, usually a hash map for lookups and a heap when ordering matters. "
        "I measure performance with a profiler before optimizing, and I add unit testing around edge cases "
        "so debugging regressions later is easy.\n\nFor scalability I would shard by key and cache reads.",
        "A closure is a function that keeps access to variables from the scope where it was defined.",
        "I usually write a failing test first, reproduce the bug, then narrow it down with logging and a "
        "debugger. Once fixed, the test stays as a regression check.",
        "Not sure.",
    ),
    InterviewType.BEHAVIORAL: (
        "The situation was a release at risk because two teams disagreed on the API contract. My task was "
        "to get us aligned within a week. The action I took was to run a short workshop where each team "
        "walked through their constraints, and we wrote the contract together. The result was that we "
        "shipped on time and the team kept using the workshop format.\n\nI learned that a shared document "
        "beats a long email thread when there is a challenge like this.",
        "For example, I once took over a project mid-flight and set up weekly check-ins with the team.",
        "I stay calm under pressure by breaking work into small pieces and communicating early.",
        "I prefer not to answer.",
    ),
    InterviewType.MANAGERIAL: (
        "My approach starts with the business outcome. I set a vision the team can repeat back, agree on "
        "the strategy with each stakeholder, and make the key decision criteria explicit so people can act "
        "without waiting for me. I measure impact quarterly and adjust.\n\nLeadership for me means removing "
        "blockers and making trade-offs visible.",
        "I would align the leadership team on two or three priorities and cut the rest.",
        "I give feedback in one-on-ones and follow up with written notes.",
        "It depends.",
    ),
}


# =============================================================================
# Console helpers
# =============================================================================

def _print_question(session: InterviewSession) -> None:
    question = session.current_question
    number, total = session.progress
    variant = session.variant

    print()
    print(f"{variant.ui.icon} {variant.ui.title} - Question {number} of {total} "
          f"[{question.category}] ({format_time(session.elapsed_seconds)})")
    print(question.question)
    if variant.ui.show_tips and question.tip:
        print(f"  Tip: {question.tip}")
    existing = session.answer_for(question.id)
    if existing:
        print(f"  (current answer: {len(existing.split())} words)")


async def _read_answer() -> list[str]:
    """Read lines until an empty line. EOF behaves like :finish."""
    lines: list[str] = []
    while True:
        try:
            line = await asyncio.to_thread(input, "> " if not lines else "  ")
        except EOFError:
            return lines or [COMMAND_FINISH]
        if not line.strip():
            return lines
        lines.append(line)


def _export(report: InterviewReport, output_dir: Path) -> tuple[Path, Path]:
    writer = ReportWriter(output_dir)
    return writer.export_pdf(report), writer.write_json(report)


async def _analyze_results(settings: Settings) -> None:
    print("Analyzing your answers...")
    await asyncio.sleep(settings.delay(RESULTS_ANALYSIS_DELAY_SECONDS))


def _print_results(session: InterviewSession) -> None:
    report = session.report
    print()
    print(format_summary(report, icon=session.variant.ui.icon))


# =============================================================================
# Flows
# =============================================================================

async def run_practice(
    interview_type: str,
    username: str,
    resume: str,
    settings: Settings,
    export: bool = False,
) -> int:
    """
    Interactive console interview.

    Answers are multi-line; an empty line submits and moves on. ``:prev``,
    ``:next`` and ``:finish`` on their own line navigate without answering.
    """
    nav = AppNavigator(settings)
    await nav.submit_login({"username": username, "password": PRACTICE_PASSWORD})

    resume_path = Path(resume)
    size = resume_path.stat().st_size if resume_path.is_file() else None
    for warning in await nav.upload_resume(resume_path.name, size):
        logger.warning(warning)

    session = nav.select_interview(interview_type)
    print(session.variant.ui.analyzing_message)
    await session.analyze()
    print(f"Commands: {COMMAND_PREVIOUS}, {COMMAND_NEXT}, {COMMAND_FINISH}. Empty line submits.")

    timer = asyncio.create_task(session.run_timer())
    try:
        while session.phase == SessionPhase.ACTIVE:
            _print_question(session)
            lines = await _read_answer()
            command = lines[0].strip() if len(lines) == 1 else ""

            if command == COMMAND_PREVIOUS:
                session.go_previous()
            elif command == COMMAND_NEXT:
                session.go_next()
            elif command == COMMAND_FINISH:
                session.finish()
            else:
                if lines:
                    session.record_answer("\n".join(lines))
                session.go_next()
    finally:
        session.stop_timer()
        await timer

    await _analyze_results(settings)
    _print_results(session)
    if export:
        pdf_path, json_path = _export(session.report, settings.output_dir)
        print(f"Report saved: {pdf_path}")
        print(f"Data saved: {json_path}")
    return EXIT_SUCCESS


async def run_demo(
    interview_type: str,
    username: str,
    settings: Settings,
    export: bool = True,
) -> InterviewReport:
    """
    Scripted walk through every screen with canned answers.

    Returns:
        The scored report.
    """
    nav = AppNavigator(settings)

    nav.show_signup()
    otp = await nav.submit_signup(
        {
            "username": username,
            "email": f"{'.'.join(username.lower().split())}@{DEMO_EMAIL_DOMAIN}",
            "phone": DEMO_PHONE,
            "password": DEMO_PASSWORD,
            "confirm_password": DEMO_PASSWORD,
        }
    )
    otp.paste(otp.generated_code)
    await nav.verify_otp()
    logger.info(nav.message)

    await nav.submit_login({"username": username, "password": DEMO_PASSWORD})
    await nav.upload_resume(DEFAULT_RESUME)

    session = nav.select_interview(interview_type)
    await session.analyze()

    canned = DEMO_ANSWERS[session.variant.interview_type]
    for index in range(session.question_count):
        session.record_answer(canned[index % len(canned)])
        session.tick(30)
        if not session.is_last_question:
            session.go_next()

    session.complete()
    logger.info(
        "Interview completed: %d/%d answered in %s",
        session.answered_count,
        session.question_count,
        format_time(session.elapsed_seconds),
    )
    report = session.view_results()
    await _analyze_results(settings)
    _print_results(session)

    if export:
        pdf_path, json_path = _export(report, settings.output_dir)
        print(f"Report saved: {pdf_path}")
        print(f"Data saved: {json_path}")
    return report


def list_variants() -> int:
    for variant_id in available_variants():
        variant = load_variant(variant_id)
        print(
            f"{variant_id:<12} {variant.ui.icon} {variant.display_name} "
            f"({len(variant.question_bank)} questions)"
        )
    return EXIT_SUCCESS


# =============================================================================
# Entry points
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mock-interview",
        description="Practice technical, behavioral and managerial interviews from the console.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables:
    OUTPUT_DIR          Directory for exported reports (default: ./output)
    SIMULATED_LATENCY   Set to false to skip simulated delays
    SCORE_JITTER        Score jitter amplitude in points (default: 0)
    SCORE_SEED          Seed for scoring randomness
    OTP_RESEND_SECONDS  OTP resend countdown (default: 30)
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--type",
        dest="interview_type",
        choices=available_variants(),
        default=InterviewType.TECHNICAL.value,
        help="Interview type (default: technical)",
    )
    common.add_argument("--username", default=DEFAULT_USERNAME, help="Candidate name")
    common.add_argument("--output-dir", type=Path, default=None, help="Report directory")
    common.add_argument("--no-latency", action="store_true", help="Skip simulated delays")
    common.add_argument("--seed", type=int, default=None, help="Seed for feedback selection and jitter")

    practice = subparsers.add_parser("practice", parents=[common], help="Answer questions interactively")
    practice.add_argument("--resume", default=DEFAULT_RESUME, help="Resume file (.pdf, .doc, .docx)")
    practice.add_argument("--export", action="store_true", help="Write PDF and JSON reports")

    demo = subparsers.add_parser("demo", parents=[common], help="Run a scripted session with canned answers")
    demo.add_argument("--no-export", dest="export", action="store_false", help="Skip writing reports")

    subparsers.add_parser("variants", help="List interview types")
    return parser


def _resolve_settings(args: argparse.Namespace) -> Settings:
    settings = get_settings()
    overrides: dict[str, object] = {}
    if args.output_dir is not None:
        overrides["output_dir"] = args.output_dir
    if args.no_latency:
        overrides["simulated_latency"] = False
    if args.seed is not None:
        overrides["score_seed"] = args.seed
    return dataclasses.replace(settings, **overrides) if overrides else settings


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Parse arguments and run the selected command.

    Returns:
        Exit code indicating success or failure.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        settings = _resolve_settings(args) if args.command != "variants" else get_settings()
    except RuntimeError as exc:
        logger.error("Invalid configuration: %s", exc)
        return EXIT_VALIDATION_ERROR

    logging.getLogger().setLevel(logging.DEBUG if args.verbose else settings.log_level)

    if args.command == "variants":
        return list_variants()

    try:
        if args.command == "practice":
            return asyncio.run(
                run_practice(
                    args.interview_type,
                    args.username,
                    args.resume,
                    settings,
                    export=args.export,
                )
            )
        asyncio.run(run_demo(args.interview_type, args.username, settings, export=args.export))
        return EXIT_SUCCESS
    except (FormValidationError, OTPError) as exc:
        logger.error("%s", exc)
        return EXIT_VALIDATION_ERROR
    except ReportExportError as exc:
        logger.error("Export failed: %s", exc)
        return EXIT_EXPORT_ERROR
    except KeyboardInterrupt:
        logger.info("Interview interrupted")
        return EXIT_INTERRUPTED


def cli() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
