"""
Mock Interview Prep Package.

Console mock interview practice with simulated authentication and
heuristic scoring.

Components:
    - InterviewSession: Question navigation, answer map and elapsed timer
    - AnswerScorer: Word count / keyword / structure heuristic scoring
    - OTPVerifier: In-memory one-time-password simulation
    - ReportWriter: Exports scored reports to PDF and JSON
    - Models: Pydantic models for questions, analyses and reports

The screen navigator and the command line live in
``interview_prep.navigation`` and ``interview_prep.cli``; they depend on the
``variants`` package and are not imported here.

Example:
    >>> from interview_prep import InterviewSession
    >>> from variants import load_variant
    >>>
    >>> session = InterviewSession(load_variant("managerial"), username="alice")
    >>> await session.analyze()
    >>> session.record_answer("My approach starts with the business outcome...")
    >>> report = session.finish()
    >>> print(f"Overall: {report.overall_score}%")

Last Grunted: 10/19/2026
"""

from .models import (
    AnswerAnalysis,
    InterviewReport,
    InterviewType,
    Question,
    ScoreStatus,
    UserAccount,
)

from .validation import (
    FormValidationError,
    validate_email,
    validate_login,
    validate_password,
    validate_resume,
    validate_signup,
)

from .otp import (
    OTPError,
    OTPIncompleteError,
    OTPMismatchError,
    OTPVerifier,
    ResendNotAllowedError,
)

from .scoring import AnswerScorer, score_status

from .session import InterviewSession, InvalidTransitionError, SessionPhase

from .report import build_report, format_summary, layout_report, report_filename

from .output import ReportExportError, ReportWriter

from .config import Settings, get_settings


__version__ = "0.1.0"

__all__ = [
    # Models
    "AnswerAnalysis",
    "InterviewReport",
    "InterviewType",
    "Question",
    "ScoreStatus",
    "UserAccount",
    # Validation
    "FormValidationError",
    "validate_email",
    "validate_login",
    "validate_password",
    "validate_resume",
    "validate_signup",
    # OTP
    "OTPError",
    "OTPIncompleteError",
    "OTPMismatchError",
    "OTPVerifier",
    "ResendNotAllowedError",
    # Scoring
    "AnswerScorer",
    "score_status",
    # Session
    "InterviewSession",
    "InvalidTransitionError",
    "SessionPhase",
    # Report
    "ReportExportError",
    "ReportWriter",
    "build_report",
    "format_summary",
    "layout_report",
    "report_filename",
    # Config
    "Settings",
    "get_settings",
]
