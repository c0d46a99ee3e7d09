"""
Application navigation.

Replaces per-screen visibility flags with a single Screen value:

    LOGIN <-> SIGNUP -> OTP_VERIFICATION -> LOGIN -> DASHBOARD -> INTERVIEW
                                                        ^             |
                                                        +-------------+

Each action checks the current screen and raises InvalidTransitionError when
it does not apply. Accounts only live in memory for the lifetime of the
navigator.

Last Grunted: 10/19/2026
"""

import asyncio
import logging
import random
from enum import Enum
from typing import Mapping, Optional

from variants import load_variant

from .config import (
    LOGIN_DELAY_SECONDS,
    OTP_SEND_DELAY_SECONDS,
    OTP_VERIFY_DELAY_SECONDS,
    UPLOAD_DELAY_SECONDS,
    Settings,
    get_settings,
)
from .models import InterviewType, UserAccount
from .otp import OTPVerifier
from .scoring import AnswerScorer
from .session import InterviewSession, InvalidTransitionError
from .validation import require_valid, validate_login, validate_resume, validate_signup


__all__ = ["AppNavigator", "Screen"]


logger = logging.getLogger(__name__)


class Screen(str, Enum):
    """Top-level screen shown to the user."""

    LOGIN = "login"
    SIGNUP = "signup"
    OTP_VERIFICATION = "otp_verification"
    DASHBOARD = "dashboard"
    INTERVIEW = "interview"


class AppNavigator:
    """
    Drives the auth -> OTP -> dashboard -> interview flow.

    Args:
        settings: Runtime settings. Defaults to get_settings().
        rng: Random source shared by OTP generation and scoring. Defaults to
            one seeded from ``settings.score_seed``.

    Example:
        >>> nav = AppNavigator()
        >>> nav.show_signup()
        >>> await nav.submit_signup(form)
        >>> await nav.verify_otp(nav.otp.generated_code)
        >>> await nav.submit_login({"username": "alice", "password": "secret1"})
        >>> await nav.upload_resume("resume.pdf", 120_000)
        >>> session = nav.select_interview("technical")
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._rng = rng or random.Random(self.settings.score_seed)

        self._screen = Screen.LOGIN
        self.current_user: Optional[UserAccount] = None
        self.pending_account: Optional[UserAccount] = None
        self.otp: Optional[OTPVerifier] = None
        self.resume_filename: Optional[str] = None
        self.session: Optional[InterviewSession] = None
        self.message: Optional[str] = None

    @property
    def screen(self) -> Screen:
        return self._screen

    @property
    def is_login_mode(self) -> bool:
        return self._screen == Screen.LOGIN

    def _require(self, *screens: Screen) -> None:
        if self._screen not in screens:
            allowed = ", ".join(s.value for s in screens)
            raise InvalidTransitionError(
                f"Action not allowed on screen '{self._screen.value}' (expected: {allowed})"
            )

    def _go(self, screen: Screen) -> None:
        if screen != self._screen:
            logger.info("Screen: %s -> %s", self._screen.value, screen.value)
        self._screen = screen

    # -------------------------------------------------------------------------
    # Authentication
    # -------------------------------------------------------------------------

    def show_signup(self) -> None:
        self._require(Screen.LOGIN, Screen.SIGNUP)
        self.message = None
        self._go(Screen.SIGNUP)

    def show_login(self) -> None:
        self._require(Screen.LOGIN, Screen.SIGNUP)
        self.message = None
        self._go(Screen.LOGIN)

    async def submit_login(self, form: Mapping[str, Optional[str]]) -> UserAccount:
        """
        Log in with any non-empty username/password pair.

        Raises:
            FormValidationError: A field is missing.
        """
        self._require(Screen.LOGIN)
        require_valid(validate_login(form))
        await asyncio.sleep(self.settings.delay(LOGIN_DELAY_SECONDS))

        username = form["username"]
        known = self.pending_account if self.pending_account and self.pending_account.username == username else None
        self.current_user = known or UserAccount(username=username)
        self.pending_account = None
        self.message = None
        logger.info("User '%s' logged in", username)
        self._go(Screen.DASHBOARD)
        return self.current_user

    async def submit_signup(self, form: Mapping[str, Optional[str]]) -> OTPVerifier:
        """
        Validate the signup form and send an OTP to the given phone.

        Returns:
            The verifier holding the sent code.

        Raises:
            FormValidationError: One or more fields are invalid.
        """
        self._require(Screen.SIGNUP)
        require_valid(validate_signup(form))
        await asyncio.sleep(self.settings.delay(LOGIN_DELAY_SECONDS))

        self.pending_account = UserAccount(
            username=form["username"],
            email=form.get("email"),
            phone=form.get("phone"),
        )
        self.otp = OTPVerifier(
            phone_number=form["phone"],
            resend_seconds=self.settings.otp_resend_seconds,
            send_delay=self.settings.delay(OTP_SEND_DELAY_SECONDS),
            verify_delay=self.settings.delay(OTP_VERIFY_DELAY_SECONDS),
            rng=self._rng,
        )
        logger.info("Signup submitted for '%s'", form["username"])
        self._go(Screen.OTP_VERIFICATION)
        await self.otp.send()
        return self.otp

    async def verify_otp(self, code: Optional[str] = None) -> bool:
        """
        Verify the OTP and return to the login screen on success.

        Raises:
            OTPIncompleteError, OTPMismatchError: The screen stays on
                OTP_VERIFICATION so the user can retry.
        """
        self._require(Screen.OTP_VERIFICATION)
        await self.otp.verify(code)

        self.otp.stop()
        if self.pending_account is not None:
            self.pending_account.verified = True
        self.message = "Account verified successfully! Please login."
        self._go(Screen.LOGIN)
        return True

    def back_to_signup(self) -> None:
        self._require(Screen.OTP_VERIFICATION)
        if self.otp is not None:
            self.otp.stop()
        self.otp = None
        self._go(Screen.SIGNUP)

    # -------------------------------------------------------------------------
    # Dashboard
    # -------------------------------------------------------------------------

    async def upload_resume(self, filename: str, size_bytes: Optional[int] = None) -> list[str]:
        """
        Simulate a resume upload.

        Returns:
            Advisory warnings from validate_resume().

        Raises:
            FormValidationError: Unsupported file type; nothing is stored.
        """
        self._require(Screen.DASHBOARD)
        warnings = validate_resume(filename, size_bytes)
        await asyncio.sleep(self.settings.delay(UPLOAD_DELAY_SECONDS))
        self.resume_filename = filename
        logger.info("Resume uploaded successfully: %s", filename)
        return warnings

    def remove_resume(self) -> None:
        self._require(Screen.DASHBOARD)
        self.resume_filename = None

    def select_interview(self, interview_type: InterviewType | str) -> InterviewSession:
        """
        Start an interview of the given type. Requires an uploaded resume.

        Raises:
            InvalidTransitionError: Not on the dashboard or no resume uploaded.
            ValueError: Unknown interview type.
        """
        self._require(Screen.DASHBOARD)
        if self.resume_filename is None:
            raise InvalidTransitionError("Upload a resume before selecting an interview")

        type_id = interview_type.value if isinstance(interview_type, InterviewType) else interview_type
        variant = load_variant(type_id)
        scorer = AnswerScorer(variant, jitter=self.settings.score_jitter, rng=self._rng)

        self.session = InterviewSession(
            variant,
            username=self.current_user.username if self.current_user else "User",
            resume_filename=self.resume_filename,
            analysis_delay=self.settings.delay(variant.analysis_delay),
            scorer=scorer,
        )
        logger.info("Selected category: %s", variant.variant_id)
        self._go(Screen.INTERVIEW)
        return self.session

    def back_to_dashboard(self) -> None:
        """Leave the interview; the session is discarded."""
        self._require(Screen.INTERVIEW)
        self._discard_session()
        self._go(Screen.DASHBOARD)

    def logout(self) -> None:
        self._require(Screen.DASHBOARD, Screen.INTERVIEW)
        self._discard_session()
        logger.info("User '%s' logged out", self.current_user.username if self.current_user else "")
        self.current_user = None
        self.resume_filename = None
        self.message = None
        self._go(Screen.LOGIN)

    def _discard_session(self) -> None:
        if self.session is not None:
            self.session.stop_timer()
        self.session = None
