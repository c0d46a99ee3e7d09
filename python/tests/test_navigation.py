"""
Tests for screen navigation.

Last Grunted: 10/19/2026
"""

from __future__ import annotations

import random

import pytest

from interview_prep.models import InterviewType
from interview_prep.navigation import AppNavigator, Screen
from interview_prep.otp import OTPMismatchError
from interview_prep.session import InvalidTransitionError, SessionPhase
from interview_prep.validation import FormValidationError
from tests.mock_data import fast_settings, make_login_form, make_signup_form


def make_navigator(**overrides) -> AppNavigator:
    return AppNavigator(fast_settings(**overrides), rng=random.Random(99))


async def on_dashboard() -> AppNavigator:
    nav = make_navigator()
    await nav.submit_login(make_login_form())
    return nav


# =============================================================================
# Auth
# =============================================================================

class TestAuth:
    """LOGIN / SIGNUP / OTP_VERIFICATION."""

    def test_starts_on_login(self):
        nav = make_navigator()
        assert nav.screen == Screen.LOGIN
        assert nav.is_login_mode

    def test_toggle_signup_and_login(self):
        nav = make_navigator()
        nav.show_signup()
        assert nav.screen == Screen.SIGNUP
        nav.show_login()
        assert nav.screen == Screen.LOGIN

    @pytest.mark.asyncio
    async def test_login_goes_to_dashboard(self):
        nav = make_navigator()
        user = await nav.submit_login(make_login_form("carol"))

        assert nav.screen == Screen.DASHBOARD
        assert user.username == "carol"
        assert nav.current_user is user

    @pytest.mark.asyncio
    async def test_login_missing_password(self):
        nav = make_navigator()
        with pytest.raises(FormValidationError) as exc_info:
            await nav.submit_login({"username": "carol", "password": ""})

        assert "password" in exc_info.value.errors
        assert nav.screen == Screen.LOGIN

    @pytest.mark.asyncio
    async def test_login_not_allowed_from_signup(self):
        nav = make_navigator()
        nav.show_signup()
        with pytest.raises(InvalidTransitionError):
            await nav.submit_login(make_login_form())

    @pytest.mark.asyncio
    async def test_signup_sends_otp(self):
        nav = make_navigator()
        nav.show_signup()
        otp = await nav.submit_signup(make_signup_form())

        assert nav.screen == Screen.OTP_VERIFICATION
        assert otp.is_sent
        assert otp.masked_phone == "****1234"
        assert nav.pending_account.username == "alice"
        assert nav.pending_account.verified is False

    @pytest.mark.asyncio
    async def test_invalid_signup_stays_on_signup(self):
        nav = make_navigator()
        nav.show_signup()
        with pytest.raises(FormValidationError):
            await nav.submit_signup(make_signup_form(email="alice@example.org"))

        assert nav.screen == Screen.SIGNUP
        assert nav.otp is None

    @pytest.mark.asyncio
    async def test_verify_otp_returns_to_login(self):
        nav = make_navigator()
        nav.show_signup()
        otp = await nav.submit_signup(make_signup_form())

        assert await nav.verify_otp(otp.generated_code) is True

        assert nav.screen == Screen.LOGIN
        assert nav.message == "Account verified successfully! Please login."
        assert nav.pending_account.verified is True

    @pytest.mark.asyncio
    async def test_wrong_otp_stays_on_verification(self):
        nav = make_navigator()
        nav.show_signup()
        await nav.submit_signup(make_signup_form())

        with pytest.raises(OTPMismatchError):
            await nav.verify_otp("000000")
        assert nav.screen == Screen.OTP_VERIFICATION

    @pytest.mark.asyncio
    async def test_verified_account_used_on_login(self):
        nav = make_navigator()
        nav.show_signup()
        otp = await nav.submit_signup(make_signup_form())
        await nav.verify_otp(otp.generated_code)

        user = await nav.submit_login(make_login_form("alice"))
        assert user.verified is True
        assert user.email == "alice@gmail.com"

    @pytest.mark.asyncio
    async def test_back_to_signup(self):
        nav = make_navigator()
        nav.show_signup()
        await nav.submit_signup(make_signup_form())

        nav.back_to_signup()
        assert nav.screen == Screen.SIGNUP
        assert nav.otp is None


# =============================================================================
# Dashboard
# =============================================================================

class TestDashboard:
    """Resume upload and interview selection."""

    @pytest.mark.asyncio
    async def test_upload_resume(self):
        nav = await on_dashboard()
        warnings = await nav.upload_resume("cv.docx", 2048)

        assert warnings == []
        assert nav.resume_filename == "cv.docx"

    @pytest.mark.asyncio
    async def test_upload_rejects_bad_extension(self):
        nav = await on_dashboard()
        with pytest.raises(FormValidationError):
            await nav.upload_resume("cv.txt")
        assert nav.resume_filename is None

    @pytest.mark.asyncio
    async def test_remove_resume(self):
        nav = await on_dashboard()
        await nav.upload_resume("cv.pdf")
        nav.remove_resume()
        assert nav.resume_filename is None

    @pytest.mark.asyncio
    async def test_select_interview_requires_resume(self):
        nav = await on_dashboard()
        with pytest.raises(InvalidTransitionError):
            nav.select_interview("technical")
        assert nav.screen == Screen.DASHBOARD

    @pytest.mark.asyncio
    async def test_select_interview_creates_session(self):
        nav = await on_dashboard()
        await nav.upload_resume("cv.pdf")

        session = nav.select_interview(InterviewType.BEHAVIORAL)

        assert nav.screen == Screen.INTERVIEW
        assert nav.session is session
        assert session.phase == SessionPhase.ANALYZING
        assert session.username == "alice"
        assert session.resume_filename == "cv.pdf"
        assert session.analysis_delay == 0

    @pytest.mark.asyncio
    async def test_select_unknown_interview(self):
        nav = await on_dashboard()
        await nav.upload_resume("cv.pdf")
        with pytest.raises(ValueError, match="Unknown variant"):
            nav.select_interview("panel")

    @pytest.mark.asyncio
    async def test_back_to_dashboard_discards_session(self):
        nav = await on_dashboard()
        await nav.upload_resume("cv.pdf")
        nav.select_interview("managerial")

        nav.back_to_dashboard()

        assert nav.screen == Screen.DASHBOARD
        assert nav.session is None
        assert nav.resume_filename == "cv.pdf"

    @pytest.mark.asyncio
    async def test_logout_clears_state(self):
        nav = await on_dashboard()
        await nav.upload_resume("cv.pdf")
        nav.select_interview("technical")

        nav.logout()

        assert nav.screen == Screen.LOGIN
        assert nav.current_user is None
        assert nav.resume_filename is None
        assert nav.session is None

    def test_logout_not_allowed_from_login(self):
        nav = make_navigator()
        with pytest.raises(InvalidTransitionError):
            nav.logout()
