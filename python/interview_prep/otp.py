"""
Simulated one-time-password verification.

There is no SMS transport: the code is generated in memory, "delivered" after
a fixed delay, and revealed in log output and mismatch errors. This is a demo
placeholder and provides no security whatsoever.

Thread Safety:
    This class is NOT thread-safe. It is meant to be driven from a single
    event loop.

Last Grunted: 10/19/2026
"""

import asyncio
import logging
import random
from typing import Optional

from .config import OTP_SEND_DELAY_SECONDS, OTP_VERIFY_DELAY_SECONDS, DEFAULT_OTP_RESEND_SECONDS


__all__ = [
    "OTP_LENGTH",
    "OTPError",
    "OTPIncompleteError",
    "OTPMismatchError",
    "OTPNotSentError",
    "OTPVerifier",
    "ResendNotAllowedError",
]


logger = logging.getLogger(__name__)


OTP_LENGTH = 6


# =============================================================================
# Errors
# =============================================================================

class OTPError(Exception):
    """Base class for OTP flow errors. All of them are retryable."""


class OTPNotSentError(OTPError):
    """Raised when verifying before any code was sent."""

    def __init__(self) -> None:
        super().__init__("No OTP has been sent yet")


class OTPIncompleteError(OTPError):
    """Raised when fewer than six digits were entered."""

    def __init__(self) -> None:
        super().__init__("Please enter complete OTP")


class OTPMismatchError(OTPError):
    """Raised when the entered code does not match. Reveals the expected code (demo only)."""

    def __init__(self, expected: str) -> None:
        self.expected = expected
        super().__init__(f"Invalid OTP. Please try again. (Demo: Correct OTP is {expected})")


class ResendNotAllowedError(OTPError):
    """Raised when resending before the countdown reached zero."""

    def __init__(self, seconds_left: int) -> None:
        self.seconds_left = seconds_left
        super().__init__(f"Resend available in {seconds_left}s")


# =============================================================================
# Verifier
# =============================================================================

class OTPVerifier:
    """
    In-memory OTP generation, digit entry and verification.

    Example:
        >>> verifier = OTPVerifier("5551234567", send_delay=0, verify_delay=0)
        >>> code = await verifier.send()
        >>> verifier.paste(code)
        True
        >>> await verifier.verify()
        True
    """

    def __init__(
        self,
        phone_number: str = "1234567890",
        resend_seconds: int = DEFAULT_OTP_RESEND_SECONDS,
        send_delay: float = OTP_SEND_DELAY_SECONDS,
        verify_delay: float = OTP_VERIFY_DELAY_SECONDS,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.phone_number = phone_number
        self.resend_seconds = resend_seconds
        self.send_delay = send_delay
        self.verify_delay = verify_delay
        self._rng = rng or random.Random()

        self._generated_code: Optional[str] = None
        self._digits: list[str] = [""] * OTP_LENGTH
        self.focus_index = 0
        self.error: Optional[str] = None
        self.is_sending = False
        self.verified = False
        self._seconds_left = resend_seconds
        self._stop_event = asyncio.Event()

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def last_four_digits(self) -> str:
        return self.phone_number[-4:]

    @property
    def masked_phone(self) -> str:
        return f"****{self.last_four_digits}"

    @property
    def is_sent(self) -> bool:
        return self._generated_code is not None

    @property
    def generated_code(self) -> Optional[str]:
        """The most recently generated code (exposed for the demo flow)."""
        return self._generated_code

    @property
    def digits(self) -> tuple[str, ...]:
        return tuple(self._digits)

    @property
    def entered_code(self) -> str:
        return "".join(self._digits)

    @property
    def seconds_left(self) -> int:
        return self._seconds_left

    @property
    def can_resend(self) -> bool:
        return self._seconds_left == 0

    # -------------------------------------------------------------------------
    # Sending
    # -------------------------------------------------------------------------

    def generate_code(self) -> str:
        """Return a random 6-digit numeric code (never starts with 0)."""
        return str(self._rng.randint(10 ** (OTP_LENGTH - 1), 10 ** OTP_LENGTH - 1))

    async def send(self) -> str:
        """
        Generate a fresh code and simulate delivering it.

        Returns:
            The generated code.
        """
        previous = self._generated_code
        code = self.generate_code()
        while code == previous:
            code = self.generate_code()

        self.is_sending = True
        self._generated_code = code
        try:
            await asyncio.sleep(self.send_delay)
        finally:
            self.is_sending = False

        logger.info(
            "Demo: OTP sent to phone ending in %s: %s",
            self.last_four_digits,
            code,
        )
        return code

    # -------------------------------------------------------------------------
    # Digit entry
    # -------------------------------------------------------------------------

    def _check_index(self, index: int) -> None:
        if not 0 <= index < OTP_LENGTH:
            raise IndexError(f"OTP digit index {index} out of range 0-{OTP_LENGTH - 1}")

    def submit_digit(self, index: int, value: str) -> bool:
        """
        Enter one digit at ``index``.

        Non-numeric input is rejected and leaves the buffer untouched. An
        empty value clears the slot. A digit moves focus to the next slot.

        Returns:
            True if the input was accepted.
        """
        self._check_index(index)
        value = (value or "")[-1:]
        if value and not value.isdigit():
            logger.debug("Rejected non-numeric OTP input at slot %d", index)
            return False

        self._digits[index] = value
        self.error = None
        if value and index < OTP_LENGTH - 1:
            self.focus_index = index + 1
        else:
            self.focus_index = index
        return True

    def backspace(self, index: int) -> None:
        """Clear the slot at ``index``, or the previous one if already empty."""
        self._check_index(index)
        if self._digits[index]:
            self._digits[index] = ""
            self.focus_index = index
        elif index > 0:
            self._digits[index - 1] = ""
            self.focus_index = index - 1

    def paste(self, text: str) -> bool:
        """
        Fill slots from a pasted string.

        Only all-digit text is accepted; anything past six characters is
        ignored. Focus moves to the next empty slot or the last one.
        """
        pasted = (text or "")[:OTP_LENGTH]
        if not pasted.isdigit():
            return False

        for i, digit in enumerate(pasted):
            self._digits[i] = digit
        self.error = None

        empty = [i for i, digit in enumerate(self._digits) if not digit]
        self.focus_index = empty[0] if empty else OTP_LENGTH - 1
        return True

    def clear(self) -> None:
        self._digits = [""] * OTP_LENGTH
        self.focus_index = 0
        self.error = None

    # -------------------------------------------------------------------------
    # Verification
    # -------------------------------------------------------------------------

    async def verify(self, entered_code: Optional[str] = None) -> bool:
        """
        Compare the entered code against the most recently generated one.

        Args:
            entered_code: Code to check. Defaults to the digit buffer.

        Returns:
            True on success.

        Raises:
            OTPIncompleteError: Fewer than six digits entered.
            OTPNotSentError: No code was generated yet.
            OTPMismatchError: Wrong code; the error carries the expected value.
        """
        code = self.entered_code if entered_code is None else entered_code
        if len(code) != OTP_LENGTH or not code.isdigit():
            self.error = "Please enter complete OTP"
            raise OTPIncompleteError()

        if self._generated_code is None:
            raise OTPNotSentError()

        self.error = None
        await asyncio.sleep(self.verify_delay)

        if code == self._generated_code:
            self.verified = True
            logger.info("OTP verified for phone ending in %s", self.last_four_digits)
            return True

        mismatch = OTPMismatchError(self._generated_code)
        self.error = str(mismatch)
        logger.warning("OTP mismatch for phone ending in %s", self.last_four_digits)
        raise mismatch

    # -------------------------------------------------------------------------
    # Resend countdown
    # -------------------------------------------------------------------------

    def tick(self, seconds: int = 1) -> int:
        """Advance the resend countdown; returns seconds left."""
        self._seconds_left = max(0, self._seconds_left - seconds)
        return self._seconds_left

    async def run_countdown(self) -> None:
        """Tick once per second until the countdown hits zero or stop() is called."""
        self._stop_event.clear()
        while self._seconds_left > 0:
            try:
                await asyncio.wait_for(self._stop_event.wait(), timeout=1.0)
                break
            except asyncio.TimeoutError:
                self.tick()
        logger.debug("OTP countdown finished at %ds", self._seconds_left)

    def stop(self) -> None:
        """Stop a running countdown."""
        self._stop_event.set()

    async def resend(self) -> str:
        """
        Regenerate and resend the code once the countdown reached zero.

        Raises:
            ResendNotAllowedError: Countdown still running.
        """
        if not self.can_resend:
            raise ResendNotAllowedError(self._seconds_left)

        self._seconds_left = self.resend_seconds
        self.clear()
        logger.info("Resending OTP to phone ending in %s", self.last_four_digits)
        return await self.send()
