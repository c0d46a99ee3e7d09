"""
Form and upload validation helpers.

All checks are pure functions returning booleans or ``field -> message``
dicts so callers can surface errors inline next to the offending field.
"""

from __future__ import annotations

import logging
import re
from pathlib import PurePath
from typing import Final, Mapping, Optional


__all__ = [
    "ALLOWED_EMAIL_DOMAINS",
    "ALLOWED_RESUME_EXTENSIONS",
    "FormValidationError",
    "require_valid",
    "validate_email",
    "validate_login",
    "validate_password",
    "validate_resume",
    "validate_signup",
]


logger = logging.getLogger(__name__)


EMAIL_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
ALLOWED_EMAIL_DOMAINS: Final[tuple[str, ...]] = (
    "gmail.com",
    "yahoo.com",
    "hotmail.com",
    "outlook.com",
    "icloud.com",
)

MIN_USERNAME_LENGTH: Final[int] = 3
MIN_PASSWORD_LENGTH: Final[int] = 6
MIN_PHONE_LENGTH: Final[int] = 10

ALLOWED_RESUME_EXTENSIONS: Final[tuple[str, ...]] = (".pdf", ".doc", ".docx")
MAX_RESUME_BYTES: Final[int] = 10 * 1024 * 1024


class FormValidationError(Exception):
    """Raised when one or more form fields are invalid."""

    def __init__(self, errors: Mapping[str, str]) -> None:
        self.errors = dict(errors)
        summary = "; ".join(f"{field}: {message}" for field, message in self.errors.items())
        super().__init__(f"Invalid form: {summary}")


def validate_email(email: str) -> bool:
    """
    Check email format and that its domain is a common provider.

    Example:
        >>> validate_email("user@gmail.com")
        True
        >>> validate_email("user@random.org")
        False
    """
    if not email or not EMAIL_PATTERN.match(email):
        return False
    domain = email.split("@", 1)[1]
    return domain.lower() in ALLOWED_EMAIL_DOMAINS


def validate_password(password: Optional[str], min_length: int = MIN_PASSWORD_LENGTH) -> bool:
    return bool(password) and len(password) >= min_length


def validate_signup(form: Mapping[str, Optional[str]]) -> dict[str, str]:
    """
    Validate a signup form.

    Args:
        form: Mapping with ``username``, ``email``, ``phone``, ``password``
            and ``confirm_password`` keys. Missing keys count as empty.

    Returns:
        Field name to error message, empty when the form is valid.
    """
    errors: dict[str, str] = {}
    username = form.get("username") or ""
    email = form.get("email") or ""
    phone = form.get("phone") or ""
    password = form.get("password") or ""
    confirm_password = form.get("confirm_password") or ""

    if len(username) < MIN_USERNAME_LENGTH:
        errors["username"] = "Username must be at least 3 characters long"

    if not email:
        errors["email"] = "Email is required"
    elif not validate_email(email):
        errors["email"] = "Please enter a valid email with a common domain (gmail.com, yahoo.com, etc.)"

    if len(phone) < MIN_PHONE_LENGTH:
        errors["phone"] = "Please enter a valid phone number"

    if not validate_password(password):
        errors["password"] = "Password must be at least 6 characters long"

    if password != confirm_password:
        errors["confirm_password"] = "Passwords do not match"

    return errors


def validate_login(form: Mapping[str, Optional[str]]) -> dict[str, str]:
    """Login only checks that both fields are present."""
    errors: dict[str, str] = {}
    if not form.get("username"):
        errors["username"] = "Username is required"
    if not form.get("password"):
        errors["password"] = "Password is required"
    return errors


def require_valid(errors: Mapping[str, str]) -> None:
    """Raise FormValidationError when ``errors`` is not empty."""
    if errors:
        raise FormValidationError(errors)


def validate_resume(filename: str, size_bytes: Optional[int] = None) -> list[str]:
    """
    Validate a resume upload by extension.

    The 10MB size limit is advisory: oversized files are accepted and a
    warning is returned instead.

    Raises:
        FormValidationError: If the extension is not .pdf, .doc or .docx.

    Returns:
        Advisory warnings (possibly empty).
    """
    extension = PurePath(filename or "").suffix.lower()
    if extension not in ALLOWED_RESUME_EXTENSIONS:
        logger.warning("Rejected resume upload '%s' (extension %r)", filename, extension)
        raise FormValidationError({"resume": "Please upload a PDF, DOC, or DOCX file"})

    warnings: list[str] = []
    if size_bytes is not None and size_bytes > MAX_RESUME_BYTES:
        warnings.append("Resume is larger than 10MB; upload may be slow")
        logger.warning("Resume '%s' exceeds advisory limit: %d bytes", filename, size_bytes)
    return warnings
