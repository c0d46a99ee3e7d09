"""
Runtime configuration for the mock interview tool.

Values come from environment variables (optionally loaded from a ``.env``
file next to the source root) with hardcoded defaults.

Environment Variables:
    OUTPUT_DIR          Directory for exported reports (default: ./output)
    SIMULATED_LATENCY   "false" disables every simulated delay (default: true)
    SCORE_JITTER        Score jitter amplitude in points (default: 0)
    SCORE_SEED          Seed for the scoring RNG (default: unseeded)
    OTP_RESEND_SECONDS  Countdown before an OTP can be resent (default: 30)
    LOG_LEVEL           Root log level for the CLI (default: INFO)
"""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Optional

from dotenv import load_dotenv


_env_path = Path(__file__).parent.parent / ".env"
load_dotenv(_env_path)

logger = logging.getLogger(__name__)


# =============================================================================
# Defaults
# =============================================================================

DEFAULT_OUTPUT_DIR: Final[str] = "./output"
DEFAULT_OTP_RESEND_SECONDS: Final[int] = 30
DEFAULT_LOG_LEVEL: Final[str] = "INFO"

# Simulated latency (seconds)
LOGIN_DELAY_SECONDS: Final[float] = 1.0
UPLOAD_DELAY_SECONDS: Final[float] = 2.0
OTP_SEND_DELAY_SECONDS: Final[float] = 2.0
OTP_VERIFY_DELAY_SECONDS: Final[float] = 2.0
RESULTS_ANALYSIS_DELAY_SECONDS: Final[float] = 4.0

_TRUTHY = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer, got '{raw}'") from exc


@dataclass(frozen=True)
class Settings:
    """Resolved configuration values."""

    output_dir: Path
    simulated_latency: bool
    score_jitter: int
    score_seed: Optional[int]
    otp_resend_seconds: int
    log_level: str

    def delay(self, seconds: float) -> float:
        """Return ``seconds`` or 0 when simulated latency is disabled."""
        return seconds if self.simulated_latency else 0.0

    @classmethod
    def from_env(cls) -> "Settings":
        jitter = _env_int("SCORE_JITTER", 0) or 0
        if jitter < 0:
            raise RuntimeError("SCORE_JITTER must not be negative")

        resend = _env_int("OTP_RESEND_SECONDS", DEFAULT_OTP_RESEND_SECONDS)
        return cls(
            output_dir=Path(os.environ.get("OUTPUT_DIR", DEFAULT_OUTPUT_DIR)).expanduser(),
            simulated_latency=_env_bool("SIMULATED_LATENCY", True),
            score_jitter=jitter,
            score_seed=_env_int("SCORE_SEED", None),
            otp_resend_seconds=resend if resend is not None else DEFAULT_OTP_RESEND_SECONDS,
            log_level=os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )


# =============================================================================
# Singleton
# =============================================================================

_settings_instance: Optional[Settings] = None
_settings_lock = threading.Lock()


def get_settings() -> Settings:
    """Get or create the process-wide Settings instance."""
    global _settings_instance
    with _settings_lock:
        if _settings_instance is None:
            _settings_instance = Settings.from_env()
            logger.debug("Settings loaded: %s", _settings_instance)
        return _settings_instance


def reset_settings() -> None:
    """Drop the cached Settings so the next call re-reads the environment."""
    global _settings_instance
    with _settings_lock:
        _settings_instance = None
