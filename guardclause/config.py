"""Environment-driven settings."""

from __future__ import annotations

import os
from typing import Final

LOG_FAILURES_ENV: Final[str] = "GUARDCLAUSE_LOG_FAILURES"

_FALSY: Final[tuple] = ("", "0", "false", "no")


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() not in _FALSY


def failure_logging_enabled() -> bool:
    """Return True when failed checks should be logged at DEBUG level."""

    return _env_flag(LOG_FAILURES_ENV)


__all__ = [
    "LOG_FAILURES_ENV",
    "failure_logging_enabled",
]
