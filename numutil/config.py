"""Runtime settings read from the environment (and a ``.env`` file, via the CLI)."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_FACTORIAL_LIMIT = 500

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclass
class Settings:
    """Options shared by the CLI and the MCP server."""

    log_level: str = DEFAULT_LOG_LEVEL
    factorial_limit: int = DEFAULT_FACTORIAL_LIMIT


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _log_level_from_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    level = raw.strip().upper()
    if level not in _LOG_LEVELS:
        raise ValueError(f"{name} must be one of {', '.join(_LOG_LEVELS)}, got {raw!r}")
    return level


def load_settings() -> Settings:
    """Build :class:`Settings` from ``NUMUTIL_*`` environment variables.

    Raises ``ValueError`` naming the variable when a value cannot be used.
    """
    return Settings(
        log_level=_log_level_from_env("NUMUTIL_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        factorial_limit=_int_from_env("NUMUTIL_FACTORIAL_LIMIT", DEFAULT_FACTORIAL_LIMIT),
    )
