"""Configuration helpers for the dxfcriber command-line tool."""
from __future__ import annotations

import logging
import os
from typing import Mapping

LOG_LEVEL_ENV_VAR = "DXFCRIBER_LOG_LEVEL"
DEFAULT_LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"


class ConfigurationError(ValueError):
    """Raised when command-line options cannot be turned into a valid run."""


def resolve_log_level(env: Mapping[str, str] | None = None, *, default: int = logging.INFO) -> int:
    """Return the numeric log level named by ``DXFCRIBER_LOG_LEVEL``.

    Unknown or empty names fall back to ``default``.
    """

    e = os.environ if env is None else env
    raw = (e.get(LOG_LEVEL_ENV_VAR) or "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if isinstance(level, int):
        return level
    return default


def configure_logging(level: int | None = None, *, force: bool = False) -> None:
    """Initialise a basic stderr logging configuration if none is present."""

    if level is None:
        level = resolve_log_level()
    root = logging.getLogger()
    if root.handlers and not force:
        root.setLevel(level)
        return
    logging.basicConfig(level=level, format=DEFAULT_LOG_FORMAT, force=force)


__all__ = [
    "ConfigurationError",
    "DEFAULT_LOG_FORMAT",
    "LOG_LEVEL_ENV_VAR",
    "configure_logging",
    "resolve_log_level",
]
