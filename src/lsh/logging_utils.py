"""Runtime logging helpers."""

from __future__ import annotations

import sys
from logging import Handler

from loguru import logger
from rich.console import Console
from rich.logging import RichHandler

from lsh.config import LogProfile

_PROFILE_FORMATS: dict[LogProfile, str] = {
    "default": "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}",
    "rich": "{message}",
}
_CONFIGURED: tuple[str, LogProfile] | None = None


def _build_rich_handler() -> Handler:
    return RichHandler(
        console=Console(stderr=True),
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )


def configure_logging(level: str = "WARNING", *, profile: LogProfile = "default") -> None:
    """Configure process-level logging once per level/profile pair."""
    global _CONFIGURED
    if _CONFIGURED == (level, profile):
        return

    logger.remove()
    sink = _build_rich_handler() if profile == "rich" else sys.stderr
    logger.add(
        sink,
        level=level,
        format=_PROFILE_FORMATS[profile],
        backtrace=False,
        diagnose=False,
    )
    _CONFIGURED = (level, profile)
