"""Runtime logging helpers."""

from __future__ import annotations

import sys
from logging import Handler
from typing import Literal

import loguru
from loguru import logger
from rich.console import Console
from rich.logging import RichHandler

LogProfile = Literal["default", "chat"]

_PROFILE_FORMATS: dict[LogProfile, str] = {
    "chat": "{level} | {extra[debot]} | {message}",
    "default": "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<6} | {name}:{function}:{line} | {extra[debot]} | {message}",
}
_CONFIGURED: tuple[LogProfile, str] | None = None


def _build_chat_handler() -> Handler:
    return RichHandler(
        console=Console(stderr=True),
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )


def configure_logging(*, profile: LogProfile = "default", level: str = "INFO") -> None:
    """Configure process-level logging once."""
    from dbrowser.router import current_debot

    def inject_context(record: loguru.Record) -> None:
        record["extra"]["debot"] = current_debot()

    global _CONFIGURED
    level = level.upper()
    if (profile, level) == _CONFIGURED:
        return

    logger.remove()
    if profile == "chat":
        logger.add(
            _build_chat_handler(),
            level=level,
            format=_PROFILE_FORMATS[profile],
            backtrace=False,
            diagnose=False,
        )
    else:
        logger.add(
            sys.stderr,
            level=level,
            format=_PROFILE_FORMATS[profile],
            backtrace=False,
            diagnose=False,
        )
    logger.configure(patcher=inject_context)
    _CONFIGURED = (profile, level)
