"""Shared rich console and logging setup for commands."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from adapters.rich_theme import to_rich_theme
from core.domain.theme import ConsoleTheme


def build_console(theme: ConsoleTheme, *, strict: bool = False) -> Console:
    """Console whose `theme.<role>` styles come from `theme`."""

    return Console(theme=to_rich_theme(theme, strict=strict))


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def is_known_log_level(level: str) -> bool:
    """True for names registered with `logging` (DEBUG, INFO, WARNING...)."""

    return isinstance(logging.getLevelName(level.upper()), int)
