"""Logging setup for the please CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_MAP = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

_HANDLER_NAME = "please-rich"


def parse_level(value: str | None, default: int = logging.WARNING) -> int:
    if not value:
        return default
    return LOG_LEVEL_MAP.get(value.strip().lower(), default)


def setup_logging(level: str | None = None) -> logging.Logger:
    """Attach a stderr RichHandler to the package logger (once)."""
    root = logging.getLogger("please")
    root.setLevel(parse_level(level))

    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=False,
        )
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        root.addHandler(handler)
        root.propagate = False

    return root
