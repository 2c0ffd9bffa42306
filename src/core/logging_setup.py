"""Logging configuration.

Logs go to stderr through Rich so that stdout carries only the fortune box
(safe to pipe).
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "fortune-cow"


def setup_logging(level: str | int = logging.WARNING) -> None:
    """Attach a single Rich handler to the root logger (idempotent)."""

    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(level)
            return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
        log_time_format="%H:%M:%S",
    )
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
