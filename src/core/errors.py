"""Exception taxonomy.

Only real faults are exceptions. An empty filter result is a normal outcome
(`FortuneNotFound`) and never raised.
"""

from __future__ import annotations

from pathlib import Path


class FortuneCowError(Exception):
    """Base class for every error the CLI knows how to report."""


class FortuneDataError(FortuneCowError):
    """The fortunes dataset is missing, unreadable or does not match the schema."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load fortunes from {path}: {reason}")


class RenderError(FortuneCowError):
    """A presentation collaborator rejected its input."""
