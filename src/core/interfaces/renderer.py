"""Presentation contracts.

The speech bubble and the frame are external collaborators: the core only
hands them a string (plus options) and expects a string back.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.border import BorderStyle


@runtime_checkable
class SpeechRenderer(Protocol):
    """Wrap text in an ASCII-art character speaking it."""

    def __call__(self, text: str, character: str = ...) -> str:
        ...


@runtime_checkable
class BoxRenderer(Protocol):
    """Draw a border around arbitrary text without altering it.

    `padding` is a non-negative number of cells between frame and content.
    """

    def __call__(
        self,
        text: str,
        *,
        padding: int = ...,
        border_style: BorderStyle | str = ...,
    ) -> str:
        ...
