"""Border styles for the framed output.

The enumeration lives in the domain so that configuration and the CLI layer
share one source of truth without importing the rendering library.
"""

from __future__ import annotations

from enum import Enum


class BorderStyle(str, Enum):
    """Supported frame styles for the fortune box."""

    ROUND = "round"
    SINGLE = "single"
    DOUBLE = "double"
    HEAVY = "heavy"
    ASCII = "ascii"

    @classmethod
    def default(cls) -> "BorderStyle":
        """Return the default style used across the application."""

        return cls.ROUND
