"""UI components for the CLI (Rich).

Why separate components:
- Keeps the command free of visual details.
- `render_box` returns a plain string, so the frame can be tested (and
  piped) without a terminal.
"""

from __future__ import annotations

from rich import box
from rich.cells import cell_len
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from core.domain.border import BorderStyle

_BOXES: dict[BorderStyle, box.Box] = {
    BorderStyle.ROUND: box.ROUNDED,
    BorderStyle.SINGLE: box.SQUARE,
    BorderStyle.DOUBLE: box.DOUBLE,
    BorderStyle.HEAVY: box.HEAVY,
    BorderStyle.ASCII: box.ASCII,
}

# Tabs become spaces before measuring, so the frame width matches what Rich draws.
TAB_SIZE = 8


def build_fortune_panel(
    text: str,
    *,
    padding: int = 1,
    border_style: BorderStyle | str = BorderStyle.ROUND,
) -> Panel:
    """Panel framing `text` verbatim (no markup, no highlighting).

    Tabs are expanded to `TAB_SIZE` columns.
    """

    if padding < 0:
        raise ValueError(f"padding must be >= 0, got {padding}")

    style = BorderStyle(border_style)
    return Panel(
        Text(text.expandtabs(TAB_SIZE)),
        box=_BOXES[style],
        padding=padding,
        expand=False,
        highlight=False,
    )


def _natural_width(text: str, padding: int) -> int:
    lines = text.expandtabs(TAB_SIZE).splitlines() or [""]
    # Two border columns plus left and right padding.
    return max(cell_len(line) for line in lines) + 2 + 2 * padding


def render_box(
    text: str,
    *,
    padding: int = 1,
    border_style: BorderStyle | str = BorderStyle.ROUND,
    width: int | None = None,
) -> str:
    """Draw a border around `text` and return the result as plain text.

    With `width=None` the frame is sized to the longest line so nothing gets
    re-wrapped. A smaller explicit `width` lets Rich wrap the content.
    """

    panel = build_fortune_panel(text, padding=padding, border_style=border_style)
    console = Console(
        width=width or _natural_width(text, padding),
        color_system=None,
        force_terminal=False,
        highlight=False,
        emoji=False,
        markup=False,
    )
    with console.capture() as capture:
        console.print(panel)
    return capture.get()
