"""Speech-bubble renderer (cowsay).

Responsibility:
- Wrap the fortune text in an ASCII character speaking it.
- Translate cowsay's input rules into `RenderError` so the CLI reports them
  like any other fault.
"""

from __future__ import annotations

import cowsay

from core.errors import RenderError

DEFAULT_CHARACTER = "cow"

# cowsay refuses blank text; a zero-width space keeps the bubble empty.
_BLANK_PLACEHOLDER = "\u200b"


def available_characters() -> list[str]:
    return list(cowsay.char_names)


def render_speech(text: str, character: str = DEFAULT_CHARACTER) -> str:
    """Return `text` inside a speech bubble spoken by `character`.

    Long text is wrapped by cowsay; words are kept intact.
    """

    if character not in cowsay.char_names:
        raise RenderError(
            f"unknown character {character!r} (available: {', '.join(available_characters())})"
        )
    if not text.strip():
        text = _BLANK_PLACEHOLDER
    return cowsay.get_output_string(character, text)
