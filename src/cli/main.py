"""fortune-cow CLI (Typer).

Flow:
- parse the optional `--category` flag
- load settings and the dataset once
- select a fortune (core) and decorate it (cowsay + Rich frame)
- print the frame to stdout

Diagnostics go to stderr; stdout carries only the fortune.
"""

from __future__ import annotations

import logging
import sys

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.text import Text

from adapters.cow_renderer import render_speech
from cli.ui_components import render_box
from core.config import AppSettings
from core.errors import FortuneCowError
from core.interfaces.renderer import BoxRenderer, SpeechRenderer
from core.logging_setup import setup_logging
from core.resources_loader import load_fortunes, resolve_fortunes_path
from core.services.fortune_store import list_categories, pick_fortune

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Print a random fortune, spoken by a cow, inside a decorative box.",
    context_settings={"help_option_names": ["-h", "--help"]},
)

_err_console = Console(stderr=True, soft_wrap=True)


def build_message(
    settings: AppSettings,
    category: str | None,
    *,
    speak: SpeechRenderer = render_speech,
    frame: BoxRenderer = render_box,
) -> str:
    """Load, select and decorate. Raises `FortuneCowError` on faults."""

    collection = load_fortunes(resolve_fortunes_path(settings))
    logger.debug("Available categories: %s", ", ".join(list_categories(collection)))

    selection = pick_fortune(collection, category)
    if not selection.found:
        logger.info("No fortune matches category %r", category)
        body = selection.text
    else:
        body = speak(selection.text, settings.character)

    return frame(body, padding=settings.padding, border_style=settings.border_style)


@app.command()
def fortune(
    category: str | None = typer.Option(
        None,
        "--category",
        "-c",
        help="Select fortunes by category",
    ),
) -> None:
    """Print a random fortune, optionally restricted to one category."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _err_console.print(Text.assemble(("Invalid configuration: ", "red"), str(exc)))
        raise typer.Exit(code=1) from exc

    setup_logging(settings.log_level)

    try:
        message = build_message(settings, category)
    except FortuneCowError as exc:
        _err_console.print(Text.assemble(("Error: ", "red"), str(exc)))
        raise typer.Exit(code=1) from exc

    typer.echo(message, nl=False)


def run() -> None:
    # Box-drawing characters break cp1252 Windows consoles.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    app()


if __name__ == "__main__":
    run()
