"""Dataset loader.

This module lives in `core/` because:
- it centralizes *which* data we need (the bundled fortunes) without coupling
  to the CLI
- it turns every way the file can be broken into a single `FortuneDataError`.

The default dataset ships as package data next to this module
(`core/data/fortunes.json`).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from core.config import AppSettings
from core.domain.models import FortuneCollection
from core.errors import FortuneDataError

logger = logging.getLogger(__name__)

FORTUNES_FILENAME = "fortunes.json"


def bundled_fortunes_path() -> Path:
    # core/resources_loader.py -> core/data/fortunes.json
    return Path(__file__).resolve().parent / "data" / FORTUNES_FILENAME


def resolve_fortunes_path(settings: AppSettings | None = None) -> Path:
    """Pick the dataset to load.

    Rules:
    - If `FORTUNE_COW_FORTUNES_PATH` is set, use it as is.
    - Otherwise use the bundled file.
    """

    settings = settings or AppSettings()
    if settings.fortunes_path is not None:
        return settings.fortunes_path.expanduser()
    return bundled_fortunes_path()


def parse_fortunes(data: object, *, source: Path) -> FortuneCollection:
    """Validate an already decoded document against the dataset schema."""

    try:
        return FortuneCollection.model_validate(data)
    except ValidationError as exc:
        logger.debug("Fortunes dataset does not match the schema: %s", source)
        raise FortuneDataError(source, f"invalid dataset ({exc.error_count()} errors): {exc}") from exc


def load_fortunes(path: Path | None = None) -> FortuneCollection:
    """Load the fortunes collection once at startup.

    Returns an immutable `FortuneCollection` with at least one record.
    Raises `FortuneDataError` when the file is missing, is not UTF-8, is not
    valid JSON or does not follow `{"fortunes": [{"text": ..., "category": ...}]}`.
    """

    path = path or bundled_fortunes_path()

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.debug("Fortunes dataset not readable: %s", path)
        raise FortuneDataError(path, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        logger.debug("Fortunes dataset is not UTF-8: %s", path)
        raise FortuneDataError(path, f"not UTF-8 text (byte {exc.start}): {exc.reason}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.debug("Fortunes dataset is not valid JSON: %s", path)
        raise FortuneDataError(path, f"invalid JSON at line {exc.lineno}: {exc.msg}") from exc

    collection = parse_fortunes(data, source=path)
    logger.info("Loaded %d fortunes from %s", len(collection), path)
    return collection
