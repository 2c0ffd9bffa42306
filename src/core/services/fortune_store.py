"""Fortune selection utilities.

The store answers one question: "give me one fortune, optionally restricted
to a category". Everything here is a pure function of the collection, the
filter and the injected index picker; printing and decoration belong to the
CLI layer.
"""

from __future__ import annotations

import logging
import random

from core.domain.models import (
    FortuneCollection,
    FortuneFound,
    FortuneNotFound,
    FortuneRecord,
    FortuneSelection,
)
from core.interfaces.picker import IndexPicker

logger = logging.getLogger(__name__)


def random_index(count: int) -> int:
    """Uniform pick in `[0, count)` (not cryptographically secure)."""

    return random.randrange(count)


def filter_fortunes(collection: FortuneCollection, category: str | None = None) -> list[FortuneRecord]:
    """Candidate set for `category`.

    `None` and `""` mean "no filter". Any other value, whitespace included,
    is compared case-insensitively against each record's category.
    """

    if not category:
        return list(collection)
    return [record for record in collection if record.matches(category)]


def list_categories(collection: FortuneCollection) -> list[str]:
    seen: dict[str, str] = {}
    for record in collection:
        if record.category is not None:
            seen.setdefault(record.category.lower(), record.category)
    return sorted(seen.values(), key=str.lower)


def pick_fortune(
    collection: FortuneCollection,
    category: str | None = None,
    *,
    pick_index: IndexPicker = random_index,
) -> FortuneSelection:
    """Select one record from the filtered candidates.

    Returns `FortuneNotFound` when nothing matches; the picker is not called
    in that case.
    """

    candidates = filter_fortunes(collection, category)
    logger.debug("category=%r -> %d candidates", category, len(candidates))

    if not candidates:
        return FortuneNotFound(category=category)

    index = pick_index(len(candidates))
    if not 0 <= index < len(candidates):
        raise ValueError(f"index picker returned {index} for {len(candidates)} candidates")
    return FortuneFound(record=candidates[index])


def select_fortune(
    collection: FortuneCollection,
    category: str | None = None,
    *,
    pick_index: IndexPicker = random_index,
) -> str:
    """Text of a random matching fortune, or the no-match message."""

    return pick_fortune(collection, category, pick_index=pick_index).text
