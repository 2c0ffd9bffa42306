"""Random index contract.

Why a Protocol:
- Randomness is passed in as a parameter instead of being an ambient call,
  so tests can force deterministic picks.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IndexPicker(Protocol):
    """Pick one index in `[0, count)`.

    Design rules:
    - `count` is always >= 1 when called by the Fortune Store.
    - Production pickers must be uniform (each index with probability 1/count).
    """

    def __call__(self, count: int) -> int:
        ...
