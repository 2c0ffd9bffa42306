"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation of the bundled dataset at the edge (load time), with
  self-documenting fields.
- Frozen models make the collection read-only reference data for the whole
  lifetime of the process.

Note:
- These models describe *what* a fortune is, not *how* it is loaded or shown.
"""

from __future__ import annotations

from typing import Iterator, Literal

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


NO_FORTUNE_MESSAGE = "No fortune found matching your criteria."


class FortuneRecord(BaseModel):
    """One entry of the dataset: a fortune text and an optional category.

    A record without `category` only shows up when no filter is requested.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    text: str = Field(
        ...,
        min_length=1,
        description="Fortune content.",
    )
    category: str | None = Field(
        default=None,
        description="Optional classification label (e.g. 'motivational', 'wit').",
    )

    def matches(self, category: str) -> bool:
        """Case-insensitive exact match against a non-empty category filter."""

        if self.category is None:
            return False
        return self.category.lower() == category.lower()


class FortuneCollection(BaseModel):
    """Ordered, immutable sequence of records.

    Loaded once at process start (see `core.resources_loader`) and passed
    explicitly to the Fortune Store.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    fortunes: tuple[FortuneRecord, ...] = Field(
        ...,
        min_length=1,
        description="Every fortune of the dataset, in file order.",
    )

    def __len__(self) -> int:
        return len(self.fortunes)

    def __iter__(self) -> Iterator[FortuneRecord]:  # type: ignore[override]
        return iter(self.fortunes)

    def __getitem__(self, index: int) -> FortuneRecord:
        return self.fortunes[index]

    @property
    def texts(self) -> list[str]:
        return [record.text for record in self.fortunes]


class FortuneFound(BaseModel):
    """Selection outcome when at least one record matched."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["found"] = "found"
    record: FortuneRecord

    @property
    def found(self) -> bool:
        return True

    @property
    def text(self) -> str:
        return self.record.text


class FortuneNotFound(BaseModel):
    """Selection outcome when the filter left no candidates.

    Not an error: the CLI shows `message` and exits normally.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["not_found"] = "not_found"
    category: str | None = None
    message: str = NO_FORTUNE_MESSAGE

    @property
    def found(self) -> bool:
        return False

    @property
    def text(self) -> str:
        return self.message


FortuneSelection = FortuneFound | FortuneNotFound
