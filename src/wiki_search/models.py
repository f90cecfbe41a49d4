"""
Snapshot models for loading term counts into an index.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, Field, ValidationError

from .storage import MAX_FREQUENCY

TermFrequency = Annotated[int, Field(ge=0, le=MAX_FREQUENCY)]


class IndexedPage(BaseModel):
    """Term frequencies counted on a single page."""

    url: str = Field(min_length=1, description="Page URL used as the document identifier")
    counts: dict[str, TermFrequency] = Field(
        default_factory=dict,
        description="Mapping from term to the number of times it appears on the page",
    )


class IndexSnapshot(BaseModel):
    """A batch of pages to load into a term index."""

    pages: list[IndexedPage] = Field(default_factory=list)


class SnapshotLoadError(ValueError):
    """Raised when a snapshot file cannot be read or validated."""


def load_snapshot(path: str | Path) -> IndexSnapshot:
    snapshot_path = Path(path)
    try:
        raw = snapshot_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SnapshotLoadError(f"Cannot read snapshot {snapshot_path}: {exc}") from exc
    try:
        return IndexSnapshot.model_validate_json(raw)
    except ValidationError as exc:
        raise SnapshotLoadError(f"Invalid snapshot {snapshot_path}:\n{exc}") from exc
