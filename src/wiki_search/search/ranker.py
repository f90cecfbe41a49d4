"""
Ranking helpers for ordering search results by relevance.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class RankedEntry:
    """A document identifier paired with its relevance score."""

    doc_id: str
    score: int

    def __iter__(self) -> Iterator[str | int]:
        yield self.doc_id
        yield self.score

    def __str__(self) -> str:
        return f"{self.doc_id}={self.score}"


def rank_entries(
    scores: Mapping[str, int],
    *,
    descending: bool = False,
    limit: int | None = None,
) -> list[RankedEntry]:
    """
    Order scored documents by relevance.

    Ascending by score unless ``descending`` is set. Equal scores are always
    ordered by document identifier so repeated runs print the same list.
    """
    if descending:
        ordered = sorted(scores.items(), key=lambda item: (-item[1], item[0]))
    else:
        ordered = sorted(scores.items(), key=lambda item: (item[1], item[0]))
    if limit is not None:
        ordered = ordered[: max(limit, 0)]
    return [RankedEntry(doc_id=doc_id, score=score) for doc_id, score in ordered]
