"""
Result sets for term searches and the algebra that combines them.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import TYPE_CHECKING, TypeVar

from .ranker import RankedEntry, rank_entries

if TYPE_CHECKING:
    from ..storage import TermIndex


TermLookup = Callable[[str], Mapping[str, int]]

_R = TypeVar("_R", bound="ResultSet")


class ResultSet:
    """
    Documents matching a query, mapped to their relevance scores.

    A result set is treated as immutable: every combinator reads both operands
    and returns a new instance backed by a freshly built dict. A document that
    is not in ``scores`` has relevance 0.
    """

    __slots__ = ("_scores",)

    def __init__(self, scores: Mapping[str, int] | None = None) -> None:
        self._scores: Mapping[str, int] = scores if scores is not None else {}

    @classmethod
    def empty(cls: type[_R]) -> _R:
        return cls({})

    @classmethod
    def from_lookup(cls: type[_R], term: str, lookup: TermLookup) -> _R:
        """Wrap the ``{doc_id: frequency}`` mapping that ``lookup`` returns for ``term``."""
        return cls(lookup(term))

    @classmethod
    def search(cls: type[_R], term: str, index: TermIndex) -> _R:
        """Look up ``term`` in a term index."""
        return cls.from_lookup(term, index.get_counts)

    @property
    def scores(self) -> Mapping[str, int]:
        return self._scores

    def doc_ids(self) -> frozenset[str]:
        return frozenset(self._scores)

    def relevance(self, doc_id: str) -> int:
        """Return the score for ``doc_id``, or 0 if it is not in the result."""
        return self._scores.get(doc_id, 0)

    def total_relevance(self, rel1: int, rel2: int) -> int:
        """Merge the relevance of one document from two results."""
        # Relevance is the sum of the term frequencies.
        return rel1 + rel2

    def or_(self: _R, other: ResultSet) -> _R:
        """Union: documents in either result, with merged relevance."""
        merged: dict[str, int] = {}
        for doc_id in other._scores:
            merged[doc_id] = self.total_relevance(
                self.relevance(doc_id), other.relevance(doc_id)
            )
        for doc_id in self._scores:
            if doc_id not in merged:
                merged[doc_id] = self.total_relevance(
                    self.relevance(doc_id), other.relevance(doc_id)
                )
        return type(self)(merged)

    def and_(self: _R, other: ResultSet) -> _R:
        """Intersection: documents present in both results, with merged relevance."""
        merged: dict[str, int] = {}
        for doc_id in self._scores:
            if doc_id in other._scores:
                merged[doc_id] = self.total_relevance(
                    self.relevance(doc_id), other.relevance(doc_id)
                )
        return type(self)(merged)

    def minus(self: _R, other: ResultSet) -> _R:
        """Difference: documents in this result that are absent from ``other``."""
        remaining: dict[str, int] = {}
        for doc_id in self._scores:
            if doc_id not in other._scores:
                remaining[doc_id] = self.relevance(doc_id)
        return type(self)(remaining)

    def sort(self, *, descending: bool = False) -> list[RankedEntry]:
        """Return every entry ordered by score, ascending unless ``descending``."""
        return rank_entries(self._scores, descending=descending)

    def __or__(self: _R, other: object) -> _R:
        if not isinstance(other, ResultSet):
            return NotImplemented
        return self.or_(other)

    def __and__(self: _R, other: object) -> _R:
        if not isinstance(other, ResultSet):
            return NotImplemented
        return self.and_(other)

    def __sub__(self: _R, other: object) -> _R:
        if not isinstance(other, ResultSet):
            return NotImplemented
        return self.minus(other)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._scores

    def __iter__(self) -> Iterator[str]:
        return iter(self._scores)

    def __len__(self) -> int:
        return len(self._scores)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResultSet):
            return NotImplemented
        return dict(self._scores) == dict(other._scores)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._scores)!r})"
