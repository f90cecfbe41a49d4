"""
wiki_search - result algebra for term-frequency searches.

Each query term is looked up in an inverted index that maps the term to the
pages containing it and how often it appears there. The per-term results are
combined with union, intersection and difference, and the combined result is
ranked by relevance.

Example usage:
    >>> from wiki_search import ResultSet
    >>> java = ResultSet({"doc1": 3, "doc2": 5})
    >>> programming = ResultSet({"doc2": 2, "doc3": 4})
    >>> (java & programming).sort()
    [RankedEntry(doc_id='doc2', score=7)]
"""

from .search import (
    QueryOperator,
    RankedEntry,
    ResultSet,
    TermQueryEngine,
    UnknownOperatorError,
    combine,
    fold_results,
    rank_entries,
)
from .storage import DuckDBTermIndex, TermIndex

__all__ = [
    # Results
    "ResultSet",
    "RankedEntry",
    "rank_entries",
    # Queries
    "QueryOperator",
    "TermQueryEngine",
    "UnknownOperatorError",
    "combine",
    "fold_results",
    # Storage
    "TermIndex",
    "DuckDBTermIndex",
]
