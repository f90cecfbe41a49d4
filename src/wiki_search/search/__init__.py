"""Search result algebra and query helpers."""

from .query import (
    QUERY_OPERATORS,
    QueryOperator,
    TermQueryEngine,
    UnknownOperatorError,
    combine,
    fold_results,
)
from .ranker import RankedEntry, rank_entries
from .result import ResultSet, TermLookup

__all__ = [
    "QUERY_OPERATORS",
    "QueryOperator",
    "TermQueryEngine",
    "UnknownOperatorError",
    "combine",
    "fold_results",
    "RankedEntry",
    "rank_entries",
    "ResultSet",
    "TermLookup",
]
