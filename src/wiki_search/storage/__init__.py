"""Term index backends for wiki_search."""

from .base import MAX_FREQUENCY, TermIndex, normalize_term
from .duckdb import DuckDBTermIndex

__all__ = [
    "MAX_FREQUENCY",
    "TermIndex",
    "normalize_term",
    "DuckDBTermIndex",
]
