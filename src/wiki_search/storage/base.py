"""
Lookup interface for term indexes.
"""

from __future__ import annotations

from typing import Protocol

# Largest term frequency a backend must store (signed 64-bit).
MAX_FREQUENCY = 2**63 - 1


class TermIndex(Protocol):
    """Protocol for the term lookup used to build search results."""

    def get_counts(self, term: str) -> dict[str, int]:
        """Return ``{url: frequency}`` for pages containing ``term``; empty if none."""


def normalize_term(term: str) -> str:
    """Normalize a term the way it is keyed in the index."""
    return term.strip().lower()
