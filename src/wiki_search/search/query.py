"""
Multi-term query helpers built on the result-set combinators.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Literal, get_args

from ..storage import TermIndex, normalize_term
from .result import ResultSet

logger = logging.getLogger(__name__)

QueryOperator = Literal["and", "or", "minus"]

QUERY_OPERATORS: tuple[str, ...] = get_args(QueryOperator)


class UnknownOperatorError(ValueError):
    """Raised when a query step names an operator other than and/or/minus."""


def combine(left: ResultSet, operator: str, right: ResultSet) -> ResultSet:
    """Apply one combinator to a pair of results."""
    if operator == "and":
        return left.and_(right)
    if operator == "or":
        return left.or_(right)
    if operator == "minus":
        return left.minus(right)
    raise UnknownOperatorError(_unknown_operator_message(operator))


def fold_results(
    first: ResultSet,
    steps: Iterable[tuple[str, ResultSet]],
) -> ResultSet:
    """Fold ``(operator, result)`` steps into ``first`` from left to right."""
    combined = first
    for operator, result in steps:
        combined = combine(combined, operator, result)
        logger.debug("Applied %s, %d documents remain", operator, len(combined))
    return combined


class TermQueryEngine:
    """Evaluate multi-term searches against a term index."""

    def __init__(self, index: TermIndex) -> None:
        self.index = index

    def lookup(self, term: str) -> ResultSet:
        normalized = _normalize_query_term(term)
        result = ResultSet.search(normalized, self.index)
        logger.debug("Lookup %r matched %d documents", normalized, len(result))
        return result

    def search(
        self,
        terms: Sequence[str],
        *,
        operator: QueryOperator = "and",
        exclude: Sequence[str] = (),
    ) -> ResultSet:
        """
        Combine every term's result with ``operator``, then remove excluded terms.

        ``search(["java", "programming"], operator="and", exclude=["coffee"])``
        evaluates ``(java AND programming) MINUS coffee``.
        """
        if not terms:
            raise ValueError("At least one search term is required.")
        if operator not in QUERY_OPERATORS:
            raise UnknownOperatorError(_unknown_operator_message(operator))

        steps: list[tuple[str, str]] = [(operator, term) for term in terms[1:]]
        steps.extend(("minus", term) for term in exclude)
        return self.search_steps(terms[0], steps)

    def search_steps(
        self,
        first_term: str,
        steps: Sequence[tuple[str, str]],
    ) -> ResultSet:
        """Evaluate explicit ``(operator, term)`` steps after ``first_term``."""
        first = self.lookup(first_term)
        return fold_results(
            first,
            ((operator, self.lookup(term)) for operator, term in steps),
        )


def _normalize_query_term(term: str) -> str:
    normalized = normalize_term(term)
    if not normalized:
        raise ValueError("Search terms must not be blank.")
    return normalized


def _unknown_operator_message(operator: str) -> str:
    allowed = ", ".join(QUERY_OPERATORS)
    return f"Unknown query operator {operator!r}. Allowed: {allowed}"
