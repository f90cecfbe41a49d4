"""
DuckDB storage backend for term counts.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from types import TracebackType
from typing import Any

import duckdb

from .base import MAX_FREQUENCY, normalize_term

logger = logging.getLogger(__name__)

MEMORY_DB = ":memory:"


class DuckDBTermIndex:
    """DuckDB-backed inverted index of term frequencies per page URL."""

    def __init__(
        self,
        db_path: str,
        *,
        read_only: bool = False,
        initialize: bool = True,
    ) -> None:
        if db_path == MEMORY_DB:
            self.db_path = db_path
        else:
            self.db_path = str(Path(db_path).expanduser().resolve())
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        self.read_only = read_only
        self._conn = duckdb.connect(self.db_path, read_only=read_only)
        if initialize and not read_only:
            self.initialize()

    def close(self) -> None:
        """Close the underlying DuckDB connection."""
        self._conn.close()

    def __enter__(self) -> DuckDBTermIndex:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def initialize(self) -> None:
        self._conn.execute(
            """
            CREATE TABLE IF NOT EXISTS pages (
                url VARCHAR PRIMARY KEY,
                indexed_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            );
            """
        )
        self._conn.execute(
            """
            CREATE TABLE IF NOT EXISTS term_counts (
                term VARCHAR NOT NULL,
                url VARCHAR NOT NULL,
                frequency BIGINT NOT NULL
            );
            """
        )

    def index_page(self, url: str, counts: Mapping[str, int]) -> int:
        """
        Replace the stored term counts for ``url``.

        Counts from an earlier indexing of the same page are removed first, so
        terms that no longer appear on the page stop matching it. The replacement
        runs in one transaction; if it fails the previous counts are kept.
        Returns the number of terms written.
        """
        merged: dict[str, int] = {}
        for raw_term, count in counts.items():
            if count < 0:
                raise ValueError(f"Negative count {count} for term {raw_term!r} on {url}")
            term = normalize_term(raw_term)
            if not term:
                continue
            merged[term] = merged.get(term, 0) + int(count)
            if merged[term] > MAX_FREQUENCY:
                raise ValueError(f"Count for term {term!r} on {url} exceeds {MAX_FREQUENCY}")
        rows = [(term, url, count) for term, count in merged.items()]

        self._conn.begin()
        try:
            self._conn.execute("DELETE FROM term_counts WHERE url = ?", [url])
            self._conn.execute(
                """
                INSERT INTO pages (url)
                VALUES (?)
                ON CONFLICT(url) DO UPDATE SET indexed_at = now()
                """,
                [url],
            )
            if rows:
                self._conn.executemany(
                    """
                    INSERT INTO term_counts (term, url, frequency)
                    VALUES (?, ?, ?)
                    """,
                    rows,
                )
        except Exception:
            self._conn.rollback()
            raise
        self._conn.commit()
        logger.debug("Indexed %s with %d terms", url, len(rows))
        return len(rows)

    def get_counts(self, term: str) -> dict[str, int]:
        rows = self._conn.execute(
            "SELECT url, frequency FROM term_counts WHERE term = ?",
            [normalize_term(term)],
        ).fetchall()
        return {str(row[0]): int(row[1]) for row in rows}

    def get_urls(self, term: str) -> set[str]:
        return set(self.get_counts(term))

    def get_count(self, url: str, term: str) -> int:
        row = self._conn.execute(
            "SELECT frequency FROM term_counts WHERE term = ? AND url = ?",
            [normalize_term(term), url],
        ).fetchone()
        return int(row[0]) if row else 0

    def is_indexed(self, url: str) -> bool:
        row = self._conn.execute(
            "SELECT 1 FROM pages WHERE url = ? LIMIT 1",
            [url],
        ).fetchone()
        return row is not None

    def list_pages(self) -> list[str]:
        rows = self._conn.execute("SELECT url FROM pages ORDER BY url").fetchall()
        return [str(row[0]) for row in rows]

    def list_terms(self) -> list[dict[str, Any]]:
        """List indexed terms with the number of pages containing each."""
        rows = self._conn.execute(
            """
            SELECT term, COUNT(*) AS page_count, SUM(frequency) AS occurrences
            FROM term_counts
            GROUP BY term
            ORDER BY term
            """
        ).fetchall()
        return [
            {"term": str(row[0]), "pages": int(row[1]), "occurrences": int(row[2])}
            for row in rows
        ]

    def delete_page(self, url: str) -> bool:
        """Remove a page and its counts. Returns False if it was not indexed."""
        if not self.is_indexed(url):
            return False
        self._conn.begin()
        try:
            self._conn.execute("DELETE FROM term_counts WHERE url = ?", [url])
            self._conn.execute("DELETE FROM pages WHERE url = ?", [url])
        except Exception:
            self._conn.rollback()
            raise
        self._conn.commit()
        return True

    def clear(self) -> None:
        self._conn.execute("DELETE FROM term_counts")
        self._conn.execute("DELETE FROM pages")
