from pathlib import Path

import pytest

from wiki_search.storage import DuckDBTermIndex

JAVA_LANG = "https://wiki.test/Java_lang"
JAVA_ISLAND = "https://wiki.test/Java_island"
PROGRAMMING = "https://wiki.test/Programming"
COFFEE = "https://wiki.test/Coffee"

PAGE_COUNTS: dict[str, dict[str, int]] = {
    JAVA_LANG: {"java": 10, "programming": 4},
    JAVA_ISLAND: {"java": 3, "island": 5},
    PROGRAMMING: {"programming": 7, "java": 1},
    COFFEE: {"coffee": 6, "java": 2},
}


class DictIndex:
    """In-memory term index over PAGE_COUNTS-shaped data."""

    def __init__(self, pages: dict[str, dict[str, int]]) -> None:
        self.pages = pages
        self.lookups: list[str] = []

    def get_counts(self, term: str) -> dict[str, int]:
        self.lookups.append(term)
        return {
            url: counts[term] for url, counts in self.pages.items() if term in counts
        }


@pytest.fixture
def db_path(tmp_path: Path) -> str:
    return str(tmp_path / "index.duckdb")


@pytest.fixture
def term_index(db_path: str):
    index = DuckDBTermIndex(db_path)
    for url, counts in PAGE_COUNTS.items():
        index.index_page(url, counts)
    yield index
    index.close()


@pytest.fixture
def dict_index() -> DictIndex:
    return DictIndex(PAGE_COUNTS)
