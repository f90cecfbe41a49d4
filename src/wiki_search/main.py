import logging
from pathlib import Path

import duckdb
from typer import Typer, Argument, Exit, Option
from typing import Annotated
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from .index_config import resolve_db_path, resolve_log_level
from .models import load_snapshot
from .search import RankedEntry, ResultSet, TermQueryEngine, rank_entries
from .storage import DuckDBTermIndex
from .storage.duckdb import MEMORY_DB

app = Typer(help="Search a term-frequency index with and/or/minus queries.")
console = Console()
logger = logging.getLogger(__name__)

_OPERATOR_LABELS = {"and": "AND", "or": "OR", "minus": "MINUS"}


def _configure_logging(log_level: str | None) -> None:
    level = resolve_log_level(log_level)
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    root_logger.setLevel(level)


def _fail(exc: Exception) -> Exit:
    logger.debug("Command failed", exc_info=exc)
    console.print(f"[bold red]Error:[/] {escape(str(exc))}", soft_wrap=True)
    return Exit(code=1)


def _open_for_reading(db_path: str | None) -> DuckDBTermIndex:
    """Open the index read-only. A missing index file reads as an empty index."""
    resolved = resolve_db_path(db_path)
    if not Path(resolved).exists():
        logger.debug("No index at %s, searching an empty index", resolved)
        return DuckDBTermIndex(MEMORY_DB)
    return DuckDBTermIndex(resolved, read_only=True)


def describe_query(terms: list[str], operator: str, exclude: list[str]) -> str:
    label = _OPERATOR_LABELS.get(operator, operator.upper())
    description = f" {label} ".join(terms)
    for term in exclude:
        description = f"{description} MINUS {term}"
    return description


def render_results(
    title: str,
    result: ResultSet,
    *,
    descending: bool = False,
    limit: int | None = None,
) -> None:
    entries: list[RankedEntry] = rank_entries(
        result.scores, descending=descending, limit=limit
    )

    table = Table(title=f"Query: {escape(title)}", title_justify="left")
    table.add_column("#", justify="right", style="dim")
    table.add_column("URL", overflow="fold")
    table.add_column("Relevance", justify="right", style="bold green")
    for position, entry in enumerate(entries, start=1):
        table.add_row(str(position), Text(entry.doc_id), str(entry.score))

    if entries:
        console.print(table)
    else:
        console.print(f"[bold]Query: {escape(title)}[/]\n[yellow]No matching pages.[/]")


@app.callback()
def cli(
    log_level: Annotated[
        str | None,
        Option(
            "--log-level",
            help="Logging level (DEBUG, INFO, WARNING, ...). Defaults to WIKI_SEARCH_LOG_LEVEL or WARNING.",
        ),
    ] = None,
) -> None:
    _configure_logging(log_level)


@app.command()
def load(
    snapshot: Annotated[
        str,
        Argument(help="JSON file with {\"pages\": [{\"url\": ..., \"counts\": {term: count}}]}."),
    ],
    db_path: Annotated[
        str | None,
        Option("--db-path", help="DuckDB index path. Defaults to WIKI_SEARCH_DB_PATH or ~/.wiki_search/index.duckdb."),
    ] = None,
) -> None:
    """Load term counts for a batch of pages into the index."""
    try:
        parsed = load_snapshot(snapshot)
        with DuckDBTermIndex(resolve_db_path(db_path)) as index:
            terms_written = 0
            for page in parsed.pages:
                terms_written += index.index_page(page.url, page.counts)
    except (ValueError, duckdb.Error) as exc:
        raise _fail(exc) from exc

    console.print(
        f"[bold green]Indexed {len(parsed.pages)} pages[/] ({terms_written} term counts)."
    )


@app.command()
def search(
    terms: Annotated[list[str], Argument(help="Query terms, combined left to right.")],
    op: Annotated[
        str,
        Option("--op", "-o", help="Operator joining the terms: and, or, minus."),
    ] = "and",
    exclude: Annotated[
        list[str] | None,
        Option("--exclude", "-x", help="Remove pages containing this term. Repeatable."),
    ] = None,
    limit: Annotated[
        int | None,
        Option("--limit", "-n", help="Show at most this many results."),
    ] = None,
    descending: Annotated[
        bool,
        Option("--descending/--ascending", help="Order by highest relevance first."),
    ] = False,
    show_terms: Annotated[
        bool,
        Option("--show-terms", help="Also print the results for each single term."),
    ] = False,
    db_path: Annotated[
        str | None,
        Option("--db-path", help="DuckDB index path. Defaults to WIKI_SEARCH_DB_PATH or ~/.wiki_search/index.duckdb."),
    ] = None,
) -> None:
    """Run a multi-term search and print the ranked results."""
    excluded = list(exclude or [])
    try:
        with _open_for_reading(db_path) as index:
            engine = TermQueryEngine(index)
            if show_terms:
                for term in [*terms, *excluded]:
                    render_results(
                        term,
                        engine.lookup(term),
                        descending=descending,
                        limit=limit,
                    )
            result = engine.search(terms, operator=op, exclude=excluded)  # type: ignore[arg-type]
    except (ValueError, duckdb.Error) as exc:
        raise _fail(exc) from exc

    render_results(
        describe_query(terms, op, excluded),
        result,
        descending=descending,
        limit=limit,
    )


@app.command(name="terms")
def list_terms(
    db_path: Annotated[
        str | None,
        Option("--db-path", help="DuckDB index path. Defaults to WIKI_SEARCH_DB_PATH or ~/.wiki_search/index.duckdb."),
    ] = None,
) -> None:
    """List indexed terms with their page counts."""
    try:
        with _open_for_reading(db_path) as index:
            rows = index.list_terms()
    except duckdb.Error as exc:
        raise _fail(exc) from exc

    if not rows:
        console.print("[yellow]The index is empty.[/]")
        return

    table = Table(title="Indexed terms", title_justify="left")
    table.add_column("Term")
    table.add_column("Pages", justify="right")
    table.add_column("Occurrences", justify="right")
    for row in rows:
        table.add_row(Text(row["term"]), str(row["pages"]), str(row["occurrences"]))
    console.print(table)
