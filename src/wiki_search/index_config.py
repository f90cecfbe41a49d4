"""
Configuration helpers for the local term index and logging.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path


DEFAULT_DB_PATH = "~/.wiki_search/index.duckdb"
ENV_DB_PATH = "WIKI_SEARCH_DB_PATH"

DEFAULT_LOG_LEVEL = "WARNING"
ENV_LOG_LEVEL = "WIKI_SEARCH_LOG_LEVEL"


def resolve_db_path(override_path: str | None = None) -> str:
    """
    Resolve the DuckDB path from CLI override, env var, or default.

    Precedence:
    1) explicit override_path
    2) WIKI_SEARCH_DB_PATH
    3) default path
    """
    raw_path = override_path or os.getenv(ENV_DB_PATH) or DEFAULT_DB_PATH
    resolved = Path(raw_path).expanduser().resolve()
    resolved.parent.mkdir(parents=True, exist_ok=True)
    return str(resolved)


def resolve_log_level(override_level: str | None = None) -> int:
    """Resolve the log level name from CLI override, env var, or default."""
    level_name = (override_level or os.getenv(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        return logging.WARNING
    return level
