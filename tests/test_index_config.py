import logging
from pathlib import Path

from wiki_search.index_config import ENV_DB_PATH, ENV_LOG_LEVEL, resolve_db_path, resolve_log_level


def test_resolve_db_path_prefers_override(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv(ENV_DB_PATH, str(tmp_path / "env.duckdb"))

    resolved = resolve_db_path(str(tmp_path / "sub" / "override.duckdb"))

    assert resolved == str((tmp_path / "sub" / "override.duckdb").resolve())
    assert (tmp_path / "sub").is_dir()


def test_resolve_db_path_uses_env_then_default(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv(ENV_DB_PATH, str(tmp_path / "env.duckdb"))
    assert resolve_db_path() == str((tmp_path / "env.duckdb").resolve())

    monkeypatch.delenv(ENV_DB_PATH)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert resolve_db_path() == str((tmp_path / ".wiki_search" / "index.duckdb").resolve())


def test_resolve_log_level(monkeypatch) -> None:
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    assert resolve_log_level() == logging.WARNING
    assert resolve_log_level("info") == logging.INFO

    monkeypatch.setenv(ENV_LOG_LEVEL, "DEBUG")
    assert resolve_log_level() == logging.DEBUG
    assert resolve_log_level("nonsense") == logging.WARNING
