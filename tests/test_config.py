# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from tasklist.cli.bootstrap import create_initial_state
from tasklist.config import STORAGE_MEMORY, STORAGE_SQLITE, Settings
from tasklist.storage.memory_medium import MemoryMedium
from tasklist.storage.sqlite_medium import SqliteMedium


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (
        "TASKLIST_APP_NAME",
        "TASKLIST_LOG_LEVEL",
        "TASKLIST_STORAGE",
        "TASKLIST_DATA_DIR",
        "TASKLIST_TASKS_DB_PATH",
        "TASKLIST_OWNER",
        "TASKLIST_DEFAULT_PAGE_SIZE",
        "TASKLIST_MAX_PAGE_SIZE",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("USER", "carol")
    s = Settings.from_env()
    assert s.app_name == "tasklist"
    assert s.storage == STORAGE_SQLITE
    assert s.data_dir == Path(".local/tasklist")
    assert s.tasks_db_path == Path(".local/tasklist") / "tasks.sqlite3"
    assert s.owner == "carol"
    assert (s.default_page_size, s.max_page_size) == (5, 100)


def test_env_overrides(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    clean_env.setenv("TASKLIST_STORAGE", "MEMORY")
    clean_env.setenv("TASKLIST_DATA_DIR", str(tmp_path))
    clean_env.setenv("TASKLIST_OWNER", "dave")
    clean_env.setenv("TASKLIST_DEFAULT_PAGE_SIZE", "0")
    clean_env.setenv("TASKLIST_MAX_PAGE_SIZE", "not-a-number")

    s = Settings.from_env()
    assert s.storage == STORAGE_MEMORY
    assert s.tasks_db_path == tmp_path / "tasks.sqlite3"
    assert s.owner == "dave"
    assert s.default_page_size == 1
    assert s.max_page_size == 100


def test_unknown_storage_falls_back_to_sqlite(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("TASKLIST_STORAGE", "postgres")
    assert Settings.from_env().storage == STORAGE_SQLITE


def test_bootstrap_picks_medium(settings) -> None:
    state = create_initial_state(settings=settings)
    assert isinstance(state.medium, SqliteMedium)
    assert state.owner == "u1"
    assert state.service.create_task("x") == 1

    settings.storage = STORAGE_MEMORY
    state = create_initial_state(settings=settings)
    assert isinstance(state.medium, MemoryMedium)
