# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.cli.bootstrap import build_service
from tasklist.core.identity import StaticIdentity
from tasklist.core.state import AppState
from tasklist.storage.memory_medium import MemoryMedium
from tasklist.storage.sqlite_medium import SqliteMedium
from tasklist.tasks.task_service import TaskService


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and AppState.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="DEBUG",
        storage="sqlite",
        data_dir=tmp_path,
        tasks_db_path=tmp_path / "tasks.sqlite3",
        owner="u1",
        default_page_size=5,
        max_page_size=100,
    )


@pytest.fixture(params=["memory", "sqlite"])
def medium(request, tmp_path: Path):
    """Every storage medium must honour the same ordering contract."""
    if request.param == "memory":
        return MemoryMedium()
    return SqliteMedium(tmp_path / "medium.sqlite3")


@pytest.fixture()
def identity() -> StaticIdentity:
    return StaticIdentity(owner="u1")


@pytest.fixture()
def service(settings: SimpleNamespace, identity: StaticIdentity) -> TaskService:
    """
    TaskService over a real SQLite medium.

    SQLite is kept because restart durability is part of what we test.
    """
    return build_service(settings, SqliteMedium(settings.tasks_db_path), identity)


@pytest.fixture()
def state(settings: SimpleNamespace, identity: StaticIdentity) -> AppState:
    medium = SqliteMedium(settings.tasks_db_path)
    return AppState(
        settings=settings,
        service=build_service(settings, medium, identity),
        identity=identity,
        medium=medium,
    )
