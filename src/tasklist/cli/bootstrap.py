# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the storage medium, id allocator and task store into a TaskService.
"""

from __future__ import annotations

import logging

from ..config import STORAGE_MEMORY, get_settings
from ..core.identity import StaticIdentity
from ..core.ports import StorageMedium
from ..core.state import AppState
from ..storage.memory_medium import MemoryMedium
from ..storage.sqlite_medium import SqliteMedium
from ..tasks.id_allocator import TaskIdAllocator
from ..tasks.task_service import TaskService
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)


def open_medium(settings) -> StorageMedium:
    if getattr(settings, "storage", None) == STORAGE_MEMORY:
        logger.warning("In-memory storage selected; tasks will not survive restart.")
        return MemoryMedium()
    return SqliteMedium(settings.tasks_db_path)


def build_service(settings, medium: StorageMedium, identity: StaticIdentity) -> TaskService:
    return TaskService(
        store=TaskStore(medium),
        ids=TaskIdAllocator(medium),
        identity=identity,
        default_page_size=int(getattr(settings, "default_page_size", 5)),
        max_page_size=int(getattr(settings, "max_page_size", 100)),
    )


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    identity = StaticIdentity(owner=settings.owner)
    medium = open_medium(settings)
    return AppState(
        settings=settings,
        service=build_service(settings, medium, identity),
        identity=identity,
        medium=medium,
    )
