# tasks/id_allocator.py

from __future__ import annotations

import logging

from ..core.ports import StorageMedium
from ..storage.cells import decode_counter
from .task_models import TASK_ID_MAX

logger = logging.getLogger(__name__)

LAST_TASK_ID_CELL = "last_task_id"


class IdSpaceExhausted(RuntimeError):
    """Every u32 task id has been issued."""


class TaskIdAllocator:
    """
    Durable, strictly increasing u32 id source.

    One counter for the whole process, shared by all owners. Ids are never
    handed out twice, even after the task that used one is deleted. The
    read-add-persist step is the medium's atomic increment, so several
    allocators over one database file still never issue the same id.
    """

    def __init__(self, medium: StorageMedium, *, cell_name: str = LAST_TASK_ID_CELL) -> None:
        self._medium = medium
        self._cell_name = cell_name

    def last_id(self) -> int:
        return decode_counter(self._medium.get_cell(self._cell_name))

    def next_id(self) -> int:
        try:
            new_id = self._medium.increment_cell(self._cell_name, limit=TASK_ID_MAX)
        except OverflowError as e:
            raise IdSpaceExhausted(f"task id space exhausted at {TASK_ID_MAX}") from e
        logger.debug("Issued task id=%s", new_id)
        return new_id
