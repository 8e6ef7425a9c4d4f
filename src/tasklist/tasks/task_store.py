# tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterator

from ..core.ports import StorageMedium
from .task_codec import decode_task, encode_key, encode_task, owner_prefix, owner_range
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Ordered map (owner, task id) -> Task on top of a StorageMedium.

    Keys are encoded so that one owner's records form a contiguous byte
    range ordered by ascending id. Scans are bounded to that range and
    additionally stop at the first key outside the owner's prefix.
    """

    def __init__(self, medium: StorageMedium) -> None:
        self._medium = medium

    # ---- public API ----

    def put(self, owner: str, task_id: int, task: Task) -> None:
        self._medium.put(encode_key(owner, task_id), encode_task(task))
        logger.debug("Task stored owner=%s id=%s", owner, task_id)

    def get(self, owner: str, task_id: int) -> Task | None:
        raw = self._medium.get(encode_key(owner, task_id))
        return decode_task(raw) if raw is not None else None

    def range_for_owner(self, owner: str) -> Iterator[Task]:
        """
        Lazily iterate the owner's tasks by ascending id.

        Each call starts a fresh scan, so the result can be restarted by
        simply calling again.
        """
        prefix = owner_prefix(owner)
        key_len = len(prefix) + 4
        start, end = owner_range(owner)
        for key, raw in self._medium.scan(start, end):
            if len(key) != key_len or not key.startswith(prefix):
                break
            yield decode_task(raw)

    def remove(self, owner: str, task_id: int) -> None:
        self._medium.delete(encode_key(owner, task_id))
        logger.debug("Task removed owner=%s id=%s", owner, task_id)

    def count_for_owner(self, owner: str) -> int:
        return sum(1 for _ in self.range_for_owner(owner))
