# tasks/task_service.py

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from ..core.errors import InvalidInputError, NotFoundError
from ..core.ports import IdAllocator, IdentityResolver, TaskRepo
from .paginator import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, Paginator
from .task_codec import owner_prefix
from .task_models import TASK_ID_MAX, Priority, Task

logger = logging.getLogger(__name__)


def _coerce_priority(value: Priority | str | None) -> Priority:
    if isinstance(value, Priority):
        return value
    try:
        return Priority.parse(value)
    except ValueError as e:
        raise InvalidInputError(str(e)) from e


def _check_task_id(task_id: int) -> int:
    valid = isinstance(task_id, int) and not isinstance(task_id, bool)
    if not valid or not 0 <= task_id <= TASK_ID_MAX:
        raise InvalidInputError(f"task id must be an integer in 0..{TASK_ID_MAX}, got {task_id!r}")
    return task_id


class TaskService:
    """
    Per-owner task operations.

    Every operation runs under one re-entrant lock, so the
    get -> mutate -> put sequence of one call never interleaves with another
    call's. The owner comes from the identity resolver unless the caller
    passes it explicitly.
    """

    def __init__(
        self,
        *,
        store: TaskRepo,
        ids: IdAllocator,
        identity: IdentityResolver | None = None,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> None:
        self._store = store
        self._ids = ids
        self._identity = identity
        self._default_page_size = default_page_size
        self._max_page_size = max_page_size
        self.lock = threading.RLock()

    # ---- helpers ----

    def _owner(self, owner: str | None) -> str:
        if owner is None:
            if self._identity is None:
                raise RuntimeError("TaskService has no identity resolver; pass owner explicitly")
            owner = self._identity.current_owner()
        try:
            owner_prefix(owner)
        except ValueError as e:
            # Over-long or unencodable names cannot form a storage key.
            raise InvalidInputError(str(e)) from e
        return owner

    def _target(self, owner: str | None, task_id: int) -> tuple[str, int]:
        return self._owner(owner), _check_task_id(task_id)

    def _mutate(self, owner: str, task_id: int, apply: Callable[[Task], None]) -> None:
        with self.lock:
            task = self._store.get(owner, task_id)
            if task is None:
                raise NotFoundError(task_id)
            apply(task)
            self._store.put(owner, task_id, task)

    # ---- operations ----

    def create_task(
        self,
        description: str,
        priority: Priority | str | None = None,
        *,
        owner: str | None = None,
    ) -> int:
        owner = self._owner(owner)
        prio = _coerce_priority(priority)
        with self.lock:
            task_id = self._ids.next_id()
            self._store.put(owner, task_id, Task.new(task_id, description, prio))
        logger.info("Task created owner=%s id=%s priority=%s", owner, task_id, prio.value)
        return task_id

    def get_task(self, task_id: int, *, owner: str | None = None) -> Task:
        owner, task_id = self._target(owner, task_id)
        with self.lock:
            task = self._store.get(owner, task_id)
        if task is None:
            raise NotFoundError(task_id)
        return task

    def list_tasks(
        self,
        page: int | None = None,
        limit: int | None = None,
        *,
        owner: str | None = None,
    ) -> list[Task]:
        owner = self._owner(owner)
        paginator = Paginator(
            page=page,
            limit=limit,
            default_limit=self._default_page_size,
            max_limit=self._max_page_size,
        )
        with self.lock:
            return paginator.window(self._store.range_for_owner(owner))

    def update_task(self, task_id: int, text: str, *, owner: str | None = None) -> None:
        if not text:
            raise InvalidInputError("Text cannot be empty")
        owner, task_id = self._target(owner, task_id)

        def apply(task: Task) -> None:
            task.description = text

        self._mutate(owner, task_id, apply)
        logger.debug("Task description updated owner=%s id=%s", owner, task_id)

    def delete_task(self, task_id: int, *, owner: str | None = None) -> None:
        owner, task_id = self._target(owner, task_id)
        with self.lock:
            self._store.remove(owner, task_id)
        logger.info("Task deleted owner=%s id=%s", owner, task_id)

    def toggle_task_complete(self, task_id: int, *, owner: str | None = None) -> None:
        owner, task_id = self._target(owner, task_id)

        def apply(task: Task) -> None:
            task.is_completed = not task.is_completed

        self._mutate(owner, task_id, apply)

    def mark_task_complete(self, task_id: int, *, owner: str | None = None) -> None:
        self._set_completed(task_id, True, owner)

    def mark_task_incomplete(self, task_id: int, *, owner: str | None = None) -> None:
        self._set_completed(task_id, False, owner)

    def _set_completed(self, task_id: int, done: bool, owner: str | None) -> None:
        owner, task_id = self._target(owner, task_id)

        def apply(task: Task) -> None:
            task.is_completed = done

        self._mutate(owner, task_id, apply)

    def set_task_priority(
        self,
        task_id: int,
        priority: Priority | str,
        *,
        owner: str | None = None,
    ) -> Priority:
        """Set the priority; returns the parsed value that was stored."""
        owner, task_id = self._target(owner, task_id)
        prio = _coerce_priority(priority)

        def apply(task: Task) -> None:
            task.priority = prio

        self._mutate(owner, task_id, apply)
        return prio

    def add_tag(self, task_id: int, tag: str, *, owner: str | None = None) -> None:
        owner, task_id = self._target(owner, task_id)
        self._mutate(owner, task_id, lambda task: task.add_tag(tag))

    def remove_tag(self, task_id: int, tag: str, *, owner: str | None = None) -> None:
        owner, task_id = self._target(owner, task_id)
        self._mutate(owner, task_id, lambda task: task.remove_tag(tag))

    # ---- diagnostics ----

    def count_tasks(self, *, owner: str | None = None) -> int:
        owner = self._owner(owner)
        with self.lock:
            return self._store.count_for_owner(owner)

    def last_issued_id(self) -> int:
        return self._ids.last_id()
