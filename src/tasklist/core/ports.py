# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The service depends on Protocols instead of concrete implementations.
This keeps the storage medium and identity source swappable and makes
testing easier.
"""

from typing import Any, Iterator, Protocol


class IdentityResolver(Protocol):
    """Supplies the already-authenticated owner of the current call."""
    def current_owner(self) -> str: ...


class StorageMedium(Protocol):
    """
    Durable backing: named scalar cells plus one ordered byte-keyed map.

    scan() must yield (key, value) pairs in ascending byte order of key,
    restricted to start <= key < end.
    increment_cell() must read, add 1 and persist as one atomic step, and
    raise OverflowError without writing once the cell has reached `limit`.
    """

    def get_cell(self, name: str) -> bytes | None: ...
    def set_cell(self, name: str, value: bytes) -> None: ...
    def increment_cell(self, name: str, *, limit: int) -> int: ...

    def get(self, key: bytes) -> bytes | None: ...
    def put(self, key: bytes, value: bytes) -> None: ...
    def delete(self, key: bytes) -> None: ...
    def scan(self, start: bytes, end: bytes) -> Iterator[tuple[bytes, bytes]]: ...

    def close(self) -> None: ...


class TaskRepo(Protocol):
    def put(self, owner: str, task_id: int, task: Any) -> None: ...
    def get(self, owner: str, task_id: int) -> Any | None: ...
    def range_for_owner(self, owner: str) -> Iterator[Any]: ...
    def remove(self, owner: str, task_id: int) -> None: ...
    def count_for_owner(self, owner: str) -> int: ...


class IdAllocator(Protocol):
    def next_id(self) -> int: ...
    def last_id(self) -> int: ...
