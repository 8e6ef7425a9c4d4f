# storage/memory_medium.py

from __future__ import annotations

import bisect
import threading
from collections.abc import Iterator

from .cells import decode_counter, encode_counter


class MemoryMedium:
    """
    In-memory storage medium with the same ordering contract as SqliteMedium.

    Used for tests and for TASKLIST_STORAGE=memory (nothing survives exit).
    Keys are kept in a sorted list next to the value dict.
    """

    def __init__(self) -> None:
        self._cells: dict[str, bytes] = {}
        self._values: dict[bytes, bytes] = {}
        self._keys: list[bytes] = []
        self._cell_lock = threading.Lock()

    def close(self) -> None:
        return

    def get_cell(self, name: str) -> bytes | None:
        return self._cells.get(name)

    def set_cell(self, name: str, value: bytes) -> None:
        self._cells[name] = bytes(value)

    def increment_cell(self, name: str, *, limit: int) -> int:
        with self._cell_lock:
            current = decode_counter(self._cells.get(name))
            if current >= limit:
                raise OverflowError(f"cell {name!r} reached its limit {limit}")
            self._cells[name] = encode_counter(current + 1)
            return current + 1

    def get(self, key: bytes) -> bytes | None:
        return self._values.get(key)

    def put(self, key: bytes, value: bytes) -> None:
        key = bytes(key)
        if key not in self._values:
            bisect.insort(self._keys, key)
        self._values[key] = bytes(value)

    def delete(self, key: bytes) -> None:
        if self._values.pop(key, None) is None:
            return
        i = bisect.bisect_left(self._keys, key)
        del self._keys[i]

    def scan(self, start: bytes, end: bytes) -> Iterator[tuple[bytes, bytes]]:
        lo = bisect.bisect_left(self._keys, start)
        hi = bisect.bisect_left(self._keys, end)
        # Snapshot the key slice so writes during iteration cannot shift it.
        for key in self._keys[lo:hi]:
            value = self._values.get(key)
            if value is not None:
                yield key, value
