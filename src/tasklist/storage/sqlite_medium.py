# storage/sqlite_medium.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from collections.abc import Iterator
from pathlib import Path

from .cells import decode_counter, encode_counter

logger = logging.getLogger(__name__)


class SqliteMedium:
    """
    SQLite-backed storage medium.

    Two tables:
    - cells: named scalar values (e.g. the last issued task id)
    - entries: ordered byte-keyed map; BLOB keys compare with memcmp,
      so ORDER BY key is plain lexicographic byte order

    Thread-safety:
    - each method opens its own SQLite connection
    - every write commits before returning
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("SqliteMedium ready db=%s entries=%s", self._db_path, self.count_entries())

    def close(self) -> None:
        """Compatibility hook for shutdown (no persistent connections to close)."""
        return

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.DatabaseError):
            conn.execute("PRAGMA journal_mode=WAL")
        conn.execute("PRAGMA synchronous=FULL")

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS cells (
                    name TEXT PRIMARY KEY,
                    value BLOB NOT NULL
                )
                """
            )
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS entries (
                    key BLOB PRIMARY KEY,
                    value BLOB NOT NULL
                ) WITHOUT ROWID
                """
            )
            conn.commit()
        finally:
            conn.close()

    # ---- cells ----

    def get_cell(self, name: str) -> bytes | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT value FROM cells WHERE name = ?", (name,)).fetchone()
            return bytes(row[0]) if row else None
        finally:
            conn.close()

    def set_cell(self, name: str, value: bytes) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO cells(name, value) VALUES (?, ?)
                ON CONFLICT(name) DO UPDATE SET value = excluded.value
                """,
                (name, sqlite3.Binary(value)),
            )
            conn.commit()
        finally:
            conn.close()

    def increment_cell(self, name: str, *, limit: int) -> int:
        """
        Atomically add 1 to an integer cell and return the new value.

        BEGIN IMMEDIATE takes the write lock before the read, so two
        connections on the same file can never both see the same old value.
        Raises OverflowError (nothing written) once the cell reaches `limit`.
        """
        conn = self._get_conn()
        try:
            conn.execute("BEGIN IMMEDIATE")
            row = conn.execute("SELECT value FROM cells WHERE name = ?", (name,)).fetchone()
            current = decode_counter(bytes(row[0]) if row else None)
            if current >= limit:
                raise OverflowError(f"cell {name!r} reached its limit {limit}")
            new_value = current + 1
            conn.execute(
                """
                INSERT INTO cells(name, value) VALUES (?, ?)
                ON CONFLICT(name) DO UPDATE SET value = excluded.value
                """,
                (name, sqlite3.Binary(encode_counter(new_value))),
            )
            conn.commit()
            return new_value
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    # ---- ordered map ----

    def count_entries(self) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM entries").fetchone()
            return int(n)
        finally:
            conn.close()

    def get(self, key: bytes) -> bytes | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT value FROM entries WHERE key = ?", (sqlite3.Binary(key),)
            ).fetchone()
            return bytes(row[0]) if row else None
        finally:
            conn.close()

    def put(self, key: bytes, value: bytes) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                "INSERT OR REPLACE INTO entries(key, value) VALUES (?, ?)",
                (sqlite3.Binary(key), sqlite3.Binary(value)),
            )
            conn.commit()
        finally:
            conn.close()

    def delete(self, key: bytes) -> None:
        conn = self._get_conn()
        try:
            conn.execute("DELETE FROM entries WHERE key = ?", (sqlite3.Binary(key),))
            conn.commit()
        finally:
            conn.close()

    def scan(self, start: bytes, end: bytes) -> Iterator[tuple[bytes, bytes]]:
        """
        Yield (key, value) for start <= key < end in ascending key order.

        Lazy: rows are pulled from the cursor as the caller iterates; the
        connection is released when the generator finishes or is closed.
        """
        conn = self._get_conn()
        try:
            cur = conn.execute(
                """
                SELECT key, value
                FROM entries
                WHERE key >= ? AND key < ?
                ORDER BY key ASC
                """,
                (sqlite3.Binary(start), sqlite3.Binary(end)),
            )
            for key, value in cur:
                yield bytes(key), bytes(value)
        finally:
            conn.close()
