# tasks/task_codec.py

"""
Binary encoding for Task records and storage keys.

Record layout (version 1, big-endian):

    u8   format version
    u32  id
    u32  len(description) + UTF-8 bytes
    u8   is_completed (0/1)
    u8   priority discriminant (Low=0, Medium=1, High=2)
    u32  tag count, then per tag: u32 len + UTF-8 bytes

Key layout:

    u16 len(owner) + owner UTF-8 bytes + u32 id

Every owner's keys share one prefix and differ only in the trailing id, so a
partition is a contiguous byte range and ids sort numerically inside it.
"""

from __future__ import annotations

import struct

from .task_models import TASK_ID_MAX, Priority, Task

FORMAT_VERSION = 1

_PRIORITY_TO_TAG = {
    Priority.LOW: 0,
    Priority.MEDIUM: 1,
    Priority.HIGH: 2,
}
_TAG_TO_PRIORITY = {v: k for k, v in _PRIORITY_TO_TAG.items()}

_U8 = struct.Struct(">B")
_U16 = struct.Struct(">H")
_U32 = struct.Struct(">I")

OWNER_MAX_BYTES = 0xFFFF


class RecordDecodeError(ValueError):
    """Stored bytes are not a valid Task record."""


# ---- records ----


def _pack_str(out: bytearray, s: str) -> None:
    raw = s.encode("utf-8")
    out += _U32.pack(len(raw))
    out += raw


def encode_task(task: Task) -> bytes:
    if not 0 <= task.id <= TASK_ID_MAX:
        raise ValueError(f"task id out of u32 range: {task.id}")

    out = bytearray()
    out += _U8.pack(FORMAT_VERSION)
    out += _U32.pack(task.id)
    _pack_str(out, task.description)
    out += _U8.pack(1 if task.is_completed else 0)
    out += _U8.pack(_PRIORITY_TO_TAG[Priority(task.priority)])
    out += _U32.pack(len(task.tags))
    for tag in task.tags:
        _pack_str(out, tag)
    return bytes(out)


class _Reader:
    __slots__ = ("_buf", "_pos")

    def __init__(self, buf: bytes) -> None:
        self._buf = buf
        self._pos = 0

    def _take(self, n: int) -> bytes:
        end = self._pos + n
        if end > len(self._buf):
            raise RecordDecodeError(f"truncated record at offset {self._pos} (need {n} bytes)")
        chunk = self._buf[self._pos:end]
        self._pos = end
        return chunk

    def u8(self) -> int:
        return _U8.unpack(self._take(1))[0]

    def u32(self) -> int:
        return _U32.unpack(self._take(4))[0]

    def text(self) -> str:
        n = self.u32()
        try:
            return self._take(n).decode("utf-8")
        except UnicodeDecodeError as e:
            raise RecordDecodeError(f"invalid UTF-8 in record: {e}") from e

    def done(self) -> bool:
        return self._pos == len(self._buf)


def decode_task(data: bytes) -> Task:
    r = _Reader(bytes(data))

    version = r.u8()
    if version != FORMAT_VERSION:
        raise RecordDecodeError(f"unsupported record format version: {version}")

    task_id = r.u32()
    description = r.text()

    completed = r.u8()
    if completed not in (0, 1):
        raise RecordDecodeError(f"invalid completion flag: {completed}")

    tag = r.u8()
    priority = _TAG_TO_PRIORITY.get(tag)
    if priority is None:
        raise RecordDecodeError(f"unknown priority discriminant: {tag}")

    tags = [r.text() for _ in range(r.u32())]

    if not r.done():
        raise RecordDecodeError("trailing bytes after record")

    return Task(
        id=task_id,
        description=description,
        is_completed=bool(completed),
        priority=priority,
        tags=tags,
    )


# ---- keys ----


def owner_prefix(owner: str) -> bytes:
    raw = owner.encode("utf-8")
    if len(raw) > OWNER_MAX_BYTES:
        raise ValueError(f"owner identity too long ({len(raw)} bytes)")
    return _U16.pack(len(raw)) + raw


def encode_key(owner: str, task_id: int) -> bytes:
    if not 0 <= task_id <= TASK_ID_MAX:
        raise ValueError(f"task id out of u32 range: {task_id}")
    return owner_prefix(owner) + _U32.pack(task_id)


def owner_range(owner: str) -> tuple[bytes, bytes]:
    """Half-open [start, end) byte range holding every key of `owner`."""
    prefix = owner_prefix(owner)
    return prefix + _U32.pack(0), prefix + b"\xff\xff\xff\xff\xff"


def decode_key(key: bytes) -> tuple[str, int]:
    if len(key) < 6:
        raise RecordDecodeError(f"storage key too short: {len(key)} bytes")
    (n,) = _U16.unpack(key[:2])
    if len(key) != 2 + n + 4:
        raise RecordDecodeError("storage key length mismatch")
    owner = key[2:2 + n].decode("utf-8")
    (task_id,) = _U32.unpack(key[2 + n:])
    return owner, task_id
