# storage/cells.py

"""Byte encoding shared by every medium for integer counter cells."""

from __future__ import annotations

COUNTER_WIDTH = 8


def encode_counter(value: int) -> bytes:
    return int(value).to_bytes(COUNTER_WIDTH, "big")


def decode_counter(raw: bytes | None) -> int:
    # Accepts any width, so 4-byte cells written by older builds still read.
    return int.from_bytes(raw, "big") if raw else 0
