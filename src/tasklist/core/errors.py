# src/tasklist/core/errors.py

"""
Caller-visible error taxonomy.

Only TaskError subclasses are part of the service contract. Storage and
decoding failures are not: they propagate as ordinary exceptions.
"""

from __future__ import annotations


class TaskError(Exception):
    """Base class for errors returned to the caller verbatim."""


class NotFoundError(TaskError):
    """No record exists for the (owner, id) pair."""

    def __init__(self, task_id: int | None = None) -> None:
        super().__init__("Item not found")
        self.task_id = task_id


class InvalidInputError(TaskError):
    """A caller-supplied value failed validation."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid input: {detail}")
        self.detail = detail
