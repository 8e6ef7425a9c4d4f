# tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

TASK_ID_MAX = 0xFFFFFFFF


class Priority(StrEnum):
    """Task priority. Medium unless the caller says otherwise."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def default(cls) -> Priority:
        return cls.MEDIUM

    @classmethod
    def parse(cls, raw: str | None) -> Priority:
        """Case-insensitive lookup by name ("High") or value ("high")."""
        if raw is None:
            return cls.default()
        try:
            return cls(raw.strip().lower())
        except ValueError:
            raise ValueError(f"unknown priority: {raw!r}") from None


@dataclass(slots=True)
class Task:
    id: int
    description: str
    is_completed: bool = False
    priority: Priority = Priority.MEDIUM
    tags: list[str] = field(default_factory=list)

    @classmethod
    def new(cls, task_id: int, description: str, priority: Priority | None = None) -> Task:
        return cls(id=task_id, description=description, priority=priority or Priority.default())

    def add_tag(self, tag: str) -> None:
        # Duplicates are kept on purpose: tags are a list, not a set.
        self.tags.append(tag)

    def remove_tag(self, tag: str) -> None:
        self.tags = [t for t in self.tags if t != tag]
