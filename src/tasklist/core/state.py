# src/tasklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_service import TaskService
from .identity import StaticIdentity
from .ports import StorageMedium


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    service: TaskService
    identity: StaticIdentity
    medium: StorageMedium

    @property
    def owner(self) -> str:
        return self.identity.current_owner()
