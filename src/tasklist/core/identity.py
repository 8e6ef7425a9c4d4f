# src/tasklist/core/identity.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class StaticIdentity:
    """
    IdentityResolver for front-ends that act on behalf of one owner.

    The console sets it once from settings; /whoami can switch it.
    """

    owner: str

    def current_owner(self) -> str:
        return self.owner

    def switch(self, owner: str) -> None:
        if not owner:
            raise ValueError("owner must not be empty")
        self.owner = owner
