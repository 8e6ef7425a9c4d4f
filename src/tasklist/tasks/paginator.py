# tasks/paginator.py

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import TypeVar

DEFAULT_PAGE_SIZE = 5
MAX_PAGE_SIZE = 100

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Paginator:
    """
    Page window over an ordered sequence.

    - page is 1-indexed; None, 0 and negatives all mean the first page
    - limit defaults to `default_limit`, is capped at `max_limit` and never
      drops below 1 (a zero-sized page would make every page empty)
    """

    page: int | None = None
    limit: int | None = None
    default_limit: int = DEFAULT_PAGE_SIZE
    max_limit: int = MAX_PAGE_SIZE

    @property
    def effective_page(self) -> int:
        return max(int(self.page or 0), 1)

    @property
    def effective_limit(self) -> int:
        limit = self.default_limit if self.limit is None else int(self.limit)
        return max(1, min(limit, self.max_limit))

    @property
    def skip(self) -> int:
        return (self.effective_page - 1) * self.effective_limit

    def window(self, items: Iterable[T]) -> list[T]:
        return list(self.iter_window(items))

    def iter_window(self, items: Iterable[T]) -> Iterator[T]:
        start = self.skip
        return islice(items, start, start + self.effective_limit)
