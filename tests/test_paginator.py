# tests/test_paginator.py

from __future__ import annotations

import itertools

import pytest

from tasklist.tasks.paginator import Paginator


@pytest.mark.parametrize(
    ("page", "limit", "exp_page", "exp_limit", "exp_skip"),
    [
        (None, None, 1, 5, 0),
        (0, None, 1, 5, 0),
        (-3, 2, 1, 2, 0),
        (2, 2, 2, 2, 2),
        (3, 10, 3, 10, 20),
        (1, 1000, 1, 100, 0),
        (2, 0, 2, 1, 1),
    ],
)
def test_effective_values(page, limit, exp_page, exp_limit, exp_skip) -> None:
    p = Paginator(page=page, limit=limit)
    assert p.effective_page == exp_page
    assert p.effective_limit == exp_limit
    assert p.skip == exp_skip


def test_window_slices_in_order() -> None:
    items = list(range(1, 8))
    assert Paginator(page=1, limit=3).window(items) == [1, 2, 3]
    assert Paginator(page=3, limit=3).window(items) == [7]
    assert Paginator(page=4, limit=3).window(items) == []
    assert Paginator(page=10**9, limit=3).window(items) == []


def test_window_never_exceeds_max() -> None:
    assert len(Paginator(limit=500).window(range(1000))) == 100


def test_custom_defaults() -> None:
    p = Paginator(default_limit=2, max_limit=3)
    assert p.effective_limit == 2
    assert Paginator(limit=50, default_limit=2, max_limit=3).effective_limit == 3


def test_window_is_lazy_on_source() -> None:
    # An infinite source must still produce a finite page.
    assert Paginator(page=2, limit=4).window(itertools.count(1)) == [5, 6, 7, 8]
