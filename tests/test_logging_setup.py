# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tasklist.logging_setup import _ConsoleNoiseFilter, setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    level = root.level
    yield
    for h in list(root.handlers):
        if isinstance(h, logging.FileHandler) or any(
            isinstance(f, _ConsoleNoiseFilter) for f in h.filters
        ):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_levels() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("tasklist.cli.commands", logging.INFO))
    assert f.filter(_record("tasklist.storage.sqlite_medium", logging.INFO))
    assert not f.filter(_record("tasklist.tasks.task_service", logging.INFO))
    assert not f.filter(_record("tasklist.tasks.task_store", logging.DEBUG))
    assert f.filter(_record("tasklist.tasks.task_service", logging.WARNING))
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))


def test_setup_logging_writes_file(tmp_path: Path, restore_root_logging) -> None:
    setup_logging(log_dir=tmp_path / "logs", console_level=logging.WARNING)
    logging.getLogger("tasklist.test").debug("hello %s", "file")

    for h in logging.getLogger().handlers:
        h.flush()

    text = (tmp_path / "logs" / "tasklist.log").read_text("utf-8")
    assert "hello file" in text
    assert "DEBUG tasklist.test" in text


def test_console_hides_task_chatter_from_real_loggers(service) -> None:
    f = _ConsoleNoiseFilter()
    seen: list[logging.LogRecord] = []

    class _Collect(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            seen.append(record)

    handler = _Collect(level=logging.DEBUG)
    loggers = [logging.getLogger(n) for n in ("tasklist.tasks.task_service", "tasklist.tasks.task_store")]
    old_levels = [lg.level for lg in loggers]
    for lg in loggers:
        lg.addHandler(handler)
        lg.setLevel(logging.DEBUG)
    try:
        tid = service.create_task("noisy")
        service.delete_task(tid)
    finally:
        for lg, level in zip(loggers, old_levels):
            lg.removeHandler(handler)
            lg.setLevel(level)

    assert {r.name for r in seen} == {"tasklist.tasks.task_service", "tasklist.tasks.task_store"}
    assert not [r for r in seen if f.filter(r)]
