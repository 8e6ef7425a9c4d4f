# src/tasklist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every value has a local default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TASKLIST"

STORAGE_SQLITE = "sqlite"
STORAGE_MEMORY = "memory"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except ImportError:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, choices: set[str], default: str) -> str:
    raw = (os.getenv(name) or "").strip().lower()
    return raw if raw in choices else default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Storage ----
    storage: str
    data_dir: Path
    tasks_db_path: Path

    # ---- Console identity ----
    owner: str

    # ---- Pagination ----
    default_page_size: int
    max_page_size: int

    @staticmethod
    def from_env() -> "Settings":
        app_name = _first_env(_k("APP_NAME"), default="tasklist") or "tasklist"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        storage = _env_choice(_k("STORAGE"), {STORAGE_SQLITE, STORAGE_MEMORY}, STORAGE_SQLITE)
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/tasklist"))
        tasks_db_path = _env_path(_k("TASKS_DB_PATH"), data_dir / "tasks.sqlite3")

        # Console runs as the local OS user unless told otherwise.
        owner = (_first_env(_k("OWNER"), "USER", "USERNAME", default="anonymous") or "anonymous").strip()

        default_page_size = _env_int(_k("DEFAULT_PAGE_SIZE"), 5)
        max_page_size = _env_int(_k("MAX_PAGE_SIZE"), 100)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            storage=storage,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
            owner=owner,
            default_page_size=max(1, default_page_size),
            max_page_size=max(1, max_page_size),
        )


SETTINGS = Settings.from_env()

# ---- Optional local overrides (never committed) ----
try:
    import config_local as _config_local  # type: ignore

    if hasattr(_config_local, "OWNER"):
        object.__setattr__(SETTINGS, "owner", str(_config_local.OWNER))  # type: ignore[misc]
    if hasattr(_config_local, "STORAGE"):
        object.__setattr__(SETTINGS, "storage", str(_config_local.STORAGE))  # type: ignore[misc]
except ImportError:
    pass


def get_settings() -> Settings:
    return SETTINGS
