# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use:
- .env (local, gitignored)
- config_local.py (local safe overrides, gitignored)

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Storage
    "TASKLIST_STORAGE": "sqlite (default, durable) or memory (lost on exit).",
    "TASKLIST_DATA_DIR": "Local data directory (default: .local/tasklist).",
    "TASKLIST_TASKS_DB_PATH": "SQLite path (default: <data_dir>/tasks.sqlite3).",
    # Identity
    "TASKLIST_OWNER": "Owner the console acts as (default: $USER / $USERNAME / anonymous).",
    # Pagination
    "TASKLIST_DEFAULT_PAGE_SIZE": "Tasks per page when /list gets no limit (default: 5).",
    "TASKLIST_MAX_PAGE_SIZE": "Upper bound for any requested limit (default: 100).",
}
