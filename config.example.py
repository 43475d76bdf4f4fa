# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.

Not installed with the package: it only lists the variables everyframe.config reads.
"""

ENV_VARS = {
    # App / logging
    "EVERYFRAME_APP_NAME": "App display name (default: everyframe).",
    "EVERYFRAME_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Paths (gitignored)
    "EVERYFRAME_DATA_DIR": "Local data directory for the snapshot and log file (default: .local/everyframe).",
    "EVERYFRAME_SNAPSHOT_PATH": "Task snapshot JSON path (default: <data_dir>/tasks.json).",
    # Behaviour
    "EVERYFRAME_DEFAULT_DAILY": "Initial 'daily?' toggle when no snapshot exists (true/false, default: false).",
    "EVERYFRAME_SAVE_ON_EXIT": "Write the snapshot on shutdown (true/false, default: true).",
}
