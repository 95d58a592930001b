# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Tasks are never persisted; the data directory only holds log files.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "KAIZEN_APP_NAME": "App display name (default: kaizen).",
    "KAIZEN_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    "KAIZEN_DATA_DIR": "Local directory for kaizen.log (default: .local/kaizen).",
    # Seed data
    "KAIZEN_SEED_PATH": "Optional JSON file with the initial task array (wins over the demo set).",
    "KAIZEN_DEMO_SEED": "Seed built-in demo tasks when no seed file is given (true/false, default: true).",
    # Tasks
    "KAIZEN_DEFAULT_CATEGORY": "Category for tasks created without one (default: general).",
    # Connectors
    "KAIZEN_CONSOLE_ENABLED": "Run the console front end (true/false, default: true).",
}
