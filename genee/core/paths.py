#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for the genee habit diary.

All per-user files live in the application directory reported by click
for the current platform:

    APP_DIR/
    ├── config.yaml    # Persisted settings
    ├── genee.db       # Default diary (relational backend)
    └── logs/          # Rotating log files
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path

# --- Third party imports ---
import click

APP_NAME = "genee"

# ----- Application directory -----
APP_DIR: Path = Path(click.get_app_dir(APP_NAME))

# ---- Files ----
CONFIG_PATH = APP_DIR / "config.yaml"
DEFAULT_DATAFILE_PATH = APP_DIR / f"{APP_NAME}.db"

# ---- Logs ----
LOG_DIR = APP_DIR / "logs"
