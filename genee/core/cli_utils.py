#!/usr/bin/env python3
"""
cli_utils.py
-------------------
Shared CLI utilities for genee commands.

Functions:
    setup_logger: Initialize GeneeLogger for CLI operations
"""
from pathlib import Path

from genee.core.logging_manager import GeneeLogger


def setup_logger(log_dir: Path, component_name: str) -> GeneeLogger:
    """
    Setup logging for CLI operations.

    Args:
        log_dir: Base log directory (typically from paths.LOG_DIR)
        component_name: Component identifier for logging (e.g. 'genee')

    Returns:
        Configured GeneeLogger instance
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    return GeneeLogger(log_dir, component_name=component_name)
