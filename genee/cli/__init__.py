#!/usr/bin/env python3
"""
Genee Habit Diary CLI
----------------------

Command-line interface for keeping and analyzing a habit diary.

This module provides the main CLI group and shared context setup
for all diary commands.

Command Structure:
    - Setup (init, generate, restore)
    - Entries (set, fill, missing, list, range)
    - Analytics (graph, top)
    - Categories (add-category, hide-category)
    - Configuration (config show, config set)

Usage:
    # Create a diary with three habits
    genee init Running Reading Meditation

    # Record today
    genee set 2024-03-01 Running Reading

    # Graph the last two 30-day periods
    genee graph --days 30 --periods 2
"""
import logging
from pathlib import Path

import click

from genee.core.cli_utils import setup_logger
from genee.core.config import Config, load_config
from genee.core.exceptions import (
    ConfigError,
    DatabaseError,
    DataFileError,
    EmptyDiaryError,
    UnsupportedOperationError,
    ValidationError,
)
from genee.core.logging_manager import handle_cli_error
from genee.core.paths import CONFIG_PATH, LOG_DIR
from genee.datafile import DiaryDataConnection, open_datafile

DIARY_ERRORS = (
    DatabaseError,
    DataFileError,
    ValidationError,
    EmptyDiaryError,
    UnsupportedOperationError,
    ConfigError,
)
"""Errors reported to the user as a one-line message."""


@click.group()
@click.option(
    "--datafile",
    type=click.Path(dir_okay=False),
    default=None,
    help="Diary file; '.csv' selects the flat-file format (default: from config)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=str(CONFIG_PATH),
    help="Path to configuration file",
)
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False),
    default=str(LOG_DIR),
    help="Path to log directory",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Show detailed errors and tracebacks",
)
@click.pass_context
def cli(ctx, datafile, config_path, log_dir, verbose):
    """Genee habit diary"""
    # Suppress Alembic INFO logging by default
    logging.getLogger("alembic").setLevel(logging.WARNING)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["logger"] = setup_logger(Path(log_dir), "genee")
    ctx.obj["config_path"] = Path(config_path)

    try:
        config = load_config(ctx.obj["config_path"])
    except ConfigError as e:
        handle_cli_error(ctx, e, "load_config")

    ctx.obj["config"] = config
    ctx.obj["datafile"] = Path(datafile) if datafile else config.datafile_path


def get_config(ctx) -> Config:
    return ctx.obj["config"]


def get_diary(ctx) -> DiaryDataConnection:
    """Get or open the diary from context, closing it when the CLI exits."""
    if "diary" not in ctx.obj:
        diary = open_datafile(ctx.obj["datafile"], ctx.obj["logger"])
        ctx.obj["diary"] = diary
        ctx.find_root().call_on_close(diary.close)
    return ctx.obj["diary"]


# Import and register command modules
# These imports must come after CLI group definition
from .setup import generate, init, restore  # noqa: E402
from .diary import diary_range, fill, list_rows, missing, set_row  # noqa: E402
from .analytics import graph, top  # noqa: E402
from .categories import add_category, hide_category  # noqa: E402
from .config import config  # noqa: E402

# Register top-level commands
cli.add_command(init)
cli.add_command(generate)
cli.add_command(restore)
cli.add_command(set_row)
cli.add_command(fill)
cli.add_command(missing)
cli.add_command(list_rows)
cli.add_command(diary_range)
cli.add_command(graph)
cli.add_command(top)
cli.add_command(add_category)
cli.add_command(hide_category)

# Register command groups
cli.add_command(config)


if __name__ == "__main__":
    cli(obj={})
