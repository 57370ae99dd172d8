"""
Setup Commands
---------------

Creation and recovery of diary files.

Commands:
    - init: Create a new diary with its categories
    - generate: Create a diary filled with random data
    - restore: Restore a SQLite diary from its .bak copy
"""
from pathlib import Path

import click

from genee.core.backup_manager import BackupManager
from genee.core.exceptions import UnsupportedOperationError
from genee.core.logging_manager import handle_cli_error
from genee.datafile import create_new_datafile, is_csv_path
from genee.datafile.generator import generate_diary
from . import DIARY_ERRORS


@click.command()
@click.argument("categories", nargs=-1, required=True)
@click.pass_context
def init(ctx, categories):
    """Create a new diary tracking CATEGORIES."""
    datafile: Path = ctx.obj["datafile"]
    try:
        datafile.parent.mkdir(parents=True, exist_ok=True)
        create_new_datafile(datafile, categories, ctx.obj["logger"])
        click.echo(f"✅ Created {datafile} with {len(categories)} categories")

    except DIARY_ERRORS as e:
        handle_cli_error(
            ctx, e, "init", additional_context={"datafile": str(datafile)}
        )


@click.command()
@click.argument("file", type=click.Path(dir_okay=False))
@click.option("--rows", type=click.IntRange(min=1), default=365, help="Number of days")
@click.option("--cols", type=click.IntRange(min=1), default=5, help="Number of categories")
@click.option("--seed", type=int, default=None, help="Random seed for reproducible data")
@click.pass_context
def generate(ctx, file, rows, cols, seed):
    """Create FILE filled with random habit data."""
    try:
        generate_diary(Path(file), rows, cols, seed=seed, logger=ctx.obj["logger"])
        click.echo(f"✅ Generated {rows} days x {cols} categories in {file}")

    except DIARY_ERRORS as e:
        handle_cli_error(ctx, e, "generate", additional_context={"file": file})


@click.command()
@click.confirmation_option(prompt="⚠️  This will replace the diary with its backup. Continue?")
@click.pass_context
def restore(ctx):
    """Restore the diary from the backup taken when it was last opened."""
    datafile: Path = ctx.obj["datafile"]
    try:
        if is_csv_path(datafile):
            raise UnsupportedOperationError("CSV diaries have no automatic backup")

        manager = BackupManager(datafile, logger=ctx.obj["logger"])
        manager.restore_backup()
        click.echo(f"✅ Restored {datafile} from {manager.backup_path}")

    except DIARY_ERRORS as e:
        handle_cli_error(ctx, e, "restore")
