#!/usr/bin/env python3
"""
migrations.py
--------------------
Schema versioning of relational diaries.

The schema version lives in the Info table under the "version" key. A
database without that table or key, or with an unparsable value, is at
version 0. Migration steps are keyed by the version they upgrade from
and are applied in order, each one stamping the version it produces.
The caller runs the whole chain inside a single transaction, so a failed
step leaves the file exactly as it was.

Steps use alembic's operations API on the open connection.
"""
from __future__ import annotations

from typing import Callable, Dict, Optional

from alembic.runtime.migration import MigrationContext
from alembic.operations import Operations
from sqlalchemy import Column, Connection, Integer, Text, delete, inspect, insert, select, text

from genee.core.logging_manager import GeneeLogger, safe_logger

from .models import info

CURRENT_VERSION = 1
VERSION_KEY = "version"

MigrationStep = Callable[[Operations], None]


def _migrate_v0_to_v1(op: Operations) -> None:
    """Introduce the Info table and the hidden flag of categories."""
    op.execute(text('DROP TABLE IF EXISTS "Info"'))
    op.create_table(
        "Info",
        Column("name", Text, unique=True, nullable=False),
        Column("value", Text),
    )
    columns = {c["name"] for c in inspect(op.get_bind()).get_columns("Category")}
    if "hidden" not in columns:
        op.add_column(
            "Category",
            Column("hidden", Integer, nullable=False, server_default=text("0")),
        )


MIGRATIONS: Dict[int, MigrationStep] = {
    0: _migrate_v0_to_v1,
}


def get_schema_version(connection: Connection) -> int:
    """Read the stored schema version, 0 when absent or unparsable."""
    inspector = inspect(connection)
    if not inspector.has_table(info.name):
        return 0
    columns = {column["name"] for column in inspector.get_columns(info.name)}
    if not {"name", "value"} <= columns:
        return 0
    value: Optional[str] = connection.execute(
        select(info.c.value).where(info.c.name == VERSION_KEY)
    ).scalar()
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0


def set_schema_version(connection: Connection, version: int) -> None:
    connection.execute(delete(info).where(info.c.name == VERSION_KEY))
    connection.execute(insert(info).values(name=VERSION_KEY, value=str(version)))


def migrate(connection: Connection, logger: Optional[GeneeLogger] = None) -> int:
    """
    Bring the schema up to CURRENT_VERSION.

    Args:
        connection: Connection with an open transaction
        logger: Optional logger for migration steps

    Returns:
        The schema version after migrating    """
    version = get_schema_version(connection)
    if version >= CURRENT_VERSION:
        return version

    op = Operations(MigrationContext.configure(connection))
    while version < CURRENT_VERSION:
        step = MIGRATIONS[version]
        safe_logger(logger).log_info(
            "Migrating schema", {"from_version": version, "to_version": version + 1}
        )
        step(op)
        version += 1
        set_schema_version(connection, version)
    return version
