#!/usr/bin/env python3
"""
Genee Database Package
-----------------------
Relational (SQLite) diary backend.

This package provides:
- ORM models of categories, tracked dates and their links
- Schema versioning and migrations
- The SqliteDiary connection
- Aggregate queries over visible categories
"""

from .manager import SqliteDiary, create_new_sqlite
from .migrations import CURRENT_VERSION, get_schema_version, migrate
from .query_analytics import QueryAnalytics
from .decorators import handle_db_errors, log_database_operation

__all__ = [
    "SqliteDiary",
    "create_new_sqlite",
    "CURRENT_VERSION",
    "get_schema_version",
    "migrate",
    "QueryAnalytics",
    "handle_db_errors",
    "log_database_operation",
]
