#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the genee habit diary.

This module defines a hierarchy of exceptions used throughout the project
to handle specific error conditions in the two storage backends and their
surrounding tooling.

Exception Hierarchy:
    Exception (built-in)
    ├── DatabaseError - Base for all relational backend errors
    │   ├── BackupError - Backup creation/restoration failures
    │   └── MigrationError - Schema migration failures
    ├── DataFileError - Base for flat-file (CSV) backend errors
    │   └── DataFileParseError - Malformed CSV diary content
    ├── ValidationError - Invalid input passed to a diary operation
    ├── EmptyDiaryError - Query that needs at least one tracked date
    ├── UnsupportedOperationError - Operation the backend cannot perform
    └── ConfigError - Unreadable or malformed configuration file

Category outcomes such as "already present" or "already hidden" are not
errors. They are returned as enum members by the diary operations.

Usage:
    from genee.core.exceptions import DatabaseError, ValidationError

    try:
        diary.update_row(day, [1, 3])
    except ValidationError as e:
        logger.log_error(e)
"""


class DatabaseError(Exception):
    """
    Base exception for relational backend errors.

    Raised when database operations fail due to connection issues,
    query errors, integrity violations, or other database problems.

    Examples:
        >>> raise DatabaseError("Database file not found: diary.db")
        >>> raise DatabaseError("Data integrity violation: FOREIGN KEY constraint failed")
    """

    pass


class BackupError(DatabaseError):
    """
    Exception for backup creation and restoration failures.

    Raised when the mandatory backup taken before opening a database
    cannot be written, or when restoring from it fails.

    Examples:
        >>> raise BackupError("Failed to create backup: disk full")
        >>> raise BackupError("Backup file not found: diary.db.bak")
    """

    pass


class MigrationError(DatabaseError):
    """
    Exception for schema migration failures.

    Examples:
        >>> raise MigrationError("Migration from version 0 failed: table is locked")
    """

    pass


class DataFileError(Exception):
    """
    Base exception for flat-file backend errors.

    Raised when the CSV diary cannot be read, written or created.

    Examples:
        >>> raise DataFileError("Cannot open data file at 'habits.csv'")
        >>> raise DataFileError("A file already exists at 'habits.csv'")
    """

    pass


class DataFileParseError(DataFileError):
    """
    Exception for malformed CSV diary content.

    The file is considered corrupt and requires manual repair:
    - Empty header
    - Unparsable date
    - Row width that disagrees with the header
    - Duplicated date

    Examples:
        >>> raise DataFileParseError("Cannot parse date on line 3: '2023-13-01'")
        >>> raise DataFileParseError("Data file contains duplicated date at line 5")
    """

    pass


class ValidationError(Exception):
    """
    Exception for invalid input passed to diary operations.

    Examples:
        >>> raise ValidationError("Invalid date format: expected YYYY-MM-DD")
        >>> raise ValidationError("Unknown category ids: [7]")
    """

    pass


class EmptyDiaryError(Exception):
    """
    Exception for queries that require at least one tracked date.

    Examples:
        >>> raise EmptyDiaryError("Diary is empty, no date range available")
    """

    pass


class UnsupportedOperationError(Exception):
    """
    Exception for operations a backend does not support.

    The flat-file header is fixed at creation time, so adding or hiding
    categories there is rejected with this error.
    """

    pass


class ConfigError(Exception):
    """
    Exception for configuration loading and saving failures.

    Examples:
        >>> raise ConfigError("Invalid value for 'graph_days': expected a positive integer")
    """

    pass
