#!/usr/bin/env python3
"""
backup_manager.py
--------------------
Backup and recovery of relational diary files.

Every time a relational diary is opened, the whole database file is copied
to a sibling file with ".bak" appended to its name (diary.db -> diary.db.bak)
before any version check or write can happen. The backup is overwritten on
each open, so it always holds the state from just before the most recent
session.

Usage:
    from genee.core.backup_manager import BackupManager

    manager = BackupManager(Path("diary.db"))
    manager.create_backup()       # diary.db -> diary.db.bak
    manager.restore_backup()      # diary.db.bak -> diary.db
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import shutil
from pathlib import Path
from typing import Optional

# --- Local imports ---
from .exceptions import BackupError
from .logging_manager import GeneeLogger, safe_logger

BACKUP_SUFFIX = ".bak"
PRE_RESTORE_SUFFIX = ".pre_restore"


def sibling_path(path: Path, suffix: str) -> Path:
    """
    Append a suffix to the full file name, keeping the existing extension.

    Examples:
        >>> sibling_path(Path("diary.db"), ".bak")
        PosixPath('diary.db.bak')
    """
    return path.with_name(path.name + suffix)


class BackupManager:
    """
    Handles the sibling backup of a relational diary file.

    Attributes:
        db_path: Path to the database file
        backup_path: Path of the sibling backup file
        logger: Optional logger for backup operations
    """

    def __init__(
        self,
        db_path: Path,
        logger: Optional[GeneeLogger] = None,
    ) -> None:
        self.db_path = Path(db_path)
        self.backup_path = sibling_path(self.db_path, BACKUP_SUFFIX)
        self.logger = logger

    def _copy_file(self, source_path: Path, dest_path: Path) -> None:
        """
        Copy a whole file, blocking until the copy is complete.

        Raises:
            OSError: If the copy fails
        """
        shutil.copyfile(source_path, dest_path)

    def create_backup(self) -> Path:
        """
        Copy the database file to its sibling backup path.

        Returns:
            Path to the created backup file

        Raises:
            BackupError: If the database is missing or the copy fails
        """
        if not self.db_path.exists():
            raise BackupError(f"Database file not found: {self.db_path}")

        try:
            self._copy_file(self.db_path, self.backup_path)
        except OSError as e:
            safe_logger(self.logger).log_error(
                e,
                {
                    "operation": "create_backup",
                    "target_path": str(self.backup_path),
                },
            )
            raise BackupError(f"Failed to create backup: {e}") from e

        safe_logger(self.logger).log_operation(
            "backup_created",
            {
                "backup_path": str(self.backup_path),
                "backup_size": self.backup_path.stat().st_size,
            },
        )
        return self.backup_path

    def restore_backup(self) -> Path:
        """
        Restore the database from its sibling backup.

        The current database file, if any, is first saved next to it with
        a ".pre_restore" suffix.

        Returns:
            Path of the restored database

        Raises:
            BackupError: If the backup is missing or the restore fails
        """
        if not self.backup_path.exists():
            raise BackupError(f"Backup file not found: {self.backup_path}")

        pre_restore_path = sibling_path(self.db_path, PRE_RESTORE_SUFFIX)
        try:
            if self.db_path.exists():
                self._copy_file(self.db_path, pre_restore_path)
            self._copy_file(self.backup_path, self.db_path)
        except OSError as e:
            safe_logger(self.logger).log_error(
                e, {"operation": "restore_backup", "backup_path": str(self.backup_path)}
            )
            raise BackupError(f"Failed to restore backup: {e}") from e

        safe_logger(self.logger).log_operation(
            "restore_backup",
            {
                "restored_from": str(self.backup_path),
                "pre_restore_backup": str(pre_restore_path),
            },
        )
        return self.db_path
