"""
Tests for BackupManager.

The backup is a sibling copy with ".bak" appended to the full file name.
"""
import pytest
from pathlib import Path

from genee.core.backup_manager import BackupManager, sibling_path
from genee.core.exceptions import BackupError


@pytest.fixture
def database(tmp_dir):
    path = tmp_dir / "diary.db"
    path.write_bytes(b"version-1")
    return path


class TestSiblingPath:
    """Tests for sibling_path()."""

    def test_keeps_extension(self):
        assert sibling_path(Path("dir/diary.db"), ".bak") == Path("dir/diary.db.bak")

    def test_without_extension(self):
        assert sibling_path(Path("diary"), ".bak") == Path("diary.bak")


class TestCreateBackup:
    """Tests for BackupManager.create_backup()."""

    def test_copies_whole_file(self, database):
        backup_path = BackupManager(database).create_backup()

        assert backup_path == database.with_name("diary.db.bak")
        assert backup_path.read_bytes() == b"version-1"

    def test_overwrites_previous_backup(self, database):
        manager = BackupManager(database)
        manager.create_backup()
        database.write_bytes(b"version-2")

        manager.create_backup()

        assert manager.backup_path.read_bytes() == b"version-2"

    def test_missing_database(self, tmp_dir):
        with pytest.raises(BackupError, match="not found"):
            BackupManager(tmp_dir / "missing.db").create_backup()

    def test_copy_failure(self, database, monkeypatch, mock_logger):
        manager = BackupManager(database, logger=mock_logger)

        def fail(source, dest):
            raise OSError("disk full")

        monkeypatch.setattr(manager, "_copy_file", fail)

        with pytest.raises(BackupError, match="disk full"):
            manager.create_backup()
        mock_logger.log_error.assert_called_once()

    def test_logs_operation(self, database, mock_logger):
        BackupManager(database, logger=mock_logger).create_backup()
        assert mock_logger.log_operation.call_args[0][0] == "backup_created"


class TestRestoreBackup:
    """Tests for BackupManager.restore_backup()."""

    def test_restores_and_keeps_current(self, database):
        manager = BackupManager(database)
        manager.create_backup()
        database.write_bytes(b"broken")

        restored = manager.restore_backup()

        assert restored == database
        assert database.read_bytes() == b"version-1"
        assert database.with_name("diary.db.pre_restore").read_bytes() == b"broken"

    def test_restore_when_database_missing(self, database):
        manager = BackupManager(database)
        manager.create_backup()
        database.unlink()

        manager.restore_backup()

        assert database.read_bytes() == b"version-1"
        assert not database.with_name("diary.db.pre_restore").exists()

    def test_missing_backup(self, database):
        with pytest.raises(BackupError, match="Backup file not found"):
            BackupManager(database).restore_backup()
