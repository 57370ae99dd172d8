"""Tests for database decorators."""
import pytest
from unittest.mock import MagicMock

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from genee.core.exceptions import DatabaseError, ValidationError
from genee.core.logging_manager import GeneeLogger
from genee.database.decorators import handle_db_errors, log_database_operation


class Operations:
    """Minimal owner of a logger, like the diary classes."""

    def __init__(self, logger=None, db_path=None):
        self.logger = logger
        self.db_path = db_path

    @handle_db_errors
    @log_database_operation("run")
    def run(self, error=None):
        if error is not None:
            raise error
        return 42

    @log_database_operation("update_rows_batch")
    def update_rows_batch(self, items):
        return [True for _ in items]


class TestLogDatabaseOperation:
    """Tests for log_database_operation."""

    def test_successful_operation(self):
        """Completion is logged with duration on success."""
        mock_logger = MagicMock(spec=GeneeLogger)

        assert Operations(mock_logger).run() == 42

        mock_logger.log_operation.assert_called_once()
        call_args = mock_logger.log_operation.call_args
        assert call_args[0][0] == "run_completed"
        assert isinstance(call_args[0][1]["duration_seconds"], float)

    def test_start_is_logged(self):
        mock_logger = MagicMock(spec=GeneeLogger)

        Operations(mock_logger).run()

        assert "Starting run" in mock_logger.log_debug.call_args[0][0]

    def test_without_logger(self):
        """Operations work when no logger is configured."""
        assert Operations().run() == 42

    def test_error_is_logged_and_reraised(self):
        mock_logger = MagicMock(spec=GeneeLogger)

        with pytest.raises(ValidationError):
            Operations(mock_logger).run(ValidationError("bad id"))

        mock_logger.log_error.assert_called_once()
        mock_logger.log_operation.assert_not_called()

    def test_context_names_diary_and_batch_size(self, tmp_path):
        mock_logger = MagicMock(spec=GeneeLogger)
        db_path = tmp_path / "diary.db"

        Operations(mock_logger, db_path).update_rows_batch([1, 2, 3])

        started = mock_logger.log_debug.call_args[0][1]
        assert started == {
            "operation": "update_rows_batch",
            "db_path": str(db_path),
            "items": 3,
        }
        completed = mock_logger.log_operation.call_args[0][1]
        assert completed["db_path"] == str(db_path)
        assert completed["items"] == 3
        assert completed["results"] == 3

    def test_error_context_names_diary(self, tmp_path):
        mock_logger = MagicMock(spec=GeneeLogger)

        with pytest.raises(ValidationError):
            Operations(mock_logger, tmp_path).run(ValidationError("bad id"))

        assert mock_logger.log_error.call_args[0][1]["db_path"] == str(tmp_path)


class TestHandleDbErrors:
    """Tests for handle_db_errors."""

    def test_integrity_error_raises_database_error(self):
        with pytest.raises(DatabaseError) as exc_info:
            Operations().run(IntegrityError("statement", {}, Exception("duplicate")))

        assert "Data integrity violation" in str(exc_info.value)

    def test_sqlalchemy_error_raises_database_error(self):
        with pytest.raises(DatabaseError) as exc_info:
            Operations().run(SQLAlchemyError("connection failed"))

        assert "Database operation failed" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, SQLAlchemyError)

    def test_other_exceptions_propagate(self):
        with pytest.raises(ValueError):
            Operations().run(ValueError("invalid value"))
