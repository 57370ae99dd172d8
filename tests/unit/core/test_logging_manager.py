"""
Tests for logging_manager module.

Tests GeneeLogger file output, the safe_logger function and NullLogger
class, and the CLI error handler.
"""
import click
import pytest
from unittest.mock import MagicMock

from genee.core.exceptions import EmptyDiaryError
from genee.core.logging_manager import (
    GeneeLogger,
    NullLogger,
    handle_cli_error,
    safe_logger,
)


class TestGeneeLogger:
    """Tests for GeneeLogger."""

    def test_creates_component_and_error_logs(self, tmp_path):
        log_dir = tmp_path / "logs"
        logger = GeneeLogger(log_dir, "sqlite")

        logger.log_operation("backup_created", {"size": 10})
        logger.log_error(ValueError("boom"), {"operation": "open"})

        component_log = (log_dir / "sqlite.log").read_text(encoding="utf-8")
        error_log = (log_dir / "errors.log").read_text(encoding="utf-8")
        assert 'OPERATION - backup_created: {"size": 10}' in component_log
        assert "ERROR - ValueError: boom" in error_log
        assert "Context: operation=open" in error_log

    def test_debug_messages_reach_file(self, tmp_path):
        logger = GeneeLogger(tmp_path, "cli")
        logger.log_debug("session_start")
        assert "DEBUG - session_start" in (tmp_path / "cli.log").read_text(encoding="utf-8")

    def test_log_cli_error_format(self, tmp_path):
        logger = GeneeLogger(tmp_path, "cli")
        message = logger.log_cli_error(EmptyDiaryError("Diary is empty"))
        assert message == "Error: EmptyDiaryError: Diary is empty"


class TestNullLogger:
    """Tests for NullLogger class."""

    def test_null_logger_methods_are_no_ops(self):
        """Every logging method accepts its arguments and does nothing."""
        logger = NullLogger()
        logger.log_operation("test_op", {"key": "value"})
        logger.log_error(ValueError("test error"), {"context": "test"})
        logger.log_debug("debug message", {"key": "value"})
        logger.log_info("info message")
        logger.log_warning("warning message", {"key": "value"})

    def test_null_logger_log_cli_error_returns_formatted(self):
        """NullLogger.log_cli_error should return formatted error string."""
        result = NullLogger().log_cli_error(ValueError("test error"), {"context": "test"})
        assert result == "Error: ValueError: test error"


class TestSafeLogger:
    """Tests for safe_logger function."""

    def test_safe_logger_returns_logger_when_provided(self):
        mock_logger = MagicMock(spec=GeneeLogger)
        assert safe_logger(mock_logger) is mock_logger

    def test_safe_logger_returns_null_logger_when_none(self):
        assert isinstance(safe_logger(None), NullLogger)

    def test_safe_logger_null_logger_is_singleton(self):
        assert safe_logger(None) is safe_logger(None)

    def test_works_with_log_details(self):
        """safe_logger should forward details dicts unchanged."""
        mock_logger = MagicMock(spec=GeneeLogger)
        details = {"path": "diary.db", "rows": 3}

        safe_logger(mock_logger).log_operation("csv_datafile_saved", details)

        mock_logger.log_operation.assert_called_once_with("csv_datafile_saved", details)


class TestHandleCliError:
    """Tests for handle_cli_error."""

    def test_logs_and_exits(self, capsys):
        mock_logger = MagicMock(spec=GeneeLogger)
        mock_logger.log_cli_error.return_value = "Error: ValueError: nope"
        ctx = click.Context(click.Command("test"), obj={"logger": mock_logger})
        error = ValueError("nope")

        with pytest.raises(SystemExit) as exc_info:
            handle_cli_error(ctx, error, "set", additional_context={"date": "2023-02-04"})

        assert exc_info.value.code == 1
        mock_logger.log_cli_error.assert_called_once_with(
            error, {"operation": "set", "date": "2023-02-04"}, show_traceback=False
        )
        assert "Error: ValueError: nope" in capsys.readouterr().err

    def test_without_logger(self, capsys):
        ctx = click.Context(click.Command("test"), obj={})

        with pytest.raises(SystemExit):
            handle_cli_error(ctx, EmptyDiaryError("Diary is empty"), "range")

        assert "EmptyDiaryError: Diary is empty" in capsys.readouterr().err
