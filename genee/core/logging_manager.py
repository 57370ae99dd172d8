#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Centralized logging system for genee operations.

Provides structured logging with rotation for diary storage operations
and the command line interface. Every component writes its own rotating
log file; errors additionally go to a shared errors.log for quick
scanning.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click


class GeneeLogger:
    """
    Centralized logging system for diary operations.

    Attributes:
        log_dir: Directory for log files
        component_name: Name of the component using this logger
        main_logger: Main logger for all operations
        error_logger: Dedicated logger for errors only
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "genee",
        max_bytes: int = 1024 * 1024,
        backup_count: int = 3,
    ) -> None:
        """
        Initialize logging system.

        Args:
            log_dir: Directory for log files
            component_name: Name for the component logger (e.g. 'sqlite', 'cli')
            max_bytes: Maximum log file size before rotation (default: 1MB)
            backup_count: Number of rotated files to keep (default: 3)
        """
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self._setup_loggers()

    def _setup_loggers(self) -> None:
        """Initialize file and console handlers."""
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = logging.getLogger(f"{self.component_name}.operations")
        self.main_logger.setLevel(logging.DEBUG)
        # Reset only this logger's handlers (not global logger state)
        self.main_logger.handlers = []

        self.error_logger = logging.getLogger(f"{self.component_name}.errors")
        self.error_logger.setLevel(logging.ERROR)
        self.error_logger.handlers = []

        self._create_file_handler(
            self.main_logger,
            self.log_dir / f"{self.component_name}.log",
            logging.DEBUG,
        )
        self._create_file_handler(
            self.error_logger,
            self.log_dir / "errors.log",
            logging.ERROR,
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        self.main_logger.addHandler(console_handler)

    def _create_file_handler(
        self, logger: logging.Logger, file_path: Path, level: int
    ) -> None:
        """
        Create a rotating file handler for a logger.

        Args:
            logger: Logger instance to add handler to
            file_path: Path for log file
            level: Logging level for the handler
        """
        handler = RotatingFileHandler(
            file_path,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)

    def log_operation(
        self, operation: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log a storage operation to the component log.

        Args:
            operation: Name of the operation
            details: Optional operation details dictionary
        """
        details = details or {}
        self.main_logger.info(
            f"OPERATION - {operation}: {json.dumps(details, default=str)}"
        )

    def log_error(
        self, error: Exception, context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log an error with context and traceback.

        Args:
            error: Exception that occurred
            context: Optional context information dictionary
        """
        context = context or {}
        self.error_logger.error(f"ERROR - {type(error).__name__}: {error}")

        if context:
            context_str = ", ".join(f"{k}={v}" for k, v in context.items())
            self.error_logger.error(f"Context: {context_str}")

        self.error_logger.error(f"Traceback:\n{traceback.format_exc()}")

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Log debug information."""
        if details:
            self.main_logger.debug(
                f"DEBUG - {message}: {json.dumps(details, default=str)}"
            )
        else:
            self.main_logger.debug(f"DEBUG - {message}")

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Log general information."""
        if details:
            self.main_logger.info(
                f"INFO - {message}: {json.dumps(details, default=str)}"
            )
        else:
            self.main_logger.info(f"INFO - {message}")

    def log_warning(
        self, message: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log a warning."""
        if details:
            self.main_logger.warning(
                f"WARNING - {message}: {json.dumps(details, default=str)}"
            )
        else:
            self.main_logger.warning(f"WARNING - {message}")

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Format error for CLI display and log full details to file.

        Args:
            error: Exception to log
            context: Optional context information about where error occurred
            show_traceback: If True, include full traceback in CLI output

        Returns:
            Formatted error message suitable for CLI display

        Examples:
            >>> logger.log_cli_error(EmptyDiaryError("Diary is empty"))
            'Error: EmptyDiaryError: Diary is empty'
        """
        self.log_error(error, context or {"source": "cli"})
        return _format_cli_error(error, show_traceback)


def _format_cli_error(error: Exception, show_traceback: bool = False) -> str:
    message = f"Error: {type(error).__name__}: {error}"
    if show_traceback:
        return f"{message}\n\n{traceback.format_exc()}"
    return message


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Standardized error handling for all CLI commands.

    Logs complete error details to the log files, prints a one-line
    message to stderr and exits.

    Args:
        ctx: Click context object containing logger and verbose flag
        error: Exception that occurred
        operation: Name of the operation that failed (e.g. 'add_category')
        additional_context: Optional extra context (date, category name, etc.)
        exit_code: Exit code for sys.exit() (default: 1)

    Note:
        This function never returns - it always calls sys.exit()
    """
    obj = ctx.obj or {}
    logger: Optional[GeneeLogger] = obj.get("logger")
    verbose: bool = obj.get("verbose", False)

    context = {"operation": operation}
    if additional_context:
        context.update(additional_context)

    error_msg = safe_logger(logger).log_cli_error(error, context, show_traceback=verbose)

    click.echo(error_msg, err=True)
    sys.exit(exit_code)


class NullLogger:
    """
    Null Object logger implementing the GeneeLogger interface as no-ops.

    Lets storage code call logger methods without `if logger:` checks.
    """

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return _format_cli_error(error, show_traceback)


_null_logger = NullLogger()


def safe_logger(logger: Optional[GeneeLogger]) -> GeneeLogger:
    """
    Return the provided logger or a null logger if None.

    Args:
        logger: GeneeLogger instance or None

    Returns:
        The provided logger or a NullLogger instance
    """
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
