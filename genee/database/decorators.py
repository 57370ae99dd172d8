#!/usr/bin/env python3
"""
decorators.py
--------------------
Shared decorators for database operations.

log_database_operation records each diary call with the database path
and, for batch calls, the number of items handled. handle_db_errors
turns SQLAlchemy failures into DatabaseError.
"""
from datetime import datetime
from functools import wraps
from typing import Any, Callable, Dict

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from genee.core.exceptions import DatabaseError


def _call_context(operation_name: str, owner: Any, args: tuple) -> Dict[str, Any]:
    context: Dict[str, Any] = {"operation": operation_name}
    db_path = getattr(owner, "db_path", None)
    if db_path is not None:
        context["db_path"] = str(db_path)
    if args and isinstance(args[0], (list, tuple)):
        context["items"] = len(args[0])
    return context


def log_database_operation(operation_name: str):
    """
    Decorator to log diary operations with timing and context.

    The context names the database file and, when the first argument
    is a list or tuple (a batch of dates, ranges or updates), its size.

    Args:
        operation_name: Name of the operation being logged

    Returns:
        Decorator function
    """

    def decorator(function: Callable) -> Callable:
        @wraps(function)
        def wrapper(self, *args, **kwargs):
            logger = getattr(self, "logger", None)
            context = _call_context(operation_name, self, args)
            start_time = datetime.now()

            if logger:
                logger.log_debug(f"Starting {operation_name}", dict(context))

            try:
                result = function(self, *args, **kwargs)
            except Exception as e:
                if logger:
                    context["duration_seconds"] = (
                        datetime.now() - start_time
                    ).total_seconds()
                    logger.log_error(e, context)
                raise

            if logger:
                context["duration_seconds"] = (datetime.now() - start_time).total_seconds()
                if isinstance(result, list):
                    context["results"] = len(result)
                logger.log_operation(f"{operation_name}_completed", context)
            return result

        return wrapper

    return decorator


def handle_db_errors(function: Callable) -> Callable:
    """
    Decorator translating SQLAlchemy errors into DatabaseError.

    Args:
        function: Function to wrap

    Returns:
        Wrapped function with error handling
    """

    @wraps(function)
    def wrapper(*args, **kwargs):
        try:
            return function(*args, **kwargs)
        except IntegrityError as e:
            raise DatabaseError(f"Data integrity violation: {e}") from e
        except SQLAlchemyError as e:
            raise DatabaseError(f"Database operation failed: {e}") from e

    return wrapper
