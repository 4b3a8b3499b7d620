"""
Structured Logging Utilities

Provides logging setup for the service and utilities for adding structured
context to log messages, improving observability and debugging.
"""

import logging
import sys
from contextvars import ContextVar
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE_NAME = "employees.log"

# Identifiers picked up from keyword arguments by log_operation
CONTEXT_ID_KEYS = ("employee_id", "manager_id")

# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})


def configure_logging(log_dir: Path, level: str = "INFO") -> Path:
    """
    Configure the root logger with a rotating file handler and a console handler.

    Calling it again is a no-op once the handlers are installed.

    Args:
        log_dir: Directory for the log file (created if missing)
        level: Log level name (e.g. "INFO", "DEBUG")

    Returns:
        Path of the log file
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if any(getattr(h, "_employees_handler", False) for h in root_logger.handlers):
        return log_file

    log_formatter = logging.Formatter(LOG_FORMAT)

    # File handler with rotation (10MB per file, keep 5 backups)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setFormatter(log_formatter)
    file_handler.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(level)

    for handler in (file_handler, console_handler):
        handler._employees_handler = True
        root_logger.addHandler(handler)

    return log_file


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("Employee inserted", extra={
            "employee_id": employee.id,
            "operation": "insert",
        })
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        context = _logging_context.get().copy()
        if extra:
            context.update(extra)
        return context

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log debug message with structured context."""
        self.logger.debug(message, extra=self._add_context(extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log info message with structured context."""
        self.logger.info(message, extra=self._add_context(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log warning message with structured context."""
        self.logger.warning(message, extra=self._add_context(extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        """Log error message with structured context."""
        self.logger.error(message, extra=self._add_context(extra), exc_info=exc_info)


def set_logging_context(**kwargs):
    """
    Set logging context for the current request/operation.

    This context will be automatically included in all log messages
    within the current context (typically a request).

    Example:
        set_logging_context(request_id="abc-123", operation="insert")
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def clear_logging_context():
    """Clear the logging context."""
    _logging_context.set({})


def _operation_context(operation_name: str, args: tuple, kwargs: dict) -> Dict[str, Any]:
    context = {"operation": operation_name}
    for key in CONTEXT_ID_KEYS:
        if key in kwargs:
            context[key] = kwargs[key]
    # Repository methods take the entity or its id positionally, after self
    for arg in args[1:]:
        entity_id = arg if isinstance(arg, int) else getattr(arg, "id", None)
        if isinstance(entity_id, int) and not isinstance(entity_id, bool):
            context.setdefault("employee_id", entity_id)
            break
    return context


def log_operation(operation_name: str):
    """
    Decorator to automatically log operation start/end with structured context.

    Failures are logged with the exception type and re-raised unchanged.

    Args:
        operation_name: Name of the operation

    Example:
        @log_operation("insert_employee")
        async def insert(self, employee):
            ...
    """
    def decorator(func):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)
            context = _operation_context(operation_name, args, kwargs)

            logger.debug(f"Starting {operation_name}", extra=context)

            try:
                result = await func(*args, **kwargs)
                logger.info(f"Completed {operation_name}", extra=context)
                return result
            except Exception as e:
                context["error"] = str(e)
                context["error_type"] = type(e).__name__
                logger.error(f"Failed {operation_name}", extra=context, exc_info=True)
                raise

        return async_wrapper

    return decorator
