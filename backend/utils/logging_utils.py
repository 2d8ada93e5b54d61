"""
Logging setup and structured logging utilities.

``configure_logging`` installs the console (and optional rotating file)
handlers once per process. ``StructuredLogger`` and ``log_operation`` attach
request-scoped context to log records.
"""

import logging
import sys
from contextvars import ContextVar
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Adds a stdout handler and, when ``log_file`` is given, a rotating file
    handler (10MB per file, 5 backups). Does nothing if the root logger
    already has handlers, so repeated app construction in tests is safe.

    Args:
        level: Logging level name, case insensitive
        log_file: Optional path of the log file
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root_logger.setLevel(numeric_level)
    log_formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(log_formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger(__name__).info(f"Logging initialized at {logging.getLevelName(numeric_level)}")


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("Exercise stored", extra={
            "user_id": user.id,
            "operation": "add_exercise",
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
        self.logger.debug(message, extra=self._add_context(extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.info(message, extra=self._add_context(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.warning(message, extra=self._add_context(extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        self.logger.error(message, extra=self._add_context(extra), exc_info=exc_info)


def set_logging_context(**kwargs):
    """
    Set logging context for the current request.

    The context is included in every StructuredLogger record emitted
    while handling the request.

    Example:
        set_logging_context(request_id="abc-123", path="/api/exercise/add")
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def clear_logging_context():
    """Clear the logging context."""
    _logging_context.set({})


def log_operation(operation_name: str):
    """
    Decorator to log an async operation with structured context.

    Failed ``Result`` values are logged at WARNING; raised exceptions at
    ERROR with traceback, then re-raised.

    Args:
        operation_name: Name of the operation

    Example:
        @log_operation("add_exercise")
        async def add_exercise(self, payload):
            ...
    """
    def decorator(func):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)
            context = {"operation": operation_name}

            logger.debug(f"Starting {operation_name}", extra=context)

            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                context["error"] = str(e)
                context["error_type"] = type(e).__name__
                logger.error(f"Failed {operation_name}", extra=context, exc_info=True)
                raise

            error = getattr(result, "error", None)
            if error is not None:
                context["error"] = error.message
                context["error_type"] = type(error).__name__
                logger.warning(f"Rejected {operation_name}: {error.message}", extra=context)
            else:
                logger.info(f"Completed {operation_name}", extra=context)
            return result

        return async_wrapper

    return decorator
