# retrolambda/core/utils/logger.py

"""
Logging configuration and utilities for Retrolambda.

All modules log through one "retrolambda" logger so that the entry point
can configure level and destinations in a single place.

Key Features:
- Global logger instance with lazy initialization
- Module-tagged message helpers
- File operation logging
- Resolved configuration summary
"""

import logging
import sys
from typing import Any, TextIO

# Global logger instance for singleton pattern
_logger: logging.Logger | None = None

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(message)s"
LOGGER_NAME = "retrolambda"


def setup_logging(
    level: str = DEFAULT_LOG_LEVEL,
    log_file: str | None = None,
    format_string: str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Set up logging configuration for Retrolambda.

    Replaces any handlers installed by a previous call, so the entry point
    may call it again after the quiet setting has been resolved.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (optional). If provided, logs will be
                 written to both console and file.
        format_string: Custom log format string (optional)
        stream: Console stream (optional). Defaults to stdout.

    Returns:
        Configured logger instance
    """
    global _logger

    logger = logging.getLogger(LOGGER_NAME)
    logger.disabled = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(getattr(logging, level.upper()))
    logger.propagate = False

    formatter = logging.Formatter(format_string or DEFAULT_LOG_FORMAT)

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(getattr(logging, level.upper()))
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(getattr(logging, level.upper()))
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """
    Get the global logger instance.

    Before setup_logging() has been called this returns the bare
    "retrolambda" logger, leaving handler configuration to the application.
    """
    if _logger is None:
        return logging.getLogger(LOGGER_NAME)
    return _logger


def _tag(module: str, message: str, context: str = "") -> str:
    message = f"[{module.upper()}] {message}"
    if context:
        message += f" | Context: {context}"
    return message


def log_error(
    module: str, error: str, context: str = "", exception: Exception | None = None
) -> None:
    """
    Log a standardized error message.

    Args:
        module: Name of the module where the error occurred
        error: Error message describing what went wrong
        context: Additional context information (optional)
        exception: Exception object to include stack trace (optional)
    """
    logger = get_logger()
    message = _tag(module, error, context)
    if exception:
        logger.error(message, exc_info=exception)
    else:
        logger.error(message)


def log_warning(module: str, warning: str, context: str = "") -> None:
    get_logger().warning(_tag(module, warning, context))


def log_debug(module: str, message: str, context: str = "") -> None:
    get_logger().debug(_tag(module, message, context))


def log_file_operation(
    operation: str, file_path: str, success: bool, error: str | None = None
) -> None:
    """
    Log a file operation.

    Args:
        operation: Type of operation (read, write, delete, etc.)
        file_path: Path to the file being operated on
        success: Whether the operation was successful
        error: Error message if the operation failed (optional)
    """
    logger = get_logger()
    if success:
        logger.debug(f"File {operation}: {file_path}")
    else:
        logger.error(f"File {operation} failed: {file_path} - {error}")


def log_configuration(settings: dict[str, Any]) -> None:
    """
    Log resolved settings, one aligned line each.

    Args:
        settings: Display label -> resolved value
    """
    logger = get_logger()
    width = max((len(label) for label in settings), default=0) + 1
    for label, value in settings.items():
        logger.info(f"{(label + ':').ljust(width)} {value}")


def reset_logging() -> None:
    """
    Reset the global logger instance.

    This is useful for testing or when you need to reconfigure
    the logging system from scratch.
    """
    global _logger
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    _logger = None
