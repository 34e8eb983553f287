"""Logging utilities for the model catalog.

This module provides standardized logging functionality for catalog
resolution, ranking, and validation.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, Optional

# Root logger name for the package
LOGGER_NAME = "ai_model_catalog"

# Type for log callback functions
LogCallback = Callable[[int, str, Dict[str, Any]], None]


class LogLevel(int, Enum):
    """Log levels for the catalog."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


class LogEvent(str, Enum):
    """Event types for catalog logging."""

    CATALOG_RESOLUTION = "catalog_resolution"
    CATALOG_FETCH = "catalog_fetch"
    CATALOG_CACHE = "catalog_cache"
    MODEL_RANKING = "model_ranking"
    MODEL_VALIDATION = "model_validation"


_callback: Optional[LogCallback] = None


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger nested under the package logger.

    Args:
        name: Child logger name. Module ``__name__`` values that already start
            with the package name are used as-is.

    Returns:
        The logger instance
    """
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def set_log_callback(callback: Optional[LogCallback]) -> None:
    """Route structured log events to ``callback`` in addition to logging.

    Args:
        callback: Function receiving ``(level, event, data)``, or None to unset
    """
    global _callback
    _callback = callback


def _log(
    callback: LogCallback,
    level: LogLevel,
    event: LogEvent,
    data: Dict[str, Any],
) -> None:
    """Log an event with the provided callback.

    Args:
        callback: Function to call with the log data
        level: Severity level
        event: Event type
        data: Dictionary of event data
    """
    try:
        callback(level, event.value, data)
    except Exception as e:
        # Fallback to standard logging if callback fails
        logging.getLogger(LOGGER_NAME).error(
            f"Logging callback failed with error: {e}. Original log: "
            f"level={level}, event={event.value}, data={data}"
        )


def _emit(level: LogLevel, event: LogEvent, message: str, **data: Any) -> None:
    logger = get_logger(event.value)
    if logger.isEnabledFor(level):
        if data:
            details = ", ".join(f"{key}={value}" for key, value in data.items())
            logger.log(level, f"{message} ({details})")
        else:
            logger.log(level, message)

    if _callback is not None:
        _log(_callback, level, event, {"message": message, **data})


def log_debug(event: LogEvent, message: str, **data: Any) -> None:
    """Log a debug-level event."""
    _emit(LogLevel.DEBUG, event, message, **data)


def log_info(event: LogEvent, message: str, **data: Any) -> None:
    """Log an info-level event."""
    _emit(LogLevel.INFO, event, message, **data)


def log_warning(event: LogEvent, message: str, **data: Any) -> None:
    """Log a warning-level event."""
    _emit(LogLevel.WARNING, event, message, **data)


def log_error(event: LogEvent, message: str, **data: Any) -> None:
    """Log an error-level event."""
    _emit(LogLevel.ERROR, event, message, **data)
