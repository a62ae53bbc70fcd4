"""Logging utilities for wavestring.

Loggers live under the ``wavestring`` namespace, write to stderr and do not
propagate to the root logger.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_DEFAULT_LEVEL = logging.WARNING
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_default_stream: Optional[object] = None
_default_formatter = logging.Formatter(_DEFAULT_FORMAT)

_loggers: dict[str, logging.Logger] = {}


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Args:
        name: Logger name, typically ``__name__``. If None, returns the
            package logger.

    Returns:
        Configured logger instance.

    Example:
        >>> from wavestring.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("tabulated %d points", 257)
    """
    if name is None:
        name = "wavestring"

    if name == "wavestring" or name.startswith("wavestring."):
        logger_name = name
    else:
        logger_name = f"wavestring.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)

        handler = logging.StreamHandler(
            _default_stream if _default_stream is not None else sys.stderr
        )
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(_default_formatter)

        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def set_log_level(level: int | str) -> None:
    """Set the logging level for all wavestring loggers.

    Args:
        level: Logging level (``logging.DEBUG`` etc.) or its name
            (``"DEBUG"``, ``"INFO"``, ...).
    """
    level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Configure logging for wavestring.

    Replaces the handlers of every existing wavestring logger. Loggers
    created afterwards use the same level, format and stream.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses the default.
        stream: Output stream (default: ``sys.stderr``).
    """
    level = _coerce_level(level)

    if stream is None:
        stream = sys.stderr

    formatter = logging.Formatter(format_string or _DEFAULT_FORMAT)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    global _DEFAULT_LEVEL, _default_stream, _default_formatter
    _DEFAULT_LEVEL = level
    _default_stream = stream
    _default_formatter = formatter
