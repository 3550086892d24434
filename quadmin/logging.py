"""Logging for quadmin.

Optimizers report early stops (degenerate fits, rejected candidates, exhausted
iteration caps) as warnings and trace each iteration at DEBUG. Every package
logger owns one stream handler and does not propagate to the root logger.
The handler settings live in one place, so loggers created after
:func:`configure_logging` write to the configured stream as well.

The starting level is read from the ``QUADMIN_LOG_LEVEL`` environment
variable (default ``WARNING``).
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from typing import IO, Optional

PACKAGE = "quadmin"
LEVEL_ENV_VAR = "QUADMIN_LOG_LEVEL"
DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.strip().upper(), logging.WARNING)
    return int(level)


@dataclass
class _HandlerSettings:
    level: int
    format_string: str = DEFAULT_FORMAT
    # None means whatever sys.stderr is when the handler is built
    stream: Optional[IO[str]] = None


_settings = _HandlerSettings(level=_resolve_level(os.getenv(LEVEL_ENV_VAR, "WARNING")))
_loggers: dict[str, logging.Logger] = {}


def _qualified(name: Optional[str]) -> str:
    if name is None or name == PACKAGE or name.startswith(PACKAGE + "."):
        return name or PACKAGE
    return f"{PACKAGE}.{name}"


def _install_handler(logger: logging.Logger) -> None:
    for old in logger.handlers[:]:
        logger.removeHandler(old)
    stream = sys.stderr if _settings.stream is None else _settings.stream
    handler = logging.StreamHandler(stream)
    handler.setLevel(_settings.level)
    handler.setFormatter(logging.Formatter(_settings.format_string))
    logger.addHandler(handler)
    logger.setLevel(_settings.level)
    logger.propagate = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the cached package logger for ``name``.

    Names outside the package namespace are prefixed with ``quadmin.``;
    ``None`` gives the package logger itself.

    Example:
        >>> from quadmin.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("Fitting parabola")
    """
    logger_name = _qualified(name)
    logger = _loggers.get(logger_name)
    if logger is None:
        logger = logging.getLogger(logger_name)
        if not logger.handlers:
            _install_handler(logger)
        _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Change the level of every package logger and of loggers created later.

    Args:
        level: A ``logging`` level or its name, e.g. ``"DEBUG"``.
    """
    _settings.level = _resolve_level(level)
    for logger in _loggers.values():
        logger.setLevel(_settings.level)
        for handler in logger.handlers:
            handler.setLevel(_settings.level)


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """Send package log records to ``stream`` with the given level and format.

    Every existing package logger gets a fresh handler; loggers created
    afterwards are built with the same settings.

    Args:
        level: Logging level (default: WARNING).
        format_string: Record format. If None, uses ``DEFAULT_FORMAT``.
        stream: Output stream. If None, uses ``sys.stderr``.
    """
    _settings.level = _resolve_level(level)
    _settings.format_string = format_string or DEFAULT_FORMAT
    _settings.stream = stream
    for logger in _loggers.values():
        _install_handler(logger)


__all__ = ["DEFAULT_FORMAT", "LEVEL_ENV_VAR", "configure_logging", "get_logger", "set_log_level"]
