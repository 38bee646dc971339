#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Logging setup for the mimebody command line tool.

Only the ``mimebody`` package logger is configured; the root logger and any
handlers installed by a host application are left alone. Handlers created
here are tagged so repeated calls replace them instead of stacking.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "mimebody"

_HANDLER_TAG = "_mimebody_cli_handler"

_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")
    return level


def _tagged(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG, True)
    return handler


def reset_logging() -> None:
    """Remove the handlers installed by :func:`configure_logging`.

    The package logger goes back to propagating to the root logger with an
    unset level.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(package_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            package_logger.removeHandler(handler)
            handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Send ``mimebody`` log records to stderr and optionally a file.

    stdout carries the MIME body, so the console handler always writes to
    stderr. Records stop propagating to the root logger while these handlers
    are installed.

    Parameters
    ----------
    log_level : int | str
        Level for the package logger (e.g. ``"DEBUG"`` or ``logging.INFO``)
    log_file : str, optional
        Path of a file that also receives every record
    trace_mode : bool, default False
        Include timestamps and logger names; forces DEBUG

    Returns
    -------
    logging.Logger
        The configured ``mimebody`` logger

    Raises
    ------
    ValueError
        If ``log_level`` is not a known level name

    """
    level = logging.DEBUG if trace_mode else _resolve_level(log_level)
    if trace_mode:
        formatter = logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(_PLAIN_FORMAT)

    reset_logging()
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.propagate = False

    console = _tagged(logging.StreamHandler(sys.stderr))
    console.setFormatter(formatter)
    package_logger.addHandler(console)

    if log_file:
        try:
            file_handler = _tagged(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            package_logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
            package_logger.debug("Logging to file: %s", log_file)

    return package_logger
