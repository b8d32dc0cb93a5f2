#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Logging setup for batch conversions.

wiki2md modules only create module loggers. Programs converting many articles
call :func:`configure_logging` once to decide where those messages go.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "wiki2md"
PLAIN_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Configure root logging handlers for a conversion run.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Path of a log file receiving the same messages as stderr.
    trace_mode : bool, default False
        Add timestamps and logger names to every message, and lower the
        ``wiki2md`` loggers to DEBUG so that render timings and the node
        kind that stopped each render are reported.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    resolved_level = _resolve_level(log_level)
    handler_level = logging.DEBUG if trace_mode else resolved_level

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG if trace_mode else logging.NOTSET)

    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(PLAIN_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)

    for handler in handlers:
        handler.setLevel(handler_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if len(handlers) > 1:
        root_logger.info("Logging to file: %s", log_file)

    return root_logger
