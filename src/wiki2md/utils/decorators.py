#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2md/utils/decorators.py
"""Timing helpers for wiki2md conversions."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Iterator


@contextmanager
def render_timer(logger: logging.Logger, title: str) -> Iterator[None]:
    """Log how long rendering one article took, at DEBUG level.

    Parameters
    ----------
    logger : logging.Logger
        Logger receiving the timing message
    title : str
        Title of the article being rendered

    Examples
    --------
        >>> with render_timer(logger, "Main Page"):
        ...     renderer.render_document(output, "Main Page", nodes)
        ... # Logs: "Rendered 'Main Page' in 0.004s"

    Notes
    -----
    The clock is only read when DEBUG is enabled for ``logger``. Nothing is
    logged if the block raises.

    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return

    start_time = time.perf_counter()
    yield
    logger.debug("Rendered %r in %.3fs", title, time.perf_counter() - start_time)
