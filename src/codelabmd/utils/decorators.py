#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codelabmd/utils/decorators.py
"""Timing helper shared by the API and CLI entry points."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Generator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Time a block and log the elapsed time at DEBUG level.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Rendering (qwiklabs)")

    Yields
    ------
    None

    Examples
    --------
        >>> with debug_timer(logger, "Rendering (markdown)"):
        ...     renderer.render(nodes, "out.md")
        ... # Logs: "Rendering (markdown) completed in 0.01s" at DEBUG level

    Notes
    -----
    Nothing is measured unless the logger has DEBUG enabled. The elapsed time
    is not logged when the block raises.

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.2f}s")
    else:
        yield


__all__ = ["debug_timer"]
