#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codelabmd/logging_utils.py
"""Logging setup shared by the codelabmd command-line entry points."""

from __future__ import annotations

import logging
import sys
from typing import Optional

_VERBOSITY_LEVELS = {0: logging.WARNING, 1: logging.INFO}


def level_from_verbosity(verbosity: int) -> int:
    """Map a count of ``-v`` flags to a logging level.

    Parameters
    ----------
    verbosity : int
        Number of ``-v`` flags given on the command line.

    Returns
    -------
    int
        ``WARNING`` for 0, ``INFO`` for 1, ``DEBUG`` for 2 or more.

    """
    return _VERBOSITY_LEVELS.get(verbosity, logging.DEBUG if verbosity > 1 else logging.WARNING)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install stderr (and optionally file) handlers on the ``codelabmd`` logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Path of a log file that receives a copy of every record.
    trace_mode : bool, default False
        Include timestamps and logger names, useful when following which
        nodes the renderer skipped.

    Returns
    -------
    logging.Logger
        The configured package logger.

    """
    if isinstance(log_level, int):
        resolved_level = log_level
    else:
        resolved_level = getattr(logging, str(log_level).upper(), logging.INFO)

    package_logger = logging.getLogger("codelabmd")
    package_logger.setLevel(resolved_level)
    package_logger.handlers.clear()
    package_logger.propagate = False

    if trace_mode:
        formatter = logging.Formatter("[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s", "%H:%M:%S")
    else:
        formatter = logging.Formatter("%(levelname)s: %(message)s")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
            package_logger.debug("Logging to file: %s", log_file)

    return package_logger
