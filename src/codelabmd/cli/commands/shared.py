#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/codelabmd/cli/commands/shared.py
"""Helpers shared by the CLI subcommands."""

import argparse
import logging

from codelabmd.constants import (
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_VALIDATION_ERROR,
)
from codelabmd.exceptions import OutputWriteError, ParsingError, RenderingError, ValidationError
from codelabmd.logging_utils import configure_logging, level_from_verbosity


def add_logging_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the logging flags every subcommand accepts."""
    group = parser.add_argument_group("logging")
    group.add_argument("-v", "--verbose", action="count", default=0, help="Increase verbosity (-v info, -vv debug)")
    group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set the logging level explicitly (overrides -v)",
    )
    group.add_argument("--log-file", help="Also write log records to this file")
    group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")


def setup_logging(parsed_args: argparse.Namespace) -> None:
    """Configure logging from parsed command-line arguments.

    ``--trace`` takes highest precedence, then ``--log-level``, then ``-v``.

    """
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.log_level:
        log_level = getattr(logging, parsed_args.log_level)
    else:
        log_level = level_from_verbosity(parsed_args.verbose)

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (ValidationError, ValueError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR

    # Output destination failures are file errors, not rendering bugs
    if isinstance(exception, (OutputWriteError, OSError)):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR
