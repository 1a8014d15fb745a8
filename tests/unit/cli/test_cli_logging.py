"""Tests for CLI logging setup and exit code mapping."""

import argparse
import logging

import pytest

from codelabmd.cli.commands.shared import add_logging_arguments, get_exit_code_for_exception, setup_logging
from codelabmd.constants import (
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_VALIDATION_ERROR,
)
from codelabmd.exceptions import (
    DialectError,
    MalformedTreeError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from codelabmd.logging_utils import configure_logging, level_from_verbosity


def parse(*args: str) -> argparse.Namespace:
    parser = argparse.ArgumentParser()
    add_logging_arguments(parser)
    return parser.parse_args(list(args))


@pytest.mark.unit
@pytest.mark.cli
class TestLoggingSetup:
    """Test logging configuration from flags."""

    @pytest.mark.parametrize("verbosity,level", [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)])
    def test_level_from_verbosity(self, verbosity, level):
        """Test -v counts map to levels."""
        assert level_from_verbosity(verbosity) == level

    def test_verbose_flag(self):
        """Test -vv enables debug logging."""
        setup_logging(parse("-vv"))
        assert logging.getLogger("codelabmd").level == logging.DEBUG

    def test_log_level_overrides_verbose(self):
        """Test --log-level wins over -v."""
        setup_logging(parse("-v", "--log-level", "ERROR"))
        assert logging.getLogger("codelabmd").level == logging.ERROR

    def test_trace_wins(self):
        """Test --trace enables debug logging with timestamps."""
        setup_logging(parse("--log-level", "ERROR", "--trace"))
        package_logger = logging.getLogger("codelabmd")

        assert package_logger.level == logging.DEBUG
        assert "%(asctime)s" in package_logger.handlers[0].formatter._fmt

    def test_handlers_are_replaced(self):
        """Test repeated configuration does not stack handlers."""
        configure_logging("INFO")
        configure_logging("INFO")
        assert len(logging.getLogger("codelabmd").handlers) == 1

    def test_log_file(self, tmp_path):
        """Test records are copied to the log file."""
        log_file = tmp_path / "codelabmd.log"
        package_logger = configure_logging(logging.INFO, log_file=str(log_file))

        package_logger.getChild("test").info("hello file")
        for handler in package_logger.handlers:
            handler.flush()

        assert "INFO: hello file" in log_file.read_text(encoding="utf-8")

    def test_unknown_level_name_defaults_to_info(self):
        """Test a bad level name falls back to INFO."""
        configure_logging("LOUD")
        assert logging.getLogger("codelabmd").level == logging.INFO


@pytest.mark.unit
@pytest.mark.cli
class TestExitCodes:
    """Test exception to exit code mapping."""

    @pytest.mark.parametrize(
        "exception,code",
        [
            (ValidationError("bad"), EXIT_VALIDATION_ERROR),
            (DialectError("x", ["markdown"]), EXIT_VALIDATION_ERROR),
            (ValueError("bad"), EXIT_VALIDATION_ERROR),
            (argparse.ArgumentTypeError("bad"), EXIT_VALIDATION_ERROR),
            (OutputWriteError(original_error=OSError("disk full")), EXIT_FILE_ERROR),
            (FileNotFoundError("x"), EXIT_FILE_ERROR),
            (ParsingError("bad"), EXIT_PARSING_ERROR),
            (MalformedTreeError("cycle"), EXIT_RENDERING_ERROR),
            (RenderingError("bad"), EXIT_RENDERING_ERROR),
            (RuntimeError("boom"), EXIT_ERROR),
        ],
    )
    def test_mapping(self, exception, code):
        """Test each exception family gets its exit code."""
        assert get_exit_code_for_exception(exception) == code
