"""Unit tests for utils/decorators.py."""

from __future__ import annotations

import logging

import pytest

from codelabmd.utils.decorators import debug_timer

logger = logging.getLogger("codelabmd.tests.timer")


@pytest.mark.unit
class TestDebugTimer:
    """Test the debug_timer context manager."""

    def test_logs_elapsed_time_at_debug(self, caplog) -> None:
        """Test a completion message is logged when DEBUG is enabled."""
        with caplog.at_level(logging.DEBUG, logger="codelabmd"):
            with debug_timer(logger, "Rendering (qwiklabs)"):
                pass

        assert "Rendering (qwiklabs) completed in" in caplog.text

    def test_silent_above_debug(self, caplog) -> None:
        """Test nothing is logged when DEBUG is disabled."""
        with caplog.at_level(logging.INFO, logger="codelabmd"):
            with debug_timer(logger, "Rendering (markdown)"):
                pass

        assert caplog.text == ""

    def test_exceptions_propagate_without_timing(self, caplog) -> None:
        """Test a failing block is not reported as completed."""
        with caplog.at_level(logging.DEBUG, logger="codelabmd"):
            with pytest.raises(RuntimeError):
                with debug_timer(logger, "Rendering"):
                    raise RuntimeError("boom")

        assert "completed" not in caplog.text
