"""Tests for the top-level CLI entry point."""

import pytest

from codelabmd import __version__
from codelabmd.cli import create_parser, main
from codelabmd.cli.commands import COMMANDS, dispatch_command
from codelabmd.constants import EXIT_SUCCESS, EXIT_VALIDATION_ERROR


@pytest.mark.unit
@pytest.mark.cli
class TestMain:
    """Test main() dispatch."""

    def test_no_command(self, capsys):
        """Test a usage error without a command."""
        assert main([]) == EXIT_VALIDATION_ERROR
        assert "a command is required" in capsys.readouterr().err

    def test_version(self, capsys):
        """Test --version prints the package version."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_unknown_command(self, capsys):
        """Test an unknown command is rejected by argparse."""
        with pytest.raises(SystemExit) as exc_info:
            main(["publish"])

        assert exc_info.value.code == 2
        assert "invalid choice" in capsys.readouterr().err

    def test_render_dispatch(self, isolated_cwd, sample_json_file, capsys):
        """Test the render command runs through main."""
        assert main(["render", str(sample_json_file), "--dialect", "qwiklabs"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.startswith("## Setup\n")

    def test_dispatch_returns_none_for_other_arguments(self):
        """Test non-command arguments fall through."""
        assert dispatch_command([]) is None
        assert dispatch_command(["--help"]) is None

    def test_parser_lists_commands(self):
        """Test the parser offers every subcommand."""
        help_text = create_parser().format_help()
        for command in COMMANDS:
            assert command in help_text
