#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/codelabmd/cli/__init__.py
"""Command-line interface for codelabmd.

Usage::

    codelabmd render lab.json -o lab.md --env web --dialect qwiklabs
    codelabmd render lab.json -o lab.html
    codelabmd serve build/ --port 9090

"""

import argparse
import sys

from codelabmd import __version__
from codelabmd.cli.commands import COMMANDS, dispatch_command
from codelabmd.constants import EXIT_VALIDATION_ERROR


def create_parser() -> argparse.ArgumentParser:
    """Create the top-level parser used for --help, --version and usage errors."""
    parser = argparse.ArgumentParser(
        prog="codelabmd",
        description="Render tutorial node trees to markdown dialects and serve the results.",
        epilog="Run 'codelabmd <command> --help' for the options of a command.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("command", nargs="?", choices=COMMANDS, help="Subcommand to run")
    return parser


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return the process exit code."""
    result = dispatch_command(args)
    if result is not None:
        return result

    parser = create_parser()
    parser.parse_args(sys.argv[1:] if args is None else args)
    parser.print_usage(sys.stderr)
    print("Error: a command is required", file=sys.stderr)
    return EXIT_VALIDATION_ERROR


if __name__ == "__main__":
    sys.exit(main())
