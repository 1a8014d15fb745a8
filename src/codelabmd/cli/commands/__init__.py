#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/codelabmd/cli/commands/__init__.py
"""CLI subcommand handlers for codelabmd."""

import logging
import sys

logger = logging.getLogger(__name__)

COMMANDS = ("render", "serve")


def dispatch_command(args: list[str] | None = None) -> int | None:
    """Run the subcommand named by the first argument.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments, defaulting to ``sys.argv[1:]``

    Returns
    -------
    int or None
        Exit code if a subcommand was handled, None otherwise

    """
    if args is None:
        args = sys.argv[1:]

    if not args:
        return None

    # Handlers are imported lazily so that --help does not load the renderers
    if args[0] == "render":
        from codelabmd.cli.commands.render import handle_render_command

        return handle_render_command(args[1:])

    if args[0] == "serve":
        from codelabmd.cli.commands.server import handle_serve_command

        return handle_serve_command(args[1:])

    return None


__all__ = ["COMMANDS", "dispatch_command"]
