#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/codelabmd/cli/commands/render.py
"""Render command for the codelabmd CLI.

Loads a serialized node tree and renders it to a markdown dialect or to an
HTML fragment. Settings come from the discovered configuration file and are
overridden by command-line flags.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict

from codelabmd.ast.serialization import load_nodes
from codelabmd.cli.commands.shared import add_logging_arguments, get_exit_code_for_exception, setup_logging
from codelabmd.cli.config import load_config_with_priority, merge_configs
from codelabmd.constants import DEFAULT_DIALECT, EXIT_FILE_ERROR, EXIT_SUCCESS, EXIT_VALIDATION_ERROR
from codelabmd.exceptions import CodelabMdError
from codelabmd.options.html import HtmlRendererOptions
from codelabmd.options.markdown import MarkdownRendererOptions
from codelabmd.renderers.base import BaseRenderer
from codelabmd.renderers.html import HtmlRenderer
from codelabmd.renderers.markdown import MarkdownRenderer
from codelabmd.utils.decorators import debug_timer
from codelabmd.utils.dialects import DIALECTS, get_dialect

logger = logging.getLogger(__name__)


def create_render_parser() -> argparse.ArgumentParser:
    """Create the argument parser of the render command."""
    parser = argparse.ArgumentParser(
        prog="codelabmd render",
        description="Render a serialized tutorial node tree to markdown or HTML.",
    )
    parser.add_argument("input", help="JSON node tree file")
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    parser.add_argument("--env", help="Target environment; nodes tagged for other environments are omitted")
    parser.add_argument("--dialect", choices=sorted(DIALECTS), help=f"Markdown dialect (default: {DEFAULT_DIALECT})")
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=["md", "html"],
        help="Output format (default: html for .html/.htm outputs, md otherwise)",
    )
    parser.add_argument("--line-prefix", help="Prefix written at the start of every markdown line")
    parser.add_argument("--max-depth", type=int, help="Maximum nesting depth of the node tree")
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Drop unknown node types with a warning instead of failing",
    )
    parser.add_argument("--config", help="Configuration file (disables discovery)")
    parser.add_argument("--no-config", action="store_true", help="Ignore configuration files")
    add_logging_arguments(parser)
    return parser


def _resolve_output_format(parsed: argparse.Namespace) -> str:
    if parsed.output_format:
        return parsed.output_format
    if parsed.output and Path(parsed.output).suffix.lower() in (".html", ".htm"):
        return "html"
    return "md"


def _build_renderer(output_format: str, settings: Dict[str, Any]) -> BaseRenderer:
    """Create the renderer for an output format from merged settings.

    Raises
    ------
    DialectError
        If the configured dialect is not registered
    ValueError
        If a setting fails option validation

    """
    if output_format == "html":
        return HtmlRenderer(HtmlRendererOptions.from_mapping(settings))
    get_dialect(settings.get("dialect", DEFAULT_DIALECT))
    return MarkdownRenderer(MarkdownRendererOptions.from_mapping(settings))


def handle_render_command(args: list[str] | None = None) -> int:
    """Handle the render command.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments after ``render``

    Returns
    -------
    int
        Exit code (0 for success)

    """
    parser = create_render_parser()
    try:
        parsed = parser.parse_args(args or [])
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else EXIT_VALIDATION_ERROR

    setup_logging(parsed)

    input_path = Path(parsed.input)
    if not input_path.is_file():
        print(f"Error: Input file not found: {parsed.input}", file=sys.stderr)
        return EXIT_FILE_ERROR

    try:
        config = {} if parsed.no_config else load_config_with_priority(parsed.config, os.environ.get("CODELABMD_CONFIG"))
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    settings = merge_configs(
        config,
        {
            "env": parsed.env,
            "dialect": parsed.dialect,
            "max_depth": parsed.max_depth,
            "line_prefix": parsed.line_prefix,
        },
    )
    output_format = _resolve_output_format(parsed)

    try:
        renderer = _build_renderer(output_format, settings)
        nodes = load_nodes(input_path, strict_mode=not parsed.lenient)
        logger.info("Loaded %d root node(s) from %s", len(nodes), input_path)
        with debug_timer(logger, f"Rendering {input_path.name} ({output_format})"):
            renderer.render(nodes, parsed.output or sys.stdout)
    except (CodelabMdError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    if parsed.output:
        logger.info("Wrote %s", parsed.output)
    return EXIT_SUCCESS
