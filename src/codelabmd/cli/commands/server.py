#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/codelabmd/cli/commands/server.py
"""HTTP server command for the codelabmd CLI.

Serves a directory of previously rendered files with a plain static file
server and opens a browser on it. The renderer is not involved at request
time.
"""

import argparse
import functools
import http.server
import logging
import socketserver
import sys
import webbrowser
from pathlib import Path

from codelabmd.cli.commands.shared import add_logging_arguments, setup_logging
from codelabmd.constants import (
    DEFAULT_SERVE_DIR,
    DEFAULT_SERVE_HOST,
    DEFAULT_SERVE_PORT,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)

logger = logging.getLogger(__name__)


def is_http_url(value: str) -> bool:
    """Whether a serve target is a remote URL rather than a directory."""
    return value.startswith(("http://", "https://"))


def open_browser(url: str) -> None:
    """Open ``url`` in the default browser; failures are only logged."""
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as e:
        logger.warning("Could not open browser: %s", e)
        return
    if not opened:
        logger.warning("No browser available to open %s", url)


def handle_serve_command(args: list[str] | None = None) -> int:
    """Handle the serve command.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments after ``serve``

    Returns
    -------
    int
        Exit code (0 for success)

    """
    parser = argparse.ArgumentParser(
        prog="codelabmd serve",
        description="Serve a directory of rendered tutorials over HTTP.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=DEFAULT_SERVE_DIR,
        help="Directory to serve, or an http(s) URL to open instead (default: current directory)",
    )
    parser.add_argument("--host", default=DEFAULT_SERVE_HOST, help=f"Host to bind (default: {DEFAULT_SERVE_HOST})")
    parser.add_argument(
        "--port", type=int, default=DEFAULT_SERVE_PORT, help=f"Port to serve on (default: {DEFAULT_SERVE_PORT})"
    )
    parser.add_argument("--no-browser", action="store_true", help="Do not open a browser")
    add_logging_arguments(parser)

    try:
        parsed = parser.parse_args(args or [])
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else EXIT_VALIDATION_ERROR

    setup_logging(parsed)

    remote_url = parsed.directory if is_http_url(parsed.directory) else None
    directory = Path(DEFAULT_SERVE_DIR if remote_url else parsed.directory)
    if not directory.is_dir():
        print(f"Error: Directory not found: {parsed.directory}", file=sys.stderr)
        return EXIT_FILE_ERROR

    handler = functools.partial(http.server.SimpleHTTPRequestHandler, directory=str(directory))

    try:
        with socketserver.TCPServer((parsed.host, parsed.port), handler) as httpd:
            port = httpd.server_address[1]
            url = f"http://{parsed.host}:{port}/"
            logger.info("Serving %s", directory.resolve())
            print(f"\nServing {directory} at {url}")

            if not parsed.no_browser:
                open_browser(remote_url or url)

            print("Press Ctrl+C to stop")
            try:
                httpd.serve_forever()
            except KeyboardInterrupt:
                print("\n\nShutting down server...")
            return EXIT_SUCCESS
    except OSError as e:
        if "Address already in use" in str(e):
            print(f"Error: Port {parsed.port} is already in use", file=sys.stderr)
        else:
            print(f"Error: Could not start server: {e}", file=sys.stderr)
        return EXIT_ERROR
