#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codelabmd/utils/__init__.py
"""Utility modules for codelabmd.

This package contains the dialect definitions, environment matching, escaping
helpers and output I/O helpers shared by the renderers and the CLI.
"""

from codelabmd.utils.dialects import DIALECTS, Dialect, get_dialect
from codelabmd.utils.environments import match_env
from codelabmd.utils.escape import escape_angle_brackets, escape_html, escape_url_parens, replace_double_curly_brackets

__all__ = [
    "DIALECTS",
    "Dialect",
    "escape_angle_brackets",
    "escape_html",
    "escape_url_parens",
    "get_dialect",
    "match_env",
    "replace_double_curly_brackets",
]
