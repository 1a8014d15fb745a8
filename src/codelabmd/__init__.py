"""codelabmd - Render tutorial node trees to markdown dialects.

codelabmd turns the node tree of a step-by-step technical tutorial into a
markdown dialect with embedded custom tags, ready for a publishing
environment. Two dialects share one rendering engine:

- **markdown**: markdown with ``ql-*`` tags, flattened imports and inferred
  paragraph breaks
- **qwiklabs**: the stricter lab-pipeline variant, with escaped text and
  ``[[import ...]]`` references

Nodes can be restricted to target environments; rendering for one
environment omits every node tagged for others.

Requirements
------------
- Python 3.10+

Examples
--------
Render nodes built in Python:

    >>> from codelabmd import render_to_string
    >>> from codelabmd.ast import Header, Text
    >>> print(render_to_string([Header(level=1, content=[Text("Setup")])], dialect="qwiklabs"))
    ## Setup

Render a serialized node tree to a file:

    >>> from codelabmd import load_nodes, render
    >>> render("lab.md", "web", "qwiklabs", load_nodes("lab.json"))

See Also
--------
codelabmd.ast : Node definitions and JSON serialization
codelabmd.utils.dialects : Dialect definitions

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "codelabmd requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from codelabmd.api import render, render_html, render_to_string
from codelabmd.ast.serialization import json_to_nodes, load_nodes, nodes_to_json
from codelabmd.exceptions import (
    CodelabMdError,
    DialectError,
    MalformedTreeError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from codelabmd.options import HtmlRendererOptions, MarkdownRendererOptions

__all__ = [
    "__version__",
    "render",
    "render_html",
    "render_to_string",
    "json_to_nodes",
    "load_nodes",
    "nodes_to_json",
    "CodelabMdError",
    "DialectError",
    "MalformedTreeError",
    "OutputWriteError",
    "ParsingError",
    "RenderingError",
    "ValidationError",
    "HtmlRendererOptions",
    "MarkdownRendererOptions",
]
