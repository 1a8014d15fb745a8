#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML rendering."""
# src/codelabmd/options/html.py

from __future__ import annotations

from dataclasses import dataclass, field

from codelabmd.options.base import BaseRendererOptions


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Options for rendering node trees to HTML fragments.

    Parameters
    ----------
    force_inline : bool, default False
        Ignore every node's block flag, so containers are not wrapped in
        paragraph elements. Used for content embedded in table cells.

    """

    force_inline: bool = field(
        default=False,
        metadata={"help": "Treat every node as inline (no paragraph wrapping)"},
    )
