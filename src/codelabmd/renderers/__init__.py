#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/codelabmd/renderers/__init__.py
"""Renderers turning tutorial node trees into output documents.

Available renderers:
- MarkdownRenderer: Render to a markdown dialect ("markdown" or "qwiklabs")
- HtmlRenderer: Render to an HTML fragment; also used for table cells whose
  markdown would span several lines

Examples
--------
    >>> from codelabmd.ast import Text
    >>> from codelabmd.options import MarkdownRendererOptions
    >>> from codelabmd.renderers import MarkdownRenderer
    >>> MarkdownRenderer(MarkdownRendererOptions(dialect="qwiklabs")).render_to_string([Text("hi", bold=True)])
    '**hi**'

"""

from codelabmd.renderers.base import BaseRenderer, RenderContext
from codelabmd.renderers.html import HtmlRenderer
from codelabmd.renderers.markdown import MarkdownRenderer
from codelabmd.renderers.sink import OutputSink

__all__ = [
    "BaseRenderer",
    "HtmlRenderer",
    "MarkdownRenderer",
    "OutputSink",
    "RenderContext",
]
