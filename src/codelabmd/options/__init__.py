#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderer options for codelabmd."""

from codelabmd.options.base import BaseRendererOptions, CloneFrozenMixin
from codelabmd.options.html import HtmlRendererOptions
from codelabmd.options.markdown import MarkdownRendererOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
    "MarkdownRendererOptions",
]
