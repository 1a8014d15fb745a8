#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codelabmd/renderers/markdown.py
"""Markdown rendering of tutorial node trees.

This module provides the MarkdownRenderer class, the single rendering engine
behind every markdown dialect. The renderer walks the node tree with the
visitor pattern and appends to a line-aware OutputSink; everything that
differs between dialects (markers, escaping, paragraph-break heuristics, tag
vocabulary) is read from a :class:`~codelabmd.utils.dialects.Dialect`.

Block elements are separated by exactly one blank line through
``OutputSink.new_block``. Table cells are the one place where output is read
back: a cell is rendered into a scratch buffer first and, if the result
spans several lines, re-rendered as single-line HTML.

"""

from __future__ import annotations

import logging
import posixpath
from typing import IO

from codelabmd.ast.nodes import (
    Button,
    Code,
    Grid,
    GridCell,
    Header,
    Image,
    Import,
    Infobox,
    ItemsList,
    List,
    Node,
    Survey,
    Text,
    Url,
    YouTube,
    grid_is_empty,
)
from codelabmd.constants import TABLE_HEADER_SEPARATOR_CELL
from codelabmd.options.html import HtmlRendererOptions
from codelabmd.options.markdown import MarkdownRendererOptions
from codelabmd.renderers.base import BaseRenderer
from codelabmd.renderers.html import HtmlRenderer
from codelabmd.renderers.sink import OutputSink
from codelabmd.utils.dialects import Dialect, get_dialect
from codelabmd.utils.environments import match_env
from codelabmd.utils.escape import escape_angle_brackets, escape_html, escape_url_parens

logger = logging.getLogger(__name__)


class MarkdownRenderer(BaseRenderer):
    """Render tutorial nodes to a markdown dialect.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Rendering options; ``options.dialect`` selects the dialect

    Examples
    --------
    Basic usage:

        >>> from codelabmd.ast import Header, Text
        >>> from codelabmd.options import MarkdownRendererOptions
        >>> from codelabmd.renderers.markdown import MarkdownRenderer
        >>> renderer = MarkdownRenderer(MarkdownRendererOptions(dialect="qwiklabs"))
        >>> print(renderer.render_to_string([Header(level=1, content=[Text("Setup")])]))
        ## Setup

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        super().__init__(options)
        self.options: MarkdownRendererOptions = options
        self.dialect: Dialect = get_dialect(options.dialect)

    def _make_sink(self, stream: IO[bytes]) -> OutputSink:
        return OutputSink(stream, prefix=self.options.line_prefix.encode("utf-8"))

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        """Render a Text node.

        Paragraph breaks triggered by marker substrings go outside the
        whitespace, and style markers wrap exactly the trimmed core.

        Parameters
        ----------
        node : Text
            Text to render

        """
        dialect = self.dialect
        sink = self._sink
        left, core, right = dialect.split_text(node.content)

        markers: list[tuple[str, str]] = []
        if core:
            if node.bold:
                markers.append(dialect.bold)
            if node.italic:
                markers.append(dialect.italic)
            if node.code:
                markers.append(dialect.inline_code)

        sink.write(dialect.breaks_for(core, dialect.breaks_before))
        sink.write(left)
        for opening, _ in markers:
            sink.write(opening)
        sink.write(escape_angle_brackets(core) if dialect.escape_text_angle_brackets else core)
        for _, closing in reversed(markers):
            sink.write(closing)
        sink.write(dialect.breaks_for(core, dialect.breaks_after))
        sink.write(right)

    def visit_image(self, node: Image) -> None:
        """Render an Image node as a self-closing tag followed by a blank line.

        Parameters
        ----------
        node : Image
            Image to render

        """
        alt = node.alt or posixpath.basename(node.src.rstrip("/"))
        attributes = [f'src="{escape_html(node.src)}"', f'alt="{escape_html(alt)}"']
        if node.title:
            attributes.append(f'title="{escape_html(node.title)}"')
        if node.width > 0:
            attributes.append(f'width="{node.width:.2f}"')

        self._sink.space()
        self._sink.write(f"<img {' '.join(attributes)} />")
        self._sink.write("\n\n")

    def visit_url(self, node: Url) -> None:
        """Render a Url node.

        Without a destination the content is written as-is. A Button as the
        first content node wraps the link in the dialect's button tags.

        Parameters
        ----------
        node : Url
            Link to render

        """
        if not node.url:
            self._render_nodes(node.content)
            return

        button_open, button_close = self.dialect.button_tags
        if node.is_button:
            self._sink.write(button_open)
        self._sink.write("[")
        self._render_nodes(node.content)
        self._sink.write(f"]({escape_url_parens(node.url)})")
        if node.is_button:
            self._sink.write(button_close)

    def visit_button(self, node: Button) -> None:
        """Render a Button node's content."""
        self._render_nodes(node.content)

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def _fence_for(self, content: str) -> str:
        """Return a fence longer than any run of the fence character in ``content``."""
        fence = self.dialect.source_fence
        fence_char = fence[0]
        longest = current = 0
        for char in content:
            current = current + 1 if char == fence_char else 0
            longest = max(longest, current)
        return fence_char * max(len(fence), longest + 1)

    def visit_code(self, node: Code) -> None:
        """Render a Code node.

        Terminal code is wrapped in the console-block tags unless the source
        already carries a fence or the console tag. Other code becomes a
        fenced block labelled with its language.

        Parameters
        ----------
        node : Code
            Code to render

        """
        if node.is_empty:
            return

        sink = self._sink
        if node.term:
            if self.dialect.console_block_present(node.content):
                opening, closing = "", ""
            else:
                opening, closing = self.dialect.console_block
        else:
            fence = self._fence_for(node.content)
            opening, closing = f"{fence}{node.language}", fence

        sink.new_block()
        if opening:
            sink.write(opening)
            sink.write("\n")
        sink.write(node.content)
        sink.end_line()
        if closing:
            sink.write(closing)
            sink.write("\n")
        sink.write("\n")

    def visit_list(self, node: List) -> None:
        """Render a List container.

        Inside a list item a block List continues the item line instead of
        opening a new block.

        Parameters
        ----------
        node : List
            Container to render

        """
        if self._is_block(node) and not self._context.in_list:
            self._sink.new_block()
        self._render_nodes(node.children)
        if not self._context.in_table_cell:
            self._sink.end_line()

    def visit_items_list(self, node: ItemsList) -> None:
        """Render an ItemsList, one item per line.

        Items tagged for another environment are skipped and do not consume
        an index.

        Parameters
        ----------
        node : ItemsList
            List to render

        """
        items = [item for item in node.items if match_env(item.env, self._context.env)]
        if not items:
            return

        sink = self._sink
        if self._is_block(node):
            sink.new_block()

        with self._scoped(in_list=True):
            for index, item in enumerate(items):
                sink.write(f"{index + node.start}. " if node.is_numbered else self.dialect.bullet)
                with self._descend(item):
                    self._render_nodes(item.children)
                sink.end_line()
        sink.new_block()

    def visit_grid(self, node: Grid) -> None:
        """Render a Grid as a pipe table.

        Row 0 is the header: it is padded to the widest row and followed by
        the separator row.

        Parameters
        ----------
        node : Grid
            Table to render

        """
        if grid_is_empty(node):
            return

        sink = self._sink
        width = node.width
        sink.new_block()
        for row_index, row in enumerate(node.rows):
            sink.write("|")
            with self._scoped(in_table_cell=True):
                for cell in row:
                    sink.write(" ")
                    self._write_cell(cell)
                    sink.write(" |")
            if row_index == 0:
                sink.write(" |" * (width - len(row)))
            sink.write("\n")
            if row_index == 0:
                sink.write("|" + TABLE_HEADER_SEPARATOR_CELL * width)
                sink.write("\n")

    def _write_cell(self, cell: GridCell) -> None:
        """Write one cell's content on a single line.

        The content is rendered through this dialect first. If that output
        contains a newline, each child is re-rendered as inline HTML instead
        and any remaining newlines are dropped.

        """
        with self._capture() as scratch:
            self._render_nodes(cell.children)
        rendered = scratch.getvalue()

        if b"\n" not in rendered:
            self._sink.write_raw(rendered)
            return

        logger.debug("Table cell spans several lines; re-rendering as inline HTML")
        html_renderer = HtmlRenderer(
            HtmlRendererOptions(env=self._context.env, max_depth=self._remaining_depth, force_inline=True)
        )
        for child in cell.children:
            self._sink.write_raw(html_renderer.render_to_bytes(child).replace(b"\n", b""))

    def visit_infobox(self, node: Infobox) -> None:
        """Render an Infobox between the tags of its polarity.

        Parameters
        ----------
        node : Infobox
            Box to render

        """
        opening, closing = self.dialect.infobox_tag_pair(node.kind)
        sink = self._sink
        sink.new_block()
        sink.write(opening)
        sink.write("\n")
        self._render_nodes(node.children)
        sink.end_line()
        sink.write(closing)
        sink.write("\n")

    def visit_survey(self, node: Survey) -> None:
        """Render a Survey as a tightly packed form.

        Parameters
        ----------
        node : Survey
            Survey to render

        """
        sink = self._sink
        sink.new_block()
        sink.write("<form>\n")
        for group in node.groups:
            sink.write("<name>")
            sink.write_escaped(group.name)
            sink.write("</name>\n")
            for option in group.options:
                sink.write('<input value="')
                sink.write_escaped(option)
                sink.write('">\n')
        sink.write("</form>")

    def visit_header(self, node: Header) -> None:
        """Render a Header with ``level + 1`` hash markers.

        Parameters
        ----------
        node : Header
            Header to render

        """
        sink = self._sink
        sink.new_block()
        sink.write("#" * (node.level + 1) + " ")
        self._render_nodes(node.content)
        sink.end_line()

    def visit_youtube(self, node: YouTube) -> None:
        """Render a YouTube embed tag.

        Parameters
        ----------
        node : YouTube
            Video to render

        """
        sink = self._sink
        sink.new_block()
        if self.dialect.youtube_extra_gap:
            sink.write("\n")
        sink.write(self.dialect.video_template.format(video_id=escape_html(node.video_id)))

    def visit_import(self, node: Import) -> None:
        """Render an Import, flattened or as a reference depending on the dialect.

        Parameters
        ----------
        node : Import
            Import to render

        """
        if not node.children:
            return

        if self.dialect.import_style == "reference":
            self._sink.new_block()
            self._sink.write(f"[[import {node.display_title}]]")
        else:
            self._render_nodes(node.children)
            self._sink.write("\n")


def render_markdown(nodes: Node | list[Node], env: str | None = None, dialect: str = "markdown") -> str:
    """Render nodes to a markdown dialect string with a throwaway renderer.

    Parameters
    ----------
    nodes : Node or list of Node
    env : str or None, default None
    dialect : str, default "markdown"

    Returns
    -------
    str

    """
    return MarkdownRenderer(MarkdownRendererOptions(env=env, dialect=dialect)).render_to_string(nodes)  # type: ignore[arg-type]


__all__ = ["MarkdownRenderer", "render_markdown"]
