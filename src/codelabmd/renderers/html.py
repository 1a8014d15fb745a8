#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codelabmd/renderers/html.py
"""HTML fragment rendering of tutorial node trees.

This module provides the HtmlRenderer class. It serves two purposes: as a
standalone renderer (``codelabmd render --format html``) and as the fallback
used by the markdown renderer for table cells whose content would otherwise
span several lines. In the latter case the renderer runs with
``force_inline`` so that no node's block flag introduces paragraph markup.

"""

from __future__ import annotations

import logging

from codelabmd.ast.nodes import (
    Button,
    Code,
    Grid,
    Header,
    Image,
    Import,
    Infobox,
    ItemsList,
    List,
    Survey,
    Text,
    Url,
    YouTube,
)
from codelabmd.constants import YOUTUBE_EMBED_URL
from codelabmd.options.html import HtmlRendererOptions
from codelabmd.renderers.base import BaseRenderer, RenderContext
from codelabmd.utils.environments import match_env
from codelabmd.utils.escape import escape_html

logger = logging.getLogger(__name__)

_INFOBOX_CLASSES = {"positive": "special", "negative": "warning"}


class HtmlRenderer(BaseRenderer):
    """Render tutorial nodes to an HTML fragment.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> from codelabmd.ast import Text
        >>> HtmlRenderer().render_to_string([Text("a < b", bold=True)])
        '<strong>a &lt; b</strong>'

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        super().__init__(options)
        self.options: HtmlRendererOptions = options

    def _initial_context(self) -> RenderContext:
        return RenderContext(env=self.options.env, force_inline=self.options.force_inline)

    def _block_end(self) -> None:
        """Separate block elements with a newline unless rendering inline."""
        if not self._context.force_inline:
            self._sink.write("\n")

    def _attributes(self, **values: object) -> str:
        """Format non-empty attribute values, escaped and in keyword order."""
        return "".join(f' {name}="{escape_html(str(value))}"' for name, value in values.items() if value)

    def visit_text(self, node: Text) -> None:
        """Render a Text node with nested strong/em/code elements."""
        opening = ""
        closing = ""
        for enabled, tag in ((node.bold, "strong"), (node.italic, "em"), (node.code, "code")):
            if enabled:
                opening += f"<{tag}>"
                closing = f"</{tag}>" + closing
        content = escape_html(node.content).replace("\n", "<br>")
        self._sink.write(f"{opening}{content}{closing}")

    def visit_image(self, node: Image) -> None:
        """Render an Image node."""
        style = f"width: {node.width:.2f}px" if node.width > 0 else ""
        attrs = self._attributes(alt=node.alt, title=node.title, src=node.src, style=style)
        self._sink.write(f"<img{attrs}>")

    def visit_url(self, node: Url) -> None:
        """Render a Url node as an anchor, or its bare content without a destination."""
        if not node.url and not node.name:
            self._render_nodes(node.content)
            return

        self._sink.write(f"<a{self._attributes(href=node.url, name=node.name, target=node.target)}>")
        if node.is_button:
            self._sink.write("<button>")
        self._render_nodes(node.content)
        if node.is_button:
            self._sink.write("</button>")
        self._sink.write("</a>")

    def visit_button(self, node: Button) -> None:
        self._render_nodes(node.content)

    def visit_code(self, node: Code) -> None:
        """Render a Code node as a preformatted block.

        When rendering inline, line breaks become ``<br>`` elements so that
        removing raw newlines keeps the lines apart.

        """
        if node.is_empty:
            return
        css_class = "console" if node.term else (f"language-{node.language}" if node.language else "")
        content = escape_html(node.content)
        if self._context.force_inline:
            content = content.rstrip("\n").replace("\n", "<br>")
        self._sink.write(f"<pre><code{self._attributes(**{'class': css_class})}>{content}</code></pre>")
        self._block_end()

    def visit_list(self, node: List) -> None:
        """Render a List container, as a paragraph when it is a block."""
        if self._is_block(node):
            self._sink.write("<p>")
            self._render_nodes(node.children)
            self._sink.write("</p>")
            self._block_end()
        else:
            self._render_nodes(node.children)

    def visit_items_list(self, node: ItemsList) -> None:
        """Render an ItemsList as ``ul`` or ``ol``."""
        if node.ordered:
            start = node.start if node.start > 0 else ""
            self._sink.write(f"<ol{self._attributes(start=start)}>")
        else:
            self._sink.write("<ul>")
        with self._scoped(in_list=True):
            for item in node.items:
                if not match_env(item.env, self._context.env):
                    continue
                self._sink.write("<li>")
                with self._descend(item):
                    self._render_nodes(item.children)
                self._sink.write("</li>")
        self._sink.write("</ol>" if node.ordered else "</ul>")
        self._block_end()

    def visit_grid(self, node: Grid) -> None:
        """Render a Grid as a table, keeping cell spans."""
        self._sink.write("<table>")
        with self._scoped(in_table_cell=True):
            for row in node.rows:
                self._sink.write("<tr>")
                for cell in row:
                    colspan = cell.colspan if cell.colspan > 1 else ""
                    rowspan = cell.rowspan if cell.rowspan > 1 else ""
                    self._sink.write(f"<td{self._attributes(colspan=colspan, rowspan=rowspan)}>")
                    self._render_nodes(cell.children)
                    self._sink.write("</td>")
                self._sink.write("</tr>")
        self._sink.write("</table>")
        self._block_end()

    def visit_infobox(self, node: Infobox) -> None:
        self._sink.write(f'<aside class="{_INFOBOX_CLASSES[node.kind]}">')
        self._render_nodes(node.children)
        self._sink.write("</aside>")
        self._block_end()

    def visit_survey(self, node: Survey) -> None:
        """Render a Survey as a form with one fieldset per question."""
        self._sink.write(f"<form{self._attributes(id=node.survey_id)}>")
        for group in node.groups:
            self._sink.write(f"<fieldset><legend>{escape_html(group.name)}</legend>")
            for option in group.options:
                attrs = self._attributes(type="radio", name=group.name, value=option)
                self._sink.write(f"<label><input{attrs}>{escape_html(option)}</label>")
            self._sink.write("</fieldset>")
        self._sink.write("</form>")
        self._block_end()

    def visit_header(self, node: Header) -> None:
        """Render a Header as ``h1`` to ``h6``; deeper levels share ``h6``."""
        tag = f"h{min(node.level + 1, 6)}"
        self._sink.write(f"<{tag}>")
        self._render_nodes(node.content)
        self._sink.write(f"</{tag}>")
        self._block_end()

    def visit_youtube(self, node: YouTube) -> None:
        src = YOUTUBE_EMBED_URL.format(video_id=node.video_id)
        attrs = self._attributes(
            **{"class": "youtube-video", "src": src, "allow": "accelerometer; autoplay; encrypted-media; gyroscope"}
        )
        self._sink.write(f"<iframe{attrs} allowfullscreen></iframe>")
        self._block_end()

    def visit_import(self, node: Import) -> None:
        self._render_nodes(node.children)


__all__ = ["HtmlRenderer"]
