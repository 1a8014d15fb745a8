"""The exported API functions for rendering tutorial node trees."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/codelabmd/api.py
import logging
from pathlib import Path
from typing import IO, Any, Iterable, Optional, Union

from codelabmd.ast.nodes import Node
from codelabmd.constants import DEFAULT_DIALECT
from codelabmd.options.html import HtmlRendererOptions
from codelabmd.options.markdown import MarkdownRendererOptions
from codelabmd.renderers.html import HtmlRenderer
from codelabmd.renderers.markdown import MarkdownRenderer
from codelabmd.renderers.sink import OutputSink
from codelabmd.utils.decorators import debug_timer
from codelabmd.utils.dialects import get_dialect

logger = logging.getLogger(__name__)

OutputDestination = Union[str, Path, IO[bytes], IO[str], OutputSink]


def _markdown_options(
    env: Optional[str],
    dialect: str,
    renderer_options: Optional[MarkdownRendererOptions],
    **kwargs: Any,
) -> MarkdownRendererOptions:
    """Merge explicit arguments over an optional options object."""
    # Raises DialectError with the list of known dialects before option validation
    get_dialect(dialect)
    base = renderer_options or MarkdownRendererOptions()
    return base.create_updated(env=env, dialect=dialect, **kwargs)


def render(
    output: OutputDestination,
    env: Optional[str],
    dialect: str,
    nodes: Union[Node, Iterable[Node]],
    *,
    renderer_options: Optional[MarkdownRendererOptions] = None,
    **kwargs: Any,
) -> None:
    """Render root nodes in a markdown dialect to an output destination.

    Parameters
    ----------
    output : str, Path, IO[bytes], IO[str], or OutputSink
        Destination. Paths and binary streams receive output as it is
        produced; text streams receive it once rendering succeeds.
    env : str or None
        Active environment; nodes tagged for other environments are omitted
    dialect : str
        Dialect identifier, "markdown" or "qwiklabs"
    nodes : Node or iterable of Node
        Root nodes, rendered in order
    renderer_options : MarkdownRendererOptions, optional
        Base options; ``env``, ``dialect`` and ``kwargs`` override its fields
    kwargs : Any
        Additional renderer option overrides, e.g. ``line_prefix``

    Raises
    ------
    DialectError
        If the dialect is not registered
    OutputWriteError
        If the destination rejects a write. Rendering stops at the first
        failure.
    MalformedTreeError
        If the node tree is cyclic or nested deeper than ``max_depth``

    Examples
    --------
        >>> import sys
        >>> from codelabmd.ast import Code
        >>> render(sys.stdout, None, "qwiklabs", [Code(content="ls", term=True)])
        <ql-code-block bash templated noWrap>
        ls
        </ql-code-block>
        <BLANKLINE>

    """
    options = _markdown_options(env, dialect, renderer_options, **kwargs)
    with debug_timer(logger, f"Rendering ({options.dialect})"):
        MarkdownRenderer(options).render(nodes, output)


def render_to_string(
    nodes: Union[Node, Iterable[Node]],
    env: Optional[str] = None,
    dialect: str = DEFAULT_DIALECT,
    **kwargs: Any,
) -> str:
    """Render root nodes in a markdown dialect and return the text.

    Parameters
    ----------
    nodes : Node or iterable of Node
    env : str, optional
    dialect : str, default "markdown"
    kwargs : Any
        Renderer option overrides

    Returns
    -------
    str

    """
    options = _markdown_options(env, dialect, None, **kwargs)
    with debug_timer(logger, f"Rendering ({options.dialect})"):
        return MarkdownRenderer(options).render_to_string(nodes)


def render_html(
    nodes: Union[Node, Iterable[Node]],
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    env: Optional[str] = None,
    force_inline: bool = False,
) -> Optional[str]:
    """Render root nodes to an HTML fragment.

    Parameters
    ----------
    nodes : Node or iterable of Node
    output : str, Path, IO[bytes], IO[str], or None, optional
        Destination; when None the fragment is returned
    env : str, optional
    force_inline : bool, default False
        Ignore block flags

    Returns
    -------
    str or None
        The fragment if ``output`` is None, otherwise None

    """
    renderer = HtmlRenderer(HtmlRendererOptions(env=env, force_inline=force_inline))
    with debug_timer(logger, "Rendering (html)"):
        if output is None:
            return renderer.render_to_string(nodes)
        renderer.render(nodes, output)
    return None


__all__ = ["OutputDestination", "render", "render_html", "render_to_string"]
