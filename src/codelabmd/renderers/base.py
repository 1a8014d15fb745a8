#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codelabmd/renderers/base.py
"""Base class for node tree renderers.

The BaseRenderer owns everything that does not depend on the output format:
environment filtering, guarding against cyclic or runaway-deep trees, the
scoped render context, and the plumbing between output destinations and the
line-aware :class:`~codelabmd.renderers.sink.OutputSink`.

"""

from __future__ import annotations

import logging
from abc import ABC
from contextlib import contextmanager
from dataclasses import dataclass, replace
from io import BytesIO
from pathlib import Path
from typing import IO, Any, Iterable, Iterator, Optional, Union

from codelabmd.ast.nodes import Node
from codelabmd.ast.visitors import NodeVisitor
from codelabmd.exceptions import InvalidOptionsError, MalformedTreeError
from codelabmd.options.base import BaseRendererOptions
from codelabmd.renderers.sink import OutputSink
from codelabmd.utils.environments import match_env
from codelabmd.utils.io_utils import is_binary_stream, write_content

logger = logging.getLogger(__name__)

RenderInput = Union[Node, Iterable[Node]]
RenderOutput = Union[str, Path, IO[bytes], IO[str], OutputSink]


@dataclass(frozen=True)
class RenderContext:
    """Immutable state visible to the emission rules of one subtree.

    A new context replaces the current one for the duration of a nested
    call and the previous one is restored afterwards, so sibling subtrees
    never observe each other's flags.

    Parameters
    ----------
    env : str or None
        Active environment
    in_table_cell : bool
        Content is being written into a table cell and must not contain
        raw newlines
    in_list : bool
        Content belongs to a list item
    force_inline : bool
        Ignore node block flags

    """

    env: Optional[str] = None
    in_table_cell: bool = False
    in_list: bool = False
    force_inline: bool = False


class BaseRenderer(NodeVisitor, ABC):
    """Abstract base class for renderers writing to an OutputSink.

    Subclasses implement one ``visit_*`` method per node variant and write
    exclusively through ``self._sink``.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Rendering options. If None, default options are used.

    Notes
    -----
    A renderer instance holds the traversal state of the render call in
    progress. Use one instance per thread.

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options or BaseRendererOptions()
        self._sink: OutputSink = OutputSink(BytesIO())
        self._context = self._initial_context()
        self._path: list[int] = []

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def render(self, nodes: RenderInput, output: RenderOutput) -> None:
        """Render nodes to a destination.

        Parameters
        ----------
        nodes : Node or iterable of Node
            Root nodes, rendered in order
        output : str, Path, IO[bytes], IO[str], or OutputSink
            Destination. Paths and binary streams are written incrementally;
            text streams receive the decoded output once rendering succeeds.

        Raises
        ------
        OutputWriteError
            If the destination rejects a write
        MalformedTreeError
            If the tree is cyclic, nested deeper than ``max_depth``, or deep
            enough to exhaust the interpreter call stack

        """
        if isinstance(output, OutputSink):
            self._render_into(nodes, output)
        elif isinstance(output, (str, Path)):
            with open(output, "wb") as stream:
                self._render_into(nodes, self._make_sink(stream))
        elif is_binary_stream(output):
            self._render_into(nodes, self._make_sink(output))  # type: ignore[arg-type]
        else:
            write_content(self.render_to_string(nodes), output)

    def render_to_string(self, nodes: RenderInput) -> str:
        """Render nodes and return the output as a string.

        Parameters
        ----------
        nodes : Node or iterable of Node

        Returns
        -------
        str

        """
        return self.render_to_bytes(nodes).decode("utf-8")

    def render_to_bytes(self, nodes: RenderInput) -> bytes:
        """Render nodes and return the UTF-8 encoded output."""
        buffer = BytesIO()
        self._render_into(nodes, self._make_sink(buffer))
        return buffer.getvalue()

    def _make_sink(self, stream: IO[bytes]) -> OutputSink:
        """Create the sink for a top-level render call."""
        return OutputSink(stream)

    def _initial_context(self) -> RenderContext:
        """Create the context a top-level render call starts from."""
        return RenderContext(env=self.options.env)

    def _render_into(self, nodes: RenderInput, sink: OutputSink) -> None:
        self._sink = sink
        self._context = self._initial_context()
        self._path = []
        try:
            self._render_nodes(nodes)
        except RecursionError as exc:
            raise MalformedTreeError(
                "Node tree exhausted the interpreter call stack; lower max_depth or flatten the tree",
                original_error=exc,
            ) from exc

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def _render_nodes(self, nodes: RenderInput) -> None:
        """Render a sequence of nodes in order, skipping environment mismatches."""
        if isinstance(nodes, Node):
            nodes = (nodes,)
        for node in nodes:
            self._dispatch(node)

    def _dispatch(self, node: Any) -> None:
        if not isinstance(node, Node):
            logger.debug("Skipping unrecognized node object %r", type(node).__name__)
            return
        if not match_env(node.env, self._context.env):
            logger.debug("Skipping %s not tagged for env %r", type(node).__name__, self._context.env)
            return
        with self._descend(node):
            node.accept(self)

    @contextmanager
    def _descend(self, node: Node) -> Iterator[None]:
        """Track the ancestor path, rejecting cycles and excessive depth."""
        node_id = id(node)
        if node_id in self._path:
            raise MalformedTreeError(
                f"Cycle detected: {type(node).__name__} appears in its own subtree",
                depth=len(self._path),
            )
        if len(self._path) >= self.options.max_depth:
            raise MalformedTreeError(
                f"Node tree nested deeper than max_depth={self.options.max_depth}",
                depth=len(self._path),
            )
        self._path.append(node_id)
        try:
            yield
        finally:
            self._path.pop()

    @contextmanager
    def _scoped(self, **changes: Any) -> Iterator[RenderContext]:
        """Replace the render context for the duration of a nested call."""
        saved = self._context
        self._context = replace(saved, **changes)
        try:
            yield self._context
        finally:
            self._context = saved

    @contextmanager
    def _capture(self, at_line_start: bool = False) -> Iterator[BytesIO]:
        """Redirect output into a scratch buffer.

        The previous sink is restored afterwards; the traversal path is
        shared, so depth and cycle checks span the scratch render.

        """
        saved = self._sink
        buffer = BytesIO()
        self._sink = OutputSink(buffer, at_line_start=at_line_start)
        try:
            yield buffer
        finally:
            self._sink = saved

    @property
    def _remaining_depth(self) -> int:
        return max(1, self.options.max_depth - len(self._path))

    def _is_block(self, node: Node) -> bool:
        """Whether a node's block flag applies in the current context."""
        return node.block and not self._context.force_inline

    def generic_visit(self, node: Node) -> None:
        """Skip nodes outside the closed variant set."""
        logger.debug("No emission rule for %s; skipping", type(node).__name__)


__all__ = ["BaseRenderer", "RenderContext", "RenderInput", "RenderOutput"]
