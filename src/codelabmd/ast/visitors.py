#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codelabmd/ast/visitors.py
"""Visitor pattern base class for node tree traversal.

Every node variant has an abstract ``visit_*`` method here, so a renderer
that forgets to implement one of them cannot be instantiated. Nodes outside
the closed set go through ``generic_visit``.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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
    Node,
    Survey,
    Text,
    Url,
    YouTube,
)


class NodeVisitor(ABC):
    """Abstract base class for node visitors.

    Examples
    --------
    Collecting every video id in a tree:

        >>> class VideoCollector(NodeVisitor):
        ...     def __init__(self):
        ...         self.ids = []
        ...
        ...     def visit_youtube(self, node):
        ...         self.ids.append(node.video_id)
        ...
        ...     # remaining visit_* methods recurse into children

    """

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""
        pass

    @abstractmethod
    def visit_url(self, node: Url) -> Any:
        """Visit a Url node."""
        pass

    @abstractmethod
    def visit_button(self, node: Button) -> Any:
        """Visit a Button node."""
        pass

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit a Code node."""
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""
        pass

    @abstractmethod
    def visit_items_list(self, node: ItemsList) -> Any:
        """Visit an ItemsList node."""
        pass

    @abstractmethod
    def visit_grid(self, node: Grid) -> Any:
        """Visit a Grid node."""
        pass

    @abstractmethod
    def visit_infobox(self, node: Infobox) -> Any:
        """Visit an Infobox node."""
        pass

    @abstractmethod
    def visit_survey(self, node: Survey) -> Any:
        """Visit a Survey node."""
        pass

    @abstractmethod
    def visit_header(self, node: Header) -> Any:
        """Visit a Header node."""
        pass

    @abstractmethod
    def visit_youtube(self, node: YouTube) -> Any:
        """Visit a YouTube node."""
        pass

    @abstractmethod
    def visit_import(self, node: Import) -> Any:
        """Visit an Import node."""
        pass

    def generic_visit(self, node: Node) -> Any:
        """Handle a node that is not part of the closed variant set.

        Parameters
        ----------
        node : Node
            The unrecognized node

        Returns
        -------
        Any
            None by default

        """
        return None
