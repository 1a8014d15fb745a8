#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codelabmd/ast/nodes.py
"""Node classes for tutorial document trees.

This module defines the closed set of node variants produced by the tutorial
parser and consumed by the renderers. Every node supports the visitor pattern
through ``accept`` and carries two attributes shared by all variants:

- ``env``: the environments the node is visible in. An empty tuple means the
  node is always visible. The tuple is sorted and deduplicated at
  construction so that environment lookups can use binary search.
- ``block``: whether the node forces blank-line separation from surrounding
  content. Renderers may ignore the flag (for example inside table cells)
  but never change it.

Node Hierarchy
--------------
Leaf nodes:
    - Text, Image, Code, Survey, YouTube

Containers:
    - Url, Button, Header (inline ``content``)
    - List, Infobox, Import (block ``children``)
    - ItemsList (``items``, each a List)
    - Grid (``rows`` of GridCell, each holding ``children``)

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from codelabmd.constants import DEFAULT_ORDERED_LIST_START, InfoboxKind


def _normalize_env(env: Iterable[str]) -> tuple[str, ...]:
    return tuple(sorted(set(env)))


class Node(ABC):
    """Base class for all tutorial nodes.

    Attributes
    ----------
    env : tuple of str
        Sorted environment tags; empty means visible everywhere
    block : bool
        Whether the node is treated as a block element

    """

    env: tuple[str, ...]
    block: bool

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass

    def __post_init__(self) -> None:
        """Keep environment tags sorted for binary search lookups."""
        self.env = _normalize_env(self.env)


@dataclass
class Text(Node):
    """Run of text with independent bold, italic and inline-code styling.

    Parameters
    ----------
    content : str
        Raw text value, including any leading/trailing whitespace
    bold : bool, default = False
    italic : bool, default = False
    code : bool, default = False
        Render as inline code

    """

    content: str = ""
    bold: bool = False
    italic: bool = False
    code: bool = False
    env: tuple[str, ...] = ()
    block: bool = False

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self)


@dataclass
class Image(Node):
    """Image reference.

    Parameters
    ----------
    src : str
        Image locator
    alt : str, default = ""
        Alternate text; renderers fall back to the locator's base name
    title : str, default = ""
    width : float, default = 0
        Display width; zero or negative means unspecified

    """

    src: str = ""
    alt: str = ""
    title: str = ""
    width: float = 0.0
    env: tuple[str, ...] = ()
    block: bool = False

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_image``."""
        return visitor.visit_image(self)


@dataclass
class Button(Node):
    """Button marker.

    A Button placed as the first child of a Url turns the link into button
    markup. Elsewhere it renders its content unchanged.

    """

    content: list[Node] = field(default_factory=list)
    env: tuple[str, ...] = ()
    block: bool = False

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_button``."""
        return visitor.visit_button(self)


@dataclass
class Url(Node):
    """Hyperlink, or a plain wrapper when ``url`` is empty.

    Parameters
    ----------
    url : str, default = ""
        Destination; empty renders the content without link syntax
    content : list of Node
        Link label nodes
    name : str, default = ""
        Anchor name, used by the HTML renderer only
    target : str, default = ""
        Link target, used by the HTML renderer only

    """

    url: str = ""
    content: list[Node] = field(default_factory=list)
    name: str = ""
    target: str = ""
    env: tuple[str, ...] = ()
    block: bool = False

    @property
    def is_button(self) -> bool:
        """Whether the first content node is a Button marker."""
        return bool(self.content) and isinstance(self.content[0], Button)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_url``."""
        return visitor.visit_url(self)


@dataclass
class Code(Node):
    """Code block, either labelled source code or terminal/console input.

    Parameters
    ----------
    content : str
        Source text
    language : str, default = ""
        Language label for source code
    term : bool, default = False
        Console content instead of labelled source code

    """

    content: str = ""
    language: str = ""
    term: bool = False
    env: tuple[str, ...] = ()
    block: bool = True

    @property
    def is_empty(self) -> bool:
        """Whether the source text is blank."""
        return not self.content.strip()

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_code``."""
        return visitor.visit_code(self)


@dataclass
class List(Node):
    """Generic container of nodes, rendered in document order."""

    children: list[Node] = field(default_factory=list)
    env: tuple[str, ...] = ()
    block: bool = True

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_list``."""
        return visitor.visit_list(self)


@dataclass
class ItemsList(Node):
    """Bulleted or numbered list.

    Parameters
    ----------
    items : list of List
        One container per list item
    ordered : bool, default = False
        Numbered list; numbering applies only when ``start`` is positive
    start : int, default = 1
        Index of the first item of an ordered list

    """

    items: list[List] = field(default_factory=list)
    ordered: bool = False
    start: int = DEFAULT_ORDERED_LIST_START
    env: tuple[str, ...] = ()
    block: bool = True

    @property
    def is_numbered(self) -> bool:
        """Whether items are prefixed with a computed index."""
        return self.ordered and self.start > 0

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_items_list``."""
        return visitor.visit_items_list(self)


@dataclass
class GridCell:
    """Single table cell. Not a node; cells have no environment of their own.

    Parameters
    ----------
    children : list of Node
        Rich cell content
    colspan : int, default = 1
    rowspan : int, default = 1

    """

    children: list[Node] = field(default_factory=list)
    colspan: int = 1
    rowspan: int = 1


@dataclass
class Grid(Node):
    """Table. Row 0 is the header row; rows may have unequal lengths.

    Parameters
    ----------
    rows : list of list of GridCell

    """

    rows: list[list[GridCell]] = field(default_factory=list)
    env: tuple[str, ...] = ()
    block: bool = True

    @property
    def width(self) -> int:
        """Number of cells in the widest row."""
        return max((len(row) for row in self.rows), default=0)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_grid``."""
        return visitor.visit_grid(self)


@dataclass
class Infobox(Node):
    """Highlighted box, positive (info) or negative (warning).

    Parameters
    ----------
    children : list of Node
    kind : {"positive", "negative"}, default = "positive"

    """

    children: list[Node] = field(default_factory=list)
    kind: InfoboxKind = "positive"
    env: tuple[str, ...] = ()
    block: bool = True

    def __post_init__(self) -> None:
        """Validate the polarity discriminant."""
        super().__post_init__()
        if self.kind not in ("positive", "negative"):
            raise ValueError(f"Infobox kind must be 'positive' or 'negative', got {self.kind!r}")

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_infobox``."""
        return visitor.visit_infobox(self)


@dataclass
class SurveyGroup:
    """Named question of a survey with its answer options."""

    name: str = ""
    options: list[str] = field(default_factory=list)


@dataclass
class Survey(Node):
    """Survey form made of question groups.

    Parameters
    ----------
    groups : list of SurveyGroup
    survey_id : str, default = ""
        Identifier used by the HTML renderer

    """

    groups: list[SurveyGroup] = field(default_factory=list)
    survey_id: str = ""
    env: tuple[str, ...] = ()
    block: bool = True

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_survey``."""
        return visitor.visit_survey(self)


@dataclass
class Header(Node):
    """Section header.

    Parameters
    ----------
    level : int
        Nesting level, 0 or more; rendered with ``level + 1`` markers
    content : list of Node

    """

    level: int = 0
    content: list[Node] = field(default_factory=list)
    env: tuple[str, ...] = ()
    block: bool = True

    def __post_init__(self) -> None:
        """Validate header level is not negative."""
        super().__post_init__()
        if self.level < 0:
            raise ValueError(f"Header level must not be negative, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_header``."""
        return visitor.visit_header(self)


@dataclass
class YouTube(Node):
    """Embedded YouTube video."""

    video_id: str = ""
    env: tuple[str, ...] = ()
    block: bool = True

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_youtube``."""
        return visitor.visit_youtube(self)


@dataclass
class Import(Node):
    """Content imported from another document.

    Parameters
    ----------
    url : str, default = ""
        Locator of the imported document
    title : str, default = ""
        Display title; the locator is used when empty
    children : list of Node
        Imported content

    """

    url: str = ""
    title: str = ""
    children: list[Node] = field(default_factory=list)
    env: tuple[str, ...] = ()
    block: bool = True

    @property
    def display_title(self) -> str:
        """Title, falling back to the source locator."""
        return self.title or self.url

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_import``."""
        return visitor.visit_import(self)


NODE_TYPES: tuple[type[Node], ...] = (
    Text,
    Image,
    Url,
    Button,
    Code,
    List,
    ItemsList,
    Grid,
    Infobox,
    Survey,
    Header,
    YouTube,
    Import,
)


def get_node_children(node: Node) -> list[Node]:
    """Get the direct child nodes of a node in document order.

    Grid cells and list items are flattened: a Grid yields the children of
    every cell row by row, an ItemsList yields its item containers.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        Child nodes (empty list for leaf nodes)

    Examples
    --------
    >>> header = Header(level=1, content=[Text("Hello"), Text("world", bold=True)])
    >>> len(get_node_children(header))
    2

    """
    if isinstance(node, (Url, Button, Header)):
        return list(node.content)

    if isinstance(node, (List, Infobox, Import)):
        return list(node.children)

    if isinstance(node, ItemsList):
        return list(node.items)

    if isinstance(node, Grid):
        return [child for row in node.rows for cell in row for child in cell.children]

    return []


def is_empty(node: Optional[Node]) -> bool:
    """Check whether a node would produce no visible content.

    Parameters
    ----------
    node : Node or None

    Returns
    -------
    bool
        True for blank text, images without a source, blank code, and
        containers whose children are all empty

    """
    if node is None:
        return True
    if isinstance(node, Text):
        return not node.content.strip()
    if isinstance(node, Image):
        return not node.src
    if isinstance(node, Code):
        return node.is_empty
    if isinstance(node, YouTube):
        return not node.video_id
    if isinstance(node, Survey):
        return not node.groups
    return all(is_empty(child) for child in get_node_children(node))


def cell_is_empty(cell: GridCell) -> bool:
    """Check whether a table cell has no visible content."""
    return all(is_empty(child) for child in cell.children)


def grid_is_empty(grid: Grid) -> bool:
    """Check whether no cell of a table has visible content."""
    return all(cell_is_empty(cell) for row in grid.rows for cell in row)
