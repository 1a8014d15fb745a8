#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codelabmd/ast/serialization.py
"""JSON serialization and deserialization for tutorial node trees.

Node trees are produced by the tutorial parser, which lives outside this
package. This module defines the JSON interchange format the parser writes
and the CLI reads.

Document format::

    {
      "schema_version": 1,
      "nodes": [
        {"node_type": "Header", "level": 1, "content": [{"node_type": "Text", "content": "Setup"}]},
        {"node_type": "Code", "content": "ls", "term": true, "env": ["web"]}
      ]
    }

Every node carries a ``node_type`` discriminator. ``env`` and ``block`` are
optional; a missing ``block`` falls back to the variant's default.

Examples
--------
    >>> from codelabmd.ast import Header, Text
    >>> json_str = nodes_to_json([Header(level=1, content=[Text("Setup")])])
    >>> json_to_nodes(json_str)[0].level
    1

"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Iterable, Optional, Union

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
    SurveyGroup,
    Text,
    Url,
    YouTube,
)
from codelabmd.constants import AST_SCHEMA_VERSION
from codelabmd.exceptions import ParsingError

logger = logging.getLogger(__name__)


def _common_fields(node: Node, node_type: str) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": node_type}
    if node.env:
        result["env"] = list(node.env)
    result["block"] = node.block
    return result


def _serialize_text(node: Text) -> dict[str, Any]:
    result = _common_fields(node, "Text")
    result["content"] = node.content
    for flag in ("bold", "italic", "code"):
        if getattr(node, flag):
            result[flag] = True
    return result


def _serialize_image(node: Image) -> dict[str, Any]:
    result = _common_fields(node, "Image")
    result.update(src=node.src, alt=node.alt, title=node.title, width=node.width)
    return result


def _serialize_url(node: Url) -> dict[str, Any]:
    result = _common_fields(node, "Url")
    result.update(url=node.url, name=node.name, target=node.target)
    result["content"] = [ast_to_dict(child) for child in node.content]
    return result


def _serialize_inline_content_node(node: Node, node_type: str) -> dict[str, Any]:
    """Serialize nodes whose ``content`` is a list of child nodes."""
    result = _common_fields(node, node_type)
    result["content"] = [ast_to_dict(child) for child in node.content]  # type: ignore[attr-defined]
    return result


def _serialize_children_node(node: Node, node_type: str) -> dict[str, Any]:
    """Serialize nodes with a ``children`` list."""
    result = _common_fields(node, node_type)
    result["children"] = [ast_to_dict(child) for child in node.children]  # type: ignore[attr-defined]
    return result


def _serialize_code(node: Code) -> dict[str, Any]:
    result = _common_fields(node, "Code")
    result.update(content=node.content, language=node.language, term=node.term)
    return result


def _serialize_items_list(node: ItemsList) -> dict[str, Any]:
    result = _common_fields(node, "ItemsList")
    result.update(ordered=node.ordered, start=node.start)
    result["items"] = [ast_to_dict(item) for item in node.items]
    return result


def _serialize_grid(node: Grid) -> dict[str, Any]:
    result = _common_fields(node, "Grid")
    result["rows"] = [
        [
            {
                "children": [ast_to_dict(child) for child in cell.children],
                "colspan": cell.colspan,
                "rowspan": cell.rowspan,
            }
            for cell in row
        ]
        for row in node.rows
    ]
    return result


def _serialize_infobox(node: Infobox) -> dict[str, Any]:
    result = _serialize_children_node(node, "Infobox")
    result["kind"] = node.kind
    return result


def _serialize_survey(node: Survey) -> dict[str, Any]:
    result = _common_fields(node, "Survey")
    result["survey_id"] = node.survey_id
    result["groups"] = [{"name": group.name, "options": list(group.options)} for group in node.groups]
    return result


def _serialize_header(node: Header) -> dict[str, Any]:
    result = _serialize_inline_content_node(node, "Header")
    result["level"] = node.level
    return result


def _serialize_youtube(node: YouTube) -> dict[str, Any]:
    result = _common_fields(node, "YouTube")
    result["video_id"] = node.video_id
    return result


def _serialize_import(node: Import) -> dict[str, Any]:
    result = _serialize_children_node(node, "Import")
    result.update(url=node.url, title=node.title)
    return result


# Dispatch table mapping node types to their serialization functions
_SERIALIZATION_DISPATCH: dict[type, Callable[[Any], dict[str, Any]]] = {
    Text: _serialize_text,
    Image: _serialize_image,
    Url: _serialize_url,
    Button: lambda n: _serialize_inline_content_node(n, "Button"),
    Code: _serialize_code,
    List: lambda n: _serialize_children_node(n, "List"),
    ItemsList: _serialize_items_list,
    Grid: _serialize_grid,
    Infobox: _serialize_infobox,
    Survey: _serialize_survey,
    Header: _serialize_header,
    YouTube: _serialize_youtube,
    Import: _serialize_import,
}


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to its dictionary representation.

    Parameters
    ----------
    node : Node
        The node to convert

    Returns
    -------
    dict
        Dictionary representation of the node and its subtree

    Raises
    ------
    ValueError
        If the node type has no serializer

    Examples
    --------
    >>> ast_to_dict(Text("Hello"))
    {'node_type': 'Text', 'block': False, 'content': 'Hello'}

    """
    serializer = _SERIALIZATION_DISPATCH.get(type(node))
    if serializer:
        return serializer(node)
    raise ValueError(f"Unknown node type for serialization: {type(node).__name__}")


class _Loader:
    """Deserialize node dictionaries with a fixed strictness."""

    def __init__(self, strict_mode: bool):
        self.strict_mode = strict_mode
        self._dispatch: dict[str, Callable[[dict[str, Any]], Node]] = {
            "Text": self._text,
            "Image": self._image,
            "Url": self._url,
            "Button": self._button,
            "Code": self._code,
            "List": self._list,
            "ItemsList": self._items_list,
            "Grid": self._grid,
            "Infobox": self._infobox,
            "Survey": self._survey,
            "Header": self._header,
            "YouTube": self._youtube,
            "Import": self._import,
        }

    def node(self, data: Any) -> Optional[Node]:
        """Deserialize one node, or return None if it is dropped."""
        if not isinstance(data, dict):
            return self._reject(f"Node must be an object, got {type(data).__name__}")

        node_type = data.get("node_type")
        if not node_type:
            return self._reject("Dictionary must contain 'node_type' field")

        deserializer = self._dispatch.get(node_type)
        if deserializer is None:
            return self._reject(f"Unknown node type: {node_type}")
        return deserializer(data)

    def nodes(self, data: Iterable[Any]) -> list[Node]:
        return [node for node in (self.node(item) for item in data) if node is not None]

    def _reject(self, message: str) -> None:
        if self.strict_mode:
            raise ValueError(message)
        logger.warning("%s, skipping", message)
        return None

    @staticmethod
    def _common(data: dict[str, Any]) -> dict[str, Any]:
        env = data.get("env")
        if env is None:
            env = ()
        elif not isinstance(env, (list, tuple)) or not all(isinstance(tag, str) for tag in env):
            raise ValueError(f"'env' must be a list of strings, got {env!r}")
        kwargs: dict[str, Any] = {"env": tuple(env)}
        if "block" in data:
            kwargs["block"] = bool(data["block"])
        return kwargs

    def _text(self, data: dict[str, Any]) -> Text:
        return Text(
            content=data.get("content", ""),
            bold=data.get("bold", False),
            italic=data.get("italic", False),
            code=data.get("code", False),
            **self._common(data),
        )

    def _image(self, data: dict[str, Any]) -> Image:
        return Image(
            src=data.get("src", ""),
            alt=data.get("alt", ""),
            title=data.get("title", ""),
            width=float(data.get("width", 0.0)),
            **self._common(data),
        )

    def _url(self, data: dict[str, Any]) -> Url:
        return Url(
            url=data.get("url", ""),
            content=self.nodes(data.get("content", [])),
            name=data.get("name", ""),
            target=data.get("target", ""),
            **self._common(data),
        )

    def _button(self, data: dict[str, Any]) -> Button:
        return Button(content=self.nodes(data.get("content", [])), **self._common(data))

    def _code(self, data: dict[str, Any]) -> Code:
        return Code(
            content=data.get("content", ""),
            language=data.get("language", ""),
            term=data.get("term", False),
            **self._common(data),
        )

    def _list(self, data: dict[str, Any]) -> List:
        return List(children=self.nodes(data.get("children", [])), **self._common(data))

    def _items_list(self, data: dict[str, Any]) -> ItemsList:
        items = []
        for item in self.nodes(data.get("items", [])):
            if isinstance(item, List):
                items.append(item)
            else:
                # Bare nodes become single-child items
                items.append(List(children=[item]))
        return ItemsList(
            items=items,
            ordered=data.get("ordered", False),
            start=int(data.get("start", 1)),
            **self._common(data),
        )

    def _grid(self, data: dict[str, Any]) -> Grid:
        rows = [
            [
                GridCell(
                    children=self.nodes(cell.get("children", [])),
                    colspan=int(cell.get("colspan", 1)),
                    rowspan=int(cell.get("rowspan", 1)),
                )
                for cell in row
            ]
            for row in data.get("rows", [])
        ]
        return Grid(rows=rows, **self._common(data))

    def _infobox(self, data: dict[str, Any]) -> Infobox:
        return Infobox(
            children=self.nodes(data.get("children", [])),
            kind=data.get("kind", "positive"),
            **self._common(data),
        )

    def _survey(self, data: dict[str, Any]) -> Survey:
        groups = [
            SurveyGroup(name=group.get("name", ""), options=list(group.get("options", [])))
            for group in data.get("groups", [])
        ]
        return Survey(groups=groups, survey_id=data.get("survey_id", ""), **self._common(data))

    def _header(self, data: dict[str, Any]) -> Header:
        return Header(
            level=int(data.get("level", 0)),
            content=self.nodes(data.get("content", [])),
            **self._common(data),
        )

    def _youtube(self, data: dict[str, Any]) -> YouTube:
        return YouTube(video_id=data.get("video_id", ""), **self._common(data))

    def _import(self, data: dict[str, Any]) -> Import:
        return Import(
            url=data.get("url", ""),
            title=data.get("title", ""),
            children=self.nodes(data.get("children", [])),
            **self._common(data),
        )


def dict_to_ast(data: dict[str, Any], strict_mode: bool = True) -> Optional[Node]:
    """Convert a dictionary representation back to a node.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node
    strict_mode : bool, default True
        If True, raise ValueError on unknown node types.
        If False, log a warning and drop unknown nodes.

    Returns
    -------
    Node or None
        Reconstructed node; None if the node itself was dropped

    Raises
    ------
    ValueError
        If the dictionary contains an unknown node type and strict_mode is True,
        or a field value is invalid

    """
    return _Loader(strict_mode).node(data)


def nodes_to_json(nodes: Union[Node, Iterable[Node]], indent: Optional[int] = None) -> str:
    """Serialize a node sequence to a JSON document.

    Parameters
    ----------
    nodes : Node or iterable of Node
    indent : int, optional
        Indentation passed to ``json.dumps``

    Returns
    -------
    str

    """
    if isinstance(nodes, Node):
        nodes = [nodes]
    document = {
        "schema_version": AST_SCHEMA_VERSION,
        "nodes": [ast_to_dict(node) for node in nodes],
    }
    return json.dumps(document, indent=indent, ensure_ascii=False)


def json_to_nodes(json_str: str, strict_mode: bool = True, source: Optional[str] = None) -> list[Node]:
    """Deserialize a JSON document to a node sequence.

    Accepts the document format described in the module docstring, a bare
    list of nodes, or a single node object. A missing ``schema_version`` is
    treated as version 1.

    Parameters
    ----------
    json_str : str
        JSON text
    strict_mode : bool, default True
        Raise on unknown node types instead of dropping them
    source : str, optional
        Input name used in error messages

    Returns
    -------
    list of Node

    Raises
    ------
    ParsingError
        If the JSON is malformed, the schema version is unsupported, or a
        node cannot be reconstructed

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Invalid JSON: {e}", source=source, original_error=e) from e
    except RecursionError as e:
        raise ParsingError(
            "JSON nesting exceeds the interpreter recursion limit", source=source, original_error=e
        ) from e

    if isinstance(data, dict) and "nodes" in data:
        schema_version = data.get("schema_version", AST_SCHEMA_VERSION)
        if schema_version != AST_SCHEMA_VERSION:
            raise ParsingError(
                f"Unsupported schema version: {schema_version}. "
                f"This version of codelabmd supports schema version {AST_SCHEMA_VERSION} only.",
                source=source,
            )
        raw_nodes = data["nodes"]
    elif isinstance(data, dict):
        raw_nodes = [data]
    else:
        raw_nodes = data

    if not isinstance(raw_nodes, list):
        raise ParsingError(f"Expected a list of nodes, got {type(raw_nodes).__name__}", source=source)

    try:
        return _Loader(strict_mode).nodes(raw_nodes)
    except (ValueError, TypeError, AttributeError) as e:
        raise ParsingError(f"Invalid node tree: {e}", source=source, original_error=e) from e
    except RecursionError as e:
        raise ParsingError(
            "Node tree nesting exceeds the interpreter recursion limit", source=source, original_error=e
        ) from e


def load_nodes(path: Union[str, Path], strict_mode: bool = True) -> list[Node]:
    """Read and deserialize a node tree file.

    Parameters
    ----------
    path : str or Path
    strict_mode : bool, default True

    Returns
    -------
    list of Node

    Raises
    ------
    ParsingError
        If the file content is not a valid node tree

    """
    path = Path(path)
    return json_to_nodes(path.read_text(encoding="utf-8"), strict_mode=strict_mode, source=str(path))


__all__ = [
    "ast_to_dict",
    "dict_to_ast",
    "json_to_nodes",
    "load_nodes",
    "nodes_to_json",
]
