#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codelabmd/ast/__init__.py
"""Node tree representation of tutorial documents.

The module consists of three components:

- nodes: the closed set of node variants and tree helpers
- visitors: the visitor base class every renderer derives from
- serialization: the JSON interchange format between parser and renderers

Examples
--------
    >>> from codelabmd.ast import Header, Text
    >>> from codelabmd.renderers.markdown import MarkdownRenderer
    >>> MarkdownRenderer().render_to_string([Header(level=1, content=[Text("Title")])])
    '## Title\n'

"""

from codelabmd.ast.nodes import (
    NODE_TYPES,
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
    cell_is_empty,
    get_node_children,
    grid_is_empty,
    is_empty,
)
from codelabmd.ast.serialization import ast_to_dict, dict_to_ast, json_to_nodes, load_nodes, nodes_to_json
from codelabmd.ast.visitors import NodeVisitor

__all__ = [
    "NODE_TYPES",
    "Button",
    "Code",
    "Grid",
    "GridCell",
    "Header",
    "Image",
    "Import",
    "Infobox",
    "ItemsList",
    "List",
    "Node",
    "NodeVisitor",
    "Survey",
    "SurveyGroup",
    "Text",
    "Url",
    "YouTube",
    "ast_to_dict",
    "cell_is_empty",
    "dict_to_ast",
    "get_node_children",
    "grid_is_empty",
    "is_empty",
    "json_to_nodes",
    "load_nodes",
    "nodes_to_json",
]
