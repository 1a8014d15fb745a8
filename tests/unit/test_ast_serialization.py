#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for node tree serialization and deserialization."""
import json
import logging

import pytest

from codelabmd.ast import (
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
    Survey,
    SurveyGroup,
    Text,
    Url,
    YouTube,
)
from codelabmd.ast.serialization import ast_to_dict, dict_to_ast, json_to_nodes, load_nodes, nodes_to_json
from codelabmd.exceptions import ParsingError


@pytest.mark.unit
class TestAstToDictConversion:
    """Test node to dictionary conversion."""

    def test_text_node_to_dict(self) -> None:
        """Test converting a Text node to dict."""
        result = ast_to_dict(Text("Hello", bold=True))

        assert result["node_type"] == "Text"
        assert result["content"] == "Hello"
        assert result["bold"] is True
        assert "italic" not in result
        assert "env" not in result

    def test_env_is_serialized_when_present(self) -> None:
        """Test that environment tags are written as a list."""
        result = ast_to_dict(Code(content="ls", term=True, env=("web", "print")))

        assert result["env"] == ["print", "web"]
        assert result["term"] is True

    def test_header_to_dict(self) -> None:
        """Test converting a Header node to dict."""
        result = ast_to_dict(Header(level=2, content=[Text("Title")]))

        assert result["node_type"] == "Header"
        assert result["level"] == 2
        assert result["content"][0]["content"] == "Title"

    def test_grid_to_dict(self) -> None:
        """Test cells keep their spans."""
        grid = Grid(rows=[[GridCell(children=[Text("a")], colspan=2)]])
        result = ast_to_dict(grid)

        cell = result["rows"][0][0]
        assert cell["colspan"] == 2
        assert cell["rowspan"] == 1
        assert cell["children"][0]["content"] == "a"

    def test_survey_to_dict(self) -> None:
        """Test survey groups are plain objects."""
        survey = Survey(survey_id="s1", groups=[SurveyGroup(name="Q?", options=["a", "b"])])
        result = ast_to_dict(survey)

        assert result["groups"] == [{"name": "Q?", "options": ["a", "b"]}]
        assert result["survey_id"] == "s1"

    def test_unknown_node_raises(self) -> None:
        """Test serializing an unsupported object raises ValueError."""
        with pytest.raises(ValueError, match="Unknown node type"):
            ast_to_dict(GridCell())  # type: ignore[arg-type]


@pytest.mark.unit
class TestDictToAstConversion:
    """Test dictionary to node conversion."""

    def test_text_from_dict(self) -> None:
        """Test a minimal Text dictionary."""
        node = dict_to_ast({"node_type": "Text", "content": "Hi", "italic": True})

        assert isinstance(node, Text)
        assert node.content == "Hi"
        assert node.italic is True
        assert node.block is False

    def test_block_flag_is_restored(self) -> None:
        """Test an explicit block flag overrides the variant default."""
        node = dict_to_ast({"node_type": "List", "block": False, "children": []})

        assert isinstance(node, List)
        assert node.block is False

    def test_env_is_normalized(self) -> None:
        """Test env lists are sorted on load."""
        node = dict_to_ast({"node_type": "YouTube", "video_id": "abc", "env": ["web", "cloud"]})

        assert node is not None
        assert node.env == ("cloud", "web")

    def test_bare_items_become_lists(self) -> None:
        """Test list items that are not List nodes are wrapped."""
        node = dict_to_ast({"node_type": "ItemsList", "items": [{"node_type": "Text", "content": "one"}]})

        assert isinstance(node, ItemsList)
        assert isinstance(node.items[0], List)
        assert node.items[0].children[0].content == "one"  # type: ignore[attr-defined]

    def test_unknown_type_strict(self) -> None:
        """Test unknown node types raise in strict mode."""
        with pytest.raises(ValueError, match="Unknown node type: Video"):
            dict_to_ast({"node_type": "Video"})

    def test_missing_type_strict(self) -> None:
        """Test a dictionary without node_type raises in strict mode."""
        with pytest.raises(ValueError, match="node_type"):
            dict_to_ast({"content": "x"})

    def test_unknown_type_lenient(self, caplog) -> None:
        """Test unknown child nodes are dropped with a warning in lenient mode."""
        data = {
            "node_type": "List",
            "children": [{"node_type": "Text", "content": "kept"}, {"node_type": "Hologram"}],
        }
        with caplog.at_level(logging.WARNING, logger="codelabmd"):
            node = dict_to_ast(data, strict_mode=False)

        assert isinstance(node, List)
        assert len(node.children) == 1
        assert "Hologram" in caplog.text

    def test_invalid_header_level_raises(self) -> None:
        """Test validation errors from node constructors propagate."""
        with pytest.raises(ValueError):
            dict_to_ast({"node_type": "Header", "level": -1})


@pytest.mark.unit
class TestJsonDocuments:
    """Test whole-document JSON handling."""

    def test_round_trip_preserves_tree(self) -> None:
        """Test a tree with every variant survives JSON."""
        nodes = [
            Header(level=1, content=[Text("Intro", italic=True)]),
            List(children=[Text("See "), Url(url="https://x.test/a_(b)", content=[Text("docs")], target="_blank")]),
            Url(url="https://x.test", content=[Button(content=[Text("Open")])]),
            Image(src="img/a.png", alt="A", title="T", width=120.5),
            Code(content="print(1)", language="python"),
            ItemsList(ordered=True, start=3, items=[List(children=[Text("a")])]),
            Grid(rows=[[GridCell(children=[Text("h")], rowspan=2)]]),
            Infobox(kind="negative", children=[Text("careful")]),
            Survey(survey_id="s", groups=[SurveyGroup(name="q", options=["x"])]),
            YouTube(video_id="dQw4w9WgXcQ", env=("web",)),
            Import(url="u", title="t", children=[Text("imported")]),
        ]

        loaded = json_to_nodes(nodes_to_json(nodes))

        assert loaded == nodes

    def test_document_has_schema_version(self) -> None:
        """Test the document envelope."""
        data = json.loads(nodes_to_json(Text("x")))

        assert data["schema_version"] == 1
        assert data["nodes"][0]["node_type"] == "Text"

    def test_bare_list_and_single_node_accepted(self) -> None:
        """Test inputs without the envelope."""
        assert json_to_nodes('[{"node_type": "Text", "content": "a"}]') == [Text("a")]
        assert json_to_nodes('{"node_type": "Text", "content": "b"}') == [Text("b")]

    def test_invalid_json_raises_parsing_error(self) -> None:
        """Test malformed JSON."""
        with pytest.raises(ParsingError, match="Invalid JSON") as exc_info:
            json_to_nodes("{not json", source="lab.json")

        assert exc_info.value.source == "lab.json"
        assert exc_info.value.original_error is not None

    def test_unsupported_schema_version(self) -> None:
        """Test a newer schema version is rejected."""
        with pytest.raises(ParsingError, match="Unsupported schema version: 2"):
            json_to_nodes('{"schema_version": 2, "nodes": []}')

    def test_unknown_node_becomes_parsing_error(self) -> None:
        """Test strict-mode failures are reported as ParsingError."""
        with pytest.raises(ParsingError, match="Unknown node type"):
            json_to_nodes('{"nodes": [{"node_type": "Nope"}]}')

    def test_nodes_must_be_a_list(self) -> None:
        """Test a scalar nodes field is rejected."""
        with pytest.raises(ParsingError, match="Expected a list"):
            json_to_nodes('{"nodes": 3}')

    def test_lenient_drops_unknown_roots(self) -> None:
        """Test lenient mode keeps the known roots."""
        nodes = json_to_nodes('[{"node_type": "Nope"}, {"node_type": "Text", "content": "ok"}]', strict_mode=False)

        assert nodes == [Text("ok")]

    def test_load_nodes_reads_file(self, tmp_path) -> None:
        """Test loading from disk."""
        path = tmp_path / "lab.json"
        path.write_text(nodes_to_json([Text("é")]), encoding="utf-8")

        assert load_nodes(path) == [Text("é")]


@pytest.mark.unit
class TestMalformedInput:
    """Test inputs that must fail as ParsingError rather than crash."""

    def test_string_env_is_rejected(self) -> None:
        """Test an env given as a string is not split into characters."""
        with pytest.raises(ParsingError, match="'env' must be a list of strings"):
            json_to_nodes('[{"node_type":"Text","content":"hi","env":"web"}]')

    def test_non_string_env_tags_are_rejected(self) -> None:
        """Test every env tag must be a string."""
        with pytest.raises(ParsingError, match="env"):
            json_to_nodes('[{"node_type":"Text","content":"hi","env":["web", 3]}]')

    def test_env_list_is_kept(self) -> None:
        """Test a well-formed env list and an explicit null."""
        nodes = json_to_nodes(
            '[{"node_type":"Text","content":"a","env":["web","print"]}, {"node_type":"Text","env":null}]'
        )

        assert nodes[0].env == ("print", "web")
        assert nodes[1].env == ()

    def test_string_env_rejected_in_lenient_mode(self) -> None:
        """Test lenient mode only drops unknown types, not malformed fields."""
        with pytest.raises(ParsingError):
            json_to_nodes('[{"node_type":"Text","content":"hi","env":"web"}]', strict_mode=False)

    def test_deeply_nested_json(self) -> None:
        """Test JSON nested past the decoder's recursion limit."""
        depth = 3000
        json_str = '{"node_type":"List","children":[' * depth + "]}" * depth

        with pytest.raises(ParsingError, match="recursion limit") as exc_info:
            json_to_nodes(json_str, source="deep.json")

        assert isinstance(exc_info.value.original_error, RecursionError)
        assert exc_info.value.source == "deep.json"

    def test_deeply_nested_node_tree(self) -> None:
        """Test a tree the decoder accepts but the loader cannot rebuild."""
        depth = 300
        json_str = '{"node_type":"List","children":[' * depth + '{"node_type":"Text","content":"x"}' + "]}" * depth

        with pytest.raises(ParsingError, match="recursion limit") as exc_info:
            json_to_nodes(json_str)

        assert isinstance(exc_info.value.original_error, RecursionError)
