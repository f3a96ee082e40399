"""Tests for the SDL schema parser."""

import pytest

from gql_tsgen.core.parser import SchemaParseError, SchemaParser

from .conftest import SCHEMA_SDL


class TestParseSource:
    """Tests for SchemaParser.parse_source."""

    def test_definitions(self, schema_ir):
        assert list(schema_ir.scalars) == ["AWSJSON"]
        assert list(schema_ir.enums) == ["Status"]
        assert list(schema_ir.interfaces) == ["Entity"]
        assert list(schema_ir.types) == ["Node", "Tag"]
        assert list(schema_ir.inputs) == ["NodeInput"]

    def test_root_fields(self, schema_ir):
        assert [op.name for op in schema_ir.queries] == ["getNode", "listNodes", "getStatus"]
        assert [op.name for op in schema_ir.mutations] == ["createNode", "updateSettings"]
        assert set(schema_ir.root_fields) == {
            "getNode", "listNodes", "getStatus", "createNode", "updateSettings",
        }

    def test_subscriptions_ignored(self, schema_ir):
        assert "onNode" not in schema_ir.root_fields
        assert "Subscription" not in schema_ir.types

    def test_field_types(self, schema_ir):
        tags = next(f for f in schema_ir.types["Node"].fields if f.name == "tags")
        assert tags.type_name == "Tag"
        assert tags.is_list is True
        assert tags.is_optional is False

        list_nodes = schema_ir.root_fields["listNodes"]
        assert list_nodes.is_return_list is True
        assert list_nodes.arguments[0].name == "limit"
        assert list_nodes.arguments[0].is_optional is True

    def test_interfaces_recorded(self, schema_ir):
        assert schema_ir.types["Node"].interfaces == ["Entity"]

    def test_extensions_merge(self):
        parser = SchemaParser()
        parser.parse_source("type Node { id: ID! }\ntype Query { getNode: Node }")
        ir = parser.parse_source(
            "extend type Node { payload: AWSJSON }\nextend type Query { listNodes: [Node] }"
        )

        assert [f.name for f in ir.types["Node"].fields] == ["id", "payload"]
        assert [op.name for op in ir.queries] == ["getNode", "listNodes"]

    def test_nested_lists(self):
        ir = SchemaParser().parse_source("type Grid { cells: [[Int!]!] }")
        cells = ir.types["Grid"].fields[0]
        assert cells.type_name == "Int"
        assert cells.is_list is True

    def test_syntax_error(self):
        with pytest.raises(SchemaParseError, match="Error parsing broken.graphql"):
            SchemaParser().parse_source("type {", "broken.graphql")


class TestParseAll:
    """Tests for SchemaParser.parse_all."""

    def test_single_file(self, tmp_path):
        schema_file = tmp_path / "schema.graphql"
        schema_file.write_text(SCHEMA_SDL)

        ir = SchemaParser(str(schema_file)).parse_all()
        assert "Node" in ir.types

    def test_directory(self, tmp_path):
        (tmp_path / "types.graphqls").write_text("scalar AWSJSON\ntype Node { payload: AWSJSON }")
        (tmp_path / "query.graphqls").write_text("type Query { getNode: Node }")
        (tmp_path / "README.md").write_text("not a schema")

        ir = SchemaParser(str(tmp_path)).parse_all()
        assert "Node" in ir.types
        assert "getNode" in ir.root_fields
