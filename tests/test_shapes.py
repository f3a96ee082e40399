"""Tests for field shape trees and annotated names."""

import pytest

from gql_tsgen.core.shapes import (
    ObjectShape,
    ScalarShape,
    ShapeField,
    annotate_name,
    element_variable,
    parse_annotated_name,
)


class TestParseAnnotatedName:
    """Tests for parse_annotated_name."""

    def test_plain_name(self):
        assert parse_annotated_name("status") == ("status", False, False)

    def test_mandatory(self):
        assert parse_annotated_name("status!") == ("status", True, False)

    def test_array(self):
        assert parse_annotated_name("tags[]") == ("tags", False, True)

    def test_mandatory_array(self):
        """Both markers are stripped; '!' comes last."""
        assert parse_annotated_name("tags[]!") == ("tags", True, True)

    def test_markers_only_stripped_when_trailing(self):
        assert parse_annotated_name("a!b") == ("a!b", False, False)


class TestAnnotateName:
    """Tests for annotate_name."""

    def test_flags(self):
        assert annotate_name("tags") == "tags"
        assert annotate_name("tags", mandatory=True) == "tags!"
        assert annotate_name("tags", is_array=True) == "tags[]"
        assert annotate_name("tags", mandatory=True, is_array=True) == "tags[]!"


class TestObjectShape:
    """Tests for building shape trees from mappings."""

    def test_from_mapping_decodes_keys(self):
        shape = ObjectShape.from_mapping({"tags[]!": {"meta": "AWSJSON"}})

        assert len(shape.fields) == 1
        tags = shape.fields[0]
        assert tags.name == "tags"
        assert tags.mandatory is True
        assert tags.is_array is True
        assert tags.shape == ObjectShape((ShapeField(name="meta", shape=ScalarShape("AWSJSON")),))

    def test_from_mapping_keeps_order(self):
        shape = ObjectShape.from_mapping({"b": "String", "a": "Int", "c": "ID"})
        assert [f.name for f in shape.fields] == ["b", "a", "c"]

    def test_from_mapping_accepts_shapes(self):
        shape = ObjectShape.from_mapping({"id!": ScalarShape("ID")})
        assert shape.fields[0].shape == ScalarShape("ID")
        assert shape.fields[0].mandatory is True

    def test_to_mapping(self):
        mapping = {"id!": "ID", "tags[]!": {"name!": "String", "meta": "AWSJSON"}}
        assert ObjectShape.from_mapping(mapping).to_mapping() == mapping

    def test_empty_shape_is_falsy(self):
        assert not ObjectShape()
        assert ObjectShape.from_mapping({"a": "String"})


class TestShapeField:
    """Tests for ShapeField helpers."""

    def test_element_name_drops_last_character(self):
        assert ShapeField(name="items", shape=ScalarShape("String")).element_name == "item"

    def test_element_name_is_naive(self):
        assert ShapeField(name="children", shape=ScalarShape("String")).element_name == "childre"

    def test_element_name_avoids_reserved_words(self):
        assert ShapeField(name="cases", shape=ScalarShape("String")).element_name == "case_"

    def test_annotated_name(self):
        f = ShapeField(name="tags", shape=ScalarShape("String"), mandatory=True, is_array=True)
        assert f.annotated_name == "tags[]!"


class TestElementVariable:
    """Tests for element_variable."""

    @pytest.mark.parametrize("name, expected", [
        ("items", "item"),
        ("cases", "case_"),
        ("defaults", "default_"),
        ("news", "new_"),
        ("JSONs", "JSON_"),
        ("Objects", "Object_"),
        ("x", "_"),
    ])
    def test_names(self, name, expected):
        assert element_variable(name) == expected
