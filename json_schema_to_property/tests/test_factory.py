"""
Tests for the default Swagger 2.0 leaf factory.
"""

from __future__ import annotations

import pytest

from json_schema_to_property.pipeline import SwaggerPropertyFactory
from json_schema_to_property.pipeline.property_ast.nodes import (
    ArrayProperty,
    ConstraintBag,
    ObjectProperty,
    ScalarProperty,
)


@pytest.fixture
def factory():
    return SwaggerPropertyFactory()


class TestSwaggerPropertyFactory:
    @pytest.mark.parametrize(
        "type_name,format",
        [
            ("string", None),
            ("string", "date-time"),
            ("string", "something-custom"),
            ("integer", "int32"),
            ("integer", "int64"),
            ("number", "double"),
            ("boolean", None),
            ("file", None),
        ],
    )
    def test_scalar_types(self, factory, type_name, format):
        prop = factory.build(type_name, format, ConstraintBag(type=type_name, format=format))

        assert isinstance(prop, ScalarProperty)
        assert prop.type == type_name
        assert prop.format == format

    @pytest.mark.parametrize("type_name", [None, "mystery", "null"])
    def test_unknown_types(self, factory, type_name):
        assert factory.build(type_name, None, ConstraintBag(type=type_name)) is None

    def test_array_without_items(self, factory):
        bag = ConstraintBag(type="array", min_items=1, max_items=2, unique_items=True, title="List")
        assert factory.build("array", None, bag) == ArrayProperty(
            min_items=1,
            max_items=2,
            unique_items=True,
            title="List",
        )

    def test_object(self, factory):
        bag = ConstraintBag(type="object", description="Anything", vendor_extensions={"x-a": 1})
        assert factory.build("object", None, bag) == ObjectProperty(
            description="Anything",
            vendor_extensions={"x-a": 1},
        )

    def test_string_ignores_numeric_bounds(self, factory):
        bag = ConstraintBag(type="string", minimum=1.0, min_length=2, pattern="a+")
        prop = factory.build("string", None, bag)

        assert prop.minimum is None
        assert prop.min_length == 2
        assert prop.pattern == "a+"

    def test_integer_ignores_string_constraints(self, factory):
        bag = ConstraintBag(type="integer", minimum=1.0, exclusive_minimum=True, min_length=2)
        prop = factory.build("integer", None, bag)

        assert prop.minimum == 1.0
        assert prop.exclusive_minimum is True
        assert prop.min_length is None

    def test_common_constraints(self, factory):
        bag = ConstraintBag(
            type="boolean",
            title="Flag",
            default="true",
            example="false",
            enum=["true"],
            read_only=True,
        )
        prop = factory.build("boolean", None, bag)

        assert (prop.title, prop.default, prop.example, prop.enum, prop.read_only) == (
            "Flag",
            "true",
            "false",
            ["true"],
            True,
        )
