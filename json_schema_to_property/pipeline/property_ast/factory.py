"""
Leaf Property construction.

A PropertyFactory turns a type, a format and a ConstraintBag into a
concrete Property, or returns None when it does not recognise the
combination. The mapper trusts its answer.
"""

from __future__ import annotations

from typing import Protocol

from .nodes import ArrayProperty, ConstraintBag, ObjectProperty, Property, ScalarProperty

# Swagger 2.0 primitive types. "format" is open-valued, so any format is
# accepted for these.
SCALAR_TYPES = frozenset({"string", "integer", "number", "boolean", "file"})


class PropertyFactory(Protocol):
    def build(self, type_name: str | None, format: str | None, constraints: ConstraintBag) -> Property | None: ...


class SwaggerPropertyFactory:
    """Builds leaf Properties for the Swagger 2.0 data types."""

    def build(self, type_name: str | None, format: str | None, constraints: ConstraintBag) -> Property | None:
        if type_name in SCALAR_TYPES:
            return self._build_scalar(type_name, format, constraints)
        if type_name == "array":
            return ArrayProperty(
                title=constraints.title,
                description=constraints.description,
                vendor_extensions=constraints.vendor_extensions,
                min_items=constraints.min_items,
                max_items=constraints.max_items,
                unique_items=constraints.unique_items,
            )
        # Unreachable from PropertyMapper, which maps "object" itself; kept
        # for callers using the factory directly
        if type_name == "object":
            return ObjectProperty(
                title=constraints.title,
                description=constraints.description,
                vendor_extensions=constraints.vendor_extensions,
            )
        return None

    def _build_scalar(self, type_name: str, format: str | None, constraints: ConstraintBag) -> ScalarProperty:
        # Length and pattern only mean something for strings, bounds for numbers
        is_string = type_name == "string"
        is_numeric = type_name in ("integer", "number")

        return ScalarProperty(
            type=type_name,
            format=format,
            title=constraints.title,
            description=constraints.description,
            vendor_extensions=constraints.vendor_extensions,
            enum=constraints.enum,
            default=constraints.default,
            example=constraints.example,
            read_only=constraints.read_only,
            pattern=constraints.pattern if is_string else None,
            min_length=constraints.min_length if is_string else None,
            max_length=constraints.max_length if is_string else None,
            minimum=constraints.minimum if is_numeric else None,
            maximum=constraints.maximum if is_numeric else None,
            exclusive_minimum=constraints.exclusive_minimum if is_numeric else None,
            exclusive_maximum=constraints.exclusive_maximum if is_numeric else None,
        )
