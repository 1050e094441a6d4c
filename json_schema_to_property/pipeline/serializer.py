"""
Render a Property tree back to Swagger-shaped JSON.
"""

from __future__ import annotations

from typing import Any, assert_never

from .property_ast.nodes import (
    ArrayProperty,
    BaseProperty,
    MapProperty,
    ObjectProperty,
    Property,
    RefProperty,
    ScalarProperty,
    XmlMetadata,
)


def property_to_dict(prop: Property) -> dict[str, Any]:
    """
    Convert a Property into a JSON-serializable schema dictionary.

    Absent values are omitted. Vendor extensions come last, under their
    original x-* names.
    """
    match prop:
        case RefProperty():
            result: dict[str, Any] = {"$ref": prop.ref}
        case ObjectProperty():
            result = {"type": "object"}
            if prop.properties:
                result["properties"] = {name: property_to_dict(child) for name, child in prop.properties.items()}
            if prop.required:
                result["required"] = list(prop.required)
        case MapProperty():
            result = {
                "type": "object",
                "additionalProperties": property_to_dict(prop.value_type),
                "minProperties": prop.min_properties,
                "maxProperties": prop.max_properties,
            }
        case ArrayProperty():
            result = {
                "type": "array",
                "minItems": prop.min_items,
                "maxItems": prop.max_items,
                "uniqueItems": prop.unique_items,
            }
            if prop.items is not None:
                result["items"] = property_to_dict(prop.items)
        case ScalarProperty():
            result = {
                "type": prop.type,
                "format": prop.format,
                "enum": list(prop.enum) if prop.enum is not None else None,
                "default": prop.default,
                "pattern": prop.pattern,
                "minLength": prop.min_length,
                "maxLength": prop.max_length,
                "minimum": prop.minimum,
                "maximum": prop.maximum,
                "exclusiveMinimum": prop.exclusive_minimum,
                "exclusiveMaximum": prop.exclusive_maximum,
                "readOnly": prop.read_only,
                "example": prop.example,
            }
        case _:
            assert_never(prop)

    result = {key: value for key, value in result.items() if value is not None}
    result.update(_common_fields(prop))
    return result


def _common_fields(prop: BaseProperty) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    if prop.title is not None:
        fields["title"] = prop.title
    if prop.description is not None:
        fields["description"] = prop.description
    if prop.xml is not None:
        fields["xml"] = xml_to_dict(prop.xml)
    fields.update(prop.vendor_extensions)
    return fields


def xml_to_dict(xml: XmlMetadata) -> dict[str, Any]:
    values = {
        "name": xml.name,
        "namespace": xml.namespace,
        "prefix": xml.prefix,
        "attribute": xml.attribute,
        "wrapped": xml.wrapped,
    }
    return {key: value for key, value in values.items() if value is not None}
