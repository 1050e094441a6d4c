"""
Typed accessors for schema fields.

Each accessor reads one canonical field of a decoded JSON schema and
coerces it to a native value. A missing field, an explicit JSON null or a
node that is not an object all read as absent, except that an explicit
null "required" is malformed. Values are coerced, not validated.
"""

from __future__ import annotations

from typing import Any

from ..errors import SchemaShapeError
from .nodes import ConstraintBag, PropertyId


def get_field(node: Any, field_id: PropertyId | str) -> Any:
    """Return the raw value of a field, or None."""
    if not isinstance(node, dict):
        return None
    return node.get(str(field_id))


def as_text(value: Any) -> str | None:
    """Text form of a JSON scalar. Containers have none."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return None


def get_string(node: Any, field_id: PropertyId) -> str | None:
    return as_text(get_field(node, field_id))


def get_integer(node: Any, field_id: PropertyId) -> int | None:
    value = get_field(node, field_id)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return int(value)


def get_number(node: Any, field_id: PropertyId) -> float | None:
    value = get_field(node, field_id)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def get_boolean(node: Any, field_id: PropertyId) -> bool | None:
    value = get_field(node, field_id)
    return value if isinstance(value, bool) else None


def get_enum(node: Any, field_id: PropertyId = PropertyId.ENUM) -> list[str] | None:
    """
    Read an enum as a list of strings.

    Only a JSON array is accepted. Strings are kept and numbers are
    converted to text; any other element is dropped. An enum with nothing
    left reads as absent rather than empty.
    """
    value = get_field(node, field_id)
    if not isinstance(value, list):
        return None
    result = []
    for item in value:
        if isinstance(item, str):
            result.append(item)
        elif isinstance(item, (int, float)) and not isinstance(item, bool):
            result.append(str(item))
    return result or None


def get_required(node: Any, field_id: PropertyId = PropertyId.REQUIRED, path: str = "") -> list[str]:
    """
    Read the list of required property names.

    Raises:
        SchemaShapeError: if the field is present but is not an array,
            including an explicit null
    """
    if not isinstance(node, dict) or str(field_id) not in node:
        return []
    value = node[str(field_id)]
    if not isinstance(value, list):
        raise SchemaShapeError(
            f"'{field_id}' must be an array, got {type(value).__name__}",
            path=path,
            field=str(field_id),
        )
    names = (as_text(item) for item in value)
    return [name for name in names if name is not None]


def extract_constraints(
    node: Any,
    type_name: str | None,
    description: str | None,
    vendor_extensions: dict[str, Any],
) -> ConstraintBag:
    """Gather everything a PropertyFactory may need to build a leaf."""
    return ConstraintBag(
        type=type_name,
        format=get_string(node, PropertyId.FORMAT),
        title=get_string(node, PropertyId.TITLE),
        description=description,
        example=get_string(node, PropertyId.EXAMPLE),
        enum=get_enum(node, PropertyId.ENUM),
        default=get_string(node, PropertyId.DEFAULT),
        pattern=get_string(node, PropertyId.PATTERN),
        discriminator=get_string(node, PropertyId.DISCRIMINATOR),
        min_items=get_integer(node, PropertyId.MIN_ITEMS),
        max_items=get_integer(node, PropertyId.MAX_ITEMS),
        min_properties=get_integer(node, PropertyId.MIN_PROPERTIES),
        max_properties=get_integer(node, PropertyId.MAX_PROPERTIES),
        min_length=get_integer(node, PropertyId.MIN_LENGTH),
        max_length=get_integer(node, PropertyId.MAX_LENGTH),
        minimum=get_number(node, PropertyId.MINIMUM),
        maximum=get_number(node, PropertyId.MAXIMUM),
        exclusive_minimum=get_boolean(node, PropertyId.EXCLUSIVE_MINIMUM),
        exclusive_maximum=get_boolean(node, PropertyId.EXCLUSIVE_MAXIMUM),
        unique_items=get_boolean(node, PropertyId.UNIQUE_ITEMS),
        read_only=get_boolean(node, PropertyId.READ_ONLY),
        vendor_extensions=vendor_extensions,
    )
