"""
Property tree node definitions.

These nodes are the typed, in-memory representation of a Swagger 2.0
schema object. A Property is one of five variants; consumers dispatch on
the variant with ``match`` and must handle every case.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import StrEnum
from typing import Any


class PropertyId(StrEnum):
    """Canonical schema field names."""

    TYPE = "type"
    FORMAT = "format"
    TITLE = "title"
    DESCRIPTION = "description"
    EXAMPLE = "example"
    ENUM = "enum"
    DEFAULT = "default"
    PATTERN = "pattern"
    DISCRIMINATOR = "discriminator"
    MIN_ITEMS = "minItems"
    MAX_ITEMS = "maxItems"
    MIN_PROPERTIES = "minProperties"
    MAX_PROPERTIES = "maxProperties"
    MIN_LENGTH = "minLength"
    MAX_LENGTH = "maxLength"
    MINIMUM = "minimum"
    MAXIMUM = "maximum"
    EXCLUSIVE_MINIMUM = "exclusiveMinimum"
    EXCLUSIVE_MAXIMUM = "exclusiveMaximum"
    UNIQUE_ITEMS = "uniqueItems"
    READ_ONLY = "readOnly"
    REQUIRED = "required"
    VENDOR_EXTENSIONS = "vendorExtensions"


class RefFormat(StrEnum):
    """Where a $ref points to."""

    INTERNAL = "internal"
    RELATIVE = "relative"
    URL = "url"


@dataclass(frozen=True)
class XmlMetadata:
    """XML serialization hints of a schema (the ``xml`` object)."""

    name: str | None = None
    namespace: str | None = None
    prefix: str | None = None
    attribute: bool | None = None
    wrapped: bool | None = None


@dataclass(frozen=True)
class ConstraintBag:
    """Constraints read from a leaf schema and handed to a PropertyFactory."""

    type: str | None = None
    format: str | None = None
    title: str | None = None
    description: str | None = None
    example: str | None = None
    enum: list[str] | None = None
    default: str | None = None
    pattern: str | None = None
    discriminator: str | None = None
    min_items: int | None = None
    max_items: int | None = None
    min_properties: int | None = None
    max_properties: int | None = None
    min_length: int | None = None
    max_length: int | None = None
    minimum: float | None = None
    maximum: float | None = None
    exclusive_minimum: bool | None = None
    exclusive_maximum: bool | None = None
    unique_items: bool | None = None
    read_only: bool | None = None
    vendor_extensions: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[PropertyId, Any]:
        """Keyed view of the bag using canonical field names, absent values omitted."""
        result: dict[PropertyId, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            result[_BAG_FIELD_IDS[f.name]] = value
        return result


_BAG_FIELD_IDS = {
    "type": PropertyId.TYPE,
    "format": PropertyId.FORMAT,
    "title": PropertyId.TITLE,
    "description": PropertyId.DESCRIPTION,
    "example": PropertyId.EXAMPLE,
    "enum": PropertyId.ENUM,
    "default": PropertyId.DEFAULT,
    "pattern": PropertyId.PATTERN,
    "discriminator": PropertyId.DISCRIMINATOR,
    "min_items": PropertyId.MIN_ITEMS,
    "max_items": PropertyId.MAX_ITEMS,
    "min_properties": PropertyId.MIN_PROPERTIES,
    "max_properties": PropertyId.MAX_PROPERTIES,
    "min_length": PropertyId.MIN_LENGTH,
    "max_length": PropertyId.MAX_LENGTH,
    "minimum": PropertyId.MINIMUM,
    "maximum": PropertyId.MAXIMUM,
    "exclusive_minimum": PropertyId.EXCLUSIVE_MINIMUM,
    "exclusive_maximum": PropertyId.EXCLUSIVE_MAXIMUM,
    "unique_items": PropertyId.UNIQUE_ITEMS,
    "read_only": PropertyId.READ_ONLY,
    "vendor_extensions": PropertyId.VENDOR_EXTENSIONS,
}


@dataclass(frozen=True, kw_only=True)
class BaseProperty:
    """Fields shared by every Property variant."""

    title: str | None = None
    description: str | None = None

    # x-* fields of the schema, in declaration order
    vendor_extensions: dict[str, Any] = field(default_factory=dict)

    xml: XmlMetadata | None = None


@dataclass(frozen=True, kw_only=True)
class RefProperty(BaseProperty):
    """A $ref to another schema. Terminal: never has children."""

    ref: str

    @property
    def ref_format(self) -> RefFormat:
        if self.ref.startswith("#"):
            return RefFormat.INTERNAL
        if self.ref.startswith(("http://", "https://")):
            return RefFormat.URL
        return RefFormat.RELATIVE

    @property
    def simple_ref(self) -> str:
        """Name of the referenced definition, e.g. ``Pet`` for ``#/definitions/Pet``."""
        if self.ref_format is RefFormat.INTERNAL:
            return self.ref.rsplit("/", 1)[-1]
        return self.ref


@dataclass(frozen=True, kw_only=True)
class ObjectProperty(BaseProperty):
    """An object with named properties."""

    properties: dict[str, Property] = field(default_factory=dict)

    # Recorded as declared, not checked against ``properties``
    required: list[str] = field(default_factory=list)

    def is_required(self, name: str) -> bool:
        return name in self.required


@dataclass(frozen=True, kw_only=True)
class MapProperty(BaseProperty):
    """An object whose values all share one schema (``additionalProperties``)."""

    value_type: Property
    min_properties: int | None = None
    max_properties: int | None = None


@dataclass(frozen=True, kw_only=True)
class ArrayProperty(BaseProperty):
    """An array. ``items`` is only set when an items schema mapped successfully."""

    items: Property | None = None
    min_items: int | None = None
    max_items: int | None = None
    unique_items: bool | None = None


@dataclass(frozen=True, kw_only=True)
class ScalarProperty(BaseProperty):
    """A leaf value (string, integer, number, boolean, file)."""

    type: str
    format: str | None = None
    enum: list[str] | None = None
    default: str | None = None
    pattern: str | None = None
    min_length: int | None = None
    max_length: int | None = None
    minimum: float | None = None
    maximum: float | None = None
    exclusive_minimum: bool | None = None
    exclusive_maximum: bool | None = None
    read_only: bool | None = None
    example: str | None = None


type Property = RefProperty | ObjectProperty | MapProperty | ArrayProperty | ScalarProperty
