"""
Property AST module.

Contains the Property node definitions and the mapper that builds them
from decoded JSON schemas.
"""

from __future__ import annotations

from .factory import PropertyFactory, SwaggerPropertyFactory
from .mapper import PropertyMapper, map_property
from .nodes import (
    ArrayProperty,
    ConstraintBag,
    MapProperty,
    ObjectProperty,
    Property,
    PropertyId,
    RefFormat,
    RefProperty,
    ScalarProperty,
    XmlMetadata,
)
from .type_resolver import resolve_type

__all__ = [
    "Property",
    "RefProperty",
    "ObjectProperty",
    "MapProperty",
    "ArrayProperty",
    "ScalarProperty",
    "XmlMetadata",
    "ConstraintBag",
    "PropertyId",
    "RefFormat",
    "PropertyFactory",
    "SwaggerPropertyFactory",
    "PropertyMapper",
    "map_property",
    "resolve_type",
]
