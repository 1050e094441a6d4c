"""JSON Schema to Property

A Python package for mapping Swagger 2.0 schema objects into a typed,
immutable Property tree for validators, code generators and documentation
renderers.
"""

__version__ = "1.0.1"
__author__ = "François Lagunas"

from .pipeline import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticCollector,
    MapperConfig,
    PropertyMapper,
    PropertyMappingError,
    SchemaShapeError,
    SwaggerPropertyFactory,
    map_property,
    property_to_dict,
)
from .pipeline.property_ast.nodes import (
    ArrayProperty,
    MapProperty,
    ObjectProperty,
    Property,
    RefProperty,
    ScalarProperty,
    XmlMetadata,
)

__all__ = [
    "PropertyMapper",
    "map_property",
    "MapperConfig",
    "SwaggerPropertyFactory",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticCollector",
    "PropertyMappingError",
    "SchemaShapeError",
    "property_to_dict",
    "Property",
    "RefProperty",
    "ObjectProperty",
    "MapProperty",
    "ArrayProperty",
    "ScalarProperty",
    "XmlMetadata",
]
