"""
Pipeline - JSON Schema to Property tree mapper.

Mapping happens in one recursive pass per schema:

1. Type resolution: reduce the "type" field to one type name
2. Branch selection: $ref, object/map, array or leaf
3. Recursion into "properties", "additionalProperties" and "items"
4. Leaf construction through a PropertyFactory
5. Attachment of vendor extensions and XML hints

Warnings go to an injected diagnostic sink; a malformed "required" field
raises SchemaShapeError.
"""

from __future__ import annotations

from .config import MapperConfig
from .diagnostics import Diagnostic, DiagnosticCode, DiagnosticCollector, DiagnosticSink
from .errors import PropertyMappingError, SchemaShapeError
from .property_ast import PropertyMapper, SwaggerPropertyFactory, map_property
from .serializer import property_to_dict

__all__ = [
    "PropertyMapper",
    "map_property",
    "MapperConfig",
    "SwaggerPropertyFactory",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticCollector",
    "DiagnosticSink",
    "PropertyMappingError",
    "SchemaShapeError",
    "property_to_dict",
]
