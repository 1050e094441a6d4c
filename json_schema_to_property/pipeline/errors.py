"""
Errors raised while mapping a schema into a Property tree.
"""

from __future__ import annotations


class PropertyMappingError(Exception):
    """Base class for fatal mapping failures."""

    pass


class SchemaShapeError(PropertyMappingError):
    """Raised when a schema field has a shape that cannot be mapped.

    This aborts mapping of the enclosing schema and of every schema that
    contains it. The document should be reported as malformed.

    Attributes:
        path: Location of the offending schema (e.g. ``#/properties/pet``)
        field: Name of the offending field (e.g. ``required``)
    """

    def __init__(self, message: str, path: str = "", field: str = ""):
        super().__init__(f"{message} at {path}" if path else message)
        self.path = path
        self.field = field
