"""
Reduce a schema's ``type`` field to a single type name.

A type may be a string naming one type, or an array whose elements each
name a type. Arrays are collapsed as follows:

1. ["sometype", "null"] -> "sometype"
2. ["sometype", "othertype"] -> "object"
3. ["sometype", "sometype"] -> "sometype", with a warning
4. [] -> no type, with a warning
5. [42] -> no type, with a warning

Nullability is dropped, and unions degrade to a generic object rather
than being modelled as union types.
"""

from __future__ import annotations

from collections import Counter
from typing import Any

from ..diagnostics import Diagnostic, DiagnosticCode, DiagnosticSink
from .constraints import get_field
from .nodes import PropertyId

OBJECT_TYPE = "object"
NULL_TYPE = "null"


def resolve_type(node: Any, sink: DiagnosticSink, path: str = "") -> str | None:
    """
    Resolve the type of a schema.

    Args:
        node: The decoded schema
        sink: Receives a Diagnostic for every invalid or ambiguous type
        path: Location of the schema, for diagnostics

    Returns:
        The type name, or None if the schema has no usable type
    """
    type_value = get_field(node, PropertyId.TYPE)
    if type_value is None:
        return None

    if isinstance(type_value, str):
        return type_value

    if not isinstance(type_value, list):
        _invalid(sink, type_value, path)
        return None

    if not all(isinstance(t, str) for t in type_value):
        _invalid(sink, type_value, path)
        return None

    counts = Counter(t for t in type_value if t != NULL_TYPE)
    for type_name, count in counts.items():
        if count > 1:
            sink(
                Diagnostic(
                    DiagnosticCode.DUPLICATE_TYPE,
                    f"Ignoring duplicate type name {type_name!r} in property type {type_value!r}",
                    path,
                )
            )

    if len(counts) == 1:
        return next(iter(counts))
    if len(counts) > 1:
        return OBJECT_TYPE

    _invalid(sink, type_value, path)
    return None


def _invalid(sink: DiagnosticSink, type_value: Any, path: str) -> None:
    sink(Diagnostic(DiagnosticCode.INVALID_TYPE, f"Ignoring invalid property type {type_value!r}", path))
