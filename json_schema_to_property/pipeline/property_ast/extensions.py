"""
Secondary schema metadata: vendor extensions and XML hints.
"""

from __future__ import annotations

import copy
from typing import Any

from ..diagnostics import Diagnostic, DiagnosticCode, DiagnosticSink
from .constraints import as_text
from .nodes import XmlMetadata

VENDOR_EXTENSION_PREFIX = "x-"


def collect_vendor_extensions(node: Any) -> dict[str, Any]:
    """
    Collect the x-* fields of a schema.

    Only the schema's own fields are scanned, not its children. Values are
    deep-copied so the result does not share structure with the input.
    """
    if not isinstance(node, dict):
        return {}
    return {key: copy.deepcopy(value) for key, value in node.items() if key.startswith(VENDOR_EXTENSION_PREFIX)}


def extract_xml(node: Any, sink: DiagnosticSink, path: str = "") -> XmlMetadata | None:
    """Read the optional ``xml`` object of a schema."""
    if not isinstance(node, dict) or node.get("xml") is None:
        return None

    xml = node["xml"]
    if not isinstance(xml, dict):
        sink(
            Diagnostic(
                DiagnosticCode.INVALID_XML,
                f"Ignoring non-object xml value {xml!r}",
                path,
            )
        )
        return None

    def flag(name: str) -> bool | None:
        value = xml.get(name)
        return value if isinstance(value, bool) else None

    return XmlMetadata(
        name=as_text(xml.get("name")),
        namespace=as_text(xml.get("namespace")),
        prefix=as_text(xml.get("prefix")),
        attribute=flag("attribute"),
        wrapped=flag("wrapped"),
    )
