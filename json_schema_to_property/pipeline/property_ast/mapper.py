"""
Schema to Property mapper.

Walks a decoded Swagger 2.0 schema recursively and decides, for every
node, which Property variant it stands for:

1. $ref -> RefProperty (nothing else on the node is looked at)
2. object type or "properties" -> MapProperty or ObjectProperty
3. array type with "items" -> ArrayProperty
4. anything else -> a leaf built by the PropertyFactory

Recoverable anomalies are reported to the diagnostic sink and map to
None; only a malformed "required" field raises.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from ..config import MapperConfig
from ..diagnostics import Diagnostic, DiagnosticCode, DiagnosticCollector, DiagnosticSink
from .constraints import extract_constraints, get_boolean, get_field, get_integer, get_required, get_string
from .extensions import collect_vendor_extensions, extract_xml
from .factory import PropertyFactory, SwaggerPropertyFactory
from .nodes import ArrayProperty, MapProperty, ObjectProperty, Property, PropertyId, RefProperty
from .type_resolver import OBJECT_TYPE, resolve_type

ARRAY_TYPE = "array"


class PropertyMapper:
    """Maps decoded JSON schemas into Property trees."""

    def __init__(
        self,
        config: MapperConfig | None = None,
        sink: DiagnosticSink | None = None,
        factory: PropertyFactory | None = None,
    ):
        """
        Initialize the mapper.

        Args:
            config: Mapping options (defaults to MapperConfig())
            sink: Receives warnings (defaults to a DiagnosticCollector)
            factory: Builds leaf Properties (defaults to SwaggerPropertyFactory)
        """
        self.config = config or MapperConfig()
        self.sink = sink if sink is not None else DiagnosticCollector()
        self.factory = factory or SwaggerPropertyFactory()

    def map(self, node: Any, path: str = "#") -> Property | None:
        """
        Map one schema, and everything below it, into a Property.

        Args:
            node: The decoded schema (never modified)
            path: Location of the schema, used in diagnostics and errors

        Returns:
            The Property, or None if the schema could not be mapped

        Raises:
            SchemaShapeError: if a "required" field is not an array
        """
        prop = self._map_node(node, path)
        if prop is not None and self.config.attach_xml:
            xml = extract_xml(node, self.sink, path)
            if xml is not None:
                prop = replace(prop, xml=xml)
        return prop

    def map_definitions(self, document: dict[str, Any]) -> dict[str, Property]:
        """
        Map every entry of a document's "definitions" object.

        Entries that do not map are left out. Order is preserved. A
        "definitions" value that is not an object maps to nothing.
        """
        result: dict[str, Property] = {}
        definitions = document.get("definitions")
        if definitions is None:
            return result
        if not isinstance(definitions, dict):
            self.sink(
                Diagnostic(
                    DiagnosticCode.INVALID_DEFINITIONS,
                    f"Ignoring non-object definitions value of type {type(definitions).__name__}",
                    "#/definitions",
                )
            )
            return result
        for name, schema in definitions.items():
            prop = self.map(schema, f"#/definitions/{name}")
            if prop is not None:
                result[name] = prop
        return result

    def _map_node(self, node: Any, path: str) -> Property | None:
        title = get_string(node, PropertyId.TITLE)
        format = get_string(node, PropertyId.FORMAT)
        description = get_string(node, PropertyId.DESCRIPTION)

        ref = get_field(node, "$ref")
        if ref is not None:
            return RefProperty(ref=str(ref), title=title, description=description)

        type_name = resolve_type(node, self.sink, path)

        if type_name == OBJECT_TYPE or get_field(node, "properties") is not None:
            map_prop = self._map_additional_properties(node, path, title, description)
            if map_prop is not None:
                return map_prop
            return self._map_object(node, path, title, description)

        if type_name == ARRAY_TYPE:
            items = get_field(node, "items")
            item_prop = self.map(items, f"{path}/items") if items is not None else None
            if item_prop is not None:
                return ArrayProperty(
                    items=item_prop,
                    title=title,
                    description=description,
                    min_items=get_integer(node, PropertyId.MIN_ITEMS),
                    max_items=get_integer(node, PropertyId.MAX_ITEMS),
                    unique_items=get_boolean(node, PropertyId.UNIQUE_ITEMS),
                    vendor_extensions=self._vendor_extensions(node),
                )

        constraints = extract_constraints(node, type_name, description, self._vendor_extensions(node))
        output = self.factory.build(type_name, format, constraints)
        if output is None:
            self.sink(
                Diagnostic(
                    DiagnosticCode.UNMAPPED_LEAF,
                    f"No property from type {type_name!r}, format {format!r}",
                    path,
                )
            )
            return None
        return replace(output, description=description)

    def _map_additional_properties(
        self,
        node: Any,
        path: str,
        title: str | None,
        description: str | None,
    ) -> MapProperty | None:
        """MapProperty for an object-shaped "additionalProperties", if its schema maps."""
        additional = get_field(node, "additionalProperties")
        if not isinstance(additional, dict):
            return None

        value_type = self.map(additional, f"{path}/additionalProperties")
        if value_type is None:
            return None

        return MapProperty(
            value_type=value_type,
            title=title,
            description=description,
            min_properties=get_integer(node, PropertyId.MIN_PROPERTIES),
            max_properties=get_integer(node, PropertyId.MAX_PROPERTIES),
            vendor_extensions=self._vendor_extensions(node),
        )

    def _map_object(
        self,
        node: Any,
        path: str,
        title: str | None,
        description: str | None,
    ) -> ObjectProperty | ArrayProperty:
        properties: dict[str, Property] = {}
        array_quirk = False

        declared = get_field(node, "properties")
        if isinstance(declared, dict):
            for name, child in declared.items():
                prop = self.map(child, f"{path}/properties/{name}")
                if prop is not None:
                    properties[name] = prop
                    continue

                # Legacy documents sometimes wrap an array as
                # {"properties": {"type": "array", ...}}
                if name == "type" and child == ARRAY_TYPE:
                    array_quirk = True
                if name == "description" and isinstance(child, str):
                    description = child

        if array_quirk:
            self.sink(
                Diagnostic(
                    DiagnosticCode.ARRAY_QUIRK,
                    "Object declares a property 'type' with value 'array'",
                    path,
                )
            )

        if array_quirk and self.config.enable_array_quirk:
            items = next(iter(properties.values())) if len(properties) == 1 else None
            return ArrayProperty(
                items=items,
                title=title,
                description=description,
                vendor_extensions=self._vendor_extensions(node),
            )

        return ObjectProperty(
            properties=properties,
            required=get_required(node, PropertyId.REQUIRED, path),
            title=title,
            description=description,
            vendor_extensions=self._vendor_extensions(node),
        )

    def _vendor_extensions(self, node: Any) -> dict[str, Any]:
        if not self.config.collect_vendor_extensions:
            return {}
        return collect_vendor_extensions(node)


def map_property(
    node: Any,
    config: MapperConfig | None = None,
    sink: DiagnosticSink | None = None,
    factory: PropertyFactory | None = None,
) -> Property | None:
    """Map a single schema with a fresh PropertyMapper."""
    return PropertyMapper(config, sink, factory).map(node)
