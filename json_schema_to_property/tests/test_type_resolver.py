"""
Tests for collapsing the "type" field to a single type name.
"""

from __future__ import annotations

import pytest

from json_schema_to_property.pipeline import DiagnosticCode, DiagnosticCollector
from json_schema_to_property.pipeline.property_ast import resolve_type


@pytest.fixture
def sink():
    return DiagnosticCollector(log=None)


class TestResolveType:
    def test_missing_type(self, sink):
        assert resolve_type({"description": "no type"}, sink) is None
        assert sink.diagnostics == []

    def test_non_object_node(self, sink):
        assert resolve_type("array", sink) is None
        assert sink.diagnostics == []

    def test_string_type_is_returned_verbatim(self, sink):
        assert resolve_type({"type": "integer"}, sink) == "integer"
        assert resolve_type({"type": "Whatever"}, sink) == "Whatever"
        assert sink.diagnostics == []

    def test_nullable_type(self, sink):
        assert resolve_type({"type": ["string", "null"]}, sink) == "string"
        assert resolve_type({"type": ["null", "string"]}, sink) == "string"
        assert sink.diagnostics == []

    def test_union_degrades_to_object(self, sink):
        assert resolve_type({"type": ["string", "integer"]}, sink) == "object"
        assert sink.diagnostics == []

    def test_duplicate_type_warns_once(self, sink):
        assert resolve_type({"type": ["string", "string", "string"]}, sink, "#/a") == "string"
        assert sink.codes() == [DiagnosticCode.DUPLICATE_TYPE]
        assert sink.diagnostics[0].path == "#/a"

    def test_duplicate_warnings_per_distinct_name(self, sink):
        assert resolve_type({"type": ["integer", "string", "string", "integer"]}, sink) == "object"
        assert sink.codes() == [DiagnosticCode.DUPLICATE_TYPE, DiagnosticCode.DUPLICATE_TYPE]

    def test_duplicate_detection_is_order_independent(self):
        first = DiagnosticCollector(log=None)
        second = DiagnosticCollector(log=None)
        assert resolve_type({"type": ["string", "null", "string"]}, first) == "string"
        assert resolve_type({"type": ["string", "string", "null"]}, second) == "string"
        assert first.codes() == second.codes() == [DiagnosticCode.DUPLICATE_TYPE]

    def test_empty_array(self, sink):
        assert resolve_type({"type": []}, sink) is None
        assert sink.codes() == [DiagnosticCode.INVALID_TYPE]

    def test_only_null(self, sink):
        assert resolve_type({"type": ["null"]}, sink) is None
        assert sink.codes() == [DiagnosticCode.INVALID_TYPE]

    def test_non_string_entry(self, sink):
        assert resolve_type({"type": [42]}, sink) is None
        assert sink.codes() == [DiagnosticCode.INVALID_TYPE]

    def test_non_string_entry_wins_over_union(self, sink):
        assert resolve_type({"type": ["string", "integer", 42]}, sink) is None
        assert sink.codes() == [DiagnosticCode.INVALID_TYPE]

    @pytest.mark.parametrize("value", [42, True, {"name": "string"}])
    def test_invalid_type_shape(self, sink, value):
        assert resolve_type({"type": value}, sink) is None
        assert sink.codes() == [DiagnosticCode.INVALID_TYPE]
