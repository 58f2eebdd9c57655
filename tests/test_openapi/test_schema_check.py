"""Tests for docingest.openapi.schema_check."""

from __future__ import annotations

from typing import Any

import pytest

from docingest.openapi.schema_check import json_kind, validate_against_schema


class TestJsonKind:
    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            (None, "null"),
            (True, "boolean"),
            (3, "number"),
            (2.5, "number"),
            ("x", "string"),
            ([1], "array"),
            ((1,), "array"),
            ({"a": 1}, "object"),
        ],
    )
    def test_kinds(self, value: Any, kind: str) -> None:
        assert json_kind(value) == kind


class TestValidateAgainstSchema:
    def test_missing_required_field(self) -> None:
        result = validate_against_schema({"name": "a"}, {"required": ["name", "age"]})
        assert result.valid is False
        assert result.errors == ["Missing required field: age"]

    def test_type_mismatch(self) -> None:
        result = validate_against_schema(
            {"count": "5"}, {"properties": {"count": {"type": "number"}}}
        )
        assert result.valid is False
        assert result.errors == ["Field count: expected number, got string"]

    def test_valid_data(self) -> None:
        schema = {
            "required": ["id", "name"],
            "properties": {"id": {"type": "integer"}, "name": {"type": "string"}},
        }
        result = validate_against_schema({"id": 7, "name": "Rex"}, schema)
        assert result.valid is True
        assert result.errors == []

    @pytest.mark.parametrize("schema", [None, {}])
    def test_absent_schema_is_valid(self, schema: Any) -> None:
        result = validate_against_schema({"anything": 1}, schema)
        assert result.valid is True
        assert result.errors == []

    def test_boolean_is_not_a_number(self) -> None:
        result = validate_against_schema(
            {"flag": True}, {"properties": {"flag": {"type": "number"}}}
        )
        assert result.errors == ["Field flag: expected number, got boolean"]

    def test_integer_accepts_whole_numbers_only(self) -> None:
        schema = {"properties": {"n": {"type": "integer"}}}
        assert validate_against_schema({"n": 3}, schema).valid
        assert validate_against_schema({"n": 3.0}, schema).valid
        assert validate_against_schema({"n": 3.5}, schema).errors == [
            "Field n: expected integer, got number"
        ]

    def test_integer_beyond_float_range(self) -> None:
        schema = {"properties": {"n": {"type": "integer"}}}
        assert validate_against_schema({"n": 10**400}, schema).valid
        assert validate_against_schema({"n": float("inf")}, schema).errors == [
            "Field n: expected integer, got number"
        ]

    def test_null_value(self) -> None:
        result = validate_against_schema(
            {"tag": None}, {"properties": {"tag": {"type": "string"}}}
        )
        assert result.errors == ["Field tag: expected string, got null"]

    def test_type_list(self) -> None:
        schema = {"properties": {"tag": {"type": ["string", "null"]}}}
        assert validate_against_schema({"tag": None}, schema).valid
        assert validate_against_schema({"tag": "a"}, schema).valid

    def test_absent_optional_property_not_checked(self) -> None:
        result = validate_against_schema({}, {"properties": {"tag": {"type": "string"}}})
        assert result.valid is True

    def test_non_string_required_entries_ignored(self) -> None:
        result = validate_against_schema({}, {"required": [{"x": 1}, 7, "id"]})
        assert result.errors == ["Missing required field: id"]

    def test_non_object_data_has_no_fields(self) -> None:
        result = validate_against_schema(["a"], {"required": ["name"]})
        assert result.errors == ["Missing required field: name"]

    def test_errors_accumulate(self) -> None:
        schema = {
            "required": ["id", "name"],
            "properties": {"name": {"type": "string"}},
        }
        result = validate_against_schema({"name": 1}, schema)
        assert result.errors == [
            "Missing required field: id",
            "Field name: expected string, got number",
        ]
