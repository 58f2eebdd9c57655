"""Shallow data-versus-schema checks.

:func:`validate_against_schema` answers "does this decoded request payload
look like the schema?" with two checks only: required field presence and
primitive type agreement of top-level properties. Nested objects, array
items, formats, enums, and numeric ranges are not inspected.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from docingest.models import ValidationResult


def json_kind(value: Any) -> str:
    """Return the JSON type name of a decoded Python value.

    ``bool`` is checked before ``int`` because it is an ``int`` subclass.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def validate_against_schema(
    data: Any, schema: Optional[Mapping[str, Any]]
) -> ValidationResult:
    """Check *data* against the top level of *schema*.

    Args:
        data: Decoded payload, normally a dict. Anything else is treated as
            an object with no fields.
        schema: Schema dict with optional ``required`` and ``properties``.
            ``None`` or an empty schema always validates.

    Returns:
        A :class:`~docingest.models.ValidationResult`; ``valid`` is ``True``
        iff ``errors`` is empty.

    Example::

        result = validate_against_schema({"name": "a"}, {"required": ["name", "age"]})
        assert result.errors == ["Missing required field: age"]
    """
    if not schema:
        return ValidationResult(valid=True, errors=[])

    fields: Mapping[str, Any] = data if isinstance(data, Mapping) else {}
    errors: list[str] = []

    required = schema.get("required")
    if isinstance(required, list):
        for field in required:
            if isinstance(field, str) and field not in fields:
                errors.append(f"Missing required field: {field}")

    properties = schema.get("properties")
    if isinstance(properties, Mapping):
        for field, field_schema in properties.items():
            if field not in fields or not isinstance(field_schema, Mapping):
                continue
            expected = field_schema.get("type")
            if not expected:
                continue
            actual = json_kind(fields[field])
            if not _type_matches(expected, fields[field], actual):
                errors.append(f"Field {field}: expected {expected}, got {actual}")

    return ValidationResult(valid=not errors, errors=errors)


def _type_matches(expected: Any, value: Any, actual: str) -> bool:
    # OpenAPI 3.1 allows a list of types, e.g. ["string", "null"]
    candidates = expected if isinstance(expected, list) else [expected]
    for candidate in candidates:
        if candidate == actual:
            return True
        if candidate == "integer" and actual == "number" and _is_whole(value):
            return True
    return False


def _is_whole(value: Any) -> bool:
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()
