"""Tests for docingest.models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from docingest.models import (
    DocumentType,
    Endpoint,
    HTTPMethod,
    Parameter,
    ParameterLocation,
    ParsedDocument,
)


class TestParameter:
    def test_accepts_openapi_spelling(self) -> None:
        param = Parameter.model_validate(
            {"name": "id", "in": "path", "required": True, "schema": {"type": "string"}}
        )
        assert param.location == ParameterLocation.PATH
        assert param.schema_ == {"type": "string"}

    def test_dumps_openapi_spelling(self) -> None:
        param = Parameter(name="q", location=ParameterLocation.QUERY)
        dumped = param.model_dump(by_alias=True, mode="json")
        assert dumped["in"] == "query"
        assert dumped["schema"] == {}

    def test_unknown_location_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Parameter.model_validate({"name": "b", "in": "body"})


class TestEndpoint:
    def test_defaults(self) -> None:
        endpoint = Endpoint(path="/a", method=HTTPMethod.GET)
        assert endpoint.parameters == []
        assert endpoint.responses == {}
        assert endpoint.tags == []
        assert endpoint.request_body is None
        assert endpoint.deprecated is False

    def test_frozen(self) -> None:
        endpoint = Endpoint(path="/a", method=HTTPMethod.GET)
        with pytest.raises(ValidationError):
            endpoint.path = "/b"


class TestParsedDocument:
    def test_metadata_value_kinds(self) -> None:
        document = ParsedDocument(
            title="t",
            type=DocumentType.EXCEL,
            metadata={"sheets": ["A"], "pages": 3, "source": "x.xlsx", "version": None},
        )
        assert document.metadata["sheets"] == ["A"]
        assert document.content == ""
        assert document.endpoints is None

    def test_metadata_rejects_nested_objects(self) -> None:
        with pytest.raises(ValidationError):
            ParsedDocument(title="t", type=DocumentType.TEXT, metadata={"bad": {"a": 1}})
