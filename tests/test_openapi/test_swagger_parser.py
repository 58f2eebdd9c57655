"""Tests for docingest.openapi.parser.SwaggerParser."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import httpx
import pytest

from docingest.exceptions import SpecValidationError
from docingest.models import HTTPMethod
from docingest.openapi.parser import SwaggerParser


class TestParseSource:
    @pytest.mark.asyncio
    async def test_parses_and_resolves_file(self, petstore_path: Path) -> None:
        spec = await SwaggerParser().parse_source(str(petstore_path))
        schema = spec["paths"]["/pets/{petId}"]["get"]["responses"]["200"]["content"][
            "application/json"
        ]["schema"]
        assert "$ref" not in schema
        assert schema["properties"]["name"] == {"type": "string"}

    @pytest.mark.asyncio
    async def test_parses_url(self, petstore_raw: dict[str, Any]) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=petstore_raw)

        swagger = SwaggerParser(transport=httpx.MockTransport(handler))
        spec = await swagger.parse_source("https://example.com/openapi.json")
        assert spec["info"]["title"] == "Petstore API"

    @pytest.mark.asyncio
    async def test_logs_progress(
        self, petstore_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="docingest.openapi.parser"):
            await SwaggerParser().parse_source(str(petstore_path))
        assert "Parsing Swagger spec from" in caplog.text
        assert "Successfully parsed Swagger spec (version 3.0.3)" in caplog.text

    @pytest.mark.asyncio
    async def test_invalid_document_logged_and_raised(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        spec_file = tmp_path / "broken.json"
        spec_file.write_text(json.dumps({"info": {"title": "x"}}), encoding="utf-8")

        with caplog.at_level(logging.ERROR, logger="docingest.openapi.parser"):
            with pytest.raises(SpecValidationError):
                await SwaggerParser().parse_source(str(spec_file))
        assert "Error parsing Swagger spec" in caplog.text

    @pytest.mark.asyncio
    async def test_undecodable_file_logged_as_validation_error(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        spec_file = tmp_path / "openapi.yaml"
        spec_file.write_bytes(b"\xff\xfeopenapi: 3.0.0\n")

        with caplog.at_level(logging.ERROR, logger="docingest.openapi.parser"):
            with pytest.raises(SpecValidationError, match="UTF-8"):
                await SwaggerParser().parse_source(str(spec_file))
        assert "Error parsing Swagger spec" in caplog.text

    @pytest.mark.asyncio
    async def test_network_error_not_wrapped(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        swagger = SwaggerParser(transport=httpx.MockTransport(handler))
        with pytest.raises(httpx.ConnectError):
            await swagger.parse_source("https://example.com/openapi.json")

    @pytest.mark.asyncio
    async def test_missing_file_not_wrapped(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            await SwaggerParser().parse_source(str(tmp_path / "missing.yaml"))


class TestServiceHelpers:
    def test_extract_endpoints(self, orders_raw: dict[str, Any]) -> None:
        endpoints = SwaggerParser().extract_endpoints(orders_raw)
        assert endpoints[0].path == "/v1/orders"
        assert endpoints[0].method == HTTPMethod.GET

    def test_get_schema_and_validate(self, orders_raw: dict[str, Any]) -> None:
        swagger = SwaggerParser()
        order = swagger.get_schema(orders_raw, "#/definitions/Order")
        result = swagger.validate_against_schema({"quantity": "two"}, order)
        assert result.errors == [
            "Missing required field: item",
            "Field quantity: expected integer, got string",
        ]
