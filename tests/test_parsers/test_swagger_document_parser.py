"""Tests for docingest.parsers.swagger."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import httpx
import pytest

from docingest.exceptions import SpecValidationError
from docingest.models import DocumentType, Endpoint
from docingest.parsers.swagger import SwaggerDocumentParser, render_endpoint_lines


class TestCanHandle:
    @pytest.mark.parametrize(
        "locator",
        [
            "openapi.yaml",
            "openapi.yml",
            "openapi.json",
            "specs/Petstore-API.JSON",
            "https://example.com/spec/openapi.json",
            "https://example.com/files/orders.yaml",
            "https://petstore.swagger.io/",
            "https://api.example.com/docs",
        ],
    )
    def test_accepts(self, locator: str) -> None:
        assert SwaggerDocumentParser().can_handle(locator)

    @pytest.mark.parametrize(
        "locator",
        [
            "manual.pdf",
            "notes.json",
            "config/settings.yaml",
            "https://docs.example.com/",
            "https://swagger.example.com/index.html",
        ],
    )
    def test_rejects(self, locator: str) -> None:
        assert not SwaggerDocumentParser().can_handle(locator)


class TestRenderEndpointLines:
    def test_summary_then_description_then_blank(self) -> None:
        endpoints = [
            Endpoint.model_validate({"path": "/a", "method": "GET", "summary": "S"}),
            Endpoint.model_validate({"path": "/b", "method": "POST", "description": "D"}),
            Endpoint.model_validate({"path": "/c", "method": "DELETE"}),
        ]
        assert render_endpoint_lines(endpoints) == "GET /a: S\nPOST /b: D\nDELETE /c: "


class TestParse:
    @pytest.mark.asyncio
    async def test_openapi_file(self, petstore_path: Path) -> None:
        document = await SwaggerDocumentParser().parse(str(petstore_path))

        assert document.type == DocumentType.SWAGGER
        assert document.title == "Petstore API"
        assert document.content.splitlines() == [
            "GET /pets: List all pets",
            "POST /pets: Create a pet",
            "GET /pets/{petId}: Info for a specific pet",
            "DELETE /pets/{petId}: Delete a pet",
        ]
        assert document.endpoints is not None and len(document.endpoints) == 4
        assert document.metadata == {
            "version": "1.0.0",
            "description": "A sample API for managing pets",
            "source": str(petstore_path),
            "spec_url": str(petstore_path),
        }

    @pytest.mark.asyncio
    async def test_swagger2_yaml(self, orders_path: Path) -> None:
        document = await SwaggerDocumentParser().parse(str(orders_path))

        assert document.title == "Legacy Orders"
        assert document.metadata["version"] == "2.1"
        assert document.metadata["description"] is None
        assert document.content.splitlines()[0] == "GET /v1/orders: List orders"

    @pytest.mark.asyncio
    async def test_swagger_ui_url_is_resolved(self, petstore_raw: dict[str, Any]) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/api/v3/openapi.json":
                return httpx.Response(200, json=petstore_raw)
            return httpx.Response(404)

        parser = SwaggerDocumentParser(transport=httpx.MockTransport(handler))
        document = await parser.parse("https://api.example.com/")

        assert document.metadata["source"] == "https://api.example.com/"
        assert document.metadata["spec_url"] == "https://api.example.com/api/v3/openapi.json"
        assert document.endpoints is not None and len(document.endpoints) == 4

    @pytest.mark.asyncio
    async def test_plain_json_is_rejected_as_spec(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"debug": True}), encoding="utf-8")

        with pytest.raises(SpecValidationError):
            await SwaggerDocumentParser().parse(str(path))
