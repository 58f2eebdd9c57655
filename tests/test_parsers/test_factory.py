"""Tests for docingest.parsers.factory."""

from __future__ import annotations

from pathlib import Path

import pytest

from docingest.exceptions import UnsupportedFormatError
from docingest.models import DocumentType
from docingest.parsers import (
    ConfluenceParser,
    ExcelParser,
    ParserFactory,
    PdfParser,
    SwaggerDocumentParser,
    TextParser,
    WordParser,
)


class TestParserOrder:
    def test_registration_order(self) -> None:
        types = [type(p) for p in ParserFactory().parsers]
        assert types == [
            SwaggerDocumentParser,
            PdfParser,
            ExcelParser,
            WordParser,
            ConfluenceParser,
            TextParser,
        ]


class TestGetParser:
    @pytest.mark.parametrize(
        ("locator", "expected"),
        [
            ("api/openapi.yaml", DocumentType.SWAGGER),
            ("api/openapi.YML", DocumentType.SWAGGER),
            ("specs/orders-api.json", DocumentType.SWAGGER),
            ("data/config.json", DocumentType.TEXT),
            ("https://petstore3.swagger.io/", DocumentType.SWAGGER),
            ("manual.pdf", DocumentType.PDF),
            ("report.xlsx", DocumentType.EXCEL),
            ("legacy.xls", DocumentType.EXCEL),
            ("export.csv", DocumentType.EXCEL),
            ("notes.docx", DocumentType.WORD),
            ("old.doc", DocumentType.WORD),
            ("https://acme.atlassian.net/wiki/rest/content/1", DocumentType.CONFLUENCE),
            ("https://confluence.example.com/rest/content/9", DocumentType.CONFLUENCE),
            ("README.md", DocumentType.TEXT),
            ("notes.txt", DocumentType.TEXT),
        ],
    )
    def test_first_matching_parser_wins(self, locator: str, expected: DocumentType) -> None:
        parser = ParserFactory().get_parser(locator)
        assert parser is not None
        assert parser.document_type == expected

    def test_json_goes_to_swagger_not_text(self) -> None:
        factory = ParserFactory()
        assert TextParser().can_handle("openapi.json")
        assert isinstance(factory.get_parser("openapi.json"), SwaggerDocumentParser)

    @pytest.mark.parametrize("locator", ["image.png", "archive.tar.gz", "noextension"])
    def test_unsupported_returns_none(self, locator: str) -> None:
        assert ParserFactory().get_parser(locator) is None


class TestFactoryParse:
    @pytest.mark.asyncio
    async def test_unsupported_raises(self) -> None:
        with pytest.raises(UnsupportedFormatError, match="image.png"):
            await ParserFactory().parse("image.png")

    @pytest.mark.asyncio
    async def test_dispatches_json_spec(self, petstore_path: Path) -> None:
        document = await ParserFactory().parse(str(petstore_path))
        assert document.type == DocumentType.SWAGGER
        assert document.endpoints is not None
        assert len(document.endpoints) == 4

    @pytest.mark.asyncio
    async def test_dispatches_text(self, tmp_path: Path) -> None:
        notes = tmp_path / "notes.md"
        notes.write_text("# Notes\n", encoding="utf-8")
        document = await ParserFactory().parse(str(notes))
        assert document.type == DocumentType.TEXT
        assert document.content == "# Notes\n"

    @pytest.mark.asyncio
    async def test_plain_json_falls_through_to_text(self, tmp_path: Path) -> None:
        notes = tmp_path / "notes.json"
        notes.write_text('{"hello": "world"}', encoding="utf-8")
        document = await ParserFactory().parse(str(notes))
        assert document.type == DocumentType.TEXT
        assert document.content == '{"hello": "world"}'


class TestSupportedFormats:
    def test_lists_every_format(self) -> None:
        formats = ParserFactory.supported_formats()
        assert len(formats) == 6
        assert formats[0].startswith("Swagger/OpenAPI")
        assert any("Confluence" in f for f in formats)

    def test_returns_a_copy(self) -> None:
        ParserFactory.supported_formats().append("extra")
        assert len(ParserFactory.supported_formats()) == 6
