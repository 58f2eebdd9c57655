"""Tests for docingest.parsers.word."""

from __future__ import annotations

from pathlib import Path

import pytest
from docx import Document
from docx.opc.exceptions import PackageNotFoundError

from docingest.models import DocumentType
from docingest.parsers.word import WordParser


class TestParseDocx:
    @pytest.mark.asyncio
    async def test_paragraphs_joined(self, tmp_path: Path) -> None:
        source = Document()
        source.add_paragraph("Login flow")
        source.add_paragraph("")
        source.add_paragraph("Users sign in with SSO.")
        path = tmp_path / "Requirements.docx"
        source.save(str(path))
        expected = [p.text for p in Document(str(path)).paragraphs]

        document = await WordParser().parse(str(path))

        assert document.type == DocumentType.WORD
        assert document.title == "Requirements"
        assert document.content == "\n".join(expected)
        assert document.content.endswith("Login flow\n\nUsers sign in with SSO.")
        assert document.metadata == {"paragraphs": len(expected), "source": str(path)}

    @pytest.mark.asyncio
    async def test_legacy_doc_fails_at_decode(self, tmp_path: Path) -> None:
        path = tmp_path / "legacy.doc"
        path.write_bytes(b"\xd0\xcf\x11\xe0not an ooxml package")
        parser = WordParser()

        assert parser.can_handle(str(path))
        with pytest.raises(PackageNotFoundError):
            await parser.parse(str(path))
