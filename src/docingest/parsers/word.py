"""Word document parser backed by python-docx.

Only the body paragraphs are extracted; tables, headers, and footers are
ignored. Legacy binary ``.doc`` files are accepted by the capability
predicate but python-docx can only open the OOXML ``.docx`` format, so they
fail at decode time.

Metadata keys: ``source``, ``paragraphs``.
"""

from __future__ import annotations

import asyncio

from docx import Document

from docingest.models import DocumentType, ParsedDocument
from docingest.parsers.base import DocumentParser, file_name, matches_extension, strip_extension


class WordParser(DocumentParser):
    """Extract raw paragraph text from ``.docx`` / ``.doc`` files."""

    document_type = DocumentType.WORD

    def can_handle(self, locator: str) -> bool:
        return matches_extension(locator, ".docx", ".doc")

    async def parse(self, locator: str) -> ParsedDocument:
        paragraphs = await asyncio.to_thread(_read_paragraphs, locator)
        return ParsedDocument(
            title=strip_extension(file_name(locator), "docx?"),
            content="\n".join(paragraphs),
            metadata={"paragraphs": len(paragraphs), "source": locator},
            type=self.document_type,
        )


def _read_paragraphs(path: str) -> list[str]:
    document = Document(path)
    return [paragraph.text for paragraph in document.paragraphs]
