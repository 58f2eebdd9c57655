"""PDF parser backed by pypdf.

Metadata keys: ``source``, ``pages``.
"""

from __future__ import annotations

import asyncio

from pypdf import PdfReader

from docingest.models import DocumentType, ParsedDocument
from docingest.parsers.base import DocumentParser, file_name, matches_extension, strip_extension


class PdfParser(DocumentParser):
    """Extract the plain text of a local ``.pdf`` file."""

    document_type = DocumentType.PDF

    def can_handle(self, locator: str) -> bool:
        return matches_extension(locator, ".pdf")

    async def parse(self, locator: str) -> ParsedDocument:
        text, pages = await asyncio.to_thread(_extract_text, locator)
        return ParsedDocument(
            title=strip_extension(file_name(locator), "pdf"),
            content=text,
            metadata={"pages": pages, "source": locator},
            type=self.document_type,
        )


def _extract_text(path: str) -> tuple[str, int]:
    """Return the text of every page joined by newlines, and the page count."""
    reader = PdfReader(path)
    texts = [page.extract_text() or "" for page in reader.pages]
    return "\n".join(texts), len(reader.pages)
