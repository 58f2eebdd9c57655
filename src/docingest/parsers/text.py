"""Plain-text parser for ``.txt``, ``.md`` and ``.json`` files or URLs.

Registered last in the factory as the catch-all. Content is passed through
unmodified. Because the Swagger parser is registered earlier and also claims
``.json``, JSON locators only reach this parser when it is used directly.

Metadata keys: ``source``, ``encoding``.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import httpx

from docingest.models import DocumentType, ParsedDocument
from docingest.openapi.loader import is_url
from docingest.parsers.base import DocumentParser, file_name, matches_extension, strip_extension

URL_FALLBACK_TITLE = "URL Document"

_TEXT_EXTENSIONS = (".txt", ".md", ".json")


class TextParser(DocumentParser):
    """Read text documents from disk or over HTTP.

    Args:
        encoding: Encoding used for local files.
        transport: Optional httpx transport used instead of the network.
    """

    document_type = DocumentType.TEXT

    def __init__(
        self,
        encoding: str = "utf-8",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.encoding = encoding
        self._transport = transport

    def can_handle(self, locator: str) -> bool:
        return matches_extension(locator, *_TEXT_EXTENSIONS)

    async def parse(self, locator: str) -> ParsedDocument:
        if is_url(locator):
            async with httpx.AsyncClient(
                transport=self._transport, timeout=None, follow_redirects=True
            ) as client:
                response = await client.get(locator)
                response.raise_for_status()
            content = response.text
            encoding = response.encoding or self.encoding
            name = file_name(locator)
            title = strip_extension(name, "txt|md|json") if name else URL_FALLBACK_TITLE
        else:
            path = Path(locator)
            content = await asyncio.to_thread(path.read_text, encoding=self.encoding)
            encoding = self.encoding
            title = strip_extension(path.name, "txt|md|json")

        return ParsedDocument(
            title=title or URL_FALLBACK_TITLE,
            content=content,
            metadata={"encoding": encoding, "source": locator},
            type=self.document_type,
        )
