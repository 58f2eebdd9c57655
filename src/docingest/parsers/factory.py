"""Parser selection dispatcher.

:class:`ParserFactory` holds one instance of every parser in a fixed priority
order and hands a locator to the first parser whose capability predicate
accepts it. Predicates overlap on purpose (``.json`` is both an API spec and a
text extension), so the registration order is the disambiguation rule:

1. :class:`~docingest.parsers.swagger.SwaggerDocumentParser`
2. :class:`~docingest.parsers.pdf.PdfParser`
3. :class:`~docingest.parsers.excel.ExcelParser`
4. :class:`~docingest.parsers.word.WordParser`
5. :class:`~docingest.parsers.confluence.ConfluenceParser`
6. :class:`~docingest.parsers.text.TextParser` (catch-all)
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from docingest.exceptions import UnsupportedFormatError
from docingest.models import ParsedDocument
from docingest.parsers.base import DocumentParser
from docingest.parsers.confluence import ConfluenceParser
from docingest.parsers.excel import ExcelParser
from docingest.parsers.pdf import PdfParser
from docingest.parsers.swagger import SwaggerDocumentParser
from docingest.parsers.text import TextParser
from docingest.parsers.word import WordParser

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS: tuple[str, ...] = (
    "Swagger/OpenAPI (.yaml, .yml, .json)",
    "PDF (.pdf)",
    "Excel (.xlsx, .xls, .csv)",
    "Word (.docx, .doc)",
    "Text (.txt, .md, .json)",
    "Confluence (URLs containing confluence/atlassian)",
)


class ParserFactory:
    """Select the parser responsible for a locator.

    Selection is pure: no parser is invoked and no I/O happens until
    :meth:`parse` is awaited.

    Args:
        confluence_token: Bearer token for the Confluence parser, overriding
            the ``CONFLUENCE_TOKEN`` environment variable.
        transport: Optional httpx transport shared by every network-capable
            parser.

    Example::

        factory = ParserFactory()
        parser = factory.get_parser("docs/openapi.json")
        assert parser.document_type == DocumentType.SWAGGER
    """

    def __init__(
        self,
        confluence_token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._parsers: tuple[DocumentParser, ...] = (
            SwaggerDocumentParser(transport=transport),
            PdfParser(),
            ExcelParser(),
            WordParser(),
            ConfluenceParser(token=confluence_token, transport=transport),
            TextParser(transport=transport),
        )

    @property
    def parsers(self) -> tuple[DocumentParser, ...]:
        """The registered parsers, in priority order."""
        return self._parsers

    def get_parser(self, locator: str) -> Optional[DocumentParser]:
        """Return the first parser that accepts *locator*, or ``None``."""
        for parser in self._parsers:
            if parser.can_handle(locator):
                return parser
        return None

    async def parse(self, locator: str) -> ParsedDocument:
        """Select a parser for *locator* and run it.

        Raises:
            UnsupportedFormatError: If no registered parser accepts *locator*.
        """
        parser = self.get_parser(locator)
        if parser is None:
            raise UnsupportedFormatError(
                f"No parser available for '{locator}'. "
                f"Supported formats: {', '.join(SUPPORTED_FORMATS)}"
            )
        logger.debug("Parsing %s with %s", locator, type(parser).__name__)
        return await parser.parse(locator)

    @staticmethod
    def supported_formats() -> list[str]:
        """Human-readable descriptions of the accepted formats."""
        return list(SUPPORTED_FORMATS)
