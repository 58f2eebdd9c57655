"""Format-specific document parsers and the dispatcher that selects between them.

Typical usage::

    from docingest.parsers import ParserFactory

    factory = ParserFactory()
    document = await factory.parse("reports/q3.xlsx")
    print(document.type, document.metadata["sheets"])

Sub-modules:

* :mod:`~docingest.parsers.base` -- The :class:`DocumentParser` contract.
* :mod:`~docingest.parsers.factory` -- :class:`ParserFactory` dispatch.
* :mod:`~docingest.parsers.swagger` -- OpenAPI/Swagger documents.
* :mod:`~docingest.parsers.pdf`, :mod:`~docingest.parsers.excel`,
  :mod:`~docingest.parsers.word`, :mod:`~docingest.parsers.text`,
  :mod:`~docingest.parsers.confluence` -- single-format wrappers.
"""

from docingest.parsers.base import DocumentParser
from docingest.parsers.confluence import ConfluenceParser
from docingest.parsers.excel import ExcelParser
from docingest.parsers.factory import ParserFactory
from docingest.parsers.pdf import PdfParser
from docingest.parsers.swagger import SwaggerDocumentParser
from docingest.parsers.text import TextParser
from docingest.parsers.word import WordParser

__all__ = [
    "ConfluenceParser",
    "DocumentParser",
    "ExcelParser",
    "ParserFactory",
    "PdfParser",
    "SwaggerDocumentParser",
    "TextParser",
    "WordParser",
]
