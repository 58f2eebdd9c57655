"""Abstract base class for format-specific document parsers.

Every parser implements the same two-operation contract required by
:class:`~docingest.parsers.factory.ParserFactory`:

* :meth:`DocumentParser.can_handle` -- a pure capability predicate over the
  locator string (extension or substring matching, never I/O).
* :meth:`DocumentParser.parse` -- an ``async`` method performing exactly one
  decode operation and reshaping its result into a
  :class:`~docingest.models.ParsedDocument`.

Concrete parsers set the :attr:`DocumentParser.document_type` class attribute;
results are tagged with it.

To add a new format, subclass :class:`DocumentParser` and register an
instance in :data:`~docingest.parsers.factory.ParserFactory`'s ordered list::

    class RstParser(DocumentParser):
        document_type = DocumentType.TEXT

        def can_handle(self, locator: str) -> bool:
            return locator.lower().endswith(".rst")

        async def parse(self, locator: str) -> ParsedDocument:
            ...
"""

from __future__ import annotations

import abc
import re
from pathlib import PurePath
from typing import ClassVar

from docingest.models import DocumentType, ParsedDocument


class DocumentParser(abc.ABC):
    """Base class for all document parsers.

    Parsers are stateless: they may be shared between concurrent ``parse``
    calls without locking.
    """

    document_type: ClassVar[DocumentType]
    """Tag placed on every :class:`~docingest.models.ParsedDocument` produced."""

    @abc.abstractmethod
    def can_handle(self, locator: str) -> bool:
        """Return ``True`` if this parser accepts *locator*.

        Args:
            locator: A file path or URL.
        """

    @abc.abstractmethod
    async def parse(self, locator: str) -> ParsedDocument:
        """Decode *locator* into a :class:`~docingest.models.ParsedDocument`.

        Raises:
            OSError: If a local file cannot be read.
            httpx.HTTPError: If a remote document cannot be fetched.
        """


def matches_extension(locator: str, *extensions: str) -> bool:
    """Case-insensitive check that *locator* ends with one of *extensions*."""
    lowered = locator.lower()
    return any(lowered.endswith(ext) for ext in extensions)


def file_name(locator: str) -> str:
    """Return the last path component of a path or URL."""
    return PurePath(locator.split("?", 1)[0]).name


def strip_extension(name: str, pattern: str) -> str:
    """Remove a trailing extension matching regex *pattern* (case-insensitive)."""
    return re.sub(rf"\.(?:{pattern})$", "", name, flags=re.IGNORECASE)
