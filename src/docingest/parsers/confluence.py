"""Confluence page parser.

Fetches a page from the Confluence REST API with a bearer token and converts
its HTML body to plain text. The token comes from ``CONFLUENCE_TOKEN`` (see
:mod:`docingest.config`) unless one is passed to the constructor; when
neither is available :class:`~docingest.exceptions.ConfigError` is raised
before any request is made.

The locator is used verbatim as the request URL, so it should already carry
the ``expand=body.storage`` query parameter when the storage body is wanted::

    https://example.atlassian.net/wiki/rest/api/content/12345?expand=body.storage,space

Metadata keys: ``source``, ``space_key``, ``page_id``.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional

import httpx
from bs4 import BeautifulSoup

from docingest.config import CONFLUENCE_TOKEN_ENV, load_settings
from docingest.exceptions import ConfigError, DocumentIOError
from docingest.models import DocumentType, ParsedDocument
from docingest.parsers.base import DocumentParser

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Confluence Page"

_WHITESPACE = re.compile(r"\s+")


class ConfluenceParser(DocumentParser):
    """Parse Confluence pages addressed by REST API URL.

    Args:
        token: Bearer token overriding the ``CONFLUENCE_TOKEN`` environment
            variable.
        transport: Optional httpx transport used instead of the network.
    """

    document_type = DocumentType.CONFLUENCE

    def __init__(
        self,
        token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._token = token
        self._transport = transport

    def can_handle(self, locator: str) -> bool:
        return "confluence" in locator or "atlassian" in locator

    async def parse(self, locator: str) -> ParsedDocument:
        token = self._token or load_settings().confluence_token
        if not token:
            raise ConfigError(f"{CONFLUENCE_TOKEN_ENV} environment variable required")

        logger.debug("Fetching Confluence page %s", locator)
        async with httpx.AsyncClient(transport=self._transport, timeout=None) as client:
            response = await client.get(
                locator, headers={"Authorization": f"Bearer {token}"}
            )
            response.raise_for_status()
        data = _page_json(response, locator)

        space = data.get("space") or {}
        page_id = data.get("id")
        return ParsedDocument(
            title=str(data.get("title") or DEFAULT_TITLE),
            content=html_to_text(_body_html(data)),
            metadata={
                "space_key": space.get("key") if isinstance(space, dict) else None,
                "page_id": None if page_id is None else str(page_id),
                "source": locator,
            },
            type=self.document_type,
        )


def _page_json(response: httpx.Response, locator: str) -> dict[str, Any]:
    try:
        data = response.json()
    except ValueError as exc:
        raise DocumentIOError(f"Confluence response is not JSON: {locator}") from exc
    if not isinstance(data, dict):
        raise DocumentIOError(
            f"Confluence response is not a JSON object (got {type(data).__name__}): {locator}"
        )
    return data


def html_to_text(html: str) -> str:
    """Strip markup, collapse whitespace runs to one space, and trim."""
    if not html:
        return ""
    text = BeautifulSoup(html, "html.parser").get_text()
    return _WHITESPACE.sub(" ", text).strip()


def _body_html(data: dict[str, Any]) -> str:
    """Prefer ``body.storage.value``; fall back to a raw string ``body``."""
    body = data.get("body")
    if isinstance(body, dict):
        storage = body.get("storage")
        if isinstance(storage, dict) and storage.get("value"):
            return str(storage["value"])
        return ""
    if isinstance(body, str):
        return body
    return ""
