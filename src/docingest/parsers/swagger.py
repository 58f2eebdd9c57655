"""OpenAPI/Swagger document parser.

Adapts :class:`~docingest.openapi.parser.SwaggerParser` to the
:class:`~docingest.parsers.base.DocumentParser` contract. Registered first in
the factory. A local ``.json`` / ``.yaml`` / ``.yml`` file is claimed only when its
name mentions ``swagger``, ``openapi`` or ``api``; other JSON files fall through
to the text parser.

Metadata keys: ``source``, ``spec_url`` (differs from ``source`` when a
Swagger UI page was resolved), ``version``, ``description``.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from docingest.models import DocumentType, Endpoint, ParsedDocument
from docingest.openapi.discovery import is_swagger_ui_url, resolve_swagger_ui_url
from docingest.openapi.loader import is_url
from docingest.openapi.parser import SwaggerParser
from docingest.parsers.base import DocumentParser, file_name, matches_extension

_SPEC_EXTENSIONS = (".yaml", ".yml", ".json")
_SPEC_NAME_HINTS = ("swagger", "openapi", "api")


class SwaggerDocumentParser(DocumentParser):
    """Parse OpenAPI 3.x / Swagger 2.0 documents and Swagger UI URLs.

    Args:
        swagger: The extractor service to use. A fresh
            :class:`~docingest.openapi.parser.SwaggerParser` by default.
        transport: Optional httpx transport for remote documents and Swagger
            UI probing.
    """

    document_type = DocumentType.SWAGGER

    def __init__(
        self,
        swagger: Optional[SwaggerParser] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._transport = transport
        self._swagger = swagger or SwaggerParser(transport=transport)

    def can_handle(self, locator: str) -> bool:
        if is_url(locator):
            return matches_extension(locator, *_SPEC_EXTENSIONS) or is_swagger_ui_url(
                locator
            )
        name = file_name(locator).lower()
        return matches_extension(locator, *_SPEC_EXTENSIONS) and any(
            hint in name for hint in _SPEC_NAME_HINTS
        )

    async def parse(self, locator: str) -> ParsedDocument:
        spec_url = locator
        if is_url(locator) and is_swagger_ui_url(locator):
            spec_url = await resolve_swagger_ui_url(locator, transport=self._transport)

        spec = await self._swagger.parse_source(spec_url)
        endpoints = self._swagger.extract_endpoints(spec)

        info: dict[str, Any] = spec.get("info") or {}
        version = info.get("version")
        description = info.get("description")

        return ParsedDocument(
            title=str(info.get("title") or file_name(locator)),
            content=render_endpoint_lines(endpoints),
            endpoints=endpoints,
            metadata={
                "version": None if version is None else str(version),
                "description": None if description is None else str(description),
                "source": locator,
                "spec_url": spec_url,
            },
            type=self.document_type,
        )


def render_endpoint_lines(endpoints: list[Endpoint]) -> str:
    """Render one ``"<METHOD> <path>: <summary>"`` line per endpoint."""
    return "\n".join(
        f"{ep.method.value} {ep.path}: {ep.summary or ep.description or ''}"
        for ep in endpoints
    )
