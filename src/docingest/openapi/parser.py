"""The :class:`SwaggerParser` service object.

Bundles the OpenAPI pipeline behind one explicitly constructed, stateless
object: :meth:`~SwaggerParser.parse_source` is the only I/O boundary, and the
remaining methods are pure helpers over the returned document.

Example::

    swagger = SwaggerParser()
    spec = await swagger.parse_source("https://example.com/openapi.yaml")
    for endpoint in swagger.extract_endpoints(spec):
        print(endpoint.method, endpoint.path)

    user = swagger.get_schema(spec, "#/components/schemas/User")
    result = swagger.validate_against_schema({"name": "a"}, user)
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from docingest.exceptions import SpecValidationError
from docingest.models import Endpoint, ValidationResult
from docingest.openapi.extractor import extract_endpoints
from docingest.openapi.loader import load_spec
from docingest.openapi.resolver import get_schema, resolve_refs
from docingest.openapi.schema_check import validate_against_schema
from docingest.openapi.validator import validate_document

logger = logging.getLogger(__name__)


class SwaggerParser:
    """Load, validate, and flatten OpenAPI 3.x / Swagger 2.0 documents.

    The instance holds no per-call data, so one object can serve any number
    of concurrent :meth:`parse_source` calls.

    Args:
        transport: Optional httpx transport for remote documents. Tests pass
            an ``httpx.MockTransport``; production code leaves it ``None``.
    """

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self._transport = transport

    async def parse_source(self, source: str) -> dict[str, Any]:
        """Fetch, validate, and dereference a spec from a file path or URL.

        Args:
            source: Local path or http(s) URL of the document.

        Returns:
            The validated document with internal ``$ref`` pointers inlined.

        Raises:
            SpecValidationError: If the document cannot be decoded or fails
                structural validation.
            httpx.HTTPError: If a remote document cannot be fetched.
            OSError: If a local document cannot be read.
        """
        logger.info("Parsing Swagger spec from: %s", source)
        try:
            raw = await load_spec(source, transport=self._transport)
            version = validate_document(raw)
            spec = resolve_refs(raw)
        except (SpecValidationError, httpx.HTTPError, OSError):
            logger.error("Error parsing Swagger spec: %s", source, exc_info=True)
            raise

        logger.info("Successfully parsed Swagger spec (version %s)", version)
        return spec

    def extract_endpoints(self, spec: dict[str, Any]) -> list[Endpoint]:
        """Flatten ``spec["paths"]`` into endpoints.

        See :func:`~docingest.openapi.extractor.extract_endpoints`.
        """
        return extract_endpoints(spec)

    def get_schema(self, spec: dict[str, Any], ref: str) -> Optional[Any]:
        """Resolve a local ``#/...`` reference, or return ``None``.

        See :func:`~docingest.openapi.resolver.get_schema`.
        """
        return get_schema(spec, ref)

    def validate_against_schema(
        self, data: Any, schema: Optional[dict[str, Any]]
    ) -> ValidationResult:
        """Shallow required-field and primitive-type check of *data*.

        See :func:`~docingest.openapi.schema_check.validate_against_schema`.
        """
        return validate_against_schema(data, schema)
