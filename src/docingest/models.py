"""Canonical Pydantic models shared across all docingest modules.

This is the single source of truth for data shapes in the project. Every
parser produces a :class:`ParsedDocument`; the OpenAPI extractor additionally
fills :attr:`ParsedDocument.endpoints` with :class:`Endpoint` objects.

**Enumerations**:
    :class:`DocumentType`, :class:`HTTPMethod`, :class:`ParameterLocation`.

**Endpoint models** -- produced by
:meth:`~docingest.openapi.parser.SwaggerParser.extract_endpoints`:
    :class:`Parameter`, :class:`RequestBody`, :class:`Response`,
    :class:`Endpoint`.

**Results**:
    :class:`ParsedDocument`, :class:`ValidationResult`.

All models are frozen: once a parse call returns, its result is never mutated
by docingest. Field names are snake_case in Python; the OpenAPI spellings
(``in``, ``requestBody``, ``operationId``, ``schema``) are kept as aliases so
``model_dump(by_alias=True)`` reproduces the familiar wire shape.
"""

from __future__ import annotations

import enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


MetadataValue = Union[str, int, float, list[str], None]
"""Closed set of value kinds allowed in :attr:`ParsedDocument.metadata`."""


class DocumentType(str, enum.Enum):
    """Discriminator tag carried by every :class:`ParsedDocument`."""

    SWAGGER = "swagger"
    PDF = "pdf"
    EXCEL = "excel"
    WORD = "word"
    TEXT = "text"
    CONFLUENCE = "confluence"


class HTTPMethod(str, enum.Enum):
    """HTTP methods extracted from OpenAPI/Swagger path items.

    Values are uppercase, matching the ``method`` field of :class:`Endpoint`.
    ``trace`` operations are not extracted.
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class ParameterLocation(str, enum.Enum):
    """Locations where an API parameter can appear, per the OpenAPI ``in`` field."""

    QUERY = "query"
    PATH = "path"
    HEADER = "header"
    COOKIE = "cookie"


class Parameter(BaseModel):
    """A single parameter of an :class:`Endpoint`.

    ``schema`` keeps the raw schema dict. Swagger 2.0 style parameters that
    declare ``type`` directly instead of a ``schema`` object degrade to
    ``{"type": <type>}``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    location: ParameterLocation = Field(alias="in")
    description: Optional[str] = None
    required: bool = False
    schema_: dict[str, Any] = Field(default_factory=dict, alias="schema")
    example: Any = None


class RequestBody(BaseModel):
    """Request body of an :class:`Endpoint`, keyed by media type."""

    model_config = ConfigDict(frozen=True)

    required: bool = False
    content: dict[str, Any] = Field(default_factory=dict)


class Response(BaseModel):
    """A declared response for a single status code."""

    model_config = ConfigDict(frozen=True)

    description: Optional[str] = None
    content: Optional[dict[str, Any]] = None
    headers: Optional[dict[str, Any]] = None


class Endpoint(BaseModel):
    """One normalised (path, HTTP method) operation from an API specification.

    ``path`` already carries the Swagger 2.0 ``basePath`` prefix when the
    source document declares one.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    path: str
    method: HTTPMethod
    summary: Optional[str] = None
    description: Optional[str] = None
    parameters: list[Parameter] = Field(default_factory=list)
    request_body: Optional[RequestBody] = Field(default=None, alias="requestBody")
    responses: dict[str, Response] = Field(default_factory=dict)
    tags: list[str] = Field(default_factory=list)
    operation_id: Optional[str] = Field(default=None, alias="operationId")
    deprecated: bool = False


class ParsedDocument(BaseModel):
    """The common output shape every parser produces.

    ``metadata`` keys depend on :attr:`type`; ``source`` (the originating
    locator) is always present. See the parser modules for the other keys.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    content: str = ""
    endpoints: Optional[list[Endpoint]] = None
    metadata: dict[str, MetadataValue] = Field(default_factory=dict)
    type: DocumentType


class ValidationResult(BaseModel):
    """Outcome of a shallow data-versus-schema check."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    errors: list[str] = Field(default_factory=list)
