"""Flatten OpenAPI/Swagger path items into :class:`~docingest.models.Endpoint` models.

:func:`extract_endpoints` walks ``spec["paths"]`` in document order and emits
one :class:`~docingest.models.Endpoint` per (path, HTTP method) pair. The raw
document shape is not known ahead of time, so every lookup goes through
``dict.get`` with ``isinstance`` guards: missing or malformed optional fields
fall back to documented defaults instead of raising.

Defaults applied:

* ``tags`` -> ``[]``; ``deprecated`` and parameter ``required`` -> ``False``
  unless literally ``true``.
* A missing ``requestBody`` -> ``None``; an empty one is kept as an empty body.
* Swagger 2.0 ``body`` and ``formData`` parameters become the request body,
  typed by the operation (or document) ``consumes`` list.
* A parameter without a ``schema`` object -> ``{"type": <param type>}``, which
  covers Swagger 2.0 style declarations.
* ``basePath`` (Swagger 2.0) is prefixed to every path.

Path-level keys that are not HTTP methods (``parameters``, ``$ref``,
``summary``, ``servers``, vendor extensions) are skipped. No sorting or
de-duplication is performed.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from docingest.models import (
    Endpoint,
    HTTPMethod,
    Parameter,
    ParameterLocation,
    RequestBody,
    Response,
)

logger = logging.getLogger(__name__)

_HTTP_METHODS = frozenset(m.value.lower() for m in HTTPMethod)
_LOCATIONS = frozenset(loc.value for loc in ParameterLocation)
_BODY_LOCATIONS = frozenset({"body", "formData"})
_FORM_MEDIA_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def extract_endpoints(spec: dict[str, Any]) -> list[Endpoint]:
    """Extract every endpoint declared in *spec*.

    Args:
        spec: A validated (and usually ``$ref``-resolved) spec dictionary.

    Returns:
        Endpoints in path-then-method iteration order.

    Example::

        endpoints = extract_endpoints(
            {"basePath": "/v1", "paths": {"/users": {"get": {}}}}
        )
        assert endpoints[0].path == "/v1/users"
        assert endpoints[0].method == "GET"
    """
    endpoints: list[Endpoint] = []
    base_path = spec.get("basePath") or ""
    if not isinstance(base_path, str):
        base_path = str(base_path)

    paths = spec.get("paths") or {}
    if not isinstance(paths, dict):
        paths = {}

    spec_consumes = spec.get("consumes")

    for path, path_item in paths.items():
        if not isinstance(path_item, dict):
            continue

        for method, operation in path_item.items():
            if not isinstance(method, str) or method.lower() not in _HTTP_METHODS:
                continue
            if not isinstance(operation, dict):
                continue

            params = operation.get("parameters") or []
            request_body = _extract_request_body(operation.get("requestBody"))
            if request_body is None:
                request_body = _legacy_request_body(
                    params, operation.get("consumes") or spec_consumes
                )
            tags = operation.get("tags")

            endpoints.append(
                Endpoint(
                    path=f"{base_path}{path}",
                    method=HTTPMethod(method.upper()),
                    summary=_optional_str(operation.get("summary")),
                    description=_optional_str(operation.get("description")),
                    parameters=_extract_parameters(params),
                    request_body=request_body,
                    responses=_extract_responses(operation.get("responses") or {}),
                    tags=[str(tag) for tag in tags] if isinstance(tags, list) else [],
                    operation_id=_optional_str(operation.get("operationId")),
                    deprecated=operation.get("deprecated") is True,
                )
            )

    logger.info("Extracted %d endpoints from Swagger spec", len(endpoints))
    return endpoints


def _extract_parameters(params: Any) -> list[Parameter]:
    """Convert raw parameter dicts into :class:`~docingest.models.Parameter` models.

    Swagger 2.0 ``body`` and ``formData`` parameters are left to
    :func:`_legacy_request_body`.
    """
    if not isinstance(params, list):
        return []

    parameters: list[Parameter] = []
    for param in params:
        if not isinstance(param, dict):
            continue

        location = param.get("in", "query")
        if location in _BODY_LOCATIONS:
            continue
        if location not in _LOCATIONS:
            logger.debug(
                "Skipping parameter %r with unsupported location %r",
                param.get("name"),
                location,
            )
            continue

        parameters.append(
            Parameter(
                name=str(param.get("name", "")),
                location=ParameterLocation(location),
                description=_optional_str(param.get("description")),
                required=param.get("required") is True,
                schema=_parameter_schema(param),
                example=param.get("example"),
            )
        )

    return parameters


def _parameter_schema(param: dict[str, Any]) -> dict[str, Any]:
    schema = param.get("schema")
    if isinstance(schema, dict):
        return schema
    legacy_type = param.get("type")
    return {"type": legacy_type} if legacy_type is not None else {}


def _extract_request_body(body: Any) -> Optional[RequestBody]:
    if not isinstance(body, dict):
        return None

    content = body.get("content")
    return RequestBody(
        required=body.get("required") is True,
        content=content if isinstance(content, dict) else {},
    )


def _legacy_request_body(params: Any, consumes: Any) -> Optional[RequestBody]:
    """Build a request body from Swagger 2.0 ``body`` or ``formData`` parameters.

    A ``body`` parameter contributes its ``schema`` under each non-form media
    type in *consumes* (``application/json`` when there is none). ``formData``
    parameters are gathered into one object schema under the first form media
    type in *consumes*, defaulting to ``application/x-www-form-urlencoded``.
    A ``body`` parameter wins when both are present.
    """
    if not isinstance(params, list):
        return None
    if not isinstance(consumes, list):
        consumes = []
    media_types = [m for m in consumes if isinstance(m, str)]

    form_fields: dict[str, Any] = {}
    form_required: list[str] = []
    for param in params:
        if not isinstance(param, dict):
            continue
        location = param.get("in")
        if location == "body":
            schema = param.get("schema")
            media = {"schema": schema if isinstance(schema, dict) else {}}
            targets = [m for m in media_types if m not in _FORM_MEDIA_TYPES]
            return RequestBody(
                required=param.get("required") is True,
                content={m: media for m in targets or ["application/json"]},
            )
        if location == "formData":
            name = str(param.get("name", ""))
            form_fields[name] = _parameter_schema(param)
            if param.get("required") is True:
                form_required.append(name)

    if not form_fields:
        return None

    form_type = next(
        (m for m in media_types if m in _FORM_MEDIA_TYPES), _FORM_MEDIA_TYPES[0]
    )
    schema: dict[str, Any] = {"type": "object", "properties": form_fields}
    if form_required:
        schema["required"] = form_required
    return RequestBody(
        required=bool(form_required),
        content={form_type: {"schema": schema}},
    )


def _extract_responses(responses: Any) -> dict[str, Response]:
    """Re-shape the ``responses`` map, keyed by status-code string.

    YAML decodes unquoted status codes as integers, so keys are normalised
    with ``str``.
    """
    if not isinstance(responses, dict):
        return {}

    extracted: dict[str, Response] = {}
    for status_code, response in responses.items():
        if not isinstance(response, dict):
            continue
        content = response.get("content")
        headers = response.get("headers")
        extracted[str(status_code)] = Response(
            description=_optional_str(response.get("description")),
            content=content if isinstance(content, dict) else None,
            headers=headers if isinstance(headers, dict) else None,
        )

    return extracted


def _optional_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)
