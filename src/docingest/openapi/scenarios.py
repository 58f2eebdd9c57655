"""Derive test-oriented knowledge from extracted endpoints.

Helpers that turn an :class:`~docingest.models.Endpoint` into the pieces an
API-testing assistant needs: short text chunks for retrieval indexes, the
error and success scenarios its responses imply, and the inputs a test case
has to supply.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel

from docingest.models import Endpoint, ParameterLocation

_SCENARIO_DESCRIPTIONS: dict[int, str] = {
    400: "invalid request data is provided",
    401: "authentication is missing or invalid",
    403: "user does not have permission",
    404: "resource is not found",
    409: "resource conflict occurs",
    422: "request validation fails",
    429: "rate limit is exceeded",
    500: "server error occurs",
    503: "service is unavailable",
}


class ErrorScenario(BaseModel):
    """An error response an endpoint declares, phrased as a test expectation."""

    code: str
    description: str
    test_scenario: str


class SuccessScenario(BaseModel):
    """A 2xx response an endpoint declares."""

    code: str
    description: str


def endpoint_chunks(endpoint: Endpoint) -> list[str]:
    """Split an endpoint into text chunks for retrieval ingestion.

    Produces a summary chunk, a parameters chunk (only when the endpoint has
    parameters), a request body chunk (only when it has one), and a responses
    chunk.
    """
    label = f"{endpoint.method.value} {endpoint.path}"
    chunks = [
        "\n".join(
            [
                f"Endpoint: {label}",
                f"Summary: {endpoint.summary or 'N/A'}",
                f"Description: {endpoint.description or 'N/A'}",
                f"Tags: {', '.join(endpoint.tags) or 'N/A'}",
                f"Deprecated: {'Yes' if endpoint.deprecated else 'No'}",
            ]
        )
    ]

    if endpoint.parameters:
        lines = [
            f"- {p.name} ({p.location.value}): {p.description or 'N/A'} - "
            f"{'Required' if p.required else 'Optional'}"
            for p in endpoint.parameters
        ]
        chunks.append(f"Parameters for {label}:\n" + "\n".join(lines))

    if endpoint.request_body is not None:
        body = json.dumps(endpoint.request_body.model_dump(), indent=2, default=str)
        chunks.append(f"Request Body for {label}:\n{body}")

    responses = "\n".join(
        f"{code}: {response.description}" for code, response in endpoint.responses.items()
    )
    chunks.append(f"Responses for {label}:\n{responses}")
    return chunks


def error_scenarios(endpoint: Endpoint) -> list[ErrorScenario]:
    """List declared responses with status >= 400 as test scenarios."""
    scenarios: list[ErrorScenario] = []
    for code, response in endpoint.responses.items():
        status = _status_number(code)
        if status is None or status < 400:
            continue
        reason = _SCENARIO_DESCRIPTIONS.get(status, "error response is returned")
        scenarios.append(
            ErrorScenario(
                code=code,
                description=response.description or "",
                test_scenario=f"Should return {code} when {reason}",
            )
        )
    return scenarios


def success_scenarios(endpoint: Endpoint) -> list[SuccessScenario]:
    """List declared 2xx responses."""
    scenarios: list[SuccessScenario] = []
    for code, response in endpoint.responses.items():
        status = _status_number(code)
        if status is not None and 200 <= status < 300:
            scenarios.append(
                SuccessScenario(code=code, description=response.description or "")
            )
    return scenarios


def data_requirements(endpoint: Endpoint) -> dict[str, Any]:
    """Collect the inputs a test case for *endpoint* must provide.

    Returns:
        A dict with ``path_parameters`` and ``query_parameters`` (name ->
        ``{"type", "required", "example"}``) and ``body_schema`` (schema of
        the first request body media type, or ``None``).
    """
    requirements: dict[str, Any] = {
        "path_parameters": {},
        "query_parameters": {},
        "body_schema": None,
    }

    for param in endpoint.parameters:
        definition = {
            "type": param.schema_.get("type"),
            "required": param.required,
            "example": param.example,
        }
        if param.location == ParameterLocation.PATH:
            requirements["path_parameters"][param.name] = definition
        elif param.location == ParameterLocation.QUERY:
            requirements["query_parameters"][param.name] = definition

    if endpoint.request_body is not None and endpoint.request_body.content:
        media = next(iter(endpoint.request_body.content.values()))
        if isinstance(media, dict):
            requirements["body_schema"] = media.get("schema")

    return requirements


def _status_number(code: str) -> int | None:
    """Parse a status-code key; ``default`` and ``2XX`` ranges yield ``None``."""
    try:
        return int(code)
    except ValueError:
        return None
