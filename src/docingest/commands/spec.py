"""API specification commands -- ``endpoints``, ``scenarios`` and ``validate``.

All three load an OpenAPI/Swagger document through
:class:`~docingest.openapi.parser.SwaggerParser` (Swagger UI URLs are resolved
first) and present a view of its operations.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer

from docingest.commands import reporting_errors, run
from docingest.exceptions import InvalidUsageError, SpecValidationError
from docingest.output import (
    OutputFormat,
    format_data,
    get_output,
    info,
    print_table,
    success,
)


async def _load(locator: str) -> dict[str, Any]:
    from docingest.openapi.discovery import is_swagger_ui_url, resolve_swagger_ui_url
    from docingest.openapi.loader import is_url
    from docingest.openapi.parser import SwaggerParser

    if is_url(locator) and is_swagger_ui_url(locator):
        locator = await resolve_swagger_ui_url(locator)
    return await SwaggerParser().parse_source(locator)


def endpoints_command(
    locator: str = typer.Argument(..., help="Spec file path, spec URL or Swagger UI URL."),
) -> None:
    """List every operation in an API specification.

    Example::

        docingest endpoints ./openapi.yaml
    """
    from docingest.openapi.extractor import extract_endpoints

    spec = run(_load(locator))
    endpoints = extract_endpoints(spec)

    rows = [
        [
            ep.method.value,
            ep.path,
            ep.summary or "",
            "yes" if ep.deprecated else "",
        ]
        for ep in endpoints
    ]
    print_table(
        ["Method", "Path", "Summary", "Deprecated"],
        rows,
        title=f"Endpoints ({len(rows)})",
    )


def scenarios_command(
    locator: str = typer.Argument(..., help="Spec file path, spec URL or Swagger UI URL."),
) -> None:
    """Show the test scenarios and inputs each operation implies."""
    from docingest.openapi.extractor import extract_endpoints
    from docingest.openapi.scenarios import (
        data_requirements,
        error_scenarios,
        success_scenarios,
    )

    spec = run(_load(locator))
    report = [
        {
            "endpoint": f"{ep.method.value} {ep.path}",
            "success": [s.model_dump() for s in success_scenarios(ep)],
            "errors": [s.model_dump() for s in error_scenarios(ep)],
            "requirements": data_requirements(ep),
        }
        for ep in extract_endpoints(spec)
    ]
    format_data(report)


def validate_command(
    locator: str = typer.Argument(..., help="Spec file path or URL."),
    schema_ref: str = typer.Argument(
        ..., help="Local schema reference, e.g. '#/components/schemas/Pet'."
    ),
    data_file: Path = typer.Argument(..., help="JSON file holding the data to check."),
) -> None:
    """Check a JSON document against one schema of an API specification.

    Exits 0 when the data is valid and 1 otherwise.

    Example::

        docingest validate ./openapi.yaml '#/components/schemas/Pet' pet.json
    """
    from docingest.openapi.resolver import get_schema
    from docingest.openapi.schema_check import validate_against_schema

    with reporting_errors():
        try:
            data = json.loads(data_file.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise InvalidUsageError(f"{data_file} is not valid JSON: {exc}") from exc

    spec = run(_load(locator))
    schema = get_schema(spec, schema_ref)
    if not isinstance(schema, dict):
        with reporting_errors():
            raise SpecValidationError(f"Schema not found: {schema_ref}")

    result = validate_against_schema(data, schema)
    if get_output().format == OutputFormat.JSON:
        format_data(result.model_dump())
    elif result.valid:
        success(f"{data_file} is valid against {schema_ref}")
    else:
        for message in result.errors:
            get_output().print_data(message)
    if not result.valid:
        info(f"{len(result.errors)} validation error(s)")
        raise typer.Exit(code=1)
