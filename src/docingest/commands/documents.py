"""Document commands -- ``docingest parse`` and ``docingest formats``.

``parse`` hands a locator to :class:`~docingest.parsers.factory.ParserFactory`
and prints the resulting :class:`~docingest.models.ParsedDocument`: the
extracted text by default, or the whole model with ``--json``.
"""

from __future__ import annotations

import json
from typing import Optional

import typer

from docingest.commands import reporting_errors, run
from docingest.config import resolve_credential
from docingest.output import format_data, get_output, info


def parse_command(
    locator: str = typer.Argument(..., help="File path or URL of the document."),
    as_json: bool = typer.Option(
        False, "--json", help="Print the full parsed document as JSON."
    ),
    confluence_token: Optional[str] = typer.Option(
        None,
        "--confluence-token",
        help="Confluence token source (env:VAR or file:/path).",
    ),
) -> None:
    """Parse a document and print its extracted text.

    Example::

        docingest parse ./docs/manual.pdf
        docingest parse https://petstore3.swagger.io/api/v3/openapi.json --json
    """
    from docingest.parsers import ParserFactory

    token = None
    if confluence_token:
        with reporting_errors():
            token = resolve_credential(confluence_token)

    factory = ParserFactory(confluence_token=token)
    document = run(factory.parse(locator))

    if as_json:
        get_output().print_data(
            json.dumps(
                document.model_dump(mode="json", by_alias=True),
                indent=2,
                ensure_ascii=False,
            )
        )
        return

    info(f"{document.title} ({document.type.value})")
    for key, value in document.metadata.items():
        if value is not None:
            info(f"  {key}: {value}")
    get_output().print_data(document.content)


def formats_command() -> None:
    """List the supported document formats."""
    from docingest.parsers import ParserFactory

    format_data(ParserFactory.supported_formats())
