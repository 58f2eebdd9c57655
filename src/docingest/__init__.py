"""docingest -- Extract API endpoints, text, and metadata from heterogeneous documents.

This package turns OpenAPI/Swagger specifications, PDFs, spreadsheets, Word
documents, plain text files, and Confluence pages into one common
:class:`~docingest.models.ParsedDocument` shape so downstream tooling (an
API-testing or documentation assistant, a RAG ingestion job) can consume them
uniformly regardless of the origin format.

Typical usage::

    from docingest.parsers import ParserFactory

    factory = ParserFactory()
    document = await factory.parse("specs/petstore-openapi.yaml")
    for endpoint in document.endpoints or []:
        print(endpoint.method, endpoint.path)

Modules:
    app: Typer application and CLI entry point.
    models: Pydantic models shared across the package.
    config: Environment-driven settings and credential resolution.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes used by the CLI.
    openapi: OpenAPI/Swagger loading, validation, and endpoint extraction.
    parsers: Format-specific document parsers and the dispatcher.
    output: stdout/stderr formatting and logging setup.
"""

__version__ = "0.1.0"
