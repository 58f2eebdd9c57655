"""OpenAPI/Swagger extractor -- load, validate, resolve ``$ref`` pointers, and flatten endpoints.

Turns a raw OpenAPI 3.x or Swagger 2.0 document (JSON or YAML, local file or
remote URL) into a list of :class:`~docingest.models.Endpoint` objects.

Typical usage::

    from docingest.openapi import SwaggerParser

    swagger = SwaggerParser()
    spec = await swagger.parse_source("https://petstore3.swagger.io/api/v3/openapi.json")
    endpoints = swagger.extract_endpoints(spec)

Sub-modules:

* :mod:`~docingest.openapi.loader` -- I/O layer (URL, file) plus JSON/YAML
  format detection.
* :mod:`~docingest.openapi.validator` -- Structural document validation.
* :mod:`~docingest.openapi.resolver` -- ``$ref`` inlining and single-pointer
  lookup.
* :mod:`~docingest.openapi.extractor` -- Path/method walk producing endpoints.
* :mod:`~docingest.openapi.schema_check` -- Shallow data-versus-schema check.
* :mod:`~docingest.openapi.discovery` -- Swagger UI URL resolution.
* :mod:`~docingest.openapi.scenarios` -- Test-oriented views of endpoints.
* :mod:`~docingest.openapi.parser` -- The :class:`SwaggerParser` service.
"""

from docingest.openapi.extractor import extract_endpoints
from docingest.openapi.loader import load_spec
from docingest.openapi.parser import SwaggerParser
from docingest.openapi.resolver import get_schema, resolve_refs
from docingest.openapi.schema_check import validate_against_schema
from docingest.openapi.validator import validate_document

__all__ = [
    "SwaggerParser",
    "extract_endpoints",
    "get_schema",
    "load_spec",
    "resolve_refs",
    "validate_against_schema",
    "validate_document",
]
