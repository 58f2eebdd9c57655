"""Structural validation of OpenAPI 3.x and Swagger 2.0 documents.

:func:`validate_document` checks the handful of fields every downstream step
relies on: a supported version marker, an ``info`` object carrying ``title``
and ``version``, and a ``paths`` object. It does not validate operations,
parameters, or schemas against the full OpenAPI meta-schema.
"""

from __future__ import annotations

from typing import Any

from docingest.exceptions import SpecValidationError


def validate_document(spec: dict[str, Any]) -> str:
    """Validate the document structure and return its version string.

    Args:
        spec: The decoded spec dictionary.

    Returns:
        The version string, e.g. ``"3.0.3"`` or ``"2.0"``.

    Raises:
        SpecValidationError: If the version marker is missing or unsupported,
            or if ``info`` / ``paths`` are missing or malformed.
    """
    version = _validate_version(spec)

    info = spec.get("info")
    if not isinstance(info, dict):
        raise SpecValidationError("Spec is missing the required 'info' object")
    for field in ("title", "version"):
        if info.get(field) in (None, ""):
            raise SpecValidationError(f"Spec 'info' object is missing '{field}'")

    paths = spec.get("paths")
    if not isinstance(paths, dict):
        raise SpecValidationError("Spec is missing the required 'paths' object")
    for path, path_item in paths.items():
        if not str(path).startswith("/"):
            raise SpecValidationError(f"Path '{path}' must start with '/'")
        if path_item is not None and not isinstance(path_item, dict):
            raise SpecValidationError(f"Path item for '{path}' must be an object")

    return version


def _validate_version(spec: dict[str, Any]) -> str:
    if "swagger" in spec:
        swagger_ver = str(spec["swagger"])
        if swagger_ver != "2.0":
            raise SpecValidationError(
                f"Unsupported Swagger version: {swagger_ver}. Only Swagger 2.0 is supported."
            )
        return swagger_ver

    openapi_version = spec.get("openapi")
    if openapi_version is None:
        raise SpecValidationError(
            "Missing 'openapi' or 'swagger' field. Is this an API specification?"
        )

    version_str = str(openapi_version)
    if not version_str.startswith("3."):
        raise SpecValidationError(
            f"Unsupported OpenAPI version: {version_str}. "
            "Only OpenAPI 3.x and Swagger 2.0 are supported."
        )
    return version_str
