"""Fetch OpenAPI/Swagger documents and decode them into plain dicts.

A locator is either an http(s) URL, fetched with an ``httpx.AsyncClient``, or
a local path, read on a worker thread. The text is then decoded as JSON or
YAML; the file extension or response ``Content-Type`` only decides which
decoder is tried first.

Errors fall into two groups:

* the document could not be obtained -- ``OSError`` / ``httpx.HTTPError``,
  raised untouched;
* the document was obtained but is not a JSON/YAML object --
  :class:`~docingest.exceptions.SpecValidationError`.

The returned dict is unvalidated; see
:func:`~docingest.openapi.validator.validate_document`.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Optional

import httpx
import yaml

from docingest.exceptions import SpecValidationError


def is_url(locator: str) -> bool:
    """Return ``True`` when *locator* is an http(s) URL."""
    return locator.startswith(("http://", "https://"))


async def load_spec(
    source: str, transport: Optional[httpx.AsyncBaseTransport] = None
) -> dict[str, Any]:
    """Read *source* and decode it into a dict.

    Args:
        source: http(s) URL or filesystem path.
        transport: httpx transport for URL sources. ``None`` uses the network.

    Returns:
        The decoded top-level object.

    Raises:
        SpecValidationError: If the file is not UTF-8 text, or the text does
            not decode to a JSON/YAML object.
        httpx.HTTPError: If the URL cannot be fetched.
        OSError: If the file cannot be read.
    """
    if is_url(source):
        text, hint = await _fetch(source, transport)
    else:
        text, hint = await _read(source)

    if not text.strip():
        raise SpecValidationError(f"Spec document is empty: {source}")
    return decode_document(text, hint)


async def _fetch(
    url: str, transport: Optional[httpx.AsyncBaseTransport]
) -> tuple[str, str]:
    async with httpx.AsyncClient(
        transport=transport, timeout=None, follow_redirects=True
    ) as client:
        response = await client.get(url)
        response.raise_for_status()
    return response.text, _hint_from(response.headers.get("content-type", ""))


async def _read(path: str) -> tuple[str, str]:
    try:
        text = await asyncio.to_thread(Path(path).read_text, encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SpecValidationError(f"Spec document is not valid UTF-8: {path}") from exc
    return text, _hint_from(Path(path).suffix)


def _hint_from(label: str) -> str:
    """Map a suffix or content type to ``"json"``, ``"yaml"`` or ``""``."""
    label = label.lower()
    if "json" in label:
        return "json"
    if "yaml" in label or "yml" in label:
        return "yaml"
    return ""


def decode_document(text: str, hint: str = "") -> dict[str, Any]:
    """Decode JSON or YAML text that must hold a single object.

    A ``"json"`` hint makes JSON authoritative: malformed JSON is an error
    rather than a cue to try YAML. Otherwise JSON is tried first (unless the
    hint is ``"yaml"``) and YAML is the fallback.

    Raises:
        SpecValidationError: If neither decoder succeeds, or the decoded value
            is not a mapping.
    """
    problems: list[str] = []

    if hint != "yaml":
        try:
            return _require_object(json.loads(text))
        except json.JSONDecodeError as exc:
            if hint == "json":
                raise SpecValidationError(f"Invalid JSON: {exc}") from exc
            problems.append(f"JSON error: {exc}")

    try:
        return _require_object(yaml.safe_load(text))
    except yaml.YAMLError as exc:
        problems.append(f"YAML error: {exc}")

    raise SpecValidationError(
        "Failed to parse spec as JSON or YAML\n  " + "\n  ".join(problems)
    )


def _require_object(value: Any) -> dict[str, Any]:
    if isinstance(value, dict):
        return value
    kind = "empty document" if value is None else type(value).__name__
    raise SpecValidationError(f"Spec must be a JSON/YAML object (got {kind})")
