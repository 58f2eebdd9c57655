"""Locate the spec document behind a Swagger UI page.

Users often paste the URL of a Swagger UI page (``https://petstore3.swagger.io``)
rather than the JSON/YAML document it renders. :func:`resolve_swagger_ui_url`
turns such a URL into the spec URL by trying, in order:

1. A table of well-known public Swagger UI hosts.
2. Common spec locations below the UI base URL (``/api/v3/openapi.json``,
   ``/v3/api-docs``, ``/swagger.json``, ``/openapi.json``). The first JSON
   response carrying an ``openapi`` or ``swagger`` field wins.
3. The ``swagger-initializer.js`` script of the UI, looking for a
   ``definitionURL`` assignment or an ``ossServices`` host mapping.

Probe requests use a short timeout; a failed probe moves on to the next
candidate.
"""

from __future__ import annotations

import logging
import re
from typing import Optional
from urllib.parse import urlparse

import httpx

from docingest.exceptions import SpecValidationError

logger = logging.getLogger(__name__)

PROBE_TIMEOUT = 5.0

KNOWN_SPEC_URLS: dict[str, str] = {
    "petstore3.swagger.io": "https://petstore3.swagger.io/api/v3/openapi.json",
    "petstore.swagger.io": "https://petstore.swagger.io/v2/swagger.json",
    "petstore31.swagger.io": "https://petstore31.swagger.io/api/v31/openapi.json",
    "generator.swagger.io": "https://generator.swagger.io/api/swagger.json",
    "generator3.swagger.io": "https://generator3.swagger.io/openapi.json",
    "validator.swagger.io": "https://validator.swagger.io/validator/openapi.json",
    "oai.swagger.io": "https://oai.swagger.io/api/openapi.json",
    "converter.swagger.io": "https://converter.swagger.io/api/openapi.json",
}

_COMMON_SPEC_PATHS = (
    "/api/v3/openapi.json",
    "/v3/api-docs",
    "/swagger.json",
    "/openapi.json",
)

_ASSET_SUFFIX = re.compile(r"\.(html|json|yaml|yml|js|css)$", re.IGNORECASE)
_DEFINITION_URL = re.compile(r"definitionURL\s*=\s*[\"']([^\"']+)[\"']")
_OSS_SERVICES = re.compile(r"ossServices\s*=\s*`([^`]+)`")


def is_swagger_ui_url(url: str) -> bool:
    """Return ``True`` when *url* looks like a Swagger UI page rather than a document.

    The path must be the root or lack a static-asset extension, and the host
    must mention ``swagger``, ``petstore`` or ``api``.
    """
    parsed = urlparse(url)
    hostname = (parsed.hostname or "").lower()
    path = parsed.path or "/"

    if path != "/" and _ASSET_SUFFIX.search(path):
        return False
    return "swagger" in hostname or "petstore" in hostname or "api" in hostname


async def resolve_swagger_ui_url(
    ui_url: str, transport: Optional[httpx.AsyncBaseTransport] = None
) -> str:
    """Resolve a Swagger UI URL into the URL of the spec it displays.

    Args:
        ui_url: The Swagger UI page URL.
        transport: Optional httpx transport used for probe requests.

    Returns:
        The spec document URL.

    Raises:
        SpecValidationError: If no candidate yields a spec URL.
    """
    hostname = (urlparse(ui_url).hostname or "").lower()
    if hostname in KNOWN_SPEC_URLS:
        return KNOWN_SPEC_URLS[hostname]

    base = ui_url.rstrip("/")
    async with httpx.AsyncClient(
        transport=transport, timeout=PROBE_TIMEOUT, follow_redirects=True
    ) as client:
        for suffix in _COMMON_SPEC_PATHS:
            candidate = f"{base}{suffix}"
            if await _looks_like_spec(client, candidate):
                logger.info("Resolved Swagger UI %s to %s", ui_url, candidate)
                return candidate

        found = await _spec_url_from_initializer(client, base, hostname)
        if found:
            logger.info("Resolved Swagger UI %s to %s", ui_url, found)
            return found

    raise SpecValidationError(f"Could not resolve Swagger spec URL from {ui_url}")


async def _looks_like_spec(client: httpx.AsyncClient, url: str) -> bool:
    try:
        response = await client.get(url)
    except httpx.HTTPError as exc:
        logger.debug("Probe %s failed: %s", url, exc)
        return False

    if response.status_code != 200:
        return False
    if "json" not in response.headers.get("content-type", ""):
        return False
    try:
        data = response.json()
    except ValueError:
        return False
    return isinstance(data, dict) and bool(data.get("openapi") or data.get("swagger"))


async def _spec_url_from_initializer(
    client: httpx.AsyncClient, base: str, hostname: str
) -> Optional[str]:
    try:
        response = await client.get(f"{base}/swagger-initializer.js")
    except httpx.HTTPError as exc:
        logger.debug("Fetching swagger-initializer.js failed: %s", exc)
        return None
    if response.status_code != 200:
        return None

    script = response.text
    match = _DEFINITION_URL.search(script)
    if match:
        return match.group(1)

    match = _OSS_SERVICES.search(script)
    if match:
        for entry in match.group(1).split(","):
            host, _, spec_url = entry.strip().partition("=")
            if host and spec_url and host in hostname:
                return spec_url.strip()

    return None
