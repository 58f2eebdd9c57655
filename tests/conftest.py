"""Shared test fixtures for docingest.

Provides reusable fixtures for loading spec fixtures, isolating the
environment from real credentials, and managing output state. These fixtures
are automatically discovered by pytest and available to all test modules
without explicit imports.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import pytest
import yaml

from docingest.output import reset_output


FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Auto-reset global state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time. When Typer's CliRunner redirects those streams and the
    test finishes, the cached references become stale. Resetting forces a
    fresh manager to be created on next use.
    """
    yield
    reset_output()


@pytest.fixture(autouse=True)
def _reset_logging_between_tests() -> None:
    """Undo configure_logging() so caplog sees docingest records again."""
    yield
    logger = logging.getLogger("docingest")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's real Confluence token and log level out of tests."""
    monkeypatch.delenv("CONFLUENCE_TOKEN", raising=False)
    monkeypatch.delenv("DOCINGEST_LOG_LEVEL", raising=False)


# ---------------------------------------------------------------------------
# Spec fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def petstore_path() -> Path:
    """Path to the OpenAPI 3.0 petstore fixture."""
    return FIXTURES_DIR / "petstore_openapi_3.0.json"


@pytest.fixture
def orders_path() -> Path:
    """Path to the Swagger 2.0 orders fixture (YAML, with basePath)."""
    return FIXTURES_DIR / "orders_swagger_2.0.yaml"


@pytest.fixture
def petstore_raw(petstore_path: Path) -> dict[str, Any]:
    """Load raw petstore 3.0 spec dict."""
    with open(petstore_path, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def orders_raw(orders_path: Path) -> dict[str, Any]:
    """Load raw Swagger 2.0 orders spec dict."""
    with open(orders_path, encoding="utf-8") as f:
        return yaml.safe_load(f)


@pytest.fixture
def minimal_spec() -> dict[str, Any]:
    """Smallest document that passes structural validation."""
    return {
        "openapi": "3.0.3",
        "info": {"title": "Minimal", "version": "1.0.0"},
        "paths": {},
    }
