"""Environment-driven settings and credential resolution.

docingest keeps no configuration files of its own. Everything it needs is read
from the process environment when a parser asks for it:

* ``CONFLUENCE_TOKEN`` -- bearer token for
  :class:`~docingest.parsers.confluence.ConfluenceParser`. Its absence is a
  hard precondition failure for that one parser only.
* ``DOCINGEST_LOG_LEVEL`` -- overrides the CLI log level.

Settings are re-read on every :func:`load_settings` call rather than cached, so
a token exported after import (or patched in a test) is picked up.

:func:`resolve_credential` understands the same ``env:VAR`` / ``file:/path``
source descriptors a user can pass on the command line.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, Field

from docingest.exceptions import ConfigError

CONFLUENCE_TOKEN_ENV = "CONFLUENCE_TOKEN"
LOG_LEVEL_ENV = "DOCINGEST_LOG_LEVEL"


class Settings(BaseModel):
    """Process-wide settings snapshot built from environment variables."""

    confluence_token: Optional[str] = Field(
        default=None, description="Bearer token for Confluence REST requests"
    )
    log_level: Optional[str] = Field(
        default=None, description="Log level name overriding the CLI default"
    )


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build a :class:`Settings` snapshot from *environ*.

    Empty strings are treated as unset.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        A fresh :class:`Settings` instance.
    """
    env = os.environ if environ is None else environ
    return Settings(
        confluence_token=env.get(CONFLUENCE_TOKEN_ENV) or None,
        log_level=env.get(LOG_LEVEL_ENV) or None,
    )


def resolve_credential(source: str) -> str:
    """Resolve a credential from its source descriptor.

    Supported formats:
        - ``"env:VAR_NAME"`` -- reads ``os.environ["VAR_NAME"]``
        - ``"file:/path/to/file"`` -- reads file content, stripped of whitespace

    Args:
        source: The source descriptor string.

    Returns:
        The resolved credential string.

    Raises:
        ConfigError: If the source can't be resolved.
    """
    if source.startswith("env:"):
        var_name = source[4:]
        value = os.environ.get(var_name)
        if not value:
            raise ConfigError(
                f"Environment variable '{var_name}' is not set (source: {source})"
            )
        return value

    if source.startswith("file:"):
        path = Path(source[5:]).expanduser()
        if not path.is_file():
            raise ConfigError(f"Credential file not found: {path} (source: {source})")
        try:
            return path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise ConfigError(f"Cannot read credential file {path}: {exc}") from exc

    raise ConfigError(f"Unknown credential source format: {source}")
