"""Built-in CLI commands and the error reporting they share.

Command bodies run inside :func:`reporting_errors`, which turns library
failures into a clean exit:

* :class:`~docingest.exceptions.DocIngestError` -- message on stderr, exit
  with the error's own ``exit_code``.
* ``httpx.HTTPError`` / ``OSError`` -- reported as
  :class:`~docingest.exceptions.DocumentIOError`.
"""

from __future__ import annotations

import asyncio
from contextlib import contextmanager
from typing import Any, Coroutine, Iterator, TypeVar

import httpx
import typer

from docingest.exceptions import DocIngestError, DocumentIOError
from docingest.output import error

T = TypeVar("T")


@contextmanager
def reporting_errors() -> Iterator[None]:
    """Report docingest, network, and file errors and exit with their code.

    Raises:
        typer.Exit: With the mapped exit code.
    """
    try:
        yield
    except DocIngestError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    except (httpx.HTTPError, OSError) as exc:
        wrapped = DocumentIOError(f"{type(exc).__name__}: {exc}")
        error(str(wrapped))
        raise typer.Exit(code=wrapped.exit_code) from None


def run(coro: Coroutine[Any, Any, T]) -> T:
    """Run *coro* on a fresh event loop inside :func:`reporting_errors`."""
    with reporting_errors():
        return asyncio.run(coro)
