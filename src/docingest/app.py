"""Typer application and CLI entry point for docingest.

This module wires together the top-level Typer application and registers the
built-in commands (``parse``, ``formats``, ``endpoints``, ``scenarios``,
``validate``).

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs a SIGINT handler, loads a ``.env`` file from
the working directory, and invokes the Typer app.

See Also:
    :mod:`docingest.config`: Environment-driven settings.
    :mod:`docingest.output`: Output formatting initialised in :func:`main_callback`.
"""

from __future__ import annotations

import signal
import sys
from typing import Any

import typer
from dotenv import load_dotenv

from docingest import __version__
from docingest.commands.documents import formats_command, parse_command
from docingest.commands.spec import endpoints_command, scenarios_command, validate_command
from docingest.exit_codes import EXIT_GENERIC_FAILURE

app = typer.Typer(
    name="docingest",
    help="Extract text and API endpoints from documents and OpenAPI specs.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command("parse")(parse_command)
app.command("formats")(formats_command)
app.command("endpoints")(endpoints_command)
app.command("scenarios")(scenarios_command)
app.command("validate")(validate_command)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"docingest {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print the docingest version and exit.",
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Emit machine-readable JSON on stdout."
    ),
    plain_output: bool = typer.Option(
        False, "--plain", help="Emit plain tab-separated text on stdout."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Never use colour or Rich markup."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Only report errors on stderr."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging."
    ),
) -> None:
    """Root callback executed before every command.

    Initialises the global :class:`~docingest.output.OutputManager` from CLI
    flags and routes library logging to stderr. ``DOCINGEST_LOG_LEVEL``
    overrides the level chosen by ``--verbose``.

    Args:
        version: Eager flag handled by :func:`_version_callback`.
        json_output: Select :attr:`~docingest.output.OutputFormat.JSON`.
        plain_output: Select :attr:`~docingest.output.OutputFormat.PLAIN`.
        no_color: Render diagnostics without colour.
        quiet: Drop info and success messages.
        verbose: Log at DEBUG instead of WARNING.
    """
    from docingest.config import load_settings
    from docingest.output import OutputFormat, OutputManager, configure_logging, set_output

    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN

    output = OutputManager(format=fmt, no_color=no_color, quiet=quiet)
    set_output(output)

    configure_logging(
        verbose=verbose,
        level=load_settings().log_level,
        console=output.stderr_console,
    )


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def main() -> None:
    """CLI entry point invoked by the ``docingest`` console script.

    Commands report their own :class:`~docingest.exceptions.DocIngestError`
    failures; anything reaching this level is printed and mapped to a generic
    failure exit.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    load_dotenv()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from docingest.exceptions import DocIngestError
        from docingest.output import error

        if isinstance(exc, DocIngestError):
            error(str(exc))
            sys.exit(exc.exit_code)
        error(f"Unexpected error: {type(exc).__name__}: {exc}")
        sys.exit(EXIT_GENERIC_FAILURE)
