"""Exception hierarchy for docingest.

All exceptions inherit from :class:`DocIngestError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`docingest.exit_codes`.
The CLI catches ``DocIngestError`` and exits with the matching code.

Network and file-system failures raised while parsing are *not* wrapped: an
``httpx.HTTPError`` or ``OSError`` reaches the caller of ``parse`` unchanged.
Only the CLI converts them into :class:`DocumentIOError` for reporting.

Subclass hierarchy::

    DocIngestError (exit 1)
    +-- ConfigError             (exit 1)
    +-- InvalidUsageError       (exit 2)
    +-- UnsupportedFormatError  (exit 4)
    +-- DocumentIOError         (exit 6)
    +-- SpecValidationError     (exit 7)
"""

from docingest.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_IO_ERROR,
    EXIT_SPEC_VALIDATION_ERROR,
    EXIT_UNSUPPORTED_FORMAT,
)


class DocIngestError(Exception):
    """Base exception for all docingest errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigError(DocIngestError):
    """Raised when a required setting or credential is missing or unreadable."""

    exit_code = EXIT_GENERIC_FAILURE


class InvalidUsageError(DocIngestError):
    """Raised for invalid CLI arguments."""

    exit_code = EXIT_INVALID_USAGE


class UnsupportedFormatError(DocIngestError):
    """Raised when no registered parser accepts a locator."""

    exit_code = EXIT_UNSUPPORTED_FORMAT


class DocumentIOError(DocIngestError):
    """Raised for a file read or network fetch failure.

    The CLI wraps ``OSError`` and ``httpx.HTTPError`` in it; the Confluence
    parser raises it directly when a page response is not a JSON object.
    """

    exit_code = EXIT_IO_ERROR


class SpecValidationError(DocIngestError):
    """Raised when an OpenAPI/Swagger document cannot be decoded or fails validation."""

    exit_code = EXIT_SPEC_VALIDATION_ERROR
