"""Numeric process exit codes returned by the ``docingest`` CLI.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~docingest.exceptions.DocIngestError` subclass.
Shell wrappers can inspect the exit code to tell a missing credential from an
unsupported locator without parsing stderr.

Example::

    $ docingest parse notes.xyz
    $ echo $?
    4   # EXIT_UNSUPPORTED_FORMAT -- no parser claims the locator
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred, including configuration problems."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments."""

EXIT_UNSUPPORTED_FORMAT = 4
"""No registered parser accepts the given locator."""

EXIT_IO_ERROR = 6
"""A file could not be read or a network fetch failed."""

EXIT_SPEC_VALIDATION_ERROR = 7
"""The OpenAPI/Swagger document could not be decoded or failed validation."""
