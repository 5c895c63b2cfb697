"""Exception hierarchy for sheets2json."""

from __future__ import annotations


class Sheets2JsonError(Exception):
    """Base class for every fatal condition the CLI reports."""


class CredentialError(Sheets2JsonError):
    """Credential file or environment variable is missing or unparsable."""


class FetchError(Sheets2JsonError):
    """Network, auth or range failure from the Sheets API."""


class EmptyResultError(Sheets2JsonError):
    """The requested range returned no rows."""

    def __init__(self, message: str = "No data found") -> None:
        super().__init__(message)


class SerializationError(Sheets2JsonError):
    """A cell value could not be encoded as JSON."""
