"""Errors raised by the table API."""

from __future__ import annotations


class TableApiError(Exception):
    """Base class for table API errors."""

    default_message = "table API error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class NilClientError(TableApiError):
    """Raised when an operation needs a client and none was given."""

    default_message = "client can't be nil"


class NilResponseError(TableApiError):
    """Raised when a response is required but missing."""

    default_message = "response can't be nil"


class NilResultError(TableApiError):
    """Raised when a response object has no result property."""

    default_message = "result property missing in response object"


class WrongResponseTypeError(TableApiError):
    """Raised when a response is not of the expected kind."""

    default_message = "incorrect Response Type"


class ParsingError(TableApiError):
    """Raised when a pagination link cannot be parsed."""

    default_message = "parsing nextLink url failed"