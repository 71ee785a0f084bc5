"""Domain error definitions."""

from __future__ import annotations


class QuoteKeeperError(RuntimeError):
    """Base class for recoverable quote-keeping failures."""


class InvalidQuoteError(QuoteKeeperError, ValueError):
    """Raised when a raw record lacks a non-empty string ``text`` or ``category``."""

    def __init__(self, message: str, *, record: object = None) -> None:
        super().__init__(message)
        self.record = record


class MalformedQuoteDataError(QuoteKeeperError, ValueError):
    """Raised when serialized quote data cannot be parsed into a record list."""


class QuoteImportError(QuoteKeeperError):
    """Raised when an import payload cannot be read."""


class RemoteUnavailableError(QuoteKeeperError):
    """Raised when the remote quote source cannot accept or serve records."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
