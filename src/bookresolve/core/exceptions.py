"""Custom exception hierarchy for bookresolve."""

from typing import Any


class BookResolveError(Exception):
    """Base exception for all bookresolve errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(BookResolveError):
    """Input validation failed."""

    pass


class InvalidISBNError(ValidationError):
    """The supplied ISBN is malformed."""

    def __init__(self, isbn: str, reason: str) -> None:
        super().__init__(f"Invalid ISBN {isbn!r}: {reason}", {"isbn": isbn})
        self.isbn = isbn


class ConfigurationError(BookResolveError):
    """Settings do not allow the requested operation."""

    pass


class NotFoundError(BookResolveError):
    """Resource not found."""

    pass


class BookNotFoundError(NotFoundError):
    """No provider has a record for the ISBN."""

    def __init__(self, isbn: str, source: str | None = None) -> None:
        message = "book not found" if source is None else f"book not found in {source}"
        super().__init__(message, {"isbn": isbn, "source": source})
        self.isbn = isbn
        self.source = source


class ResolutionError(BookResolveError):
    """Failed to resolve identifier."""

    pass


class TransientError(ResolutionError):
    """A provider call failed for operational reasons."""

    def __init__(
        self,
        message: str,
        source: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source


class ProviderUnavailableError(TransientError):
    """External provider is unreachable, timed out, or answered with an error status."""

    def __init__(
        self,
        message: str,
        source: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, source, details)
        self.status_code = status_code


class MalformedUpstreamError(TransientError):
    """Provider answered successfully but the payload could not be decoded."""

    pass


class ResolutionTimeoutError(TransientError):
    """The whole resolution exceeded its deadline."""

    pass
