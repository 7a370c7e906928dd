"""Core types, models, and utilities."""

from .exceptions import (
    BookNotFoundError,
    BookResolveError,
    ConfigurationError,
    InvalidISBNError,
    MalformedUpstreamError,
    NotFoundError,
    ProviderUnavailableError,
    ResolutionError,
    ResolutionTimeoutError,
    TransientError,
    ValidationError,
)
from .identifiers import ISBN, strip_isbn
from .models import BookRecord, LibraryEntry, NativeBook
from .normalization import join_values, normalize_book, parse_year
from .types import RecordStatus, ResolutionPolicy, SourceName

__all__ = [
    # Types
    "RecordStatus",
    "ResolutionPolicy",
    "SourceName",
    # Identifiers
    "ISBN",
    "strip_isbn",
    # Models
    "BookRecord",
    "LibraryEntry",
    "NativeBook",
    # Normalization
    "join_values",
    "normalize_book",
    "parse_year",
    # Exceptions
    "BookNotFoundError",
    "BookResolveError",
    "ConfigurationError",
    "InvalidISBNError",
    "MalformedUpstreamError",
    "NotFoundError",
    "ProviderUnavailableError",
    "ResolutionError",
    "ResolutionTimeoutError",
    "TransientError",
    "ValidationError",
]
