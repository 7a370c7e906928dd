"""Core enums and type definitions."""

from enum import IntEnum, StrEnum


class SourceName(StrEnum):
    """Known data sources for book records."""

    GOOGLE_BOOKS = "google_books"
    GOODREADS = "goodreads"
    ISBNDB_CRAWL = "isbndb_crawl"


class ResolutionPolicy(StrEnum):
    """How the orchestrator combines providers."""

    # Try providers in order, stop on first success
    FALLBACK = "fallback"

    # Query two providers and surface disagreement
    RECONCILE = "reconcile"


class RecordStatus(IntEnum):
    """Values for the canonical record status flag."""

    UNCONFIRMED = 0
    CONFIRMED = 1
