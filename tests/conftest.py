"""Shared test fixtures for all tests."""

from __future__ import annotations

import pytest

from bookresolve.config import BookResolveSettings
from bookresolve.core.models import BookRecord, NativeBook
from bookresolve.core.types import RecordStatus, ResolutionPolicy, SourceName

# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_native_book() -> NativeBook:
    """Create a fully populated native book."""
    return NativeBook(
        title="Clean Code",
        authors=["Robert C. Martin", "Dean Wampler"],
        isbn_13="9780134093413",
        isbn_10="0134093410",
        image_url="http://books.google.com/books/content?id=hjEFCAAAQBAJ&zoom=1",
        small_image_url="http://books.google.com/books/content?id=hjEFCAAAQBAJ&zoom=5",
        published_year="2008",
        publisher="Pearson Education",
        description="A handbook of agile software craftsmanship.",
        page_count=464,
        categories=["Computers", "Programming"],
        language="en",
        average_rating=4.5,
        source=SourceName.GOOGLE_BOOKS.value,
    )


@pytest.fixture
def sample_book_record() -> BookRecord:
    """Create a confirmed catalog record."""
    return BookRecord(
        isbn="9780441172719",
        title="Dune",
        authors="Frank Herbert",
        image_url="https://example.com/dune.jpg",
        small_image_url="https://example.com/dune-small.jpg",
        publication_year=1965,
        source=SourceName.GOOGLE_BOOKS.value,
        status=RecordStatus.CONFIRMED,
    )


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def mock_settings() -> BookResolveSettings:
    """Create mock settings for testing."""
    return BookResolveSettings(
        google_books_api_key="test-google-key",
        goodreads_api_key="test-goodreads-key",
        isbndb_cookie="SESS=test-session",
        request_timeout=2.0,
        total_timeout=5.0,
        default_policy=ResolutionPolicy.FALLBACK,
        log_level="DEBUG",
    )


@pytest.fixture
def mock_settings_minimal() -> BookResolveSettings:
    """Create settings without optional keys."""
    return BookResolveSettings(
        google_books_api_key=None,
        goodreads_api_key=None,
        isbndb_cookie="",
    )

