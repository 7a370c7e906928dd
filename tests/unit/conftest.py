"""Unit test fixtures with HTTP mocking."""

from __future__ import annotations

from typing import Any

import httpx
import pytest
import respx

from bookresolve.resolution.base import ProviderConfig

# ============================================================================
# HTTP Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Provide a respx mock router for HTTP mocking.

    Use this when you need fine-grained control over mocked responses.
    The mock is automatically started and stopped by respx.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
async def http_client():
    """Provide a real httpx client; requests are intercepted by respx."""
    async with httpx.AsyncClient() as client:
        yield client


# ============================================================================
# Provider Configuration Fixtures
# ============================================================================


@pytest.fixture
def provider_config() -> ProviderConfig:
    """Create a provider config for testing."""
    return ProviderConfig(
        api_key="test-api-key",
        timeout=2.0,
        enabled=True,
    )


@pytest.fixture
def provider_config_no_key() -> ProviderConfig:
    """Create a provider config without API key."""
    return ProviderConfig(api_key=None, timeout=2.0)


# ============================================================================
# Google Books Response Fixtures
# ============================================================================


@pytest.fixture
def google_books_response() -> dict[str, Any]:
    """Sample Google Books API response for ISBN lookup."""
    return {
        "kind": "books#volumes",
        "totalItems": 1,
        "items": [
            {
                "kind": "books#volume",
                "id": "B1hSG45JCX4C",
                "volumeInfo": {
                    "title": "Dune",
                    "authors": ["Frank Herbert"],
                    "publisher": "Penguin",
                    "publishedDate": "1990-09-01",
                    "description": "Set on the desert planet Arrakis.",
                    "industryIdentifiers": [
                        {"type": "ISBN_10", "identifier": "0441172717"},
                        {"type": "ISBN_13", "identifier": "9780441172719"},
                    ],
                    "pageCount": 535,
                    "categories": ["Fiction", "Science Fiction"],
                    "averageRating": 4.5,
                    "imageLinks": {
                        "smallThumbnail": "http://books.google.com/books/content?id=B1hSG45JCX4C&zoom=5",
                        "thumbnail": "http://books.google.com/books/content?id=B1hSG45JCX4C&zoom=1",
                    },
                    "language": "en",
                },
            }
        ],
    }


@pytest.fixture
def google_books_empty_response() -> dict[str, Any]:
    """Sample Google Books API response with no results."""
    return {
        "kind": "books#volumes",
        "totalItems": 0,
    }


# ============================================================================
# Goodreads Response Fixtures
# ============================================================================


GOODREADS_SEARCH_XML = """<?xml version="1.0" encoding="UTF-8"?>
<GoodreadsResponse>
  <Request>
    <authentication>true</authentication>
    <key><![CDATA[test-goodreads-key]]></key>
    <method><![CDATA[search_index]]></method>
  </Request>
  <search>
    <query><![CDATA[9780441172719]]></query>
    <results-start>1</results-start>
    <results-end>1</results-end>
    <total-results>1</total-results>
    <results>
      <work>
        <id type="integer">3634639</id>
        <books_count type="integer">400</books_count>
        <ratings_count type="integer">1000000</ratings_count>
        <original_publication_year type="integer">1965</original_publication_year>
        <average_rating>4.25</average_rating>
        <best_book type="Book">
          <id type="integer">44767458</id>
          <title>{title}</title>
          <author>
            <id type="integer">58</id>
            <name>Frank Herbert</name>
          </author>
          <image_url>https://images.gr-assets.com/books/1555447414m/44767458.jpg</image_url>
          <small_image_url>https://images.gr-assets.com/books/1555447414s/44767458.jpg</small_image_url>
        </best_book>
      </work>
    </results>
  </search>
</GoodreadsResponse>
"""

GOODREADS_EMPTY_XML = """<?xml version="1.0" encoding="UTF-8"?>
<GoodreadsResponse>
  <search>
    <query><![CDATA[9780000000002]]></query>
    <total-results>0</total-results>
    <results>
    </results>
  </search>
</GoodreadsResponse>
"""


@pytest.fixture
def goodreads_search_xml():
    """Factory for a Goodreads search response with a given best-book title."""

    def _build(title: str = "Dune") -> str:
        return GOODREADS_SEARCH_XML.format(title=title)

    return _build


@pytest.fixture
def goodreads_empty_xml() -> str:
    """Sample Goodreads search response with no results."""
    return GOODREADS_EMPTY_XML


# ============================================================================
# ISBNdb Page Fixtures
# ============================================================================


ISBNDB_BOOK_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <title>Unlucky 13 | ISBNdb</title>
</head>
<body>
  <div id="wrapper">
    <div class="container">
      <div class="row layout">
        <div class="content_layout">
          <div class="container">
            <div class="row">
              <div class="artwork col-xs-12 col-md-3">
                <object height="250px" width="190px" data="https://images.isbndb.com/covers/60/55/9781784756055.jpg" type="image/png">
                  <img height="250px" width="190px" src="/modules/isbndb/img/default-book-cover.jpg" />
                </object>
              </div>
              <div class="book-table col-xs-12 col-md-6">
                <table class="table table-hover table-responsive">
                  <tr> <th>Full Title</th> <td>Unlucky 13</td> </tr>
                  <tr> <th>ISBN</th> <td>1784756059</td> </tr>
                  <tr> <th>ISBN13</th> <td>9781784756055</td> </tr>
                  <tr> <th>Publisher</th> <td>BB Books</td> </tr>
                  <tr> <th>Authors</th> <td>
                    James Patterson
                  </td> </tr>
                  <tr> <th>Binding</th> <td>Paperback</td> </tr>
                </table>
              </div>
            </div>
          </div>
        </div>
      </div>
    </div>
  </div>
</body>
</html>
"""

ISBNDB_EMPTY_PAGE = """<!DOCTYPE html>
<html lang="en">
<head><title>Book not found | ISBNdb</title></head>
<body>
  <div class="container">
    <div class="row">
      <p>We could not find this book.</p>
      <table class="table">
        <tr> <th>Title</th> <td>Nothing here</td> </tr>
      </table>
    </div>
  </div>
</body>
</html>
"""


@pytest.fixture
def isbndb_book_page() -> str:
    """Sample ISBNdb book page."""
    return ISBNDB_BOOK_PAGE


@pytest.fixture
def isbndb_empty_page() -> str:
    """Sample ISBNdb page without a book table."""
    return ISBNDB_EMPTY_PAGE
