"""Book providers for fetching book metadata."""

from bookresolve.resolution.books.goodreads import GoodreadsProvider
from bookresolve.resolution.books.google_books import GoogleBooksProvider
from bookresolve.resolution.books.isbndb import (
    IsbndbScrapeProvider,
    ScrapedBook,
    parse_book_page,
)

__all__ = [
    "GoodreadsProvider",
    "GoogleBooksProvider",
    "IsbndbScrapeProvider",
    "ScrapedBook",
    "parse_book_page",
]
