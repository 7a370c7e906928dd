"""Goodreads XML search resolver implementation."""

from __future__ import annotations

from typing import ClassVar

from lxml import etree

from bookresolve.core.models import BookRecord, NativeBook
from bookresolve.core.normalization import normalize_book
from bookresolve.core.types import SourceName
from bookresolve.resolution.base import AbstractProvider

# Paths are relative to the <GoodreadsResponse> root
WORK_PATH = "search/results/work"
BEST_BOOK_PATH = f"{WORK_PATH}/best_book"


def _text(root: etree._Element, path: str) -> str:
    """Text of the element at ``path``, or "" when absent."""
    elem = root.find(path)
    if elem is None or elem.text is None:
        return ""
    return elem.text.strip()


def _rating(value: str) -> float:
    try:
        return max(float(value), 0.0)
    except ValueError:
        return 0.0


class GoodreadsProvider(AbstractProvider):
    """
    Goodreads search API provider (XML).

    Only the first work of the search response is read, along the fixed
    path ``search/results/work/best_book``. Extraction is positional and
    not schema-validated: missing elements simply yield empty fields.
    """

    SOURCE_NAME: ClassVar[SourceName] = SourceName.GOODREADS
    BASE_URL: ClassVar[str] = "https://www.goodreads.com"

    def _get_default_headers(self) -> dict[str, str]:
        return {"Accept": "application/xml"}

    async def lookup(self, isbn: str) -> BookRecord:
        """Search Goodreads by ISBN."""
        params = {"q": isbn, "key": self.config.api_key or ""}
        response = await self._fetch("/search/index.xml", params=params)

        try:
            root = etree.fromstring(response.content)
        except etree.XMLSyntaxError as e:
            raise self._malformed(isbn, f"invalid XML ({e})") from e

        native = self._parse_search(root, isbn)
        if not native.title:
            raise self._not_found(isbn)

        return normalize_book(native)

    def _parse_search(self, root: etree._Element, isbn: str) -> NativeBook:
        """Read the best book of the first work into native fields."""
        author = _text(root, f"{BEST_BOOK_PATH}/author/name")

        # The search payload carries no ISBN; keep the one that was asked for
        isbn_13 = isbn if len(isbn) == 13 else ""
        isbn_10 = isbn if len(isbn) == 10 else ""

        return NativeBook(
            title=_text(root, f"{BEST_BOOK_PATH}/title"),
            authors=[author] if author else [],
            isbn_13=isbn_13,
            isbn_10=isbn_10,
            image_url=_text(root, f"{BEST_BOOK_PATH}/image_url"),
            small_image_url=_text(root, f"{BEST_BOOK_PATH}/small_image_url"),
            published_year=_text(root, f"{WORK_PATH}/original_publication_year"),
            average_rating=_rating(_text(root, f"{WORK_PATH}/average_rating")),
            source=self.source_name.value,
        )
