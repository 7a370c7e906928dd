"""Google Books resolver implementation."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import ValidationError as PydanticValidationError

from bookresolve.core.models import BookRecord, NativeBook
from bookresolve.core.normalization import normalize_book
from bookresolve.core.types import SourceName
from bookresolve.resolution.base import AbstractProvider


class GoogleBooksProvider(AbstractProvider):
    """
    Google Books API provider (structured JSON catalog).

    API Documentation: https://developers.google.com/books/docs/v1/using

    Works without API key but rate limits apply.
    With API key, higher quotas are available.
    """

    SOURCE_NAME: ClassVar[SourceName] = SourceName.GOOGLE_BOOKS
    BASE_URL: ClassVar[str] = "https://www.googleapis.com/books/v1"

    def _get_default_headers(self) -> dict[str, str]:
        return {"Accept": "application/json"}

    async def lookup(self, isbn: str) -> BookRecord:
        """Search Google Books by ISBN."""
        params: dict[str, Any] = {"q": f"isbn:{isbn}"}
        if self.config.api_key:
            params["key"] = self.config.api_key

        response = await self._fetch("/volumes", params=params)

        try:
            data = response.json()
        except ValueError as e:
            raise self._malformed(isbn, f"invalid JSON ({e})") from e
        if not isinstance(data, dict):
            raise self._malformed(isbn, "expected a JSON object")

        total_items = data.get("totalItems", 0)
        items = data.get("items") or []
        if not isinstance(total_items, int) or not isinstance(items, list):
            raise self._malformed(isbn, "totalItems or items has the wrong type")
        if total_items < 1 or not items:
            raise self._not_found(isbn)

        volume_info = items[0].get("volumeInfo") if isinstance(items[0], dict) else None
        if not isinstance(volume_info, dict):
            raise self._malformed(isbn, "first item has no volumeInfo")

        try:
            record = normalize_book(self._parse_volume(volume_info))
        except (TypeError, AttributeError, PydanticValidationError) as e:
            raise self._malformed(isbn, f"unexpected volumeInfo shape ({e})") from e

        if not record.title:
            raise self._not_found(isbn)
        return record

    def _parse_volume(self, volume_info: dict[str, Any]) -> NativeBook:
        """Parse a Google Books volumeInfo object into native fields."""
        isbn10 = ""
        isbn13 = ""
        for ident in volume_info.get("industryIdentifiers") or []:
            ident_type = ident.get("type", "")
            ident_value = ident.get("identifier", "")
            if ident_type == "ISBN_10":
                isbn10 = ident_value
            elif ident_type == "ISBN_13":
                isbn13 = ident_value

        image_links = volume_info.get("imageLinks") or {}

        # publishedDate is "2008", "2008-08" or "2008-08-01"
        published_date = str(volume_info.get("publishedDate") or "")

        return NativeBook(
            title=volume_info.get("title") or "",
            authors=[a for a in volume_info.get("authors") or [] if a],
            isbn_13=isbn13,
            isbn_10=isbn10,
            image_url=image_links.get("thumbnail") or "",
            small_image_url=image_links.get("smallThumbnail") or "",
            published_year=published_date[:4],
            publisher=volume_info.get("publisher") or "",
            description=volume_info.get("description") or "",
            page_count=volume_info.get("pageCount") or 0,
            categories=volume_info.get("categories") or [],
            language=volume_info.get("language") or "",
            average_rating=volume_info.get("averageRating") or 0.0,
            source=self.source_name.value,
        )
