"""ISBNdb book page scraper implementation."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import ClassVar

import httpx
from bs4 import BeautifulSoup
from pydantic import BaseModel

from bookresolve.core.models import BookRecord
from bookresolve.core.types import RecordStatus, SourceName
from bookresolve.resolution.base import AbstractProvider, ProviderConfig

ROW_SELECTOR = "body div table tr"
COVER_SELECTOR = "body div .container .col-md-3 object"

# Row label -> ScrapedBook field. Labels must match exactly.
ROW_LABELS: dict[str, str] = {
    "Full Title": "title",
    "ISBN13": "isbn",
    "Publisher": "publisher",
    "Authors": "authors",
}


class ScrapedBook(BaseModel):
    """Fields read off a book page."""

    title: str = ""
    isbn: str = ""
    publisher: str = ""
    authors: str = ""
    image_url: str = ""


PageParser = Callable[[str], ScrapedBook]


def parse_book_page(html: str) -> ScrapedBook:
    """
    Parse an ISBNdb book page.

    Scans every row of the details table for a header cell whose text is
    exactly one of ``ROW_LABELS`` and takes the data cell as the value.
    The cover URL is the ``data`` attribute of the ``<object>`` in the
    artwork column.
    """
    soup = BeautifulSoup(html, "lxml")
    fields: dict[str, str] = {}

    for row in soup.select(ROW_SELECTOR):
        label = "".join(th.get_text() for th in row.find_all("th"))
        field = ROW_LABELS.get(label)
        if field is not None:
            fields[field] = "".join(td.get_text() for td in row.find_all("td")).strip()

    for obj in soup.select(COVER_SELECTOR):
        if obj.has_attr("data"):
            fields["image_url"] = obj["data"]

    return ScrapedBook(**fields)


class IsbndbScrapeProvider(AbstractProvider):
    """
    Provider that scrapes the public ISBNdb book page.

    The origin serves a block page unless a browser session cookie is sent;
    pass it as ``cookie``. It expires, so it comes from settings rather
    than code. The page parser can be swapped without touching callers.
    """

    SOURCE_NAME: ClassVar[SourceName] = SourceName.ISBNDB_CRAWL
    BASE_URL: ClassVar[str] = "https://isbndb.com"

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        config: ProviderConfig | None = None,
        logger: logging.Logger | None = None,
        *,
        cookie: str = "",
        parser: PageParser = parse_book_page,
    ) -> None:
        super().__init__(http_client, config, logger)
        self._cookie = cookie
        self._parser = parser

    def _get_default_headers(self) -> dict[str, str]:
        headers = {"Accept": "text/html"}
        if self._cookie:
            headers["cookie"] = self._cookie
        return headers

    async def lookup(self, isbn: str) -> BookRecord:
        """Fetch and scrape the book page for an ISBN."""
        response = await self._fetch(f"/book/{isbn}")

        page = self._parser(response.text)
        if not page.title:
            raise self._not_found(isbn)

        return BookRecord(
            isbn=page.isbn or isbn,
            title=page.title,
            authors=page.authors,
            image_url=page.image_url,
            publisher=page.publisher,
            source=self.source_name.value,
            status=RecordStatus.CONFIRMED,
        )
