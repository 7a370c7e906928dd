"""Mapping of provider-native book data into canonical records."""

from collections.abc import Iterable

from .models import BookRecord, NativeBook
from .types import RecordStatus

LIST_SEPARATOR = ", "


def parse_year(value: str | None) -> int:
    """
    Parse a free-text publication year.

    Only a plain integer string is accepted; anything else ("", "unknown",
    "2008-08") yields 0 rather than an error.
    """
    if not value:
        return 0
    try:
        return int(value.strip())
    except ValueError:
        return 0


def join_values(values: Iterable[str] | None) -> str:
    """Join non-empty values with a comma and a space."""
    if not values:
        return ""
    return LIST_SEPARATOR.join(v for v in values if v)


def normalize_book(native: NativeBook) -> BookRecord:
    """
    Build a canonical record from provider-native fields.

    Coalescing rules:
    - small image falls back to the large image, and vice versa
    - ISBN-13 is preferred, ISBN-10 is used when it is missing
    - the year string is parsed leniently (see ``parse_year``)
    - authors and categories are comma-joined

    Only call this for books already known to exist: the status is always
    set to confirmed.
    """
    small_image_url = native.small_image_url or native.image_url
    image_url = native.image_url or native.small_image_url

    return BookRecord(
        isbn=native.isbn_13 or native.isbn_10,
        title=native.title,
        authors=join_values(native.authors),
        image_url=image_url,
        small_image_url=small_image_url,
        publisher=native.publisher,
        description=native.description,
        language=native.language,
        categories=join_values(native.categories),
        page_count=max(native.page_count, 0),
        publication_year=parse_year(native.published_year),
        average_rating=native.average_rating,
        source=native.source,
        status=RecordStatus.CONFIRMED,
    )
