"""Domain models for book records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .types import RecordStatus


def to_camel_case(string: str) -> str:
    """Convert snake_case to camelCase."""
    components = string.split("_")
    return components[0] + "".join(word.capitalize() for word in components[1:])


class BookRecord(BaseModel):
    """
    Canonical book record.

    Every provider's output is mapped into this shape. Records are immutable;
    serialize with ``model_dump(by_alias=True)`` for camelCase keys.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel_case,
        populate_by_name=True,
    )

    isbn: str = Field(default="", description="ISBN-13 if known, otherwise ISBN-10")
    title: str = Field(..., description="Title of the book")
    authors: str = Field(default="", description="Author names joined with ', '")
    image_url: str = Field(default="", description="Cover image URL")
    small_image_url: str = Field(default="", description="Thumbnail cover image URL")
    publisher: str = Field(default="", description="Publisher name")
    description: str = Field(default="", description="Description or blurb")
    language: str = Field(default="", description="Language code")
    categories: str = Field(default="", description="Categories joined with ', '")
    page_count: int = Field(default=0, ge=0, description="Number of pages")
    publication_year: int = Field(default=0, description="Publication year, 0 if unknown")
    average_rating: float = Field(default=0.0, ge=0.0, description="Average reader rating")
    source: str = Field(default="", description="Provider that produced the record")
    status: int = Field(
        default=RecordStatus.UNCONFIRMED,
        description="1 once the record is confirmed by a found title",
    )

    @property
    def is_confirmed(self) -> bool:
        return self.status == RecordStatus.CONFIRMED


class NativeBook(BaseModel):
    """Provider-native book fields, before normalization."""

    title: str = ""
    authors: list[str] = Field(default_factory=list)
    isbn_13: str = ""
    isbn_10: str = ""
    image_url: str = ""
    small_image_url: str = ""
    published_year: str = Field(default="", description="Free-text publication year")
    publisher: str = ""
    description: str = ""
    page_count: int = 0
    categories: list[str] = Field(default_factory=list)
    language: str = ""
    average_rating: float = 0.0
    source: str = ""


class LibraryEntry(BaseModel):
    """A canonical record owned by a user."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel_case,
        populate_by_name=True,
    )

    user_id: str = Field(..., description="Owner of the entry")
    book: BookRecord

    @property
    def isbn(self) -> str:
        return self.book.isbn
