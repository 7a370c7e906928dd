"""Library service composing resolution with a persistence port."""

from __future__ import annotations

import logging
import time
from typing import Any, Protocol

from pydantic import ValidationError as PydanticValidationError

from bookresolve.core.exceptions import NotFoundError, ValidationError
from bookresolve.core.models import BookRecord, LibraryEntry
from bookresolve.resolution.base import BookResolver

logger = logging.getLogger(__name__)


class BookRepository(Protocol):
    """Storage for library entries, keyed by ISBN and owner."""

    async def get(self, isbn: str, user_id: str) -> LibraryEntry | None: ...

    async def upsert(self, entry: LibraryEntry) -> LibraryEntry: ...

    async def list_by_user(self, user_id: str, limit: int, offset: int) -> list[LibraryEntry]: ...


class LibraryService:
    """
    Service for a user's book library.

    Resolution never touches storage; this service is where the two meet:
    1. Resolve the ISBN through the configured resolver
    2. Store the primary record for the user
    """

    DEFAULT_PAGE_SIZE = 10

    def __init__(
        self,
        repository: BookRepository,
        resolver: BookResolver,
    ) -> None:
        """
        Initialize the library service.

        Args:
            repository: Persistence port for library entries
            resolver: Resolver used for new ISBNs
        """
        self._repository = repository
        self._resolver = resolver

    async def lookup(self, isbn: str) -> list[BookRecord]:
        """Resolve an ISBN without storing anything."""
        result = await self._resolver.resolve(isbn)
        return result.records

    async def add_to_library(self, isbn: str, user_id: str) -> LibraryEntry:
        """Resolve a book and store it in the user's library."""
        start = time.monotonic()

        result = await self._resolver.resolve(isbn)
        if result.disagreement:
            logger.info(
                f"Sources disagree on {isbn}; storing {result.primary.source} record"
            )

        entry = await self._repository.upsert(
            LibraryEntry(user_id=user_id, book=result.primary)
        )

        duration = time.monotonic() - start
        logger.info(f"Stored {isbn} for user {user_id} in {duration:.2f}s")
        return entry

    async def get_entry(self, isbn: str, user_id: str) -> LibraryEntry:
        """Get a stored entry."""
        entry = await self._repository.get(isbn, user_id)
        if entry is None:
            raise NotFoundError(
                f"No library entry for {isbn}",
                {"isbn": isbn, "user_id": user_id},
            )
        return entry

    async def update_entry(
        self,
        isbn: str,
        user_id: str,
        changes: dict[str, Any],
    ) -> LibraryEntry:
        """
        Edit fields of a stored entry's book, such as ``status`` or ``title``.

        Keys may be field names or their camelCase aliases. The ISBN and
        source of an entry cannot be changed.
        """
        entry = await self.get_entry(isbn, user_id)

        names = {info.alias or name: name for name, info in BookRecord.model_fields.items()}
        names.update({name: name for name in BookRecord.model_fields})
        unknown = sorted(set(changes) - set(names))
        if unknown:
            raise ValidationError(
                f"Unknown fields: {', '.join(unknown)}",
                {"isbn": isbn, "user_id": user_id},
            )

        fields = entry.book.model_dump()
        fields.update((names[key], value) for key, value in changes.items())
        if fields["isbn"] != entry.book.isbn or fields["source"] != entry.book.source:
            raise ValidationError(
                "isbn and source of a library entry cannot be changed",
                {"isbn": isbn, "user_id": user_id},
            )

        try:
            book = BookRecord.model_validate(fields)
        except PydanticValidationError as e:
            raise ValidationError(
                f"Invalid changes for {isbn}: {e.error_count()} error(s)",
                {"isbn": isbn, "user_id": user_id, "errors": e.errors()},
            ) from e

        updated = await self._repository.upsert(LibraryEntry(user_id=user_id, book=book))
        logger.info(f"Updated {isbn} for user {user_id}: {', '.join(sorted(changes))}")
        return updated

    async def list_entries(
        self,
        user_id: str,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> list[LibraryEntry]:
        """List a user's entries page by page."""
        if limit < 0 or offset < 0:
            raise ValidationError(
                "limit and offset must not be negative",
                {"limit": limit, "offset": offset},
            )
        return await self._repository.list_by_user(user_id, limit, offset)
