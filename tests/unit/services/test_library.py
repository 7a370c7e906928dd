"""Tests for the library service."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from bookresolve.core.exceptions import BookNotFoundError, NotFoundError, ValidationError
from bookresolve.core.models import BookRecord, LibraryEntry
from bookresolve.core.types import ResolutionPolicy
from bookresolve.resolution.base import ResolutionResult
from bookresolve.services.library import LibraryService


class InMemoryRepository:
    """Library entries kept in a dict keyed by (isbn, user_id)."""

    def __init__(self) -> None:
        self.entries: dict[tuple[str, str], LibraryEntry] = {}

    async def get(self, isbn: str, user_id: str) -> LibraryEntry | None:
        return self.entries.get((isbn, user_id))

    async def upsert(self, entry: LibraryEntry) -> LibraryEntry:
        self.entries[(entry.isbn, entry.user_id)] = entry
        return entry

    async def list_by_user(self, user_id: str, limit: int, offset: int) -> list[LibraryEntry]:
        owned = [e for e in self.entries.values() if e.user_id == user_id]
        return owned[offset : offset + limit]


@pytest.fixture
def repository() -> InMemoryRepository:
    return InMemoryRepository()


@pytest.fixture
def resolver(sample_book_record: BookRecord) -> AsyncMock:
    resolver = AsyncMock()
    resolver.resolve.return_value = ResolutionResult(
        records=[sample_book_record],
        policy=ResolutionPolicy.FALLBACK,
        sources_tried=["google_books"],
    )
    return resolver


@pytest.fixture
def service(repository: InMemoryRepository, resolver: AsyncMock) -> LibraryService:
    return LibraryService(repository, resolver)


class TestLibraryService:
    """Tests for resolving and storing books."""

    async def test_lookup_does_not_store(
        self,
        service: LibraryService,
        repository: InMemoryRepository,
    ):
        records = await service.lookup("9780441172719")

        assert [r.title for r in records] == ["Dune"]
        assert repository.entries == {}

    async def test_add_to_library(
        self,
        service: LibraryService,
        repository: InMemoryRepository,
        resolver: AsyncMock,
    ):
        entry = await service.add_to_library("9780441172719", "user-1")

        assert entry.user_id == "user-1"
        assert entry.isbn == "9780441172719"
        assert entry.book.title == "Dune"
        assert ("9780441172719", "user-1") in repository.entries
        resolver.resolve.assert_awaited_once_with("9780441172719")

    async def test_add_stores_primary_on_disagreement(
        self,
        service: LibraryService,
        resolver: AsyncMock,
        sample_book_record: BookRecord,
    ):
        other = BookRecord(isbn="9780441172719", title="Dune (Annotated)", source="goodreads")
        resolver.resolve.return_value = ResolutionResult(
            records=[sample_book_record, other],
            policy=ResolutionPolicy.RECONCILE,
        )

        entry = await service.add_to_library("9780441172719", "user-1")

        assert entry.book.source == "google_books"

    async def test_add_not_found_stores_nothing(
        self,
        service: LibraryService,
        repository: InMemoryRepository,
        resolver: AsyncMock,
    ):
        resolver.resolve.side_effect = BookNotFoundError("9780000000002")

        with pytest.raises(BookNotFoundError):
            await service.add_to_library("9780000000002", "user-1")

        assert repository.entries == {}

    async def test_get_entry(self, service: LibraryService):
        await service.add_to_library("9780441172719", "user-1")

        entry = await service.get_entry("9780441172719", "user-1")

        assert entry.book.title == "Dune"

    async def test_get_entry_missing(self, service: LibraryService):
        with pytest.raises(NotFoundError):
            await service.get_entry("9780441172719", "user-2")

    async def test_update_entry_status(
        self,
        service: LibraryService,
        repository: InMemoryRepository,
    ):
        await service.add_to_library("9780441172719", "user-1")

        entry = await service.update_entry(
            "9780441172719", "user-1", {"status": 0, "title": "Dune (Reread)"}
        )

        assert entry.book.status == 0
        assert entry.book.title == "Dune (Reread)"
        assert entry.book.authors == "Frank Herbert"
        assert repository.entries[("9780441172719", "user-1")] == entry

    async def test_update_entry_accepts_aliases(self, service: LibraryService):
        await service.add_to_library("9780441172719", "user-1")

        entry = await service.update_entry(
            "9780441172719", "user-1", {"smallImageUrl": "https://example.com/s.jpg"}
        )

        assert entry.book.small_image_url == "https://example.com/s.jpg"

    @pytest.mark.parametrize(
        "changes",
        [
            {"shelf": "favourites"},
            {"isbn": "9780134093413"},
            {"source": "goodreads"},
            {"pageCount": -5},
        ],
    )
    async def test_update_entry_rejects_bad_changes(
        self,
        service: LibraryService,
        repository: InMemoryRepository,
        changes: dict,
    ):
        stored = await service.add_to_library("9780441172719", "user-1")

        with pytest.raises(ValidationError):
            await service.update_entry("9780441172719", "user-1", changes)

        assert repository.entries[("9780441172719", "user-1")] == stored

    async def test_update_entry_missing(self, service: LibraryService):
        with pytest.raises(NotFoundError):
            await service.update_entry("9780441172719", "user-1", {"status": 0})

    async def test_list_entries(self, service: LibraryService):
        await service.add_to_library("9780441172719", "user-1")

        assert len(await service.list_entries("user-1")) == 1
        assert await service.list_entries("user-1", offset=1) == []
        assert await service.list_entries("someone-else") == []

    @pytest.mark.parametrize("limit,offset", [(-1, 0), (10, -1)])
    async def test_list_entries_rejects_negative(
        self,
        service: LibraryService,
        limit: int,
        offset: int,
    ):
        with pytest.raises(ValidationError):
            await service.list_entries("user-1", limit=limit, offset=offset)
