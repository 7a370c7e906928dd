"""Services built on top of resolution."""

from bookresolve.services.library import BookRepository, LibraryService

__all__ = [
    "BookRepository",
    "LibraryService",
]
