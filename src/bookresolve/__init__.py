"""bookresolve - Multi-provider book metadata resolution by ISBN."""

from bookresolve.client import BookResolveClient, resolve_book
from bookresolve.config import BookResolveSettings
from bookresolve.core.exceptions import (
    BookNotFoundError,
    BookResolveError,
    TransientError,
)
from bookresolve.core.models import BookRecord, LibraryEntry
from bookresolve.core.types import ResolutionPolicy, SourceName
from bookresolve.resolution.base import ResolutionResult
from bookresolve.resolution.chain import FallbackConfig

__version__ = "0.1.0"
__all__ = [
    # Client
    "BookResolveClient",
    "BookResolveSettings",
    "resolve_book",
    # Types
    "ResolutionPolicy",
    "SourceName",
    # Models
    "BookRecord",
    "LibraryEntry",
    # Results
    "FallbackConfig",
    "ResolutionResult",
    # Errors
    "BookNotFoundError",
    "BookResolveError",
    "TransientError",
    # Version
    "__version__",
]
