"""Main library client for standalone usage."""

from __future__ import annotations

import logging

import httpx

from bookresolve.config import BookResolveSettings
from bookresolve.core.exceptions import InvalidISBNError
from bookresolve.core.identifiers import ISBN
from bookresolve.core.types import ResolutionPolicy
from bookresolve.resolution.base import BookResolver, ResolutionResult
from bookresolve.resolution.registry import ResolverRegistry

logger = logging.getLogger(__name__)


class BookResolveClient:
    """
    Main client for the bookresolve library.

    Usage:
        async with BookResolveClient() as client:
            # Catalog first, page scrape as fallback
            result = await client.resolve("978-0-13-468599-1")

            # Compare catalog and Goodreads
            result = await client.resolve("9780441172719", ResolutionPolicy.RECONCILE)

    Settings are loaded from environment variables or can be passed explicitly.
    """

    def __init__(
        self,
        settings: BookResolveSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            settings: Application settings. If not provided, loaded from environment.
            http_client: Shared HTTP client. The client is not closed on exit
                when injected.
        """
        self._settings = settings or BookResolveSettings()
        self._http_client = http_client
        self._owns_http_client = http_client is None
        self._registry: ResolverRegistry | None = None

    async def __aenter__(self) -> BookResolveClient:
        """Initialize resources on context entry."""
        self._initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Clean up resources on context exit."""
        await self.close()

    def _initialize(self) -> None:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._settings.request_timeout),
                headers={"User-Agent": self._settings.user_agent},
                follow_redirects=True,
            )
        self._registry = ResolverRegistry.from_settings(self._settings, self._http_client)
        logger.debug("Resolver registry initialized")

    async def close(self) -> None:
        """Close the HTTP client if this client created it."""
        self._registry = None
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    def _ensure_initialized(self) -> ResolverRegistry:
        if self._registry is None:
            raise RuntimeError(
                "Client not initialized. Use 'async with BookResolveClient() as client:'"
            )
        return self._registry

    def get_resolver(self, policy: ResolutionPolicy | None = None) -> BookResolver:
        """Get the resolver for a policy (settings default when omitted)."""
        registry = self._ensure_initialized()
        return registry.get_resolver(policy or self._settings.default_policy)

    async def resolve(
        self,
        isbn: str,
        policy: ResolutionPolicy | None = None,
    ) -> ResolutionResult:
        """
        Resolve a book by ISBN.

        Args:
            isbn: ISBN-10 or ISBN-13, hyphens and spaces allowed
            policy: Resolution policy (settings default if not provided)

        Returns:
            Result holding one record, or two when reconciled providers disagree

        Raises:
            InvalidISBNError: The ISBN is malformed; no provider is called
            BookNotFoundError: No provider has the book
            TransientError: A provider failed and the policy does not tolerate it
        """
        resolver = self.get_resolver(policy)

        try:
            parsed = ISBN.parse(isbn)
        except ValueError as e:
            raise InvalidISBNError(isbn, str(e)) from e

        return await resolver.resolve(parsed.value)


async def resolve_book(
    isbn: str,
    policy: ResolutionPolicy | None = None,
    *,
    settings: BookResolveSettings | None = None,
) -> ResolutionResult:
    """
    Resolve a book (convenience function).

    For multiple resolutions, use BookResolveClient for better performance.
    """
    async with BookResolveClient(settings) as client:
        return await client.resolve(isbn, policy)
