"""Resolver registry for creating providers and orchestrators."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from bookresolve.core.exceptions import ConfigurationError
from bookresolve.core.types import ResolutionPolicy
from bookresolve.resolution.base import AbstractProvider, BookResolver, ProviderConfig
from bookresolve.resolution.books.goodreads import GoodreadsProvider
from bookresolve.resolution.books.google_books import GoogleBooksProvider
from bookresolve.resolution.books.isbndb import IsbndbScrapeProvider
from bookresolve.resolution.chain import ChainResolver, FallbackConfig
from bookresolve.resolution.reconcile import ReconcileConfig, ReconcilingResolver

if TYPE_CHECKING:
    from bookresolve.config import BookResolveSettings


class ResolverRegistry:
    """
    Factory for providers and the resolver of each policy.

    All providers share the injected HTTP client; the registry never
    closes it.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        total_timeout: float = 15.0,
        fallback_on_transient: bool = False,
    ) -> None:
        self._http_client = http_client
        self._total_timeout = total_timeout
        self._fallback_on_transient = fallback_on_transient
        self.catalog: AbstractProvider | None = None
        self.scraper: AbstractProvider | None = None
        self.xml_search: AbstractProvider | None = None

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client

    def register_catalog(self, provider: AbstractProvider) -> None:
        """Register the structured catalog provider (primary in both policies)."""
        self.catalog = provider

    def register_scraper(self, provider: AbstractProvider) -> None:
        """Register the page scraper (fallback tier)."""
        self.scraper = provider

    def register_xml_search(self, provider: AbstractProvider) -> None:
        """Register the XML search provider (secondary in reconciliation)."""
        self.xml_search = provider

    def get_fallback_chain(self, config: FallbackConfig | None = None) -> ChainResolver:
        """Get the ordered-fallback resolver: catalog first, then scraper."""
        providers = [p for p in (self.catalog, self.scraper) if p is not None]
        return ChainResolver(
            providers,
            config
            or FallbackConfig(
                fallback_on_transient=self._fallback_on_transient,
                total_timeout=self._total_timeout,
            ),
        )

    def get_reconciler(self, config: ReconcileConfig | None = None) -> ReconcilingResolver:
        """Get the dual-source resolver: catalog vs. XML search."""
        if self.catalog is None or self.xml_search is None:
            raise ConfigurationError(
                "Reconciliation needs both the catalog and the XML search provider"
            )
        return ReconcilingResolver(
            self.catalog,
            self.xml_search,
            config or ReconcileConfig(total_timeout=self._total_timeout),
        )

    def get_resolver(self, policy: ResolutionPolicy) -> BookResolver:
        """Get the resolver for the given policy."""
        if policy == ResolutionPolicy.FALLBACK:
            return self.get_fallback_chain()
        elif policy == ResolutionPolicy.RECONCILE:
            return self.get_reconciler()
        else:
            raise ValueError(f"Unsupported resolution policy: {policy}")

    @classmethod
    def from_settings(
        cls,
        settings: "BookResolveSettings",
        http_client: httpx.AsyncClient,
        logger: logging.Logger | None = None,
    ) -> "ResolverRegistry":
        """
        Create a registry with providers configured from settings.

        The Goodreads provider is only registered when a key is available.
        """
        registry = cls(
            http_client,
            total_timeout=settings.total_timeout,
            fallback_on_transient=settings.fallback_on_transient,
        )

        registry.register_catalog(
            GoogleBooksProvider(
                http_client,
                ProviderConfig(
                    api_key=settings.google_books_api_key,
                    timeout=settings.request_timeout,
                ),
                logger,
            )
        )

        registry.register_scraper(
            IsbndbScrapeProvider(
                http_client,
                ProviderConfig(timeout=settings.request_timeout),
                logger,
                cookie=settings.isbndb_cookie,
            )
        )

        if settings.goodreads_api_key:
            registry.register_xml_search(
                GoodreadsProvider(
                    http_client,
                    ProviderConfig(
                        api_key=settings.goodreads_api_key,
                        timeout=settings.request_timeout,
                    ),
                    logger,
                )
            )

        return registry
