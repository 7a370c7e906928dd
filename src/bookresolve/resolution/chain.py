"""Chain resolver for ordered fallback resolution."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Self

from bookresolve.core.exceptions import (
    BookNotFoundError,
    ConfigurationError,
    ResolutionTimeoutError,
    TransientError,
)
from bookresolve.core.models import BookRecord
from bookresolve.core.types import ResolutionPolicy
from bookresolve.resolution.base import AbstractProvider, ResolutionResult

logger = logging.getLogger(__name__)


@dataclass
class FallbackConfig:
    """Configuration for fallback resolution."""

    # Move on to the next provider after a transient failure instead of aborting
    fallback_on_transient: bool = False

    # Timeout for the entire fallback chain (seconds)
    total_timeout: float = 15.0


class ChainResolver:
    """
    Tries providers one after another until one finds the book.

    A not-found answer moves on to the next provider. A transient failure
    aborts the chain unless ``fallback_on_transient`` is set. Providers
    after the first success are never called.
    """

    def __init__(
        self,
        providers: Sequence[AbstractProvider],
        config: FallbackConfig | None = None,
    ) -> None:
        # Order is the fallback order
        self._providers = list(providers)
        self.config = config or FallbackConfig()

    @property
    def providers(self) -> list[AbstractProvider]:
        return list(self._providers)

    async def close(self) -> None:
        """Close all providers."""
        for provider in self._providers:
            await provider.close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def resolve(self, isbn: str) -> ResolutionResult:
        """Resolve using providers in order with fallback."""
        start = time.monotonic()
        active_providers = [p for p in self._providers if p.is_enabled]

        if not active_providers:
            raise ConfigurationError("No enabled providers in the fallback chain")

        sources_tried: list[str] = []
        try:
            async with asyncio.timeout(self.config.total_timeout):
                record = await self._run_sequential(active_providers, isbn, sources_tried)
        except TimeoutError as e:
            logger.warning(f"Fallback resolution of {isbn} timed out")
            raise ResolutionTimeoutError(
                message=f"Resolution timed out after {self.config.total_timeout}s",
                source=sources_tried[-1] if sources_tried else "chain",
                details={"isbn": isbn, "sources_tried": sources_tried},
            ) from e

        duration_ms = (time.monotonic() - start) * 1000
        logger.debug(f"Resolved {isbn} via {record.source} in {duration_ms:.0f}ms")

        return ResolutionResult(
            records=[record],
            policy=ResolutionPolicy.FALLBACK,
            sources_tried=sources_tried,
            duration_ms=duration_ms,
        )

    async def _run_sequential(
        self,
        providers: list[AbstractProvider],
        isbn: str,
        sources_tried: list[str],
    ) -> BookRecord:
        """Run providers in order, returning the first record found."""
        last_error: TransientError | None = None

        for provider in providers:
            sources_tried.append(provider.source_name.value)
            try:
                return await provider.lookup(isbn)
            except BookNotFoundError:
                logger.info(f"{provider.source_name} has no record for {isbn}, trying next source")
            except TransientError as e:
                if not self.config.fallback_on_transient:
                    raise
                logger.warning(f"{provider.source_name} failed for {isbn}, trying next source: {e}")
                last_error = e

        if last_error is not None:
            raise last_error
        raise BookNotFoundError(isbn)
