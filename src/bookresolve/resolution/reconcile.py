"""Dual-source resolver that surfaces provider disagreement."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Self

from bookresolve.core.exceptions import ResolutionTimeoutError
from bookresolve.core.models import BookRecord
from bookresolve.core.types import ResolutionPolicy
from bookresolve.resolution.base import AbstractProvider, ResolutionResult

logger = logging.getLogger(__name__)


@dataclass
class ReconcileConfig:
    """Configuration for dual-source reconciliation."""

    # Timeout for both lookups together (seconds)
    total_timeout: float = 15.0


class ReconcilingResolver:
    """
    Queries two providers for every ISBN and compares their titles.

    Both lookups always run, concurrently. There is no partial success:
    if either fails, the failure is raised (the primary's first). Equal
    titles return the primary record alone; different titles return both,
    primary first, so callers can see the disagreement.
    """

    def __init__(
        self,
        primary: AbstractProvider,
        secondary: AbstractProvider,
        config: ReconcileConfig | None = None,
    ) -> None:
        self._primary = primary
        self._secondary = secondary
        self.config = config or ReconcileConfig()

    @property
    def providers(self) -> list[AbstractProvider]:
        return [self._primary, self._secondary]

    async def close(self) -> None:
        """Close both providers."""
        for provider in self.providers:
            await provider.close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def resolve(self, isbn: str) -> ResolutionResult:
        start = time.monotonic()
        sources_tried = [p.source_name.value for p in self.providers]

        try:
            async with asyncio.timeout(self.config.total_timeout):
                outcomes = await asyncio.gather(
                    self._primary.lookup(isbn),
                    self._secondary.lookup(isbn),
                    return_exceptions=True,
                )
        except TimeoutError as e:
            logger.warning(f"Reconciled resolution of {isbn} timed out")
            raise ResolutionTimeoutError(
                message=f"Resolution timed out after {self.config.total_timeout}s",
                source="reconcile",
                details={"isbn": isbn, "sources_tried": sources_tried},
            ) from e

        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                raise outcome

        primary_record, secondary_record = outcomes
        records = self._reconcile(primary_record, secondary_record)

        return ResolutionResult(
            records=records,
            policy=ResolutionPolicy.RECONCILE,
            sources_tried=sources_tried,
            duration_ms=(time.monotonic() - start) * 1000,
        )

    @staticmethod
    def _reconcile(primary: BookRecord, secondary: BookRecord) -> list[BookRecord]:
        """Keep one record when titles agree (case-sensitive), both otherwise."""
        if primary.title == secondary.title:
            return [primary]

        logger.info(
            f"Title mismatch between {primary.source} ({primary.title!r}) "
            f"and {secondary.source} ({secondary.title!r})"
        )
        return [primary, secondary]
