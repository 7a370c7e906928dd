"""Abstract base provider with shared HTTP request handling."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Protocol, Self

import httpx
from pydantic import BaseModel, Field

from bookresolve.core.exceptions import (
    BookNotFoundError,
    MalformedUpstreamError,
    ProviderUnavailableError,
)
from bookresolve.core.models import BookRecord
from bookresolve.core.types import ResolutionPolicy, SourceName

DEFAULT_TIMEOUT = 5.0


class ProviderConfig(BaseModel):
    """Configuration for a provider."""

    api_key: str | None = None
    base_url: str | None = None
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    headers: dict[str, str] = Field(default_factory=dict)
    enabled: bool = True


class ResolutionResult(BaseModel):
    """Outcome of a successful resolution."""

    records: list[BookRecord] = Field(..., min_length=1)
    policy: ResolutionPolicy
    sources_tried: list[str] = Field(default_factory=list)
    duration_ms: float = 0.0

    @property
    def primary(self) -> BookRecord:
        """The record from the highest-ranked provider that answered."""
        return self.records[0]

    @property
    def disagreement(self) -> bool:
        """Whether providers returned conflicting records."""
        return len(self.records) > 1


class BookResolver(Protocol):
    """Anything that turns an ISBN into canonical records."""

    async def resolve(self, isbn: str) -> ResolutionResult: ...

    async def close(self) -> None: ...


class AbstractProvider(ABC):
    """
    Abstract base class for all providers.

    A provider wraps exactly one external source. It holds no per-call
    state, so one instance can serve concurrent lookups. The HTTP client
    is normally injected and shared; a provider given none creates its own
    and closes it in ``close()``.

    Provides:
    - A single GET helper bounded by the configured timeout
    - Translation of transport failures and error statuses into
      ``ProviderUnavailableError``
    - Consistent not-found and malformed-payload reporting
    """

    SOURCE_NAME: ClassVar[SourceName]
    BASE_URL: ClassVar[str]

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        config: ProviderConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config or ProviderConfig()
        self._client = http_client
        # Only a client created here is closed by close()
        self._owns_client = http_client is None
        self._logger = logger or logging.getLogger(__name__)

    @property
    def source_name(self) -> SourceName:
        """The source tag for this provider."""
        return self.SOURCE_NAME

    @property
    def base_url(self) -> str:
        return (self.config.base_url or self.BASE_URL).rstrip("/")

    @property
    def is_enabled(self) -> bool:
        """Whether this provider is enabled."""
        return self.config.enabled

    def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client, or create one on first use."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.config.timeout),
                follow_redirects=True,
            )
        return self._client

    def _get_default_headers(self) -> dict[str, str]:
        """Get default headers for requests. Override to add auth."""
        return {}

    async def close(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _fetch(
        self,
        path: str,
        *,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Issue one GET request and return the successful response."""
        url = f"{self.base_url}{path}"
        headers = {**self._get_default_headers(), **self.config.headers}

        try:
            response = await self._get_client().get(
                url,
                params=params,
                headers=headers,
                timeout=self.config.timeout,
            )
        except httpx.TimeoutException as e:
            self._logger.warning(f"{self.source_name} timed out after {self.config.timeout}s")
            raise ProviderUnavailableError(
                message=f"Request timed out after {self.config.timeout}s",
                source=self.source_name.value,
            ) from e
        except httpx.HTTPError as e:
            self._logger.warning(f"{self.source_name} request failed: {e}")
            raise ProviderUnavailableError(
                message=f"HTTP error: {e}",
                source=self.source_name.value,
            ) from e

        if not response.is_success:
            self._logger.warning(
                f"{self.source_name} returned status code {response.status_code}"
            )
            raise ProviderUnavailableError(
                message=f"Unexpected status code: {response.status_code}",
                source=self.source_name.value,
                status_code=response.status_code,
            )

        return response

    def _not_found(self, isbn: str) -> BookNotFoundError:
        self._logger.info(f"{self.source_name} has no record for {isbn}")
        return BookNotFoundError(isbn, self.source_name.value)

    def _malformed(self, isbn: str, reason: str) -> MalformedUpstreamError:
        self._logger.error(f"{self.source_name} sent an undecodable payload for {isbn}: {reason}")
        return MalformedUpstreamError(
            message=f"Malformed response: {reason}",
            source=self.source_name.value,
            details={"isbn": isbn},
        )

    @abstractmethod
    async def lookup(self, isbn: str) -> BookRecord:
        """
        Look up a single book by ISBN.

        Args:
            isbn: The ISBN to look up

        Returns:
            The canonical record, always with a non-empty title

        Raises:
            BookNotFoundError: The source has no record for the ISBN
            TransientError: The call failed for operational reasons
        """
        ...
