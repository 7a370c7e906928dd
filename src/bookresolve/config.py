"""Application configuration using Pydantic Settings."""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from bookresolve.core.types import ResolutionPolicy


class BookResolveSettings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="BOOKRESOLVE_",
    )

    # Providers
    google_books_api_key: str | None = Field(
        default=None,
        description="Google Books API key (optional, increases rate limits)",
    )
    goodreads_api_key: str | None = Field(
        default=None,
        description="Goodreads developer key (required for reconciliation)",
    )
    isbndb_cookie: str = Field(
        default="",
        description="Browser session cookie sent to isbndb.com to avoid the block page",
    )

    # Timeouts
    request_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Timeout for a single provider request in seconds",
    )
    total_timeout: float = Field(
        default=15.0,
        gt=0,
        description="Timeout for a whole resolution in seconds",
    )

    # Resolution behaviour
    default_policy: ResolutionPolicy = Field(
        default=ResolutionPolicy.FALLBACK,
        description="Policy used when the caller does not pick one",
    )
    fallback_on_transient: bool = Field(
        default=False,
        description="Try the next provider after a transient failure instead of aborting",
    )

    # App settings
    user_agent: str = Field(
        default="bookresolve/0.1",
        description="User-Agent header for outbound requests",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )


@lru_cache
def get_settings() -> BookResolveSettings:
    """Get cached settings instance."""
    return BookResolveSettings()


def configure_logging(settings: BookResolveSettings | None = None) -> None:
    """Apply the configured level to the package logger."""
    settings = settings or get_settings()
    logging.getLogger("bookresolve").setLevel(settings.log_level.upper())
