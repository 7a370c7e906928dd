"""Resolution layer for fetching metadata from external sources."""

from bookresolve.resolution.base import (
    AbstractProvider,
    BookResolver,
    ProviderConfig,
    ResolutionResult,
)
from bookresolve.resolution.chain import ChainResolver, FallbackConfig
from bookresolve.resolution.reconcile import ReconcileConfig, ReconcilingResolver
from bookresolve.resolution.registry import ResolverRegistry

__all__ = [
    # Base
    "AbstractProvider",
    "BookResolver",
    "ProviderConfig",
    "ResolutionResult",
    # Policies
    "ChainResolver",
    "FallbackConfig",
    "ReconcileConfig",
    "ReconcilingResolver",
    # Registry
    "ResolverRegistry",
]
