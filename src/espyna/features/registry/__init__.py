"""Provider and repository registries.

Adapters register their factories explicitly through ``register_*`` functions
called by the composition layer; nothing is registered at import time.
"""

from .entities import (
    DatabaseProvider,
    DatabaseTableConfig,
    ProviderInstance,
    ProviderMetadata,
    ProviderStatus,
    ProviderType,
    RepositoryFactory,
)
from .services import (
    FactoryRegistry,
    InstanceRegistry,
    ProviderRegistry,
    RepositoryFactoryRegistry,
    repository_factory,
    repository_key,
)

__all__ = [
    "DatabaseTableConfig",
    "DatabaseProvider",
    "ProviderInstance",
    "ProviderMetadata",
    "ProviderStatus",
    "ProviderType",
    "RepositoryFactory",
    "FactoryRegistry",
    "InstanceRegistry",
    "ProviderRegistry",
    "RepositoryFactoryRegistry",
    "repository_factory",
    "repository_key",
]
