from .metadata import ProviderMetadata, ProviderStatus, ProviderType
from .protocols import DatabaseProvider, ProviderInstance, RepositoryFactory
from .table_config import DatabaseTableConfig

__all__ = [
    "ProviderMetadata",
    "ProviderStatus",
    "ProviderType",
    "DatabaseProvider",
    "ProviderInstance",
    "RepositoryFactory",
    "DatabaseTableConfig",
]
