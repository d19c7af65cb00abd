from .factory_registry import FactoryRegistry
from .instance_registry import InstanceRegistry
from .provider_registry import ProviderRegistry
from .repository_registry import RepositoryFactoryRegistry, repository_factory, repository_key

__all__ = [
    "FactoryRegistry",
    "InstanceRegistry",
    "ProviderRegistry",
    "RepositoryFactoryRegistry",
    "repository_factory",
    "repository_key",
]
