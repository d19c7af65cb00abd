"""Repository factory and table configuration registries.

Repository factories are keyed ``"provider:entity"`` and receive the
provider's connection object plus the table name for the entity.
"""

import logging
import threading
from typing import Any, Callable, Dict, List, Optional

from ....core.exceptions import RegistryError, RepositoryFactoryNotFoundError
from ..entities.protocols import RepositoryFactory
from ..entities.table_config import DatabaseTableConfig

logger = logging.getLogger(__name__)

TableConfigBuilder = Callable[[], DatabaseTableConfig]


def repository_key(provider: str, entity: str) -> str:
    return f"{provider}:{entity}"


class RepositoryFactoryRegistry:
    """Maps (provider, entity) pairs to repository factories."""

    def __init__(self):
        self._factories: Dict[str, RepositoryFactory] = {}
        self._table_builders: Dict[str, TableConfigBuilder] = {}
        self._lock = threading.RLock()

    def register(self, provider: str, entity: str, factory: RepositoryFactory) -> None:
        if not provider or not entity:
            raise RegistryError("Repository factories need both a provider and an entity name")
        key = repository_key(provider, entity)
        if factory is None:
            raise RegistryError(f"Repository factory for '{key}' cannot be None")
        with self._lock:
            self._factories[key] = factory
        logger.debug(f"Registered repository factory '{key}'")

    def get(self, provider: str, entity: str) -> Optional[RepositoryFactory]:
        with self._lock:
            return self._factories.get(repository_key(provider, entity))

    def has(self, provider: str, entity: str) -> bool:
        return self.get(provider, entity) is not None

    def create_repository(self, provider: str, entity: str, connection: Any, table_name: str) -> Any:
        factory = self.get(provider, entity)
        if factory is None:
            raise RepositoryFactoryNotFoundError(provider, entity, self.list_entities(provider))
        return factory(connection, table_name)

    def list_entities(self, provider: str) -> List[str]:
        prefix = f"{provider}:"
        with self._lock:
            return sorted(key[len(prefix):] for key in self._factories if key.startswith(prefix))

    def list_providers(self) -> List[str]:
        with self._lock:
            return sorted({key.split(":", 1)[0] for key in self._factories})

    def list_all(self) -> List[str]:
        with self._lock:
            return sorted(self._factories)

    def register_table_config_builder(self, provider: str, builder: TableConfigBuilder) -> None:
        if builder is None:
            raise RegistryError(f"Table config builder for '{provider}' cannot be None")
        with self._lock:
            self._table_builders[provider] = builder

    def build_table_config(self, provider: str) -> DatabaseTableConfig:
        """Provider's table config, or default entity-named tables."""
        with self._lock:
            builder = self._table_builders.get(provider)
        if builder is None:
            return DatabaseTableConfig()
        return builder()


def repository_factory(registry: RepositoryFactoryRegistry, provider: str, entity: str):
    """Decorator registering the wrapped callable as a repository factory."""

    def decorator(factory: RepositoryFactory) -> RepositoryFactory:
        registry.register(provider, entity, factory)
        return factory

    return decorator
