"""Generic named factory registry.

Holds three maps per provider kind: factories that construct a provider,
config transformers that turn raw mappings into provider configuration, and
builders that construct a provider straight from environment variables.
"""

import logging
import threading
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, TypeVar

from ....core.exceptions import ConfigurationError, ProviderNotFoundError, RegistryError

logger = logging.getLogger(__name__)

T = TypeVar("T")

ConfigTransformer = Callable[[Mapping[str, Any]], Any]


class FactoryRegistry(Generic[T]):
    """Thread-safe registry of provider factories for one provider kind."""

    def __init__(self, kind: str):
        self.kind = kind
        self._factories: Dict[str, Callable[[], T]] = {}
        self._transformers: Dict[str, ConfigTransformer] = {}
        self._env_builders: Dict[str, Callable[[], T]] = {}
        self._lock = threading.RLock()

    def _check(self, name: str, value: Any, what: str) -> None:
        if not name:
            raise RegistryError(f"{self.kind} {what} must have a non-empty name")
        if value is None:
            raise RegistryError(f"{self.kind} {what} for '{name}' cannot be None")

    def register(
        self,
        name: str,
        factory: Callable[[], T],
        transformer: Optional[ConfigTransformer] = None,
    ) -> None:
        """Register a factory and, optionally, its config transformer."""
        self.register_factory(name, factory)
        if transformer is not None:
            self.register_config_transformer(name, transformer)

    def register_factory(self, name: str, factory: Callable[[], T]) -> None:
        self._check(name, factory, "factory")
        with self._lock:
            if name in self._factories:
                logger.warning(f"Replacing {self.kind} factory '{name}'")
            self._factories[name] = factory
        logger.debug(f"Registered {self.kind} factory '{name}'")

    def get_factory(self, name: str) -> Optional[Callable[[], T]]:
        with self._lock:
            return self._factories.get(name)

    def has_factory(self, name: str) -> bool:
        with self._lock:
            return name in self._factories

    def create(self, name: str) -> T:
        factory = self.get_factory(name)
        if factory is None:
            raise ProviderNotFoundError(name, self.list_factories())
        return factory()

    def create_from_config(self, name: str, raw_config: Mapping[str, Any]) -> T:
        """Create a provider, passing it the transformed config as keyword arguments."""
        factory = self.get_factory(name)
        if factory is None:
            raise ProviderNotFoundError(name, self.list_factories())
        transformer = self.get_config_transformer(name)
        if transformer is None:
            return factory()
        return factory(**transformer(raw_config))

    def list_factories(self) -> List[str]:
        with self._lock:
            return sorted(self._factories)

    def register_config_transformer(self, name: str, transformer: ConfigTransformer) -> None:
        self._check(name, transformer, "config transformer")
        with self._lock:
            self._transformers[name] = transformer

    def get_config_transformer(self, name: str) -> Optional[ConfigTransformer]:
        with self._lock:
            return self._transformers.get(name)

    def transform_config(self, name: str, raw_config: Mapping[str, Any]) -> Any:
        transformer = self.get_config_transformer(name)
        if transformer is None:
            raise ConfigurationError(
                f"No config transformer registered for {self.kind} provider '{name}'",
                details={"provider": name},
            )
        return transformer(raw_config)

    def register_env_builder(self, name: str, builder: Callable[[], T]) -> None:
        self._check(name, builder, "env builder")
        with self._lock:
            self._env_builders[name] = builder

    def get_env_builder(self, name: str) -> Optional[Callable[[], T]]:
        with self._lock:
            return self._env_builders.get(name)

    def build_from_env(self, name: str) -> T:
        builder = self.get_env_builder(name)
        if builder is None:
            with self._lock:
                available = list(self._env_builders)
            raise ProviderNotFoundError(name, available)
        return builder()

    def list_env_builders(self) -> List[str]:
        with self._lock:
            return sorted(self._env_builders)
