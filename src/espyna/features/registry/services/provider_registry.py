"""Provider registry pairing metadata with factories."""

import logging
import threading
from typing import Any, Callable, Dict, List, Optional

from ....core.exceptions import ProviderNotFoundError, RegistryError
from ..entities.metadata import ProviderMetadata, ProviderStatus, ProviderType

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Constructed configuration object listing every known provider."""

    def __init__(self):
        self._metadata: Dict[str, ProviderMetadata] = {}
        self._factories: Dict[str, Callable[..., Any]] = {}
        self._lock = threading.RLock()

    def register(self, metadata: ProviderMetadata, factory: Callable[..., Any]) -> None:
        if factory is None:
            raise RegistryError(f"Provider '{metadata.name}' needs a factory")
        with self._lock:
            self._metadata[metadata.name] = metadata
            self._factories[metadata.name] = factory
        logger.debug(f"Registered {metadata.provider_type.value} provider '{metadata.name}'")

    def get_metadata(self, name: str) -> ProviderMetadata:
        with self._lock:
            metadata = self._metadata.get(name)
            if metadata is None:
                raise ProviderNotFoundError(name, self._metadata)
            return metadata

    def has(self, name: str) -> bool:
        with self._lock:
            return name in self._metadata

    def create_provider(self, name: str, **config: Any) -> Any:
        """Construct a provider, recording success or failure in its metadata."""
        metadata = self.get_metadata(name)
        with self._lock:
            factory = self._factories[name]
        merged = {**metadata.config, **config}
        try:
            provider = factory(**merged)
        except Exception as e:
            self.mark_failed(name, str(e))
            raise
        self._set_metadata(metadata.with_status(ProviderStatus.ACTIVE))
        return provider

    def mark_failed(self, name: str, error: str) -> None:
        metadata = self.get_metadata(name)
        self._set_metadata(metadata.with_status(ProviderStatus.FAILED, error))
        logger.error(f"Provider '{name}' failed: {error}")

    def mark_inactive(self, name: str) -> None:
        self._set_metadata(self.get_metadata(name).with_status(ProviderStatus.INACTIVE))

    def list(self) -> List[ProviderMetadata]:
        with self._lock:
            return [self._metadata[name] for name in sorted(self._metadata)]

    def list_by_type(self, provider_type: ProviderType) -> List[ProviderMetadata]:
        return [m for m in self.list() if m.provider_type == provider_type]

    def _set_metadata(self, metadata: ProviderMetadata) -> None:
        with self._lock:
            self._metadata[metadata.name] = metadata
