"""Registry of constructed provider instances with an optional active one."""

import logging
import threading
from typing import Dict, Generic, List, Optional, TypeVar

from ....core.exceptions import ProviderNotEnabledError, ProviderNotFoundError, RegistryError
from ..entities.protocols import ProviderInstance

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=ProviderInstance)


class InstanceRegistry(Generic[T]):
    """Named provider instances of one kind (database, auth, ...)."""

    def __init__(self, kind: str):
        self.kind = kind
        self._instances: Dict[str, T] = {}
        self._active: Optional[str] = None
        self._lock = threading.RLock()

    def register(self, provider: T) -> None:
        name = provider.name
        if not name:
            raise RegistryError(f"{self.kind} provider must have a non-empty name")
        with self._lock:
            self._instances[name] = provider
        logger.debug(f"Registered {self.kind} provider '{name}'")

    def unregister(self, name: str) -> Optional[T]:
        with self._lock:
            provider = self._instances.pop(name, None)
            if self._active == name:
                self._active = None
            return provider

    def get(self, name: str) -> T:
        with self._lock:
            provider = self._instances.get(name)
            if provider is None:
                raise ProviderNotFoundError(name, self._instances)
            return provider

    def set_active(self, name: str) -> None:
        with self._lock:
            provider = self.get(name)
            if not provider.is_enabled():
                raise ProviderNotEnabledError(name)
            self._active = name
        logger.info(f"Set '{name}' as active {self.kind} provider")

    def get_active(self) -> Optional[T]:
        with self._lock:
            if self._active is None:
                return None
            return self._instances.get(self._active)

    @property
    def active_name(self) -> Optional[str]:
        return self._active

    def list(self) -> List[str]:
        with self._lock:
            return sorted(self._instances)

    async def health_check(self) -> Dict[str, bool]:
        """Health of every enabled provider; a raised error means unhealthy."""
        with self._lock:
            providers = list(self._instances.items())

        status: Dict[str, bool] = {}
        for name, provider in providers:
            if not provider.is_enabled():
                continue
            try:
                await provider.is_healthy()
                status[name] = True
            except Exception as e:
                logger.warning(f"{self.kind} provider '{name}' is unhealthy: {e}")
                status[name] = False
        return status

    async def close(self) -> List[Exception]:
        """Close every provider and return the errors raised while closing."""
        with self._lock:
            providers = list(self._instances.items())

        errors: List[Exception] = []
        for name, provider in providers:
            try:
                await provider.close()
            except Exception as e:
                logger.error(f"Failed to close {self.kind} provider '{name}': {e}")
                errors.append(RegistryError(
                    f"Failed to close {self.kind} provider {name}: {e}",
                    details={"provider": name},
                ))
        return errors
