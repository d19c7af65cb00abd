"""Registry protocols."""

from abc import abstractmethod
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ProviderInstance(Protocol):
    """A constructed provider managed by an InstanceRegistry."""

    @property
    def name(self) -> str:
        ...

    def is_enabled(self) -> bool:
        ...

    @abstractmethod
    async def is_healthy(self) -> None:
        """Raise if the provider is not healthy."""
        ...

    @abstractmethod
    async def close(self) -> None:
        ...


@runtime_checkable
class RepositoryFactory(Protocol):
    """Builds a repository from a provider connection and a table name."""

    def __call__(self, connection: Any, table_name: str) -> Any:
        ...


@runtime_checkable
class DatabaseProvider(ProviderInstance, Protocol):
    """A provider whose connection is handed to repository factories."""

    @abstractmethod
    async def connect(self) -> Any:
        ...
