"""ID generation port."""

from abc import abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class IDService(Protocol):
    @abstractmethod
    def generate_id(self) -> str:
        """New unique id, or an empty string when the service cannot generate one."""
        ...
