"""ID generation port and adapters."""

from .entities import IDService
from .services import NoOpIDService, UUIDv7IDService

__all__ = ["IDService", "NoOpIDService", "UUIDv7IDService"]
