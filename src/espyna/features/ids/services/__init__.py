from .generators import NoOpIDService, UUIDv7IDService

__all__ = ["NoOpIDService", "UUIDv7IDService"]
