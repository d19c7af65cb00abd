from .protocols import IDService

__all__ = ["IDService"]
