from .in_memory import InMemoryTransactionService
from .noop import NoOpTransactionService

__all__ = ["InMemoryTransactionService", "NoOpTransactionService"]
