"""Transaction services and the mock transaction used by in-memory providers."""

from .entities import (
    MockTransaction,
    RecordedOperation,
    Transaction,
    TransactionOperation,
    TransactionService,
    TransactionState,
)
from .services import InMemoryTransactionService, NoOpTransactionService

__all__ = [
    "MockTransaction",
    "RecordedOperation",
    "Transaction",
    "TransactionOperation",
    "TransactionService",
    "TransactionState",
    "InMemoryTransactionService",
    "NoOpTransactionService",
]
