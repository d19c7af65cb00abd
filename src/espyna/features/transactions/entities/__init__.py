from .protocols import Transaction, TransactionService
from .transaction import MockTransaction, RecordedOperation, TransactionOperation, TransactionState

__all__ = [
    "Transaction",
    "TransactionService",
    "MockTransaction",
    "RecordedOperation",
    "TransactionOperation",
    "TransactionState",
]
