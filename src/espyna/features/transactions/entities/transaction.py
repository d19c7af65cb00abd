"""In-memory transaction with failure injection."""

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ....core.exceptions import TransactionError, TransactionErrorCode
from ....utils.time import now_millis
from ....utils.uuid import generate_uuid_v7

logger = logging.getLogger(__name__)


class TransactionState(str, Enum):
    PENDING = "pending"
    COMMITTED = "committed"
    ROLLED_BACK = "rolled_back"


class TransactionOperation(str, Enum):
    BEGIN = "begin"
    COMMIT = "commit"
    ROLLBACK = "rollback"


@dataclass(frozen=True)
class RecordedOperation:
    """A write performed inside a mock transaction."""

    type: str
    collection: str
    document_id: str
    data: Dict[str, Any] = field(default_factory=dict)
    timestamp: int = field(default_factory=now_millis)


class MockTransaction:
    """Transaction that only tracks state and recorded operations.

    ``fail_on`` makes the next begin, commit or rollback raise, either the
    given error or a TransactionError with the matching code.
    """

    def __init__(self, transaction_id: Optional[str] = None):
        self._id = transaction_id or f"mock-tx-{generate_uuid_v7()}"
        self._state = TransactionState.PENDING
        self._operations: List[RecordedOperation] = []
        self._failures: Dict[TransactionOperation, Optional[BaseException]] = {}
        self._lock = asyncio.Lock()

    @property
    def id(self) -> str:
        return self._id

    @property
    def state(self) -> TransactionState:
        return self._state

    @property
    def operations(self) -> List[RecordedOperation]:
        return list(self._operations)

    def fail_on(self, operation: TransactionOperation, error: Optional[BaseException] = None) -> "MockTransaction":
        self._failures[TransactionOperation(operation)] = error
        return self

    def record(self, op_type: str, collection: str, document_id: str, data: Optional[Dict[str, Any]] = None) -> None:
        self._operations.append(RecordedOperation(op_type, collection, document_id, dict(data or {})))

    def _injected_failure(self, operation: TransactionOperation, code: TransactionErrorCode) -> Optional[BaseException]:
        if operation not in self._failures:
            return None
        return self._failures[operation] or TransactionError(
            code,
            f"mock transaction {operation.value} failed",
            operation=operation.value,
            transaction_id=self._id,
        )

    def _invalid_state(self, operation: TransactionOperation, message: str) -> TransactionError:
        return TransactionError(
            TransactionErrorCode.INVALID_STATE,
            message,
            operation=operation.value,
            transaction_id=self._id,
        )

    async def begin(self) -> None:
        async with self._lock:
            failure = self._injected_failure(TransactionOperation.BEGIN, TransactionErrorCode.BEGIN_FAILED)
            if failure is not None:
                raise failure
            if self._state != TransactionState.PENDING:
                raise self._invalid_state(
                    TransactionOperation.BEGIN,
                    f"transaction is already in state {self._state.value}",
                )

    async def commit(self) -> None:
        async with self._lock:
            failure = self._injected_failure(TransactionOperation.COMMIT, TransactionErrorCode.COMMIT_FAILED)
            if failure is not None:
                self._state = TransactionState.ROLLED_BACK
                raise failure
            if self._state != TransactionState.PENDING:
                raise self._invalid_state(
                    TransactionOperation.COMMIT,
                    f"cannot commit transaction in state {self._state.value}",
                )
            self._state = TransactionState.COMMITTED
            logger.debug(f"Committed {self._id} with {len(self._operations)} operations")

    async def rollback(self) -> None:
        async with self._lock:
            failure = self._injected_failure(TransactionOperation.ROLLBACK, TransactionErrorCode.ROLLBACK_FAILED)
            if failure is not None:
                raise failure
            if self._state == TransactionState.ROLLED_BACK:
                return
            if self._state == TransactionState.COMMITTED:
                raise self._invalid_state(TransactionOperation.ROLLBACK, "cannot rollback committed transaction")
            self._state = TransactionState.ROLLED_BACK
            self._operations.clear()
