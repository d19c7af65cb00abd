"""Database and transaction exceptions.

Transaction failures are classified by ``TransactionErrorCode``; a fixed table
decides which codes may be retried.
"""

from enum import Enum
from typing import Any, Dict, Optional

from ...config.constants import RETRY_BASE_DELAY_MS, RETRY_MAX_DELAY_MS
from .base import EspynaError


class DatabaseError(EspynaError):
    """Database failure with an error code and HTTP status."""

    def __init__(
        self,
        message: str,
        code: str = "DATABASE_ERROR",
        http_status: int = 500,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, error_code=code, details=dict(context or {}))
        self.code = code
        self.http_status = http_status
        self.context = self.details
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"database error [{self.code}]: {self.message}"

    def with_context(self, key: str, value: Any) -> "DatabaseError":
        self.context[key] = value
        return self


class TransactionErrorCode(str, Enum):
    """Transaction failure categories."""
    GENERAL = "GENERAL"
    BEGIN_FAILED = "BEGIN_FAILED"
    COMMIT_FAILED = "COMMIT_FAILED"
    ROLLBACK_FAILED = "ROLLBACK_FAILED"
    CONFLICT = "CONFLICT"
    TIMEOUT = "TIMEOUT"
    DEADLOCK = "DEADLOCK"
    INVALID_STATE = "INVALID_STATE"
    NOT_SUPPORTED = "NOT_SUPPORTED"
    CONTEXT_MISSING = "CONTEXT_MISSING"


RETRYABLE_CODES = frozenset({
    TransactionErrorCode.CONFLICT,
    TransactionErrorCode.TIMEOUT,
    TransactionErrorCode.DEADLOCK,
    TransactionErrorCode.BEGIN_FAILED,
    TransactionErrorCode.COMMIT_FAILED,
    TransactionErrorCode.ROLLBACK_FAILED,
})


class TransactionError(DatabaseError):
    """Transaction failure classified by code."""

    def __init__(
        self,
        code: TransactionErrorCode,
        message: str,
        operation: str = "",
        transaction_id: str = "",
        cause: Optional[BaseException] = None,
        context: Optional[Dict[str, Any]] = None,
        retryable: Optional[bool] = None,
    ):
        super().__init__(message, code=code.value, http_status=500, context=context, cause=cause)
        self.transaction_code = code
        self.operation = operation
        self.transaction_id = transaction_id
        self.retryable = code in RETRYABLE_CODES if retryable is None else retryable

    def __str__(self) -> str:
        parts = [f"transaction error [{self.code}]"]
        if self.transaction_id:
            parts.append(f"in transaction {self.transaction_id}")
        if self.operation:
            parts.append(f"during {self.operation}")
        return f"{' '.join(parts)}: {self.message}"

    def is_retryable(self) -> bool:
        return self.retryable


def is_retryable_code(code: TransactionErrorCode) -> bool:
    return code in RETRYABLE_CODES


def wrap_transaction_error(
    error: Optional[BaseException],
    code: TransactionErrorCode,
    operation: str,
) -> Optional[TransactionError]:
    """Wrap ``error`` in a TransactionError, keeping an existing one as the cause."""
    if error is None:
        return None

    if isinstance(error, TransactionError):
        return TransactionError(
            code,
            f"wrapped transaction error: {error.message}",
            operation=operation,
            transaction_id=error.transaction_id,
            cause=error,
            retryable=error.retryable,
        )

    return TransactionError(code, str(error), operation=operation, cause=error)


def get_transaction_error(error: Optional[BaseException]) -> Optional[TransactionError]:
    """Find the first TransactionError in the exception cause chain."""
    seen = set()
    while error is not None and id(error) not in seen:
        if isinstance(error, TransactionError):
            return error
        seen.add(id(error))
        error = error.__cause__ or getattr(error, "cause", None)
    return None


def is_retryable_error(error: Optional[BaseException]) -> bool:
    tx_error = get_transaction_error(error)
    return tx_error is not None and tx_error.is_retryable()


class TransactionErrorHandler:
    """Normalizes transaction failures and computes retry back-off."""

    def __init__(
        self,
        base_delay_ms: int = RETRY_BASE_DELAY_MS,
        max_delay_ms: int = RETRY_MAX_DELAY_MS,
    ):
        self.base_delay_ms = base_delay_ms
        self.max_delay_ms = max_delay_ms

    def handle_error(
        self,
        error: Optional[BaseException],
        operation: str,
        transaction_id: str = "",
    ) -> Optional[TransactionError]:
        if error is None:
            return None
        if isinstance(error, TransactionError):
            return error
        wrapped = wrap_transaction_error(error, TransactionErrorCode.GENERAL, operation)
        wrapped.transaction_id = transaction_id
        return wrapped

    def should_retry(self, error: Optional[BaseException], attempt: int, max_retries: int) -> bool:
        if attempt >= max_retries:
            return False
        return is_retryable_error(error)

    def get_retry_delay(self, attempt: int) -> int:
        """Exponential back-off in milliseconds: 100, 200, 400, ... capped."""
        delay = self.base_delay_ms * (2 ** max(attempt, 0))
        return min(delay, self.max_delay_ms)
