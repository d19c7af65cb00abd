"""Transaction service backed by mock transactions."""

import asyncio
import logging
from typing import Any, Awaitable, Callable, List, Optional

from ....core.exceptions import (
    TransactionError,
    TransactionErrorCode,
    TransactionErrorHandler,
)
from ....core.shared.context import RequestContext
from ..entities.protocols import Transaction
from ..entities.transaction import MockTransaction

logger = logging.getLogger(__name__)


class InMemoryTransactionService:
    """Begins, commits and rolls back mock transactions around callbacks.

    A context that already carries a transaction joins it instead of starting
    a new one. Begin and commit failures are normalized to TransactionError.
    Any failure whose cause chain holds a retryable TransactionError is
    retried up to ``max_retries`` times with exponential back-off.
    """

    def __init__(
        self,
        max_retries: int = 0,
        error_handler: Optional[TransactionErrorHandler] = None,
        transaction_factory: Callable[[], Transaction] = MockTransaction,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.max_retries = max_retries
        self.error_handler = error_handler or TransactionErrorHandler()
        self.transaction_factory = transaction_factory
        self._sleep = sleep
        self.transactions: List[Transaction] = []

    def supports_transactions(self) -> bool:
        return True

    def get_transaction(self, context: RequestContext) -> Optional[Transaction]:
        return context.transaction

    async def execute_in_transaction(
        self,
        context: RequestContext,
        fn: Callable[[RequestContext], Awaitable[Any]],
    ) -> Any:
        if context.transaction is not None:
            return await fn(context)

        attempt = 0
        while True:
            try:
                return await self._run_once(context, fn)
            except Exception as e:
                if not self.error_handler.should_retry(e, attempt, self.max_retries):
                    raise
                delay_ms = self.error_handler.get_retry_delay(attempt)
                logger.warning(f"Retrying transaction after {delay_ms}ms (attempt {attempt + 1}): {e}")
                attempt += 1
                await self._sleep(delay_ms / 1000.0)

    async def _run_once(
        self,
        context: RequestContext,
        fn: Callable[[RequestContext], Awaitable[Any]],
    ) -> Any:
        transaction = self.transaction_factory()
        self.transactions.append(transaction)

        try:
            await transaction.begin()
        except TransactionError:
            raise
        except Exception as e:
            raise self._wrap(e, TransactionErrorCode.BEGIN_FAILED, "begin", transaction) from e

        try:
            result = await fn(context.with_transaction(transaction))
        except Exception as e:
            try:
                await transaction.rollback()
            except Exception as rollback_error:
                logger.error(f"Rollback of {transaction.id} failed: {rollback_error}")
                raise TransactionError(
                    TransactionErrorCode.ROLLBACK_FAILED,
                    f"function failed and rollback failed: {e} (rollback: {rollback_error})",
                    operation="rollback",
                    transaction_id=transaction.id,
                    cause=e,
                ) from e
            raise

        try:
            await transaction.commit()
        except TransactionError:
            raise
        except Exception as e:
            raise self._wrap(e, TransactionErrorCode.COMMIT_FAILED, "commit", transaction) from e

        return result

    def _wrap(
        self,
        error: Exception,
        code: TransactionErrorCode,
        operation: str,
        transaction: Transaction,
    ) -> TransactionError:
        return TransactionError(
            code,
            str(error),
            operation=operation,
            transaction_id=transaction.id,
            cause=error,
        )
