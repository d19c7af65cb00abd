"""Transaction service for providers without transactions."""

from typing import Any, Awaitable, Callable, Optional

from ....core.shared.context import RequestContext
from ..entities.protocols import Transaction


class NoOpTransactionService:
    """Runs callbacks directly; use cases skip the transactional path."""

    def supports_transactions(self) -> bool:
        return False

    async def execute_in_transaction(
        self,
        context: RequestContext,
        fn: Callable[[RequestContext], Awaitable[Any]],
    ) -> Any:
        return await fn(context)

    def get_transaction(self, context: RequestContext) -> Optional[Transaction]:
        return context.transaction
