"""Transaction ports."""

from abc import abstractmethod
from typing import Any, Awaitable, Callable, Optional, Protocol, TypeVar, runtime_checkable

from ....core.shared.context import RequestContext

R = TypeVar("R")

TransactionalFunction = Callable[[RequestContext], Awaitable[R]]


@runtime_checkable
class Transaction(Protocol):
    """A single unit of work."""

    @property
    def id(self) -> str:
        ...

    @abstractmethod
    async def begin(self) -> None:
        ...

    @abstractmethod
    async def commit(self) -> None:
        ...

    @abstractmethod
    async def rollback(self) -> None:
        ...


@runtime_checkable
class TransactionService(Protocol):
    """Runs callbacks inside transactions."""

    @abstractmethod
    def supports_transactions(self) -> bool:
        ...

    @abstractmethod
    async def execute_in_transaction(
        self,
        context: RequestContext,
        fn: Callable[[RequestContext], Awaitable[Any]],
    ) -> Any:
        """Run ``fn`` with a context bound to a transaction and return its result."""
        ...

    def get_transaction(self, context: RequestContext) -> Optional[Transaction]:
        ...
