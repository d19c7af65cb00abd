"""Authorization port."""

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from ....core.shared.context import RequestContext


def permission_for(entity: str, action: str) -> str:
    return f"{entity}:{action}"


@runtime_checkable
class AuthorizationService(Protocol):
    """Answers whether the caller in ``context`` may perform a permission."""

    @abstractmethod
    async def is_authorized(self, context: RequestContext, permission: str) -> bool:
        ...
