"""Repository port used by every entity use case."""

from abc import abstractmethod
from typing import List, Optional, Protocol, runtime_checkable

from ..core.shared.context import RequestContext
from ..domain.base import Record
from ..features.listdata import (
    FilterRequest,
    ListDataResult,
    PaginationRequest,
    SearchRequest,
    SortRequest,
)


@runtime_checkable
class EntityRepository(Protocol):
    """Persistence operations for one entity.

    Missing ids raise EntityNotFoundError; creating a taken id raises
    EntityAlreadyExistsError.
    """

    @abstractmethod
    async def create(self, record: Record, context: Optional[RequestContext] = None) -> Record:
        ...

    @abstractmethod
    async def read(self, record_id: str, context: Optional[RequestContext] = None) -> Record:
        ...

    @abstractmethod
    async def update(self, record: Record, context: Optional[RequestContext] = None) -> Record:
        ...

    @abstractmethod
    async def delete(self, record_id: str, context: Optional[RequestContext] = None) -> None:
        ...

    @abstractmethod
    async def list(self, context: Optional[RequestContext] = None) -> List[Record]:
        ...

    @abstractmethod
    async def get_list_page_data(
        self,
        filters: Optional[FilterRequest] = None,
        sort: Optional[SortRequest] = None,
        search: Optional[SearchRequest] = None,
        pagination: Optional[PaginationRequest] = None,
        context: Optional[RequestContext] = None,
    ) -> ListDataResult:
        ...

    @abstractmethod
    async def get_item_page_data(self, record_id: str, context: Optional[RequestContext] = None) -> Record:
        ...
