"""List use case."""

from typing import Optional

from ..core.shared.context import RequestContext
from .base import EntityUseCase
from .requests import EntityListResponse, ListRequest


class ListEntities(EntityUseCase):
    """All records visible to the caller, in storage order."""

    action = "list"
    operation = "list"

    async def execute_core(self, request: Optional[ListRequest], context: RequestContext) -> EntityListResponse:
        records = await self.repository.list(context)
        include_inactive = self.can_read_inactive(context)
        return EntityListResponse(
            data=[record for record in records if self.is_visible(record, context, include_inactive)]
        )
