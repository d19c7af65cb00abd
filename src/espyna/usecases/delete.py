"""Delete use case."""

import logging
from typing import Optional

from ..core.shared.context import RequestContext
from ..utils.time import now_millis
from .base import EntityUseCase
from .requests import DeleteRequest, DeleteResponse

logger = logging.getLogger(__name__)


class DeleteEntity(EntityUseCase):
    """Soft deletes by clearing ``active``; ``hard=True`` removes the record."""

    action = "delete"
    operation = "delete"

    def validate(self, request: Optional[DeleteRequest], context: RequestContext) -> Optional[str]:
        if request is None:
            return "request_required"
        if not request.id or not request.id.strip():
            return "id_required"
        return None

    async def execute_core(self, request: DeleteRequest, context: RequestContext) -> DeleteResponse:
        if request.hard:
            await self.repository.delete(request.id, context)
        else:
            record = await self.repository.read(request.id, context)
            record.active = False
            record.mark_modified(now_millis())
            await self.repository.update(record, context)

        logger.info(f"Deleted {self.definition.name} '{request.id}' (hard={request.hard})")
        return DeleteResponse(id=request.id, hard=request.hard)
