"""Read use case."""

from typing import Optional

from ..core.shared.context import RequestContext
from .base import EntityUseCase
from .requests import EntityResponse, ReadRequest


class ReadEntity(EntityUseCase):
    action = "read"
    operation = "read"

    def validate(self, request: Optional[ReadRequest], context: RequestContext) -> Optional[str]:
        if request is None:
            return "request_required"
        if not request.id or not request.id.strip():
            return "id_required"
        return None

    async def execute_core(self, request: ReadRequest, context: RequestContext) -> EntityResponse:
        record = await self.repository.read(request.id, context)
        return EntityResponse(data=record)
