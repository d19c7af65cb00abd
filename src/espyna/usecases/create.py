"""Create use case."""

import copy
import logging
from typing import Optional

from ..core.shared.context import RequestContext
from ..domain.base import Record
from ..utils.time import now_millis, now_nanos
from .base import EntityUseCase
from .requests import CreateRequest, EntityResponse
from .validation import EntityValidationRules

logger = logging.getLogger(__name__)


class CreateEntity(EntityUseCase):
    """Validates, enriches and stores a new record.

    Enrichment assigns an id (ID service first, ``"<prefix>-<ns timestamp>"``
    otherwise), marks the record active and stamps creation dates. Records of
    workspace-scoped entities inherit the caller's workspace when they have
    none.
    """

    action = "create"
    operation = "create"

    def validate(self, request: Optional[CreateRequest], context: RequestContext) -> Optional[str]:
        if request is None:
            return "request_required"
        if request.data is None:
            return "data_required"
        try:
            record = self.definition.coerce(request.data)
        except TypeError:
            return "data_required"
        return EntityValidationRules.validate_record(self.definition, record)

    def enrich(self, record: Record, context: RequestContext) -> Record:
        if not record.id:
            generated = self.services.ids.generate_id() if self.services.ids is not None else ""
            record.id = generated or f"{self.definition.id_prefix}-{now_nanos()}"

        record.active = True
        record.mark_created(now_millis())

        if self.definition.workspace_scoped and context.workspace_id and not getattr(record, "workspace_id", None):
            record.workspace_id = context.workspace_id
        return record

    async def execute_core(self, request: CreateRequest, context: RequestContext) -> EntityResponse:
        record = self.enrich(copy.deepcopy(self.definition.coerce(request.data)), context)
        created = await self.repository.create(record, context)
        logger.info(f"Created {self.definition.name} '{created.id}'")
        return EntityResponse(data=created)
