"""Update use case."""

import copy
import logging
from typing import Optional

from ..core.shared.context import RequestContext
from ..utils.time import now_millis
from .base import EntityUseCase
from .requests import EntityResponse, UpdateRequest
from .validation import EntityValidationRules

logger = logging.getLogger(__name__)


class UpdateEntity(EntityUseCase):
    """Replaces a stored record; creation dates are preserved by the repository."""

    action = "update"
    operation = "update"

    def validate(self, request: Optional[UpdateRequest], context: RequestContext) -> Optional[str]:
        if request is None:
            return "request_required"
        if request.data is None:
            return "data_required"
        try:
            record = self.definition.coerce(request.data)
        except TypeError:
            return "data_required"
        return EntityValidationRules.validate_id(record.id) or EntityValidationRules.validate_record(
            self.definition, record
        )

    async def execute_core(self, request: UpdateRequest, context: RequestContext) -> EntityResponse:
        record = copy.deepcopy(self.definition.coerce(request.data))
        record.mark_modified(now_millis())
        updated = await self.repository.update(record, context)
        logger.info(f"Updated {self.definition.name} '{updated.id}'")
        return EntityResponse(data=updated)
