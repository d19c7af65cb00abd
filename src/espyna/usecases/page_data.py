"""List and item page data use cases."""

import logging
from typing import Optional

from ..config.constants import MAX_PAGE_SIZE, MAX_SEARCH_RESULTS, MIN_ITEM_ID_LENGTH
from ..core.shared.context import RequestContext
from ..domain.base import EntityDefinition
from ..features.listdata import ListDataProcessor, ListRequestValidationRules
from .base import EntityUseCase, UseCaseRepositories, UseCaseServices
from .requests import EntityResponse, GetItemPageDataRequest, GetListPageDataRequest, ListPageDataResponse
from .validation import EntityValidationRules

logger = logging.getLogger(__name__)


class GetEntityListPageData(EntityUseCase):
    """Filtered, searched, sorted and paginated records for a list page.

    Records the caller may not see are removed before list processing, so
    totals and page counts only ever describe visible records.
    """

    action = "list"
    operation = "list_page_data"

    def __init__(
        self,
        definition: EntityDefinition,
        repositories: UseCaseRepositories,
        services: Optional[UseCaseServices] = None,
        processor: Optional[ListDataProcessor] = None,
        max_page_size: int = MAX_PAGE_SIZE,
        max_search_results: int = MAX_SEARCH_RESULTS,
    ):
        super().__init__(definition, repositories, services)
        self.processor = processor or ListDataProcessor()
        self.max_page_size = max_page_size
        self.max_search_results = max_search_results

    def validate(self, request: Optional[GetListPageDataRequest], context: RequestContext) -> Optional[str]:
        if request is None:
            return "request_required"
        return ListRequestValidationRules.validate_request(
            pagination=request.pagination,
            filters=request.filters,
            sort=request.sort,
            search=request.search,
            valid_fields=self.definition.valid_fields,
            max_limit=self.max_page_size,
            max_results=self.max_search_results,
        )

    async def execute_core(self, request: GetListPageDataRequest, context: RequestContext) -> ListPageDataResponse:
        records = await self.repository.list(context)
        include_inactive = self.can_read_inactive(context)
        visible = [record for record in records if self.is_visible(record, context, include_inactive)]

        if not visible:
            pagination = None
            if request.pagination is not None:
                pagination = self.processor.create_pagination_response(request.pagination, 0, False)
            return ListPageDataResponse(items=[], pagination=pagination)

        search = request.search
        if search is not None:
            search = search.with_default_fields(self.definition.searchable_fields)
        result = self.processor.process_list_request(
            visible,
            filters=request.filters,
            sort=request.sort,
            search=search,
            pagination=request.pagination,
        )
        logger.debug(f"{self.definition.name} list page: {len(result.items)} of {len(visible)} visible records")
        return ListPageDataResponse(
            items=result.items,
            pagination=result.pagination,
            search_results=result.search_results or [],
            search_metrics=result.search_metrics,
        )


class GetEntityItemPageData(EntityUseCase):
    """One record for a detail page.

    Inactive records need the ``<entity>:read_inactive`` permission; records
    outside the caller's workspace are reported as not found.
    """

    action = "read"
    operation = "item_page_data"

    def validate(self, request: Optional[GetItemPageDataRequest], context: RequestContext) -> Optional[str]:
        if request is None:
            return "request_required"
        return EntityValidationRules.validate_id(request.id, MIN_ITEM_ID_LENGTH)

    async def execute_core(self, request: GetItemPageDataRequest, context: RequestContext) -> EntityResponse:
        record = await self.repository.get_item_page_data(request.id, context)

        if record is None:
            raise self.error(context, "not_found", http_status=404, details={"id": request.id})
        if record.id != request.id:
            raise self.error(context, "id_mismatch", http_status=500, details={"id": request.id})
        if not self.is_visible(record, context, include_inactive=True):
            raise self.error(context, "not_found", http_status=404, details={"id": request.id})
        if not record.active and not self.can_read_inactive(context):
            raise self.error(context, "inactive", http_status=404, details={"id": request.id})

        return EntityResponse(data=record)
