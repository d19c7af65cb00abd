"""List data processor: filter, search, sort and paginate in one pass."""

import logging
from typing import Any, List, Optional, Sequence

from ....config.constants import DEFAULT_PAGE_SIZE
from ..entities.filters import FilterRequest
from ..entities.pagination import PaginationRequest, PaginationResponse
from ..entities.results import ListDataResult
from ..entities.search import SearchRequest, SearchResult
from ..entities.sorting import SortRequest
from .filter import FilterUtils
from .pagination import PaginationUtils
from .search import SearchUtils
from .sort import SortUtils

logger = logging.getLogger(__name__)


class ListDataProcessor:
    """Applies list requests to in-memory collections.

    Order of operations is filter, search, sort, paginate. Search results are
    ranked by score unless an explicit sort is given, in which case the sort
    wins and search results stay aligned with the returned items.
    """

    def __init__(
        self,
        filter_utils: Optional[FilterUtils] = None,
        sort_utils: Optional[SortUtils] = None,
        search_utils: Optional[SearchUtils] = None,
        pagination_utils: Optional[PaginationUtils] = None,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self.filter_utils = filter_utils or FilterUtils()
        self.sort_utils = sort_utils or SortUtils()
        self.search_utils = search_utils or SearchUtils()
        self.pagination_utils = pagination_utils or PaginationUtils(default_page_size)

    def process_list_request(
        self,
        items: Sequence[Any],
        filters: Optional[FilterRequest] = None,
        sort: Optional[SortRequest] = None,
        search: Optional[SearchRequest] = None,
        pagination: Optional[PaginationRequest] = None,
    ) -> ListDataResult:
        filtered = self.filter_utils.apply_filters(list(items), filters)

        search_metrics = None
        if search is not None:
            ranked, search_metrics = self.search_utils.apply_search(filtered, search)
        else:
            ranked = [SearchResult(item=item, score=1.0) for item in filtered]

        ranked = self.sort_utils.sort_keyed(ranked, sort, key=lambda result: result.item)

        page_info: Optional[PaginationResponse] = None
        if pagination is not None:
            ranked, page_info = self.pagination_utils.paginate(ranked, pagination)

        logger.debug(
            f"Processed list request: {len(items)} items, {len(filtered)} after filters, "
            f"{len(ranked)} returned"
        )
        return ListDataResult(
            items=[result.item for result in ranked],
            pagination=page_info,
            search_results=ranked if search is not None else None,
            search_metrics=search_metrics,
        )

    def apply_filters(self, items: Sequence[Any], filters: Optional[FilterRequest]) -> List[Any]:
        return self.filter_utils.apply_filters(list(items), filters)

    def apply_sorting(self, items: Sequence[Any], sort: Optional[SortRequest]) -> List[Any]:
        return self.sort_utils.apply_sorting(list(items), sort)

    def create_pagination_response(
        self,
        request: Optional[PaginationRequest],
        total_items: int,
        has_next: bool,
    ) -> PaginationResponse:
        return self.pagination_utils.create_pagination_response(request, total_items, has_next)
