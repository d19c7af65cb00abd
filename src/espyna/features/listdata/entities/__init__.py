"""List processing request and response entities."""

from .filters import (
    BooleanFilter,
    DateFilter,
    DateOperator,
    FilterLogic,
    FilterRequest,
    FilterValue,
    ListFilter,
    ListOperator,
    NumberFilter,
    NumberOperator,
    RangeFilter,
    StringFilter,
    StringOperator,
    TypedFilter,
)
from .sorting import NullOrder, SortDirection, SortField, SortRequest
from .search import SearchHighlight, SearchMetrics, SearchOptions, SearchRequest, SearchResult
from .pagination import CursorPagination, OffsetPagination, PaginationRequest, PaginationResponse
from .results import ListDataResult

__all__ = [
    "BooleanFilter",
    "DateFilter",
    "DateOperator",
    "FilterLogic",
    "FilterRequest",
    "FilterValue",
    "ListFilter",
    "ListOperator",
    "NumberFilter",
    "NumberOperator",
    "RangeFilter",
    "StringFilter",
    "StringOperator",
    "TypedFilter",
    "NullOrder",
    "SortDirection",
    "SortField",
    "SortRequest",
    "SearchHighlight",
    "SearchMetrics",
    "SearchOptions",
    "SearchRequest",
    "SearchResult",
    "CursorPagination",
    "OffsetPagination",
    "PaginationRequest",
    "PaginationResponse",
    "ListDataResult",
]
