"""List data processing feature.

Filtering, sorting, term search and pagination over in-memory collections,
shared by every "list page data" use case.
"""

from .entities import (
    BooleanFilter,
    CursorPagination,
    DateFilter,
    DateOperator,
    FilterLogic,
    FilterRequest,
    ListDataResult,
    ListFilter,
    ListOperator,
    NullOrder,
    NumberFilter,
    NumberOperator,
    OffsetPagination,
    PaginationRequest,
    PaginationResponse,
    RangeFilter,
    SearchHighlight,
    SearchMetrics,
    SearchOptions,
    SearchRequest,
    SearchResult,
    SortDirection,
    SortField,
    SortRequest,
    StringFilter,
    StringOperator,
    TypedFilter,
)
from .services import (
    FilterUtils,
    ListDataProcessor,
    PaginationUtils,
    SearchUtils,
    SortUtils,
    decode_cursor,
    encode_cursor,
    get_field_value,
)
from .utils import ListRequestValidationRules

__all__ = [
    "BooleanFilter",
    "CursorPagination",
    "DateFilter",
    "DateOperator",
    "FilterLogic",
    "FilterRequest",
    "ListDataResult",
    "ListFilter",
    "ListOperator",
    "NullOrder",
    "NumberFilter",
    "NumberOperator",
    "OffsetPagination",
    "PaginationRequest",
    "PaginationResponse",
    "RangeFilter",
    "SearchHighlight",
    "SearchMetrics",
    "SearchOptions",
    "SearchRequest",
    "SearchResult",
    "SortDirection",
    "SortField",
    "SortRequest",
    "StringFilter",
    "StringOperator",
    "TypedFilter",
    "FilterUtils",
    "ListDataProcessor",
    "PaginationUtils",
    "SearchUtils",
    "SortUtils",
    "decode_cursor",
    "encode_cursor",
    "get_field_value",
    "ListRequestValidationRules",
]
