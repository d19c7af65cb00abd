"""Request and response objects shared by every entity's use cases."""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..domain.base import Record
from ..features.listdata import (
    FilterRequest,
    PaginationRequest,
    PaginationResponse,
    SearchMetrics,
    SearchRequest,
    SearchResult,
    SortRequest,
)


@dataclass
class CreateRequest:
    """``data`` is a record of the entity or a mapping of its fields."""

    data: Any = None


@dataclass
class ReadRequest:
    id: str = ""


@dataclass
class UpdateRequest:
    data: Any = None


@dataclass
class DeleteRequest:
    """Soft delete (``active = False``) unless ``hard`` is set."""

    id: str = ""
    hard: bool = False


@dataclass
class ListRequest:
    pass


@dataclass
class GetListPageDataRequest:
    filters: Optional[FilterRequest] = None
    sort: Optional[SortRequest] = None
    search: Optional[SearchRequest] = None
    pagination: Optional[PaginationRequest] = None


@dataclass
class GetItemPageDataRequest:
    id: str = ""


@dataclass
class EntityResponse:
    data: Optional[Record] = None
    success: bool = True


@dataclass
class EntityListResponse:
    data: List[Record] = field(default_factory=list)
    success: bool = True


@dataclass
class DeleteResponse:
    id: str = ""
    hard: bool = False
    success: bool = True


@dataclass
class ListPageDataResponse:
    items: List[Record] = field(default_factory=list)
    pagination: Optional[PaginationResponse] = None
    search_results: List[SearchResult] = field(default_factory=list)
    search_metrics: Optional[SearchMetrics] = None
    success: bool = True
