"""Combined list processing result."""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .pagination import PaginationResponse
from .search import SearchMetrics, SearchResult


@dataclass
class ListDataResult:
    """Items for the requested page plus optional pagination and search data."""

    items: List[Any] = field(default_factory=list)
    pagination: Optional[PaginationResponse] = None
    search_results: Optional[List[SearchResult]] = None
    search_metrics: Optional[SearchMetrics] = None

    @property
    def total_items(self) -> int:
        if self.pagination is not None:
            return self.pagination.total_items
        return len(self.items)
