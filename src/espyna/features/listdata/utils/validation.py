"""Validation rules for list requests.

Each check returns the message key suffix of the first problem found, or None
when the request is acceptable. Callers prefix the key with their entity
(``"workspace.validation.invalid_limit"``).
"""

from typing import AbstractSet, Optional

from ....config.constants import MAX_PAGE_SIZE, MAX_SEARCH_RESULTS
from ....core.exceptions import InvalidCursorError
from ..entities.filters import FilterRequest
from ..entities.pagination import PaginationRequest
from ..entities.search import SearchRequest
from ..entities.sorting import SortRequest
from ..services.pagination import decode_cursor


def is_valid_field(field_path: str, valid_fields: Optional[AbstractSet[str]]) -> bool:
    """A dotted path is valid when its root segment is a known field."""
    if valid_fields is None:
        return True
    return field_path.split(".", 1)[0] in valid_fields


class ListRequestValidationRules:
    """Centralized validation rules for list page data requests."""

    MAX_LIMIT = MAX_PAGE_SIZE
    MAX_SEARCH_RESULTS = MAX_SEARCH_RESULTS

    @staticmethod
    def validate_pagination(
        pagination: Optional[PaginationRequest],
        max_limit: int = MAX_PAGE_SIZE,
    ) -> Optional[str]:
        if pagination is None:
            return None
        if pagination.limit < 0 or pagination.limit > max_limit:
            return "invalid_limit"
        if pagination.offset is not None and pagination.offset.page < 1:
            return "invalid_page"
        if pagination.cursor is not None:
            if not pagination.cursor.token:
                return "invalid_cursor"
            try:
                decode_cursor(pagination.cursor.token)
            except InvalidCursorError:
                return "invalid_cursor"
        return None

    @staticmethod
    def validate_filters(
        filters: Optional[FilterRequest],
        valid_fields: Optional[AbstractSet[str]] = None,
    ) -> Optional[str]:
        if filters is None:
            return None
        if not filters.filters:
            return "empty_filters"
        for typed in filters.filters:
            if not typed.field:
                return "filter_field_required"
            if not is_valid_field(typed.field, valid_fields):
                return "invalid_filter_field"
        return None

    @staticmethod
    def validate_sort(
        sort: Optional[SortRequest],
        valid_fields: Optional[AbstractSet[str]] = None,
    ) -> Optional[str]:
        if sort is None:
            return None
        if not sort.fields:
            return "empty_sort_fields"
        for sort_field in sort.fields:
            if not sort_field.field:
                return "sort_field_required"
            if not is_valid_field(sort_field.field, valid_fields):
                return "invalid_sort_field"
        return None

    @staticmethod
    def validate_search(
        search: Optional[SearchRequest],
        valid_fields: Optional[AbstractSet[str]] = None,
        max_results: int = MAX_SEARCH_RESULTS,
    ) -> Optional[str]:
        if search is None:
            return None
        if not (search.query or "").strip():
            return "empty_search_query"
        if search.options is not None:
            for field_name in search.options.search_fields:
                if not is_valid_field(field_name, valid_fields):
                    return "invalid_search_field"
            if search.options.max_results < 0 or search.options.max_results > max_results:
                return "invalid_max_results"
        return None

    @classmethod
    def validate_request(
        cls,
        pagination: Optional[PaginationRequest] = None,
        filters: Optional[FilterRequest] = None,
        sort: Optional[SortRequest] = None,
        search: Optional[SearchRequest] = None,
        valid_fields: Optional[AbstractSet[str]] = None,
        max_limit: int = MAX_PAGE_SIZE,
        max_results: int = MAX_SEARCH_RESULTS,
    ) -> Optional[str]:
        """First problem across all parts of a list request."""
        return (
            cls.validate_pagination(pagination, max_limit)
            or cls.validate_filters(filters, valid_fields)
            or cls.validate_sort(sort, valid_fields)
            or cls.validate_search(search, valid_fields, max_results)
        )
