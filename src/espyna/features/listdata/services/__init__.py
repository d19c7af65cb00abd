"""List processing services."""

from .field_access import (
    default_search_fields,
    get_field_value,
    item_fields,
    to_bool,
    to_datetime,
    to_float,
    to_string,
)
from .filter import FilterUtils
from .sort import SortUtils, compare_values
from .search import SearchUtils, extract_top_terms, fuzzy_match, highlight_term, tokenize_query
from .pagination import PaginationUtils, decode_cursor, encode_cursor
from .processor import ListDataProcessor

__all__ = [
    "default_search_fields",
    "get_field_value",
    "item_fields",
    "to_bool",
    "to_datetime",
    "to_float",
    "to_string",
    "FilterUtils",
    "SortUtils",
    "compare_values",
    "SearchUtils",
    "extract_top_terms",
    "fuzzy_match",
    "highlight_term",
    "tokenize_query",
    "PaginationUtils",
    "decode_cursor",
    "encode_cursor",
    "ListDataProcessor",
]
