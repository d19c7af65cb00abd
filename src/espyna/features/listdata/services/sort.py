"""Multi-key sorting for in-memory items."""

from datetime import datetime
from functools import cmp_to_key
from typing import Any, List, Optional

from ....utils.time import parse_datetime
from ..entities.sorting import SortDirection, SortField, SortRequest
from .field_access import get_field_value, to_string


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def compare_values(left: Any, right: Any) -> int:
    """Three-way comparison of two non-null values.

    Numbers compare numerically, datetimes chronologically, booleans as
    integers; anything else by case-insensitive string form.
    """
    if _is_number(left) and _is_number(right):
        return (left > right) - (left < right)
    if isinstance(left, datetime) and isinstance(right, datetime):
        # Naive values are read as UTC so they order against aware ones
        left, right = parse_datetime(left), parse_datetime(right)
        return (left > right) - (left < right)
    if isinstance(left, bool) and isinstance(right, bool):
        return int(left) - int(right)

    left_text, right_text = to_string(left), to_string(right)
    left_key, right_key = left_text.casefold(), right_text.casefold()
    if left_key != right_key:
        return (left_key > right_key) - (left_key < right_key)
    return (left_text > right_text) - (left_text < right_text)


class SortUtils:
    """Stable multi-field sort honoring direction and null placement."""

    def apply_sorting(self, items: List[Any], request: Optional[SortRequest]) -> List[Any]:
        return self.sort_keyed(items, request)

    def sort_keyed(self, pairs: List[Any], request: Optional[SortRequest], key=lambda pair: pair) -> List[Any]:
        """Sort arbitrary wrappers by the item returned from ``key``."""
        if request is None or not request.fields:
            return list(pairs)
        return sorted(
            pairs,
            key=cmp_to_key(lambda a, b: self.compare_items(key(a), key(b), request.fields)),
        )

    def compare_items(self, left: Any, right: Any, fields: List[SortField]) -> int:
        for sort_field in fields:
            result = self.compare_field(left, right, sort_field)
            if result != 0:
                return result
        return 0

    def compare_field(self, left: Any, right: Any, sort_field: SortField) -> int:
        left_value = get_field_value(left, sort_field.field)
        right_value = get_field_value(right, sort_field.field)

        if left_value is None and right_value is None:
            return 0
        # Null placement is absolute and does not flip with direction
        if left_value is None:
            return -1 if sort_field.nulls_first else 1
        if right_value is None:
            return 1 if sort_field.nulls_first else -1

        result = compare_values(left_value, right_value)
        return -result if sort_field.direction == SortDirection.DESC else result
