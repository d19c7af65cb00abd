"""Typed filter evaluation over in-memory items."""

import logging
import re
from datetime import timezone
from typing import Any, Callable, Dict, List, Optional

from ..entities.filters import (
    BooleanFilter,
    DateFilter,
    DateOperator,
    FilterLogic,
    FilterRequest,
    ListFilter,
    ListOperator,
    NumberFilter,
    NumberOperator,
    RangeFilter,
    StringFilter,
    StringOperator,
    TypedFilter,
)
from .field_access import get_field_value, to_bool, to_datetime, to_float, to_string

logger = logging.getLogger(__name__)


class FilterUtils:
    """Evaluates ``FilterRequest`` objects against items.

    Filters never raise on bad data: a value that cannot be coerced to the
    filter's type simply does not match.
    """

    def __init__(self):
        self._evaluators: Dict[type, Callable[[Any, Any], bool]] = {
            StringFilter: self.evaluate_string_filter,
            NumberFilter: self.evaluate_number_filter,
            DateFilter: self.evaluate_date_filter,
            ListFilter: self.evaluate_list_filter,
            RangeFilter: self.evaluate_range_filter,
            BooleanFilter: self.evaluate_boolean_filter,
        }

    def apply_filters(self, items: List[Any], request: Optional[FilterRequest]) -> List[Any]:
        if request is None or request.is_empty:
            return list(items)
        return [item for item in items if self.evaluate_filters(item, request)]

    def evaluate_filters(self, item: Any, request: Optional[FilterRequest]) -> bool:
        if request is None or request.is_empty:
            return True

        results = (self.evaluate_typed_filter(item, typed) for typed in request.filters)
        if request.logic == FilterLogic.OR:
            return any(results)
        return all(results)

    def evaluate_typed_filter(self, item: Any, typed: TypedFilter) -> bool:
        evaluator = self._evaluators.get(type(typed.filter))
        if evaluator is None:
            logger.debug(f"Unknown filter type {type(typed.filter).__name__} on '{typed.field}', including item")
            return True
        return evaluator(get_field_value(item, typed.field), typed.filter)

    def evaluate_string_filter(self, value: Any, flt: StringFilter) -> bool:
        text = to_string(value)
        expected = flt.value or ""

        if flt.operator == StringOperator.REGEX:
            flags = 0 if flt.case_sensitive else re.IGNORECASE
            try:
                return re.search(expected, text, flags) is not None
            except re.error:
                return False

        if not flt.case_sensitive:
            text = text.lower()
            expected = expected.lower()

        if flt.operator == StringOperator.EQUALS:
            return text == expected
        if flt.operator == StringOperator.NOT_EQUALS:
            return text != expected
        if flt.operator == StringOperator.CONTAINS:
            return expected in text
        if flt.operator == StringOperator.STARTS_WITH:
            return text.startswith(expected)
        if flt.operator == StringOperator.ENDS_WITH:
            return text.endswith(expected)
        return False

    def evaluate_number_filter(self, value: Any, flt: NumberFilter) -> bool:
        number = to_float(value)
        if number is None:
            return False

        target = float(flt.value)
        if flt.operator == NumberOperator.EQUALS:
            return number == target
        if flt.operator == NumberOperator.NOT_EQUALS:
            return number != target
        if flt.operator == NumberOperator.GREATER_THAN:
            return number > target
        if flt.operator == NumberOperator.GREATER_THAN_OR_EQUAL:
            return number >= target
        if flt.operator == NumberOperator.LESS_THAN:
            return number < target
        if flt.operator == NumberOperator.LESS_THAN_OR_EQUAL:
            return number <= target
        return False

    def evaluate_date_filter(self, value: Any, flt: DateFilter) -> bool:
        moment = to_datetime(value)
        if moment is None:
            return False

        # Filter values are RFC3339 strings or datetimes, never epoch numbers
        target = to_datetime(flt.value) if not isinstance(flt.value, (int, float)) else None
        if target is None:
            return False

        if flt.operator == DateOperator.EQUALS:
            return moment.astimezone(timezone.utc).date() == target.astimezone(timezone.utc).date()
        if flt.operator == DateOperator.BEFORE:
            return moment < target
        if flt.operator == DateOperator.AFTER:
            return moment > target
        if flt.operator == DateOperator.BETWEEN:
            if flt.range_end is None or isinstance(flt.range_end, (int, float)):
                return False
            end = to_datetime(flt.range_end)
            if end is None:
                return False
            return target <= moment <= end
        return False

    def evaluate_list_filter(self, value: Any, flt: ListFilter) -> bool:
        text = to_string(value)
        contains = any(text == to_string(candidate) for candidate in flt.values)

        if flt.operator == ListOperator.IN:
            return contains
        if flt.operator == ListOperator.NOT_IN:
            return not contains
        return False

    def evaluate_range_filter(self, value: Any, flt: RangeFilter) -> bool:
        number = to_float(value)
        if number is None:
            return False

        if flt.min is not None:
            if flt.include_min and number < flt.min:
                return False
            if not flt.include_min and number <= flt.min:
                return False
        if flt.max is not None:
            if flt.include_max and number > flt.max:
                return False
            if not flt.include_max and number >= flt.max:
                return False
        return True

    def evaluate_boolean_filter(self, value: Any, flt: BooleanFilter) -> bool:
        return to_bool(value) == bool(flt.value)
