"""Filter request entities.

A ``FilterRequest`` holds typed filters joined by AND or OR logic. Each
``TypedFilter`` names a (possibly dotted) field and carries exactly one filter
value object.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional, Sequence, Union


class FilterLogic(str, Enum):
    AND = "AND"
    OR = "OR"


class StringOperator(str, Enum):
    EQUALS = "EQUALS"
    NOT_EQUALS = "NOT_EQUALS"
    CONTAINS = "CONTAINS"
    STARTS_WITH = "STARTS_WITH"
    ENDS_WITH = "ENDS_WITH"
    REGEX = "REGEX"


class NumberOperator(str, Enum):
    EQUALS = "EQUALS"
    NOT_EQUALS = "NOT_EQUALS"
    GREATER_THAN = "GREATER_THAN"
    GREATER_THAN_OR_EQUAL = "GREATER_THAN_OR_EQUAL"
    LESS_THAN = "LESS_THAN"
    LESS_THAN_OR_EQUAL = "LESS_THAN_OR_EQUAL"


class DateOperator(str, Enum):
    EQUALS = "EQUALS"
    BEFORE = "BEFORE"
    AFTER = "AFTER"
    BETWEEN = "BETWEEN"


class ListOperator(str, Enum):
    IN = "IN"
    NOT_IN = "NOT_IN"


@dataclass(frozen=True)
class StringFilter:
    value: str
    operator: StringOperator = StringOperator.EQUALS
    case_sensitive: bool = False


@dataclass(frozen=True)
class NumberFilter:
    value: float
    operator: NumberOperator = NumberOperator.EQUALS


@dataclass(frozen=True)
class DateFilter:
    """Date comparison; string values are RFC3339."""

    value: Union[str, datetime]
    operator: DateOperator = DateOperator.EQUALS
    range_end: Optional[Union[str, datetime]] = None


@dataclass(frozen=True)
class ListFilter:
    values: Sequence[Any] = ()
    operator: ListOperator = ListOperator.IN


@dataclass(frozen=True)
class RangeFilter:
    """Numeric range; a missing bound is unbounded on that side."""

    min: Optional[float] = None
    max: Optional[float] = None
    include_min: bool = True
    include_max: bool = True


@dataclass(frozen=True)
class BooleanFilter:
    value: bool


FilterValue = Union[StringFilter, NumberFilter, DateFilter, ListFilter, RangeFilter, BooleanFilter]


@dataclass(frozen=True)
class TypedFilter:
    field: str
    filter: Any

    @classmethod
    def string(cls, field: str, value: str, operator: StringOperator = StringOperator.EQUALS,
               case_sensitive: bool = False) -> "TypedFilter":
        return cls(field, StringFilter(value, operator, case_sensitive))

    @classmethod
    def number(cls, field: str, value: float,
               operator: NumberOperator = NumberOperator.EQUALS) -> "TypedFilter":
        return cls(field, NumberFilter(value, operator))

    @classmethod
    def date(cls, field: str, value: Union[str, datetime], operator: DateOperator = DateOperator.EQUALS,
             range_end: Optional[Union[str, datetime]] = None) -> "TypedFilter":
        return cls(field, DateFilter(value, operator, range_end))

    @classmethod
    def in_list(cls, field: str, values: Sequence[Any],
                operator: ListOperator = ListOperator.IN) -> "TypedFilter":
        return cls(field, ListFilter(tuple(values), operator))

    @classmethod
    def range(cls, field: str, min: Optional[float] = None, max: Optional[float] = None,
              include_min: bool = True, include_max: bool = True) -> "TypedFilter":
        return cls(field, RangeFilter(min, max, include_min, include_max))

    @classmethod
    def boolean(cls, field: str, value: bool) -> "TypedFilter":
        return cls(field, BooleanFilter(value))


@dataclass(frozen=True)
class FilterRequest:
    filters: List[TypedFilter] = field(default_factory=list)
    logic: FilterLogic = FilterLogic.AND

    @property
    def is_empty(self) -> bool:
        return not self.filters
