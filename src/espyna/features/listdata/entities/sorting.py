"""Sort request entities."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class NullOrder(str, Enum):
    """Placement of missing values.

    UNSPECIFIED places nulls last when ascending and first when descending.
    """
    UNSPECIFIED = "UNSPECIFIED"
    NULLS_FIRST = "NULLS_FIRST"
    NULLS_LAST = "NULLS_LAST"


@dataclass(frozen=True)
class SortField:
    field: str
    direction: SortDirection = SortDirection.ASC
    null_order: NullOrder = NullOrder.UNSPECIFIED

    @property
    def nulls_first(self) -> bool:
        if self.null_order == NullOrder.NULLS_FIRST:
            return True
        if self.null_order == NullOrder.NULLS_LAST:
            return False
        return self.direction == SortDirection.DESC


@dataclass(frozen=True)
class SortRequest:
    fields: List[SortField] = field(default_factory=list)

    @classmethod
    def by(cls, field_name: str, direction: SortDirection = SortDirection.ASC) -> "SortRequest":
        return cls([SortField(field_name, direction)])
