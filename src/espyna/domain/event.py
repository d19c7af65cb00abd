"""Event domain."""

from dataclasses import dataclass
from typing import Optional

from ..utils.numbers import to_number
from .base import EntityDefinition, Record, numeric_problem


@dataclass
class Event(Record):
    name: str = ""
    description: str = ""
    start_date_time_utc: Optional[int] = None
    end_date_time_utc: Optional[int] = None
    timezone: str = "UTC"
    client_id: str = ""


def validate_event_window(record: Event) -> Optional[str]:
    problem = numeric_problem(record, "start_date_time_utc", "end_date_time_utc")
    if problem:
        return problem
    start, end = to_number(record.start_date_time_utc), to_number(record.end_date_time_utc)
    if start is not None and end is not None and end <= start:
        return "end_before_start"
    return None


EVENT = EntityDefinition(
    name="event",
    domain="event",
    model=Event,
    required_fields=("timezone",),
    searchable_fields=("name", "description"),
    validators=(validate_event_window,),
)

DEFINITIONS = (EVENT,)
