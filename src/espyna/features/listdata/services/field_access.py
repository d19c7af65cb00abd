"""Field access and value coercion shared by filtering, sorting and search.

Items may be mappings, dataclasses or plain objects. Field paths use dots to
reach nested values (``"address.city"``) and integer segments to index into
sequences (``"tags.0"``).
"""

import dataclasses
from datetime import datetime
from typing import Any, List, Mapping, Optional, Sequence

from ....config.constants import SEARCHABLE_FIELD_HINTS, TRUTHY_STRINGS
from ....utils.numbers import to_number
from ....utils.time import parse_datetime


def get_field_value(item: Any, field_path: str) -> Any:
    """Resolve ``field_path`` against ``item``; None when any segment is missing."""
    if item is None or not field_path:
        return None

    value = item
    for part in field_path.split("."):
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(part)
        elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            try:
                value = value[int(part)]
            except (ValueError, IndexError):
                return None
        else:
            value = getattr(value, part, None)
            if callable(value):
                return None
    return value


def item_fields(item: Any) -> List[str]:
    """Top-level field names of an item in declaration order."""
    if isinstance(item, Mapping):
        return [str(key) for key in item.keys()]
    if dataclasses.is_dataclass(item) and not isinstance(item, type):
        return [f.name for f in dataclasses.fields(item)]
    if hasattr(item, "__dict__"):
        return [name for name in vars(item) if not name.startswith("_")]
    return []


def default_search_fields(item: Any) -> List[str]:
    """String-valued fields plus fields whose name suggests text content."""
    fields = []
    for name in item_fields(item):
        lowered = name.lower()
        value = get_field_value(item, name)
        if isinstance(value, str) or any(hint in lowered for hint in SEARCHABLE_FIELD_HINTS):
            fields.append(name)
    return fields


def to_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_float(value: Any) -> Optional[float]:
    return to_number(value)


def to_datetime(value: Any) -> Optional[datetime]:
    return parse_datetime(value)


def to_bool(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY_STRINGS
    if isinstance(value, (int, float)):
        return value != 0
    return False
