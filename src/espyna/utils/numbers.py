"""Numeric coercion for values that arrive from mappings or query strings."""

from typing import Any, Optional


def to_number(value: Any) -> Optional[float]:
    """Numeric value of ``value`` or None; booleans are not numbers."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None
