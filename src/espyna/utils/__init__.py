"""Utility helpers for espyna."""

from .numbers import to_number
from .time import format_rfc3339, now_millis, now_nanos, parse_datetime, utc_now
from .uuid import extract_timestamp_from_uuid_v7, generate_uuid_v7, is_uuid_v7

__all__ = [
    "to_number",
    "format_rfc3339",
    "now_millis",
    "now_nanos",
    "parse_datetime",
    "utc_now",
    "extract_timestamp_from_uuid_v7",
    "generate_uuid_v7",
    "is_uuid_v7",
]
