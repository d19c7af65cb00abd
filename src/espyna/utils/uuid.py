"""UUID utilities for espyna."""

import time
import uuid
from datetime import datetime, timezone
from typing import Optional


def generate_uuid_v7() -> str:
    """
    Generate a UUIDv7 with time-based ordering.

    The first 48 bits hold the Unix timestamp in milliseconds, so ids sort in
    creation order.

    Returns:
        String representation of UUIDv7
    """
    timestamp_ms = int(time.time() * 1000)
    timestamp_bytes = timestamp_ms.to_bytes(6, byteorder="big")
    random_bytes = uuid.uuid4().bytes[6:]
    uuid_bytes = timestamp_bytes + random_bytes

    # Version 7 in the high nibble of byte 6
    uuid_bytes = uuid_bytes[:6] + bytes([(uuid_bytes[6] & 0x0F) | 0x70]) + uuid_bytes[7:]
    # RFC 4122 variant in byte 8
    uuid_bytes = uuid_bytes[:8] + bytes([(uuid_bytes[8] & 0x3F) | 0x80]) + uuid_bytes[9:]

    return str(uuid.UUID(bytes=uuid_bytes))


def extract_timestamp_from_uuid_v7(uuid_str: str) -> Optional[datetime]:
    """Extract the creation timestamp from a UUIDv7, None if not a UUIDv7."""
    try:
        uuid_obj = uuid.UUID(uuid_str)
    except (ValueError, TypeError, AttributeError):
        return None

    if uuid_obj.version != 7:
        return None

    timestamp_ms = int.from_bytes(uuid_obj.bytes[:6], byteorder="big")
    return datetime.fromtimestamp(timestamp_ms / 1000.0, tz=timezone.utc)


def is_uuid_v7(uuid_str: str) -> bool:
    try:
        return uuid.UUID(uuid_str).version == 7
    except (ValueError, TypeError, AttributeError):
        return False
