"""ID service adapters."""

from ....utils.uuid import generate_uuid_v7


class UUIDv7IDService:
    """Time-ordered UUIDv7 ids, optionally prefixed."""

    def __init__(self, prefix: str = ""):
        self.prefix = prefix

    def generate_id(self) -> str:
        uid = generate_uuid_v7()
        return f"{self.prefix}-{uid}" if self.prefix else uid


class NoOpIDService:
    """Generates nothing so callers fall back to their own id scheme."""

    def generate_id(self) -> str:
        return ""
