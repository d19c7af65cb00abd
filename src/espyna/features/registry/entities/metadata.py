"""Provider metadata entity."""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


class ProviderStatus(str, Enum):
    REGISTERED = "registered"
    ACTIVE = "active"
    INACTIVE = "inactive"
    FAILED = "failed"


class ProviderType(str, Enum):
    DATABASE = "database"
    AUTH = "auth"
    STORAGE = "storage"
    EMAIL = "email"
    PAYMENT = "payment"


@dataclass(frozen=True)
class ProviderMetadata:
    """Descriptive information about a registered provider."""

    name: str
    provider_type: ProviderType
    version: str = "1.0.0"
    description: str = ""
    tags: List[str] = field(default_factory=list)
    config: Dict[str, Any] = field(default_factory=dict)
    status: ProviderStatus = ProviderStatus.REGISTERED
    last_error: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Provider name cannot be empty")

    def with_status(self, status: ProviderStatus, error: Optional[str] = None) -> "ProviderMetadata":
        return replace(
            self,
            status=status,
            last_error=error,
            updated_at=datetime.now(timezone.utc),
        )
