"""Request context entity.

The context travels explicitly through every use case and carries the caller
identity, tenant scope, locale and the ambient transaction, if any.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Dict, FrozenSet, Optional

from ...config.constants import DEFAULT_BUSINESS_TYPE
from ...utils.uuid import generate_uuid_v7


@dataclass(frozen=True)
class RequestContext:
    """Request-scoped information passed to use cases and services."""

    request_id: str = field(default_factory=generate_uuid_v7)
    user_id: Optional[str] = None
    workspace_id: Optional[str] = None
    business_type: str = DEFAULT_BUSINESS_TYPE
    locale: str = "en"
    permissions: FrozenSet[str] = frozenset()
    transaction: Optional[Any] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if not isinstance(self.permissions, frozenset):
            object.__setattr__(self, "permissions", frozenset(self.permissions))

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    @property
    def in_transaction(self) -> bool:
        return self.transaction is not None

    def has_permission(self, permission: str) -> bool:
        return permission in self.permissions

    def with_transaction(self, transaction: Any) -> "RequestContext":
        """Copy of this context bound to ``transaction``."""
        return replace(self, transaction=transaction)

    def with_permissions(self, *permissions: str) -> "RequestContext":
        return replace(self, permissions=self.permissions | frozenset(permissions))
