"""Authorization from the permission set carried by the request context."""

import logging
from typing import FrozenSet, Iterable, Optional

from ....core.shared.context import RequestContext

logger = logging.getLogger(__name__)

WILDCARD = "*"


class PermissionSetAuthorizationService:
    """Grants a permission when the caller holds it, its entity wildcard or ``*``.

    ``"workspace:*"`` covers every workspace action. Permissions given to the
    constructor apply to every caller in addition to the context's own.
    """

    def __init__(self, default_permissions: Optional[Iterable[str]] = None):
        self.default_permissions: FrozenSet[str] = frozenset(default_permissions or ())

    async def is_authorized(self, context: RequestContext, permission: str) -> bool:
        granted = context.permissions | self.default_permissions
        if WILDCARD in granted or permission in granted:
            return True

        entity = permission.split(":", 1)[0]
        if f"{entity}:{WILDCARD}" in granted:
            return True

        logger.debug(f"Denied '{permission}' for user {context.user_id}")
        return False
