"""Authorization port and simple adapters."""

from .entities import AuthorizationService, permission_for
from .services import AllowAllAuthorizationService, PermissionSetAuthorizationService

__all__ = [
    "AuthorizationService",
    "permission_for",
    "AllowAllAuthorizationService",
    "PermissionSetAuthorizationService",
]
