from .allow_all import AllowAllAuthorizationService
from .permission_set import PermissionSetAuthorizationService

__all__ = ["AllowAllAuthorizationService", "PermissionSetAuthorizationService"]
