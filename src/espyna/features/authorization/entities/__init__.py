from .protocols import AuthorizationService, permission_for

__all__ = ["AuthorizationService", "permission_for"]
