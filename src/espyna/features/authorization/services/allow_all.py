"""Authorization service that grants everything."""

from ....core.shared.context import RequestContext


class AllowAllAuthorizationService:
    """Used by tests and single-user deployments."""

    async def is_authorized(self, context: RequestContext, permission: str) -> bool:
        return True
