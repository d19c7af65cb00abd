"""Shared machinery for entity use cases.

Every use case runs the same pipeline: validate the request, authorize the
caller, then call the repository, inside a transaction when the transaction
service supports one. Failures surface as UseCaseError carrying a message key
such as ``"payment.validation.id_required"`` and the translated message.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.exceptions import (
    EntityAlreadyExistsError,
    EntityNotFoundError,
    UseCaseError,
)
from ..core.shared.context import RequestContext
from ..domain.base import EntityDefinition, Record
from ..features.authorization import AuthorizationService
from ..features.ids import IDService
from ..features.transactions import TransactionService
from ..features.translation import TranslationService, translate
from .ports import EntityRepository

logger = logging.getLogger(__name__)


@dataclass
class UseCaseRepositories:
    primary: EntityRepository


@dataclass
class UseCaseServices:
    """Cross-cutting services; any of them may be absent."""

    authorization: Optional[AuthorizationService] = None
    transaction: Optional[TransactionService] = None
    translation: Optional[TranslationService] = None
    ids: Optional[IDService] = None


class EntityUseCase:
    """Base class for one (entity, operation) pair.

    Subclasses set ``action`` (the permission action) and ``operation`` (used
    in ``"<entity>.errors.<operation>_failed"``) and implement
    ``validate`` and ``execute_core``.
    """

    action = ""
    operation = ""

    def __init__(
        self,
        definition: EntityDefinition,
        repositories: UseCaseRepositories,
        services: Optional[UseCaseServices] = None,
    ):
        self.definition = definition
        self.repositories = repositories
        self.services = services or UseCaseServices()

    @property
    def repository(self) -> EntityRepository:
        return self.repositories.primary

    async def execute(self, request: Any, context: Optional[RequestContext] = None) -> Any:
        context = context or RequestContext()

        problem = self.validate(request, context)
        if problem:
            raise self.validation_error(context, problem)

        await self.authorize(context)

        transaction_service = self.services.transaction
        if transaction_service is not None and transaction_service.supports_transactions():
            return await transaction_service.execute_in_transaction(
                context, lambda tx_context: self._execute_guarded(request, tx_context)
            )
        return await self._execute_guarded(request, context)

    def validate(self, request: Any, context: RequestContext) -> Optional[str]:
        """Key suffix of the first problem in ``request``, or None."""
        return None

    async def execute_core(self, request: Any, context: RequestContext) -> Any:
        raise NotImplementedError

    async def _execute_guarded(self, request: Any, context: RequestContext) -> Any:
        try:
            return await self.execute_core(request, context)
        except UseCaseError:
            raise
        except EntityNotFoundError as e:
            raise self.error(context, "not_found", http_status=404, details=e.details) from e
        except EntityAlreadyExistsError as e:
            raise self.error(context, "already_exists", http_status=409, details=e.details) from e
        except Exception as e:
            logger.error(f"{self.definition.name} {self.operation} failed: {e}")
            raise self.error(
                context,
                f"{self.operation}_failed",
                http_status=500,
                details={"error": str(e)},
            ) from e

    async def authorize(self, context: RequestContext) -> None:
        authorization = self.services.authorization
        if authorization is None or not self.action:
            return

        permission = self.definition.permission(self.action)
        try:
            allowed = await authorization.is_authorized(context, permission)
        except Exception as e:
            logger.error(f"Authorization check for '{permission}' failed: {e}")
            raise self.error(
                context,
                "authorization_check_failed",
                http_status=500,
                details={"permission": permission},
            ) from e

        if not allowed:
            raise self.error(
                context,
                "authorization_failed",
                http_status=403,
                details={"permission": permission, "user_id": context.user_id},
            )

    def can_read_inactive(self, context: RequestContext) -> bool:
        granted = context.permissions
        return (
            self.definition.permission("read_inactive") in granted
            or self.definition.permission("*") in granted
            or "*" in granted
        )

    def is_visible(self, record: Record, context: RequestContext, include_inactive: bool) -> bool:
        """Inactive records and other workspaces' records are hidden."""
        if not record.active and not include_inactive:
            return False
        if self.definition.workspace_scoped and context.workspace_id:
            return getattr(record, "workspace_id", None) == context.workspace_id
        return True

    def message(self, context: RequestContext, key: str, **params: Any) -> str:
        fallback = key.rsplit(".", 1)[-1].replace("_", " ")
        return translate(
            self.services.translation,
            context,
            key,
            fallback=f"{self.definition.name} {fallback}",
            **params,
        )

    def error(
        self,
        context: RequestContext,
        suffix: str,
        category: str = "errors",
        http_status: int = 400,
        details: Optional[Dict[str, Any]] = None,
    ) -> UseCaseError:
        key = self.definition.message_key(category, suffix)
        return UseCaseError(self.message(context, key), key, details=details, http_status=http_status)

    def validation_error(self, context: RequestContext, suffix: str) -> UseCaseError:
        return self.error(context, suffix, category="validation")
