"""Domain, configuration and registry exceptions."""

from typing import Any, Dict, Iterable, Optional

from .base import EspynaError


class ConfigurationError(EspynaError):
    """Raised when configuration is missing or invalid."""


class ValidationError(EspynaError):
    """Raised when input fails validation."""

    http_status = 400


class AuthorizationError(EspynaError):
    """Raised when a caller may not perform an operation."""

    http_status = 403


class PermissionDeniedError(AuthorizationError):
    """Raised when a specific permission is missing."""

    def __init__(self, permission: str, user_id: Optional[str] = None):
        self.permission = permission
        self.user_id = user_id
        super().__init__(
            f"Permission '{permission}' denied",
            details={"permission": permission, "user_id": user_id},
        )


class EntityNotFoundError(EspynaError):
    """Raised when an entity cannot be found by id."""

    http_status = 404

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(
            f"{entity} with ID '{entity_id}' not found",
            details={"entity": entity, "id": entity_id},
        )


class EntityAlreadyExistsError(EspynaError):
    """Raised when creating an entity whose id is taken."""

    http_status = 409

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(
            f"{entity} with ID '{entity_id}' already exists",
            details={"entity": entity, "id": entity_id},
        )


class ListProcessingError(EspynaError):
    """Raised when a list request cannot be processed."""

    http_status = 400


class InvalidCursorError(ListProcessingError):
    """Raised when a pagination cursor cannot be decoded."""

    def __init__(self, token: str):
        self.token = token
        super().__init__("Invalid cursor format", details={"cursor": token})


class RegistryError(EspynaError):
    """Base class for registry errors."""


class ProviderNotFoundError(RegistryError):
    """Raised when a provider or instance name is not registered."""

    http_status = 404

    def __init__(self, name: str, available: Iterable[str] = ()):
        self.name = name
        self.available = sorted(available)
        super().__init__(
            f"Provider '{name}' not found (available: {', '.join(self.available) or 'none'})",
            details={"name": name, "available": self.available},
        )


class ProviderNotEnabledError(RegistryError):
    """Raised when activating a provider that is disabled."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Provider '{name}' is not enabled", details={"name": name})


class RepositoryFactoryNotFoundError(RegistryError):
    """Raised when no repository factory exists for a provider and entity."""

    http_status = 404

    def __init__(self, provider: str, entity: str, available: Iterable[str] = ()):
        self.provider = provider
        self.entity = entity
        self.available = sorted(available)
        super().__init__(
            f"No repository factory for entity '{entity}' with provider '{provider}' "
            f"(available entities: {', '.join(self.available) or 'none'})",
            details={"provider": provider, "entity": entity, "available": self.available},
        )


class UseCaseError(EspynaError):
    """Raised by use cases with an already translated message.

    ``key`` keeps the untranslated message key so callers and tests can match
    on it regardless of locale.
    """

    def __init__(
        self,
        message: str,
        key: str,
        details: Optional[Dict[str, Any]] = None,
        http_status: int = 400,
    ):
        super().__init__(message, error_code=key, details=details)
        self.key = key
        self.http_status = http_status
