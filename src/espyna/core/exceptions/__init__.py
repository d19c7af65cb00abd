"""Exception hierarchy for espyna."""

from .base import EspynaError, create_error_response, get_http_status_code
from .domain import (
    AuthorizationError,
    ConfigurationError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
    InvalidCursorError,
    ListProcessingError,
    PermissionDeniedError,
    ProviderNotEnabledError,
    ProviderNotFoundError,
    RegistryError,
    RepositoryFactoryNotFoundError,
    UseCaseError,
    ValidationError,
)
from .database import (
    RETRYABLE_CODES,
    DatabaseError,
    TransactionError,
    TransactionErrorCode,
    TransactionErrorHandler,
    get_transaction_error,
    is_retryable_code,
    is_retryable_error,
    wrap_transaction_error,
)

__all__ = [
    "EspynaError",
    "create_error_response",
    "get_http_status_code",
    "AuthorizationError",
    "ConfigurationError",
    "EntityAlreadyExistsError",
    "EntityNotFoundError",
    "InvalidCursorError",
    "ListProcessingError",
    "PermissionDeniedError",
    "ProviderNotEnabledError",
    "ProviderNotFoundError",
    "RegistryError",
    "RepositoryFactoryNotFoundError",
    "UseCaseError",
    "ValidationError",
    "RETRYABLE_CODES",
    "DatabaseError",
    "TransactionError",
    "TransactionErrorCode",
    "TransactionErrorHandler",
    "get_transaction_error",
    "is_retryable_code",
    "is_retryable_error",
    "wrap_transaction_error",
]
