"""Root of the espyna error hierarchy.

Domain, database, transaction and use case errors all derive from
``EspynaError``. The class-level ``http_status`` lets the composition layer
turn any of them into a status code without knowing which layer raised it.
"""

from typing import Any, Dict, Optional


class EspynaError(Exception):
    """Error raised by espyna code.

    ``error_code`` is a stable identifier (class name unless given) and
    ``details`` holds machine-readable context such as entity ids.
    """

    http_status: int = 500

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def get_http_status_code(exception: Exception) -> int:
    """Status carried by an EspynaError; foreign exceptions are 500."""
    if isinstance(exception, EspynaError):
        return getattr(exception, "http_status", 500)
    return 500


def create_error_response(exception: EspynaError) -> Dict[str, Any]:
    """Error envelope returned to callers of the use cases.

    A failed ``workspace`` create, for example, produces
    ``{"error": {"code": "workspace.validation.name_required", ...}}``.
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
