"""Translation port."""

from abc import abstractmethod
from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class TranslationService(Protocol):
    """Resolves dotted message keys for a locale."""

    @abstractmethod
    def get_message(self, locale: str, key: str, **params: Any) -> Optional[str]:
        """Translated message, or None when the key is unknown."""
        ...
