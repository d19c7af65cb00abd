"""Translation service with no catalog."""

from typing import Any, Optional


class NoOpTranslationService:
    def get_message(self, locale: str, key: str, **params: Any) -> Optional[str]:
        return None
