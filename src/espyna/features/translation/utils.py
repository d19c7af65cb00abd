"""Message translation helper used by use cases."""

from typing import Any, Optional

from ...core.shared.context import RequestContext
from .entities.protocols import TranslationService
from .services.catalog import render


def translate(
    service: Optional[TranslationService],
    context: Optional[RequestContext],
    key: str,
    fallback: str = "",
    **params: Any,
) -> str:
    """Translated message for ``key``; the fallback, then the key itself, otherwise."""
    message = None
    if service is not None:
        locale = context.locale if context is not None else "en"
        message = service.get_message(locale, key, **params)
    if message:
        return message
    if fallback:
        return render(fallback, params)
    return key
