"""Translation port, adapters and the ``translate`` helper."""

from .entities import TranslationService
from .services import CatalogTranslationService, NoOpTranslationService
from .utils import translate

__all__ = [
    "TranslationService",
    "CatalogTranslationService",
    "NoOpTranslationService",
    "translate",
]
