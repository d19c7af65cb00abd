from .catalog import CatalogTranslationService
from .noop import NoOpTranslationService

__all__ = ["CatalogTranslationService", "NoOpTranslationService"]
