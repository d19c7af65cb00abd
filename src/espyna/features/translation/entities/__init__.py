from .protocols import TranslationService

__all__ = ["TranslationService"]
