"""In-memory message catalog keyed by locale and dotted path."""

import logging
import string
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)


class _SafeDict(dict):
    def __missing__(self, key):
        return "{" + key + "}"


def lookup(catalog: Mapping[str, Any], key: str) -> Optional[str]:
    """Walk ``key`` through nested mappings; flat dotted keys also work."""
    if key in catalog and isinstance(catalog[key], str):
        return catalog[key]

    node: Any = catalog
    for part in key.split("."):
        if not isinstance(node, Mapping) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


def render(template: str, params: Mapping[str, Any]) -> str:
    """Substitute ``{name}`` placeholders, leaving unknown ones untouched."""
    if not params:
        return template
    return string.Formatter().vformat(template, (), _SafeDict(params))


class CatalogTranslationService:
    """Looks up messages for a locale, falling back to the default locale."""

    def __init__(self, catalogs: Optional[Dict[str, Mapping[str, Any]]] = None, default_locale: str = "en"):
        self.catalogs: Dict[str, Mapping[str, Any]] = dict(catalogs or {})
        self.default_locale = default_locale

    def add_catalog(self, locale: str, catalog: Mapping[str, Any]) -> None:
        self.catalogs[locale] = catalog

    def get_message(self, locale: str, key: str, **params: Any) -> Optional[str]:
        for candidate in (locale, locale.split("-", 1)[0], self.default_locale):
            catalog = self.catalogs.get(candidate)
            if catalog is None:
                continue
            template = lookup(catalog, key)
            if template is not None:
                return render(template, params)

        logger.debug(f"No translation for '{key}' in locale '{locale}'")
        return None
