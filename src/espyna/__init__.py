"""Espyna - multi-tenant business backend.

Generic use cases over domain entities, a list data processor for
filtering, searching, sorting and paginating records, and swappable
repository providers selected through explicit registries.
"""

from .__version__ import __version__
from .composition import Container
from .config import EspynaSettings, get_settings, setup_logging
from .core.exceptions import EspynaError, UseCaseError
from .core.shared import RequestContext
from .domain import DomainCatalog, EntityDefinition, Record, default_catalog
from .features.listdata import ListDataProcessor

__all__ = [
    "__version__",
    "Container",
    "EspynaSettings",
    "get_settings",
    "setup_logging",
    "EspynaError",
    "UseCaseError",
    "RequestContext",
    "DomainCatalog",
    "EntityDefinition",
    "Record",
    "default_catalog",
    "ListDataProcessor",
]
