"""Catalog of every entity definition."""

from typing import Dict, Iterable, List, Optional

from . import entity, event, payment, product, subscription, workflow
from .base import EntityDefinition


class DomainCatalog:
    """Lookup of entity definitions by name."""

    def __init__(self, definitions: Iterable[EntityDefinition]):
        self._definitions: Dict[str, EntityDefinition] = {}
        for definition in definitions:
            if definition.name in self._definitions:
                raise ValueError(f"Duplicate entity definition '{definition.name}'")
            self._definitions[definition.name] = definition

    def get(self, name: str) -> EntityDefinition:
        try:
            return self._definitions[name]
        except KeyError:
            raise KeyError(f"Unknown entity '{name}'") from None

    def find(self, name: str) -> Optional[EntityDefinition]:
        return self._definitions.get(name)

    def names(self) -> List[str]:
        return list(self._definitions)

    def by_domain(self, domain: str) -> List[EntityDefinition]:
        return [d for d in self._definitions.values() if d.domain == domain]

    def __iter__(self):
        return iter(self._definitions.values())

    def __contains__(self, name: str) -> bool:
        return name in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)


ALL_DEFINITIONS = (
    entity.DEFINITIONS
    + payment.DEFINITIONS
    + product.DEFINITIONS
    + subscription.DEFINITIONS
    + workflow.DEFINITIONS
    + event.DEFINITIONS
)


def default_catalog() -> DomainCatalog:
    return DomainCatalog(ALL_DEFINITIONS)
