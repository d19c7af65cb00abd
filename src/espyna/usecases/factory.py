"""Builds the full set of use cases for every entity."""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional

from ..config.constants import MAX_PAGE_SIZE, MAX_SEARCH_RESULTS
from ..domain.base import EntityDefinition
from ..features.listdata import ListDataProcessor
from .base import UseCaseRepositories, UseCaseServices
from .create import CreateEntity
from .delete import DeleteEntity
from .list import ListEntities
from .page_data import GetEntityItemPageData, GetEntityListPageData
from .ports import EntityRepository
from .read import ReadEntity
from .update import UpdateEntity

logger = logging.getLogger(__name__)


@dataclass
class EntityUseCases:
    """Every operation available for one entity."""

    definition: EntityDefinition
    create: CreateEntity
    read: ReadEntity
    update: UpdateEntity
    delete: DeleteEntity
    list: ListEntities
    get_list_page_data: GetEntityListPageData
    get_item_page_data: GetEntityItemPageData


class UseCaseFactory:
    """Creates use cases from a repository per entity and shared services."""

    def __init__(
        self,
        definitions: Iterable[EntityDefinition],
        repositories: Mapping[str, EntityRepository],
        services: Optional[UseCaseServices] = None,
        processor: Optional[ListDataProcessor] = None,
        max_page_size: int = MAX_PAGE_SIZE,
        max_search_results: int = MAX_SEARCH_RESULTS,
    ):
        self.services = services or UseCaseServices()
        self.processor = processor or ListDataProcessor()
        self.max_page_size = max_page_size
        self.max_search_results = max_search_results
        self._use_cases: Dict[str, EntityUseCases] = {}

        for definition in definitions:
            repository = repositories.get(definition.name)
            if repository is None:
                logger.warning(f"No repository for entity '{definition.name}', skipping its use cases")
                continue
            self._use_cases[definition.name] = self.build(definition, repository)

    def build(self, definition: EntityDefinition, repository: EntityRepository) -> EntityUseCases:
        repositories = UseCaseRepositories(primary=repository)
        return EntityUseCases(
            definition=definition,
            create=CreateEntity(definition, repositories, self.services),
            read=ReadEntity(definition, repositories, self.services),
            update=UpdateEntity(definition, repositories, self.services),
            delete=DeleteEntity(definition, repositories, self.services),
            list=ListEntities(definition, repositories, self.services),
            get_list_page_data=GetEntityListPageData(
                definition,
                repositories,
                self.services,
                processor=self.processor,
                max_page_size=self.max_page_size,
                max_search_results=self.max_search_results,
            ),
            get_item_page_data=GetEntityItemPageData(definition, repositories, self.services),
        )

    def for_entity(self, name: str) -> EntityUseCases:
        try:
            return self._use_cases[name]
        except KeyError:
            raise KeyError(f"No use cases for entity '{name}'") from None

    def entities(self) -> List[str]:
        return sorted(self._use_cases)

    def __contains__(self, name: object) -> bool:
        return name in self._use_cases
