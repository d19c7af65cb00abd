"""Application container wiring providers, repositories, services and use cases."""

import logging
from typing import Dict, Optional

from ..config.logging_config import setup_logging
from ..config.settings import EspynaSettings, get_settings
from ..core.exceptions import ConfigurationError
from ..domain.catalog import DomainCatalog, default_catalog
from ..features.authorization import AllowAllAuthorizationService
from ..features.ids import UUIDv7IDService
from ..features.listdata import ListDataProcessor
from ..features.registry import (
    DatabaseProvider,
    FactoryRegistry,
    InstanceRegistry,
    RepositoryFactoryRegistry,
)
from ..features.transactions import InMemoryTransactionService
from ..features.translation import NoOpTranslationService
from ..infrastructure.database.mock import register_mock_provider, register_mock_repositories
from ..usecases import EntityRepository, UseCaseFactory, UseCaseServices

logger = logging.getLogger(__name__)


class Container:
    """Everything a running espyna backend needs, built once at startup.

    Build it with ``await Container.from_settings()``; close it on shutdown.
    """

    def __init__(
        self,
        settings: EspynaSettings,
        catalog: DomainCatalog,
        provider_factories: FactoryRegistry[DatabaseProvider],
        repository_factories: RepositoryFactoryRegistry,
        providers: InstanceRegistry[DatabaseProvider],
        repositories: Dict[str, EntityRepository],
        services: UseCaseServices,
        usecases: UseCaseFactory,
    ):
        self.settings = settings
        self.catalog = catalog
        self.provider_factories = provider_factories
        self.repository_factories = repository_factories
        self.providers = providers
        self.repositories = repositories
        self.services = services
        self.usecases = usecases

    @classmethod
    async def from_settings(
        cls,
        settings: Optional[EspynaSettings] = None,
        services: Optional[UseCaseServices] = None,
        catalog: Optional[DomainCatalog] = None,
        configure_logging: bool = True,
    ) -> "Container":
        settings = settings or get_settings()
        catalog = catalog or default_catalog()
        if configure_logging:
            setup_logging(
                verbosity=settings.log_verbosity,
                log_format=settings.log_format,
                level=settings.log_level,
            )

        provider_factories: FactoryRegistry[DatabaseProvider] = FactoryRegistry("database")
        repository_factories = RepositoryFactoryRegistry()
        register_mock_provider(provider_factories)
        register_mock_repositories(repository_factories, catalog, settings.database_table_prefix)

        provider_name = settings.database_provider
        if not provider_factories.has_factory(provider_name):
            raise ConfigurationError(
                f"Unknown database provider '{provider_name}'",
                details={"provider": provider_name, "available": provider_factories.list_factories()},
            )

        provider = provider_factories.create_from_config(provider_name, settings.get_database_config())
        providers: InstanceRegistry[DatabaseProvider] = InstanceRegistry("database")
        providers.register(provider)
        providers.set_active(provider_name)
        connection = await provider.connect()

        table_config = repository_factories.build_table_config(provider_name)
        repositories: Dict[str, EntityRepository] = {}
        for definition in catalog:
            if not repository_factories.has(provider_name, definition.name):
                logger.warning(f"Provider '{provider_name}' has no repository for '{definition.name}'")
                continue
            repositories[definition.name] = repository_factories.create_repository(
                provider_name,
                definition.name,
                connection,
                table_config.get_table_name(definition.name),
            )

        services = services or UseCaseServices(
            authorization=AllowAllAuthorizationService(),
            transaction=InMemoryTransactionService(max_retries=settings.transaction_max_retries),
            translation=NoOpTranslationService(),
            ids=UUIDv7IDService(),
        )
        usecases = UseCaseFactory(
            catalog,
            repositories,
            services,
            processor=ListDataProcessor(default_page_size=settings.default_page_size),
            max_page_size=settings.max_page_size,
            max_search_results=settings.max_search_results,
        )

        logger.info(
            f"Container ready: provider '{provider_name}', business type '{settings.business_type}', "
            f"{len(repositories)} repositories"
        )
        return cls(
            settings=settings,
            catalog=catalog,
            provider_factories=provider_factories,
            repository_factories=repository_factories,
            providers=providers,
            repositories=repositories,
            services=services,
            usecases=usecases,
        )

    def repository(self, entity: str) -> EntityRepository:
        try:
            return self.repositories[entity]
        except KeyError:
            raise ConfigurationError(f"No repository for entity '{entity}'", details={"entity": entity}) from None

    async def health_check(self) -> Dict[str, bool]:
        return await self.providers.health_check()

    async def close(self) -> None:
        errors = await self.providers.close()
        for error in errors:
            logger.error(f"Error while closing container: {error}")
        logger.info("Container closed")
