"""Explicit registration of the mock provider and its repositories."""

from typing import Iterable

from ....config.constants import ProviderName
from ....domain.base import EntityDefinition
from ....features.registry import DatabaseTableConfig, FactoryRegistry, RepositoryFactoryRegistry
from .provider import MockConnection, MockDatabaseProvider, build_mock_provider_from_env, transform_mock_config
from .repository import MockRepository


def _repository_factory(definition: EntityDefinition):
    def create(connection: MockConnection, table_name: str) -> MockRepository:
        return MockRepository(
            definition,
            table_name=table_name,
            business_type=connection.business_type,
            processor=connection.processor,
        )

    return create


def register_mock_repositories(
    registry: RepositoryFactoryRegistry,
    definitions: Iterable[EntityDefinition],
    table_prefix: str = "",
) -> None:
    """Register a mock repository factory for every entity in ``definitions``."""
    for definition in definitions:
        registry.register(ProviderName.MOCK.value, definition.name, _repository_factory(definition))
    registry.register_table_config_builder(
        ProviderName.MOCK.value, lambda: DatabaseTableConfig(prefix=table_prefix)
    )


def register_mock_provider(registry: FactoryRegistry) -> None:
    registry.register(ProviderName.MOCK.value, MockDatabaseProvider, transform_mock_config)
    registry.register_env_builder(ProviderName.MOCK.value, build_mock_provider_from_env)
