"""Mock (in-memory) database adapter."""

from .provider import MockConnection, MockDatabaseProvider, build_mock_provider_from_env, transform_mock_config
from .registration import register_mock_provider, register_mock_repositories
from .repository import MockRepository
from .seed import SEED_DATA, load_seed

__all__ = [
    "MockConnection",
    "MockDatabaseProvider",
    "build_mock_provider_from_env",
    "transform_mock_config",
    "register_mock_provider",
    "register_mock_repositories",
    "MockRepository",
    "SEED_DATA",
    "load_seed",
]
