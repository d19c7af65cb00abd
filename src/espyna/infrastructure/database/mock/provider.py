"""Mock database provider."""

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ....config.constants import DEFAULT_BUSINESS_TYPE, ProviderName
from ....core.exceptions import DatabaseError
from ....features.listdata import ListDataProcessor

logger = logging.getLogger(__name__)


@dataclass
class MockConnection:
    """What mock repository factories receive as their connection."""

    business_type: str = DEFAULT_BUSINESS_TYPE
    processor: ListDataProcessor = field(default_factory=ListDataProcessor)


class MockDatabaseProvider:
    """Database provider whose connection is just seed selection."""

    def __init__(
        self,
        business_type: str = DEFAULT_BUSINESS_TYPE,
        processor: Optional[ListDataProcessor] = None,
        enabled: bool = True,
    ):
        self._name = ProviderName.MOCK.value
        self.business_type = business_type or DEFAULT_BUSINESS_TYPE
        self.processor = processor or ListDataProcessor()
        self.enabled = enabled
        self._connection: Optional[MockConnection] = None

    @property
    def name(self) -> str:
        return self._name

    def is_enabled(self) -> bool:
        return self.enabled

    @property
    def is_connected(self) -> bool:
        return self._connection is not None

    async def connect(self) -> MockConnection:
        if self._connection is None:
            self._connection = MockConnection(self.business_type, self.processor)
            logger.info(f"Mock database connected (business type '{self.business_type}')")
        return self._connection

    def get_connection(self) -> MockConnection:
        if self._connection is None:
            raise DatabaseError("Mock database is not connected", code="NOT_CONNECTED")
        return self._connection

    async def is_healthy(self) -> None:
        if not self.enabled:
            raise DatabaseError("Mock database provider is disabled", code="DISABLED")
        if self._connection is None:
            raise DatabaseError("Mock database is not connected", code="NOT_CONNECTED")

    async def close(self) -> None:
        self._connection = None


def transform_mock_config(raw_config: Mapping[str, Any]) -> Dict[str, Any]:
    """Keep only the settings the mock provider understands."""
    return {"business_type": raw_config.get("business_type") or DEFAULT_BUSINESS_TYPE}


def build_mock_provider_from_env() -> MockDatabaseProvider:
    return MockDatabaseProvider(business_type=os.getenv("BUSINESS_TYPE", DEFAULT_BUSINESS_TYPE))
