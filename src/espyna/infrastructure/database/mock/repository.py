"""In-memory repository used by the mock database provider."""

import asyncio
import copy
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ....core.exceptions import EntityAlreadyExistsError, EntityNotFoundError
from ....core.shared.context import RequestContext
from ....domain.base import EntityDefinition, Record
from ....features.listdata import (
    FilterRequest,
    ListDataProcessor,
    ListDataResult,
    PaginationRequest,
    SearchRequest,
    SortRequest,
)
from ....utils.time import now_millis, now_nanos
from .seed import load_seed

logger = logging.getLogger(__name__)


class MockRepository:
    """Dict-backed repository for one entity, guarded by a single lock.

    Records are copied on the way in and out so callers never share state
    with the store.
    """

    def __init__(
        self,
        definition: EntityDefinition,
        table_name: Optional[str] = None,
        business_type: str = "education",
        seed: Optional[Iterable[Mapping[str, Any]]] = None,
        processor: Optional[ListDataProcessor] = None,
    ):
        self.definition = definition
        self.table_name = table_name or definition.name
        self.business_type = business_type or "education"
        self.processor = processor or ListDataProcessor()
        self._records: Dict[str, Record] = {}
        self._lock = asyncio.Lock()

        rows = seed if seed is not None else load_seed(self.business_type, definition.name)
        for row in rows:
            record = definition.model.from_dict(row)
            if record.date_created is not None:
                record.mark_created(record.date_created)
            self._records[record.id] = record
        logger.debug(f"Loaded {len(self._records)} {definition.name} records for '{self.business_type}'")

    def _generate_id(self) -> str:
        return f"{self.definition.id_prefix}-{now_nanos()}-{len(self._records)}"

    @staticmethod
    def _record_operation(context: Optional[RequestContext], op_type: str, collection: str, record: Record) -> None:
        transaction = context.transaction if context is not None else None
        if transaction is not None and hasattr(transaction, "record"):
            transaction.record(op_type, collection, record.id, record.to_dict())

    async def create(self, record: Record, context: Optional[RequestContext] = None) -> Record:
        stored = copy.deepcopy(record)
        async with self._lock:
            if not stored.id:
                stored.id = self._generate_id()
            if stored.id in self._records:
                raise EntityAlreadyExistsError(self.definition.name, stored.id)

            now = now_millis()
            stored.mark_created(stored.date_created or now)
            stored.active = True
            self._records[stored.id] = stored
            self._record_operation(context, "create", self.table_name, stored)

        logger.debug(f"Created {self.definition.name} '{stored.id}'")
        return copy.deepcopy(stored)

    async def read(self, record_id: str, context: Optional[RequestContext] = None) -> Record:
        async with self._lock:
            record = self._records.get(record_id)
            if record is None:
                raise EntityNotFoundError(self.definition.name, record_id)
            return copy.deepcopy(record)

    async def update(self, record: Record, context: Optional[RequestContext] = None) -> Record:
        stored = copy.deepcopy(record)
        async with self._lock:
            existing = self._records.get(stored.id)
            if existing is None:
                raise EntityNotFoundError(self.definition.name, stored.id)

            if stored.date_created is None:
                stored.date_created = existing.date_created
                stored.date_created_string = existing.date_created_string
            stored.mark_modified(now_millis())
            self._records[stored.id] = stored
            self._record_operation(context, "update", self.table_name, stored)

        return copy.deepcopy(stored)

    async def delete(self, record_id: str, context: Optional[RequestContext] = None) -> None:
        async with self._lock:
            record = self._records.pop(record_id, None)
            if record is None:
                raise EntityNotFoundError(self.definition.name, record_id)
            self._record_operation(context, "delete", self.table_name, record)
        logger.debug(f"Deleted {self.definition.name} '{record_id}'")

    async def list(self, context: Optional[RequestContext] = None) -> List[Record]:
        async with self._lock:
            return [copy.deepcopy(record) for record in self._records.values()]

    async def get_list_page_data(
        self,
        filters: Optional[FilterRequest] = None,
        sort: Optional[SortRequest] = None,
        search: Optional[SearchRequest] = None,
        pagination: Optional[PaginationRequest] = None,
        context: Optional[RequestContext] = None,
    ) -> ListDataResult:
        records = await self.list(context)
        if search is not None:
            search = search.with_default_fields(self.definition.searchable_fields)
        return self.processor.process_list_request(records, filters, sort, search, pagination)

    async def get_item_page_data(self, record_id: str, context: Optional[RequestContext] = None) -> Record:
        return await self.read(record_id, context)

    async def count(self) -> int:
        async with self._lock:
            return len(self._records)
