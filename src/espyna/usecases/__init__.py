"""Application use cases: validate, authorize, then call the repository."""

from .base import EntityUseCase, UseCaseRepositories, UseCaseServices
from .create import CreateEntity
from .delete import DeleteEntity
from .factory import EntityUseCases, UseCaseFactory
from .list import ListEntities
from .page_data import GetEntityItemPageData, GetEntityListPageData
from .ports import EntityRepository
from .read import ReadEntity
from .requests import (
    CreateRequest,
    DeleteRequest,
    DeleteResponse,
    EntityListResponse,
    EntityResponse,
    GetItemPageDataRequest,
    GetListPageDataRequest,
    ListPageDataResponse,
    ListRequest,
    ReadRequest,
    UpdateRequest,
)
from .update import UpdateEntity
from .validation import EntityValidationRules

__all__ = [
    "EntityUseCase",
    "UseCaseRepositories",
    "UseCaseServices",
    "CreateEntity",
    "ReadEntity",
    "UpdateEntity",
    "DeleteEntity",
    "ListEntities",
    "GetEntityListPageData",
    "GetEntityItemPageData",
    "EntityUseCases",
    "UseCaseFactory",
    "EntityRepository",
    "CreateRequest",
    "ReadRequest",
    "UpdateRequest",
    "DeleteRequest",
    "ListRequest",
    "GetListPageDataRequest",
    "GetItemPageDataRequest",
    "EntityResponse",
    "EntityListResponse",
    "DeleteResponse",
    "ListPageDataResponse",
    "EntityValidationRules",
]
