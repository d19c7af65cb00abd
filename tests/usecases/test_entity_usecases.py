"""Tests for the generic entity use cases and the use case factory."""

from unittest.mock import AsyncMock

import pytest

from espyna.core.exceptions import TransactionError, TransactionErrorCode, UseCaseError
from espyna.core.shared import RequestContext
from espyna.domain import PRICE_PLAN, ROLE, WORKSPACE, Role, Workspace
from espyna.features.authorization import AllowAllAuthorizationService, PermissionSetAuthorizationService
from espyna.features.ids import NoOpIDService, UUIDv7IDService
from espyna.features.listdata import (
    ListDataProcessor,
    PaginationRequest,
    SearchOptions,
    SearchRequest,
    SortRequest,
)
from espyna.features.transactions import InMemoryTransactionService, TransactionState
from espyna.features.translation import CatalogTranslationService
from espyna.infrastructure.database.mock import MockRepository
from espyna.usecases import (
    CreateEntity,
    CreateRequest,
    DeleteEntity,
    DeleteRequest,
    GetEntityItemPageData,
    GetEntityListPageData,
    GetItemPageDataRequest,
    GetListPageDataRequest,
    ListEntities,
    ListRequest,
    ReadEntity,
    ReadRequest,
    UpdateEntity,
    UpdateRequest,
    UseCaseFactory,
    UseCaseRepositories,
    UseCaseServices,
)


def ids(records):
    return [record.id for record in records]


class FailingAuthorization:
    async def is_authorized(self, context, permission):
        raise RuntimeError("policy store unavailable")


class BrokenRepository(MockRepository):
    """Mock repository whose writes fail with the given errors, in order."""

    def __init__(self, definition, *errors):
        super().__init__(definition)
        self.errors = list(errors)

    async def create(self, record, context=None):
        if self.errors:
            raise self.errors.pop(0)
        return await super().create(record, context)


class MismatchedRepository(MockRepository):
    async def get_item_page_data(self, record_id, context=None):
        record = await super().get_item_page_data("workspace-math", context)
        return record


@pytest.fixture
def services():
    return UseCaseServices(
        authorization=AllowAllAuthorizationService(),
        transaction=InMemoryTransactionService(),
        ids=NoOpIDService(),
    )


def build(use_case_class, definition, repository, services, **kwargs):
    return use_case_class(definition, UseCaseRepositories(primary=repository), services, **kwargs)


async def expect_error(coro):
    with pytest.raises(UseCaseError) as exc_info:
        await coro
    return exc_info.value


class TestCreateEntity:
    """Validation, enrichment and persistence of new records."""

    @pytest.mark.asyncio
    async def test_creates_enriched_record(self, workspace_repository, services, context):
        create = build(CreateEntity, WORKSPACE, workspace_repository, services)
        response = await create.execute(CreateRequest({"name": "History", "active": False}), context)
        created = response.data
        assert response.success
        assert created.id.startswith("workspace-")
        assert created.active is True
        assert created.date_created is not None
        assert created.date_created_string.endswith("Z")
        assert (await workspace_repository.read(created.id)).name == "History"

    @pytest.mark.asyncio
    async def test_id_service_supplies_id(self, workspace_repository, services, context):
        services.ids = UUIDv7IDService(prefix="ws")
        create = build(CreateEntity, WORKSPACE, workspace_repository, services)
        response = await create.execute(CreateRequest(Workspace(name="History")), context)
        assert response.data.id.startswith("ws-")

    @pytest.mark.asyncio
    async def test_input_is_not_mutated(self, workspace_repository, services, context):
        create = build(CreateEntity, WORKSPACE, workspace_repository, services)
        workspace = Workspace(name="History")
        await create.execute(CreateRequest(workspace), context)
        assert workspace.id == ""
        assert workspace.date_created is None

    @pytest.mark.parametrize("request_, key", [
        (None, "workspace.validation.request_required"),
        (CreateRequest(None), "workspace.validation.data_required"),
        (CreateRequest(42), "workspace.validation.data_required"),
        (CreateRequest({"name": ""}), "workspace.validation.name_required"),
        (CreateRequest({"name": "A"}), "workspace.validation.name_too_short"),
        (CreateRequest({"name": "A" * 101}), "workspace.validation.name_too_long"),
        (CreateRequest({"name": "Art", "description": "d" * 1001}), "workspace.validation.description_too_long"),
    ])
    @pytest.mark.asyncio
    async def test_validation(self, workspace_repository, services, context, request_, key):
        create = build(CreateEntity, WORKSPACE, workspace_repository, services)
        error = await expect_error(create.execute(request_, context))
        assert error.key == key
        assert error.http_status == 400
        assert await workspace_repository.count() == 4

    @pytest.mark.asyncio
    async def test_entity_rules_apply(self, role_repository, services, context):
        create = build(CreateEntity, ROLE, role_repository, services)
        error = await expect_error(create.execute(CreateRequest(Role(name="Tutor", color="blue")), context))
        assert error.key == "role.validation.color_invalid"
        assert error.message == "role color invalid"

    @pytest.mark.parametrize("amount, key", [
        ("ten", "price_plan.validation.amount_invalid"),
        ([10], "price_plan.validation.amount_invalid"),
        ("-1", "price_plan.validation.amount_negative"),
    ])
    @pytest.mark.asyncio
    async def test_non_numeric_amount_is_a_validation_error(self, services, context, amount, key):
        create = build(CreateEntity, PRICE_PLAN, MockRepository(PRICE_PLAN), services)
        data = {"name": "Monthly", "plan_id": "plan-1", "amount": amount}
        error = await expect_error(create.execute(CreateRequest(data), context))
        assert error.key == key
        assert error.http_status == 400

    @pytest.mark.asyncio
    async def test_numeric_string_amount_is_accepted(self, services, context):
        create = build(CreateEntity, PRICE_PLAN, MockRepository(PRICE_PLAN), services)
        data = {"name": "Monthly", "plan_id": "plan-1", "amount": "10"}
        response = await create.execute(CreateRequest(data), context)
        assert response.success

    @pytest.mark.asyncio
    async def test_translated_message(self, workspace_repository, services, context):
        services.translation = CatalogTranslationService(
            {"en": {"workspace": {"validation": {"name_required": "A workspace needs a name"}}}}
        )
        create = build(CreateEntity, WORKSPACE, workspace_repository, services)
        error = await expect_error(create.execute(CreateRequest({"name": " "}), context))
        assert error.message == "A workspace needs a name"

    @pytest.mark.asyncio
    async def test_workspace_scoped_record_inherits_workspace(self, role_repository, services):
        create = build(CreateEntity, ROLE, role_repository, services)
        context = RequestContext(user_id="user-ada", workspace_id="workspace-science")
        response = await create.execute(CreateRequest(Role(name="Tutor")), context)
        assert response.data.workspace_id == "workspace-science"

    @pytest.mark.asyncio
    async def test_duplicate_id(self, workspace_repository, services, context):
        create = build(CreateEntity, WORKSPACE, workspace_repository, services)
        error = await expect_error(
            create.execute(CreateRequest(Workspace(id="workspace-math", name="Again")), context)
        )
        assert error.key == "workspace.errors.already_exists"
        assert error.http_status == 409

    @pytest.mark.asyncio
    async def test_unexpected_repository_failure(self, services, context):
        repository = BrokenRepository(WORKSPACE, RuntimeError("disk full"))
        create = build(CreateEntity, WORKSPACE, repository, services)
        error = await expect_error(create.execute(CreateRequest({"name": "History"}), context))
        assert error.key == "workspace.errors.create_failed"
        assert error.http_status == 500
        assert isinstance(error.__cause__, RuntimeError)
        assert services.transaction.transactions[0].state == TransactionState.ROLLED_BACK


class TestAuthorization:
    """Permission checks before any repository access."""

    @pytest.mark.asyncio
    async def test_denied(self, workspace_repository, services, context):
        services.authorization = PermissionSetAuthorizationService()
        read = build(ReadEntity, WORKSPACE, workspace_repository, services)
        error = await expect_error(read.execute(ReadRequest("workspace-math"), context))
        assert error.key == "workspace.errors.authorization_failed"
        assert error.http_status == 403
        assert error.details["permission"] == "workspace:read"

    @pytest.mark.asyncio
    async def test_granted_by_entity_wildcard(self, workspace_repository, services):
        services.authorization = PermissionSetAuthorizationService()
        read = build(ReadEntity, WORKSPACE, workspace_repository, services)
        context = RequestContext(user_id="user-ada", permissions={"workspace:*"})
        assert (await read.execute(ReadRequest("workspace-math"), context)).data.id == "workspace-math"

    @pytest.mark.asyncio
    async def test_checks_entity_action_permission(self, workspace_repository, services, context):
        services.authorization = AsyncMock()
        services.authorization.is_authorized.return_value = True
        delete = build(DeleteEntity, WORKSPACE, workspace_repository, services)
        await delete.execute(DeleteRequest("workspace-math"), context)
        services.authorization.is_authorized.assert_awaited_once_with(context, "workspace:delete")

    @pytest.mark.asyncio
    async def test_check_failure(self, workspace_repository, services, context):
        services.authorization = FailingAuthorization()
        delete = build(DeleteEntity, WORKSPACE, workspace_repository, services)
        error = await expect_error(delete.execute(DeleteRequest("workspace-math"), context))
        assert error.key == "workspace.errors.authorization_check_failed"
        assert error.http_status == 500

    @pytest.mark.asyncio
    async def test_validation_runs_before_authorization(self, workspace_repository, services, context):
        services.authorization = FailingAuthorization()
        read = build(ReadEntity, WORKSPACE, workspace_repository, services)
        error = await expect_error(read.execute(ReadRequest(""), context))
        assert error.key == "workspace.validation.id_required"

    @pytest.mark.asyncio
    async def test_no_services_at_all(self, workspace_repository):
        read = ReadEntity(WORKSPACE, UseCaseRepositories(primary=workspace_repository))
        assert (await read.execute(ReadRequest("workspace-math"))).data.name == "Mathematics Department"


class TestReadUpdateDelete:
    @pytest.mark.asyncio
    async def test_read_missing(self, workspace_repository, services, context):
        read = build(ReadEntity, WORKSPACE, workspace_repository, services)
        error = await expect_error(read.execute(ReadRequest("workspace-none"), context))
        assert error.key == "workspace.errors.not_found"
        assert error.http_status == 404

    @pytest.mark.asyncio
    async def test_update(self, workspace_repository, services, context):
        update = build(UpdateEntity, WORKSPACE, workspace_repository, services)
        current = await workspace_repository.read("workspace-math")
        current.name = "Maths"
        response = await update.execute(UpdateRequest(current), context)
        assert response.data.name == "Maths"
        assert response.data.date_created == current.date_created

    @pytest.mark.parametrize("data, key", [
        ({"name": "Maths"}, "workspace.validation.id_required"),
        ({"id": "ws-1", "name": "Maths"}, "workspace.validation.id_too_short"),
        ({"id": "workspace-math", "name": "M"}, "workspace.validation.name_too_short"),
    ])
    @pytest.mark.asyncio
    async def test_update_validation(self, workspace_repository, services, context, data, key):
        update = build(UpdateEntity, WORKSPACE, workspace_repository, services)
        assert (await expect_error(update.execute(UpdateRequest(data), context))).key == key

    @pytest.mark.asyncio
    async def test_update_missing(self, workspace_repository, services, context):
        update = build(UpdateEntity, WORKSPACE, workspace_repository, services)
        error = await expect_error(update.execute(UpdateRequest({"id": "workspace-none", "name": "X1"}), context))
        assert error.key == "workspace.errors.not_found"

    @pytest.mark.asyncio
    async def test_soft_delete(self, workspace_repository, services, context):
        delete = build(DeleteEntity, WORKSPACE, workspace_repository, services)
        response = await delete.execute(DeleteRequest("workspace-math"), context)
        assert response.id == "workspace-math"
        assert not response.hard
        assert (await workspace_repository.read("workspace-math")).active is False

    @pytest.mark.asyncio
    async def test_hard_delete(self, workspace_repository, services, context):
        delete = build(DeleteEntity, WORKSPACE, workspace_repository, services)
        await delete.execute(DeleteRequest("workspace-math", hard=True), context)
        assert await workspace_repository.count() == 3

    @pytest.mark.asyncio
    async def test_hard_delete_does_not_read(self, workspace_repository, services, context, mocker):
        read = mocker.spy(workspace_repository, "read")
        delete = build(DeleteEntity, WORKSPACE, workspace_repository, services)
        await delete.execute(DeleteRequest("workspace-science", hard=True), context)
        assert read.call_count == 0

    @pytest.mark.asyncio
    async def test_delete_missing(self, workspace_repository, services, context):
        delete = build(DeleteEntity, WORKSPACE, workspace_repository, services)
        error = await expect_error(delete.execute(DeleteRequest("workspace-none"), context))
        assert error.key == "workspace.errors.not_found"


class TestListEntities:
    """Visibility of inactive and other-workspace records."""

    @pytest.mark.asyncio
    async def test_hides_inactive(self, workspace_repository, services, context):
        list_ = build(ListEntities, WORKSPACE, workspace_repository, services)
        response = await list_.execute(ListRequest(), context)
        assert ids(response.data) == ["workspace-math", "workspace-science", "workspace-admin"]

    @pytest.mark.parametrize("permission", ["workspace:read_inactive", "workspace:*", "*"])
    @pytest.mark.asyncio
    async def test_read_inactive_permission(self, workspace_repository, services, permission):
        list_ = build(ListEntities, WORKSPACE, workspace_repository, services)
        context = RequestContext(user_id="user-ada", permissions={permission})
        assert "workspace-archive" in ids((await list_.execute(ListRequest(), context)).data)

    @pytest.mark.asyncio
    async def test_workspace_scope(self, role_repository, services):
        list_ = build(ListEntities, ROLE, role_repository, services)
        science = RequestContext(user_id="user-ada", workspace_id="workspace-science")
        assert ids((await list_.execute(ListRequest(), science)).data) == ["role-lab-assistant"]
        unscoped = RequestContext(user_id="user-ada")
        assert len((await list_.execute(ListRequest(), unscoped)).data) == 3


class TestGetEntityListPageData:
    """Processing of visible records."""

    @pytest.fixture
    def page_data(self, workspace_repository, services):
        return build(
            GetEntityListPageData,
            WORKSPACE,
            workspace_repository,
            services,
            processor=ListDataProcessor(default_page_size=2),
        )

    @pytest.mark.asyncio
    async def test_sorted_first_page(self, page_data, context):
        request = GetListPageDataRequest(sort=SortRequest.by("name"), pagination=PaginationRequest.page(1))
        response = await page_data.execute(request, context)
        assert ids(response.items) == ["workspace-math", "workspace-admin"]
        assert response.pagination.total_items == 3
        assert response.pagination.has_next
        assert response.search_results == []

    @pytest.mark.asyncio
    async def test_search(self, page_data, context):
        request = GetListPageDataRequest(
            search=SearchRequest("records", SearchOptions(search_fields=["description"]))
        )
        response = await page_data.execute(request, context)
        assert ids(response.items) == ["workspace-admin"]
        assert [result.item.id for result in response.search_results] == ["workspace-admin"]
        assert response.search_metrics.total_results == 1

    @pytest.mark.asyncio
    async def test_search_defaults_to_searchable_fields(self, services, context):
        repository = MockRepository(PRICE_PLAN, seed=[
            {"id": "price-plan-monthly", "name": "Monthly", "plan_id": "plan-1", "currency": "USD"},
            {"id": "price-plan-saver", "name": "USD Saver", "plan_id": "plan-2", "currency": "EUR"},
        ])
        page_data = build(GetEntityListPageData, PRICE_PLAN, repository, services)
        response = await page_data.execute(GetListPageDataRequest(search=SearchRequest("usd")), context)
        assert ids(response.items) == ["price-plan-saver"]

    @pytest.mark.asyncio
    async def test_read_inactive_counts_archived_records(self, page_data):
        context = RequestContext(user_id="user-ada", permissions={"workspace:read_inactive"})
        response = await page_data.execute(GetListPageDataRequest(pagination=PaginationRequest.page(1)), context)
        assert response.pagination.total_items == 4

    @pytest.mark.asyncio
    async def test_empty_result_keeps_pagination_shape(self, role_repository, services):
        page_data = build(GetEntityListPageData, ROLE, role_repository, services)
        context = RequestContext(user_id="user-ada", workspace_id="workspace-none")
        response = await page_data.execute(
            GetListPageDataRequest(pagination=PaginationRequest.page(2, limit=10)), context
        )
        assert response.items == []
        assert response.pagination.total_items == 0
        assert response.pagination.current_page == 2
        assert not response.pagination.has_next

    @pytest.mark.asyncio
    async def test_empty_result_without_pagination(self, role_repository, services):
        page_data = build(GetEntityListPageData, ROLE, role_repository, services)
        context = RequestContext(user_id="user-ada", workspace_id="workspace-none")
        response = await page_data.execute(GetListPageDataRequest(), context)
        assert response.items == []
        assert response.pagination is None

    @pytest.mark.parametrize("request_, key", [
        (None, "workspace.validation.request_required"),
        (GetListPageDataRequest(sort=SortRequest.by("salary")), "workspace.validation.invalid_sort_field"),
        (GetListPageDataRequest(pagination=PaginationRequest.page(1, limit=500)), "workspace.validation.invalid_limit"),
        (GetListPageDataRequest(search=SearchRequest("  ")), "workspace.validation.empty_search_query"),
        (GetListPageDataRequest(pagination=PaginationRequest.after("garbage!")), "workspace.validation.invalid_cursor"),
    ])
    @pytest.mark.asyncio
    async def test_validation(self, page_data, context, request_, key):
        assert (await expect_error(page_data.execute(request_, context))).key == key

    @pytest.mark.asyncio
    async def test_extra_fields_are_accepted(self, page_data, context):
        response = await page_data.execute(GetListPageDataRequest(sort=SortRequest.by("user_count")), context)
        assert len(response.items) == 3


class TestGetEntityItemPageData:
    """Single record lookup with visibility rules."""

    @pytest.mark.asyncio
    async def test_found(self, workspace_repository, services, context):
        item = build(GetEntityItemPageData, WORKSPACE, workspace_repository, services)
        assert (await item.execute(GetItemPageDataRequest("workspace-admin"), context)).data.private

    @pytest.mark.parametrize("record_id, key, status", [
        ("", "workspace.validation.id_required", 400),
        ("ws", "workspace.validation.id_too_short", 400),
        ("workspace-none", "workspace.errors.not_found", 404),
        ("workspace-archive", "workspace.errors.inactive", 404),
    ])
    @pytest.mark.asyncio
    async def test_errors(self, workspace_repository, services, context, record_id, key, status):
        item = build(GetEntityItemPageData, WORKSPACE, workspace_repository, services)
        error = await expect_error(item.execute(GetItemPageDataRequest(record_id), context))
        assert error.key == key
        assert error.http_status == status

    @pytest.mark.asyncio
    async def test_inactive_with_permission(self, workspace_repository, services):
        item = build(GetEntityItemPageData, WORKSPACE, workspace_repository, services)
        context = RequestContext(user_id="user-ada", permissions={"workspace:read_inactive"})
        response = await item.execute(GetItemPageDataRequest("workspace-archive"), context)
        assert response.data.active is False

    @pytest.mark.asyncio
    async def test_other_workspace_is_not_found(self, role_repository, services):
        item = build(GetEntityItemPageData, ROLE, role_repository, services)
        context = RequestContext(user_id="user-ada", workspace_id="workspace-math")
        error = await expect_error(item.execute(GetItemPageDataRequest("role-lab-assistant"), context))
        assert error.key == "role.errors.not_found"

    @pytest.mark.asyncio
    async def test_id_mismatch(self, services, context):
        item = build(GetEntityItemPageData, WORKSPACE, MismatchedRepository(WORKSPACE), services)
        error = await expect_error(item.execute(GetItemPageDataRequest("workspace-science"), context))
        assert error.key == "workspace.errors.id_mismatch"
        assert error.http_status == 500


class TestTransactions:
    """Use cases run inside the transaction service."""

    @pytest.mark.asyncio
    async def test_write_is_recorded_and_committed(self, workspace_repository, services, context):
        create = build(CreateEntity, WORKSPACE, workspace_repository, services)
        await create.execute(CreateRequest({"name": "History"}), context)
        transaction = services.transaction.transactions[0]
        assert transaction.state == TransactionState.COMMITTED
        assert [op.type for op in transaction.operations] == ["create"]

    @pytest.mark.asyncio
    async def test_retryable_repository_error_is_retried(self, services, context):
        async def no_sleep(seconds):
            return None

        services.transaction = InMemoryTransactionService(max_retries=1, sleep=no_sleep)
        repository = BrokenRepository(
            WORKSPACE, TransactionError(TransactionErrorCode.CONFLICT, "write conflict")
        )
        create = build(CreateEntity, WORKSPACE, repository, services)
        response = await create.execute(CreateRequest({"name": "History"}), context)
        assert response.data.name == "History"
        assert len(services.transaction.transactions) == 2

    @pytest.mark.asyncio
    async def test_without_transaction_support(self, workspace_repository, context):
        create = build(CreateEntity, WORKSPACE, workspace_repository, UseCaseServices())
        response = await create.execute(CreateRequest({"name": "History"}), context)
        assert response.data.active


class TestUseCaseFactory:
    def test_builds_use_cases_for_entities_with_repositories(self, workspace_repository, role_repository):
        factory = UseCaseFactory(
            [WORKSPACE, ROLE],
            {"workspace": workspace_repository},
        )
        assert factory.entities() == ["workspace"]
        assert "workspace" in factory
        assert "role" not in factory
        use_cases = factory.for_entity("workspace")
        assert isinstance(use_cases.create, CreateEntity)
        assert use_cases.read.repository is workspace_repository
        assert use_cases.get_list_page_data.processor is factory.processor
        with pytest.raises(KeyError):
            factory.for_entity("role")

    def test_limits_are_passed_to_list_page_data(self, workspace_repository):
        factory = UseCaseFactory([WORKSPACE], {"workspace": workspace_repository}, max_page_size=10)
        assert factory.for_entity("workspace").get_list_page_data.max_page_size == 10
