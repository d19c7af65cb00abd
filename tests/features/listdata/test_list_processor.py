"""Tests for the list data processor pipeline."""

from espyna.domain.entity import Workspace
from espyna.features.listdata import (
    FilterRequest,
    PaginationRequest,
    SearchOptions,
    SearchRequest,
    SortDirection,
    SortRequest,
    TypedFilter,
)


def ids(items):
    return [item["id"] for item in items]


class TestListDataProcessor:
    """Filter, search, sort and paginate in one call."""

    def test_full_pipeline(self, processor, sample_items):
        result = processor.process_list_request(
            sample_items,
            filters=FilterRequest([TypedFilter.boolean("active", True)]),
            sort=SortRequest.by("price", SortDirection.DESC),
            search=SearchRequest("a", SearchOptions(search_fields=["name"])),
            pagination=PaginationRequest.page(1),
        )

        assert ids(result.items) == ["c2", "c4"]
        assert result.pagination.total_items == 3
        assert result.pagination.total_pages == 2
        assert result.pagination.has_next
        assert [r.item["id"] for r in result.search_results] == ["c2", "c4"]
        assert result.search_metrics.total_results == 3
        assert result.total_items == 3

    def test_search_ranking_without_sort(self, processor):
        items = [{"id": "one", "name": "Algebra"}, {"id": "both", "name": "Algebra and Calculus"}]
        result = processor.process_list_request(
            items, search=SearchRequest("algebra calculus", SearchOptions(search_fields=["name"]))
        )
        assert ids(result.items) == ["both", "one"]

    def test_without_pagination_returns_everything(self, processor, sample_items):
        result = processor.process_list_request(sample_items)
        assert ids(result.items) == ["c1", "c2", "c3", "c4", "c5"]
        assert result.pagination is None
        assert result.search_results is None
        assert result.total_items == 5

    def test_pagination_uses_default_page_size(self, processor, sample_items):
        result = processor.process_list_request(sample_items, pagination=PaginationRequest())
        assert ids(result.items) == ["c1", "c2"]
        assert result.pagination.total_pages == 3

    def test_records_are_processed_by_attribute(self, processor):
        records = [
            Workspace(id="w-1", name="Zeta", private=True),
            Workspace(id="w-2", name="Alpha", private=False),
            Workspace(id="w-3", name="Beta", private=True),
        ]
        result = processor.process_list_request(
            records,
            filters=FilterRequest([TypedFilter.boolean("private", True)]),
            sort=SortRequest.by("name"),
        )
        assert [record.id for record in result.items] == ["w-3", "w-1"]

    def test_helpers(self, processor, sample_items):
        filtered = processor.apply_filters(sample_items, FilterRequest([TypedFilter.number("level", 2)]))
        assert ids(filtered) == ["c3", "c4"]
        sorted_items = processor.apply_sorting(filtered, SortRequest.by("name"))
        assert ids(sorted_items) == ["c4", "c3"]
        info = processor.create_pagination_response(PaginationRequest.page(1), 0, False)
        assert info.total_items == 0
