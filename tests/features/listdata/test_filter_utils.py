"""Tests for typed filter evaluation."""

from datetime import datetime, timezone

import pytest

from espyna.features.listdata import (
    DateOperator,
    FilterLogic,
    FilterRequest,
    FilterUtils,
    ListOperator,
    NumberOperator,
    StringOperator,
    TypedFilter,
)


def ids(items):
    return [item["id"] for item in items]


@pytest.fixture
def filters():
    return FilterUtils()


def request_for(*typed, logic=FilterLogic.AND):
    return FilterRequest(filters=list(typed), logic=logic)


class TestStringFilters:
    """String operators and case handling."""

    def test_equals_is_case_insensitive_by_default(self, filters, sample_items):
        result = filters.apply_filters(sample_items, request_for(TypedFilter.string("name", "algebra")))
        assert ids(result) == ["c1"]

    def test_equals_case_sensitive(self, filters, sample_items):
        typed = TypedFilter.string("name", "algebra", case_sensitive=True)
        assert filters.apply_filters(sample_items, request_for(typed)) == []

    def test_contains(self, filters, sample_items):
        typed = TypedFilter.string("name", "algebra", StringOperator.CONTAINS)
        assert ids(filters.apply_filters(sample_items, request_for(typed))) == ["c1", "c4"]

    def test_starts_with_and_ends_with(self, filters, sample_items):
        starts = TypedFilter.string("name", "c", StringOperator.STARTS_WITH)
        ends = TypedFilter.string("name", "ICS", StringOperator.ENDS_WITH)
        assert ids(filters.apply_filters(sample_items, request_for(starts))) == ["c2", "c3"]
        assert ids(filters.apply_filters(sample_items, request_for(ends))) == ["c5"]

    def test_not_equals(self, filters, sample_items):
        typed = TypedFilter.string("name", "Physics", StringOperator.NOT_EQUALS)
        assert ids(filters.apply_filters(sample_items, request_for(typed))) == ["c1", "c2", "c3", "c4"]

    def test_regex_ignores_case_unless_requested(self, filters, sample_items):
        insensitive = TypedFilter.string("name", "^alg", StringOperator.REGEX)
        sensitive = TypedFilter.string("name", "^alg", StringOperator.REGEX, case_sensitive=True)
        assert ids(filters.apply_filters(sample_items, request_for(insensitive))) == ["c1", "c4"]
        assert ids(filters.apply_filters(sample_items, request_for(sensitive))) == ["c4"]

    def test_invalid_regex_matches_nothing(self, filters, sample_items):
        typed = TypedFilter.string("name", "(", StringOperator.REGEX)
        assert filters.apply_filters(sample_items, request_for(typed)) == []

    def test_nested_field(self, filters, sample_items):
        typed = TypedFilter.string("teacher.name", "ada")
        assert ids(filters.apply_filters(sample_items, request_for(typed))) == ["c1"]


class TestNumberAndRangeFilters:
    """Numeric comparison; non-numeric and missing values never match."""

    def test_greater_than_skips_missing_values(self, filters, sample_items):
        typed = TypedFilter.number("level", 1, NumberOperator.GREATER_THAN)
        assert ids(filters.apply_filters(sample_items, request_for(typed))) == ["c2", "c3", "c4"]

    def test_less_than_or_equal(self, filters, sample_items):
        typed = TypedFilter.number("price", 180, NumberOperator.LESS_THAN_OR_EQUAL)
        assert ids(filters.apply_filters(sample_items, request_for(typed))) == ["c1", "c4"]

    def test_number_filter_on_string_field_does_not_match(self, filters, sample_items):
        typed = TypedFilter.number("name", 1)
        assert filters.apply_filters(sample_items, request_for(typed)) == []

    def test_range_is_inclusive_by_default(self, filters, sample_items):
        typed = TypedFilter.range("price", min=120, max=250)
        assert ids(filters.apply_filters(sample_items, request_for(typed))) == ["c1", "c2", "c4"]

    def test_range_exclusive_bound(self, filters, sample_items):
        typed = TypedFilter.range("price", min=120, max=250, include_min=False)
        assert ids(filters.apply_filters(sample_items, request_for(typed))) == ["c2", "c4"]

    def test_range_with_one_bound(self, filters, sample_items):
        typed = TypedFilter.range("price", max=150)
        assert ids(filters.apply_filters(sample_items, request_for(typed))) == ["c1"]


class TestListBooleanAndDateFilters:
    """List membership, truthiness and date comparisons."""

    def test_in_and_not_in(self, filters, sample_items):
        in_list = TypedFilter.in_list("id", ["c1", "c3", "zz"])
        not_in = TypedFilter.in_list("id", ["c1", "c3"], ListOperator.NOT_IN)
        assert ids(filters.apply_filters(sample_items, request_for(in_list))) == ["c1", "c3"]
        assert ids(filters.apply_filters(sample_items, request_for(not_in))) == ["c2", "c4", "c5"]

    def test_in_list_on_indexed_field(self, filters, sample_items):
        typed = TypedFilter.in_list("tags.0", ["math"])
        assert ids(filters.apply_filters(sample_items, request_for(typed))) == ["c1", "c2"]

    def test_boolean_accepts_truthy_strings(self, filters, sample_items):
        active = TypedFilter.boolean("active", True)
        inactive = TypedFilter.boolean("active", False)
        assert ids(filters.apply_filters(sample_items, request_for(active))) == ["c1", "c2", "c4", "c5"]
        assert ids(filters.apply_filters(sample_items, request_for(inactive))) == ["c3"]

    def test_date_equals_compares_calendar_day(self, filters, sample_items):
        typed = TypedFilter.date("starts_at", "2024-01-15T00:00:00Z")
        assert ids(filters.apply_filters(sample_items, request_for(typed))) == ["c1", "c5"]

    def test_date_before_and_after(self, filters, sample_items):
        before = TypedFilter.date("starts_at", "2024-02-01T00:00:00Z", DateOperator.BEFORE)
        after = TypedFilter.date("starts_at", datetime(2024, 2, 1, tzinfo=timezone.utc), DateOperator.AFTER)
        assert ids(filters.apply_filters(sample_items, request_for(before))) == ["c1", "c5"]
        assert ids(filters.apply_filters(sample_items, request_for(after))) == ["c2", "c3"]

    def test_date_between(self, filters, sample_items):
        typed = TypedFilter.date(
            "starts_at", "2024-01-20T00:00:00Z", DateOperator.BETWEEN, range_end="2024-03-31T00:00:00Z"
        )
        assert ids(filters.apply_filters(sample_items, request_for(typed))) == ["c2", "c3"]

    def test_date_between_without_end_matches_nothing(self, filters, sample_items):
        typed = TypedFilter.date("starts_at", "2024-01-01T00:00:00Z", DateOperator.BETWEEN)
        assert filters.apply_filters(sample_items, request_for(typed)) == []

    def test_date_filter_on_epoch_millis_field(self, filters):
        items = [{"id": "a", "date_created": 1704067200000}, {"id": "b", "date_created": 1706745600000}]
        typed = TypedFilter.date("date_created", "2024-01-01T00:00:00Z")
        assert ids(filters.apply_filters(items, request_for(typed))) == ["a"]

    def test_date_equals_compares_utc_days_across_offsets(self, filters):
        items = [{"id": "a", "when": "2024-01-16T02:00:00Z"}, {"id": "b", "when": "2024-01-15T12:00:00Z"}]
        typed = TypedFilter.date("when", "2024-01-15T21:00:00-05:00")
        assert ids(filters.apply_filters(items, request_for(typed))) == ["a"]


class TestFilterLogic:
    """Combining filters."""

    def test_and_logic(self, filters, sample_items):
        request = request_for(
            TypedFilter.boolean("active", True),
            TypedFilter.number("level", 2, NumberOperator.GREATER_THAN_OR_EQUAL),
        )
        assert ids(filters.apply_filters(sample_items, request)) == ["c2", "c4"]

    def test_or_logic(self, filters, sample_items):
        request = request_for(
            TypedFilter.string("name", "Physics"),
            TypedFilter.number("level", 3),
            logic=FilterLogic.OR,
        )
        assert ids(filters.apply_filters(sample_items, request)) == ["c2", "c5"]

    def test_empty_or_missing_request_keeps_everything(self, filters, sample_items):
        assert filters.apply_filters(sample_items, None) == sample_items
        assert filters.apply_filters(sample_items, FilterRequest()) == sample_items

    def test_unknown_filter_type_includes_item(self, filters, sample_items):
        request = request_for(TypedFilter("name", object()))
        assert filters.apply_filters(sample_items, request) == sample_items

    def test_objects_are_filtered_by_attribute(self, filters):
        class Course:
            def __init__(self, name):
                self.name = name

        items = [Course("Algebra"), Course("Biology")]
        result = filters.apply_filters(items, request_for(TypedFilter.string("name", "biology")))
        assert [item.name for item in result] == ["Biology"]
