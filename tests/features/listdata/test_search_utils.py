"""Tests for term search, scoring and highlighting."""

import pytest

from espyna.features.listdata import SearchOptions, SearchRequest, SearchUtils
from espyna.features.listdata.services.search import (
    extract_top_terms,
    fuzzy_match,
    highlight_term,
    tokenize_query,
)


def ids(results):
    return [result.item["id"] for result in results]


@pytest.fixture
def search():
    return SearchUtils()


def by_name(query, **options):
    return SearchRequest(query=query, options=SearchOptions(search_fields=["name"], **options))


class TestSearchHelpers:
    def test_tokenize_strips_punctuation(self):
        assert tokenize_query("  hello, world! ") == ["hello", "world"]

    def test_top_terms_skip_stop_words_short_terms_and_duplicates(self):
        assert extract_top_terms("the algebra of Algebra is calculus ok") == ["algebra", "calculus"]

    def test_fuzzy_match_ratio(self):
        assert fuzzy_match("abc", "abd") == pytest.approx(2 / 3)
        assert fuzzy_match("abc", "") == 0.0

    def test_highlight_term_keeps_original_case(self):
        assert highlight_term("Intro to Calculus", "calculus") == "Intro to <mark>Calculus</mark>"

    def test_highlight_term_limits_context(self):
        text = "x" * 80 + "needle" + "y" * 80
        highlighted = highlight_term(text, "needle", context=5)
        assert highlighted == "xxxxx<mark>needle</mark>yyyyy"

    def test_highlight_term_without_match(self):
        assert highlight_term("Calculus", "algebra") == ""


class TestSearchUtils:
    """Matching, ranking and metrics."""

    def test_substring_match_on_named_fields(self, search, sample_items):
        results, metrics = search.apply_search(sample_items, by_name("algebra"))
        assert ids(results) == ["c1", "c4"]
        assert [result.score for result in results] == [1.0, 1.0]
        assert metrics.total_results == 2
        assert metrics.field_match_counts == {"name": 2}

    def test_items_matching_more_terms_rank_first(self, search):
        items = [
            {"id": "one", "name": "Algebra"},
            {"id": "both", "name": "Algebra and Calculus"},
        ]
        results, _ = search.apply_search(items, by_name("algebra calculus"))
        assert ids(results) == ["both", "one"]
        assert results[0].score == 2.0

    def test_field_weights_scale_scores(self, search, sample_items):
        results, _ = search.apply_search(sample_items, by_name("calculus", field_weights={"name": 2.5}))
        assert ids(results) == ["c2"]
        assert results[0].score == 2.5

    def test_case_sensitive_search(self, search, sample_items):
        results, _ = search.apply_search(sample_items, by_name("Algebra", case_sensitive=True))
        assert ids(results) == ["c1"]

    def test_fuzzy_matching_finds_typos(self, search, sample_items):
        exact, _ = search.apply_search(sample_items, by_name("chemstry"))
        fuzzy, _ = search.apply_search(sample_items, by_name("chemstry", fuzzy=True))
        assert exact == []
        assert ids(fuzzy) == ["c3"]
        assert fuzzy[0].score == pytest.approx(0.5)

    def test_highlights(self, search, sample_items):
        results, _ = search.apply_search(sample_items, by_name("cal", highlight=True))
        assert ids(results) == ["c2"]
        highlight = results[0].highlights[0]
        assert highlight.field == "name"
        assert highlight.highlighted_text == "<mark>Cal</mark>culus"
        assert highlight.match_count == 1

    def test_no_highlights_unless_requested(self, search, sample_items):
        results, _ = search.apply_search(sample_items, by_name("cal"))
        assert results[0].highlights == []

    def test_max_results_truncates(self, search, sample_items):
        results, metrics = search.apply_search(sample_items, by_name("a", max_results=1))
        assert ids(results) == ["c1"]
        assert metrics.total_results == 1

    def test_nested_search_field(self, search, sample_items):
        request = SearchRequest("grace", SearchOptions(search_fields=["teacher.name"]))
        results, _ = search.apply_search(sample_items, request)
        assert ids(results) == ["c3"]

    def test_default_fields_are_string_fields(self, search, sample_items):
        results, _ = search.apply_search(sample_items, SearchRequest("physics"))
        assert ids(results) == ["c5"]

    def test_empty_query_keeps_everything(self, search, sample_items):
        results, metrics = search.apply_search(sample_items, SearchRequest("   "))
        assert len(results) == 5
        assert all(result.score == 1.0 for result in results)
        assert metrics.total_results == 5

    def test_no_match(self, search, sample_items):
        results, metrics = search.apply_search(sample_items, by_name("zoology"))
        assert results == []
        assert metrics.total_results == 0
        assert metrics.top_terms == ["zoology"]


class TestSearchRequestDefaults:
    def test_fills_missing_search_fields(self):
        request = SearchRequest("usd").with_default_fields(("name", "description"))
        assert request.options.search_fields == ["name", "description"]
        assert request.query == "usd"

    def test_explicit_fields_win(self):
        request = SearchRequest("usd", SearchOptions(search_fields=["currency"], fuzzy=True))
        assert request.with_default_fields(("name",)) is request

    def test_keeps_other_options(self):
        request = SearchRequest("usd", SearchOptions(highlight=True)).with_default_fields(("name",))
        assert request.options.highlight
        assert request.options.search_fields == ["name"]

    def test_no_defaults_keeps_request(self):
        request = SearchRequest("usd")
        assert request.with_default_fields(()) is request
