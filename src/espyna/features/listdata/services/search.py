"""Term-based search with scoring, highlighting and metrics.

Scoring per field and term:

* a substring hit adds 1.0
* otherwise, with fuzzy matching on, a character-overlap ratio above the
  fuzzy threshold adds half the ratio

A field's score is multiplied by its weight (default 1.0) and the item score
is the sum over fields. Items with no matching field are dropped.
"""

import logging
import time
from typing import Any, Dict, List, Optional, Tuple

from ....config.constants import (
    FUZZY_MATCH_THRESHOLD,
    FUZZY_MATCH_WEIGHT,
    SEARCH_HIGHLIGHT_CONTEXT,
    SEARCH_TERM_STRIP_CHARS,
    STOP_WORDS,
)
from ..entities.search import (
    SearchHighlight,
    SearchMetrics,
    SearchOptions,
    SearchRequest,
    SearchResult,
)
from .field_access import default_search_fields, get_field_value, to_string

logger = logging.getLogger(__name__)


def tokenize_query(query: str) -> List[str]:
    """Split on whitespace and strip surrounding punctuation."""
    terms = []
    for part in (query or "").split():
        part = part.strip(SEARCH_TERM_STRIP_CHARS)
        if part:
            terms.append(part)
    return terms


def extract_top_terms(query: str) -> List[str]:
    """Unique non-stop-word terms longer than two characters, in query order."""
    top_terms = []
    seen = set()
    for term in tokenize_query(query):
        lowered = term.lower()
        if lowered in STOP_WORDS or lowered in seen or len(term) <= 2:
            continue
        top_terms.append(term)
        seen.add(lowered)
    return top_terms


def fuzzy_match(text: str, term: str) -> float:
    """Fraction of the term's characters present anywhere in ``text``."""
    if not term:
        return 0.0
    found = sum(1 for char in term if char in text)
    return found / len(term)


def highlight_term(text: str, term: str, case_sensitive: bool = False,
                   context: int = SEARCH_HIGHLIGHT_CONTEXT) -> str:
    """Wrap the first occurrence of ``term`` in ``<mark>`` with surrounding context."""
    haystack = text if case_sensitive else text.lower()
    needle = term if case_sensitive else term.lower()
    index = haystack.find(needle)
    if index == -1:
        return ""

    end = index + len(term)
    prefix = text[max(0, index - context):index]
    suffix = text[end:end + context]
    return f"{prefix}<mark>{text[index:end]}</mark>{suffix}"


class SearchUtils:
    """Searches items and reports ranked results with metrics."""

    def apply_search(
        self,
        items: List[Any],
        request: Optional[SearchRequest],
    ) -> Tuple[List[SearchResult], SearchMetrics]:
        if request is None or not (request.query or "").strip():
            return (
                [SearchResult(item=item, score=1.0) for item in items],
                SearchMetrics(total_results=len(items)),
            )

        started = time.perf_counter()
        options = request.options or SearchOptions()
        terms = tokenize_query(request.query)
        field_match_counts: Dict[str, int] = {}

        results: List[SearchResult] = []
        if terms:
            for item in items:
                result = self.search_item(item, terms, options, field_match_counts)
                if result is not None and result.score > 0:
                    results.append(result)

        # sorted() is stable so equal scores keep input order
        results = sorted(results, key=lambda result: result.score, reverse=True)
        if options.max_results > 0:
            results = results[:options.max_results]

        metrics = SearchMetrics(
            total_results=len(results),
            query_time_ms=(time.perf_counter() - started) * 1000.0,
            top_terms=extract_top_terms(request.query),
            field_match_counts=field_match_counts,
        )
        logger.debug(f"Search '{request.query}' matched {len(results)} of {len(items)} items")
        return results, metrics

    def search_item(
        self,
        item: Any,
        terms: List[str],
        options: SearchOptions,
        field_match_counts: Dict[str, int],
    ) -> Optional[SearchResult]:
        search_fields = list(options.search_fields) or default_search_fields(item)

        total_score = 0.0
        highlights: List[SearchHighlight] = []
        matched = False

        for field_name in search_fields:
            text = to_string(get_field_value(item, field_name))
            if not text:
                continue

            field_score, highlight, match_count = self.search_field(text, terms, options)
            if field_score <= 0:
                continue

            matched = True
            field_match_counts[field_name] = field_match_counts.get(field_name, 0) + 1
            total_score += field_score * options.field_weights.get(field_name, 1.0)
            if options.highlight and highlight:
                highlights.append(SearchHighlight(field_name, highlight, match_count))

        if not matched:
            return None
        return SearchResult(item=item, score=total_score, highlights=highlights)

    def search_field(self, text: str, terms: List[str], options: SearchOptions) -> Tuple[float, str, int]:
        """Score one field; returns (score, first highlight, exact match count)."""
        haystack = text if options.case_sensitive else text.lower()
        score = 0.0
        first_highlight = ""
        match_count = 0

        for term in terms:
            needle = term if options.case_sensitive else term.lower()
            if needle in haystack:
                score += 1.0
                match_count += 1
                if options.highlight and not first_highlight:
                    first_highlight = highlight_term(text, term, options.case_sensitive)
            elif options.fuzzy:
                ratio = fuzzy_match(haystack, needle)
                if ratio > FUZZY_MATCH_THRESHOLD:
                    score += ratio * FUZZY_MATCH_WEIGHT

        return score, first_highlight, match_count
