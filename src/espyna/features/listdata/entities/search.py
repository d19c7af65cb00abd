"""Search request and result entities."""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Sequence


@dataclass(frozen=True)
class SearchOptions:
    """Search tuning.

    ``search_fields`` empty means fields are picked from the items themselves.
    ``max_results`` of 0 keeps every match.
    """

    search_fields: List[str] = field(default_factory=list)
    case_sensitive: bool = False
    fuzzy: bool = False
    field_weights: Dict[str, float] = field(default_factory=dict)
    highlight: bool = False
    max_results: int = 0


@dataclass(frozen=True)
class SearchRequest:
    query: str = ""
    options: Optional[SearchOptions] = None

    def with_default_fields(self, fields: Sequence[str]) -> "SearchRequest":
        """Copy that searches ``fields`` unless explicit search fields were given."""
        options = self.options or SearchOptions()
        if options.search_fields or not fields:
            return self
        return replace(self, options=replace(options, search_fields=list(fields)))


@dataclass(frozen=True)
class SearchHighlight:
    field: str
    highlighted_text: str
    match_count: int = 1


@dataclass
class SearchResult:
    item: Any
    score: float = 0.0
    highlights: List[SearchHighlight] = field(default_factory=list)


@dataclass
class SearchMetrics:
    total_results: int = 0
    query_time_ms: float = 0.0
    top_terms: List[str] = field(default_factory=list)
    field_match_counts: Dict[str, int] = field(default_factory=dict)
