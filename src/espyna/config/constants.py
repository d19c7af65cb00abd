"""Shared constants for espyna.

Limits and defaults used by list processing, use case validation and
provider selection.
"""

from enum import Enum


class ProviderName(str, Enum):
    """Known database provider names."""
    MOCK = "mock_db"
    POSTGRES = "postgres"
    FIRESTORE = "firestore"


class BusinessType(str, Enum):
    """Business types with bundled seed data."""
    EDUCATION = "education"
    FITNESS_CENTER = "fitness_center"


DEFAULT_BUSINESS_TYPE = BusinessType.EDUCATION.value
DEFAULT_PROVIDER = ProviderName.MOCK.value

# List processing
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
MAX_SEARCH_RESULTS = 1000
SEARCH_HIGHLIGHT_CONTEXT = 50
FUZZY_MATCH_THRESHOLD = 0.6
FUZZY_MATCH_WEIGHT = 0.5

SEARCH_TERM_STRIP_CHARS = ".,!?;:"

STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "is", "are", "was", "were", "be", "been",
})

SEARCHABLE_FIELD_HINTS = ("name", "title", "description", "content", "text", "email")

TRUTHY_STRINGS = frozenset({"true", "1", "yes"})

# Use case validation
MIN_ID_LENGTH = 5
MIN_ITEM_ID_LENGTH = 3
MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 1000

# Transactions
RETRY_BASE_DELAY_MS = 100
RETRY_MAX_DELAY_MS = 5000
