"""Pagination request and response entities."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class OffsetPagination:
    page: int = 1


@dataclass(frozen=True)
class CursorPagination:
    token: str = ""


@dataclass(frozen=True)
class PaginationRequest:
    """Page size plus exactly one of offset or cursor positioning.

    A ``limit`` of 0 means the configured default page size. With neither
    ``offset`` nor ``cursor`` set, pagination starts at the first page.
    """

    limit: int = 0
    offset: Optional[OffsetPagination] = None
    cursor: Optional[CursorPagination] = None

    def __post_init__(self):
        if self.offset is not None and self.cursor is not None:
            raise ValueError("Cannot specify both offset and cursor pagination")

    @classmethod
    def page(cls, page: int, limit: int = 0) -> "PaginationRequest":
        return cls(limit=limit, offset=OffsetPagination(page))

    @classmethod
    def after(cls, token: str, limit: int = 0) -> "PaginationRequest":
        return cls(limit=limit, cursor=CursorPagination(token))

    @property
    def is_cursor(self) -> bool:
        return self.cursor is not None


@dataclass(frozen=True)
class PaginationResponse:
    total_items: int = 0
    current_page: int = 1
    total_pages: int = 0
    has_next: bool = False
    has_prev: bool = False
    next_cursor: Optional[str] = None
    prev_cursor: Optional[str] = None
