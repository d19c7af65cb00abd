"""Offset and cursor pagination over in-memory lists.

Cursor tokens are URL-safe base64 JSON documents holding the offset of the
first item on the page, with ``=`` padding stripped.
"""

import base64
import binascii
import json
import math
from typing import Any, List, Optional, Tuple

from ....config.constants import DEFAULT_PAGE_SIZE
from ....core.exceptions import InvalidCursorError, ListProcessingError
from ..entities.pagination import PaginationRequest, PaginationResponse


def encode_cursor(offset: int) -> str:
    payload = json.dumps({"offset": offset}, sort_keys=True).encode("utf-8")
    return base64.urlsafe_b64encode(payload).decode("ascii").rstrip("=")


def decode_cursor(token: str) -> int:
    """Offset stored in ``token``; raises InvalidCursorError when malformed."""
    try:
        padded = token + "=" * (-len(token) % 4)
        data = json.loads(base64.urlsafe_b64decode(padded.encode("ascii")).decode("utf-8"))
    except (binascii.Error, UnicodeError, ValueError) as e:
        raise InvalidCursorError(token) from e

    offset = data.get("offset") if isinstance(data, dict) else None
    if not isinstance(offset, int) or isinstance(offset, bool) or offset < 0:
        raise InvalidCursorError(token)
    return offset


class PaginationUtils:
    """Slices lists into pages and describes the result."""

    def __init__(self, default_limit: int = DEFAULT_PAGE_SIZE):
        self.default_limit = default_limit

    def resolve_limit(self, request: Optional[PaginationRequest]) -> int:
        if request is None or request.limit <= 0:
            return self.default_limit
        return request.limit

    def paginate(
        self,
        items: List[Any],
        request: Optional[PaginationRequest],
    ) -> Tuple[List[Any], PaginationResponse]:
        request = request or PaginationRequest()
        if request.is_cursor:
            return self.paginate_cursor(items, request)
        return self.paginate_offset(items, request)

    def paginate_offset(self, items: List[Any], request: PaginationRequest) -> Tuple[List[Any], PaginationResponse]:
        limit = self.resolve_limit(request)
        page = request.offset.page if request.offset is not None else 1
        if page < 1:
            raise ListProcessingError("Page must be >= 1", details={"page": page})

        total_items = len(items)
        total_pages = math.ceil(total_items / limit)
        start = (page - 1) * limit
        page_items = list(items[start:start + limit])

        return page_items, PaginationResponse(
            total_items=total_items,
            current_page=page,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        )

    def paginate_cursor(self, items: List[Any], request: PaginationRequest) -> Tuple[List[Any], PaginationResponse]:
        limit = self.resolve_limit(request)
        token = request.cursor.token if request.cursor is not None else ""
        offset = decode_cursor(token) if token else 0

        total_items = len(items)
        page_items = list(items[offset:offset + limit])
        has_next = offset + limit < total_items
        has_prev = offset > 0

        return page_items, PaginationResponse(
            total_items=total_items,
            current_page=offset // limit + 1,
            total_pages=math.ceil(total_items / limit),
            has_next=has_next,
            has_prev=has_prev,
            next_cursor=encode_cursor(offset + limit) if has_next else None,
            prev_cursor=encode_cursor(max(0, offset - limit)) if has_prev else None,
        )

    def create_pagination_response(
        self,
        request: Optional[PaginationRequest],
        total_items: int,
        has_next: bool,
    ) -> PaginationResponse:
        """Describe a page without slicing, e.g. for empty results."""
        limit = self.resolve_limit(request)
        page = 1
        if request is not None and request.offset is not None:
            page = max(request.offset.page, 1)

        return PaginationResponse(
            total_items=total_items,
            current_page=page,
            total_pages=math.ceil(total_items / limit),
            has_next=has_next,
            has_prev=page > 1,
        )
