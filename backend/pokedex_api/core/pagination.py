"""Pagination — maps (page, limit) into an offset window and response metadata.

Invariants:
    - page <= 0 is clamped to 1; limit <= 0 is clamped to DEFAULT_LIMIT
    - limit is capped at MAX_LIMIT before the offset is computed, so offset,
      itemsPerPage and totalPages all describe the same page size
    - total_pages == ceil(total_items / limit); 0 items -> 0 pages
"""

import math
from dataclasses import dataclass

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100


@dataclass(frozen=True)
class PageWindow:
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def paginate(page: int | None = None, limit: int | None = None) -> PageWindow:
    """Clamp and cap the requested page window."""
    if page is None or page <= 0:
        page = DEFAULT_PAGE
    if limit is None or limit <= 0:
        limit = DEFAULT_LIMIT
    return PageWindow(page=page, limit=min(limit, MAX_LIMIT))


def build_pagination_meta(window: PageWindow, total_items: int) -> dict:
    total_pages = math.ceil(total_items / window.limit)
    return {
        "currentPage": window.page,
        "totalPages": total_pages,
        "totalItems": total_items,
        "itemsPerPage": window.limit,
        "hasNextPage": window.page < total_pages,
        "hasPreviousPage": window.page > 1,
    }
