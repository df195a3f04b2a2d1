"""Page-number to offset/limit translation shared by the listing services."""

from __future__ import annotations

from typing import Optional

# Keeps (page - 1) * page_size inside SQLite's signed 64-bit INTEGER for any
# page_size the settings accept.
MAX_PAGE = 1_000_000


def page_bounds(page: Optional[int], page_size: int) -> tuple[int, Optional[int]]:
    """Return (offset, limit) for a 1-based page number.

    page=None means "no pagination": offset 0 and no limit.
    Raises ValueError for page < 1 or page > MAX_PAGE.
    """
    if page is None:
        return 0, None
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if page > MAX_PAGE:
        raise ValueError(f"page must be <= {MAX_PAGE}, got {page}")
    return (page - 1) * page_size, page_size
