"""Page-window arithmetic over an in-memory list.

Pages are 1-based. A missing or malformed page request falls back to page 1,
and a page past the end yields an empty window rather than an error.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

DEFAULT_PAGE_SIZE = 10

_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class PageResult:
    items: list
    page: int
    page_count: int

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.page_count


def parse_page(raw: Optional[Union[str, int]]) -> int:
    """Return ``raw`` as a positive int, or 1 when absent or invalid.

    Strings must be ASCII digits only (surrounding whitespace allowed);
    non-strings must be real ints, not bools or floats.
    """
    if isinstance(raw, str):
        digits = raw.strip()
        if not _DIGITS.fullmatch(digits):
            return 1
        page = int(digits)
    elif isinstance(raw, int) and not isinstance(raw, bool):
        page = raw
    else:
        return 1
    return page if page >= 1 else 1


def page_count(total: int, page_size: int) -> int:
    # integer ceiling division
    return -(-total // page_size)


def paginate(
    items: Sequence[Any],
    requested_page: Optional[Union[str, int]] = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> PageResult:
    if page_size <= 0:
        raise ValueError(f"page_size must be > 0 (got {page_size})")

    page = parse_page(requested_page)
    start = (page - 1) * page_size
    end = start + page_size

    return PageResult(
        items=list(items[start:end]),
        page=page,
        page_count=page_count(len(items), page_size),
    )
