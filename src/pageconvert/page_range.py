"""Page-range resolution for the rasterizer."""

from __future__ import annotations

from pageconvert.exceptions import InvalidRangeError
from pageconvert.typing.models import PageInterval

LAST_PAGE = -1

_INVALID_START = "Invalid starting page. Must be at least 0 and less than the total page count."
_INVALID_END = (
    "Invalid end page. Must not be less than the starting page nor greater than the last page."
)


def resolve_page_range(page_start: int, page_end: int, page_count: int) -> PageInterval:
    """Resolve a requested page range against a document.

    Args:
        page_start: First zero-based page to render.
        page_end: Last zero-based page to render, or `LAST_PAGE` for the document's last page.
        page_count: Number of pages in the document.

    Raises:
        InvalidRangeError: If the range is inverted or falls outside `[0, page_count - 1]`.

    Returns:
        PageInterval: Inclusive, non-empty interval of page indices.
    """
    last_index = page_count - 1
    if page_end == LAST_PAGE:
        page_end = last_index

    if page_start < 0 or page_start > last_index or page_start > page_end:
        raise InvalidRangeError(page_start, page_end, page_count, _INVALID_START)
    if page_end < page_start or page_end > last_index:
        raise InvalidRangeError(page_start, page_end, page_count, _INVALID_END)

    return PageInterval(start=page_start, end=page_end)
