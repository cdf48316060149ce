from __future__ import annotations

import pytest

from pageconvert.exceptions import InvalidRangeError
from pageconvert.page_range import LAST_PAGE, resolve_page_range


@pytest.mark.parametrize("page_count", [1, 2, 17, 500])
@pytest.mark.parametrize("page_start", [0, 1, 16])
def test_last_page_sentinel_resolves_to_final_index(page_start: int, page_count: int) -> None:
    if page_start > page_count - 1:
        pytest.skip("start outside the document")

    interval = resolve_page_range(page_start, LAST_PAGE, page_count)

    assert (interval.start, interval.end) == (page_start, page_count - 1)


@pytest.mark.parametrize(
    ("page_start", "page_end"),
    [(0, 0), (0, 9), (3, 3), (3, 7), (9, 9)],
)
def test_valid_range_is_returned_unchanged(page_start: int, page_end: int) -> None:
    interval = resolve_page_range(page_start, page_end, 10)

    assert (interval.start, interval.end) == (page_start, page_end)
    assert list(interval.indices()) == list(range(page_start, page_end + 1))
    assert interval.page_count == page_end - page_start + 1


@pytest.mark.parametrize(
    ("page_start", "page_end", "expected_message"),
    [
        (-1, 5, "starting page"),
        (10, LAST_PAGE, "starting page"),
        (6, 5, "starting page"),
        (0, 10, "end page"),
        (2, 42, "end page"),
    ],
)
def test_invalid_range_is_rejected(page_start: int, page_end: int, expected_message: str) -> None:
    with pytest.raises(InvalidRangeError, match=expected_message) as exc_info:
        resolve_page_range(page_start, page_end, 10)

    assert exc_info.value.page_count == 10


def test_start_past_last_page_of_500_page_document_is_rejected() -> None:
    with pytest.raises(InvalidRangeError, match="starting page"):
        resolve_page_range(500, LAST_PAGE, 500)


def test_empty_document_always_fails() -> None:
    with pytest.raises(InvalidRangeError):
        resolve_page_range(0, LAST_PAGE, 0)


def test_full_range_of_500_page_document() -> None:
    interval = resolve_page_range(0, LAST_PAGE, 500)

    assert (interval.start, interval.end, interval.page_count) == (0, 499, 500)
