"""Pagination window calculation.

``compute_range`` turns a current page and a page count into the tokens a
pagination control shows: page numbers, with ``ELLIPSIS`` standing in for
collapsed runs. The sequence always starts at page 1, ends at the last
page, and never exceeds ``2 * sibling_count + 5`` tokens.
"""

from math import ceil
from typing import Sequence, TypeVar

from pydantic import Field

from ask.domain.value import ELLIPSIS, PageToken
from ask.domain.value.common import ValueObject

T = TypeVar("T")


class PageState(ValueObject):
    """What pagination controls need to render."""

    current_page: int = Field(ge=1)
    total_pages: int = Field(ge=1)
    items_per_page: int = Field(ge=1)
    total_items: int = Field(ge=0)
    tokens: list[PageToken]

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages


def compute_range(
    current_page: int, total_pages: int, sibling_count: int = 1
) -> list[PageToken]:
    """Compute the page tokens around the current page.

    Args:
        current_page: 1-based page being shown
        total_pages: Number of pages (at least 1)
        sibling_count: Pages shown on each side of the current page

    Returns:
        Page numbers and ELLIPSIS markers, in display order

    Raises:
        ValueError: If the arguments are out of range
    """
    if total_pages < 1:
        raise ValueError("total_pages must be at least 1")
    if not 1 <= current_page <= total_pages:
        raise ValueError(f"current_page must be between 1 and {total_pages}")
    if sibling_count < 0:
        raise ValueError("sibling_count must not be negative")

    # first + last + current + siblings + two ellipsis slots
    window_size = sibling_count * 2 + 5
    if total_pages <= window_size:
        return list(range(1, total_pages + 1))

    left_sibling = max(current_page - sibling_count, 1)
    right_sibling = min(current_page + sibling_count, total_pages)

    show_left_ellipsis = left_sibling > 2
    show_right_ellipsis = right_sibling < total_pages - 1

    # Pages shown on the uncollapsed side when only one ellipsis is needed
    edge_count = 3 + 2 * sibling_count

    if show_right_ellipsis and not show_left_ellipsis:
        return [*range(1, edge_count + 1), ELLIPSIS, total_pages]

    if show_left_ellipsis and not show_right_ellipsis:
        return [1, ELLIPSIS, *range(total_pages - edge_count + 1, total_pages + 1)]

    if show_left_ellipsis and show_right_ellipsis:
        return [
            1,
            ELLIPSIS,
            *range(left_sibling, right_sibling + 1),
            ELLIPSIS,
            total_pages,
        ]

    # Unreachable past the window guard above
    return list(range(1, total_pages + 1))


def count_pages(total_items: int, items_per_page: int) -> int:
    """Number of pages needed for the items (an empty set still has one)."""
    if items_per_page < 1:
        raise ValueError("items_per_page must be at least 1")
    return max(1, ceil(total_items / items_per_page))


def paginate(
    items: Sequence[T],
    page: int,
    items_per_page: int,
    sibling_count: int = 1,
) -> tuple[list[T], PageState]:
    """Slice one page out of a result set.

    Pages past the end are clamped to the last page, and pages below 1 to
    the first, so a narrowed filter never lands on an empty page.

    Args:
        items: Full, already ordered result set
        page: Requested 1-based page
        items_per_page: Page size
        sibling_count: Passed through to compute_range

    Returns:
        The items on the page and the page state
    """
    total_pages = count_pages(len(items), items_per_page)
    current_page = min(max(page, 1), total_pages)

    start = (current_page - 1) * items_per_page
    page_items = list(items[start : start + items_per_page])

    state = PageState(
        current_page=current_page,
        total_pages=total_pages,
        items_per_page=items_per_page,
        total_items=len(items),
        tokens=compute_range(current_page, total_pages, sibling_count),
    )
    return page_items, state
