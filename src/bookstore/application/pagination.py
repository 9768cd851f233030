"""Sorting and slicing of in-memory result sets."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from bookstore.application.dto import Page, PageRequest
from bookstore.domain.exceptions import ValidationError

T = TypeVar("T")

MAX_PAGE_SIZE = 100


def paginate(
    items: list[T],
    request: PageRequest,
    sort_keys: dict[str, Callable[[T], Any]],
    tiebreak: Callable[[T], Any],
) -> Page[T]:
    """Sort *items* by ``request.sort`` and return the requested page.

    Items are first ordered by *tiebreak* so that equal sort keys always
    come out in the same order, which keeps page boundaries stable.
    """
    if request.page < 0:
        raise ValidationError("Page index cannot be negative")
    if not 0 < request.size <= MAX_PAGE_SIZE:
        raise ValidationError(f"Page size must be between 1 and {MAX_PAGE_SIZE}")
    key = sort_keys.get(request.sort)
    if key is None:
        raise ValidationError(
            f"Unknown sort key '{request.sort}'. "
            f"Expected one of: {', '.join(sorted(sort_keys))}"
        )

    ordered = sorted(items, key=tiebreak)
    ordered.sort(key=key, reverse=request.descending)

    start = request.page * request.size
    return Page(
        items=ordered[start:start + request.size],
        page=request.page,
        size=request.size,
        total_items=len(ordered),
    )
