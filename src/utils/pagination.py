"""Page slicing for history feeds."""

import math
from typing import Sequence, TypeVar

T = TypeVar("T")

PAGE_SIZE = 10


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    """Number of pages needed for ``count`` rows (at least 1)."""
    return max(1, math.ceil(count / page_size))


def paginate(items: Sequence[T], page: int, page_size: int = PAGE_SIZE) -> list[T]:
    """
    Return the rows of a 1-indexed page.

    Page ``n`` holds rows ``(n-1)*page_size .. n*page_size``; the last page
    may be partial and pages past the end are empty.

    Raises:
        ValueError: If page or page_size is below 1
    """
    if page < 1:
        raise ValueError(f"Page must be 1 or greater, got {page}")
    if page_size < 1:
        raise ValueError(f"Page size must be 1 or greater, got {page_size}")
    end = page * page_size
    return list(items[end - page_size:end])
