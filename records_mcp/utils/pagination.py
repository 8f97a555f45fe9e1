"""Pagination utilities."""
from typing import Optional, Sequence, TypeVar

from pydantic import BaseModel, Field

PAGE_SIZE = 10

T = TypeVar("T")


class PaginationParams(BaseModel):
    limit: int = Field(default=PAGE_SIZE + 1, ge=1, description="Rows to fetch")
    offset: int = Field(default=0, ge=0, description="Number of rows to skip")


def page_window(page: int, page_size: int = PAGE_SIZE) -> PaginationParams:
    """Translate a 1-based page number into limit/offset.

    The limit over-fetches by one row so the response alone tells us
    whether another page exists.
    """
    return PaginationParams(limit=page_size + 1, offset=(page - 1) * page_size)


def split_overfetch(
    rows: Sequence[T], page_size: int = PAGE_SIZE
) -> tuple[list[T], bool]:
    """Split an over-fetched result into (page, has_more).

    has_more is taken from the untrimmed length before the sentinel row
    is dropped.
    """
    has_more = len(rows) > page_size
    return list(rows[:page_size]), has_more


def adjacent_pages(page: int, has_more: bool) -> tuple[Optional[int], Optional[int]]:
    previous_page = None if page == 1 else page - 1
    next_page = page + 1 if has_more else None
    return previous_page, next_page
