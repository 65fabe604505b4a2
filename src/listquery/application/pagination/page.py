"""Application pagination – Page, PaginationInfo and the paginate stage."""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Generic, Sequence, TypeVar

from listquery.application.pagination.state import PaginationState

T = TypeVar("T")


def total_pages_for(total_items: int, size: int) -> int:
    """Number of pages; an empty result still has one (empty) page."""
    return max(1, math.ceil(total_items / size))


@dataclasses.dataclass(frozen=True)
class PaginationInfo:
    """Navigation metadata for the current page."""

    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int

    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.current_page > 1

    def to_dict(self) -> dict[str, Any]:
        """camelCase payload consumed by the list-page templates."""
        return {
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
            "totalItems": self.total_items,
            "itemsPerPage": self.items_per_page,
            "hasNextPage": self.has_next_page,
            "hasPreviousPage": self.has_previous_page,
        }


@dataclasses.dataclass(frozen=True)
class Page(Generic[T]):
    """One slice of the sorted records plus its metadata."""

    items: list[T]
    info: PaginationInfo

    @classmethod
    def of(cls, all_items: Sequence[T], state: PaginationState) -> "Page[T]":
        """Build a :class:`Page` by slicing *all_items* with *state*."""
        total = len(all_items)
        start = state.offset
        return cls(
            items=list(all_items[start:start + state.size]),
            info=PaginationInfo(
                current_page=state.page,
                total_pages=total_pages_for(total, state.size),
                total_items=total,
                items_per_page=state.size,
            ),
        )


def paginate(sorted_items: Sequence[T], state: PaginationState) -> Page[T]:
    return Page.of(sorted_items, state)


__all__ = ["Page", "PaginationInfo", "paginate", "total_pages_for"]
