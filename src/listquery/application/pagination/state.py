"""Application pagination – PaginationState."""
from __future__ import annotations

import dataclasses

from listquery.kernel.errors import ValidationError


@dataclasses.dataclass(frozen=True)
class PaginationState:
    """Offset-based pagination parameters."""
    page: int = 1
    size: int = 10

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size < 1:
            raise ValidationError(
                "items_per_page must be a positive integer",
                code="invalid_items_per_page",
                errors=[{"field": "items_per_page", "value": self.size}],
            )
        if isinstance(self.page, bool) or not isinstance(self.page, int) or self.page < 1:
            raise ValidationError(
                "page must be >= 1",
                code="invalid_page",
                errors=[{"field": "page", "value": self.page}],
            )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size

    def with_page(self, page: int) -> "PaginationState":
        return dataclasses.replace(self, page=page)

    def with_size(self, size: int) -> "PaginationState":
        return dataclasses.replace(self, size=size)

    def clamped(self, total_pages: int) -> "PaginationState":
        """Pull the page back into ``[1, total_pages]``; unchanged when already inside."""
        page = min(max(self.page, 1), max(total_pages, 1))
        return self if page == self.page else self.with_page(page)


__all__ = ["PaginationState"]
