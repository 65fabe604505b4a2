"""Application query – ListQueryEngine, the state controller for list pages.

The engine owns the query state of one list page (search term, filters, sort,
page, page size, dataset) and derives the visible page from it::

    dataset -> filtered -> sorted -> page

Every mutator ends with :meth:`ListQueryEngine.recompute`. Each stage is
memoized on the state feeding it, so changing pages does not re-filter and
toggling the sort does not re-run the predicate.

Example::

    engine = ListQueryEngine(vehicles, ["make", "model", "plate_no"], items_per_page=10)
    engine.update_filter("owner_id", "null")
    engine.update_sort("year")
    rows, info = engine.data, engine.pagination_info
"""
from __future__ import annotations

import copy
import dataclasses
import types
from typing import Any, Callable, Generic, Hashable, Iterable, Mapping, Sequence, TypeVar

from listquery.application.pagination import PaginationInfo, PaginationState, paginate, total_pages_for
from listquery.application.query.filters import FilterValue, coerce_filter, is_inactive
from listquery.application.query.search import SearchSpec, filter_records
from listquery.application.query.sorting import SortSpec, sort_records
from listquery.config.settings.query import ListQuerySettings
from listquery.observability.logging import get_logger

T = TypeVar("T")
V = TypeVar("V")


@dataclasses.dataclass(frozen=True)
class QueryView(Generic[T]):
    """Immutable snapshot of everything a list page renders."""

    data: tuple[T, ...]
    filtered_data: tuple[T, ...]
    sorted_data: tuple[T, ...]
    search_term: str
    filters: Mapping[str, Any]
    sort_config: SortSpec
    pagination_info: PaginationInfo
    has_active_filters: bool
    is_filtered: bool

    @property
    def is_empty(self) -> bool:
        return len(self.data) == 0


class ListQueryEngine(Generic[T]):
    """Searched, filtered, sorted and paginated view over an in-memory dataset.

    Args:
        dataset: Records in display order; the order breaks sort ties.
        search_fields: Dot paths searched by :meth:`update_search_term`.
        items_per_page: Page size, must be positive.
        case_sensitive: Match the search term case-sensitively.
        exact_match: Require the whole field text to equal the term.
        name: Bound into every log event (e.g. ``"vehicles"``).

    Raises:
        ValidationError: When *items_per_page* is not a positive integer.
    """

    def __init__(
        self,
        dataset: Iterable[T],
        search_fields: Sequence[str] = (),
        *,
        items_per_page: int = 10,
        case_sensitive: bool = False,
        exact_match: bool = False,
        name: str = "list",
    ) -> None:
        self._pagination = PaginationState(page=1, size=items_per_page)
        self._dataset: tuple[T, ...] = tuple(dataset)
        self._search = SearchSpec(
            fields=tuple(search_fields),
            case_sensitive=case_sensitive,
            exact_match=exact_match,
        )
        self._raw_filters: dict[str, Any] = {}
        self._filters: dict[str, FilterValue | None] = {}
        self._sort = SortSpec()
        self._dataset_revision = 0
        self._filter_revision = 0
        self._cache: dict[str, tuple[Hashable, Any]] = {}
        self._log = get_logger(__name__, list_page=name)
        self._view: QueryView[T] = self.recompute()

    @classmethod
    def from_settings(
        cls,
        dataset: Iterable[T],
        search_fields: Sequence[str],
        settings: ListQuerySettings,
        **kwargs: Any,
    ) -> "ListQueryEngine[T]":
        return cls(
            dataset,
            search_fields,
            items_per_page=settings.items_per_page,
            case_sensitive=settings.case_sensitive,
            exact_match=settings.exact_match,
            **kwargs,
        )

    # ------------------------------------------------------------------
    # Derived pipeline
    # ------------------------------------------------------------------

    def _stage(self, name: str, key: Hashable, compute: Callable[[], V]) -> V:
        cached = self._cache.get(name)
        if cached is not None and cached[0] == key:
            return cached[1]
        value = compute()
        self._cache[name] = (key, value)
        return value

    def recompute(self) -> QueryView[T]:
        """Re-derive the filtered, sorted and paged views from the current state."""
        filter_key = (self._dataset_revision, self._search, self._filter_revision)
        filtered: tuple[T, ...] = self._stage(
            "filtered",
            filter_key,
            lambda: tuple(filter_records(self._dataset, self._search, self._filters)),
        )
        sort_key = (filter_key, self._sort)
        ordered: tuple[T, ...] = self._stage(
            "sorted",
            sort_key,
            lambda: tuple(sort_records(filtered, self._sort)),
        )

        clamped = self._pagination.clamped(total_pages_for(len(ordered), self._pagination.size))
        if clamped != self._pagination:
            self._log.debug(
                "list_query.page_clamped",
                from_page=self._pagination.page,
                to_page=clamped.page,
            )
            self._pagination = clamped

        page = self._stage(
            "page",
            (sort_key, self._pagination),
            lambda: paginate(ordered, self._pagination),
        )
        self._view = QueryView(
            data=tuple(page.items),
            filtered_data=filtered,
            sorted_data=ordered,
            search_term=self._search.term,
            filters=types.MappingProxyType(dict(self._raw_filters)),
            sort_config=self._sort,
            pagination_info=page.info,
            has_active_filters=bool(self._raw_filters) or self._search.term != "",
            is_filtered=len(filtered) != len(self._dataset),
        )
        return self._view

    def view(self) -> QueryView[T]:
        return self._view

    # ------------------------------------------------------------------
    # Search & filters
    # ------------------------------------------------------------------

    def _reset_page(self) -> None:
        self._pagination = self._pagination.with_page(1)

    def update_search_term(self, term: str) -> None:
        self._search = self._search.with_term(term or "")
        self._reset_page()
        self._log.debug("list_query.search_updated", term=self._search.term)
        self.recompute()

    def update_filter(self, key: str, value: Any) -> None:
        """Set filter *key*; empty or malformed values keep the key but match everything."""
        value = copy.deepcopy(value)
        compiled = coerce_filter(key, value)
        if compiled is None and not is_inactive(value):
            self._log.debug("list_query.filter_ignored", key=key, value=repr(value))
        self._raw_filters[key] = value
        self._filters[key] = compiled
        self._filter_revision += 1
        self._reset_page()
        self._log.debug(
            "list_query.filter_updated",
            key=key,
            filter=type(compiled).__name__ if compiled is not None else None,
        )
        self.recompute()

    def remove_filter(self, key: str) -> None:
        self._raw_filters.pop(key, None)
        self._filters.pop(key, None)
        self._filter_revision += 1
        self._reset_page()
        self._log.debug("list_query.filter_removed", key=key)
        self.recompute()

    def clear_filters(self) -> None:
        """Drop every filter and the search term."""
        self._raw_filters.clear()
        self._filters.clear()
        self._filter_revision += 1
        self._search = self._search.with_term("")
        self._reset_page()
        self._log.debug("list_query.filters_cleared")
        self.recompute()

    # ------------------------------------------------------------------
    # Sorting
    # ------------------------------------------------------------------

    def update_sort(self, key: str) -> None:
        self._sort = self._sort.toggled(key)
        self._log.debug("list_query.sort_updated", **self._sort.to_dict())
        self.recompute()

    def clear_sort(self) -> None:
        self._sort = SortSpec()
        self._log.debug("list_query.sort_cleared")
        self.recompute()

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------

    def change_page(self, page: int) -> None:
        """Jump to *page*; ignored outside ``[1, total_pages]``."""
        if isinstance(page, bool) or not isinstance(page, int):
            return
        if not 1 <= page <= self.pagination_info.total_pages:
            return
        self._pagination = self._pagination.with_page(page)
        self._log.debug("list_query.page_changed", page=page)
        self.recompute()

    def next_page(self) -> None:
        if self.pagination_info.has_next_page:
            self.change_page(self._pagination.page + 1)

    def previous_page(self) -> None:
        if self.pagination_info.has_previous_page:
            self.change_page(self._pagination.page - 1)

    def set_items_per_page(self, items_per_page: int) -> None:
        """Change the page size; the page is kept unless it no longer exists."""
        self._pagination = self._pagination.with_size(items_per_page)
        self._log.debug("list_query.page_size_updated", items_per_page=items_per_page)
        self.recompute()

    # ------------------------------------------------------------------
    # Dataset
    # ------------------------------------------------------------------

    def set_data(self, dataset: Iterable[T]) -> None:
        """Swap in freshly fetched records, keeping the query state."""
        self._dataset = tuple(dataset)
        self._dataset_revision += 1
        self._log.debug("list_query.data_replaced", total=len(self._dataset))
        self.recompute()

    # ------------------------------------------------------------------
    # Read surface
    # ------------------------------------------------------------------

    @property
    def dataset(self) -> list[T]:
        return list(self._dataset)

    @property
    def data(self) -> list[T]:
        """Records on the current page."""
        return list(self._view.data)

    @property
    def filtered_data(self) -> list[T]:
        return list(self._view.filtered_data)

    @property
    def sorted_data(self) -> list[T]:
        return list(self._view.sorted_data)

    @property
    def search_term(self) -> str:
        return self._search.term

    @property
    def search_spec(self) -> SearchSpec:
        return self._search

    @property
    def filters(self) -> Mapping[str, Any]:
        """Filter values exactly as they were set."""
        return self._view.filters

    @property
    def sort_config(self) -> SortSpec:
        return self._sort

    @property
    def pagination_info(self) -> PaginationInfo:
        return self._view.pagination_info

    @property
    def has_active_filters(self) -> bool:
        return self._view.has_active_filters

    @property
    def is_empty(self) -> bool:
        return self._view.is_empty

    @property
    def is_filtered(self) -> bool:
        return self._view.is_filtered


__all__ = ["ListQueryEngine", "QueryView"]
