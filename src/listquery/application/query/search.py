"""Application query – free-text search and the combined inclusion predicate."""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Any

from listquery.application.query.coercion import to_text
from listquery.application.query.filters import FilterValue, Record
from listquery.kernel.paths import resolve
from listquery.kernel.specification import BaseSpecification, all_of


@dataclasses.dataclass(frozen=True)
class SearchSpec(BaseSpecification[Record]):
    """Free-text search over a fixed set of field paths.

    An empty ``term`` matches every record, and so does an empty ``fields``
    tuple. Otherwise a record matches when any field renders to text that
    contains the term (or equals it, with ``exact_match``).
    """

    term: str = ""
    fields: tuple[str, ...] = ()
    case_sensitive: bool = False
    exact_match: bool = False

    def is_satisfied_by(self, candidate: Record) -> bool:
        if not self.term or not self.fields:
            return True
        needle = self.term if self.case_sensitive else self.term.lower()
        for path in self.fields:
            value = resolve(candidate, path)
            if value is None:
                continue
            text = to_text(value)
            if not self.case_sensitive:
                text = text.lower()
            if (text == needle) if self.exact_match else (needle in text):
                return True
        return False

    def with_term(self, term: str) -> "SearchSpec":
        return dataclasses.replace(self, term=term)


def build_predicate(
    search: SearchSpec,
    filters: Mapping[str, FilterValue | None],
) -> BaseSpecification[Record]:
    """AND the search with every active filter; inactive (``None``) entries are skipped."""
    active = [f for f in filters.values() if f is not None]
    return all_of([search, *active])


def matches(
    record: Record,
    search: SearchSpec,
    filters: Mapping[str, FilterValue | None],
) -> bool:
    return build_predicate(search, filters).is_satisfied_by(record)


def filter_records(
    records: Iterable[Any],
    search: SearchSpec,
    filters: Mapping[str, FilterValue | None],
) -> list[Any]:
    """Return the records satisfying the predicate, in their original order."""
    predicate = build_predicate(search, filters)
    return [record for record in records if predicate.is_satisfied_by(record)]


__all__ = ["SearchSpec", "build_predicate", "filter_records", "matches"]
