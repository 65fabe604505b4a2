"""Unit tests for the single-key stable sort."""

from __future__ import annotations

import pytest

from listquery.application.query.sorting import SortDirection, SortSpec, compare, sort_records


def _ids(rows: list[dict]) -> list[int]:
    return [r["id"] for r in rows]


NULLY = [{"id": i, "v": v} for i, v in enumerate([5, None, 1, None, 3])]


class TestSortSpec:
    def test_defaults(self) -> None:
        spec = SortSpec()
        assert spec.key is None
        assert spec.direction is SortDirection.ASC

    def test_same_key_flips(self) -> None:
        spec = SortSpec("year").toggled("year")
        assert spec == SortSpec("year", SortDirection.DESC)
        assert spec.toggled("year").direction is SortDirection.ASC

    def test_new_key_resets_to_asc(self) -> None:
        spec = SortSpec("year", SortDirection.DESC).toggled("make")
        assert spec == SortSpec("make", SortDirection.ASC)

    def test_string_direction_is_coerced(self) -> None:
        assert SortSpec("year", "desc").direction is SortDirection.DESC  # type: ignore[arg-type]

    def test_invalid_direction(self) -> None:
        with pytest.raises(ValueError):
            SortSpec("year", "sideways")  # type: ignore[arg-type]

    def test_to_dict(self) -> None:
        assert SortSpec("year", SortDirection.DESC).to_dict() == {"key": "year", "direction": "desc"}


class TestCompare:
    def test_no_key_is_equal(self) -> None:
        assert compare({"v": 1}, {"v": 2}, SortSpec()) == 0

    def test_ascending(self) -> None:
        assert compare({"v": 1}, {"v": 2}, SortSpec("v")) == -1

    def test_descending_negates(self) -> None:
        assert compare({"v": 1}, {"v": 2}, SortSpec("v", SortDirection.DESC)) == 1

    def test_null_after_value_in_both_directions(self) -> None:
        for direction in SortDirection:
            assert compare({"v": None}, {"v": 1}, SortSpec("v", direction)) == 1
            assert compare({"v": 1}, {}, SortSpec("v", direction)) == -1

    def test_incomparable_values_are_equal(self) -> None:
        assert compare({"v": "abc"}, {"v": 3}, SortSpec("v")) == 0


class TestSortRecords:
    def test_no_key_keeps_order_and_copies(self) -> None:
        result = sort_records(NULLY, SortSpec())
        assert result == NULLY
        assert result is not NULLY

    def test_nulls_last_ascending(self) -> None:
        assert _ids(sort_records(NULLY, SortSpec("v"))) == [2, 4, 0, 1, 3]

    def test_nulls_last_descending(self) -> None:
        assert _ids(sort_records(NULLY, SortSpec("v", SortDirection.DESC))) == [0, 4, 2, 1, 3]

    def test_stable_for_equal_keys(self) -> None:
        rows = [{"id": 1, "make": "Ford"}, {"id": 2, "make": "Audi"}, {"id": 3, "make": "Ford"}]
        assert _ids(sort_records(rows, SortSpec("make"))) == [2, 1, 3]
        assert _ids(sort_records(rows, SortSpec("make", SortDirection.DESC))) == [1, 3, 2]

    def test_numbers_numeric_not_lexical(self) -> None:
        rows = [{"id": 1, "cost": 100}, {"id": 2, "cost": 20}, {"id": 3, "cost": 3.5}]
        assert _ids(sort_records(rows, SortSpec("cost"))) == [3, 2, 1]

    def test_nested_key(self) -> None:
        rows = [{"id": 1, "owner": {"name": "Zed"}}, {"id": 2, "owner": None}, {"id": 3, "owner": {"name": "Amy"}}]
        assert _ids(sort_records(rows, SortSpec("owner.name"))) == [3, 1, 2]
