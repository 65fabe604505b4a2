"""Application query – filters that need data the engine never sees.

``vehicle_count_filter`` is a pass-through inside :class:`ListQueryEngine`
because counting an owner's vehicles is a join against a second collection.
Owner list pages narrow the owners here and hand the result to the engine.
"""
from __future__ import annotations

from collections import Counter
from typing import Any, Iterable, Mapping

from listquery.kernel.paths import resolve

HAS_VEHICLES = "has_vehicles"
NO_VEHICLES = "no_vehicles"


def count_by(records: Iterable[Mapping[str, Any]], path: str) -> Counter:
    """Count records per value at *path*, skipping records where it is missing."""
    return Counter(v for v in (resolve(r, path) for r in records) if v is not None)


def vehicle_count_prefilter(
    owners: Iterable[Mapping[str, Any]],
    vehicles: Iterable[Mapping[str, Any]],
    mode: str | None,
    *,
    owner_key: str = "owner_id",
) -> list[Mapping[str, Any]]:
    """Keep owners with (``"has_vehicles"``) or without (``"no_vehicles"``) vehicles.

    Any other *mode*, including ``""`` and ``None``, keeps every owner.
    Vehicles reference their owner through the same *owner_key* path.
    """
    owners = list(owners)
    if mode not in (HAS_VEHICLES, NO_VEHICLES):
        return owners
    counts = count_by(vehicles, owner_key)
    wanted = mode == HAS_VEHICLES
    return [o for o in owners if (counts[resolve(o, owner_key)] > 0) == wanted]


__all__ = ["HAS_VEHICLES", "NO_VEHICLES", "count_by", "vehicle_count_prefilter"]
