"""Testing generators – fluent record builders."""
from __future__ import annotations

import copy
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Builder(Generic[T]):
    """Generic fluent builder base for constructing test records.

    Each ``with_*`` call returns a **new** builder instance so the original
    remains unchanged::

        base = VehicleBuilder()
        unassigned = base.with_(owner_id=None)
        old = base.with_(year=1999)
    """

    def __init__(self) -> None:
        self._attrs: dict[str, Any] = {}

    # ------------------------------------------------------------------
    # Fluent API
    # ------------------------------------------------------------------

    def with_(self, **kwargs: Any) -> "Builder[T]":
        """Return a shallow copy of this builder with *kwargs* applied."""
        clone = copy.copy(self)
        clone._attrs = {**self._attrs, **kwargs}  # noqa: SLF001
        return clone

    def override(self, key: str, value: Any) -> "Builder[T]":
        """Single-key variant of :meth:`with_`; dotted keys set nested fields."""
        if "." not in key:
            return self.with_(**{key: value})
        head, _, rest = key.partition(".")
        nested = self._attrs.get(head)
        inner = RecordBuilder(**nested) if isinstance(nested, dict) else RecordBuilder()
        return self.with_(**{head: inner.override(rest, value).build()})

    @property
    def attrs(self) -> dict[str, Any]:
        """Return a snapshot of the current attribute dict."""
        return dict(self._attrs)

    def build(self) -> T:  # type: ignore[misc]
        """Construct and return the target object.  Must be overridden."""
        raise NotImplementedError(  # pragma: no cover
            f"{type(self).__name__}.build() is not implemented"
        )

    def __call__(self, **overrides: Any) -> T:
        if overrides:
            return self.with_(**overrides).build()
        return self.build()


class RecordBuilder(Builder[dict[str, Any]]):
    """Builds plain ``dict`` records, the shape list pages receive from the API."""

    def __init__(self, **defaults: Any) -> None:
        super().__init__()
        self._attrs = dict(defaults)

    def build(self) -> dict[str, Any]:
        return copy.deepcopy(self._attrs)


class VehicleBuilder(RecordBuilder):
    """Vehicle row as returned by the vehicles endpoint."""

    def __init__(self) -> None:
        super().__init__(
            vehicle_id=1,
            make="Toyota",
            model="Corolla",
            plate_no="ABC123",
            year=2015,
            vehicle_type="sedan",
            owner_id=1,
        )


class OwnerBuilder(RecordBuilder):
    """Owner row as returned by the owners endpoint."""

    def __init__(self) -> None:
        super().__init__(owner_id=1, name="Jane Doe", contact="555-0100")


__all__ = ["Builder", "OwnerBuilder", "RecordBuilder", "VehicleBuilder"]
