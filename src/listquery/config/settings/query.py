"""Config settings – defaults for list query engines."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from listquery.config.settings.base import Settings
from listquery.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class ListQuerySettings(Settings):
    """Engine defaults, overridable through ``LISTQUERY_*`` environment variables."""

    _prefix: ClassVar[str] = "LISTQUERY"

    items_per_page: int = 10
    case_sensitive: bool = False
    exact_match: bool = False

    def _validate(self) -> None:
        if isinstance(self.items_per_page, bool) or not isinstance(self.items_per_page, int):
            raise InvalidSettingValueError("items_per_page", self.items_per_page, "must be an integer")
        if self.items_per_page <= 0:
            raise InvalidSettingValueError("items_per_page", self.items_per_page, "must be > 0")


__all__ = ["ListQuerySettings"]
