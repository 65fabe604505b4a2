"""Root error class for the listquery error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Every error raised by listquery derives from this.

    Args:
        message: What went wrong, for people.
        code: Stable slug for callers to branch on; ``default_code`` if omitted.
        detail: Extra key/values describing the failing input.
        cause: Lower-level exception, also chained as ``__cause__``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        # one JSON line, so structlog renders it verbatim
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code!r}, {self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            out["cause"] = repr(self.cause)
        return out


__all__ = ["BaseError"]
