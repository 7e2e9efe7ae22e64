"""Root error class for the authorizer error hierarchy.

Every error carries a ``code`` (which class of failure) and an optional
``reason`` (which rule inside it failed).  Both are short slugs that are safe
to log; request material such as the bearer token never goes into ``detail``.
"""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        reason: Finer-grained slug, mirrored into ``detail["reason"]``.
        detail: Extra context, kept JSON-serialisable.
        cause: Original exception that triggered this error.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        reason: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.reason = reason
        self.detail: dict[str, Any] = dict(detail or {})
        if reason is not None:
            self.detail.setdefault("reason", reason)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        if self.reason is None:
            return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"
        return f"{type(self).__name__}(code={self.code!r}, reason={self.reason!r}, message={self.message!r})"

    def log_fields(self) -> dict[str, Any]:
        """Key/value pairs for a structured log line: code, reason and cause type."""
        fields: dict[str, Any] = {"code": self.code}
        if self.reason is not None:
            fields["reason"] = self.reason
        if self.cause is not None:
            fields["cause"] = type(self.cause).__name__
        return fields

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (safe for structured logging)."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)


__all__ = ["BaseError"]
