"""Root error class for the mics_hooks error hierarchy."""

from __future__ import annotations

import json
from typing import Any

# Detail keys whose values are signing material and never leave the process.
MASKED_DETAIL_KEYS: frozenset[str] = frozenset({"secret", "tenant_secret", "sign", "signature", "token"})
MASK = "***"


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context; keys in :data:`MASKED_DETAIL_KEYS` are
            masked when serialised.
        cause: Original exception that triggered this error.
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
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise for structured logs, masking signing material in ``detail``."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": {k: (MASK if k.lower() in MASKED_DETAIL_KEYS else v) for k, v in self.detail.items()},
        }
        if self.cause is not None:
            payload["cause"] = type(self.cause).__name__
        return payload


__all__ = ["MASK", "MASKED_DETAIL_KEYS", "BaseError"]
