"""Domain errors – contract violations of the signing primitives."""

from __future__ import annotations

from typing import Any

from mics_hooks.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a signing / encoding rule is violated."""

    default_code = "domain_error"


class InvalidInputError(DomainError):
    """A caller passed an empty secret or an absent metadata / payload.

    Always a programming error on the calling side, never a runtime
    business condition.
    """

    default_code = "invalid_input"


class InvalidKeyError(InvalidInputError):
    """The MAC key is empty."""

    default_code = "invalid_key"

    def __init__(self, message: str = "key is empty", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class MalformedEncodingError(DomainError):
    """A signature string is blank, not base64, or not in canonical form."""

    default_code = "malformed_encoding"


__all__ = [
    "DomainError",
    "InvalidInputError",
    "InvalidKeyError",
    "MalformedEncodingError",
]
