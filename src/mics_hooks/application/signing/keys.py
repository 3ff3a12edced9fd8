"""Application signing – tenant secret to MAC key normalisation."""
from __future__ import annotations

from mics_hooks.kernel.errors import InvalidInputError

Secret = str | bytes


def is_blank(value: str | bytes | None) -> bool:
    return value is None or not value.strip()


def secret_bytes(secret: Secret | None) -> bytes:
    """Return *secret* as key bytes (UTF-8 for text), rejecting blank secrets."""
    if secret is None or is_blank(secret):
        raise InvalidInputError("tenant secret is blank")
    return secret.encode("utf-8") if isinstance(secret, str) else bytes(secret)


__all__ = ["Secret", "is_blank", "secret_bytes"]
