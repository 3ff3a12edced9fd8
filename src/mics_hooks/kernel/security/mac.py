"""Kernel security – HMAC-SHA256 over ordered byte segments."""
from __future__ import annotations

import hashlib
import hmac
from typing import Iterable

from mics_hooks.kernel.errors import InvalidKeyError

DIGEST_SIZE = hashlib.sha256().digest_size


def hmac_sha256(key: bytes, parts: Iterable[bytes | None]) -> bytes:
    """Return the 32-byte HMAC-SHA256 of the concatenation of *parts*.

    Empty and ``None`` segments are skipped rather than contributing a
    zero-length marker, so ``[b"a", b"", b"b"]`` and ``[b"ab"]`` produce the
    same tag.
    """
    if not key:
        raise InvalidKeyError()
    mac = hmac.new(key, digestmod=hashlib.sha256)
    for part in parts:
        if part:
            mac.update(part)
    return mac.digest()


__all__ = ["DIGEST_SIZE", "hmac_sha256"]
