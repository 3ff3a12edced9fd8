"""Kernel security – canonical base64 for signature strings.

A signature string is accepted only when it is exactly what the standard
base64 encoder produces for the decoded bytes. Missing padding, URL-safe
alphabet, embedded whitespace and non-zero trailing bits all map several
strings onto the same bytes and are rejected.
"""
from __future__ import annotations

import base64
import binascii

from mics_hooks.kernel.errors import MalformedEncodingError


def encode_canonical(raw: bytes) -> str:
    """Return the standard, padded base64 text for *raw*."""
    return base64.b64encode(raw).decode("ascii")


def decode_canonical(text: str) -> bytes:
    """Decode *text*, raising :class:`MalformedEncodingError` unless canonical."""
    if not text or not text.strip():
        raise MalformedEncodingError("base64 is blank")
    try:
        decoded = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise MalformedEncodingError("base64 is invalid", cause=exc) from exc
    if encode_canonical(decoded) != text:
        raise MalformedEncodingError("base64 is not canonical")
    return decoded


def is_canonical(text: str) -> bool:
    try:
        decode_canonical(text)
    except MalformedEncodingError:
        return False
    return True


__all__ = ["decode_canonical", "encode_canonical", "is_canonical"]
