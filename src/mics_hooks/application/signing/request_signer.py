"""Application signing – HookSigner for synchronous hook requests.

The signed bytes are::

    serialize(payload with meta.signature cleared)
    || utf8(meta.request_id)
    || int64_le(meta.timestamp_ms)

``request_id`` and ``timestamp_ms`` are bound again after the payload so
that a payload built with stale or mismatched metadata cannot reuse a
signature. Timestamp freshness is the caller's job.
"""
from __future__ import annotations

import hmac
from typing import Any

from mics_hooks.application.signing.keys import Secret, is_blank, secret_bytes
from mics_hooks.kernel.contracts import HookMeta
from mics_hooks.kernel.errors import InvalidInputError, MalformedEncodingError
from mics_hooks.kernel.security import decode_canonical, encode_canonical, hmac_sha256
from mics_hooks.wire import encode


def _payload_bytes(payload: Any) -> bytes:
    if isinstance(payload, (bytes, bytearray, memoryview)):
        return bytes(payload)
    return encode(payload)


class HookSigner:
    """Signs and verifies hook request envelopes using HMAC-SHA256.

    The caller passes the payload with its embedded ``meta.signature``
    already cleared (see :func:`~mics_hooks.kernel.contracts.clear_meta_signature`);
    the signer does not clear it.
    """

    @staticmethod
    def sign(secret: Secret, meta: HookMeta | None, payload_with_signature_cleared: Any) -> str:
        """Return the canonical base64 signature for *payload_with_signature_cleared*."""
        key = secret_bytes(secret)
        if meta is None:
            raise InvalidInputError("meta is required")
        if payload_with_signature_cleared is None:
            raise InvalidInputError("payload is required")

        payload = _payload_bytes(payload_with_signature_cleared)
        request_id = meta.request_id.encode("utf-8")
        timestamp = meta.timestamp_ms.to_bytes(8, "little", signed=True)
        return encode_canonical(hmac_sha256(key, [payload, request_id, timestamp]))

    @classmethod
    def verify(
        cls,
        secret: Secret | None,
        meta: HookMeta | None,
        payload_with_signature_cleared: Any,
        require_signature: bool,
    ) -> bool:
        """Verify ``meta.signature`` in constant time; never raises.

        A blank signature passes only when *require_signature* is false.
        """
        if secret is None or is_blank(secret) or meta is None:
            return False
        if is_blank(meta.signature):
            return not require_signature
        if payload_with_signature_cleared is None:
            return False

        try:
            provided = decode_canonical(meta.signature)
        except MalformedEncodingError:
            return False
        expected = decode_canonical(cls.sign(secret, meta, payload_with_signature_cleared))
        return hmac.compare_digest(expected, provided)


__all__ = ["HookSigner"]
