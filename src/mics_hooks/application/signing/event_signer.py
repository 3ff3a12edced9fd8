"""Application signing – MqEventSigner for queue events.

Unlike :class:`HookSigner`, the signature lives on the event itself and
``verify`` derives the cleared form internally; ``sign`` MACs the event
exactly as given, which must already have ``sign`` emptied.
"""
from __future__ import annotations

import hmac

from mics_hooks.application.signing.keys import Secret, is_blank, secret_bytes
from mics_hooks.kernel.contracts import MqEvent
from mics_hooks.kernel.errors import InvalidInputError, MalformedEncodingError
from mics_hooks.kernel.security import decode_canonical, encode_canonical, hmac_sha256
from mics_hooks.wire import encode


class MqEventSigner:
    """Signs and verifies :class:`MqEvent` values using HMAC-SHA256."""

    @staticmethod
    def sign(secret: Secret, event_with_sign_cleared: MqEvent | None) -> str:
        key = secret_bytes(secret)
        if event_with_sign_cleared is None:
            raise InvalidInputError("event is required")
        return encode_canonical(hmac_sha256(key, [encode(event_with_sign_cleared)]))

    @classmethod
    def verify(cls, secret: Secret | None, event: MqEvent | None, require_signature: bool) -> bool:
        """Verify ``event.sign`` in constant time; never raises."""
        if secret is None or is_blank(secret) or event is None:
            return False
        if is_blank(event.sign):
            return not require_signature

        try:
            provided = decode_canonical(event.sign)
        except MalformedEncodingError:
            return False
        expected = decode_canonical(cls.sign(secret, event.cleared()))
        return hmac.compare_digest(expected, provided)


__all__ = ["MqEventSigner"]
