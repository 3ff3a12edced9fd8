"""Application events – decode a raw queue record and verify its signature."""
from __future__ import annotations

from dataclasses import dataclass

from mics_hooks.application.signing import MqEventSigner
from mics_hooks.application.signing.keys import Secret
from mics_hooks.kernel.contracts import MqEvent
from mics_hooks.wire import decode

INVALID_SIGN = "invalid sign"


@dataclass(frozen=True)
class MqVerifyResult:
    ok: bool
    event: MqEvent
    reason: str = ""


def decode_and_verify_mq_event(data: bytes, secret: Secret | None, require_signature: bool) -> MqVerifyResult:
    """Parse *data* as an :class:`MqEvent` and check its signature.

    Raises :class:`~mics_hooks.kernel.errors.SerializationError` when the
    record is not a valid event; a bad signature is reported in the result.
    """
    event = decode(MqEvent, data)
    if MqEventSigner.verify(secret, event, require_signature):
        return MqVerifyResult(ok=True, event=event)
    return MqVerifyResult(ok=False, event=event, reason=INVALID_SIGN)


__all__ = ["INVALID_SIGN", "MqVerifyResult", "decode_and_verify_mq_event"]
