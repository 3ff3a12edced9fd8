"""Unit tests for HookSigner (synchronous hook requests)."""
from __future__ import annotations

import base64
import dataclasses
import hashlib
import hmac
import struct

import pytest

from mics_hooks.application.signing import HookSigner
from mics_hooks.kernel.contracts import AuthRequest, HookMeta, clear_meta_signature
from mics_hooks.kernel.errors import InvalidInputError
from mics_hooks.wire import encode

SECRET = "secret"
META = HookMeta(tenant_id="t1", request_id="rid-1", timestamp_ms=123456789, trace_id="tr-1")
REQUEST = AuthRequest(meta=META, token="valid:u1", device_id="dev1")


def _signed(request: AuthRequest = REQUEST, secret: str = SECRET) -> AuthRequest:
    assert request.meta is not None
    signature = HookSigner.sign(secret, request.meta, clear_meta_signature(request))
    return dataclasses.replace(request, meta=dataclasses.replace(request.meta, signature=signature))


def _verify(request: AuthRequest, secret: str | None = SECRET, require_signature: bool = True) -> bool:
    return HookSigner.verify(secret, request.meta, clear_meta_signature(request), require_signature)


class TestSign:
    def test_signature_is_canonical_base64_of_32_bytes(self) -> None:
        signature = HookSigner.sign(SECRET, META, REQUEST)
        assert len(signature) == 44
        assert signature.endswith("=")

    def test_deterministic(self) -> None:
        assert HookSigner.sign(SECRET, META, REQUEST) == HookSigner.sign(SECRET, META, REQUEST)

    def test_bytes_secret_equals_utf8_text_secret(self) -> None:
        assert HookSigner.sign(b"secret", META, REQUEST) == HookSigner.sign("secret", META, REQUEST)

    def test_serialized_payload_equals_message_payload(self) -> None:
        assert HookSigner.sign(SECRET, META, encode(REQUEST)) == HookSigner.sign(SECRET, META, REQUEST)

    def test_request_id_is_bound(self) -> None:
        other = dataclasses.replace(META, request_id="rid-2")
        assert HookSigner.sign(SECRET, other, REQUEST) != HookSigner.sign(SECRET, META, REQUEST)

    def test_timestamp_is_bound(self) -> None:
        other = dataclasses.replace(META, timestamp_ms=META.timestamp_ms + 1)
        assert HookSigner.sign(SECRET, other, REQUEST) != HookSigner.sign(SECRET, META, REQUEST)

    @pytest.mark.parametrize("secret", ["", "   ", b"", None])
    def test_blank_secret_rejected(self, secret: object) -> None:
        with pytest.raises(InvalidInputError):
            HookSigner.sign(secret, META, REQUEST)  # type: ignore[arg-type]

    def test_missing_meta_rejected(self) -> None:
        with pytest.raises(InvalidInputError):
            HookSigner.sign(SECRET, None, REQUEST)

    def test_missing_payload_rejected(self) -> None:
        with pytest.raises(InvalidInputError):
            HookSigner.sign(SECRET, META, None)


class TestInteropVector:
    # proto3 bytes of AuthRequest(meta=HookMeta("t1", "rid-1", 123456789), token="valid:u1", device_id="dev1")
    PAYLOAD = (
        b"\x0a\x10\x0a\x02t1\x12\x05rid-1\x18\x95\x9a\xef\x3a"
        b"\x12\x08valid:u1\x1a\x04dev1"
    )

    def test_signature_matches_independent_hmac(self) -> None:
        meta = HookMeta(tenant_id="t1", request_id="rid-1", timestamp_ms=123456789)
        request = AuthRequest(meta=meta, token="valid:u1", device_id="dev1")
        assert encode(request) == self.PAYLOAD
        mac = hmac.new(b"secret", self.PAYLOAD + b"rid-1" + struct.pack("<q", 123456789), hashlib.sha256)
        expected = base64.b64encode(mac.digest()).decode("ascii")
        assert HookSigner.sign(SECRET, meta, request) == expected
        assert HookSigner.sign(SECRET, meta, self.PAYLOAD) == expected

    def test_negative_timestamp_is_twos_complement(self) -> None:
        meta = HookMeta(tenant_id="t1", request_id="r", timestamp_ms=-1)
        mac = hmac.new(b"secret", b"body" + b"r" + b"\xff" * 8, hashlib.sha256)
        assert HookSigner.sign(SECRET, meta, b"body") == base64.b64encode(mac.digest()).decode("ascii")


class TestVerify:
    def test_signed_request_verifies(self) -> None:
        assert _verify(_signed()) is True

    def test_verify_does_not_mutate_request(self) -> None:
        signed = _signed()
        before = signed.meta.signature  # type: ignore[union-attr]
        _verify(signed)
        assert signed.meta.signature == before  # type: ignore[union-attr]

    def test_wrong_secret_fails(self) -> None:
        assert _verify(_signed(), secret="other") is False

    def test_tampered_payload_fails(self) -> None:
        assert _verify(dataclasses.replace(_signed(), token="valid:u2")) is False

    def test_tampered_trace_id_fails(self) -> None:
        signed = _signed()
        tampered = dataclasses.replace(signed, meta=dataclasses.replace(signed.meta, trace_id="tr-x"))
        assert _verify(tampered) is False

    def test_stripped_padding_fails(self) -> None:
        signed = _signed()
        meta = signed.meta
        assert meta is not None and meta.signature.endswith("=")
        stripped = dataclasses.replace(signed, meta=dataclasses.replace(meta, signature=meta.signature[:-1]))
        assert _verify(stripped) is False

    def test_garbage_signature_fails_without_raising(self) -> None:
        bad = dataclasses.replace(REQUEST, meta=dataclasses.replace(META, signature="%%%"))
        assert _verify(bad) is False

    def test_blank_signature_depends_on_require_signature(self) -> None:
        assert _verify(REQUEST, require_signature=True) is False
        assert _verify(REQUEST, require_signature=False) is True

    def test_present_signature_is_checked_even_when_not_required(self) -> None:
        bad = dataclasses.replace(REQUEST, meta=dataclasses.replace(META, signature="AAAA"))
        assert _verify(bad, require_signature=False) is False

    @pytest.mark.parametrize("secret", [None, "", "  "])
    def test_blank_secret_fails(self, secret: str | None) -> None:
        assert _verify(_signed(), secret=secret) is False

    def test_missing_meta_fails(self) -> None:
        assert HookSigner.verify(SECRET, None, REQUEST, True) is False

    def test_missing_payload_fails(self) -> None:
        assert HookSigner.verify(SECRET, _signed().meta, None, True) is False
