"""Unit tests for the protobuf wire codec."""
from __future__ import annotations

import pytest

from mics_hooks.kernel.contracts import (
    AuthRequest,
    AuthResponse,
    ConnectAck,
    EventType,
    GetGroupMembersResponse,
    GetOfflineMessagesResponse,
    HookMeta,
    MessageRequest,
    MessageType,
    MqEvent,
    TenantRuntimeConfig,
)
from mics_hooks.kernel.errors import SerializationError
from mics_hooks.wire import decode, encode, to_message

META = HookMeta(tenant_id="t1", request_id="rid-1", timestamp_ms=123456789, signature="", trace_id="tr-1")

# Hand-assembled proto3 bytes for the cross-language interop vectors
AUTH_REQUEST_BYTES = (
    b"\x0a\x10"  # meta, 16 bytes
    b"\x0a\x02t1"  # meta.tenant_id
    b"\x12\x05rid-1"  # meta.request_id
    b"\x18\x95\x9a\xef\x3a"  # meta.timestamp_ms = 123456789
    b"\x12\x08valid:u1"  # token
    b"\x1a\x04dev1"  # device_id
)
MQ_EVENT_BYTES = b"\x0a\x02t1" b"\x10\x02" b"\x1a\x02m1"

# AuthRequest.device_id (field 3, length-delimited) claims 5 bytes but carries 2
TRUNCATED = b"\x1a\x05ab"


class TestEncodeDecode:
    def test_auth_request(self) -> None:
        req = AuthRequest(meta=META, token="valid:u1", device_id="dev1")
        assert decode(AuthRequest, encode(req)) == req

    def test_absent_meta_stays_absent(self) -> None:
        assert decode(AuthRequest, encode(AuthRequest(token="x"))).meta is None

    def test_empty_meta_stays_present(self) -> None:
        req = AuthRequest(meta=HookMeta())
        assert decode(AuthRequest, encode(req)).meta == HookMeta()

    def test_default_values_encode_to_nothing(self) -> None:
        assert encode(HookMeta()) == b""
        assert decode(HookMeta, b"") == HookMeta()

    def test_signature_is_the_sign_field(self) -> None:
        pb = to_message(HookMeta(signature="abc="))
        assert pb.sign == "abc="

    def test_negative_timestamp(self) -> None:
        meta = HookMeta(timestamp_ms=-1)
        assert decode(HookMeta, encode(meta)).timestamp_ms == -1

    def test_repeated_fields_become_tuples(self) -> None:
        resp = GetGroupMembersResponse(meta=META, user_ids=("u1", "u2"))
        decoded = decode(GetGroupMembersResponse, encode(resp))
        assert decoded.user_ids == ("u1", "u2")

    def test_offline_messages(self) -> None:
        resp = GetOfflineMessagesResponse(
            ok=True,
            messages=(MessageRequest(msg_id="m1", msg_body=b"\x00hi"), MessageRequest(msg_id="m2")),
            next_cursor="c2",
            has_more=True,
        )
        assert decode(GetOfflineMessagesResponse, encode(resp)) == resp


class TestInteropVectors:
    def test_auth_request_bytes_are_pinned(self) -> None:
        meta = HookMeta(tenant_id="t1", request_id="rid-1", timestamp_ms=123456789)
        req = AuthRequest(meta=meta, token="valid:u1", device_id="dev1")
        assert encode(req) == AUTH_REQUEST_BYTES
        assert decode(AuthRequest, AUTH_REQUEST_BYTES) == req

    def test_mq_event_bytes_are_pinned(self) -> None:
        event = MqEvent(tenant_id="t1", event_type=EventType.SINGLE_CHAT_MSG, msg_id="m1")
        assert encode(event) == MQ_EVENT_BYTES
        assert decode(MqEvent, MQ_EVENT_BYTES) == event


class TestTenantRuntimeConfig:
    def test_unset_optionals_stay_none(self) -> None:
        resp = AuthResponse(ok=True, config=TenantRuntimeConfig(hook_base_url="http://h"))
        cfg = decode(AuthResponse, encode(resp)).config
        assert cfg is not None
        assert cfg.hook_max_concurrency is None
        assert cfg.offline_use_hook_pull is None

    def test_explicit_zero_and_false_are_kept(self) -> None:
        cfg = TenantRuntimeConfig(hook_max_concurrency=0, hook_sign_required=False)
        decoded = decode(TenantRuntimeConfig, encode(cfg))
        assert decoded.hook_max_concurrency == 0
        assert decoded.hook_sign_required is False

    def test_secret_round_trips(self) -> None:
        cfg = TenantRuntimeConfig(tenant_secret="s3cret", tenant_max_message_qps=50)
        assert decode(TenantRuntimeConfig, encode(cfg)) == cfg


class TestEnums:
    def test_known_values_decode_to_enum(self) -> None:
        event = decode(MqEvent, encode(MqEvent(event_type=EventType.GROUP_CHAT_MSG)))
        assert event.event_type is EventType.GROUP_CHAT_MSG

    def test_unknown_event_type_is_kept_as_int(self) -> None:
        event = decode(MqEvent, encode(MqEvent(event_type=42)))
        assert event.event_type == 42
        assert not isinstance(event.event_type, EventType)

    def test_message_type(self) -> None:
        msg = decode(MessageRequest, encode(MessageRequest(msg_type=MessageType.GROUP_CHAT)))
        assert msg.msg_type is MessageType.GROUP_CHAT


class TestErrors:
    def test_truncated_bytes_raise_serialization_error(self) -> None:
        with pytest.raises(SerializationError) as exc_info:
            decode(AuthRequest, TRUNCATED)
        assert exc_info.value.payload_type == "AuthRequest"

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(SerializationError):
            encode(object())

    def test_connect_ack(self) -> None:
        ack = ConnectAck(code=1000, tenant_id="t1", user_id="u1", device_id="d1", node_id="n1", trace_id="tr")
        assert decode(ConnectAck, encode(ack)) == ack

    def test_unknown_fields_are_dropped(self) -> None:
        # field 15, varint 1: not part of HookMeta
        data = encode(HookMeta(tenant_id="t1")) + b"\x78\x01"
        meta = decode(HookMeta, data)
        assert meta == HookMeta(tenant_id="t1")
        assert encode(meta) == encode(HookMeta(tenant_id="t1"))
