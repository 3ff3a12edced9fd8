"""Wire – conversion between contract dataclasses and protobuf bytes.

``encode`` / ``decode`` are the only entry points the rest of the package
uses. Unknown wire fields are dropped on decode, so a decoded value
re-encodes to the canonical field-number-ordered form of the known fields.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from google.protobuf.message import DecodeError

from mics_hooks.kernel.contracts import (
    AuthRequest,
    AuthResponse,
    CheckMessageRequest,
    CheckMessageResponse,
    ConnectAck,
    EventType,
    GetGroupMembersRequest,
    GetGroupMembersResponse,
    GetOfflineMessagesRequest,
    GetOfflineMessagesResponse,
    HookMeta,
    MessageRequest,
    MessageType,
    MqEvent,
    TenantRuntimeConfig,
)
from mics_hooks.kernel.errors import SerializationError
from mics_hooks.wire import schema

T = TypeVar("T")

_OPTIONAL_CONFIG_FIELDS = (
    "hook_max_concurrency",
    "hook_queue_timeout_ms",
    "hook_breaker_failure_threshold",
    "hook_breaker_open_ms",
    "hook_sign_required",
    "offline_use_hook_pull",
)


def _enum_or_int(enum_cls: type[Any], value: int) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        return value


def _set_message(pb: Any, field: str, value: Any) -> None:
    """Copy *value* into sub-message *field* and force presence even when empty."""
    sub = getattr(pb, field)
    sub.CopyFrom(value)
    sub.SetInParent()


# ---------------------------------------------------------------------------
# Leaf shapes
# ---------------------------------------------------------------------------

def _meta_to_pb(meta: HookMeta) -> Any:
    return schema.HookMetaPb(
        tenant_id=meta.tenant_id,
        request_id=meta.request_id,
        timestamp_ms=meta.timestamp_ms,
        sign=meta.signature,
        trace_id=meta.trace_id,
    )


def _meta_from_pb(pb: Any) -> HookMeta:
    return HookMeta(
        tenant_id=pb.tenant_id,
        request_id=pb.request_id,
        timestamp_ms=pb.timestamp_ms,
        signature=pb.sign,
        trace_id=pb.trace_id,
    )


def _message_request_to_pb(msg: MessageRequest) -> Any:
    return schema.MessageRequestPb(
        tenant_id=msg.tenant_id,
        user_id=msg.user_id,
        device_id=msg.device_id,
        msg_id=msg.msg_id,
        msg_type=int(msg.msg_type),
        to_user_id=msg.to_user_id,
        group_id=msg.group_id,
        msg_body=msg.msg_body,
        timestamp_ms=msg.timestamp_ms,
    )


def _message_request_from_pb(pb: Any) -> MessageRequest:
    return MessageRequest(
        tenant_id=pb.tenant_id,
        user_id=pb.user_id,
        device_id=pb.device_id,
        msg_id=pb.msg_id,
        msg_type=_enum_or_int(MessageType, pb.msg_type),
        to_user_id=pb.to_user_id,
        group_id=pb.group_id,
        msg_body=bytes(pb.msg_body),
        timestamp_ms=pb.timestamp_ms,
    )


def _connect_ack_to_pb(ack: ConnectAck) -> Any:
    return schema.ConnectAckPb(
        code=ack.code,
        tenant_id=ack.tenant_id,
        user_id=ack.user_id,
        device_id=ack.device_id,
        node_id=ack.node_id,
        trace_id=ack.trace_id,
    )


def _connect_ack_from_pb(pb: Any) -> ConnectAck:
    return ConnectAck(
        code=pb.code,
        tenant_id=pb.tenant_id,
        user_id=pb.user_id,
        device_id=pb.device_id,
        node_id=pb.node_id,
        trace_id=pb.trace_id,
    )


def _config_to_pb(cfg: TenantRuntimeConfig) -> Any:
    pb = schema.TenantRuntimeConfigPb(
        hook_base_url=cfg.hook_base_url,
        heartbeat_timeout_seconds=cfg.heartbeat_timeout_seconds,
        offline_buffer_ttl_seconds=cfg.offline_buffer_ttl_seconds,
        tenant_max_connections=cfg.tenant_max_connections,
        user_max_connections=cfg.user_max_connections,
        tenant_max_message_qps=cfg.tenant_max_message_qps,
        tenant_secret=cfg.tenant_secret,
    )
    for name in _OPTIONAL_CONFIG_FIELDS:
        value = getattr(cfg, name)
        if value is not None:
            setattr(pb, name, value)
    return pb


def _config_from_pb(pb: Any) -> TenantRuntimeConfig:
    optional = {name: getattr(pb, name) if pb.HasField(name) else None for name in _OPTIONAL_CONFIG_FIELDS}
    return TenantRuntimeConfig(
        hook_base_url=pb.hook_base_url,
        heartbeat_timeout_seconds=pb.heartbeat_timeout_seconds,
        offline_buffer_ttl_seconds=pb.offline_buffer_ttl_seconds,
        tenant_max_connections=pb.tenant_max_connections,
        user_max_connections=pb.user_max_connections,
        tenant_max_message_qps=pb.tenant_max_message_qps,
        tenant_secret=pb.tenant_secret,
        **optional,
    )


def _mq_event_to_pb(evt: MqEvent) -> Any:
    return schema.MqEventPb(
        tenant_id=evt.tenant_id,
        event_type=int(evt.event_type),
        msg_id=evt.msg_id,
        user_id=evt.user_id,
        device_id=evt.device_id,
        to_user_id=evt.to_user_id,
        group_id=evt.group_id,
        event_data=evt.event_data,
        timestamp=evt.timestamp,
        node_id=evt.node_id,
        sign=evt.sign,
        trace_id=evt.trace_id,
    )


def _mq_event_from_pb(pb: Any) -> MqEvent:
    return MqEvent(
        tenant_id=pb.tenant_id,
        event_type=_enum_or_int(EventType, pb.event_type),
        msg_id=pb.msg_id,
        user_id=pb.user_id,
        device_id=pb.device_id,
        to_user_id=pb.to_user_id,
        group_id=pb.group_id,
        event_data=bytes(pb.event_data),
        timestamp=pb.timestamp,
        node_id=pb.node_id,
        sign=pb.sign,
        trace_id=pb.trace_id,
    )


# ---------------------------------------------------------------------------
# Hook envelopes
# ---------------------------------------------------------------------------

def _with_meta(pb: Any, meta: HookMeta | None) -> Any:
    if meta is not None:
        _set_message(pb, "meta", _meta_to_pb(meta))
    return pb


def _meta_of(pb: Any) -> HookMeta | None:
    return _meta_from_pb(pb.meta) if pb.HasField("meta") else None


def _auth_request_to_pb(req: AuthRequest) -> Any:
    return _with_meta(schema.AuthRequestPb(token=req.token, device_id=req.device_id), req.meta)


def _auth_request_from_pb(pb: Any) -> AuthRequest:
    return AuthRequest(meta=_meta_of(pb), token=pb.token, device_id=pb.device_id)


def _auth_response_to_pb(resp: AuthResponse) -> Any:
    pb = schema.AuthResponsePb(ok=resp.ok, user_id=resp.user_id, device_id=resp.device_id, reason=resp.reason)
    if resp.config is not None:
        _set_message(pb, "config", _config_to_pb(resp.config))
    return _with_meta(pb, resp.meta)


def _auth_response_from_pb(pb: Any) -> AuthResponse:
    return AuthResponse(
        meta=_meta_of(pb),
        ok=pb.ok,
        user_id=pb.user_id,
        device_id=pb.device_id,
        config=_config_from_pb(pb.config) if pb.HasField("config") else None,
        reason=pb.reason,
    )


def _check_request_to_pb(req: CheckMessageRequest) -> Any:
    pb = schema.CheckMessageRequestPb()
    if req.message is not None:
        _set_message(pb, "message", _message_request_to_pb(req.message))
    return _with_meta(pb, req.meta)


def _check_request_from_pb(pb: Any) -> CheckMessageRequest:
    message = _message_request_from_pb(pb.message) if pb.HasField("message") else None
    return CheckMessageRequest(meta=_meta_of(pb), message=message)


def _check_response_to_pb(resp: CheckMessageResponse) -> Any:
    return _with_meta(schema.CheckMessageResponsePb(allow=resp.allow, reason=resp.reason), resp.meta)


def _check_response_from_pb(pb: Any) -> CheckMessageResponse:
    return CheckMessageResponse(meta=_meta_of(pb), allow=pb.allow, reason=pb.reason)


def _group_request_to_pb(req: GetGroupMembersRequest) -> Any:
    return _with_meta(schema.GetGroupMembersRequestPb(group_id=req.group_id), req.meta)


def _group_request_from_pb(pb: Any) -> GetGroupMembersRequest:
    return GetGroupMembersRequest(meta=_meta_of(pb), group_id=pb.group_id)


def _group_response_to_pb(resp: GetGroupMembersResponse) -> Any:
    pb = schema.GetGroupMembersResponsePb()
    pb.user_ids.extend(resp.user_ids)
    return _with_meta(pb, resp.meta)


def _group_response_from_pb(pb: Any) -> GetGroupMembersResponse:
    return GetGroupMembersResponse(meta=_meta_of(pb), user_ids=tuple(pb.user_ids))


def _offline_request_to_pb(req: GetOfflineMessagesRequest) -> Any:
    pb = schema.GetOfflineMessagesRequestPb(
        user_id=req.user_id,
        device_id=req.device_id,
        max_messages=req.max_messages,
        cursor=req.cursor,
    )
    return _with_meta(pb, req.meta)


def _offline_request_from_pb(pb: Any) -> GetOfflineMessagesRequest:
    return GetOfflineMessagesRequest(
        meta=_meta_of(pb),
        user_id=pb.user_id,
        device_id=pb.device_id,
        max_messages=pb.max_messages,
        cursor=pb.cursor,
    )


def _offline_response_to_pb(resp: GetOfflineMessagesResponse) -> Any:
    pb = schema.GetOfflineMessagesResponsePb(
        ok=resp.ok,
        reason=resp.reason,
        next_cursor=resp.next_cursor,
        has_more=resp.has_more,
    )
    for message in resp.messages:
        pb.messages.add().CopyFrom(_message_request_to_pb(message))
    return _with_meta(pb, resp.meta)


def _offline_response_from_pb(pb: Any) -> GetOfflineMessagesResponse:
    return GetOfflineMessagesResponse(
        meta=_meta_of(pb),
        ok=pb.ok,
        messages=tuple(_message_request_from_pb(m) for m in pb.messages),
        reason=pb.reason,
        next_cursor=pb.next_cursor,
        has_more=pb.has_more,
    )


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class _Codec:
    pb_cls: Any
    to_pb: Callable[[Any], Any]
    from_pb: Callable[[Any], Any]


_CODECS: dict[type, _Codec] = {
    HookMeta: _Codec(schema.HookMetaPb, _meta_to_pb, _meta_from_pb),
    MessageRequest: _Codec(schema.MessageRequestPb, _message_request_to_pb, _message_request_from_pb),
    ConnectAck: _Codec(schema.ConnectAckPb, _connect_ack_to_pb, _connect_ack_from_pb),
    TenantRuntimeConfig: _Codec(schema.TenantRuntimeConfigPb, _config_to_pb, _config_from_pb),
    MqEvent: _Codec(schema.MqEventPb, _mq_event_to_pb, _mq_event_from_pb),
    AuthRequest: _Codec(schema.AuthRequestPb, _auth_request_to_pb, _auth_request_from_pb),
    AuthResponse: _Codec(schema.AuthResponsePb, _auth_response_to_pb, _auth_response_from_pb),
    CheckMessageRequest: _Codec(schema.CheckMessageRequestPb, _check_request_to_pb, _check_request_from_pb),
    CheckMessageResponse: _Codec(schema.CheckMessageResponsePb, _check_response_to_pb, _check_response_from_pb),
    GetGroupMembersRequest: _Codec(schema.GetGroupMembersRequestPb, _group_request_to_pb, _group_request_from_pb),
    GetGroupMembersResponse: _Codec(schema.GetGroupMembersResponsePb, _group_response_to_pb, _group_response_from_pb),
    GetOfflineMessagesRequest: _Codec(
        schema.GetOfflineMessagesRequestPb, _offline_request_to_pb, _offline_request_from_pb
    ),
    GetOfflineMessagesResponse: _Codec(
        schema.GetOfflineMessagesResponsePb, _offline_response_to_pb, _offline_response_from_pb
    ),
}


def _codec_for(cls: type) -> _Codec:
    try:
        return _CODECS[cls]
    except KeyError:
        raise SerializationError(f"No wire codec for {cls.__name__}", payload_type=cls.__name__) from None


def to_message(value: Any) -> Any:
    """Return the protobuf message for contract *value*."""
    return _codec_for(type(value)).to_pb(value)


def from_message(cls: type[T], pb: Any) -> T:
    return _codec_for(cls).from_pb(pb)


def encode(value: Any) -> bytes:
    """Serialize contract *value* to protobuf wire bytes."""
    return to_message(value).SerializeToString()


def decode(cls: type[T], data: bytes) -> T:
    """Parse *data* as *cls*, raising :class:`SerializationError` on malformed bytes."""
    codec = _codec_for(cls)
    pb = codec.pb_cls()
    try:
        pb.ParseFromString(bytes(data))
    except DecodeError as exc:
        raise SerializationError(
            f"Malformed {cls.__name__} payload", payload_type=cls.__name__, cause=exc
        ) from exc
    return codec.from_pb(pb)


__all__ = ["decode", "encode", "from_message", "to_message"]
