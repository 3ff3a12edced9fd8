"""Wire – protobuf schema for the hook and message contracts.

Message classes are built from descriptors at import time, so no ``protoc``
step or generated ``*_pb2`` module is needed. Field numbers are fixed by the
platform and must never change.
"""
from __future__ import annotations

from typing import Any

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

_F = descriptor_pb2.FieldDescriptorProto

MESSAGE_PACKAGE = "mics.message.v1"
HOOK_PACKAGE = "mics.hook.v1"

_STRING = _F.TYPE_STRING
_BYTES = _F.TYPE_BYTES
_INT32 = _F.TYPE_INT32
_INT64 = _F.TYPE_INT64
_BOOL = _F.TYPE_BOOL
_ENUM = _F.TYPE_ENUM
_MESSAGE = _F.TYPE_MESSAGE


def _enum(file: descriptor_pb2.FileDescriptorProto, name: str, values: list[tuple[str, int]]) -> None:
    enum = file.enum_type.add()
    enum.name = name
    for value_name, number in values:
        value = enum.value.add()
        value.name = value_name
        value.number = number


def _message(
    file: descriptor_pb2.FileDescriptorProto,
    name: str,
    fields: list[tuple[Any, ...]],
) -> None:
    """Add message *name* to *file*.

    Each field is ``(name, number, type)`` optionally followed by a type name
    (for enum / message fields) and a flag string: ``"repeated"`` or
    ``"optional"`` (proto3 explicit presence).
    """
    message = file.message_type.add()
    message.name = name
    for spec in fields:
        field_name, number, field_type, *rest = spec
        type_name = next((r for r in rest if r.startswith(".")), None)
        flags = {r for r in rest if not r.startswith(".")}

        field = message.field.add()
        field.name = field_name
        field.number = number
        field.type = field_type
        field.label = _F.LABEL_REPEATED if "repeated" in flags else _F.LABEL_OPTIONAL
        if type_name:
            field.type_name = type_name
        if "optional" in flags:
            field.proto3_optional = True
            oneof = message.oneof_decl.add()
            oneof.name = f"_{field_name}"
            field.oneof_index = len(message.oneof_decl) - 1


def _message_file() -> descriptor_pb2.FileDescriptorProto:
    file = descriptor_pb2.FileDescriptorProto()
    file.name = "mics/message/v1/message.proto"
    file.package = MESSAGE_PACKAGE
    file.syntax = "proto3"

    _enum(file, "MessageType", [("SINGLE_CHAT", 0), ("GROUP_CHAT", 1)])
    _message(file, "MessageRequest", [
        ("tenant_id", 1, _STRING),
        ("user_id", 2, _STRING),
        ("device_id", 3, _STRING),
        ("msg_id", 4, _STRING),
        ("msg_type", 5, _ENUM, f".{MESSAGE_PACKAGE}.MessageType"),
        ("to_user_id", 6, _STRING),
        ("group_id", 7, _STRING),
        ("msg_body", 8, _BYTES),
        ("timestamp_ms", 9, _INT64),
    ])
    _message(file, "ConnectAck", [
        ("code", 1, _INT32),
        ("tenant_id", 2, _STRING),
        ("user_id", 3, _STRING),
        ("device_id", 4, _STRING),
        ("node_id", 5, _STRING),
        ("trace_id", 6, _STRING),
    ])
    return file


def _hook_file() -> descriptor_pb2.FileDescriptorProto:
    meta = f".{HOOK_PACKAGE}.HookMeta"
    message_request = f".{MESSAGE_PACKAGE}.MessageRequest"

    file = descriptor_pb2.FileDescriptorProto()
    file.name = "mics/hook/v1/hook.proto"
    file.package = HOOK_PACKAGE
    file.syntax = "proto3"
    file.dependency.append("mics/message/v1/message.proto")

    _enum(file, "EventType", [
        ("CONNECT_ONLINE", 0),
        ("CONNECT_OFFLINE", 1),
        ("SINGLE_CHAT_MSG", 2),
        ("GROUP_CHAT_MSG", 3),
        ("OFFLINE_MESSAGE", 4),
    ])
    _message(file, "HookMeta", [
        ("tenant_id", 1, _STRING),
        ("request_id", 2, _STRING),
        ("timestamp_ms", 3, _INT64),
        ("sign", 4, _STRING),
        ("trace_id", 5, _STRING),
    ])
    _message(file, "TenantRuntimeConfig", [
        ("hook_base_url", 1, _STRING),
        ("heartbeat_timeout_seconds", 2, _INT32),
        ("offline_buffer_ttl_seconds", 3, _INT32),
        ("tenant_max_connections", 4, _INT32),
        ("user_max_connections", 5, _INT32),
        ("tenant_max_message_qps", 6, _INT32),
        ("tenant_secret", 7, _STRING),
        ("hook_max_concurrency", 8, _INT32, "optional"),
        ("hook_queue_timeout_ms", 9, _INT32, "optional"),
        ("hook_breaker_failure_threshold", 10, _INT32, "optional"),
        ("hook_breaker_open_ms", 11, _INT32, "optional"),
        ("hook_sign_required", 12, _BOOL, "optional"),
        ("offline_use_hook_pull", 13, _BOOL, "optional"),
    ])
    _message(file, "AuthRequest", [
        ("meta", 1, _MESSAGE, meta),
        ("token", 2, _STRING),
        ("device_id", 3, _STRING),
    ])
    _message(file, "AuthResponse", [
        ("meta", 1, _MESSAGE, meta),
        ("ok", 2, _BOOL),
        ("user_id", 3, _STRING),
        ("device_id", 4, _STRING),
        ("config", 5, _MESSAGE, f".{HOOK_PACKAGE}.TenantRuntimeConfig"),
        ("reason", 6, _STRING),
    ])
    _message(file, "CheckMessageRequest", [
        ("meta", 1, _MESSAGE, meta),
        ("message", 2, _MESSAGE, message_request),
    ])
    _message(file, "CheckMessageResponse", [
        ("meta", 1, _MESSAGE, meta),
        ("allow", 2, _BOOL),
        ("reason", 3, _STRING),
    ])
    _message(file, "GetGroupMembersRequest", [
        ("meta", 1, _MESSAGE, meta),
        ("group_id", 2, _STRING),
    ])
    _message(file, "GetGroupMembersResponse", [
        ("meta", 1, _MESSAGE, meta),
        ("user_ids", 2, _STRING, "repeated"),
    ])
    _message(file, "GetOfflineMessagesRequest", [
        ("meta", 1, _MESSAGE, meta),
        ("user_id", 2, _STRING),
        ("device_id", 3, _STRING),
        ("max_messages", 4, _INT32),
        ("cursor", 5, _STRING),
    ])
    _message(file, "GetOfflineMessagesResponse", [
        ("meta", 1, _MESSAGE, meta),
        ("ok", 2, _BOOL),
        ("messages", 3, _MESSAGE, message_request, "repeated"),
        ("reason", 4, _STRING),
        ("next_cursor", 5, _STRING),
        ("has_more", 6, _BOOL),
    ])
    _message(file, "MqEvent", [
        ("tenant_id", 1, _STRING),
        ("event_type", 2, _ENUM, f".{HOOK_PACKAGE}.EventType"),
        ("msg_id", 3, _STRING),
        ("user_id", 4, _STRING),
        ("device_id", 5, _STRING),
        ("to_user_id", 6, _STRING),
        ("group_id", 7, _STRING),
        ("event_data", 8, _BYTES),
        ("timestamp", 9, _INT64),
        ("node_id", 10, _STRING),
        ("sign", 11, _STRING),
        ("trace_id", 12, _STRING),
    ])
    return file


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_message_file().SerializeToString())
_pool.AddSerializedFile(_hook_file().SerializeToString())


def _cls(full_name: str) -> Any:
    return message_factory.GetMessageClass(_pool.FindMessageTypeByName(full_name))


MessageRequestPb = _cls(f"{MESSAGE_PACKAGE}.MessageRequest")
ConnectAckPb = _cls(f"{MESSAGE_PACKAGE}.ConnectAck")
HookMetaPb = _cls(f"{HOOK_PACKAGE}.HookMeta")
TenantRuntimeConfigPb = _cls(f"{HOOK_PACKAGE}.TenantRuntimeConfig")
AuthRequestPb = _cls(f"{HOOK_PACKAGE}.AuthRequest")
AuthResponsePb = _cls(f"{HOOK_PACKAGE}.AuthResponse")
CheckMessageRequestPb = _cls(f"{HOOK_PACKAGE}.CheckMessageRequest")
CheckMessageResponsePb = _cls(f"{HOOK_PACKAGE}.CheckMessageResponse")
GetGroupMembersRequestPb = _cls(f"{HOOK_PACKAGE}.GetGroupMembersRequest")
GetGroupMembersResponsePb = _cls(f"{HOOK_PACKAGE}.GetGroupMembersResponse")
GetOfflineMessagesRequestPb = _cls(f"{HOOK_PACKAGE}.GetOfflineMessagesRequest")
GetOfflineMessagesResponsePb = _cls(f"{HOOK_PACKAGE}.GetOfflineMessagesResponse")
MqEventPb = _cls(f"{HOOK_PACKAGE}.MqEvent")


__all__ = [
    "AuthRequestPb",
    "AuthResponsePb",
    "CheckMessageRequestPb",
    "CheckMessageResponsePb",
    "ConnectAckPb",
    "GetGroupMembersRequestPb",
    "GetGroupMembersResponsePb",
    "GetOfflineMessagesRequestPb",
    "GetOfflineMessagesResponsePb",
    "HOOK_PACKAGE",
    "HookMetaPb",
    "MESSAGE_PACKAGE",
    "MessageRequestPb",
    "MqEventPb",
    "TenantRuntimeConfigPb",
]
