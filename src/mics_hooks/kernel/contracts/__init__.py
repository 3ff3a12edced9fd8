"""Kernel contracts – immutable value types exchanged with the platform."""
from mics_hooks.kernel.contracts.events import EventType, MqEvent
from mics_hooks.kernel.contracts.hooks import (
    AuthRequest,
    AuthResponse,
    CheckMessageRequest,
    CheckMessageResponse,
    GetGroupMembersRequest,
    GetGroupMembersResponse,
    GetOfflineMessagesRequest,
    GetOfflineMessagesResponse,
    HookRequest,
    HookResponse,
    clear_meta_signature,
)
from mics_hooks.kernel.contracts.messages import ConnectAck, MessageRequest, MessageType
from mics_hooks.kernel.contracts.meta import HookMeta
from mics_hooks.kernel.contracts.tenant import TenantRuntimeConfig

__all__ = [
    "AuthRequest",
    "AuthResponse",
    "CheckMessageRequest",
    "CheckMessageResponse",
    "ConnectAck",
    "EventType",
    "GetGroupMembersRequest",
    "GetGroupMembersResponse",
    "GetOfflineMessagesRequest",
    "GetOfflineMessagesResponse",
    "HookMeta",
    "HookRequest",
    "HookResponse",
    "MessageRequest",
    "MessageType",
    "MqEvent",
    "TenantRuntimeConfig",
    "clear_meta_signature",
]
