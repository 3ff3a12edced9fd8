"""Kernel contracts – hook request / response envelopes.

One request / response pair per hook kind. Every envelope carries an
optional :class:`HookMeta`; ``None`` means the field was absent on the wire.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TypeVar

from mics_hooks.kernel.contracts.messages import MessageRequest
from mics_hooks.kernel.contracts.meta import HookMeta
from mics_hooks.kernel.contracts.tenant import TenantRuntimeConfig


@dataclass(frozen=True)
class AuthRequest:
    meta: HookMeta | None = None
    token: str = ""
    device_id: str = ""

    def __repr__(self) -> str:
        return f"AuthRequest(meta={self.meta!r}, token='***', device_id={self.device_id!r})"


@dataclass(frozen=True)
class AuthResponse:
    meta: HookMeta | None = None
    ok: bool = False
    user_id: str = ""
    device_id: str = ""
    config: TenantRuntimeConfig | None = None
    reason: str = ""


@dataclass(frozen=True)
class CheckMessageRequest:
    meta: HookMeta | None = None
    message: MessageRequest | None = None


@dataclass(frozen=True)
class CheckMessageResponse:
    meta: HookMeta | None = None
    allow: bool = False
    reason: str = ""


@dataclass(frozen=True)
class GetGroupMembersRequest:
    meta: HookMeta | None = None
    group_id: str = ""


@dataclass(frozen=True)
class GetGroupMembersResponse:
    meta: HookMeta | None = None
    user_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class GetOfflineMessagesRequest:
    meta: HookMeta | None = None
    user_id: str = ""
    device_id: str = ""
    max_messages: int = 0
    cursor: str = ""


@dataclass(frozen=True)
class GetOfflineMessagesResponse:
    meta: HookMeta | None = None
    ok: bool = False
    messages: tuple[MessageRequest, ...] = ()
    reason: str = ""
    next_cursor: str = ""
    has_more: bool = False


HookRequest = AuthRequest | CheckMessageRequest | GetGroupMembersRequest | GetOfflineMessagesRequest
HookResponse = AuthResponse | CheckMessageResponse | GetGroupMembersResponse | GetOfflineMessagesResponse

R = TypeVar("R", AuthRequest, CheckMessageRequest, GetGroupMembersRequest, GetOfflineMessagesRequest)


def clear_meta_signature(request: R) -> R:
    """Return *request* with its embedded ``meta.signature`` emptied.

    This is the exact payload form the request signer expects. Requests
    without metadata are returned unchanged.
    """
    if request.meta is None or not request.meta.signature:
        return request
    return dataclasses.replace(request, meta=request.meta.cleared())


__all__ = [
    "AuthRequest",
    "AuthResponse",
    "CheckMessageRequest",
    "CheckMessageResponse",
    "GetGroupMembersRequest",
    "GetGroupMembersResponse",
    "GetOfflineMessagesRequest",
    "GetOfflineMessagesResponse",
    "HookRequest",
    "HookResponse",
    "clear_meta_signature",
]
