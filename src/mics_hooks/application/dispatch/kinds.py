"""Application dispatch – the closed set of hook kinds and rejection reasons."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable

from mics_hooks.kernel.contracts import (
    AuthRequest,
    AuthResponse,
    CheckMessageRequest,
    CheckMessageResponse,
    GetGroupMembersRequest,
    GetGroupMembersResponse,
    GetOfflineMessagesRequest,
    GetOfflineMessagesResponse,
    HookMeta,
)


class RejectReason(enum.StrEnum):
    """Reason strings returned to the platform on a rejected hook call.

    ``INVALID_SIGN`` covers every verification failure (wrong secret,
    tampering, non-canonical encoding, missing signature) without saying which.
    """

    INVALID_TENANT = "invalid tenant"
    UNKNOWN_TENANT = "unknown tenant"
    INVALID_SIGN = "invalid sign"
    HANDLER_ERROR = "handler error"


class HookKind(enum.Enum):
    AUTH = "auth"
    CHECK_MESSAGE = "check-message"
    GET_GROUP_MEMBERS = "get-group-members"
    GET_OFFLINE_MESSAGES = "get-offline-messages"

    @property
    def path(self) -> str:
        return f"/{self.value}"


@dataclass(frozen=True)
class KindSpec:
    """Per-kind shapes and the responses the dispatcher builds on its own.

    ``reject`` builds the safe-default response carrying a reason (kinds
    without a reason field drop it); ``empty`` is used when a handler
    returns ``None``.
    """

    request_type: type
    response_type: type
    handler_field: str
    reject: Callable[[HookMeta, str], Any]
    empty: Callable[[], Any]


_SPECS: dict[HookKind, KindSpec] = {
    HookKind.AUTH: KindSpec(
        request_type=AuthRequest,
        response_type=AuthResponse,
        handler_field="auth",
        reject=lambda meta, reason: AuthResponse(meta=meta, ok=False, reason=reason),
        empty=AuthResponse,
    ),
    HookKind.CHECK_MESSAGE: KindSpec(
        request_type=CheckMessageRequest,
        response_type=CheckMessageResponse,
        handler_field="check_message",
        reject=lambda meta, reason: CheckMessageResponse(meta=meta, allow=False, reason=reason),
        empty=CheckMessageResponse,
    ),
    HookKind.GET_GROUP_MEMBERS: KindSpec(
        request_type=GetGroupMembersRequest,
        response_type=GetGroupMembersResponse,
        handler_field="get_group_members",
        reject=lambda meta, reason: GetGroupMembersResponse(meta=meta),
        empty=GetGroupMembersResponse,
    ),
    HookKind.GET_OFFLINE_MESSAGES: KindSpec(
        request_type=GetOfflineMessagesRequest,
        response_type=GetOfflineMessagesResponse,
        handler_field="get_offline_messages",
        reject=lambda meta, reason: GetOfflineMessagesResponse(meta=meta, ok=False, reason=reason),
        empty=lambda: GetOfflineMessagesResponse(ok=True),
    ),
}


def spec_for(kind: HookKind) -> KindSpec:
    return _SPECS[kind]


def kind_of(request: Any) -> HookKind:
    """Return the kind whose request type *request* is."""
    for kind, spec in _SPECS.items():
        if isinstance(request, spec.request_type):
            return kind
    raise TypeError(f"{type(request).__name__} is not a hook request")


__all__ = ["HookKind", "KindSpec", "RejectReason", "kind_of", "spec_for"]
