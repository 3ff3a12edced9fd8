"""Application dispatch – tenant-supplied hook handlers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from mics_hooks.application.dispatch.kinds import HookKind, spec_for
from mics_hooks.kernel.contracts import (
    AuthRequest,
    AuthResponse,
    CheckMessageRequest,
    CheckMessageResponse,
    GetGroupMembersRequest,
    GetGroupMembersResponse,
    GetOfflineMessagesRequest,
    GetOfflineMessagesResponse,
)

AuthHandler = Callable[[AuthRequest], AuthResponse | None]
CheckMessageHandler = Callable[[CheckMessageRequest], CheckMessageResponse | None]
GetGroupMembersHandler = Callable[[GetGroupMembersRequest], GetGroupMembersResponse | None]
GetOfflineMessagesHandler = Callable[[GetOfflineMessagesRequest], GetOfflineMessagesResponse | None]


def default_get_offline_messages(request: GetOfflineMessagesRequest) -> GetOfflineMessagesResponse:  # noqa: ARG001
    """Fallback when a tenant does not serve offline messages: ok, nothing pending."""
    return GetOfflineMessagesResponse(ok=True)


@dataclass(frozen=True)
class HookHandlers:
    """Business callbacks, one per hook kind.

    Handlers receive the request exactly as parsed (signature included) and
    may raise; the dispatcher turns any exception into a ``handler error``
    response. ``get_offline_messages`` is optional.
    """

    auth: AuthHandler
    check_message: CheckMessageHandler
    get_group_members: GetGroupMembersHandler
    get_offline_messages: GetOfflineMessagesHandler = default_get_offline_messages

    def for_kind(self, kind: HookKind) -> Callable[[Any], Any]:
        return getattr(self, spec_for(kind).handler_field)


__all__ = [
    "AuthHandler",
    "CheckMessageHandler",
    "GetGroupMembersHandler",
    "GetOfflineMessagesHandler",
    "HookHandlers",
    "default_get_offline_messages",
]
