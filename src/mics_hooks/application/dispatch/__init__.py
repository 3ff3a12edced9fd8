"""Application dispatch – signature-gated hook dispatching."""
from mics_hooks.application.dispatch.dispatcher import HookDispatcher, HookReply
from mics_hooks.application.dispatch.handlers import (
    AuthHandler,
    CheckMessageHandler,
    GetGroupMembersHandler,
    GetOfflineMessagesHandler,
    HookHandlers,
    default_get_offline_messages,
)
from mics_hooks.application.dispatch.kinds import HookKind, KindSpec, RejectReason, kind_of, spec_for
from mics_hooks.application.dispatch.tenant_secrets import (
    StaticTenantSecretResolver,
    TenantSecretResolver,
    resolver_from_settings,
)

__all__ = [
    "AuthHandler",
    "CheckMessageHandler",
    "GetGroupMembersHandler",
    "GetOfflineMessagesHandler",
    "HookDispatcher",
    "HookHandlers",
    "HookKind",
    "HookReply",
    "KindSpec",
    "RejectReason",
    "StaticTenantSecretResolver",
    "TenantSecretResolver",
    "default_get_offline_messages",
    "kind_of",
    "resolver_from_settings",
    "spec_for",
]
