"""Application dispatch – tenant secret resolution port."""
from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Protocol, runtime_checkable

from mics_hooks.application.signing import Secret

if TYPE_CHECKING:
    from mics_hooks.config.settings import HookSettings


@runtime_checkable
class TenantSecretResolver(Protocol):
    """Port: look up a tenant's signing secret.

    Called synchronously once per request, without caching, retry or
    timeout; resolvers backed by network or disk must bring their own.
    """

    def __call__(self, tenant_id: str) -> Secret | None: ...


class StaticTenantSecretResolver:
    """In-memory resolver over a fixed ``tenant_id -> secret`` mapping."""

    def __init__(self, secrets: Mapping[str, Secret]) -> None:
        self._secrets = dict(secrets)

    def __call__(self, tenant_id: str) -> Secret | None:
        return self._secrets.get(tenant_id)

    def tenant_ids(self) -> list[str]:
        return sorted(self._secrets)

    def __repr__(self) -> str:
        return f"StaticTenantSecretResolver(tenants={self.tenant_ids()!r})"


def resolver_from_settings(settings: HookSettings) -> StaticTenantSecretResolver:
    return StaticTenantSecretResolver(settings.tenant_secrets())


__all__ = ["StaticTenantSecretResolver", "TenantSecretResolver", "resolver_from_settings"]
