"""Kernel contracts – TenantRuntimeConfig returned by the auth hook."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TenantRuntimeConfig:
    """Per-tenant runtime limits handed back to the platform on auth.

    The ``hook_*`` and ``offline_use_hook_pull`` overrides are optional:
    ``None`` means "not set" and is distinct from zero / ``False``.
    """

    hook_base_url: str = ""
    heartbeat_timeout_seconds: int = 0
    offline_buffer_ttl_seconds: int = 0
    tenant_max_connections: int = 0
    user_max_connections: int = 0
    tenant_max_message_qps: int = 0
    tenant_secret: str = ""
    hook_max_concurrency: int | None = None
    hook_queue_timeout_ms: int | None = None
    hook_breaker_failure_threshold: int | None = None
    hook_breaker_open_ms: int | None = None
    hook_sign_required: bool | None = None
    offline_use_hook_pull: bool | None = None

    def __repr__(self) -> str:
        return f"TenantRuntimeConfig(hook_base_url={self.hook_base_url!r}, tenant_secret='***')"


__all__ = ["TenantRuntimeConfig"]
