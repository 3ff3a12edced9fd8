"""Testing – Hypothesis strategies for hook and queue contracts.

Requires the ``hypothesis`` package:

    pip install "mics-hooks[test]"
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mics_hooks.kernel.contracts import (
    AuthRequest,
    EventType,
    HookMeta,
    MessageRequest,
    MessageType,
    MqEvent,
)

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy  # type: ignore[import-untyped]


def _require_hypothesis() -> Any:
    try:
        import hypothesis.strategies as st  # type: ignore[import-untyped]
        return st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use property-based testing strategies: "
            "pip install hypothesis"
        ) from exc


_INT64 = (-(2**63), 2**63 - 1)


def secret_strategy() -> "SearchStrategy[str]":
    """Non-blank text secrets."""
    st = _require_hypothesis()
    return st.text(min_size=1, max_size=64).filter(lambda s: s.strip() != "")


def hook_meta_strategy(tenant_id: str | None = None) -> "SearchStrategy[HookMeta]":
    """Unsigned metadata; *tenant_id* pins the tenant when given."""
    st = _require_hypothesis()
    tenants = st.just(tenant_id) if tenant_id is not None else st.text(min_size=1, max_size=16)
    return st.builds(
        HookMeta,
        tenant_id=tenants,
        request_id=st.text(max_size=36),
        timestamp_ms=st.integers(*_INT64),
        trace_id=st.text(max_size=32),
    )


def auth_request_strategy(tenant_id: str | None = None) -> "SearchStrategy[AuthRequest]":
    st = _require_hypothesis()
    return st.builds(
        AuthRequest,
        meta=hook_meta_strategy(tenant_id),
        token=st.text(max_size=64),
        device_id=st.text(max_size=32),
    )


def message_request_strategy() -> "SearchStrategy[MessageRequest]":
    st = _require_hypothesis()
    return st.builds(
        MessageRequest,
        tenant_id=st.text(max_size=16),
        user_id=st.text(max_size=16),
        device_id=st.text(max_size=16),
        msg_id=st.text(max_size=36),
        msg_type=st.sampled_from(MessageType),
        to_user_id=st.text(max_size=16),
        group_id=st.text(max_size=16),
        msg_body=st.binary(max_size=256),
        timestamp_ms=st.integers(*_INT64),
    )


def mq_event_strategy(event_types: Any = None) -> "SearchStrategy[MqEvent]":
    """Unsigned events; *event_types* restricts the drawn ``event_type``."""
    st = _require_hypothesis()
    types = st.sampled_from(list(event_types) if event_types is not None else list(EventType))
    return st.builds(
        MqEvent,
        tenant_id=st.text(min_size=1, max_size=16),
        event_type=types,
        msg_id=st.text(max_size=36),
        user_id=st.text(max_size=16),
        device_id=st.text(max_size=16),
        to_user_id=st.text(max_size=16),
        group_id=st.text(max_size=16),
        event_data=st.binary(max_size=256),
        timestamp=st.integers(*_INT64),
        node_id=st.text(max_size=16),
        trace_id=st.text(max_size=32),
    )


__all__ = [
    "auth_request_strategy",
    "hook_meta_strategy",
    "message_request_strategy",
    "mq_event_strategy",
    "secret_strategy",
]
