"""Application events – per-tenant queue topic names."""
from __future__ import annotations


def event_topic_name(tenant_id: str) -> str:
    return f"im-mics-{tenant_id}-event"


def dlq_topic_name(tenant_id: str) -> str:
    return f"im-mics-{tenant_id}-event-dlq"


__all__ = ["dlq_topic_name", "event_topic_name"]
