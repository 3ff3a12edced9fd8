"""Kernel contracts – chat message and connection acknowledgement shapes."""
from __future__ import annotations

import enum
from dataclasses import dataclass


class MessageType(enum.IntEnum):
    SINGLE_CHAT = 0
    GROUP_CHAT = 1


@dataclass(frozen=True)
class MessageRequest:
    """A chat message as sent by a client and relayed to hooks / the queue."""

    tenant_id: str = ""
    user_id: str = ""
    device_id: str = ""
    msg_id: str = ""
    msg_type: MessageType | int = MessageType.SINGLE_CHAT
    to_user_id: str = ""
    group_id: str = ""
    msg_body: bytes = b""
    timestamp_ms: int = 0


@dataclass(frozen=True)
class ConnectAck:
    """Connection acknowledgement published on connect / disconnect."""

    code: int = 0
    tenant_id: str = ""
    user_id: str = ""
    device_id: str = ""
    node_id: str = ""
    trace_id: str = ""


__all__ = ["ConnectAck", "MessageRequest", "MessageType"]
