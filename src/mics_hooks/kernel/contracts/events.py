"""Kernel contracts – MqEvent queue event."""
from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass


class EventType(enum.IntEnum):
    CONNECT_ONLINE = 0
    CONNECT_OFFLINE = 1
    SINGLE_CHAT_MSG = 2
    GROUP_CHAT_MSG = 3
    OFFLINE_MESSAGE = 4


@dataclass(frozen=True)
class MqEvent:
    """Signed asynchronous notification delivered through the message queue.

    ``event_data`` is opaque; its shape depends on ``event_type``. Values the
    enum does not know are kept as plain ints so that newer platforms do not
    break decoding.
    """

    tenant_id: str = ""
    event_type: EventType | int = EventType.CONNECT_ONLINE
    msg_id: str = ""
    user_id: str = ""
    device_id: str = ""
    to_user_id: str = ""
    group_id: str = ""
    event_data: bytes = b""
    timestamp: int = 0
    node_id: str = ""
    sign: str = ""
    trace_id: str = ""

    def cleared(self) -> MqEvent:
        """Return a copy with ``sign`` emptied."""
        if not self.sign:
            return self
        return dataclasses.replace(self, sign="")


__all__ = ["EventType", "MqEvent"]
