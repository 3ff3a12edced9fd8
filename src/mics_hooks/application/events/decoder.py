"""Application events – typed decoding of ``MqEvent.event_data``.

Decoding never raises: an empty payload, an event type outside the
requested group, or malformed bytes all yield ``None`` so a consumption loop
can skip the record. The ``try_verify_and_decode*`` variants check the
signature first and never look at ``event_data`` when it fails.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from mics_hooks.application.signing import MqEventSigner
from mics_hooks.application.signing.keys import Secret
from mics_hooks.kernel.contracts import ConnectAck, EventType, MessageRequest, MqEvent
from mics_hooks.kernel.errors import SerializationError
from mics_hooks.wire import decode

T = TypeVar("T")


@dataclass(frozen=True)
class EventKindGroup(Generic[T]):
    """A set of event types sharing one ``event_data`` shape."""

    name: str
    event_types: frozenset[int]
    target: type[T]

    def accepts(self, event_type: int) -> bool:
        return int(event_type) in self.event_types


CONNECT_ACK_EVENTS: EventKindGroup[ConnectAck] = EventKindGroup(
    name="connect_ack",
    event_types=frozenset({EventType.CONNECT_ONLINE, EventType.CONNECT_OFFLINE}),
    target=ConnectAck,
)
CHAT_MESSAGE_EVENTS: EventKindGroup[MessageRequest] = EventKindGroup(
    name="chat_message",
    event_types=frozenset({EventType.SINGLE_CHAT_MSG, EventType.GROUP_CHAT_MSG}),
    target=MessageRequest,
)
KIND_GROUPS: tuple[EventKindGroup, ...] = (CONNECT_ACK_EVENTS, CHAT_MESSAGE_EVENTS)


def group_for(event_type: int) -> EventKindGroup | None:
    """Return the kind group whose shape *event_type* carries, if any."""
    return next((g for g in KIND_GROUPS if g.accepts(event_type)), None)


def try_decode_as(event: MqEvent | None, group: EventKindGroup[T]) -> T | None:
    if event is None or not event.event_data:
        return None
    if not group.accepts(event.event_type):
        return None
    try:
        return decode(group.target, event.event_data)
    except SerializationError:
        return None


def try_decode_connect_ack(event: MqEvent | None) -> ConnectAck | None:
    return try_decode_as(event, CONNECT_ACK_EVENTS)


def try_decode_message(event: MqEvent | None) -> MessageRequest | None:
    return try_decode_as(event, CHAT_MESSAGE_EVENTS)


def try_verify_and_decode(
    secret: Secret | None,
    event: MqEvent | None,
    require_signature: bool,
    group: EventKindGroup[T] | None = None,
) -> T | ConnectAck | MessageRequest | None:
    """Verify *event* and, only on success, decode its payload.

    Without *group* the shape is chosen from ``event.event_type``.
    """
    if not MqEventSigner.verify(secret, event, require_signature):
        return None
    if event is None:
        return None
    target = group if group is not None else group_for(event.event_type)
    if target is None:
        return None
    return try_decode_as(event, target)


def try_verify_and_decode_connect_ack(
    secret: Secret | None, event: MqEvent | None, require_signature: bool
) -> ConnectAck | None:
    return try_verify_and_decode(secret, event, require_signature, CONNECT_ACK_EVENTS)  # type: ignore[return-value]


def try_verify_and_decode_message(
    secret: Secret | None, event: MqEvent | None, require_signature: bool
) -> MessageRequest | None:
    return try_verify_and_decode(secret, event, require_signature, CHAT_MESSAGE_EVENTS)  # type: ignore[return-value]


__all__ = [
    "CHAT_MESSAGE_EVENTS",
    "CONNECT_ACK_EVENTS",
    "EventKindGroup",
    "KIND_GROUPS",
    "group_for",
    "try_decode_as",
    "try_decode_connect_ack",
    "try_decode_message",
    "try_verify_and_decode",
    "try_verify_and_decode_connect_ack",
    "try_verify_and_decode_message",
]
