"""Application events – queue event verification, decoding and topic naming."""
from mics_hooks.application.events.decoder import (
    CHAT_MESSAGE_EVENTS,
    CONNECT_ACK_EVENTS,
    EventKindGroup,
    group_for,
    try_decode_as,
    try_decode_connect_ack,
    try_decode_message,
    try_verify_and_decode,
    try_verify_and_decode_connect_ack,
    try_verify_and_decode_message,
)
from mics_hooks.application.events.topics import dlq_topic_name, event_topic_name
from mics_hooks.application.events.verify import INVALID_SIGN, MqVerifyResult, decode_and_verify_mq_event

__all__ = [
    "CHAT_MESSAGE_EVENTS",
    "CONNECT_ACK_EVENTS",
    "EventKindGroup",
    "INVALID_SIGN",
    "MqVerifyResult",
    "decode_and_verify_mq_event",
    "dlq_topic_name",
    "event_topic_name",
    "group_for",
    "try_decode_as",
    "try_decode_connect_ack",
    "try_decode_message",
    "try_verify_and_decode",
    "try_verify_and_decode_connect_ack",
    "try_verify_and_decode_message",
]
