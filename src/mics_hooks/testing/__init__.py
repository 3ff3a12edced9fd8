"""Testing – Hypothesis strategies for property tests of signing and dispatch."""
from mics_hooks.testing.strategies import (
    auth_request_strategy,
    hook_meta_strategy,
    message_request_strategy,
    mq_event_strategy,
    secret_strategy,
)

__all__ = [
    "auth_request_strategy",
    "hook_meta_strategy",
    "message_request_strategy",
    "mq_event_strategy",
    "secret_strategy",
]
