"""Unit tests for the Hypothesis contract strategies."""
from __future__ import annotations

import sys
from unittest.mock import patch

import pytest
from hypothesis import given, settings

from mics_hooks.kernel.contracts import AuthRequest, EventType, MessageRequest, MqEvent
from mics_hooks.testing import (
    auth_request_strategy,
    message_request_strategy,
    mq_event_strategy,
    secret_strategy,
)
from mics_hooks.wire import decode, encode


class TestRequireHypothesis:
    def test_raises_import_error_without_hypothesis(self) -> None:
        from mics_hooks.testing.strategies import _require_hypothesis

        with patch.dict(sys.modules, {"hypothesis.strategies": None}):
            with pytest.raises(ImportError, match="hypothesis"):
                _require_hypothesis()


class TestStrategies:
    @settings(max_examples=25)
    @given(secret=secret_strategy())
    def test_secrets_are_not_blank(self, secret: str) -> None:
        assert secret.strip()

    @settings(max_examples=25)
    @given(request=auth_request_strategy(tenant_id="t1"))
    def test_auth_requests_are_unsigned_and_pinned(self, request: AuthRequest) -> None:
        assert request.meta is not None
        assert request.meta.tenant_id == "t1"
        assert request.meta.signature == ""

    @settings(max_examples=25)
    @given(event=mq_event_strategy([EventType.CONNECT_ONLINE]))
    def test_event_types_restricted(self, event: MqEvent) -> None:
        assert event.event_type is EventType.CONNECT_ONLINE
        assert event.sign == ""

    @settings(max_examples=25)
    @given(message=message_request_strategy())
    def test_messages_survive_the_wire(self, message: MessageRequest) -> None:
        assert decode(MessageRequest, encode(message)) == message
