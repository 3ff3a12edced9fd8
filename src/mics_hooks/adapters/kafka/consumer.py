"""Kafka adapter – MqEventConsumer for per-tenant event topics."""
from __future__ import annotations

import asyncio
import inspect
from typing import Any, Awaitable, Callable

from mics_hooks.application.dispatch import TenantSecretResolver
from mics_hooks.application.events import (
    CHAT_MESSAGE_EVENTS,
    CONNECT_ACK_EVENTS,
    INVALID_SIGN,
    event_topic_name,
    try_decode_as,
)
from mics_hooks.application.signing import MqEventSigner
from mics_hooks.application.signing.keys import is_blank
from mics_hooks.kernel.contracts import ConnectAck, MessageRequest, MqEvent
from mics_hooks.kernel.errors import SerializationError
from mics_hooks.observability.logging import get_logger
from mics_hooks.wire import decode

logger = get_logger(__name__)

OnConnect = Callable[[MqEvent, ConnectAck], Awaitable[None] | None]
OnMessage = Callable[[MqEvent, MessageRequest], Awaitable[None] | None]


def _require_aiokafka() -> Any:
    try:
        import aiokafka  # type: ignore[import-untyped]
        return aiokafka
    except ImportError as exc:
        raise ImportError("Install 'mics-hooks[kafka]' to use the Kafka adapter") from exc


class MqEventConsumer:
    """aiokafka-backed consumer of signed platform events.

    Each record is decoded, its tenant secret resolved and its signature
    verified before the payload is routed: connection events to
    *on_connect*, chat messages to *on_message*. Records failing any step
    are logged and skipped; callback errors are logged and the loop carries on.
    The resolver and synchronous callbacks run in worker threads.
    """

    def __init__(
        self,
        bootstrap_servers: str,
        group_id: str,
        tenant_ids: list[str],
        resolver: TenantSecretResolver,
        *,
        require_signature: bool = True,
        on_connect: OnConnect | None = None,
        on_message: OnMessage | None = None,
        **kwargs: Any,
    ) -> None:
        self._topics = [event_topic_name(t) for t in tenant_ids]
        self._bootstrap_servers = bootstrap_servers
        self._group_id = group_id
        self._kwargs = kwargs
        self._resolver = resolver
        self._require_signature = require_signature
        self._on_connect = on_connect
        self._on_message = on_message
        self._consumer: Any = None

    @property
    def topics(self) -> list[str]:
        return list(self._topics)

    async def start(self) -> None:
        aiokafka = _require_aiokafka()
        self._consumer = aiokafka.AIOKafkaConsumer(
            *self._topics,
            bootstrap_servers=self._bootstrap_servers,
            group_id=self._group_id,
            **self._kwargs,
        )
        await self._consumer.start()
        logger.info("mq.consumer_started", topics=self._topics, group_id=self._group_id)

    async def stop(self) -> None:
        if self._consumer is not None:
            await self._consumer.stop()
            self._consumer = None
            logger.info("mq.consumer_stopped", group_id=self._group_id)

    async def run(self) -> None:
        """Consume until the consumer is stopped or the task is cancelled."""
        if self._consumer is None:
            raise RuntimeError("MqEventConsumer.start() must be awaited before run()")
        async for record in self._consumer:
            await self.handle_record(record.value)

    async def handle_record(self, value: bytes | None) -> bool:
        """Process one raw record; return ``True`` when a callback ran cleanly."""
        if not value:
            logger.info("mq.record_skipped", reason="empty record")
            return False
        try:
            event = decode(MqEvent, value)
        except SerializationError:
            logger.info("mq.record_skipped", reason="undecodable", size=len(value))
            return False

        log = logger.bind(
            tenant_id=event.tenant_id,
            event_type=int(event.event_type),
            msg_id=event.msg_id,
            trace_id=event.trace_id,
        )
        if is_blank(event.tenant_id):
            log.info("mq.record_skipped", reason="invalid tenant")
            return False
        try:
            secret = await asyncio.to_thread(self._resolver, event.tenant_id)
        except Exception:  # noqa: BLE001
            log.warning("mq.record_skipped", reason="resolver error", exc_info=True)
            return False
        if secret is None or is_blank(secret):
            log.info("mq.record_skipped", reason="unknown tenant")
            return False

        if not MqEventSigner.verify(secret, event, self._require_signature):
            log.info("mq.record_skipped", reason=INVALID_SIGN)
            return False

        if CONNECT_ACK_EVENTS.accepts(event.event_type):
            callback: Any = self._on_connect
            payload: Any = try_decode_as(event, CONNECT_ACK_EVENTS)
        elif CHAT_MESSAGE_EVENTS.accepts(event.event_type):
            callback = self._on_message
            payload = try_decode_as(event, CHAT_MESSAGE_EVENTS)
        else:
            log.info("mq.record_skipped", reason="unhandled event type")
            return False

        if callback is None:
            return False
        if payload is None:
            log.info("mq.record_skipped", reason="undecodable event data")
            return False

        try:
            if inspect.iscoroutinefunction(callback):
                await callback(event, payload)
            else:
                outcome = await asyncio.to_thread(callback, event, payload)
                if inspect.isawaitable(outcome):
                    await outcome
        except Exception:  # noqa: BLE001
            log.warning("mq.callback_failed", exc_info=True)
            return False
        return True

    async def __aenter__(self) -> "MqEventConsumer":
        await self.start()
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.stop()


__all__ = ["MqEventConsumer", "OnConnect", "OnMessage"]
