"""Example tenant hook service: HTTP hooks plus queue event consumption.

Run with::

    pip install "mics-hooks[fastapi,kafka]" uvicorn
    export MICS_HOOK_TENANT_SECRETS_RAW="t1=change-me"
    export MICS_HOOK_TENANT_IDS="t1"
    uvicorn docs.examples.hook_service:app --port 8080

The platform is then configured with ``hook_base_url=http://<host>:8080``
and POSTs protobuf bodies to ``/auth``, ``/check-message``,
``/get-group-members`` and ``/get-offline-messages``.
"""

from __future__ import annotations

import asyncio
import contextlib

from mics_hooks.adapters.fastapi import create_hook_router
from mics_hooks.adapters.kafka import MqEventConsumer
from mics_hooks.application.dispatch import HookDispatcher, HookHandlers, resolver_from_settings
from mics_hooks.config import EnvSettingsLoader, HookSettings
from mics_hooks.kernel.contracts import (
    AuthRequest,
    AuthResponse,
    CheckMessageRequest,
    CheckMessageResponse,
    ConnectAck,
    GetGroupMembersRequest,
    GetGroupMembersResponse,
    MessageRequest,
    MqEvent,
    TenantRuntimeConfig,
)
from mics_hooks.observability.logging import configure_logging, get_logger

settings = EnvSettingsLoader().load(HookSettings)
configure_logging(settings.log_level_number())
logger = get_logger("hook_service")

GROUPS: dict[str, tuple[str, ...]] = {"g1": ("u1", "u2", "u3")}


def auth(request: AuthRequest) -> AuthResponse:
    if not request.token.startswith("valid:"):
        return AuthResponse(ok=False, reason="bad token")
    return AuthResponse(
        ok=True,
        user_id=request.token.removeprefix("valid:"),
        device_id=request.device_id,
        config=TenantRuntimeConfig(heartbeat_timeout_seconds=60, hook_sign_required=True),
    )


def check_message(request: CheckMessageRequest) -> CheckMessageResponse:
    body = request.message.msg_body if request.message else b""
    if b"forbidden" in body:
        return CheckMessageResponse(allow=False, reason="blocked word")
    return CheckMessageResponse(allow=True)


def get_group_members(request: GetGroupMembersRequest) -> GetGroupMembersResponse:
    return GetGroupMembersResponse(user_ids=GROUPS.get(request.group_id, ()))


def on_connect(event: MqEvent, ack: ConnectAck) -> None:
    logger.info("example.connect", user_id=ack.user_id, code=ack.code)


async def on_message(event: MqEvent, message: MessageRequest) -> None:
    logger.info("example.message", msg_id=message.msg_id, size=len(message.msg_body))


resolver = resolver_from_settings(settings)
dispatcher = HookDispatcher(
    HookHandlers(auth=auth, check_message=check_message, get_group_members=get_group_members),
    resolver,
    require_signature=settings.require_signature,
)


def _log_consumer_exit(task: asyncio.Task) -> None:
    if not task.cancelled() and task.exception() is not None:
        logger.error("mq.consumer_stopped", exc_info=task.exception())


@contextlib.asynccontextmanager
async def lifespan(_app):  # noqa: ANN001, ANN202
    consumer = MqEventConsumer(
        settings.kafka_bootstrap_servers,
        settings.kafka_group_id,
        settings.tenant_ids,
        resolver,
        require_signature=settings.require_signature,
        on_connect=on_connect,
        on_message=on_message,
    )
    await consumer.start()
    task = asyncio.create_task(consumer.run())
    task.add_done_callback(_log_consumer_exit)
    try:
        yield
    finally:
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        await consumer.stop()


def _build_app():  # noqa: ANN202
    from fastapi import FastAPI

    application = FastAPI(title="mics hook service", lifespan=lifespan)
    application.include_router(create_hook_router(dispatcher))
    return application


app = _build_app()
