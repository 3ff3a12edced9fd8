"""FastAPI adapter – one POST route per hook kind."""
from typing import Any

from mics_hooks.application.dispatch import HookDispatcher, HookKind
from mics_hooks.observability.logging import get_logger
from mics_hooks.wire import PROTOBUF_MEDIA_TYPE

logger = get_logger(__name__)

ACCEPTED_MEDIA_TYPES = ("application/protobuf", "application/x-protobuf")


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'mics-hooks[fastapi]' to use the FastAPI adapter"
        ) from exc


def _accepts(content_type: str | None) -> bool:
    """A missing Content-Type is tolerated; a present one must be protobuf."""
    if not content_type:
        return True
    return content_type.strip().lower().startswith(ACCEPTED_MEDIA_TYPES)


def create_hook_router(dispatcher: HookDispatcher, prefix: str = "", tags: list[str] | None = None) -> Any:
    """Return an ``APIRouter`` exposing ``POST {prefix}/auth`` and friends.

    Parameters
    ----------
    dispatcher:
        Verifies and routes each decoded request.
    prefix:
        Mounted in front of every hook path, e.g. ``"/hooks"``.
    tags:
        OpenAPI tags for the generated routes.

    Other methods on a hook path get FastAPI's 405. Handlers run in the
    threadpool because ``HookDispatcher`` and its handlers are synchronous.
    """
    _require_fastapi()
    from fastapi import APIRouter, Request  # type: ignore[import-untyped]
    from fastapi.concurrency import run_in_threadpool  # type: ignore[import-untyped]
    from fastapi.responses import Response  # type: ignore[import-untyped]

    router = APIRouter(prefix=prefix, tags=tags or ["hooks"])

    def _endpoint(kind: HookKind) -> Any:
        async def hook(request: Request) -> Response:
            if not _accepts(request.headers.get("content-type")):
                logger.info("hook.unsupported_media_type", hook=kind.value)
                return Response(
                    status_code=415,
                    content=b"Unsupported Media Type",
                    media_type="text/plain; charset=utf-8",
                )
            body = await request.body()
            reply = await run_in_threadpool(dispatcher.dispatch_bytes, kind, body)
            return Response(status_code=reply.status_code, content=reply.content, media_type=reply.media_type)

        hook.__name__ = kind.name.lower()
        return hook

    for kind in HookKind:
        router.add_api_route(
            kind.path,
            _endpoint(kind),
            methods=["POST"],
            response_class=Response,
            responses={200: {"content": {PROTOBUF_MEDIA_TYPE: {}}}},
        )

    return router


def create_hook_app(dispatcher: HookDispatcher, prefix: str = "", **kwargs: Any) -> Any:
    """Return a ``FastAPI`` application serving only the hook routes."""
    _require_fastapi()
    from fastapi import FastAPI  # type: ignore[import-untyped]

    app = FastAPI(**kwargs)
    app.include_router(create_hook_router(dispatcher, prefix=prefix))
    return app


__all__ = ["ACCEPTED_MEDIA_TYPES", "create_hook_app", "create_hook_router"]
