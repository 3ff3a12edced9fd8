"""Application dispatch – HookDispatcher, the verification gate in front of handlers.

Each call walks four steps and stops at the first failure::

    RECEIVED ──► SECRET_RESOLVED ──► VERIFIED ──► HANDLED
       │               │                 │            │
    400 reply    invalid/unknown     invalid sign  handler error
                     tenant

Every response past ``RECEIVED`` carries the request metadata echoed back
(signature as received) so the platform can correlate failures.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from mics_hooks.application.dispatch.handlers import HookHandlers
from mics_hooks.application.dispatch.kinds import HookKind, RejectReason, kind_of, spec_for
from mics_hooks.application.dispatch.tenant_secrets import TenantSecretResolver
from mics_hooks.application.signing import HookSigner, Secret
from mics_hooks.application.signing.keys import is_blank
from mics_hooks.kernel.contracts import (
    AuthRequest,
    AuthResponse,
    CheckMessageRequest,
    CheckMessageResponse,
    GetGroupMembersRequest,
    GetGroupMembersResponse,
    GetOfflineMessagesRequest,
    GetOfflineMessagesResponse,
    HookMeta,
    HookRequest,
    HookResponse,
    clear_meta_signature,
)
from mics_hooks.kernel.errors import SerializationError
from mics_hooks.kernel.types import Err, Ok, Result
from mics_hooks.observability.logging import get_logger
from mics_hooks.wire import PROTOBUF_MEDIA_TYPE, decode, encode

logger = get_logger(__name__)


@dataclass(frozen=True)
class HookReply:
    """Transport-neutral reply: status code, body bytes and content type."""

    status_code: int
    content: bytes
    media_type: str = PROTOBUF_MEDIA_TYPE

    @classmethod
    def bad_request(cls) -> HookReply:
        return cls(status_code=400, content=b"Bad Request", media_type="text/plain; charset=utf-8")


class HookDispatcher:
    """Resolve the tenant secret, verify the signature, then call the handler.

    Parameters
    ----------
    handlers:
        Business callbacks for each :class:`HookKind`.
    resolver:
        ``tenant_id -> secret or None``.
    require_signature:
        When false, requests with a blank signature are accepted unverified.
    """

    def __init__(
        self,
        handlers: HookHandlers,
        resolver: TenantSecretResolver,
        *,
        require_signature: bool = True,
    ) -> None:
        self._handlers = handlers
        self._resolver = resolver
        self._require_signature = require_signature

    @property
    def require_signature(self) -> bool:
        return self._require_signature

    # ------------------------------------------------------------------
    # Typed entry points
    # ------------------------------------------------------------------

    def auth(self, request: AuthRequest) -> AuthResponse:
        return self.dispatch(HookKind.AUTH, request)

    def check_message(self, request: CheckMessageRequest) -> CheckMessageResponse:
        return self.dispatch(HookKind.CHECK_MESSAGE, request)

    def get_group_members(self, request: GetGroupMembersRequest) -> GetGroupMembersResponse:
        return self.dispatch(HookKind.GET_GROUP_MEMBERS, request)

    def get_offline_messages(self, request: GetOfflineMessagesRequest) -> GetOfflineMessagesResponse:
        return self.dispatch(HookKind.GET_OFFLINE_MESSAGES, request)

    # ------------------------------------------------------------------
    # Generic dispatch
    # ------------------------------------------------------------------

    def dispatch_bytes(self, kind: HookKind, body: bytes) -> HookReply:
        """Parse *body* as the request of *kind* and dispatch it."""
        try:
            request = decode(spec_for(kind).request_type, body)
        except SerializationError:
            logger.info("hook.bad_request", hook=kind.value, size=len(body))
            return HookReply.bad_request()
        return HookReply(status_code=200, content=encode(self.dispatch(kind, request)))

    def dispatch(self, kind: HookKind, request: HookRequest) -> Any:
        if kind_of(request) is not kind:
            raise TypeError(f"{type(request).__name__} cannot be dispatched as {kind.name}")

        meta = request.meta if request.meta is not None else HookMeta()
        log = logger.bind(
            hook=kind.value,
            tenant_id=meta.tenant_id,
            request_id=meta.request_id,
            trace_id=meta.trace_id,
        )

        match self._authenticate(meta, request):
            case Err(reason):
                return self._reject(kind, meta, reason, log)

        match self._invoke(kind, request, log):
            case Ok(response):
                if response.meta is None:
                    response = dataclasses.replace(response, meta=meta.echo())
                return response
            case Err(reason):
                return self._reject(kind, meta, reason, log)

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _authenticate(self, meta: HookMeta, request: HookRequest) -> Result[Secret, RejectReason]:
        if is_blank(meta.tenant_id):
            return Err(RejectReason.INVALID_TENANT)
        secret = self._resolver(meta.tenant_id)
        if secret is None or is_blank(secret):
            return Err(RejectReason.UNKNOWN_TENANT)
        if not HookSigner.verify(secret, meta, clear_meta_signature(request), self._require_signature):
            return Err(RejectReason.INVALID_SIGN)
        return Ok(secret)

    def _invoke(self, kind: HookKind, request: HookRequest, log: Any) -> Result[HookResponse, RejectReason]:
        spec = spec_for(kind)
        handler = self._handlers.for_kind(kind)
        try:
            response = handler(request)
        except Exception:  # noqa: BLE001
            log.warning("hook.handler_failed", exc_info=True)
            return Err(RejectReason.HANDLER_ERROR)

        if response is None:
            return Ok(spec.empty())
        if not isinstance(response, spec.response_type):
            log.warning("hook.handler_bad_response", response_type=type(response).__name__)
            return Err(RejectReason.HANDLER_ERROR)
        return Ok(response)

    @staticmethod
    def _reject(kind: HookKind, meta: HookMeta, reason: RejectReason, log: Any) -> Any:
        log.info("hook.rejected", reason=reason.value)
        return spec_for(kind).reject(meta.echo(), reason.value)


__all__ = ["HookDispatcher", "HookReply"]
