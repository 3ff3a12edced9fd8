"""Unit tests for the FastAPI hook routes."""
from __future__ import annotations

import dataclasses

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from mics_hooks.adapters.fastapi import create_hook_app, create_hook_router
from mics_hooks.application.dispatch import HookDispatcher, HookHandlers, StaticTenantSecretResolver
from mics_hooks.application.signing import HookSigner
from mics_hooks.kernel.contracts import (
    AuthRequest,
    AuthResponse,
    CheckMessageResponse,
    GetGroupMembersRequest,
    GetGroupMembersResponse,
    GetOfflineMessagesResponse,
    HookMeta,
)
from mics_hooks.wire import decode, encode

SECRET = "secret"
META = HookMeta(tenant_id="t1", request_id="rid-1", timestamp_ms=123456789, trace_id="tr-1")
PROTOBUF = {"content-type": "application/protobuf"}


def _signed_auth(token: str = "valid:u1") -> AuthRequest:
    request = AuthRequest(meta=META, token=token, device_id="dev1")
    return dataclasses.replace(
        request, meta=dataclasses.replace(META, signature=HookSigner.sign(SECRET, META, request))
    )


def _dispatcher() -> HookDispatcher:
    handlers = HookHandlers(
        auth=lambda req: AuthResponse(ok=True, user_id=req.token.removeprefix("valid:"), device_id=req.device_id),
        check_message=lambda req: CheckMessageResponse(allow=True),
        get_group_members=lambda req: GetGroupMembersResponse(user_ids=("u1",)),
    )
    return HookDispatcher(handlers, StaticTenantSecretResolver({"t1": SECRET}))


@pytest.fixture()
def client() -> TestClient:
    return TestClient(create_hook_app(_dispatcher()))


class TestHookRoutes:
    def test_auth_ok(self, client: TestClient) -> None:
        resp = client.post("/auth", content=encode(_signed_auth()), headers=PROTOBUF)
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("application/protobuf")
        body = decode(AuthResponse, resp.content)
        assert body.ok is True
        assert body.user_id == "u1"
        assert body.meta == _signed_auth().meta

    def test_legacy_media_type_accepted(self, client: TestClient) -> None:
        headers = {"content-type": "application/x-protobuf"}
        resp = client.post("/auth", content=encode(_signed_auth()), headers=headers)
        assert resp.status_code == 200

    def test_missing_content_type_accepted(self, client: TestClient) -> None:
        resp = client.post("/auth", content=encode(_signed_auth()))
        assert resp.status_code == 200

    def test_unsigned_request_rejected_in_body(self, client: TestClient) -> None:
        resp = client.post("/auth", content=encode(AuthRequest(meta=META)), headers=PROTOBUF)
        assert resp.status_code == 200
        assert decode(AuthResponse, resp.content).reason == "invalid sign"

    def test_unknown_tenant(self, client: TestClient) -> None:
        request = GetGroupMembersRequest(meta=dataclasses.replace(META, tenant_id="t9"), group_id="g1")
        resp = client.post("/get-group-members", content=encode(request), headers=PROTOBUF)
        body = decode(GetGroupMembersResponse, resp.content)
        assert body.user_ids == ()
        assert body.meta is not None and body.meta.tenant_id == "t9"

    def test_offline_default(self, client: TestClient) -> None:
        resp = client.post("/get-offline-messages", content=b"", headers=PROTOBUF)
        assert resp.status_code == 200
        assert decode(GetOfflineMessagesResponse, resp.content).reason == "invalid tenant"

    def test_garbage_body_is_400(self, client: TestClient) -> None:
        resp = client.post("/check-message", content=b"\x12\x05ab", headers=PROTOBUF)
        assert resp.status_code == 400
        assert resp.text == "Bad Request"

    def test_wrong_media_type_is_415(self, client: TestClient) -> None:
        resp = client.post("/auth", content=b"{}", headers={"content-type": "application/json"})
        assert resp.status_code == 415

    def test_get_is_405(self, client: TestClient) -> None:
        assert client.get("/auth").status_code == 405

    def test_unknown_path_is_404(self, client: TestClient) -> None:
        assert client.post("/nope", content=b"", headers=PROTOBUF).status_code == 404


class TestRouterMounting:
    def test_prefix(self) -> None:
        app = FastAPI()
        app.include_router(create_hook_router(_dispatcher(), prefix="/hooks"))
        resp = TestClient(app).post("/hooks/auth", content=encode(_signed_auth()), headers=PROTOBUF)
        assert resp.status_code == 200
        assert decode(AuthResponse, resp.content).ok is True
