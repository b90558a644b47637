"""Testes para o endpoint de webhook LINE."""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient
from starlette.requests import Request

from api.connectors.line.client import LineClient
from api.connectors.line.errors import LineClientConfigError
from api.routes.line import webhook


def _build_request(*, body: bytes = b"", headers: dict[str, str] | None = None) -> Request:
    header_items = headers or {}
    raw_headers = [(k.lower().encode("utf-8"), v.encode("utf-8")) for k, v in header_items.items()]
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "POST",
        "path": "/webhook/line/",
        "raw_path": b"/webhook/line/",
        "query_string": b"",
        "headers": raw_headers,
    }
    sent = False

    async def _receive() -> dict[str, object]:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


@pytest.fixture
def line_client(monkeypatch: pytest.MonkeyPatch, channel_secret: str, channel_token: str) -> LineClient:
    client = LineClient(channel_secret=channel_secret, channel_token=channel_token)
    monkeypatch.setattr(webhook, "get_line_client", lambda: client)
    return client


@pytest.mark.asyncio
async def test_receive_webhook_success(line_client: LineClient, sign, webhook_body: bytes) -> None:
    request = _build_request(
        body=webhook_body,
        headers={"X-LINE-Signature": sign(webhook_body), "X-Correlation-ID": "corr-1"},
    )

    response = await webhook.receive_webhook(request)

    assert response == {"status": "received", "event_count": 11, "correlation_id": "corr-1"}


@pytest.mark.asyncio
async def test_receive_webhook_generates_correlation_id(line_client: LineClient, sign) -> None:
    body = b'{"events": []}'
    request = _build_request(body=body, headers={"X-LINE-Signature": sign(body)})

    response = await webhook.receive_webhook(request)

    assert response["event_count"] == 0
    assert response["correlation_id"]


@pytest.mark.asyncio
async def test_receive_webhook_invalid_signature(
    line_client: LineClient, webhook_body: bytes
) -> None:
    request = _build_request(body=webhook_body, headers={"X-LINE-Signature": "invalidsignatue"})

    response = await webhook.receive_webhook(request)

    assert response.status_code == 400
    assert response.body == b"Bad Request"


@pytest.mark.asyncio
async def test_receive_webhook_unknown_event_type(line_client: LineClient, sign) -> None:
    body = b'{"events":[{"type":"quantum","timestamp":1,"source":{"type":"user","userId":"u"}}]}'
    request = _build_request(body=body, headers={"X-LINE-Signature": sign(body)})

    response = await webhook.receive_webhook(request)

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_receive_webhook_malformed_json(line_client: LineClient, sign) -> None:
    body = b"{invalid}"
    request = _build_request(body=body, headers={"X-LINE-Signature": sign(body)})

    response = await webhook.receive_webhook(request)

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_receive_webhook_client_disconnect(line_client: LineClient) -> None:
    scope = {"type": "http", "method": "POST", "path": "/webhook/line/", "headers": []}

    async def _receive() -> dict[str, object]:
        return {"type": "http.disconnect"}

    response = await webhook.receive_webhook(Request(scope, _receive))

    assert response.status_code == 500
    assert response.body == b"Internal Server Error"


@pytest.mark.asyncio
async def test_receive_webhook_client_not_configured(monkeypatch: pytest.MonkeyPatch) -> None:
    def _raise() -> LineClient:
        raise LineClientConfigError("missing_channel_secret")

    monkeypatch.setattr(webhook, "get_line_client", _raise)

    response = await webhook.receive_webhook(_build_request(body=b"{}"))

    assert response.status_code == 500


def test_webhook_through_app(line_client: LineClient, sign, webhook_body: bytes) -> None:
    from app.app import create_app

    http = TestClient(create_app())

    response = http.post(
        "/webhook/line/",
        content=webhook_body,
        headers={"X-LINE-Signature": sign(webhook_body)},
    )

    assert response.status_code == 200
    payload = json.loads(response.text)
    assert payload["status"] == "received"
    assert payload["event_count"] == 11


def test_webhook_path_has_trailing_slash() -> None:
    from app.app import create_app

    paths = {getattr(route, "path", None) for route in create_app().routes}

    assert "/webhook/line/" in paths
    assert "/webhook/line" not in paths


def test_webhook_through_app_rejects_bad_signature(
    line_client: LineClient, webhook_body: bytes
) -> None:
    from app.app import create_app

    http = TestClient(create_app())

    response = http.post(
        "/webhook/line/",
        content=webhook_body,
        headers={"X-LINE-Signature": "invalidsignatue"},
    )

    assert response.status_code == 400
