from __future__ import annotations

import io

import pytest

from api.connectors.line.webhook import receive
from api.connectors.line.webhook.receive import (
    InvalidSignatureError,
    WebhookReadError,
    parse_signed_body,
    parse_webhook_request,
    read_request_body,
)


def test_parse_webhook_request_ok(sign) -> None:
    body = b'{"events": []}'
    headers = {"X-LINE-Signature": sign(body)}

    assert parse_webhook_request(body, headers, "testsecret") == []


def test_parse_webhook_request_lowercase_header(sign) -> None:
    body = b'{"events": []}'

    assert parse_webhook_request(body, {"x-line-signature": sign(body)}, "testsecret") == []


def test_invalid_signature_never_decodes_body(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[bytes] = []
    monkeypatch.setattr(receive, "parse_events", calls.append)

    with pytest.raises(InvalidSignatureError):
        parse_signed_body(b'{"events": []}', "invalidsignatue", "testsecret")

    assert calls == []


def test_signature_error_carries_reason() -> None:
    with pytest.raises(InvalidSignatureError) as exc_info:
        parse_signed_body(b"{}", None, "testsecret")

    assert exc_info.value.detail == "missing_signature"
    assert exc_info.value.status_code == 400


def test_signature_checked_before_json(sign) -> None:
    body = b"not json"

    with pytest.raises(InvalidSignatureError):
        parse_signed_body(body, sign(b"other"), "testsecret")


def test_read_request_body_prefers_read() -> None:
    class _Request:
        headers: dict[str, str] = {}

        def read(self) -> bytearray:
            return bytearray(b"abc")

    assert read_request_body(_Request()) == b"abc"


def test_read_request_body_stream_failure() -> None:
    class _Stream(io.RawIOBase):
        def read(self, size: int = -1) -> bytes:
            raise TimeoutError("slow client")

    class _Request:
        headers: dict[str, str] = {}
        stream = _Stream()

    with pytest.raises(WebhookReadError, match="TimeoutError"):
        read_request_body(_Request())
