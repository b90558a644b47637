"""Leitura, validação de assinatura e parsing do webhook LINE (sem PII).

O corpo é lido uma única vez; a assinatura é verificada sobre exatamente
os bytes lidos e os mesmos bytes são decodificados.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from starlette.requests import ClientDisconnect

from api.normalizers.line import parse_events

from ..errors import InvalidSignatureError, WebhookReadError
from ..signature import check_signature, get_signature_header

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..models import Event


class WebhookRequest(Protocol):
    """Request síncrono com corpo legível uma única vez (ex: Django HttpRequest)."""

    @property
    def headers(self) -> Mapping[str, str]: ...

    def read(self) -> bytes: ...


class AsyncWebhookRequest(Protocol):
    """Request assíncrono no formato Starlette/FastAPI."""

    @property
    def headers(self) -> Mapping[str, str]: ...

    async def body(self) -> bytes: ...


def read_request_body(request: Any) -> bytes:
    """Lê o corpo completo de um request síncrono.

    Aceita objetos com `read()` ou com `stream.read()` (Werkzeug).

    Raises:
        WebhookReadError: Em falha de IO durante a leitura
    """
    reader = getattr(request, "read", None)
    if not callable(reader):
        reader = request.stream.read
    try:
        return bytes(reader())
    except OSError as exc:
        raise WebhookReadError(f"read_error: {type(exc).__name__}") from exc


async def read_request_body_async(request: AsyncWebhookRequest) -> bytes:
    """Lê o corpo completo de um request Starlette.

    Raises:
        WebhookReadError: Se o cliente desconectar ou houver falha de IO
    """
    try:
        return await request.body()
    except (ClientDisconnect, OSError) as exc:
        raise WebhookReadError(f"read_error: {type(exc).__name__}") from exc


def parse_webhook_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | bytes,
) -> list[Event]:
    """Valida assinatura e decodifica os eventos do webhook.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos
        secret: Channel secret

    Raises:
        InvalidSignatureError: Se assinatura for inválida (sem decodificar)
        MalformedJsonError: Se o JSON for inválido
        UnknownEventTypeError: Se houver evento de tipo desconhecido
        UnknownMessageTypeError: Se houver mensagem de tipo desconhecido

    Returns:
        Eventos na ordem do payload
    """
    return parse_signed_body(raw_body, get_signature_header(headers), secret)


def parse_signed_body(
    raw_body: bytes,
    signature: str | None,
    secret: str | bytes,
) -> list[Event]:
    """Mesmo que parse_webhook_request, com a assinatura já extraída."""
    signature_result = check_signature(raw_body, signature, secret)
    if not signature_result.valid:
        raise InvalidSignatureError(signature_result.error or "invalid_signature")
    return parse_events(raw_body)
