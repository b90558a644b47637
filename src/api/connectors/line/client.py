"""Cliente LINE para recebimento de webhooks.

O cliente carrega apenas o par imutável (channel_secret, channel_token).
O token não é usado no parsing; fica disponível para as APIs de saída.
É seguro compartilhar uma instância entre threads e tasks, desde que cada
request seja consumido por um único chamador.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import LineClientConfigError
from .webhook.receive import (
    parse_signed_body,
    parse_webhook_request,
    read_request_body,
    read_request_body_async,
)

if TYPE_CHECKING:
    from .models import Event
    from .webhook.receive import AsyncWebhookRequest, WebhookRequest


@dataclass(frozen=True, slots=True)
class LineClient:
    """Parser de webhooks de um canal LINE.

    Attributes:
        channel_secret: Secret usado na validação HMAC
        channel_token: Access token do canal (APIs de saída)

    Raises:
        LineClientConfigError: Se secret ou token estiverem vazios
    """

    channel_secret: str
    channel_token: str

    def __post_init__(self) -> None:
        if not self.channel_secret:
            raise LineClientConfigError("missing_channel_secret")
        if not self.channel_token:
            raise LineClientConfigError("missing_channel_token")

    def __repr__(self) -> str:
        return "LineClient(channel_secret='***', channel_token='***')"

    def parse_request(self, request: WebhookRequest) -> list[Event]:
        """Lê o corpo uma vez, valida a assinatura e decodifica os eventos.

        Args:
            request: Request com `headers` e `read()` (ou `stream.read()`)

        Raises:
            WebhookReadError: Falha de IO na leitura do corpo
            InvalidSignatureError: Assinatura ausente ou inválida
            MalformedJsonError: Corpo não é JSON válido
            UnknownEventTypeError: Evento de tipo desconhecido
            UnknownMessageTypeError: Mensagem de tipo desconhecido

        Returns:
            Eventos na ordem do payload
        """
        raw_body = read_request_body(request)
        return parse_webhook_request(raw_body, request.headers, self.channel_secret)

    async def parse_request_async(self, request: AsyncWebhookRequest) -> list[Event]:
        """Versão assíncrona de parse_request para requests Starlette/FastAPI."""
        raw_body = await read_request_body_async(request)
        return parse_webhook_request(raw_body, request.headers, self.channel_secret)

    def parse_body(self, raw_body: bytes, signature: str | None) -> list[Event]:
        """Valida e decodifica um corpo já lido pelo chamador.

        Args:
            raw_body: Corpo bruto exatamente como recebido
            signature: Valor do header X-LINE-Signature (None se ausente)
        """
        return parse_signed_body(raw_body, signature, self.channel_secret)
