"""Erros do webhook LINE.

Cada erro carrega um `code` estável (seguro para logs) e o status HTTP
sugerido para a resposta ao LINE. Nenhum erro é retentável: o chamador
decide o que fazer.
"""

from __future__ import annotations


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""

    code: str = "webhook_error"
    status_code: int = 400

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.code)
        self.detail = detail or self.code


class InvalidSignatureError(WebhookRequestError):
    """Assinatura X-LINE-Signature ausente, malformada ou divergente."""

    code = "invalid_signature"


class WebhookReadError(WebhookRequestError):
    """Falha de IO ao ler o corpo do request."""

    code = "read_error"
    status_code = 500


class MalformedJsonError(WebhookRequestError):
    """Corpo não é JSON válido ou viola tipos/faixas numéricas."""

    code = "malformed_json"


class UnknownEventTypeError(WebhookRequestError):
    """Evento com `type` fora do conjunto conhecido."""

    code = "unknown_event_type"

    def __init__(self, event_type: str) -> None:
        super().__init__(f"{self.code}: {event_type!r}")
        self.event_type = event_type


class UnknownMessageTypeError(WebhookRequestError):
    """Mensagem com `message.type` fora do conjunto conhecido."""

    code = "unknown_message_type"

    def __init__(self, message_type: str) -> None:
        super().__init__(f"{self.code}: {message_type!r}")
        self.message_type = message_type


class UnknownSourceTypeError(WebhookRequestError):
    """Origem com `source.type` fora de user/group/room."""

    code = "unknown_source_type"

    def __init__(self, source_type: str) -> None:
        super().__init__(f"{self.code}: {source_type!r}")
        self.source_type = source_type


class LineClientConfigError(ValueError):
    """Credenciais do canal ausentes na construção do cliente."""
