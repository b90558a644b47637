"""Endpoint de webhook do LINE.

Endpoints:
- POST /webhook/line/: recebimento de eventos inbound

Fluxo:
1. Lê o corpo uma única vez
2. Valida X-LINE-Signature sobre os bytes lidos
3. Decodifica os eventos tipados

Mapeamento de erros:
- Assinatura inválida, JSON malformado, tipo desconhecido: 400
- Falha de leitura do corpo ou cliente não configurado: 500
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any

from fastapi import APIRouter, Request, Response, status

from api.connectors.line.errors import (
    InvalidSignatureError,
    LineClientConfigError,
    WebhookRequestError,
)
from app.bootstrap import get_line_client
from app.observability import CORRELATION_HEADER, correlation_scope

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/", response_model=None)
async def receive_webhook(request: Request) -> Response | dict[str, Any]:
    """Recebimento de eventos inbound do LINE.

    Returns:
        Confirmação de recebimento ou Response de erro.
    """
    with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
        try:
            client = get_line_client()
        except LineClientConfigError as exc:
            logger.error(
                "webhook_client_unavailable",
                extra={"channel": "line", "error": str(exc)},
            )
            return Response(
                content="Internal Server Error",
                media_type="text/plain",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        try:
            events = await client.parse_request_async(request)
        except InvalidSignatureError as exc:
            logger.warning(
                "webhook_signature_invalid",
                extra={"channel": "line", "error": exc.detail},
            )
            return Response(
                content="Bad Request",
                media_type="text/plain",
                status_code=status.HTTP_400_BAD_REQUEST,
            )
        except WebhookRequestError as exc:
            logger.warning(
                "webhook_rejected",
                extra={"channel": "line", "error_code": exc.code, "error": exc.detail},
            )
            return Response(
                content="Internal Server Error" if exc.status_code >= 500 else "Bad Request",
                media_type="text/plain",
                status_code=exc.status_code,
            )

        logger.info(
            "webhook_received",
            extra={
                "channel": "line",
                "event_count": len(events),
                "event_types": dict(Counter(event.type for event in events)),
            },
        )
        return {
            "status": "received",
            "event_count": len(events),
            "correlation_id": correlation_id,
        }
