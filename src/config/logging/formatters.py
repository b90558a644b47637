"""Formatters de logging estruturado.

Define formatters para logs JSON com campos obrigatórios:
- correlation_id
- service
- timestamp (asctime)
- level
- logger (name)
- message

Em desenvolvimento há também um formatter texto com os mesmos campos.
"""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

# Mapeamento de nomes de campos para formato padrão
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(service)s:%(correlation_id)s] %(name)s: %(message)s"


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Returns:
        JsonFormatter configurado para logs estruturados.

    Exemplo de output:
        {
            "asctime": "2026-10-19 10:30:00,123",
            "level": "INFO",
            "logger": "api.routes.line.webhook",
            "message": "webhook_received",
            "correlation_id": "abc-123",
            "service": "line-webhook"
        }
    """
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )


def create_text_formatter() -> logging.Formatter:
    """Cria formatter texto legível (uso local)."""
    return logging.Formatter(TEXT_FORMAT)
