"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do serviço (app/bootstrap/)
    configure_logging(level="INFO", service_name="line-webhook")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("webhook_received", extra={"event_count": 3})

O decodificador e o verificador de assinatura não logam; logs ficam na
borda HTTP e no bootstrap.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter, create_text_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

# Níveis de log válidos
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "line-webhook"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    *,
    json_output: bool = True,
) -> None:
    """Configura logging estruturado para o serviço.

    Deve ser chamada uma vez na inicialização do serviço.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual (ex: de ContextVar).
        json_output: False usa formato texto (desenvolvimento local).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    formatter = create_json_formatter() if json_output else create_text_formatter()

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado.

    O filter injeta automaticamente service e correlation_id.
    """
    return logging.getLogger(name)
