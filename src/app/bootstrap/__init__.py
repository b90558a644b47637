"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
constrói o LineClient a partir das variáveis de ambiente.

Uso:
    from app.bootstrap import initialize_app, get_line_client

    # Na inicialização do serviço
    initialize_app()

    # Obter cliente (singleton)
    client = get_line_client()
"""

from __future__ import annotations

import logging
from functools import lru_cache

from api.connectors.line.client import LineClient
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_line_settings

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging estruturado com correlation_id.

    Deve ser chamada uma vez no início do serviço. Em desenvolvimento
    usa formato texto; nos demais ambientes, JSON.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
        json_output=not base.is_development,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (DEBUG, formato texto)."""
    base = get_base_settings()
    configure_logging(
        level="DEBUG",
        service_name=f"{base.service_name}_test",
        correlation_id_getter=get_correlation_id,
        json_output=False,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    strict_mode = base.environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"line: {error}" for error in get_line_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


@lru_cache(maxsize=1)
def get_line_client() -> LineClient:
    """Retorna LineClient construído das settings (singleton).

    Raises:
        LineClientConfigError: Se secret ou token não estiverem configurados
    """
    settings = get_line_settings()
    return LineClient(
        channel_secret=settings.channel_secret,
        channel_token=settings.channel_access_token,
    )


__all__ = [
    "get_line_client",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]
