"""Settings específicas de LINE.

Configurações do canal LINE via Messaging API.
Cada canal deve ter seu próprio arquivo de settings para isolamento.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da Messaging API
LINE_API_BASE_URL: str = "https://api.line.me"


@dataclass(frozen=True)
class LineSettings:
    """Configurações do canal LINE.

    Attributes:
        channel_secret: Secret para validação HMAC do webhook
        channel_access_token: Token de acesso à Messaging API
        api_base_url: URL base da Messaging API
        request_timeout_seconds: Timeout para requisições HTTP de saída
    """

    # Credenciais (carregadas de env)
    channel_secret: str = ""
    channel_access_token: str = ""

    # API
    api_base_url: str = LINE_API_BASE_URL

    # Timeouts
    request_timeout_seconds: float = 30.0

    def validate(self) -> list[str]:
        """Valida configurações mínimas de LINE.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.channel_secret:
            errors.append("LINE_CHANNEL_SECRET não configurado")

        if not self.channel_access_token:
            errors.append("LINE_CHANNEL_ACCESS_TOKEN não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("LINE_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> LineSettings:
    """Carrega LineSettings a partir de variáveis de ambiente."""
    return LineSettings(
        channel_secret=os.getenv("LINE_CHANNEL_SECRET", ""),
        channel_access_token=os.getenv("LINE_CHANNEL_ACCESS_TOKEN", ""),
        api_base_url=os.getenv("LINE_API_BASE_URL", LINE_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("LINE_REQUEST_TIMEOUT_SECONDS", "30")
        ),
    )


@lru_cache(maxsize=1)
def get_line_settings() -> LineSettings:
    """Retorna instância cacheada de LineSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
