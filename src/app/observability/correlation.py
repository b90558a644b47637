"""Gerenciamento de correlation_id para rastreamento de webhooks.

O correlation_id é injetado em logs pelo CorrelationIdFilter.
Usa ContextVar para ser thread/async-safe.

Uso:
    from app.observability import correlation_scope, get_correlation_id

    with correlation_scope(request.headers.get("x-correlation-id")):
        ...  # get_correlation_id() retorna o valor do request
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

CORRELATION_HEADER = "x-correlation-id"

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (vazio se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None ou vazio, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4)."""
    return str(uuid.uuid4())


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Define o correlation_id durante o bloco e restaura ao sair."""
    token = set_correlation_id(correlation_id)
    try:
        yield get_correlation_id()
    finally:
        reset_correlation_id(token)
