"""Entrypoint da aplicação de webhook LINE.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup: valida configurações (falha rápido em staging/produção).
    """
    service = get_base_settings().service_name
    logger.info("app_starting", extra={"service": service})
    validate_runtime_settings()

    yield

    logger.info("app_shutting_down", extra={"service": service})


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="LINE Webhook",
        description="Recebimento e validação de webhooks da LINE Messaging API",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": get_base_settings().service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting LINE webhook in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
