"""Rotas HTTP da API — adapters de entrada por canal.

Responsabilidades:
- Definir endpoints HTTP (webhook, health)
- Delegação para connectors
- Respostas HTTP apropriadas para cada erro tipado

Estrutura:
- routes/line/: webhook LINE
- routes/health/: health check
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
