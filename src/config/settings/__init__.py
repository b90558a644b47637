"""Agregador de settings do serviço de webhook LINE.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Channel-specific settings
from config.settings.line import (
    LINE_API_BASE_URL,
    LineSettings,
    get_line_settings,
)

__all__ = [
    # Constants
    "DEFAULT_SERVICE_NAME",
    "LINE_API_BASE_URL",
    # Base
    "BaseSettings",
    "Environment",
    # Channels
    "LineSettings",
    "get_base_settings",
    "get_line_settings",
]
