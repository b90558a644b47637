"""Normalizers por canal — conversão de payloads externos para modelos internos.

Estrutura:
- line/: decodificador de eventos do webhook LINE Messaging API

Cada canal tem seu próprio extractor, mantendo SRP.
"""

from .line import parse_events

__all__ = [
    "parse_events",
]
