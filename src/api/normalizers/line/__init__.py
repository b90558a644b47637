"""Normalizer LINE — decodificação de eventos do webhook.

Responsabilidades:
- Decodificar o corpo do webhook (UTF-8 JSON `{"events": [...]}`)
- Despachar por `type` do evento e por `message.type`
- Produzir registros imutáveis de api.connectors.line.models

Eventos suportados: message, follow, unfollow, join, leave, postback,
beacon. Mensagens suportadas: text, image, video, audio, file,
location, sticker.
"""

from .extractor import extract_event, extract_payload_events, load_payload, parse_events

__all__ = [
    "extract_event",
    "extract_payload_events",
    "load_payload",
    "parse_events",
]
