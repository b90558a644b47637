"""Extrator de eventos do webhook LINE.

Responsabilidades:
- Decodificar o corpo bruto (UTF-8 + JSON estrito)
- Despachar cada elemento de `events` para a variante de evento
- Despachar eventos `message` para a variante de mensagem

Qualquer erro aborta o lote inteiro: nunca há resultado parcial.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from api.connectors.line.errors import MalformedJsonError, UnknownEventTypeError
from api.connectors.line.models import (
    BeaconEvent,
    FollowEvent,
    JoinEvent,
    LeaveEvent,
    MessageEvent,
    PostbackEvent,
    UnfollowEvent,
)

from ._extraction_helpers import (
    extract_beacon,
    extract_message,
    extract_postback,
    extract_source,
    read_int64,
    read_object,
    read_str,
)

if TYPE_CHECKING:
    from api.connectors.line.models import Event, EventSource


def _reject_constant(name: str) -> Any:
    # NaN/Infinity não fazem parte do JSON
    raise MalformedJsonError(f"invalid_number: {name}")


def load_payload(raw_body: bytes) -> dict[str, Any]:
    """Decodifica o corpo bruto em objeto JSON.

    Raises:
        MalformedJsonError: Se não for UTF-8, JSON válido ou objeto
    """
    try:
        text = raw_body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedJsonError("invalid_utf8") from exc

    try:
        payload = json.loads(text, parse_constant=_reject_constant)
    except MalformedJsonError:
        raise
    except json.JSONDecodeError as exc:
        raise MalformedJsonError("invalid_json") from exc
    except ValueError as exc:
        # inteiro acima do limite de dígitos do interpretador
        raise MalformedJsonError("invalid_number") from exc
    except RecursionError as exc:
        raise MalformedJsonError("json_too_deep") from exc

    if not isinstance(payload, dict):
        raise MalformedJsonError("payload_not_object")
    return payload


def _require_payload(event_block: dict[str, Any], key: str) -> dict[str, Any]:
    block = read_object(event_block, key)
    if block is None:
        raise MalformedJsonError(f"missing_{key}")
    return block


def extract_event(event_block: Any) -> Event:
    """Converte um elemento de `events` na variante tipada.

    Raises:
        UnknownEventTypeError: Se `type` não for suportado
        UnknownMessageTypeError: Se `message.type` não for suportado
        MalformedJsonError: Se a estrutura ou os tipos forem inválidos
    """
    if not isinstance(event_block, dict):
        raise MalformedJsonError("event_not_object")

    event_type = read_str(event_block, "type")
    if event_type not in _EVENT_BUILDERS:
        raise UnknownEventTypeError(event_type)

    timestamp = read_int64(event_block, "timestamp")
    source = extract_source(event_block)
    reply_token = read_str(event_block, "replyToken")
    return _EVENT_BUILDERS[event_type](event_block, timestamp, source, reply_token)


def _build_message(
    block: dict[str, Any], timestamp: int, source: EventSource, reply_token: str
) -> Event:
    return MessageEvent(
        timestamp=timestamp,
        source=source,
        reply_token=reply_token,
        message=extract_message(_require_payload(block, "message")),
    )


def _build_postback(
    block: dict[str, Any], timestamp: int, source: EventSource, reply_token: str
) -> Event:
    return PostbackEvent(
        timestamp=timestamp,
        source=source,
        reply_token=reply_token,
        postback=extract_postback(_require_payload(block, "postback")),
    )


def _build_beacon(
    block: dict[str, Any], timestamp: int, source: EventSource, reply_token: str
) -> Event:
    return BeaconEvent(
        timestamp=timestamp,
        source=source,
        reply_token=reply_token,
        beacon=extract_beacon(_require_payload(block, "beacon")),
    )


def _build_follow(
    block: dict[str, Any], timestamp: int, source: EventSource, reply_token: str
) -> Event:
    return FollowEvent(timestamp=timestamp, source=source, reply_token=reply_token)


def _build_unfollow(
    block: dict[str, Any], timestamp: int, source: EventSource, reply_token: str
) -> Event:
    return UnfollowEvent(timestamp=timestamp, source=source, reply_token=reply_token)


def _build_join(
    block: dict[str, Any], timestamp: int, source: EventSource, reply_token: str
) -> Event:
    return JoinEvent(timestamp=timestamp, source=source, reply_token=reply_token)


def _build_leave(
    block: dict[str, Any], timestamp: int, source: EventSource, reply_token: str
) -> Event:
    return LeaveEvent(timestamp=timestamp, source=source, reply_token=reply_token)


_EVENT_BUILDERS = {
    "message": _build_message,
    "follow": _build_follow,
    "unfollow": _build_unfollow,
    "join": _build_join,
    "leave": _build_leave,
    "postback": _build_postback,
    "beacon": _build_beacon,
}


def extract_payload_events(payload: dict[str, Any]) -> list[Event]:
    """Extrai os eventos de um payload já decodificado, na ordem do array."""
    events_block = payload.get("events")
    if events_block is None:
        return []
    if not isinstance(events_block, list):
        raise MalformedJsonError("events_not_array")
    return [extract_event(item) for item in events_block]


def parse_events(raw_body: bytes) -> list[Event]:
    """Decodifica o corpo bruto do webhook em eventos tipados.

    Args:
        raw_body: Corpo bruto do request (UTF-8 JSON)

    Returns:
        Eventos na mesma ordem do array `events`

    Raises:
        MalformedJsonError: JSON inválido, tipo divergente ou número fora de faixa
        UnknownEventTypeError: Evento com tipo desconhecido
        UnknownMessageTypeError: Mensagem com tipo desconhecido
        UnknownSourceTypeError: Origem com tipo desconhecido
    """
    return extract_payload_events(load_payload(raw_body))
