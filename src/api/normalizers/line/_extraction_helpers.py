"""Helpers de extração de campos do payload LINE.

Separado de extractor.py para manter SRP: aqui ficam a leitura tipada de
campos (com as regras numéricas do protocolo) e a construção de cada
variante de mensagem, origem, postback e beacon.

Campos ausentes assumem o zero do tipo; tipos divergentes levantam
MalformedJsonError.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from api.connectors.line.errors import (
    MalformedJsonError,
    UnknownMessageTypeError,
    UnknownSourceTypeError,
)
from api.connectors.line.models import (
    SOURCE_TYPES,
    AudioMessage,
    Beacon,
    EventSource,
    FileMessage,
    ImageMessage,
    LocationMessage,
    Postback,
    StickerMessage,
    TextMessage,
    VideoMessage,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from api.connectors.line.models import Message

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def read_str(block: dict[str, Any], key: str) -> str:
    """Lê campo string (vazio se ausente ou null)."""
    value = block.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise MalformedJsonError(f"field_not_string: {key}")
    return value


def read_int64(block: dict[str, Any], key: str) -> int:
    """Lê inteiro JSON dentro da faixa int64 (0 se ausente)."""
    value = block.get(key)
    if value is None:
        return 0
    # bool é subclasse de int, mas não é número JSON
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedJsonError(f"field_not_integer: {key}")
    if not INT64_MIN <= value <= INT64_MAX:
        raise MalformedJsonError(f"integer_out_of_range: {key}")
    return value


def read_float64(block: dict[str, Any], key: str) -> float:
    """Lê número JSON como float64 finito (0.0 se ausente)."""
    value = block.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise MalformedJsonError(f"field_not_number: {key}")
    try:
        number = float(value)
    except OverflowError as exc:
        raise MalformedJsonError(f"number_out_of_range: {key}") from exc
    if not math.isfinite(number):
        raise MalformedJsonError(f"number_out_of_range: {key}")
    return number


def read_object(block: dict[str, Any], key: str) -> dict[str, Any] | None:
    """Lê sub-documento objeto (None se ausente ou null)."""
    value = block.get(key)
    if value is None:
        return None
    if not isinstance(value, dict):
        raise MalformedJsonError(f"field_not_object: {key}")
    return value


def extract_source(event_block: dict[str, Any]) -> EventSource:
    """Extrai a origem obrigatória do evento."""
    source_block = read_object(event_block, "source")
    if source_block is None:
        raise MalformedJsonError("missing_source")
    source_type = read_str(source_block, "type")
    if source_type not in SOURCE_TYPES:
        raise UnknownSourceTypeError(source_type)
    return EventSource(
        type=source_type,  # type: ignore[arg-type]
        user_id=read_str(source_block, "userId"),
        group_id=read_str(source_block, "groupId"),
        room_id=read_str(source_block, "roomId"),
    )


def extract_text_message(msg: dict[str, Any]) -> TextMessage:
    return TextMessage(id=read_str(msg, "id"), text=read_str(msg, "text"))


def extract_image_message(msg: dict[str, Any]) -> ImageMessage:
    return ImageMessage(id=read_str(msg, "id"))


def extract_video_message(msg: dict[str, Any]) -> VideoMessage:
    return VideoMessage(id=read_str(msg, "id"))


def extract_audio_message(msg: dict[str, Any]) -> AudioMessage:
    return AudioMessage(id=read_str(msg, "id"))


def extract_file_message(msg: dict[str, Any]) -> FileMessage:
    return FileMessage(
        id=read_str(msg, "id"),
        file_name=read_str(msg, "fileName"),
        file_size=read_int64(msg, "fileSize"),
    )


def extract_location_message(msg: dict[str, Any]) -> LocationMessage:
    return LocationMessage(
        id=read_str(msg, "id"),
        title=read_str(msg, "title"),
        address=read_str(msg, "address"),
        latitude=read_float64(msg, "latitude"),
        longitude=read_float64(msg, "longitude"),
    )


def extract_sticker_message(msg: dict[str, Any]) -> StickerMessage:
    return StickerMessage(
        id=read_str(msg, "id"),
        package_id=read_str(msg, "packageId"),
        sticker_id=read_str(msg, "stickerId"),
    )


_MESSAGE_EXTRACTORS: dict[str, Callable[[dict[str, Any]], Message]] = {
    "text": extract_text_message,
    "image": extract_image_message,
    "video": extract_video_message,
    "audio": extract_audio_message,
    "file": extract_file_message,
    "location": extract_location_message,
    "sticker": extract_sticker_message,
}


def extract_message(msg: dict[str, Any]) -> Message:
    """Seleciona a variante de mensagem por `message.type`.

    Raises:
        UnknownMessageTypeError: Se o tipo não for suportado
        MalformedJsonError: Se algum campo tiver tipo inválido
    """
    message_type = read_str(msg, "type")
    extractor = _MESSAGE_EXTRACTORS.get(message_type)
    if extractor is None:
        raise UnknownMessageTypeError(message_type)
    return extractor(msg)


def extract_postback(postback_block: dict[str, Any]) -> Postback:
    """Extrai data e params do postback."""
    params_block = read_object(postback_block, "params") or {}
    params: dict[str, str] = {}
    for key, value in params_block.items():
        if not isinstance(value, str):
            raise MalformedJsonError(f"field_not_string: params.{key}")
        params[key] = value
    return Postback(
        data=read_str(postback_block, "data"),
        params=MappingProxyType(params),
    )


def extract_beacon(beacon_block: dict[str, Any]) -> Beacon:
    """Extrai hwid, tipo e device message do beacon."""
    dm = read_str(beacon_block, "dm")
    try:
        bytes.fromhex(dm)
    except ValueError as exc:
        raise MalformedJsonError("field_not_hex: dm") from exc
    return Beacon(
        hwid=read_str(beacon_block, "hwid"),
        type=read_str(beacon_block, "type"),
        dm=dm,
    )
