"""Modelos imutáveis dos eventos de webhook LINE.

Event e Message são uniões fechadas: o conjunto de variantes é definido
pelo protocolo do LINE. Cada classe expõe seu discriminante de wire no
atributo de classe `type`.

`to_dict()` produz a forma canônica (chaves camelCase, campos opcionais
vazios omitidos), que volta aos mesmos valores via parse_events.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, Literal, TypeAlias

SourceType = Literal["user", "group", "room"]

EVENT_TYPES = frozenset(
    {"message", "follow", "unfollow", "join", "leave", "postback", "beacon"}
)
MESSAGE_TYPES = frozenset(
    {"text", "image", "video", "audio", "file", "location", "sticker"}
)
SOURCE_TYPES = frozenset({"user", "group", "room"})


def _empty_params() -> Mapping[str, str]:
    return MappingProxyType({})


# ---------------------------------------------------------------------------
# Origem
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class EventSource:
    """Origem do evento (usuário, grupo ou sala).

    Attributes:
        type: user | group | room
        user_id: Presente para user; opcional em group/room
        group_id: Presente somente para group
        room_id: Presente somente para room
    """

    type: SourceType
    user_id: str = ""
    group_id: str = ""
    room_id: str = ""

    @property
    def primary_id(self) -> str:
        """Identificador selecionado pelo tipo da origem."""
        if self.type == "group":
            return self.group_id
        if self.type == "room":
            return self.room_id
        return self.user_id

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type}
        if self.user_id:
            data["userId"] = self.user_id
        if self.group_id:
            data["groupId"] = self.group_id
        if self.room_id:
            data["roomId"] = self.room_id
        return data


# ---------------------------------------------------------------------------
# Mensagens
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class TextMessage:
    type: ClassVar[str] = "text"

    id: str = ""
    text: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "type": self.type, "text": self.text}


@dataclass(frozen=True, slots=True)
class ImageMessage:
    type: ClassVar[str] = "image"

    id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "type": self.type}


@dataclass(frozen=True, slots=True)
class VideoMessage:
    type: ClassVar[str] = "video"

    id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "type": self.type}


@dataclass(frozen=True, slots=True)
class AudioMessage:
    type: ClassVar[str] = "audio"

    id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "type": self.type}


@dataclass(frozen=True, slots=True)
class FileMessage:
    type: ClassVar[str] = "file"

    id: str = ""
    file_name: str = ""
    file_size: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "fileName": self.file_name,
            "fileSize": self.file_size,
        }


@dataclass(frozen=True, slots=True)
class LocationMessage:
    type: ClassVar[str] = "location"

    id: str = ""
    title: str = ""
    address: str = ""
    latitude: float = 0.0
    longitude: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "title": self.title,
            "address": self.address,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


@dataclass(frozen=True, slots=True)
class StickerMessage:
    type: ClassVar[str] = "sticker"

    id: str = ""
    package_id: str = ""
    sticker_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "packageId": self.package_id,
            "stickerId": self.sticker_id,
        }


Message: TypeAlias = (
    TextMessage
    | ImageMessage
    | VideoMessage
    | AudioMessage
    | FileMessage
    | LocationMessage
    | StickerMessage
)


# ---------------------------------------------------------------------------
# Payloads de postback e beacon
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Postback:
    """Dados de postback definidos pelo bot em uma mensagem anterior.

    Attributes:
        data: String opaca enviada na ação
        params: Parâmetros extras (ex: datetime picker), somente leitura
    """

    data: str = ""
    params: Mapping[str, str] = field(default_factory=_empty_params)

    def to_dict(self) -> dict[str, Any]:
        return {"data": self.data, "params": dict(self.params)}


@dataclass(frozen=True, slots=True)
class Beacon:
    """Sinal de beacon LINE.

    Attributes:
        hwid: Hardware ID do beacon
        type: enter | leave | banner (vazio se ausente)
        dm: Device message em hexadecimal (vazio se ausente)
    """

    hwid: str = ""
    type: str = ""
    dm: str = ""

    @property
    def device_message(self) -> bytes:
        """Bytes decodificados de `dm`."""
        return bytes.fromhex(self.dm)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"hwid": self.hwid}
        if self.type:
            data["type"] = self.type
        if self.dm:
            data["dm"] = self.dm
        return data


# ---------------------------------------------------------------------------
# Eventos
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True, kw_only=True)
class _EventBase:
    type: ClassVar[str]

    timestamp: int
    source: EventSource
    reply_token: str = ""

    def _base_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.type,
            "timestamp": self.timestamp,
            "source": self.source.to_dict(),
        }
        if self.reply_token:
            data["replyToken"] = self.reply_token
        return data

    def to_dict(self) -> dict[str, Any]:
        return self._base_dict()


@dataclass(frozen=True, slots=True, kw_only=True)
class MessageEvent(_EventBase):
    type: ClassVar[str] = "message"

    message: Message

    def to_dict(self) -> dict[str, Any]:
        data = self._base_dict()
        data["message"] = self.message.to_dict()
        return data


@dataclass(frozen=True, slots=True, kw_only=True)
class FollowEvent(_EventBase):
    type: ClassVar[str] = "follow"


@dataclass(frozen=True, slots=True, kw_only=True)
class UnfollowEvent(_EventBase):
    type: ClassVar[str] = "unfollow"


@dataclass(frozen=True, slots=True, kw_only=True)
class JoinEvent(_EventBase):
    type: ClassVar[str] = "join"


@dataclass(frozen=True, slots=True, kw_only=True)
class LeaveEvent(_EventBase):
    type: ClassVar[str] = "leave"


@dataclass(frozen=True, slots=True, kw_only=True)
class PostbackEvent(_EventBase):
    type: ClassVar[str] = "postback"

    postback: Postback

    def to_dict(self) -> dict[str, Any]:
        data = self._base_dict()
        data["postback"] = self.postback.to_dict()
        return data


@dataclass(frozen=True, slots=True, kw_only=True)
class BeaconEvent(_EventBase):
    type: ClassVar[str] = "beacon"

    beacon: Beacon

    def to_dict(self) -> dict[str, Any]:
        data = self._base_dict()
        data["beacon"] = self.beacon.to_dict()
        return data


Event: TypeAlias = (
    MessageEvent
    | FollowEvent
    | UnfollowEvent
    | JoinEvent
    | LeaveEvent
    | PostbackEvent
    | BeaconEvent
)


def events_to_payload(events: list[Event]) -> dict[str, Any]:
    """Monta o corpo canônico `{"events": [...]}` para os eventos."""
    return {"events": [event.to_dict() for event in events]}
