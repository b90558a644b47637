"""Conector LINE - adapter de borda para a LINE Messaging API.

Responsabilidades:
- Webhook (leitura do corpo, assinatura X-LINE-Signature, parsing)
- Modelos imutáveis de eventos, origens e mensagens
- Erros tipados do webhook

O cliente fica em `api.connectors.line.client` (LineClient).
"""

from .errors import (
    InvalidSignatureError,
    LineClientConfigError,
    MalformedJsonError,
    UnknownEventTypeError,
    UnknownMessageTypeError,
    UnknownSourceTypeError,
    WebhookReadError,
    WebhookRequestError,
)
from .models import (
    AudioMessage,
    Beacon,
    BeaconEvent,
    Event,
    EventSource,
    FileMessage,
    FollowEvent,
    ImageMessage,
    JoinEvent,
    LeaveEvent,
    LocationMessage,
    Message,
    MessageEvent,
    Postback,
    PostbackEvent,
    StickerMessage,
    TextMessage,
    UnfollowEvent,
    VideoMessage,
    events_to_payload,
)
from .signature import (
    SIGNATURE_HEADER,
    SignatureResult,
    compute_signature,
    validate_signature,
    verify_line_signature,
)

__all__ = [
    "SIGNATURE_HEADER",
    "AudioMessage",
    "Beacon",
    "BeaconEvent",
    "Event",
    "EventSource",
    "FileMessage",
    "FollowEvent",
    "ImageMessage",
    "InvalidSignatureError",
    "JoinEvent",
    "LeaveEvent",
    "LineClientConfigError",
    "LocationMessage",
    "MalformedJsonError",
    "Message",
    "MessageEvent",
    "Postback",
    "PostbackEvent",
    "SignatureResult",
    "StickerMessage",
    "TextMessage",
    "UnfollowEvent",
    "UnknownEventTypeError",
    "UnknownMessageTypeError",
    "UnknownSourceTypeError",
    "VideoMessage",
    "WebhookReadError",
    "WebhookRequestError",
    "compute_signature",
    "events_to_payload",
    "validate_signature",
    "verify_line_signature",
]
