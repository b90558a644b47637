"""Webhook LINE: leitura única do corpo, assinatura e parsing seguro."""

from ..errors import (
    InvalidSignatureError,
    MalformedJsonError,
    UnknownEventTypeError,
    UnknownMessageTypeError,
    UnknownSourceTypeError,
    WebhookReadError,
    WebhookRequestError,
)
from ..signature import SignatureResult, verify_line_signature
from .receive import (
    AsyncWebhookRequest,
    WebhookRequest,
    parse_signed_body,
    parse_webhook_request,
    read_request_body,
    read_request_body_async,
)

__all__ = [
    "AsyncWebhookRequest",
    "InvalidSignatureError",
    "MalformedJsonError",
    "SignatureResult",
    "UnknownEventTypeError",
    "UnknownMessageTypeError",
    "UnknownSourceTypeError",
    "WebhookReadError",
    "WebhookRequest",
    "WebhookRequestError",
    "parse_signed_body",
    "parse_webhook_request",
    "read_request_body",
    "read_request_body_async",
    "verify_line_signature",
]
