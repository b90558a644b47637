"""Validação de assinatura HMAC-SHA256 do webhook LINE.

O LINE assina o corpo bruto com o channel secret e envia o digest em
base64 no header X-LINE-Signature.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

SIGNATURE_HEADER = "X-LINE-Signature"

# Tamanho do digest SHA-256 em bytes
_DIGEST_SIZE = hashlib.sha256().digest_size


@dataclass(frozen=True, slots=True)
class SignatureResult:
    """Resultado da validação de assinatura.

    Attributes:
        valid: True se a assinatura confere
        error: Motivo da falha (sem PII), None quando válida
    """

    valid: bool
    error: str | None = None


def _to_bytes(secret: str | bytes) -> bytes:
    if isinstance(secret, bytes):
        return secret
    return secret.encode("utf-8")


def compute_signature(secret: str | bytes, body: bytes) -> str:
    """Calcula a assinatura esperada para o corpo.

    Args:
        secret: Channel secret
        body: Corpo bruto do request

    Returns:
        base64 padrão (com padding) do HMAC-SHA256
    """
    digest = hmac.new(_to_bytes(secret), body, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def get_signature_header(headers: Mapping[str, str]) -> str | None:
    """Lê X-LINE-Signature sem diferenciar maiúsculas/minúsculas."""
    value = headers.get(SIGNATURE_HEADER)
    if value is not None:
        return value
    wanted = SIGNATURE_HEADER.lower()
    for name, header_value in headers.items():
        if name.lower() == wanted:
            return header_value
    return None


def check_signature(body: bytes, signature: str | None, secret: str | bytes) -> SignatureResult:
    """Compara o HMAC do corpo com a assinatura apresentada.

    Args:
        body: Corpo bruto do request (exatamente os bytes recebidos)
        signature: Valor do header X-LINE-Signature
        secret: Channel secret

    Returns:
        SignatureResult com o motivo da falha quando inválida
    """
    if not signature:
        return SignatureResult(valid=False, error="missing_signature")

    try:
        presented = base64.b64decode(signature, validate=True)
    except (binascii.Error, ValueError):
        return SignatureResult(valid=False, error="invalid_base64")

    if len(presented) != _DIGEST_SIZE:
        return SignatureResult(valid=False, error="invalid_length")

    expected = hmac.new(_to_bytes(secret), body, hashlib.sha256).digest()
    if not hmac.compare_digest(expected, presented):
        return SignatureResult(valid=False, error="signature_mismatch")

    return SignatureResult(valid=True)


def validate_signature(body: bytes, signature: str | None, secret: str | bytes) -> bool:
    """Atalho booleano de check_signature."""
    return check_signature(body, signature, secret).valid


def verify_line_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | bytes,
) -> SignatureResult:
    """Valida a assinatura de um webhook a partir dos headers recebidos.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos (qualquer capitalização)
        secret: Channel secret

    Returns:
        SignatureResult
    """
    return check_signature(raw_body, get_signature_header(headers), secret)
