"""Signature utilities built on HMAC-SHA256 primitives."""
from __future__ import annotations

import binascii
import hashlib
import hmac

from onfido_client.core.errors import InvalidSignatureError


def compute_signature(secret: str | bytes, message: bytes) -> bytes:
    """Return the raw HMAC-SHA256 digest of ``message`` keyed by ``secret``."""
    key = secret.encode("utf-8") if isinstance(secret, str) else secret
    return hmac.new(key, message, hashlib.sha256).digest()


def validate_signature(secret: str | bytes, message: bytes, signature_hex: str) -> None:
    """Verify a hex-encoded HMAC-SHA256 signature.

    Args:
        secret: Shared webhook token the payload was signed with.
        message: Exact bytes of the request body.
        signature_hex: Hex-encoded signature taken from the request header.

    Raises:
        InvalidSignatureError: If the signature is not valid hex or does not
            match. Both cases raise the same error.
    """
    expected = compute_signature(secret, message)
    try:
        signature = binascii.unhexlify(signature_hex)
    except (binascii.Error, ValueError) as err:
        raise InvalidSignatureError() from err

    if not hmac.compare_digest(signature, expected):
        raise InvalidSignatureError()
