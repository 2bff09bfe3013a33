"""Verification and parsing of inbound webhook notifications.

The API signs every notification with HMAC-SHA256 keyed by the webhook's
token and sends the hex digest in the ``X-Sha2-Signature`` header. Requests
are only decoded once that signature checks out, unless validation has been
explicitly switched off (e.g. in local development).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import ValidationError

from onfido_client.core.errors import (
    DecodeError,
    InvalidSignatureError,
    MissingSignatureError,
    MissingWebhookTokenError,
)
from onfido_client.core.security import validate_signature
from onfido_client.core.settings import Settings
from onfido_client.schemas import WebhookRequest

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from starlette.requests import Request

WEBHOOK_SIGNATURE_HEADER = "X-Sha2-Signature"

# Configure logger for this module
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WebhookConfig:
    """Immutable configuration for webhook verification."""

    token: str
    skip_signature_validation: bool = False


def load_webhook_config(settings: Settings | None = None) -> WebhookConfig:
    """Build configuration object from environment-backed settings."""

    settings = settings or Settings()
    if not settings.webhook_token:
        raise MissingWebhookTokenError()
    return WebhookConfig(
        token=settings.webhook_token,
        skip_signature_validation=settings.webhook_skip_signature_validation,
    )


def parse_verified_request(
    secret: str | bytes,
    raw_body: bytes,
    header_signature: str | None,
    *,
    skip_validation: bool = False,
) -> WebhookRequest:
    """Authenticate a notification body and decode it.

    Args:
        secret: Webhook token shared with the API.
        raw_body: Request body exactly as received.
        header_signature: Value of the signature header, if any.
        skip_validation: Decode without checking the signature.

    Raises:
        MissingSignatureError: If validation is on and no signature was sent.
        InvalidSignatureError: If the signature does not match the body.
        DecodeError: If the body is not a JSON notification.
    """
    if not skip_validation:
        if not header_signature:
            raise MissingSignatureError()
        validate_signature(secret, raw_body, header_signature)

    try:
        return WebhookRequest.model_validate_json(raw_body)
    except ValidationError as exc:
        raise DecodeError(f"invalid webhook payload: {exc}") from exc


class Webhook:
    """Handler bound to one webhook token."""

    def __init__(
        self,
        config: WebhookConfig | str,
        *,
        skip_signature_validation: bool | None = None,
    ) -> None:
        if isinstance(config, str):
            config = WebhookConfig(token=config)
        if skip_signature_validation is not None:
            config = WebhookConfig(
                token=config.token,
                skip_signature_validation=skip_signature_validation,
            )
        self.config = config

    @classmethod
    def from_env(cls, settings: Settings | None = None) -> Webhook:
        """Create a handler from ``ONFIDO_WEBHOOK_*`` environment variables."""
        return cls(load_webhook_config(settings))

    @property
    def token(self) -> str:
        return self.config.token

    @property
    def skip_signature_validation(self) -> bool:
        return self.config.skip_signature_validation

    def validate_signature(self, body: bytes, signature: str) -> None:
        """Raise InvalidSignatureError unless ``signature`` matches ``body``."""
        try:
            validate_signature(self.config.token, body, signature)
        except InvalidSignatureError:
            logger.warning("Rejected webhook with invalid signature")
            raise

    def parse_verified_request(
        self, raw_body: bytes, header_signature: str | None
    ) -> WebhookRequest:
        try:
            return parse_verified_request(
                self.config.token,
                raw_body,
                header_signature,
                skip_validation=self.config.skip_signature_validation,
            )
        except (MissingSignatureError, InvalidSignatureError) as exc:
            logger.warning("Rejected webhook: %s", exc)
            raise

    async def parse_from_request(self, request: Request) -> WebhookRequest:
        """Read, verify and decode a Starlette/FastAPI request."""
        body = await request.body()
        return self.parse_verified_request(body, request.headers.get(WEBHOOK_SIGNATURE_HEADER))
