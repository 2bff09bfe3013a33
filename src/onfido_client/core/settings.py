"""Client settings and configuration.

This module defines the configuration options understood by the Onfido client
and webhook handler. Settings are loaded from environment variables (or an
``.env`` file) each time a ``Settings`` instance is created; nothing is cached
at import time.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENDPOINT = "https://api.eu.onfido.com/v3.5"
TOKEN_ENV = "ONFIDO_TOKEN"
WEBHOOK_TOKEN_ENV = "ONFIDO_WEBHOOK_TOKEN"


class Settings(BaseSettings):
    """Connection and webhook options, read from ``ONFIDO_*`` variables."""

    # API authentication
    token: str | None = Field(default=None, alias=TOKEN_ENV)
    endpoint: str = Field(default=DEFAULT_ENDPOINT, alias="ONFIDO_ENDPOINT")
    http_timeout_seconds: float = Field(
        default=30.0,
        alias="ONFIDO_HTTP_TIMEOUT_SECONDS",
    )

    # Inbound webhook verification
    webhook_token: str | None = Field(default=None, alias=WEBHOOK_TOKEN_ENV)
    webhook_skip_signature_validation: bool = Field(
        default=False,
        alias="ONFIDO_WEBHOOK_SKIP_SIGNATURE_VALIDATION",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        populate_by_name=True,
        extra="ignore",
    )
