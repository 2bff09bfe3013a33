"""
Python client for the Onfido identity-verification API.

Usage:
    from onfido_client import OnfidoClient

    with OnfidoClient.from_env() as client:
        reports = client.reports.list(check_id)
        while reports.advance():
            print(reports.report.name, reports.report.result)
        if reports.last_error:
            raise reports.last_error
"""

from onfido_client.core.errors import (
    ConfigurationError,
    DecodeError,
    HTTPStatusError,
    InvalidSignatureError,
    MissingSignatureError,
    MissingTokenError,
    MissingWebhookTokenError,
    NonJSONResponseError,
    OnfidoError,
    TransportError,
)
from onfido_client.core.settings import Settings
from onfido_client.services.client import ClientConfig, OnfidoClient, Token, load_client_config
from onfido_client.services.pagination import PageIterator
from onfido_client.services.webhook_handler import (
    WEBHOOK_SIGNATURE_HEADER,
    Webhook,
    WebhookConfig,
    load_webhook_config,
    parse_verified_request,
)

__all__ = [
    "OnfidoClient", "ClientConfig", "Token", "load_client_config",
    "PageIterator",
    "Webhook", "WebhookConfig", "WEBHOOK_SIGNATURE_HEADER",
    "load_webhook_config", "parse_verified_request",
    "Settings",
    "OnfidoError", "ConfigurationError", "MissingTokenError", "MissingWebhookTokenError",
    "TransportError", "HTTPStatusError", "NonJSONResponseError", "DecodeError",
    "InvalidSignatureError", "MissingSignatureError",
]

__version__ = "0.1.0"
