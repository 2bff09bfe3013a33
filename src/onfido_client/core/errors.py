"""Exception hierarchy shared by the API client and the webhook handler."""

from __future__ import annotations

from typing import Any

import httpx


class OnfidoError(RuntimeError):
    """Base exception raised for all client and webhook failures."""


class ConfigurationError(OnfidoError):
    """Raised when the client cannot be configured from its settings."""


class MissingTokenError(ConfigurationError):
    """Raised when no API token is available in the environment."""


class MissingWebhookTokenError(ConfigurationError):
    """Raised when no webhook token is available in the environment."""

    def __init__(self, message: str = "webhook token not found in environmental variable") -> None:
        super().__init__(message)


class TransportError(OnfidoError):
    """Raised when a request fails before a response is received.

    Covers connection failures as well as timeouts, which is how a caller's
    deadline aborts an in-flight call.
    """


class HTTPStatusError(OnfidoError):
    """Raised when the API answers with a non-2xx status code.

    When the response body carries the documented error object, its id, type,
    message and field errors are exposed. Otherwise only the status is known.
    """

    def __init__(
        self,
        response: httpx.Response,
        *,
        error_id: str | None = None,
        error_type: str | None = None,
        message: str | None = None,
        fields: dict[str, Any] | None = None,
    ) -> None:
        self.response = response
        self.status_code = response.status_code
        self.error_id = error_id
        self.error_type = error_type
        self.message = message
        self.fields = fields or {}
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.message:
            return self.message
        return f"http request failed with status code {self.status_code}"


class NonJSONResponseError(OnfidoError):
    """Raised when a successful response does not carry a JSON body."""

    def __init__(self, content_type: str | None = None) -> None:
        self.content_type = content_type
        super().__init__("non json response")


class DecodeError(OnfidoError):
    """Raised when a body is not JSON or does not match the expected shape."""


class InvalidSignatureError(OnfidoError):
    """Raised when a webhook payload hash does not match its signature."""

    def __init__(
        self, message: str = "invalid request, payload hash doesn't match signature"
    ) -> None:
        super().__init__(message)


class MissingSignatureError(OnfidoError):
    """Raised when a webhook request carries no signature header."""

    def __init__(self, message: str = "invalid request, missing signature") -> None:
        super().__init__(message)
