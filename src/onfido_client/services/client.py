"""HTTP client for the Onfido API.

This module provides the OnfidoClient class that handles all outbound
communication with the API. It includes:

- URL building against the configured endpoint
- Token authentication headers shared by every call
- Mapping of transport failures and non-2xx responses to library errors
- JSON decoding of response bodies into Pydantic models
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from onfido_client.core.errors import (
    DecodeError,
    HTTPStatusError,
    MissingTokenError,
    NonJSONResponseError,
    TransportError,
)
from onfido_client.core.settings import DEFAULT_ENDPOINT, TOKEN_ENV, Settings
from onfido_client.schemas import ApiErrorResponse
from onfido_client.services.media import LivePhotosAPI, LiveVideosAPI
from onfido_client.services.reports import ReportsAPI
from onfido_client.services.sdk_tokens import SdkTokensAPI
from onfido_client.services.webhooks import WebhooksAPI
from onfido_client.utils.http import is_json_response

CLIENT_VERSION = "0.1.0"
USER_AGENT = f"Python-Onfido/{CLIENT_VERSION}"

# Configure logger for this module
logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

Timeout = float | httpx.Timeout | None


class Token(str):
    """Onfido authentication token."""

    @property
    def is_production(self) -> bool:
        """Return True unless this is a test or sandbox token."""
        return not self.startswith(("test_", "api_sandbox."))


@dataclass(frozen=True)
class ClientConfig:
    """Immutable configuration for API calls."""

    token: str
    endpoint: str = DEFAULT_ENDPOINT
    timeout_seconds: float = 30.0


def load_client_config(settings: Settings | None = None) -> ClientConfig:
    """Build configuration object from environment-backed settings."""

    settings = settings or Settings()
    if not settings.token:
        raise MissingTokenError(
            f"onfido token not found in environmental variable `{TOKEN_ENV}`"
        )
    return ClientConfig(
        token=settings.token,
        endpoint=settings.endpoint,
        timeout_seconds=float(settings.http_timeout_seconds),
    )


def error_from_response(response: httpx.Response) -> HTTPStatusError:
    """Build the error for a non-2xx response.

    The documented error object is used when the body carries one; any other
    body (absent, not JSON, or a different shape) yields a bare status error.
    """
    if response.content and is_json_response(response):
        try:
            body = ApiErrorResponse.model_validate_json(response.content)
        except ValidationError:
            logger.debug("Unrecognised error body for status %s", response.status_code)
        else:
            return HTTPStatusError(
                response,
                error_id=body.error.id,
                error_type=body.error.type,
                message=body.error.message,
                fields=body.error.fields,
            )
    return HTTPStatusError(response)


class OnfidoClient:
    """HTTP client wrapper for Onfido API interactions."""

    def __init__(
        self,
        config: ClientConfig | str,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        if isinstance(config, str):
            config = ClientConfig(token=config)
        self.config = config
        self._token = Token(config.token)
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.Client(
            timeout=httpx.Timeout(config.timeout_seconds),
        )

        self.reports = ReportsAPI(self)
        self.live_photos = LivePhotosAPI(self)
        self.live_videos = LiveVideosAPI(self)
        self.webhooks = WebhooksAPI(self)
        self.sdk_tokens = SdkTokensAPI(self)

    @classmethod
    def from_env(cls, settings: Settings | None = None) -> OnfidoClient:
        """Create a client from ``ONFIDO_*`` environment variables."""
        return cls(load_client_config(settings))

    @property
    def token(self) -> Token:
        return self._token

    def set_http_client(self, http_client: httpx.Client) -> None:
        """Replace the underlying HTTP client, e.g. to add proxies or mocks."""
        if self._owns_http_client:
            self._http.close()
        self._http = http_client
        self._owns_http_client = False

    def close(self) -> None:
        if self._owns_http_client:
            self._http.close()

    def __enter__(self) -> OnfidoClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _build_url(self, uri: str) -> str:
        # pagination links and hrefs may already be absolute
        if uri.startswith("http"):
            return uri
        if not uri.startswith("/"):
            uri = "/" + uri
        return self.config.endpoint.rstrip("/") + uri

    def _build_headers(self, *, has_body: bool = False) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
            "Authorization": f"Token token={self._token}",
        }
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    def request(
        self,
        method: str,
        uri: str,
        *,
        json_data: Any | None = None,
        timeout: Timeout = None,
    ) -> httpx.Response:
        """Send a request and return the fully read response.

        Args:
            method: HTTP method.
            uri: Path relative to the endpoint, optionally with a query
                string, or an absolute URL.
            json_data: JSON-serialisable request body.
            timeout: Per-call deadline overriding the client default.

        Raises:
            TransportError: If no response was received, including timeouts.
            HTTPStatusError: If the response status is not 2xx.
        """
        url = self._build_url(uri)
        headers = self._build_headers(has_body=json_data is not None)
        extra: dict[str, Any] = {}
        if timeout is not None:
            extra["timeout"] = timeout

        logger.debug("%s %s", method, url)
        try:
            # non-streaming: the body is read and the connection released here
            response = self._http.request(
                method,
                url,
                json=json_data,
                headers=headers,
                **extra,
            )
        except httpx.TimeoutException as exc:
            raise TransportError(f"{method} {url} timed out: {exc}") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        if not 200 <= response.status_code <= 299:
            raise error_from_response(response)

        logger.debug("%s %s -> %s", method, url, response.status_code)
        return response

    def decode(self, response: httpx.Response, model: type[ModelT]) -> ModelT:
        """Decode a JSON response body into ``model``."""
        if not is_json_response(response):
            raise NonJSONResponseError(response.headers.get("Content-Type"))
        try:
            return model.model_validate_json(response.content)
        except ValidationError as exc:
            raise DecodeError(
                f"unable to parse response body into {model.__name__}: {exc}"
            ) from exc

    def get_resource(
        self, href: str, model: type[ModelT], *, timeout: Timeout = None
    ) -> ModelT:
        """Fetch any resource by its ``href`` and decode it into ``model``."""
        response = self.request("GET", href, timeout=timeout)
        return self.decode(response, model)
