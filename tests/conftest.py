# tests/conftest.py
from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest

from onfido_client import ClientConfig, OnfidoClient

TEST_ENDPOINT = "https://api.test.onfido.local/v3.5"
TEST_TOKEN = "api_sandbox.test-token"

Handler = Callable[[httpx.Request], httpx.Response]


def json_response(
    payload: Any,
    status_code: int = 200,
    *,
    link: str | None = None,
) -> httpx.Response:
    """Build a JSON response, optionally carrying a ``Link`` header."""
    headers = {"Link": link} if link else None
    return httpx.Response(status_code, json=payload, headers=headers)


def next_link(url: str) -> str:
    return f'<{url}>; rel="next"'


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every request it served."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture()
def make_client() -> Iterator[Callable[[Handler], tuple[OnfidoClient, RecordingTransport]]]:
    """Return a factory building clients wired to an in-memory transport."""
    clients: list[OnfidoClient] = []

    def _make(handler: Handler) -> tuple[OnfidoClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        client = OnfidoClient(
            ClientConfig(token=TEST_TOKEN, endpoint=TEST_ENDPOINT),
            http_client=httpx.Client(transport=transport),
        )
        clients.append(client)
        return client, transport

    try:
        yield _make
    finally:
        for client in clients:
            client.close()


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep host ONFIDO_* variables and .env files out of the tests."""
    for name in (
        "ONFIDO_TOKEN",
        "ONFIDO_WEBHOOK_TOKEN",
        "ONFIDO_ENDPOINT",
        "ONFIDO_HTTP_TIMEOUT_SECONDS",
        "ONFIDO_WEBHOOK_SKIP_SIGNATURE_VALIDATION",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
