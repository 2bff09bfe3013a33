# tests/test_webhooks_api.py
"""Tests for webhook registration endpoints."""

from __future__ import annotations

import json

import httpx
import pytest

from onfido_client import HTTPStatusError
from onfido_client.schemas import WebhookEnvironment, WebhookEvent, WebhookRefRequest
from tests.conftest import json_response

WEBHOOK_ID = "fcb73186-0733-4f6f-9c57-d9d5ef979443"
WEBHOOK = {
    "id": WEBHOOK_ID,
    "url": "https://webhookendpoint.url",
    "enabled": True,
    "href": f"/v2/webhooks/{WEBHOOK_ID}",
    "token": "ExampleToken",
    "environments": ["sandbox", "live"],
    "events": ["check.started", "check.completed"],
}


def _request() -> WebhookRefRequest:
    return WebhookRefRequest(
        url="https://webhookendpoint.url",
        enabled=True,
        environments=[WebhookEnvironment.SANDBOX, WebhookEnvironment.LIVE],
        events=[WebhookEvent.CHECK_STARTED, WebhookEvent.CHECK_COMPLETED],
    )


def _forbidden(request: httpx.Request) -> httpx.Response:
    return httpx.Response(403, content=b'{"error": "things went bad"}')


def test_create_webhook_non_ok_response(make_client) -> None:
    client, _ = make_client(_forbidden)

    with pytest.raises(HTTPStatusError):
        client.webhooks.create(WebhookRefRequest())


def test_create_webhook(make_client) -> None:
    client, transport = make_client(lambda request: json_response(WEBHOOK))

    webhook = client.webhooks.create(_request())

    request = transport.requests[0]
    assert request.method == "POST"
    assert request.url.path.endswith("/webhooks")
    assert json.loads(request.content) == {
        "url": "https://webhookendpoint.url",
        "enabled": True,
        "environments": ["sandbox", "live"],
        "events": ["check.started", "check.completed"],
    }
    assert webhook.id == WEBHOOK_ID
    assert webhook.token == "ExampleToken"
    assert webhook.enabled is True
    assert webhook.environments == [WebhookEnvironment.SANDBOX, WebhookEnvironment.LIVE]
    assert webhook.events == [WebhookEvent.CHECK_STARTED, WebhookEvent.CHECK_COMPLETED]


def test_update_webhook_sends_only_set_fields(make_client) -> None:
    client, transport = make_client(lambda request: json_response({**WEBHOOK, "enabled": False}))

    webhook = client.webhooks.update(WEBHOOK_ID, WebhookRefRequest(enabled=False))

    request = transport.requests[0]
    assert request.method == "PUT"
    assert request.url.path.endswith(f"/webhooks/{WEBHOOK_ID}")
    assert json.loads(request.content) == {"enabled": False}
    assert webhook.enabled is False


def test_delete_webhook(make_client) -> None:
    client, transport = make_client(lambda request: httpx.Response(204))

    client.webhooks.delete(WEBHOOK_ID)

    assert transport.requests[0].method == "DELETE"
    assert transport.requests[0].url.path.endswith(f"/webhooks/{WEBHOOK_ID}")


def test_list_webhooks_non_ok_response(make_client) -> None:
    client, _ = make_client(_forbidden)

    it = client.webhooks.list()

    assert it.advance() is False
    assert isinstance(it.last_error, HTTPStatusError)


def test_list_webhooks(make_client) -> None:
    client, _ = make_client(lambda request: json_response({"webhooks": [WEBHOOK]}))

    it = client.webhooks.list()

    assert it.advance() is True
    assert it.webhook_ref.id == WEBHOOK_ID
    assert it.webhook_ref.url == "https://webhookendpoint.url"
    assert it.advance() is False
    assert it.last_error is None


def test_list_webhooks_keeps_unknown_events(make_client) -> None:
    webhook = {**WEBHOOK, "events": ["check.completed", "workflow_run.completed"]}
    client, _ = make_client(lambda request: json_response({"webhooks": [webhook]}))

    it = client.webhooks.list()

    assert it.advance() is True
    assert it.last_error is None
    assert it.webhook_ref.events == [WebhookEvent.CHECK_COMPLETED, "workflow_run.completed"]
