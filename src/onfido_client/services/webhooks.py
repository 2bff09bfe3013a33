"""Webhook registration endpoints.

These manage the URLs the API notifies. Verifying the notifications
themselves is handled by ``onfido_client.services.webhook_handler``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from onfido_client.schemas import WebhookRef, WebhookRefList, WebhookRefRequest
from onfido_client.services.pagination import PageIterator, model_page_handler

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from onfido_client.services.client import OnfidoClient, Timeout


class WebhookRefIterator(PageIterator[WebhookRef]):
    @property
    def webhook_ref(self) -> WebhookRef | None:
        return self.current


class WebhooksAPI:
    """Create, update, delete and list webhook registrations."""

    def __init__(self, client: OnfidoClient) -> None:
        self._client = client

    def create(self, request: WebhookRefRequest, *, timeout: Timeout = None) -> WebhookRef:
        """Register a new webhook.

        See https://documentation.onfido.com/#register-webhook
        """
        response = self._client.request(
            "POST",
            "/webhooks",
            json_data=request.model_dump(mode="json", exclude_none=True),
            timeout=timeout,
        )
        return self._client.decode(response, WebhookRef)

    def update(
        self, webhook_id: str, request: WebhookRefRequest, *, timeout: Timeout = None
    ) -> WebhookRef:
        """Edit an existing webhook registration."""
        response = self._client.request(
            "PUT",
            f"/webhooks/{webhook_id}",
            json_data=request.model_dump(mode="json", exclude_none=True),
            timeout=timeout,
        )
        return self._client.decode(response, WebhookRef)

    def delete(self, webhook_id: str, *, timeout: Timeout = None) -> None:
        self._client.request("DELETE", f"/webhooks/{webhook_id}", timeout=timeout)

    def list(self) -> WebhookRefIterator:
        return WebhookRefIterator(
            self._client,
            "/webhooks",
            model_page_handler(WebhookRefList, "webhooks"),
        )
