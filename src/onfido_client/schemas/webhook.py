"""Webhook schemas.

Two families live here: webhook registrations managed through the API
(``WebhookRef``) and the notification payload the API posts back to a
registered URL (``WebhookRequest``).
"""

from enum import Enum

from pydantic import BaseModel, Field


class WebhookEnvironment(str, Enum):
    """Environments a webhook can be registered for."""

    SANDBOX = "sandbox"
    LIVE = "live"


class WebhookEvent(str, Enum):
    """Events a webhook can subscribe to."""

    REPORT_WITHDRAWN = "report.withdrawn"
    REPORT_RESUMED = "report.resumed"
    REPORT_CANCELLED = "report.cancelled"
    REPORT_AWAITING_APPROVAL = "report.awaiting_approval"
    REPORT_COMPLETED = "report.completed"
    CHECK_STARTED = "check.started"
    CHECK_REOPENED = "check.reopened"
    CHECK_WITHDRAWN = "check.withdrawn"
    CHECK_COMPLETED = "check.completed"
    CHECK_FORM_OPENED = "check.form_opened"
    CHECK_FORM_COMPLETED = "check.form_completed"


class WebhookRefRequest(BaseModel):
    """Schema for creating or updating a webhook registration."""

    url: str | None = None
    enabled: bool | None = None
    environments: list[WebhookEnvironment] | None = None
    events: list[WebhookEvent] | None = None


class WebhookRef(BaseModel):
    """Schema for a webhook registration returned by the API.

    ``environments`` and ``events`` are plain strings so that events added by
    newer API versions still decode; compare them against ``WebhookEnvironment``
    and ``WebhookEvent``.
    """

    id: str | None = None
    url: str | None = None
    enabled: bool = False
    href: str | None = None
    token: str | None = None
    environments: list[str] = Field(default_factory=list)
    events: list[str] = Field(default_factory=list)


class WebhookRefList(BaseModel):
    webhooks: list[WebhookRef] = Field(default_factory=list)


class WebhookObject(BaseModel):
    """Resource the notification refers to."""

    id: str | None = None
    status: str | None = None
    completed_at: str | None = None
    href: str | None = None


class WebhookPayload(BaseModel):
    resource_type: str | None = None
    action: str | None = None
    object: WebhookObject = Field(default_factory=WebhookObject)


class WebhookRequest(BaseModel):
    """Notification body posted to a registered webhook URL."""

    payload: WebhookPayload = Field(default_factory=WebhookPayload)
