# src/onfido_client/services/__init__.py
"""API endpoint groups and webhook handling for the Onfido client."""

from .media import LivePhotoIterator, LivePhotosAPI, LiveVideoIterator, LiveVideosAPI
from .pagination import PageIterator
from .reports import ReportIterator, ReportsAPI
from .sdk_tokens import SdkTokensAPI
from .webhook_handler import Webhook
from .webhooks import WebhookRefIterator, WebhooksAPI

__all__ = [
    "LivePhotoIterator",
    "LivePhotosAPI",
    "LiveVideoIterator",
    "LiveVideosAPI",
    "PageIterator",
    "ReportIterator",
    "ReportsAPI",
    "SdkTokensAPI",
    "Webhook",
    "WebhookRefIterator",
    "WebhooksAPI",
]
