"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .error import ApiError, ApiErrorResponse
from .media import LivePhoto, LivePhotoList, LiveVideo, LiveVideoDownload, LiveVideoList
from .report import (
    Breakdown,
    Report,
    ReportList,
    ReportName,
    ReportResult,
    ReportSubResult,
    SubBreakdown,
)
from .sdk_token import SdkToken
from .webhook import (
    WebhookEnvironment,
    WebhookEvent,
    WebhookObject,
    WebhookPayload,
    WebhookRef,
    WebhookRefList,
    WebhookRefRequest,
    WebhookRequest,
)

__all__ = [
    "ApiError", "ApiErrorResponse",
    "LivePhoto", "LivePhotoList", "LiveVideo", "LiveVideoDownload", "LiveVideoList",
    "Breakdown", "Report", "ReportList", "ReportName", "ReportResult", "ReportSubResult",
    "SubBreakdown",
    "SdkToken",
    "WebhookEnvironment", "WebhookEvent", "WebhookObject", "WebhookPayload",
    "WebhookRef", "WebhookRefList", "WebhookRefRequest", "WebhookRequest",
]
