"""Report-related Pydantic schemas."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ReportName(str, Enum):
    """Supported report type names."""

    DOCUMENT = "document"
    DOCUMENT_WITH_ADDRESS = "document_with_address_information"
    DOCUMENT_WITH_DRIVING_LICENSE = "document_with_driving_licence_information"
    FACIAL_SIMILARITY_PHOTO = "facial_similarity_photo"
    FACIAL_SIMILARITY_PHOTO_FULLY_AUTO = "facial_similarity_photo_fully_auto"
    FACIAL_SIMILARITY_VIDEO = "facial_similarity_video"
    KNOWN_FACES = "known_faces"
    IDENTITY_ENHANCED = "identity_enhanced"
    WATCHLIST_ENHANCED = "watchlist_enhanced"
    WATCHLIST_STANDARD = "watchlist_standard"
    WATCHLIST_PEPS_ONLY = "watchlist_peps_only"
    WATCHLIST_SANCTIONS_ONLY = "watchlist_sanctions_only"
    PROOF_OF_ADDRESS = "proof_of_address"
    RIGHT_TO_WORK = "right_to_work"


class ReportResult(str, Enum):
    """Overall report results."""

    CLEAR = "clear"
    CONSIDER = "consider"
    UNIDENTIFIED = "unidentified"


class ReportSubResult(str, Enum):
    """Report sub-results, only reported for document reports."""

    CLEAR = "clear"
    REJECTED = "rejected"
    SUSPECTED = "suspected"
    CAUTION = "caution"


class SubBreakdown(BaseModel):
    """Leaf breakdown entry."""

    result: str | None = None
    properties: dict[str, Any] = Field(default_factory=dict)


class Breakdown(BaseModel):
    """Top-level breakdown entry with its nested sub-breakdowns."""

    result: str | None = None
    sub_breakdowns: dict[str, SubBreakdown] = Field(default_factory=dict, alias="breakdown")

    model_config = ConfigDict(populate_by_name=True)


class Report(BaseModel):
    """Schema for a report returned by the API.

    ``name``, ``result`` and ``sub_result`` are kept as plain strings so that
    values introduced by newer API versions still decode; compare them against
    ``ReportName``, ``ReportResult`` and ``ReportSubResult``.
    """

    id: str | None = None
    name: str | None = None
    created_at: datetime | None = None
    status: str | None = None
    result: str | None = None
    sub_result: str | None = None
    href: str | None = None
    options: dict[str, Any] = Field(default_factory=dict)
    breakdown: dict[str, Breakdown] = Field(default_factory=dict)
    properties: dict[str, Any] = Field(default_factory=dict)
    check_id: str | None = None
    # metadata about each processed document
    documents: list[dict[str, Any]] = Field(default_factory=list)


class ReportList(BaseModel):
    """One page of reports."""

    reports: list[Report] = Field(default_factory=list)
