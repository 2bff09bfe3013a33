"""Live photo and live video schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class LivePhoto(BaseModel):
    """Schema for a live photo (https://documentation.onfido.com/#live-photo-object)."""

    id: str | None = None
    created_at: datetime | None = None
    href: str | None = None
    download_href: str | None = None
    file_name: str | None = None
    file_type: str | None = None
    file_size: int | None = None


class LivePhotoList(BaseModel):
    live_photos: list[LivePhoto] = Field(default_factory=list)


class LiveVideo(BaseModel):
    """Schema for a live video (https://documentation.onfido.com/#live-video-object)."""

    id: str | None = None
    created_at: datetime | None = None
    href: str | None = None
    download_href: str | None = None
    file_name: str | None = None
    file_type: str | None = None
    file_size: int | None = None


class LiveVideoList(BaseModel):
    live_videos: list[LiveVideo] = Field(default_factory=list)


class LiveVideoDownload(BaseModel):
    """Downloaded video content."""

    data: str = Field(..., description="Binary data of the video encoded as a Base64 string")
