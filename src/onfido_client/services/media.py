"""Live photo and live video endpoints."""

from __future__ import annotations

import base64
from typing import TYPE_CHECKING
from urllib.parse import urlencode

from onfido_client.schemas import (
    LivePhoto,
    LivePhotoList,
    LiveVideo,
    LiveVideoDownload,
    LiveVideoList,
)
from onfido_client.services.pagination import PageIterator, model_page_handler

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from onfido_client.services.client import OnfidoClient, Timeout


class LivePhotoIterator(PageIterator[LivePhoto]):
    @property
    def live_photo(self) -> LivePhoto | None:
        return self.current


class LiveVideoIterator(PageIterator[LiveVideo]):
    @property
    def live_video(self) -> LiveVideo | None:
        return self.current


class LivePhotosAPI:
    def __init__(self, client: OnfidoClient) -> None:
        self._client = client

    def list(self, applicant_id: str) -> LivePhotoIterator:
        """List the live photos of an applicant.

        See https://documentation.onfido.com/#list-live-photos
        """
        return LivePhotoIterator(
            self._client,
            "/live_photos?" + urlencode({"applicant_id": applicant_id}),
            model_page_handler(LivePhotoList, "live_photos"),
        )


class LiveVideosAPI:
    def __init__(self, client: OnfidoClient) -> None:
        self._client = client

    def list(self, applicant_id: str) -> LiveVideoIterator:
        """List the live videos of an applicant.

        See https://documentation.onfido.com/#list-live-videos
        """
        return LiveVideoIterator(
            self._client,
            "/live_videos?" + urlencode({"applicant_id": applicant_id}),
            model_page_handler(LiveVideoList, "live_videos"),
        )

    def download(self, video_id: str, *, timeout: Timeout = None) -> LiveVideoDownload:
        """Download the raw video, returned Base64-encoded.

        See https://documentation.onfido.com/#download-live-video
        """
        response = self._client.request(
            "GET", f"/live_videos/{video_id}/download", timeout=timeout
        )
        return LiveVideoDownload(data=base64.b64encode(response.content).decode("ascii"))
