"""SDK token schema."""

from pydantic import BaseModel


class SdkToken(BaseModel):
    """Request and response body for ``POST /sdk_token``.

    Web SDK tokens carry a ``referrer``; mobile SDK tokens carry an
    ``application_id``.
    """

    applicant_id: str | None = None
    referrer: str | None = None
    application_id: str | None = None
    token: str | None = None
