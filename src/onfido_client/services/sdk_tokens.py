"""SDK token endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from onfido_client.schemas import SdkToken

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from onfido_client.services.client import OnfidoClient, Timeout


class SdkTokensAPI:
    """Issue JWTs for the client-side SDKs."""

    def __init__(self, client: OnfidoClient) -> None:
        self._client = client

    def new_web(self, applicant_id: str, referrer: str, *, timeout: Timeout = None) -> SdkToken:
        """Return a token for the JavaScript SDK, restricted to ``referrer``."""
        return self._issue(SdkToken(applicant_id=applicant_id, referrer=referrer), timeout)

    def new_mobile(
        self, applicant_id: str, application_id: str, *, timeout: Timeout = None
    ) -> SdkToken:
        """Return a token for the iOS and Android SDKs."""
        return self._issue(
            SdkToken(applicant_id=applicant_id, application_id=application_id), timeout
        )

    def _issue(self, token_request: SdkToken, timeout: Timeout) -> SdkToken:
        response = self._client.request(
            "POST",
            "/sdk_token",
            json_data=token_request.model_dump(exclude_none=True),
            timeout=timeout,
        )
        issued = self._client.decode(response, SdkToken)
        return token_request.model_copy(update={"token": issued.token})
