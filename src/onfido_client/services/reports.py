"""Report endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlencode

from onfido_client.schemas import Report, ReportList
from onfido_client.services.pagination import PageIterator, model_page_handler

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from onfido_client.services.client import OnfidoClient, Timeout


class ReportIterator(PageIterator[Report]):
    """Iterator over the reports of a check."""

    @property
    def report(self) -> Report | None:
        return self.current


class ReportsAPI:
    """Retrieve, resume, cancel and list reports."""

    def __init__(self, client: OnfidoClient) -> None:
        self._client = client

    def get(self, report_id: str, *, timeout: Timeout = None) -> Report:
        """Retrieve a single report by its ID.

        See https://documentation.onfido.com/#retrieve-report
        """
        response = self._client.request("GET", f"/reports/{report_id}", timeout=timeout)
        return self._client.decode(response, Report)

    def resume(self, report_id: str, *, timeout: Timeout = None) -> None:
        """Resume a paused report."""
        self._client.request("POST", f"/reports/{report_id}/resume", timeout=timeout)

    def cancel(self, report_id: str, *, timeout: Timeout = None) -> None:
        """Cancel a paused report."""
        self._client.request("POST", f"/reports/{report_id}/cancel", timeout=timeout)

    def list(self, check_id: str) -> ReportIterator:
        """List the reports belonging to a check.

        No request is sent until the iterator is advanced.
        """
        return ReportIterator(
            self._client,
            "/reports?" + urlencode({"check_id": check_id}),
            model_page_handler(ReportList, "reports"),
        )
