"""Lazy iteration over paginated list endpoints.

List endpoints return one page of items per request and point at the
following page through an RFC 5988 ``Link: <url>; rel="next"`` header. The
PageIterator walks those links on demand: a page is only requested once every
item of the previous page has been consumed, and at most one request is in
flight at a time.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Generic, TypeVar

from pydantic import BaseModel

from onfido_client.core.errors import DecodeError, NonJSONResponseError, OnfidoError
from onfido_client.utils.http import is_json_response, next_page_url

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from onfido_client.services.client import OnfidoClient, Timeout

T = TypeVar("T")

PageHandler = Callable[[bytes], list[T]]

# Configure logger for this module
logger = logging.getLogger(__name__)


def model_page_handler(page_model: type[BaseModel], field: str) -> PageHandler:
    """Return a handler decoding a page body into ``page_model.<field>``."""

    def _handler(body: bytes) -> list:
        page = page_model.model_validate_json(body)
        return list(getattr(page, field))

    return _handler


class PageIterator(Generic[T]):
    """Forward-only cursor over the items of a paginated list endpoint.

    Call ``advance()`` until it returns False, reading ``current`` after each
    successful call, then check ``last_error`` to tell exhaustion apart from
    failure. Errors are sticky: once one is recorded the iterator never
    issues another request.
    """

    def __init__(self, client: OnfidoClient, url: str, handler: PageHandler[T]) -> None:
        self._client = client
        self._next_url: str | None = url
        self._handler = handler
        self._values: deque[T] = deque()
        self._current: T | None = None
        self._error: OnfidoError | None = None

    @property
    def current(self) -> T | None:
        return self._current

    @property
    def last_error(self) -> OnfidoError | None:
        return self._error

    @property
    def next_url(self) -> str | None:
        return self._next_url

    def advance(self, timeout: Timeout = None) -> bool:
        """Move to the next item, fetching a new page when the buffer is empty.

        Args:
            timeout: Deadline for the page request, if one is needed. A
                request aborted by it is recorded as a terminal error.

        Returns:
            True if ``current`` now holds a new item.
        """
        if self._error is not None:
            return False

        if not self._values and self._next_url:
            try:
                self._fetch(self._next_url, timeout)
            except OnfidoError as exc:
                logger.warning("Pagination stopped at %s: %s", self._next_url, exc)
                self._error = exc
                return False

        if not self._values:
            # an empty page ends iteration even when it links onwards
            self._next_url = None
            return False

        self._current = self._values.popleft()
        return True

    def _fetch(self, url: str, timeout: Timeout) -> None:
        response = self._client.request("GET", url, timeout=timeout)
        if not is_json_response(response):
            raise NonJSONResponseError(response.headers.get("Content-Type"))

        try:
            values = self._handler(response.content)
        except OnfidoError:
            raise
        except Exception as exc:
            raise DecodeError(f"unable to decode page from {url}: {exc}") from exc

        self._values.extend(values)
        self._next_url = next_page_url(response)
        logger.debug("Fetched %d items from %s (next: %s)", len(values), url, self._next_url)

    def __iter__(self) -> Iterator[T]:
        """Yield the remaining items, raising the terminal error if one occurs."""
        while self.advance():
            yield self._current  # type: ignore[misc]
        if self._error is not None:
            raise self._error
