"""Error object returned by the API on non-2xx responses."""

from typing import Any

from pydantic import BaseModel, Field


class ApiError(BaseModel):
    """Structured error detail (see https://documentation.onfido.com/#error-object)."""

    id: str | None = None
    type: str | None = None
    message: str | None = None
    # known shapes are list[str] and dict[str, list[str]] for nested field validation
    fields: dict[str, Any] = Field(default_factory=dict)


class ApiErrorResponse(BaseModel):
    """Envelope wrapping an ``ApiError``."""

    error: ApiError
