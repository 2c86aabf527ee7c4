"""Common response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Standard error object returned by the API on non-2xx responses."""

    model_config = ConfigDict(populate_by_name=True)

    error_code: str = Field(default="", alias="errorCode")
    property: str = ""
    error_message: str = Field(default="", alias="errorMessage")
    more_info: str = Field(default="", alias="moreInfo")


class OffsetPagination(BaseModel):
    """Pagination metadata object used by offset/limit style endpoints.

    Format: ``{"offset": 0, "limit": 20, "total": 42}``
    """

    offset: int | None = None
    limit: int | None = None
    total: int | None = None
