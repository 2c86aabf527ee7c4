"""Pydantic wire models shared by the REST client."""

from equinix_rest.models.common import ErrorResponse, OffsetPagination

__all__ = [
    "ErrorResponse",
    "OffsetPagination",
]
