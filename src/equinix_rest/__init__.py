"""REST client with structured API errors and generic pagination."""

from equinix_rest.client.errors import (
    ApplicationError,
    ConfigurationError,
    FieldNotFoundError,
    InvalidArgumentError,
    KindMismatchError,
    PaginationError,
    ResponseDecodeError,
    RestClientError,
    RestError,
    ShapeError,
    TransportError,
    UnstructuredError,
    decode_error_body,
)
from equinix_rest.client.factory import make_client
from equinix_rest.client.fields import FieldKind, extract_field
from equinix_rest.client.pagination import OffsetPagingConfig, PagingConfig
from equinix_rest.client.rest import RestClient
from equinix_rest.config.settings import ClientSettings, load_settings

__version__ = "0.1.0"

__all__ = [
    "ApplicationError",
    "ClientSettings",
    "ConfigurationError",
    "FieldKind",
    "FieldNotFoundError",
    "InvalidArgumentError",
    "KindMismatchError",
    "OffsetPagingConfig",
    "PagingConfig",
    "PaginationError",
    "ResponseDecodeError",
    "RestClient",
    "RestClientError",
    "RestError",
    "ShapeError",
    "TransportError",
    "UnstructuredError",
    "decode_error_body",
    "extract_field",
    "load_settings",
    "make_client",
]
