"""Typed exceptions and REST error body decoding."""

from __future__ import annotations

from pydantic import BaseModel, TypeAdapter, ValidationError
from rich.console import Console

from equinix_rest.models.common import ErrorResponse

err_console = Console(stderr=True)

_ERROR_LIST = TypeAdapter(list[ErrorResponse])


class RestClientError(Exception):
    """Base exception for equinix-rest."""


class ApplicationError(BaseModel):
    """A single application-level sub-error reported by the server."""

    code: str = ""
    property: str = ""
    message: str = ""
    additional_info: str = ""

    def __str__(self) -> str:
        return (
            f'Code: "{self.code}", Property: "{self.property}", '
            f'Message: "{self.message}", AdditionalInfo: "{self.additional_info}"'
        )


class RestError(RestClientError):
    """Error returned by the REST API or raised while talking to it."""

    def __init__(
        self,
        message: str = "",
        *,
        http_code: int = 0,
        application_errors: list[ApplicationError] | None = None,
    ) -> None:
        self.http_code = http_code
        self.message = message
        self.application_errors = list(application_errors or [])
        super().__init__(message)

    def __str__(self) -> str:
        app_errors = "".join(f"[{e}] " for e in self.application_errors)
        return (
            f'Message: "{self.message}", HTTPCode: {self.http_code}, '
            f"ApplicationErrors: {app_errors}"
        )


class TransportError(RestError):
    """The HTTP call failed before any response was received."""


class UnstructuredError(RestError):
    """Non-2xx response whose body is not a recognised error payload."""


class ResponseDecodeError(RestError):
    """Successful response whose body cannot be decoded into the result type."""


class ConfigurationError(RestClientError):
    """Client configuration is missing or invalid."""


class PaginationError(RestClientError):
    """Misconfigured pagination or an unusable result container."""


class InvalidArgumentError(PaginationError):
    """A traversal was called with an argument it cannot work with."""


class ShapeError(PaginationError):
    """The value handed to the field extractor is not a structured model."""


class FieldNotFoundError(PaginationError):
    """The model has no field with the requested name."""

    def __init__(self, field_name: str, model_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"{model_name} has no field named {field_name!r}")


class KindMismatchError(PaginationError):
    """The field exists but does not hold the expected kind of value."""

    def __init__(self, field_name: str, expected: str, actual: str) -> None:
        self.field_name = field_name
        self.expected = expected
        super().__init__(
            f"kind of {field_name!r} field is {actual}, expected {expected}"
        )


def decode_error_body(body: bytes | str) -> RestError:
    """Turn a non-2xx response body into a ``RestError``.

    Tries a single error object first, then a list of them, and falls back
    to an ``UnstructuredError`` carrying the raw body text. Never raises;
    the caller is responsible for setting ``http_code``.
    """
    try:
        return _from_error_response(ErrorResponse.model_validate_json(body))
    except ValidationError:
        pass
    try:
        return _from_error_responses(_ERROR_LIST.validate_json(body))
    except ValidationError:
        pass
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    return UnstructuredError(body)


def _from_error_response(resp: ErrorResponse) -> RestError:
    return RestError(
        resp.error_message,
        application_errors=[
            ApplicationError(
                code=resp.error_code,
                property=resp.property,
                message=f"[Error: Property: {resp.property}, {resp.error_message}]",
                additional_info=resp.more_info,
            )
        ],
    )


def _from_error_responses(responses: list[ErrorResponse]) -> RestError:
    app_errors: list[ApplicationError] = []
    msg = ""
    for i, resp in enumerate(responses):
        app_errors.append(
            ApplicationError(
                code=resp.error_code,
                property=resp.property,
                message=resp.error_message,
                additional_info=resp.more_info,
            )
        )
        msg += f" [Error {i + 1}: Property: {resp.property}, {resp.error_message}]"
    return RestError(
        "Multiple errors occurred:" + msg,
        application_errors=app_errors,
    )
