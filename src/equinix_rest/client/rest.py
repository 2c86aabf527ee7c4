"""REST API HTTP client."""

from __future__ import annotations

import json
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from equinix_rest.client.auth import resolve_auth
from equinix_rest.client.errors import (
    InvalidArgumentError,
    ResponseDecodeError,
    TransportError,
    decode_error_body,
    err_console,
)
from equinix_rest.client.pagination import (
    OffsetPagingConfig,
    PagingConfig,
    PagingStrategy,
    collect_pages,
)
from equinix_rest.config.constants import DEFAULT_PAGE_SIZE, DEFAULT_TIMEOUT
from equinix_rest.config.settings import ClientSettings

ModelT = TypeVar("ModelT", bound=BaseModel)


class RestClient:
    """Synchronous JSON REST client with paginated collection queries."""

    def __init__(
        self,
        base_url: str,
        http_client: httpx.Client | None = None,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self.page_size = page_size
        self.base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=DEFAULT_TIMEOUT)
        self._client.headers["Accept"] = "application/json"

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> RestClient:
        """Build a client that owns an httpx client configured from *settings*."""
        if not settings.verify_ssl:
            err_console.print("[yellow]Warning:[/] TLS certificate verification is disabled")
        http_client = httpx.Client(
            auth=resolve_auth(settings),
            verify=settings.verify_ssl,
            timeout=settings.timeout,
        )
        client = cls(settings.base_url, http_client, page_size=settings.page_size)
        client._owns_client = True
        return client

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> RestClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    @property
    def page_size(self) -> int:
        """Page size used for paginated queries."""
        return self._page_size

    @page_size.setter
    def page_size(self, value: int) -> None:
        if value <= 0:
            raise ValueError(f"page size must be positive, got {value}")
        self._page_size = value

    def set_page_size(self, page_size: int) -> RestClient:
        """Set the page size used for paginated queries."""
        self.page_size = page_size
        return self

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.removeprefix('/')}"

    def _handle_response(self, response: httpx.Response) -> httpx.Response:
        if response.is_success:
            return response
        err = decode_error_body(response.content)
        err.http_code = response.status_code
        raise err

    def execute(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Send a request to ``{base_url}/{path}``, raising on any failure."""
        url = self._url(path)
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.ConnectError as exc:
            raise TransportError(
                f"operation failed: cannot connect to {self.base_url}: {exc}"
            ) from exc
        except httpx.TimeoutException as exc:
            raise TransportError(
                f"operation failed: request to {url} timed out: {exc}"
            ) from exc
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise TransportError(f"operation failed: {exc}") from exc
        return self._handle_response(response)

    def get(
        self,
        path: str,
        *,
        params: dict[str, str] | None = None,
        result_type: type[ModelT] | None = None,
    ) -> Any:
        """GET *path* and return the JSON body, decoded into *result_type* if given."""
        resp = self.execute("GET", path, params=params)
        return self._decode(resp, result_type)

    def post(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.execute("POST", path, **kwargs)

    def put(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.execute("PUT", path, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.execute("DELETE", path, **kwargs)

    @staticmethod
    def _decode(resp: httpx.Response, result_type: type[ModelT] | None) -> Any:
        try:
            if result_type is None:
                return resp.json()
            return result_type.model_validate_json(resp.content)
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as exc:
            raise ResponseDecodeError(
                f"cannot decode response body: {exc}",
                http_code=resp.status_code,
            ) from exc

    def get_paginated(
        self,
        path: str,
        result_type: type[BaseModel],
        config: PagingConfig | None = None,
    ) -> list[Any]:
        """Fetch every page of a page-number paginated collection.

        Each page is decoded into *result_type*; the items of all pages are
        returned in the order the server sent them.
        """
        return self._paginate(path, result_type, config or PagingConfig())

    def get_offset_paginated(
        self,
        path: str,
        result_type: type[BaseModel],
        config: OffsetPagingConfig | None = None,
    ) -> list[Any]:
        """Fetch every page of an offset/limit paginated collection."""
        return self._paginate(path, result_type, config or OffsetPagingConfig())

    def _paginate(
        self,
        path: str,
        result_type: type[BaseModel],
        strategy: PagingStrategy,
    ) -> list[Any]:
        if not (isinstance(result_type, type) and issubclass(result_type, BaseModel)):
            raise InvalidArgumentError(
                "operation failed, provided result type is not a pydantic model class"
            )

        def fetch_page(params: dict[str, str]) -> BaseModel:
            page: BaseModel = self.get(path, params=params, result_type=result_type)
            return page

        return collect_pages(fetch_page, strategy, self.page_size)
