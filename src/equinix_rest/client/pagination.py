"""Pagination configs and the page traversal loop.

Two styles are supported:

* page-number: ``?size=N`` then ``?size=N&page=2``, ``?size=N&page=3``...
  with the total count and content list as top-level response fields
  (``PagingConfig``).
* offset/limit: ``?limit=N`` then ``?limit=N&offset=N``, ``offset=2N``...
  with the total count nested in a pagination object (``OffsetPagingConfig``).

Response models are described only by field names; the configs read the
total count and the content list through ``extract_field``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeVar

from pydantic import BaseModel, Field

from equinix_rest.client.errors import InvalidArgumentError
from equinix_rest.client.fields import FieldKind, extract_field

PageT = TypeVar("PageT", bound=BaseModel)


class PagingStrategy(Protocol):
    """What the traversal loop needs to know about a pagination style."""

    def first_params(self, page_size: int) -> dict[str, str]: ...

    def next_params(self, page_size: int, step: int) -> dict[str, str]: ...

    def read_total(self, page: BaseModel) -> int: ...

    def read_content(self, page: BaseModel) -> list[Any]: ...


class PagingConfig(BaseModel):
    """Page-number pagination: field names and query parameter names."""

    total_count_field_name: str = "TotalCount"
    content_field_name: str = "Content"
    size_param_name: str = "size"
    page_param_name: str = "page"
    first_page_number: int = 1
    additional_params: dict[str, str] = Field(default_factory=dict)

    def set_total_count_field_name(self, v: str) -> PagingConfig:
        self.total_count_field_name = v
        return self

    def set_content_field_name(self, v: str) -> PagingConfig:
        self.content_field_name = v
        return self

    def set_size_param_name(self, v: str) -> PagingConfig:
        self.size_param_name = v
        return self

    def set_page_param_name(self, v: str) -> PagingConfig:
        self.page_param_name = v
        return self

    def set_first_page_number(self, v: int) -> PagingConfig:
        self.first_page_number = v
        return self

    def set_additional_params(self, v: dict[str, str]) -> PagingConfig:
        self.additional_params = v
        return self

    def first_params(self, page_size: int) -> dict[str, str]:
        # No page number: the server falls back to its first page.
        return {**self.additional_params, self.size_param_name: str(page_size)}

    def next_params(self, page_size: int, step: int) -> dict[str, str]:
        return {
            **self.first_params(page_size),
            self.page_param_name: str(self.first_page_number + step),
        }

    def read_total(self, page: BaseModel) -> int:
        total: int = extract_field(page, self.total_count_field_name, FieldKind.INTEGER)
        return total

    def read_content(self, page: BaseModel) -> list[Any]:
        return list(extract_field(page, self.content_field_name, FieldKind.SEQUENCE))


class OffsetPagingConfig(BaseModel):
    """Offset/limit pagination with the total count in a nested object."""

    data_field_name: str = "Data"
    pagination_field_name: str = "Pagination"
    total_field_name: str = "Total"
    limit_field_name: str = "limit"
    offset_field_name: str = "offset"
    additional_params: dict[str, str] = Field(default_factory=dict)

    def set_data_field_name(self, v: str) -> OffsetPagingConfig:
        self.data_field_name = v
        return self

    def set_pagination_field_name(self, v: str) -> OffsetPagingConfig:
        self.pagination_field_name = v
        return self

    def set_total_field_name(self, v: str) -> OffsetPagingConfig:
        self.total_field_name = v
        return self

    def set_limit_field_name(self, v: str) -> OffsetPagingConfig:
        self.limit_field_name = v
        return self

    def set_offset_field_name(self, v: str) -> OffsetPagingConfig:
        self.offset_field_name = v
        return self

    def set_additional_params(self, v: dict[str, str]) -> OffsetPagingConfig:
        self.additional_params = v
        return self

    def first_params(self, page_size: int) -> dict[str, str]:
        return {**self.additional_params, self.limit_field_name: str(page_size)}

    def next_params(self, page_size: int, step: int) -> dict[str, str]:
        return {
            **self.first_params(page_size),
            self.offset_field_name: str(page_size * step),
        }

    def read_total(self, page: BaseModel) -> int:
        pagination = extract_field(
            page, self.pagination_field_name, FieldKind.STRUCTURE,
        )
        total: int = extract_field(pagination, self.total_field_name, FieldKind.INTEGER)
        return total

    def read_content(self, page: BaseModel) -> list[Any]:
        return list(extract_field(page, self.data_field_name, FieldKind.SEQUENCE))


def collect_pages(
    fetch_page: Callable[[dict[str, str]], PageT],
    strategy: PagingStrategy,
    page_size: int,
) -> list[Any]:
    """Fetch pages until the reported total is covered, returning all items.

    The total is read from the first page only and trusted as-is. Any error
    from *fetch_page* or from field extraction propagates and the items
    collected so far are dropped.
    """
    if page_size <= 0:
        raise InvalidArgumentError(f"page size must be positive, got {page_size}")
    page = fetch_page(strategy.first_params(page_size))
    total = strategy.read_total(page)
    items = strategy.read_content(page)
    fetched = page_size
    step = 1
    while fetched < total:
        page = fetch_page(strategy.next_params(page_size, step))
        items.extend(strategy.read_content(page))
        fetched += page_size
        step += 1
    return items
