"""Shared test fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in (
        "EQUINIX_REST_URL",
        "EQUINIX_REST_TOKEN",
        "EQUINIX_REST_PAGE_SIZE",
        "EQUINIX_REST_TIMEOUT",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def paginated_pages() -> dict[str, dict]:
    """Three single-item pages keyed by the ``p`` query parameter."""
    return {
        "": {"t": 3, "p": 1, "s": 1, "l": [{"key": "first"}]},
        "2": {"t": 3, "p": 2, "s": 1, "l": [{"key": "second"}]},
        "3": {"t": 3, "p": 3, "s": 1, "l": [{"key": "third"}]},
    }


@pytest.fixture
def offset_pages() -> dict[str, dict]:
    """Three two-item pages keyed by the ``offset`` query parameter."""
    return {
        "": {
            "pagination": {"offset": 0, "limit": 2, "total": 6},
            "data": [{"key": "a"}, {"key": "b"}],
        },
        "2": {
            "pagination": {"offset": 2, "limit": 2, "total": 6},
            "data": [{"key": "c"}, {"key": "d"}],
        },
        "4": {
            "pagination": {"offset": 4, "limit": 2, "total": 6},
            "data": [{"key": "e"}, {"key": "f"}],
        },
    }
