"""Client factory: build a RestClient from arguments or the environment."""

from __future__ import annotations

from equinix_rest.client.rest import RestClient
from equinix_rest.config.settings import load_settings


def make_client(
    base_url: str | None = None,
    token: str | None = None,
    *,
    page_size: int | None = None,
    timeout: float | None = None,
    verify_ssl: bool = True,
) -> RestClient:
    """Create a RestClient, reading anything not passed from ``EQUINIX_REST_*``."""
    settings = load_settings(
        base_url, token, page_size=page_size, timeout=timeout, verify_ssl=verify_ssl,
    )
    return RestClient.from_settings(settings)
