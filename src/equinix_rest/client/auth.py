"""Authentication for the REST API."""

from __future__ import annotations

from collections.abc import Generator

import httpx

from equinix_rest.config.settings import ClientSettings


class BearerTokenAuth(httpx.Auth):
    """Authenticate using an OAuth access token (Authorization: Bearer)."""

    def __init__(self, token: str) -> None:
        self.token = token

    def auth_flow(
        self, request: httpx.Request,
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self.token}"
        yield request


def resolve_auth(settings: ClientSettings) -> httpx.Auth | None:
    """Return bearer auth when a token is configured."""
    if settings.token:
        return BearerTokenAuth(settings.token)
    return None
