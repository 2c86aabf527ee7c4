"""Client settings: explicit arguments layered over environment variables."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field, ValidationError, field_validator

from equinix_rest.client.errors import ConfigurationError
from equinix_rest.config.constants import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_TIMEOUT,
    ENV_API_TOKEN,
    ENV_BASE_URL,
    ENV_PAGE_SIZE,
    ENV_TIMEOUT,
)


class ClientSettings(BaseModel):
    """Everything needed to build a RestClient."""

    base_url: str = Field(description="API base URL, e.g. https://api.equinix.com")
    token: str | None = Field(default=None, description="OAuth access token")
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, gt=0)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, le=600)
    verify_ssl: bool = True

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")


def load_settings(
    base_url: str | None = None,
    token: str | None = None,
    *,
    page_size: int | None = None,
    timeout: float | None = None,
    verify_ssl: bool = True,
) -> ClientSettings:
    """Build settings from arguments, falling back to ``EQUINIX_REST_*`` env vars.

    Raises ``ConfigurationError`` when no base URL is available or a value
    is invalid.
    """
    base_url = base_url or os.environ.get(ENV_BASE_URL)
    if not base_url:
        raise ConfigurationError(f"No API URL configured. Pass one or set {ENV_BASE_URL}.")

    values: dict[str, object] = {
        "base_url": base_url,
        "token": token or os.environ.get(ENV_API_TOKEN),
        "verify_ssl": verify_ssl,
    }
    # Env values go in as strings; pydantic converts and range-checks them
    env_page_size = os.environ.get(ENV_PAGE_SIZE)
    if page_size is not None or env_page_size:
        values["page_size"] = page_size if page_size is not None else env_page_size
    env_timeout = os.environ.get(ENV_TIMEOUT)
    if timeout is not None or env_timeout:
        values["timeout"] = timeout if timeout is not None else env_timeout

    try:
        return ClientSettings.model_validate(values)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        raise ConfigurationError(f"Invalid client settings: {problems}") from exc
