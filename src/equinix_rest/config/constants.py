"""Environment variable names and client defaults."""

from __future__ import annotations

# Environment variable names
ENV_BASE_URL = "EQUINIX_REST_URL"
ENV_API_TOKEN = "EQUINIX_REST_TOKEN"
ENV_PAGE_SIZE = "EQUINIX_REST_PAGE_SIZE"
ENV_TIMEOUT = "EQUINIX_REST_TIMEOUT"

# Client defaults
DEFAULT_PAGE_SIZE = 100
DEFAULT_TIMEOUT = 30.0
