"""Configuration utilities for CLIENTKIT.

This module centralizes small helpers and constants related to configuration.
"""

import os

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"  # pragma: no mutate
DEFAULT_STATUS = 500
API_URL_ENV_VAR = "CLIENTKIT_API_URL"  # pragma: no mutate


class ApiBaseUrlNotSetError(Exception):
    """Raised when the CLIENTKIT_API_URL environment variable is not set."""


def get_api_base_url() -> str:
    """Get the default API base URL from the environment.

    Returns:
        The value of the `CLIENTKIT_API_URL` environment variable, trimmed.

    Raises:
        ApiBaseUrlNotSetError: If `CLIENTKIT_API_URL` is unset or blank.
    """
    if not (url := os.environ.get(API_URL_ENV_VAR, "").strip()):
        raise ApiBaseUrlNotSetError
    return url
