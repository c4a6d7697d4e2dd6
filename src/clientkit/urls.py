"""Querystring and API URL helpers."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode


def safe_querystring(params: Mapping[str, Any] | None) -> str:
    """Stringify a mapping of params into a querystring.

    ``None`` values are skipped; list/tuple values repeat the key.

    Args:
        params: Params to stringify.

    Returns:
        str: ``"?a=1&b=2"``, or ``""`` when there is nothing to encode.
    """
    if not params:
        return ""
    pairs = {key: value for key, value in params.items() if value is not None}
    if not pairs:
        return ""
    return "?" + urlencode(pairs, doseq=True)


def make_api_url(
    base: str, endpoint: str | None = None, params: Mapping[str, Any] | None = None
) -> str:
    """Join a base URL and an endpoint, then append any query params.

    Examples:
        >>> make_api_url("http://localhost:5000", "endpoint/", {"lorem": "ipsum"})
        'http://localhost:5000/endpoint/?lorem=ipsum'
        >>> make_api_url("http://localhost:5000", None, {})
        'http://localhost:5000'
    """
    url = base
    if endpoint:
        url = f"{base.rstrip('/')}/{endpoint.lstrip('/')}"
    return url + safe_querystring(params)
