"""Displayable error types built on the error-shape resolver.

Each error carries a resolved ``message``, a ``response`` dict holding the
HTTP ``status`` and ``statusText``, and the raw ``data`` payload it was built
from. Because they expose ``response`` and ``data``, these errors are
themselves error-like values: passing one back into the resolver yields the
same message and status.
"""

from typing import Any

from clientkit.resolver import (
    resolve_error_message,
    resolve_status_code,
    resolve_status_text,
)
from clientkit.utils.paths import get_in

# ============================================================================
#                           General errors
# ============================================================================


class ClientkitError(Exception):
    """Base class for CLIENTKIT errors."""


class BaseError(ClientkitError):
    """An error with a display-safe message and an HTTP status."""

    def __init__(self, status_text: Any, status: int, data: Any = None) -> None:
        data = {} if data is None else data
        message = resolve_error_message(data)
        super().__init__(message)
        self.message = message
        self.response = {"status": status, "statusText": status_text}
        self.data = data

    @property
    def status(self) -> int:
        """The HTTP status code."""
        return self.response["status"]

    @property
    def status_text(self) -> Any:
        """The HTTP status text (``500`` when it could not be resolved)."""
        return self.response["statusText"]


class ResponseError(BaseError):
    """Built from a caught HTTP rejection or response object of any shape."""

    def __init__(self, res: Any = None) -> None:
        res = {} if res is None else res
        data = _response_data(res)
        super().__init__(resolve_status_text(res), resolve_status_code(res), data)


def _response_data(res: Any) -> Any:
    """Return ``res.data``, else ``res.response.data``, else None (first truthy wins)."""
    return get_in(res, ("data",)) or get_in(res, ("response", "data")) or None


# ============================================================================
#                           Status-specific errors
# ============================================================================


class UnauthorizedError(BaseError):
    """HTTP 401."""

    def __init__(self, data: Any = None) -> None:
        super().__init__("Unauthorized", 401, data)


class ForbiddenError(BaseError):
    """HTTP 403."""

    def __init__(self, data: Any = None) -> None:
        super().__init__("Forbidden", 403, data)


class NotFoundError(BaseError):
    """HTTP 404."""

    def __init__(self, data: Any = None) -> None:
        super().__init__("Not Found", 404, data)
