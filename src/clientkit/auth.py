"""HTTP Authorization header helpers.

Build a Bearer ``Authorization`` header from a JWT, and read the scheme and
credentials back out of a request's headers.
"""

import re
from typing import Any

from clientkit.utils.paths import get_in

JWT_PATTERN = re.compile(r"^[A-Z0-9\-_]+\.[A-Z0-9\-_]+\.[A-Z0-9\-_]+$", re.IGNORECASE)


def create_auth_header(token: Any) -> dict[str, str]:
    """Create a headers dict with a Bearer ``Authorization`` header.

    The token must look like a JWT: three base64url segments separated by
    periods, with no whitespace or line breaks.

    Args:
        token: A stringified JWT.

    Returns:
        dict[str, str]: ``{"Authorization": "Bearer <token>"}``, or an empty
        dict when the token is not a JWT.
    """
    if not isinstance(token, str) or JWT_PATTERN.fullmatch(token) is None:
        return {}
    return {"Authorization": f"Bearer {token}"}


def _authorization(request: Any) -> list[str]:
    header = get_in(request, ("headers", "authorization"), "")
    return str(header).strip().split(" ")


def parse_credentials(request: Any) -> dict[str, str]:
    """Parse the ``Authorization`` header of a request into its parts.

    Args:
        request: A request mapping/object with a ``headers`` mapping holding a
            lower-case ``authorization`` key.

    Returns:
        dict[str, str]: ``{"authType": ..., "credentials": ...}``. Parts that
        are missing from the header are omitted.
    """
    return dict(zip(("authType", "credentials"), _authorization(request)))


def get_access_token(request: Any) -> str:
    """Return the token (last space-separated part) of a request's ``Authorization`` header.

    Returns:
        str: The token, or ``""`` when there is no header.
    """
    return _authorization(request)[-1]
