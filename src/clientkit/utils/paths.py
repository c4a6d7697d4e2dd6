"""Safe nested lookups through mappings, sequences and object attributes.

Client payloads arrive as dicts (parsed JSON), as library objects exposing
attributes (e.g. an exception with a ``.response``), or as a mix of both.
``get_in`` walks a path through any of those without raising.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping, Sequence
from typing import Any

_MISSING = object()

# Attribute lookups are never attempted on these; their attributes are methods,
# not payload fields.
_SCALAR_TYPES = (str, bytes, bytearray, int, float, complex, bool)


def _step(obj: Any, key: Hashable) -> Any:
    if obj is None:
        return _MISSING
    if isinstance(obj, Mapping):
        try:
            return obj[key] if key in obj else _MISSING
        except Exception:  # pylint: disable=broad-exception-caught
            return _MISSING
    if isinstance(key, int) and not isinstance(key, bool):
        if isinstance(obj, Sequence) and not isinstance(obj, _SCALAR_TYPES):
            return obj[key] if -len(obj) <= key < len(obj) else _MISSING
        return _MISSING
    if not isinstance(key, str) or isinstance(obj, _SCALAR_TYPES):
        return _MISSING
    try:
        return getattr(obj, key, _MISSING)
    except Exception:  # pylint: disable=broad-exception-caught
        # properties on third-party objects may raise on access
        return _MISSING


def get_in(obj: Any, path: Iterable[Hashable], default: Any = None) -> Any:
    """Return the value found by following ``path`` into ``obj``.

    Each step is a mapping key lookup, an integer index into a sequence, or an
    attribute lookup on any other object. String and number values are never
    traversed by attribute.

    Args:
        obj: The value to walk into.
        path: Keys / indexes / attribute names, outermost first.
        default: Returned when any step is missing or the final value is None.

    Returns:
        The value at ``path``, or ``default``.

    Examples:
        >>> get_in({"response": {"data": {"status": 403}}}, ["response", "data", "status"])
        403
        >>> get_in({"response": None}, ["response", "status"], 500)
        500
    """
    current = obj
    for key in path:
        current = _step(current, key)
        if current is _MISSING:
            return default
    return default if current is None else current
