"""Resolve displayable error messages and HTTP statuses from error-like values.

HTTP client libraries wrap failures differently: the useful text may sit at
the top of an object, or under ``data``, ``response`` or ``response.data``,
and it may be called ``detail``, ``message``, ``error`` or ``statusText``.
This module turns any such value into something safe to display.

The three entry points never raise:

- :func:`resolve_error_message` returns a non-blank string.
- :func:`resolve_status_code` returns an integer (default ``500``).
- :func:`resolve_status_text` returns the status text, or the integer ``500``.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias

from clientkit.config import DEFAULT_STATUS, UNKNOWN_ERROR_MESSAGE
from clientkit.utils.paths import get_in
from clientkit.utils.validations import is_blank_string

logger = logging.getLogger(__name__)

# Matches "SomeTypeOfError: " style labels (one optional word, then "error:").
ERROR_LABEL_PATTERN = re.compile(r"(?:\S*\s*)?error:\s*", re.IGNORECASE)

Extractor: TypeAlias = Callable[[Any], Any]


# ============================================================================
#                           Error-like variants
# ============================================================================


@dataclass(frozen=True, slots=True)
class StringError:
    """A bare string; the string itself is the message."""

    text: str


@dataclass(frozen=True, slots=True)
class ArrayError:
    """A list/tuple holding at least one string; the first string is the message."""

    items: tuple[Any, ...]

    @property
    def first_string(self) -> str:
        """The first string element, in sequence order."""
        return next(item for item in self.items if isinstance(item, str))


@dataclass(frozen=True, slots=True)
class ObjectError:
    """Anything else: a mapping, an object with attributes, or a value with no fields."""

    value: Any


ErrorLike: TypeAlias = StringError | ArrayError | ObjectError


def classify(value: Any) -> ErrorLike:
    """Sort an arbitrary value into one of the error-like variants.

    Sequences without any string element are classified as objects; having no
    probeable fields, they resolve to the defaults.
    """
    if isinstance(value, str):
        return StringError(value)
    if isinstance(value, (list, tuple)) and any(isinstance(v, str) for v in value):
        return ArrayError(tuple(value))
    return ObjectError(value)


# ============================================================================
#                           Precedence tables
# ============================================================================


def _at(*path: str) -> Extractor:
    return lambda value: get_in(value, path)


# Order is the precedence contract. Note that "error" is probed nested-first,
# unlike the other fields.
MESSAGE_EXTRACTORS: tuple[Extractor, ...] = (
    _at("detail"),
    _at("data", "detail"),
    _at("response", "detail"),
    _at("response", "data", "detail"),
    _at("message"),
    _at("data", "message"),
    _at("response", "message"),
    _at("response", "data", "message"),
    _at("data", "error"),
    _at("response", "data", "error"),
    _at("response", "error"),
    _at("error"),
    _at("statusText"),
    _at("data", "statusText"),
    _at("response", "statusText"),
    _at("response", "data", "statusText"),
)

STATUS_EXTRACTORS: tuple[Extractor, ...] = (
    _at("status"),
    _at("response", "status"),
    _at("data", "status"),
    _at("response", "data", "status"),
)

STATUS_TEXT_EXTRACTORS: tuple[Extractor, ...] = (
    _at("statusText"),
    _at("response", "statusText"),
    _at("data", "statusText"),
    _at("response", "data", "statusText"),
)


def _is_present(candidate: Any) -> bool:
    return candidate is not None and not is_blank_string(candidate)


def _first_present(value: Any, extractors: Sequence[Extractor]) -> Any:
    for extract in extractors:
        candidate = extract(value)
        if _is_present(candidate):
            return candidate
    return None


def _as_status_code(candidate: Any) -> int | None:
    """Coerce a status candidate to an int, or None when it is not numeric."""
    if isinstance(candidate, bool):
        return None
    if isinstance(candidate, int):
        return candidate
    if isinstance(candidate, str):
        try:
            candidate = float(candidate.strip())
        except ValueError:
            return None
    if isinstance(candidate, float) and math.isfinite(candidate) and candidate.is_integer():
        return int(candidate)
    return None


# ============================================================================
#                           Public API
# ============================================================================


def remove_error_label(message: Any) -> str:
    """Remove any leading "SomeTypeOfError: " label from a message, then trim.

    Labels are stripped repeatedly, so ``"ApolloError: GraphQLError: boom"``
    becomes ``"boom"``. Text without a label is returned trimmed.

    Args:
        message: An error message which might have a label. Non-strings are
            converted with ``str()``.

    Returns:
        str: The message with any label removed (possibly empty).
    """
    try:
        text = message if isinstance(message, str) else str(message)
    except Exception:  # pylint: disable=broad-exception-caught
        return ""
    text = text.strip()
    while (match := ERROR_LABEL_PATTERN.match(text)) is not None:
        text = text[match.end() :].strip()
    return text


def resolve_error_message(value: Any) -> str:
    """Resolve a displayable error message from an error-like value.

    A bare string is the message. A list/tuple yields its first string
    element. Anything else is probed for ``detail``, then ``message``, then
    ``error``, then ``statusText``, each looked up at the top level and under
    ``data``, ``response`` and ``response.data`` (see ``MESSAGE_EXTRACTORS``
    for the exact order). An exception with no such field
    falls back to its own text, ``str(exc)``.

    Args:
        value: A string, sequence, mapping, object, or None.

    Returns:
        str: The resolved message with any error label removed, or
        ``"An unknown error occurred"`` when nothing usable was found.
    """
    match classify(value):
        case StringError(text=text):
            candidate: Any = text
        case ArrayError() as array:
            candidate = array.first_string
        case ObjectError(value=obj):
            candidate = _first_present(obj, MESSAGE_EXTRACTORS)
            if candidate is None and isinstance(obj, BaseException) and obj.args:
                # native exceptions keep their text in args, not in a field
                candidate = obj

    if candidate is None:
        return UNKNOWN_ERROR_MESSAGE
    message = remove_error_label(candidate)
    if not message:
        logger.debug("Resolved error message was blank; using the default")
        return UNKNOWN_ERROR_MESSAGE
    return message


def resolve_status_code(value: Any) -> int:
    """Resolve the numeric HTTP status from an error-like value.

    Probes ``status``, ``response.status``, ``data.status`` and
    ``response.data.status`` in that order. Values that do not coerce to an
    integer (booleans, NaN, non-numeric text) are skipped.

    Returns:
        int: The status code, or ``500`` when none was found.
    """
    for extract in STATUS_EXTRACTORS:
        if (status := _as_status_code(extract(value))) is not None:
            return status
    return DEFAULT_STATUS


def resolve_status_text(value: Any) -> Any:
    """Resolve the HTTP status text from an error-like value.

    Probes ``statusText``, ``response.statusText``, ``data.statusText`` and
    ``response.data.statusText`` in that order.

    Returns:
        The first status text found, unchanged. When none is found this
        returns the *integer* ``500``, not a string; callers have long relied
        on that quirk, so it is kept.
    """
    status_text = _first_present(value, STATUS_TEXT_EXTRACTORS)
    return DEFAULT_STATUS if status_text is None else status_text
