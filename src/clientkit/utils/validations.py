"""Predicates for validating basic input shapes.

Every predicate accepts any value and returns a ``bool``; none of them raise.
"""

from __future__ import annotations

import datetime
import inspect
import re
from collections.abc import Hashable, Iterable, Sized
from typing import Any

from clientkit.utils.paths import get_in

PROP_NAME_PATTERN = re.compile(r"^(?:[A-Z])([A-Z0-9_\-.]+)([A-Z0-9])$", re.IGNORECASE)
EMAIL_PATTERN = re.compile(r"^[^.\s@:][^\s@:]*(?!\.)@[^.\s@]+(?:\.[^.\s@]+)*$")
PASSWORD_PATTERN = re.compile(r"^([A-Z]|[a-z])([a-z]|[0-9]|[!@#$%^&*()\[\];:,.<>?*^+=_-]){6,50}$")
IMAGE_URL_PATTERN = re.compile(
    r"^(?:data:image/[a-z0-9.+-]+;base64,\S+|\S+\.(?:jpe?g|png|svg|tiff?|gif|bmp|webp))$",
    re.IGNORECASE,
)
LOG_LEVELS = frozenset({"INFO", "DEBUG", "TRACE", "WARN", "ERROR", "FATAL"})


def _matches(pattern: re.Pattern[str], value: Any) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def is_valid_prop_name(value: Any) -> bool:
    """Check that a prop name is alphanumeric (underscores, dashes and dots allowed inside).

    Args:
        value: A prop name to check for formatting.

    Returns:
        bool: True when the name starts with a letter, ends alphanumeric and
        is at least three characters long.
    """
    return _matches(PROP_NAME_PATTERN, value)


def is_awaitable(value: Any) -> bool:
    """Return True for coroutines, tasks, futures and other awaitables."""
    return inspect.isawaitable(value)


def is_plain_obj(value: Any) -> bool:
    """Return True only for plain ``dict`` instances (not subclasses, lists, dates...)."""
    return type(value) is dict  # pylint: disable=unidiomatic-typecheck


def is_not_nil(value: Any) -> bool:
    """Return True when ``value`` is not None."""
    return value is not None


def is_empty(value: Any) -> bool:
    """Return True for empty strings and empty containers.

    ``None``, numbers and booleans are never "empty"; they are simply not
    containers.
    """
    if value is None or isinstance(value, (bool, int, float)):
        return False
    return isinstance(value, Sized) and len(value) == 0


def is_not_empty(value: Any) -> bool:
    """Negation of :func:`is_empty`."""
    return not is_empty(value)


def is_blank_string(value: Any) -> bool:
    """Return True for strings containing nothing but whitespace (including ``""``).

    Other kinds of "empties" (``None``, ``0``, ``{}``, ``[]``) are not blank
    strings.
    """
    return isinstance(value, str) and not value.strip()


def is_not_blank_string(value: Any) -> bool:
    """Negation of :func:`is_blank_string`."""
    return not is_blank_string(value)


def is_stringish(value: Any) -> bool:
    """Return True for non-blank strings and for numbers.

    Booleans are not numbers here. A value passing this check can be shown to
    a user as text.

    Examples:
        >>> is_stringish(0)
        True
        >>> is_stringish("  ")
        False
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    return isinstance(value, str) and bool(value.strip())


def is_primitiveish(value: Any) -> bool:
    """Return True for booleans, numbers, strings, compiled regexes, dates and datetimes."""
    return isinstance(value, (bool, int, float, str, re.Pattern, datetime.date))


def has_nested_prop(prop_path: Iterable[Hashable], obj: Any) -> bool:
    """Check whether ``obj`` holds a non-None value at ``prop_path``.

    Args:
        prop_path: Keys / attribute names leading to the prop, outermost first.
        obj: A mapping or object on which the prop may exist.

    Returns:
        bool: True when the lookup finds a non-None value.
    """
    return get_in(obj, prop_path) is not None


def is_valid_email(value: Any) -> bool:
    """Check a value against a basic (deliberately non-exhaustive) email pattern."""
    return _matches(EMAIL_PATTERN, value)


def is_valid_password(value: Any) -> bool:
    """Check for 7 to 51 characters, starting with a letter, basic symbols allowed."""
    return _matches(PASSWORD_PATTERN, value)


def is_valid_log_level(value: Any) -> bool:
    """Check that a trimmed, case-insensitive value is one of the standard level names.

    Accepted: ``debug``, ``trace``, ``info``, ``warn``, ``error``, ``fatal``.
    """
    return isinstance(value, str) and value.strip().upper() in LOG_LEVELS


def is_image_url(value: Any) -> bool:
    """Check for an image path/URL by extension, or a base64 ``data:image`` URI.

    Whitespace anywhere in the value fails the check.
    """
    return _matches(IMAGE_URL_PATTERN, value)
