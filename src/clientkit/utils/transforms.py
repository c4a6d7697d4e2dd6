"""Display formatting and dictionary transforms.

Formatting helpers follow U.S. English conventions (``$1,234.50``,
``1/1/2018, 12:00:00 AM``). Money-like values are rounded half away from
zero, on their decimal representation, so ``20.185`` becomes ``20.19``.
"""

from __future__ import annotations

import datetime
import re
from collections.abc import Callable, Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from dateutil import parser as _dateutil_parser

from clientkit.utils.paths import get_in
from clientkit.utils.validations import is_empty, is_stringish

CENTS = Decimal("0.01")
WORD_START_PATTERN = re.compile(r"(?:^|\s)\S")
SNAKE_SEPARATOR_PATTERN = re.compile(r"_+([a-z0-9])", re.IGNORECASE)
INVALID_DATE = "Invalid Date"  # pragma: no mutate


# ============================================================================
#                               Strings
# ============================================================================


def truncate(text: str, end_index: int = 100) -> str:
    """Cut ``text`` off at ``end_index`` and append ``"..."``.

    Text no longer than ``end_index`` is returned as-is. The cut-off part is
    trimmed before the ellipsis is added.

    Examples:
        >>> truncate("lorem ipsum dolor", 6)
        'lorem...'
    """
    if len(text) <= end_index:
        return text
    return text[:end_index].strip() + "..."


def ensure_string(value: Any) -> str:
    """Return strings unchanged and numbers stringified; anything else becomes ``""``.

    Blank strings also become ``""``.
    """
    if not is_stringish(value):
        return ""
    return value if isinstance(value, str) else str(value)


def add_suffix(suffix: str) -> Callable[[Any], str]:
    """Create a function that appends ``suffix`` to the ``str()`` of its argument."""
    return lambda value: f"{value}{suffix}"


def add_prefix(prefix: str) -> Callable[[Any], str]:
    """Create a function that prepends ``prefix`` to the ``str()`` of its argument."""
    return lambda value: f"{prefix}{value}"


def capitalize_words(text: str = "") -> str:
    """Upper-case the first letter of every whitespace-separated word."""
    return WORD_START_PATTERN.sub(lambda m: m.group(0).upper(), text)


def yes_or_no(value: Any) -> str:
    """Return ``"Yes"`` for ``True`` and ``"No"`` for anything else."""
    return "Yes" if value is True else "No"


def pretty_join(values: Iterable[Any]) -> str:
    """Join values into one comma-separated string of capitalized words."""
    return ", ".join(capitalize_words(str(value)) for value in values)


def humanize_snake(text: str | None) -> str:
    """Replace underscores with spaces and capitalize each word.

    Examples:
        >>> humanize_snake("first_name")
        'First Name'
    """
    return capitalize_words((text or "").replace("_", " ").strip())


def camel_case(text: str) -> str:
    """Camel-case an underscore-separated name (``"first_name"`` -> ``"firstName"``)."""
    joined = SNAKE_SEPARATOR_PATTERN.sub(lambda m: m.group(1).upper(), text)
    return joined[:1].lower() + joined[1:]


# ============================================================================
#                               Numbers & dates
# ============================================================================


def _to_decimal(amount: Any) -> Decimal | None:
    if amount is None or isinstance(amount, bool):
        return None
    try:
        value = Decimal(str(amount).strip())
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def to_usd(amount: Any) -> str | None:
    """Format a number (or numeric string) as U.S. dollars.

    Args:
        amount: The amount to format.

    Returns:
        str | None: e.g. ``"$15,333.00"`` or ``"-$4.10"``; None when the amount
        is None or not numeric.
    """
    if (value := _to_decimal(amount)) is None:
        return None
    cents = value.quantize(CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if cents < 0 else ""
    return f"{sign}${abs(cents):,.2f}"


def to_decimal_string(amount: Any) -> str | None:
    """Format a number with thousands separators and exactly two decimals."""
    if (value := _to_decimal(amount)) is None:
        return None
    return f"{value.quantize(CENTS, rounding=ROUND_HALF_UP):,.2f}"


def to_numeric_string(amount: Any) -> str | None:
    """Like :func:`to_decimal_string`, but a trailing ``".00"`` is dropped."""
    if (text := to_decimal_string(amount)) is None:
        return None
    return text.removesuffix(".00")


def _with_unit(amount: Any, unit: str) -> str:
    if not is_stringish(amount):
        return ""
    text = to_numeric_string(amount)
    return "" if text is None else f"{text}{unit}"


def format_inches(amount: Any) -> str:
    """Format a number (or numeric string) as inches, e.g. ``"1,200in."``.

    Non-numeric input gives ``""``.
    """
    return _with_unit(amount, "in.")


def format_pounds(amount: Any) -> str:
    """Format a number (or numeric string) as pounds, e.g. ``"12.50lbs."``.

    Non-numeric input gives ``""``.
    """
    return _with_unit(amount, "lbs.")


def _parse_date(value: Any) -> datetime.datetime | None:
    if isinstance(value, datetime.datetime):
        return value
    if isinstance(value, datetime.date):
        return datetime.datetime.combine(value, datetime.time())
    if not isinstance(value, str):
        return None
    try:
        return _dateutil_parser.parse(value.strip())
    except (ValueError, OverflowError):
        # ParserError is a ValueError
        return None


def format_date(value: Any) -> str:
    """Convert a date, datetime, or date string into a human-readable form.

    Strings are parsed with ``dateutil``, month first: ISO-8601,
    ``MM/DD/YYYY`` with an optional time, ``"Jan 1, 2018"`` and this
    function's own output all parse. Aware datetimes are shown in their own timezone.

    Args:
        value: A ``date``, ``datetime`` or date string.

    Returns:
        str: e.g. ``"1/1/2018, 12:00:00 AM"``, or ``"Invalid Date"``.
    """
    if (moment := _parse_date(value)) is None:
        return INVALID_DATE
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return (
        f"{moment.month}/{moment.day}/{moment.year}, "
        f"{hour}:{moment.minute:02d}:{moment.second:02d} {meridiem}"
    )


# ============================================================================
#                               Dicts
# ============================================================================


def _apply_spec(spec: Mapping[str, Any], value: Any) -> dict[str, Any]:
    return {
        key: _apply_spec(fn, value) if isinstance(fn, Mapping) else fn(value)
        for key, fn in spec.items()
    }


def merge_spec(spec: Mapping[str, Any], value: Mapping[str, Any]) -> dict[str, Any]:
    """Apply a spec of functions to ``value`` and merge the results back into it.

    Each spec function receives the *whole* input. Nested mappings in the
    spec produce nested results. Keys produced by the spec override keys of
    the input.

    Args:
        spec: Mapping of output keys to functions (or nested specs).
        value: The input mapping.

    Returns:
        dict[str, Any]: A new dict: the input plus the applied spec.
    """
    return {**value, **_apply_spec(spec, value)}


def fuzzy_spec(spec: Mapping[str, Any], value: Mapping[str, Any]) -> dict[str, Any]:
    """A forgiving :func:`merge_spec`.

    For each spec entry:

    - a non-callable is used as a literal value;
    - a callable whose key exists in ``value`` receives that key's value;
    - any other callable receives the whole input.

    Examples:
        >>> fuzzy_spec({"a": str.upper, "b": 1, "n": len}, {"a": "x"})
        {'a': 'X', 'b': 1, 'n': 1}
    """
    applied: dict[str, Any] = {}
    for key, fn in spec.items():
        if not callable(fn):
            applied[key] = fn
        elif key in value:
            applied[key] = fn(value[key])
        else:
            applied[key] = fn(value)
    return {**value, **applied}


def filter_by_keys(predicate: Callable[[Any], bool], obj: Mapping[Any, Any]) -> dict[Any, Any]:
    """Keep only the key/value pairs whose key passes ``predicate``."""
    return {key: value for key, value in obj.items() if predicate(key)}


def transform_values_by_keys(
    predicate: Callable[[Any], bool],
    transform: Callable[[Any], Any],
    obj: Mapping[Any, Any],
) -> dict[Any, Any]:
    """Apply ``transform`` to the values whose keys pass ``predicate``; keep the rest."""
    return {key: transform(value) if predicate(key) else value for key, value in obj.items()}


def transform_matching_values(
    predicate: Callable[[Any], bool],
    transform: Callable[[Any], Any],
    obj: Mapping[Any, Any],
) -> dict[Any, Any]:
    """Apply ``transform`` to the values that pass ``predicate``; keep the rest."""
    return {key: transform(value) if predicate(value) else value for key, value in obj.items()}


def transform_by_key_val_predicates(
    key_predicate: Callable[[Any], bool],
    val_predicate: Callable[[Any], bool],
    transform: Callable[[Any], Any],
    obj: Mapping[Any, Any],
) -> dict[Any, Any]:
    """Apply ``transform`` to values whose key *and* value pass their predicates."""
    return {
        key: transform(value) if key_predicate(key) and val_predicate(value) else value
        for key, value in obj.items()
    }


def camel_keys(obj: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``obj`` with its keys camel-cased (see :func:`camel_case`)."""
    return {camel_case(key): value for key, value in obj.items()}


# ============================================================================
#                               Collections
# ============================================================================


def to_hashmap(collection: Iterable[Any]) -> dict[Any, Any]:
    """Index a collection of objects by their ``id``: ``{id: object}``.

    Later objects with the same id replace earlier ones.
    """
    return {get_in(item, ("id",)): item for item in collection}


def index_by_id(collection: Iterable[Any]) -> dict[Any, int]:
    """Map each object's ``id`` to its position in the collection.

    Objects without an ``id`` are left out (but still count towards positions).

    Examples:
        >>> index_by_id([{"id": "a"}, {"name": "b"}, {"id": "c"}])
        {'a': 0, 'c': 2}
    """
    return {
        item_id: index
        for index, item in enumerate(collection)
        if (item_id := get_in(item, ("id",))) is not None
    }


def get_routed_id(props: Any) -> Any:
    """Return the generic ``match.params.id`` route parameter, or None."""
    return get_in(props, ("match", "params", "id"))


def get_detail_id(props: Any) -> Any:
    """Return ``detail.id`` from a props mapping/object, or None."""
    return get_in(props, ("detail", "id"))


def get_detail(action: Any, items: Iterable[Any]) -> Any:
    """Find the item whose ``id`` matches the ``id`` carried by ``action``.

    Args:
        action: A mapping/object with an ``id``.
        items: Objects which each have (at least) an ``id``.

    Returns:
        The matching item, or ``{"id": <id>, "isEmpty": True}`` when there is
        no match.
    """
    target = get_in(action, ("id",))
    for item in items:
        if get_in(item, ("id",)) == target:
            return item
    return {"id": target, "isEmpty": True}


def is_empty_details(details: Any) -> bool:
    """Return True when ``details`` is empty or flags itself with ``isEmpty: True``."""
    return is_empty(details) or get_in(details, ("isEmpty",)) is True
