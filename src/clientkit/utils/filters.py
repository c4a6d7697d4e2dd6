"""Filters over collections of objects carrying an ``id``.

An ``id`` that cannot be hashed (a dict, a list...) is treated like a missing
one.
"""

from collections.abc import Container, Hashable, Iterable
from typing import Any

from clientkit.utils.paths import get_in


def _id_of(item: Any) -> Hashable | None:
    item_id = get_in(item, ("id",))
    try:
        hash(item_id)
    except TypeError:
        return None
    return item_id


def uniqify(a_collection: Iterable[Any], b_collection: Iterable[Any]) -> list[Any]:
    """Concatenate two collections, keeping only the first object seen for each ``id``.

    Objects without a usable ``id`` share the ``None`` key, so only the first
    of them is kept.

    Args:
        a_collection: The first collection of objects.
        b_collection: The second collection of objects.

    Returns:
        list[Any]: The unique objects, in their original order.
    """
    seen: set[Hashable | None] = set()
    unique: list[Any] = []
    for item in [*a_collection, *b_collection]:
        item_id = _id_of(item)
        if item_id in seen:
            continue
        seen.add(item_id)
        unique.append(item)
    return unique


def filter_by_ids(collection: Iterable[Any], ids: Container[Any]) -> list[Any]:
    """Keep the objects whose ``id`` is a key of ``ids`` (e.g. a hashmap from ``index_by_id``)."""
    return [
        item
        for item in collection
        if (item_id := _id_of(item)) is not None and item_id in ids
    ]
