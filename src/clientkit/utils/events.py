"""Parse identifiers out of colon-delimited DOM-style event target ids.

Element ids are often built as ``<type>:<guid>`` so the same record guid can
be reused across several elements on a page, e.g.::

    sort_column:31f97023-8c59-48fa-bbc1-a5406b9f5c4f
    cancel_button:31f97023-8c59-48fa-bbc1-a5406b9f5c4f

Events may be mappings (``{"target": {"id": ...}}``) or objects with a
``target.id`` attribute chain.
"""

from typing import Any

from clientkit.utils.paths import get_in


def _target_id_parts(event: Any) -> list[str]:
    return str(get_in(event, ("target", "id"), "")).split(":")


def get_id(event: Any) -> str:
    """Return the LAST colon-delimited part of ``event.target.id`` (``""`` when missing)."""
    return _target_id_parts(event)[-1]


def get_target_type(event: Any) -> str:
    """Return the FIRST colon-delimited part of ``event.target.id`` (``""`` when missing)."""
    return _target_id_parts(event)[0]
