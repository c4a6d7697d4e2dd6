"""Global pytest fixtures and hooks for CLIENTKIT."""

from pathlib import Path

import pytest

from tests.helpers.payloads import DETAIL, ERROR, MESSAGE, STATUS, STATUS_TEXT

TESTS_ROOT = Path(__file__).parent.resolve()

# Tests under these folders get the marker of the same name.
FOLDER_MARKERS = ("unit", "e2e")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config,  # pylint: disable=unused-argument
    items: list[pytest.Item],
) -> None:
    """Add default `unit` / `e2e` marks based on the test's top-level folder."""
    for item in items:
        path = item.path.resolve()
        if TESTS_ROOT not in path.parents:
            continue
        folder = path.relative_to(TESTS_ROOT).parts[0]
        if folder not in FOLDER_MARKERS:
            continue
        if not any(marker.name == folder for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, folder))


@pytest.fixture
def full_payload() -> dict[str, object]:
    """A flat payload carrying every field the resolver knows about."""
    return {
        "detail": DETAIL,
        "message": MESSAGE,
        "error": ERROR,
        "statusText": STATUS_TEXT,
        "status": STATUS,
    }
