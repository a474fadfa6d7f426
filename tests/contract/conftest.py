"""Default marks for tests under `tests/contract/`."""

from pathlib import Path

import pytest

from tests.markers import mark_items_under

# pylint: disable=unused-argument


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark items in `tests/contract/` as `contract`."""
    mark_items_under(Path(__file__).parent.resolve(), "contract", items)
