"""Shared helper for the per-directory marker conftests."""

from pathlib import Path

import pytest


def mark_items_under(root: Path, marker_name: str, items: list[pytest.Item]) -> None:
    """Add `marker_name` to every collected item below `root` lacking it."""
    marker = getattr(pytest.mark, marker_name)
    for item in items:
        if root not in item.path.resolve().parents:
            continue
        if not any(m.name == marker_name for m in item.iter_markers()):
            item.add_marker(marker)
