"""Shared pytest configuration, marker assignment and image fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from PIL import Image


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        parts = set(Path(str(item.fspath)).parts)
        if "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def make_image(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a factory writing a small real image of `fmt` under `name`."""

    def _make(name: str, fmt: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("wb") as f:
            Image.new("RGB", (8, 8), color=(200, 30, 30)).save(f, format=fmt)
        return path

    return _make
