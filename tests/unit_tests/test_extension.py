"""Unit tests for extension extraction."""

from __future__ import annotations

from pathlib import Path

import pytest

from imgext.errors import BadExtension
from imgext.extension import read_extension, split_extension


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("a.jpg", ("a", "jpg")),
        ("photo.PNG", ("photo", "PNG")),
        ("archive.tar.gz", ("archive.tar", "gz")),
        ("dir/sub/pic.webp", ("pic", "webp")),
        ("photo.", ("photo", "")),
        (".png", ("", "png")),
    ],
)
def test_split_extension(path: str, expected: tuple[str, str]) -> None:
    assert split_extension(path) == expected


def test_read_extension_accepts_path_objects() -> None:
    assert read_extension(Path("x") / "y.Jpeg") == "Jpeg"


@pytest.mark.parametrize("path", ["noext", "dir.v1/file", ""])
def test_missing_separator_is_bad_extension(path: str) -> None:
    with pytest.raises(BadExtension) as excinfo:
        read_extension(path)
    assert excinfo.value.path == path
    assert "no usable extension" in str(excinfo.value)
