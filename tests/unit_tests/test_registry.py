"""Unit tests for the format to extension registry."""

from __future__ import annotations

import pytest

from imgext.model import ImageFormat
from imgext.registry import EXTENSIONS, extensions, is_allowed_extension, preferred_extension


def test_every_format_is_registered() -> None:
    assert set(EXTENSIONS) == set(ImageFormat)
    assert all(EXTENSIONS[fmt] for fmt in ImageFormat)


@pytest.mark.parametrize("fmt", list(ImageFormat))
def test_preferred_extension_is_allowed(fmt: ImageFormat) -> None:
    preferred = preferred_extension(fmt)
    assert preferred == extensions(fmt)[0]
    assert is_allowed_extension(preferred, fmt)
    assert is_allowed_extension(preferred.upper(), fmt)


def test_preferred_extensions() -> None:
    assert preferred_extension(ImageFormat.PNG) == "png"
    assert preferred_extension(ImageFormat.JPEG) == "jpg"
    assert preferred_extension(ImageFormat.TIFF) == "tiff"
    assert preferred_extension(ImageFormat.PNM) == "pbm"


@pytest.mark.parametrize(
    ("extension", "fmt", "expected"),
    [
        ("jpeg", ImageFormat.JPEG, True),
        ("JPeG", ImageFormat.JPEG, True),
        ("tif", ImageFormat.TIFF, True),
        ("ppm", ImageFormat.PNM, True),
        ("png", ImageFormat.JPEG, False),
        ("", ImageFormat.PNG, False),
        ("jpgx", ImageFormat.JPEG, False),
    ],
)
def test_is_allowed_extension(extension: str, fmt: ImageFormat, expected: bool) -> None:
    assert is_allowed_extension(extension, fmt) is expected


def test_registry_is_read_only() -> None:
    with pytest.raises(TypeError):
        EXTENSIONS[ImageFormat.PNG] = ("apng",)  # type: ignore[index]
