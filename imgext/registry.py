# imgext/registry.py

from __future__ import annotations
from types import MappingProxyType
from typing import Mapping, Tuple

from .model import ImageFormat

# First entry of each tuple is the canonical extension.
EXTENSIONS: Mapping[ImageFormat, Tuple[str, ...]] = MappingProxyType({
    ImageFormat.PNG: ("png",),
    ImageFormat.JPEG: ("jpg", "jpeg"),
    ImageFormat.GIF: ("gif",),
    ImageFormat.WEBP: ("webp",),
    ImageFormat.PNM: ("pbm", "pam", "ppm", "pgm"),
    ImageFormat.TIFF: ("tiff", "tif"),
    ImageFormat.DDS: ("dds",),
    ImageFormat.BMP: ("bmp",),
    ImageFormat.ICO: ("ico",),
    ImageFormat.HDR: ("hdr",),
    ImageFormat.OPENEXR: ("exr",),
    ImageFormat.FARBFELD: ("ff",),
    ImageFormat.AVIF: ("avif",),
    ImageFormat.QOI: ("qoi",),
})


def extensions(fmt: ImageFormat) -> Tuple[str, ...]:
    """Return every extension accepted for `fmt`, canonical one first."""
    return EXTENSIONS[fmt]


def preferred_extension(fmt: ImageFormat) -> str:
    return EXTENSIONS[fmt][0]


def is_allowed_extension(extension: str, fmt: ImageFormat) -> bool:
    """Check `extension` against the format's extensions, ignoring case."""
    folded = extension.casefold()
    return any(ext.casefold() == folded for ext in EXTENSIONS[fmt])
