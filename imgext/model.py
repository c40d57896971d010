# imgext/model.py

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

from .errors import ImageDetectionError


class ImageFormat(Enum):
    """Image encodings recognized from file content."""
    PNG = "png"
    JPEG = "jpeg"
    GIF = "gif"
    WEBP = "webp"
    PNM = "pnm"
    TIFF = "tiff"
    DDS = "dds"
    BMP = "bmp"
    ICO = "ico"
    HDR = "hdr"
    OPENEXR = "openexr"
    FARBFELD = "farbfeld"
    AVIF = "avif"
    QOI = "qoi"


class SniffPolicy(Enum):
    """What to do with a path whose format cannot be detected."""
    STRICT = "strict"    # abort the whole run
    LENIENT = "lenient"  # warn and skip the path


@dataclass(frozen=True)
class Options:
    """Effective run options resolved from the command line."""
    force: bool = False
    policy: SniffPolicy = SniffPolicy.LENIENT


@dataclass(frozen=True)
class Match:
    """The current extension is already acceptable."""


@dataclass(frozen=True)
class Suggest:
    """The extension is wrong; `extension` is the one to use."""
    extension: str


@dataclass(frozen=True)
class Renamed:
    """The file was moved to `new_path`."""
    new_path: Path


@dataclass(frozen=True)
class Skipped:
    """Detection failed under the lenient policy; the path was left alone."""
    error: ImageDetectionError


Outcome = Union[Match, Suggest, Renamed, Skipped]
