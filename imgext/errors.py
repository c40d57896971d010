# imgext/errors.py

from __future__ import annotations
from pathlib import Path
from typing import Union


class ImgExtError(Exception):
    """Base class for errors reported to the user by the CLI."""


class BadExtension(ImgExtError):
    """The final path segment has no extension separator."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = str(path)
        super().__init__(f"no usable extension: {self.path}")


class UnknownFormat(ImgExtError):
    """The content does not match any known image signature."""

    def __init__(self) -> None:
        super().__init__("the image format could not be determined")


class ImageDetectionError(ImgExtError):
    """Sniffing `path` failed; `cause` is the read error or UnknownFormat."""

    def __init__(self, path: Union[str, Path], cause: Exception) -> None:
        self.path = str(path)
        self.cause = cause
        super().__init__(f"{cause} ({self.path})")
