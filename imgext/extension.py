# imgext/extension.py

from __future__ import annotations
from pathlib import Path
from typing import Tuple, Union

from .errors import BadExtension


def split_extension(path: Union[str, Path]) -> Tuple[str, str]:
    """Split the final segment of `path` at its last dot.

    Args:
        path (str | Path): Path whose file name is inspected.

    Returns:
        Tuple[str, str]: (stem, extension). The extension is empty when the
        name ends with a dot.

    Raises:
        BadExtension: If the file name contains no dot at all.
    """
    name = Path(path).name
    stem, sep, extension = name.rpartition(".")
    if not sep:
        raise BadExtension(path)
    return stem, extension


def read_extension(path: Union[str, Path]) -> str:
    """Return the current extension of `path` (without the dot)."""
    return split_extension(path)[1]
