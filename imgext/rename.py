# imgext/rename.py

from __future__ import annotations
import errno
import os
from pathlib import Path
from typing import Union

from .extension import split_extension


def target_path(path: Union[str, Path], new_ext_no_dot: str) -> Path:
    """Return `path` with its extension replaced by `new_ext_no_dot`.

    A dot file such as `.jpg` has no stem; its whole name is kept and the new
    extension is appended.
    """
    path = Path(path)
    stem, _ext = split_extension(path)
    if not stem:
        stem = path.name
    return path.with_name(f"{stem}.{new_ext_no_dot}")


def safe_rename(path: Union[str, Path], new_ext_no_dot: str) -> Path:
    """Rename a file in place so that it carries the given extension.

    The move is a single `os.rename` call, so it either happens completely or
    not at all. An existing file at the target is never overwritten.

    Args:
        path (str | Path): File to rename.
        new_ext_no_dot (str): New extension without the leading dot.

    Returns:
        Path: The new location of the file.

    Raises:
        FileExistsError: If the target name is already taken.
        OSError: If the rename itself fails.
    """
    source = Path(path)
    candidate = target_path(source, new_ext_no_dot)
    if candidate.exists():
        raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), str(candidate))
    os.rename(source, candidate)
    return candidate
