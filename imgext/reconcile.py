# imgext/reconcile.py

"""
Per-path decision: compare the current extension with the sniffed format and
either accept it, suggest the canonical one, or rename the file.
"""
from __future__ import annotations
from pathlib import Path
from typing import Iterable, Iterator, Tuple, Union

from .errors import ImageDetectionError
from .extension import read_extension
from .filetype import detect_format
from .model import Match, Options, Outcome, Renamed, Skipped, SniffPolicy, Suggest
from .registry import is_allowed_extension, preferred_extension
from .rename import safe_rename


def reconcile(path: Union[str, Path], options: Options) -> Outcome:
    """Reconcile a single path.

    Args:
        path (str | Path): Image file to check.
        options (Options): Force flag and sniffing policy.

    Returns:
        Outcome: Match, Suggest, Renamed, or Skipped (lenient policy only).

    Raises:
        BadExtension: If the file name has no extension.
        ImageDetectionError: If sniffing fails under the strict policy.
        OSError: If the rename fails.
    """
    extension = read_extension(path)

    try:
        fmt = detect_format(path)
    except ImageDetectionError as exc:
        if options.policy is SniffPolicy.STRICT:
            raise
        return Skipped(exc)

    if is_allowed_extension(extension, fmt):
        return Match()

    preferred = preferred_extension(fmt)
    if options.force:
        return Renamed(safe_rename(path, preferred))
    return Suggest(preferred)


def reconcile_all(
    paths: Iterable[Union[str, Path]],
    options: Options,
) -> Iterator[Tuple[Union[str, Path], Outcome]]:
    """Lazily reconcile `paths` in order, one at a time."""
    for path in paths:
        yield path, reconcile(path, options)
