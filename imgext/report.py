# imgext/report.py

from __future__ import annotations
from pathlib import Path
from typing import Optional, Union

from .model import Match, Outcome, Renamed, Skipped, Suggest


def display_filename(path: Union[str, Path]) -> str:
    """Return the final component of `path`, or the path itself if it has none."""
    name = Path(path).name
    return name or str(path)


def format_outcome(path: Union[str, Path], outcome: Outcome) -> Optional[str]:
    """Render the stdout line for a reconciled path.

    Args:
        path (str | Path): The path as given on the command line.
        outcome (Outcome): Result of reconciling `path`.

    Returns:
        Optional[str]: The line to print, or None when nothing is printed.
    """
    if isinstance(outcome, Suggest):
        return f"{display_filename(path)} -> {outcome.extension}"
    if isinstance(outcome, Renamed):
        return display_filename(outcome.new_path)
    if isinstance(outcome, (Match, Skipped)):
        return None
    raise TypeError(f"unexpected outcome: {outcome!r}")


def format_warning(outcome: Skipped) -> str:
    return f"[WARN] {outcome.error}"


def format_error(exc: BaseException) -> str:
    return f"[ERR] {exc}"
