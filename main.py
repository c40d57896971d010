# main.py

"""
Orchestrator: read CLI flags, reconcile each image's extension with its
content, print suggestions or rename in place.
"""
from __future__ import annotations
import argparse
import sys
from typing import List, Optional, Sequence

from imgext.errors import ImgExtError
from imgext.model import Options, Skipped, SniffPolicy
from imgext.reconcile import reconcile_all
from imgext.report import format_error, format_outcome, format_warning


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments.

    Args:
        argv (Sequence[str] | None): Arguments to parse; defaults to sys.argv.

    Returns:
        argparse.Namespace: Parsed command-line arguments.
    """
    p = argparse.ArgumentParser(
        prog="imgext",
        description="Check image extensions against file content and (optionally) fix them.",
    )
    p.add_argument("images", nargs="+", help="Images to be corrected.")
    p.add_argument("-f", "--force", action="store_true", help="Rename images to their correct extension.")
    p.add_argument(
        "--strict",
        action="store_true",
        help="Abort on the first file whose format cannot be detected (default: warn and skip).",
    )
    return p.parse_args(argv)


def _resolve_options(args: argparse.Namespace) -> Options:
    """Turn parsed flags into run options."""
    policy = SniffPolicy.STRICT if args.strict else SniffPolicy.LENIENT
    return Options(force=bool(args.force), policy=policy)


def run(images: List[str], options: Options) -> None:
    """Reconcile every image in order, printing as each one completes."""
    for path, outcome in reconcile_all(images, options):
        if isinstance(outcome, Skipped):
            print(format_warning(outcome), file=sys.stderr)
            continue
        line = format_outcome(path, outcome)
        if line is not None:
            print(line)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main orchestration function.

    Returns:
        int: Exit code.
    """
    args = parse_args(argv)
    options = _resolve_options(args)

    try:
        run(args.images, options)
    except (ImgExtError, OSError) as exc:
        print(format_error(exc), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
