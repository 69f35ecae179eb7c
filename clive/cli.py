"""Command line arguments."""

from __future__ import annotations
import argparse
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from . import __version__
from .config import DEFAULT_DEST_FOLDER, DEFAULT_PATTERN
from .types import SortMethod


@dataclass
class Args:
    """Parsed command line, ready for Collection.load."""
    paths: List[str] = field(default_factory=lambda: [DEFAULT_PATTERN])
    dest_folder: str = DEFAULT_DEST_FOLDER
    sort: SortMethod = SortMethod.DEPTH_FIRST
    reverse: bool = False
    max_count: int = 0
    fullscreen: bool = False
    verbose: bool = False


def _sort_method(value: str) -> SortMethod:
    try:
        return SortMethod.parse(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid choice: {value!r} (choose from {', '.join(SortMethod.names())})"
        ) from None


def _non_negative(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer") from None
    if n < 0:
        raise argparse.ArgumentTypeError(f"{value!r} is not a non-negative integer")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clive",
        description="The command line image viewer",
    )
    parser.add_argument(
        "paths", nargs="*",
        help="The directory or files to search for image files. A glob can be used here.",
    )
    parser.add_argument(
        "-f", "--destfolder", "--dest-folder", dest="dest_folder",
        default=DEFAULT_DEST_FOLDER,
        help="Destination folder for moving and copying files (default: %(default)s)",
    )
    parser.add_argument(
        "-s", "--sort", type=_sort_method, default=SortMethod.DEPTH_FIRST,
        metavar="METHOD",
        help=f"Sort order for images: {', '.join(SortMethod.names())} (default: depthfirst)",
    )
    parser.add_argument("-r", "--reverse", action="store_true",
                        help="Reverses the sorting of images")
    parser.add_argument("-m", "--max", dest="max_count", type=_non_negative, default=0,
                        metavar="N", help="Maximum number of images to show (0 = all)")
    parser.add_argument("-F", "--fullscreen", action="store_true", help="Start in fullscreen")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> Args:
    ns = build_parser().parse_args(argv)
    return Args(
        paths=list(ns.paths) or [DEFAULT_PATTERN],
        dest_folder=ns.dest_folder,
        sort=ns.sort,
        reverse=ns.reverse,
        max_count=ns.max_count,
        fullscreen=ns.fullscreen,
        verbose=ns.verbose,
    )
