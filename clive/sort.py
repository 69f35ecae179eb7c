"""Sorting of image entries.

Pure functions: metadata must already be attached to the entries.
"""

from __future__ import annotations
from typing import Callable, Dict, List, Sequence, Tuple

from .types import ImageEntry, SortMethod


def _name_key(e: ImageEntry) -> Tuple[bytes, str]:
    # byte-wise so that "A.png" < "a.png" < "b.png" regardless of locale
    return (e.name.encode("utf-8", "surrogateescape"), e.path)


_KEYS: Dict[SortMethod, Callable[[ImageEntry], tuple]] = {
    SortMethod.ALPHABETICAL: lambda e: _name_key(e),
    SortMethod.DATE: lambda e: (-e.modified,) + _name_key(e),
    SortMethod.SIZE: lambda e: (-e.size,) + _name_key(e),
    SortMethod.DEPTH_FIRST: lambda e: (-e.depth,) + _name_key(e),
    SortMethod.BREADTH_FIRST: lambda e: (e.depth,) + _name_key(e),
}


def sort_entries(entries: Sequence[ImageEntry], method: SortMethod,
                 reverse: bool = False) -> List[ImageEntry]:
    """Return a new list ordered by method; reverse flips the final order."""
    ordered = sorted(entries, key=_KEYS[method])
    if reverse:
        ordered.reverse()
    return ordered


class Sorter:
    """Holds the active method and reverse flag between re-sorts."""

    def __init__(self, method: SortMethod = SortMethod.DEPTH_FIRST, reverse: bool = False):
        self.method = method
        self.reverse = reverse

    def sort(self, entries: Sequence[ImageEntry]) -> List[ImageEntry]:
        return sort_entries(entries, self.method, self.reverse)

    def __repr__(self) -> str:
        return f"Sorter({self.method.value}, reverse={self.reverse})"
