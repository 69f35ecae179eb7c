"""Collection - the ordered, capped list of images and the cursor into it."""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import List, Optional

from ..config import DEFAULT_DEST_FOLDER, DEFAULT_PATTERN, SKIP_FRACTION
from ..errors import DiscoveryError, PreconditionError
from ..fileops import FileSystem
from ..logging import log
from ..paths import Patterns, build_entries, common_root, match_images
from ..sort import Sorter
from ..types import ImageEntry, SortMethod


@dataclass(frozen=True)
class RemovalResult:
    """What remove_current() took out and where the cursor landed."""
    removed: ImageEntry
    index: Optional[int]  # None when the collection became empty


def _discover(pattern: Patterns, fs: FileSystem, strict: bool):
    paths = match_images(pattern, fs)
    if not paths and strict:
        raise DiscoveryError(f"path {pattern_text(pattern)!r} had no images")
    root = common_root(pattern)
    return build_entries(paths, root, fs), root


def pattern_text(pattern: Patterns) -> str:
    return pattern if isinstance(pattern, str) else " ".join(pattern)


@dataclass
class Collection:
    """
    Single owner of the image ordering.

    ``entries`` holds every discovered image in sort order; only the first
    ``limit`` of them (all when None) are visible and navigable. ``max_count``
    is the cap the user asked for (0 = unbounded); removing an entry under a
    cap shrinks only ``limit``, so hidden images never slide into view, and a
    re-glob starts again from ``max_count``. ``index`` always points into the
    visible part unless it is empty.
    """
    entries: List[ImageEntry] = field(default_factory=list)
    index: int = 0
    max_count: int = 0
    limit: Optional[int] = None
    sorter: Sorter = field(default_factory=Sorter)
    pattern: Patterns = DEFAULT_PATTERN
    dest_folder: str = DEFAULT_DEST_FOLDER
    root: str = ""
    fs: FileSystem = field(default_factory=FileSystem, repr=False)

    def __post_init__(self) -> None:
        if self.limit is None and self.max_count:
            self.limit = self.max_count

    @classmethod
    def load(cls, pattern: Patterns = DEFAULT_PATTERN, max_count: int = 0,
             method: SortMethod = SortMethod.DEPTH_FIRST, reverse: bool = False,
             dest_folder: str = DEFAULT_DEST_FOLDER,
             fs: Optional[FileSystem] = None, strict: bool = False) -> Collection:
        """Discover, sort and cap. With strict, zero matches raise DiscoveryError."""
        if max_count < 0:
            raise PreconditionError(f"max count must be >= 0, got {max_count}")
        fs = fs or FileSystem()
        sorter = Sorter(method, reverse)
        found, root = _discover(pattern, fs, strict)
        coll = cls(
            entries=sorter.sort(found),
            max_count=max_count,
            sorter=sorter,
            pattern=pattern,
            dest_folder=dest_folder,
            root=root,
            fs=fs,
        )
        log(f"[LOAD] {pattern_text(pattern)!r}: {len(found)} images, "
            f"showing {len(coll)} ({sorter!r})")
        return coll

    # ─── Read access ─────────────────────────────────────────────────────

    @property
    def visible(self) -> List[ImageEntry]:
        """Snapshot of the navigable entries."""
        return self.entries[:len(self)]

    def __len__(self) -> int:
        if self.limit is not None:
            return min(self.limit, len(self.entries))
        return len(self.entries)

    @property
    def is_empty(self) -> bool:
        return len(self) == 0

    @property
    def total(self) -> int:
        """Number of discovered images, including those hidden by the cap."""
        return len(self.entries)

    def current(self) -> Optional[ImageEntry]:
        if self.is_empty:
            return None
        return self.entries[self.index]

    def position_text(self) -> str:
        if self.is_empty:
            return "No files in path"
        return f"{self.index + 1} of {len(self)}"

    def page_size(self) -> int:
        """Step for page jumps: 10% of the images, at least one."""
        return max(1, round(len(self) * SKIP_FRACTION))

    def _clamp(self, idx: int) -> int:
        if self.is_empty:
            return 0
        return max(0, min(idx, len(self) - 1))

    def _require_items(self, what: str) -> None:
        if self.is_empty:
            raise PreconditionError(f"cannot {what} an empty collection")

    # ─── Navigation ──────────────────────────────────────────────────────

    def advance(self, n: int) -> int:
        """Move the cursor by n, clamped to the ends. Returns the new index."""
        self._require_items("navigate")
        self.index = self._clamp(self.index + n)
        return self.index

    def jump_first(self) -> int:
        self._require_items("navigate")
        self.index = 0
        return self.index

    def jump_last(self) -> int:
        self._require_items("navigate")
        self.index = len(self) - 1
        return self.index

    def index_of(self, path: str) -> Optional[int]:
        """Visible position of path, or None."""
        for i, entry in enumerate(self.visible):
            if entry.path == path:
                return i
        return None

    # ─── Mutation ────────────────────────────────────────────────────────

    def remove_current(self) -> RemovalResult:
        """Drop the current entry after the file was moved or deleted.

        The cursor stays on the same slot if something slid into it,
        otherwise falls back to the new last entry.
        """
        self._require_items("remove from")
        removed = self.entries.pop(self.index)
        if self.limit is not None:
            self.limit -= 1
        if self.is_empty:
            self.index = 0
            return RemovalResult(removed, None)
        self.index = self._clamp(self.index)
        return RemovalResult(removed, self.index)

    def _refreshed(self, entry: ImageEntry) -> ImageEntry:
        meta = self.fs.metadata(entry.path)
        if not meta.exists:
            return entry
        return replace(entry, size=meta.size, modified=meta.modified)

    def _reanchor(self, anchor: Optional[str], fallback: int) -> None:
        pos = self.index_of(anchor) if anchor else None
        self.index = pos if pos is not None else self._clamp(fallback)

    def resort(self, method: Optional[SortMethod] = None, reverse: Optional[bool] = None,
               refresh: bool = False) -> None:
        """Re-order without re-discovering; the cursor follows its entry."""
        if method is not None:
            self.sorter.method = method
        if reverse is not None:
            self.sorter.reverse = reverse
        anchor = self.current()
        entries = [self._refreshed(e) for e in self.entries] if refresh else self.entries
        self.entries = self.sorter.sort(entries)
        self._reanchor(anchor.path if anchor else None, self.index)
        log(f"[SORT] {self.sorter!r}, cursor at {self.index}")

    def reverse(self) -> None:
        self.resort(reverse=not self.sorter.reverse)

    def reglob(self, pattern: Patterns) -> None:
        """Replace the contents with a fresh discovery.

        Raises PatternError or DiscoveryError and leaves the collection as it
        was when the pattern is bad or matches nothing.
        """
        found, root = _discover(pattern, self.fs, strict=True)
        anchor = self.current()
        self.entries = self.sorter.sort(found)
        self.pattern = pattern
        self.limit = self.max_count or None
        self.root = root
        self._reanchor(anchor.path if anchor else None, 0)
        log(f"[LOAD] Re-globbed {pattern_text(pattern)!r}: {len(found)} images")

    def set_max(self, n: int) -> None:
        """Change the cap (0 = unbounded) without re-discovering."""
        if n < 0:
            raise PreconditionError(f"max count must be >= 0, got {n}")
        self.max_count = n
        self.limit = n or None
        self.index = self._clamp(self.index)
        log(f"[LOAD] Max set to {n or 'unbounded'}, showing {len(self)} of {self.total}")
