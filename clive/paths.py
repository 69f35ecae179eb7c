"""Path matching - turns user patterns into image paths and entries."""

from __future__ import annotations
import glob
import os
import re
from typing import Iterable, List, Optional, Sequence, Union

from .config import IMG_EXTS
from .errors import PatternError
from .fileops import FileSystem
from .logging import debug
from .types import ImageEntry

Patterns = Union[str, Sequence[str]]

_MAGIC_RE = re.compile(r"[*?[]")
_ESCAPED_SPACE = "\\ "


def is_supported_image(path: str) -> bool:
    """Check if file has a supported image extension."""
    return os.path.splitext(path)[1].lower() in IMG_EXTS


def has_magic(part: str) -> bool:
    return _MAGIC_RE.search(part) is not None


def validate_pattern(pattern: str) -> None:
    """Raise PatternError for an empty pattern or an unterminated [class]."""
    if not pattern.strip():
        raise PatternError("empty pattern")
    i, n = 0, len(pattern)
    while i < n:
        if pattern[i] != "[":
            i += 1
            continue
        j = i + 1
        if j < n and pattern[j] == "!":
            j += 1
        if j < n and pattern[j] == "]":
            j += 1
        while j < n and pattern[j] != "]":
            j += 1
        if j >= n:
            raise PatternError(f"unterminated character class in {pattern!r}")
        i = j + 1


def convert_to_globable(pattern: str) -> str:
    """Expand ~ and $VARS, unescape spaces, and turn a directory into dir/*.

    Paths that already exist are escaped so their names match literally.
    """
    if not pattern.strip():
        raise PatternError("empty pattern")
    expanded = os.path.expandvars(os.path.expanduser(pattern.strip()))
    if os.sep == "/":
        expanded = expanded.replace(_ESCAPED_SPACE, " ")
    if os.path.isdir(expanded):
        return os.path.join(glob.escape(expanded), "*")
    if os.path.exists(expanded):
        return glob.escape(expanded)
    validate_pattern(expanded)
    return expanded


def search_root(pattern: str) -> str:
    """Deepest existing directory containing everything the pattern can match."""
    globable = convert_to_globable(pattern)
    head = []
    for part in os.path.abspath(globable).split(os.sep):
        if _is_magic_part(part):
            break
        head.append(part)
    root = os.sep.join(head) or os.sep
    while not os.path.isdir(root):
        parent = os.path.dirname(root)
        if parent == root:
            break
        root = parent
    return root


def _is_magic_part(part: str) -> bool:
    # escaped parts look like [*] / [?] / [[] and still count as literal
    return has_magic(re.sub(r"\[(.)\]", "", part))


def match_images(patterns: Patterns, fs: Optional[FileSystem] = None) -> List[str]:
    """Expand patterns to absolute image paths, in match order, without duplicates.

    Non-image files and directories are dropped silently.
    """
    fs = fs or FileSystem()
    if isinstance(patterns, str):
        patterns = [patterns]
    seen = set()
    result: List[str] = []
    for pattern in patterns:
        globable = convert_to_globable(pattern)
        matches = fs.glob(globable)
        debug(f"[PATHS] {pattern!r} -> {globable!r}: {len(matches)} matches")
        for match in sorted(matches):
            path = os.path.abspath(match)
            if path in seen or not is_supported_image(path) or os.path.isdir(path):
                continue
            seen.add(path)
            result.append(path)
    return result


def common_root(patterns: Patterns) -> str:
    if isinstance(patterns, str):
        patterns = [patterns]
    roots = [search_root(p) for p in patterns]
    if not roots:
        return os.getcwd()
    try:
        return os.path.commonpath(roots)
    except ValueError:
        # different drives on Windows
        return roots[0]


def path_depth(path: str, root: str) -> int:
    """Number of path components below root, the file itself included."""
    parts = [p for p in os.path.normpath(path).split(os.sep) if p]
    root_parts = [p for p in os.path.normpath(root).split(os.sep) if p]
    return len(parts) - len(root_parts)


def build_entries(paths: Iterable[str], root: str,
                  fs: Optional[FileSystem] = None) -> List[ImageEntry]:
    """Attach sort metadata to each path."""
    fs = fs or FileSystem()
    entries = []
    for path in paths:
        meta = fs.metadata(path)
        entries.append(ImageEntry(
            path=path,
            size=meta.size,
            modified=meta.modified,
            depth=path_depth(path, root),
        ))
    return entries
