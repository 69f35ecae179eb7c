"""Filesystem collaborator - globbing, metadata and the file actions.

Every mutating call raises FileActionError on failure so the dispatcher can
keep the entry and surface the message.
"""

from __future__ import annotations
import glob as _glob
import os
import shutil
from dataclasses import dataclass
from typing import List

from .errors import FileActionError
from .logging import log


@dataclass(frozen=True)
class FileMetadata:
    size: int
    modified: float
    exists: bool


class FileSystem:
    """Thin wrapper over os/shutil so tests can swap in failures."""

    def glob(self, pattern: str) -> List[str]:
        return _glob.glob(pattern, recursive=True)

    def metadata(self, path: str) -> FileMetadata:
        try:
            st = os.stat(path)
        except OSError:
            return FileMetadata(size=0, modified=0.0, exists=False)
        return FileMetadata(size=st.st_size, modified=st.st_mtime, exists=True)

    def ensure_dir(self, path: str) -> None:
        try:
            os.makedirs(path, exist_ok=True)
        except OSError as e:
            raise FileActionError(f"cannot create folder {path}: {e.strerror or e}") from e

    def _dest_path(self, path: str, dest_dir: str) -> str:
        self.ensure_dir(dest_dir)
        target = os.path.join(dest_dir, os.path.basename(path))
        if os.path.exists(target):
            raise FileActionError(f"{target} already exists")
        return target

    def move(self, path: str, dest_dir: str) -> str:
        """Move path into dest_dir, returning the new path."""
        target = self._dest_path(path, dest_dir)
        try:
            shutil.move(path, target)
        except (OSError, shutil.Error) as e:
            raise FileActionError(f"failed to move {path}: {e}") from e
        log(f"[FILE] Moved {path} -> {target}")
        return target

    def copy(self, path: str, dest_dir: str) -> str:
        """Copy path into dest_dir, returning the new path."""
        target = self._dest_path(path, dest_dir)
        try:
            shutil.copy2(path, target)
        except (OSError, shutil.Error) as e:
            raise FileActionError(f"failed to copy {path}: {e}") from e
        log(f"[FILE] Copied {path} -> {target}")
        return target

    def delete(self, path: str) -> None:
        try:
            os.remove(path)
        except OSError as e:
            raise FileActionError(f"failed to delete {path}: {e.strerror or e}") from e
        log(f"[FILE] Deleted {path}")
