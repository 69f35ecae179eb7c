"""Core data types for clive."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import os


class SortMethod(Enum):
    """Orderings a Collection can be sorted by."""
    ALPHABETICAL = "alphabetical"
    DATE = "date"              # most recent first
    SIZE = "size"              # largest first
    DEPTH_FIRST = "depthfirst"  # deepest first (default)
    BREADTH_FIRST = "breadthfirst"

    @classmethod
    def parse(cls, name: str) -> SortMethod:
        """Look up a method by name, ignoring case, '-' and '_'."""
        key = name.strip().lower().replace("-", "").replace("_", "")
        for method in cls:
            if method.value == key:
                return method
        raise ValueError(f"unknown sort method {name!r}")

    @classmethod
    def names(cls) -> list[str]:
        return [m.value for m in cls]


class Mode(Enum):
    """Input modes; exactly one is active."""
    NORMAL = "normal"
    COMMAND = "command"
    HELP = "help"


@dataclass(frozen=True)
class ImageEntry:
    """One discovered image plus the metadata sorting needs."""
    path: str
    size: int = 0
    modified: float = 0.0
    depth: int = 0

    @property
    def name(self) -> str:
        """File name without directories."""
        return os.path.basename(self.path)


@dataclass
class ViewParams:
    """Final draw transform: scale and top-left offset in screen pixels."""
    scale: float = 1.0
    offx: float = 0.0
    offy: float = 0.0


@dataclass
class TextureInfo:
    """Information about a loaded texture."""
    tex: object  # rl.Texture2D, kept untyped so the core never imports raylib
    w: int
    h: int
    path: str = ""
