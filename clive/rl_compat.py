"""Raylib binding shim.

clive runs on python-raylib (cffi, wants bytes for C strings and ffi structs)
and also on raylibpy (str arguments, Python struct classes). Everything that
differs between the two goes through this module.
"""

from __future__ import annotations
from typing import Any, Callable, Tuple

try:
    import raylibpy as rl
    RL_VERSION = "raylibpy"
except ImportError:
    import raylib as rl
    RL_VERSION = "python-raylib"

_HAS_FFI = hasattr(rl, "ffi")


def _struct(name: str, *values: Any) -> Any:
    """Build a raylib struct by type name from positional field values."""
    ctor = getattr(rl, name, None)
    if ctor is not None and not _HAS_FFI:
        return ctor(*values)
    ptr = rl.ffi.new(f"{name} *", list(values))
    return ptr[0]


def _with_text(fn: Callable[..., Any], text: str, *args: Any) -> Any:
    """Call fn with text as str, retrying as UTF-8 bytes if the binding refuses."""
    try:
        return fn(text, *args)
    except TypeError:
        return fn(text.encode("utf-8"), *args)


def make_rect(x: float, y: float, w: float, h: float) -> Any:
    return _struct("Rectangle", float(x), float(y), float(w), float(h))


def make_vec2(x: float, y: float) -> Any:
    return _struct("Vector2", float(x), float(y))


def make_color(rgba: Tuple[int, int, int, int]) -> Any:
    """Colour from an (r, g, b, a) tuple as kept in config."""
    return _struct("Color", *(int(c) for c in rgba))


def init_window(w: int, h: int, title: str) -> None:
    _with_text(lambda t: rl.InitWindow(w, h, t), title)


def draw_text(text: str, x: int, y: int, size: int, color: Any) -> None:
    _with_text(rl.DrawText, text, x, y, size, color)


def measure_text(text: str, size: int) -> int:
    return _with_text(rl.MeasureText, text, size)


def load_image(path: str) -> Any:
    """CPU-side image straight from a file raylib can decode."""
    return _with_text(rl.LoadImage, path)


def load_image_from_memory(file_type: str, data: bytes) -> Any:
    """Decode an in-memory file (file_type like '.png') into a raylib Image."""
    return _with_text(lambda t: rl.LoadImageFromMemory(t, data, len(data)), file_type)


def is_texture_valid(tex: Any) -> bool:
    """True once the texture has been uploaded to the GPU."""
    return (getattr(tex, "id", 0) or 0) > 0


__all__ = [
    "rl",
    "RL_VERSION",
    "make_rect",
    "make_vec2",
    "make_color",
    "init_window",
    "draw_text",
    "measure_text",
    "load_image",
    "load_image_from_memory",
    "is_texture_valid",
]
