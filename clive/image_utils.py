"""Image decoding - raylib for the formats it knows, Pillow for the rest."""

from __future__ import annotations
import io
import os
from typing import Any

from PIL import Image, UnidentifiedImageError

from .config import MAX_FILE_SIZE_MB, RL_NATIVE_EXTS
from .errors import DecodeError
from .logging import debug, log
from .rl_compat import load_image, load_image_from_memory, rl
from .types import TextureInfo


def get_file_size_mb(filepath: str) -> float:
    """Get file size in megabytes."""
    try:
        return os.path.getsize(filepath) / (1024 * 1024)
    except OSError:
        return 0.0


def pil_to_png_bytes(path: str) -> bytes:
    """Decode any Pillow-readable file and re-encode it as PNG.

    Whatever Pillow raises (unknown format, truncated data, a decompression
    bomb) comes out as DecodeError.
    """
    buf = io.BytesIO()
    try:
        with Image.open(path) as img:
            img.seek(0)
            img.convert("RGBA").save(buf, format="PNG")
    except UnidentifiedImageError as e:
        raise DecodeError(f"{os.path.basename(path)} is not an image Pillow knows") from e
    except Exception as e:
        raise DecodeError(f"cannot decode {os.path.basename(path)}: {e}") from e
    return buf.getvalue()


def _valid(img: Any) -> bool:
    return getattr(img, "width", 0) > 0 and getattr(img, "height", 0) > 0


def decode_image(path: str) -> Any:
    """Load path into a CPU-side raylib Image.

    Raises DecodeError if neither raylib nor Pillow can read it.
    """
    size_mb = get_file_size_mb(path)
    if size_mb > MAX_FILE_SIZE_MB:
        raise DecodeError(f"file too large: {size_mb:.1f}MB")
    if not os.path.isfile(path):
        raise DecodeError(f"{path} no longer exists")

    ext = os.path.splitext(path)[1].lower()
    if ext in RL_NATIVE_EXTS:
        img = load_image(path)
        if _valid(img):
            return img
        debug(f"[DECODE] raylib could not read {os.path.basename(path)}, trying Pillow")

    img = load_image_from_memory(".png", pil_to_png_bytes(path))
    if not _valid(img):
        raise DecodeError(f"cannot decode {os.path.basename(path)}")
    return img


def load_texture(path: str) -> TextureInfo:
    """Decode path and upload it to the GPU."""
    img = decode_image(path)
    w, h = img.width, img.height
    tex = rl.LoadTextureFromImage(img)
    rl.UnloadImage(img)
    log(f"[DECODE] {os.path.basename(path)} {w}x{h}")
    return TextureInfo(tex=tex, w=w, h=h, path=path)
