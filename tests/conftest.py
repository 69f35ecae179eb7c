"""Shared fixtures: tiny on-disk image files with controlled size and mtime.

Only the metadata matters to the navigation core, so the files hold filler
bytes rather than real pixels.
"""

import os

import pytest

from clive.state import AppState, Collection
from clive.types import SortMethod


def write_image(path, size=1, mtime=None):
    path = str(path)
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "wb") as f:
        f.write(b"\0" * size)
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return os.path.abspath(path)


@pytest.fixture
def make_image(tmp_path):
    """make_image("sub/a.png", size=10, mtime=1000) -> absolute path."""
    def _make(name, size=1, mtime=None):
        return write_image(tmp_path / name, size, mtime)
    return _make


@pytest.fixture
def sized_images(make_image):
    """Ten images whose size grows with the number in their name."""
    return [make_image(f"img{i:02d}.png", size=(i + 1) * 100) for i in range(10)]


@pytest.fixture
def load(tmp_path):
    """Load a collection from a glob relative to tmp_path."""
    def _load(pattern="*", **kwargs):
        kwargs.setdefault("dest_folder", str(tmp_path / "keep"))
        kwargs.setdefault("method", SortMethod.ALPHABETICAL)
        return Collection.load(str(tmp_path / pattern), **kwargs)
    return _load


@pytest.fixture
def app_state(load):
    def _state(pattern="*", **kwargs):
        return AppState(collection=load(pattern, **kwargs))
    return _state
