"""Pattern conversion and image discovery."""

import os

import pytest

from clive.errors import PatternError
from clive.paths import (
    build_entries, convert_to_globable, is_supported_image, match_images,
    path_depth, search_root, validate_pattern,
)


def test_supported_extensions_are_case_insensitive():
    assert is_supported_image("a.PNG")
    assert is_supported_image("b.jpeg")
    assert is_supported_image("c.webp")
    assert not is_supported_image("notes.txt")
    assert not is_supported_image("png")


@pytest.mark.parametrize("pattern", ["", "   ", "shots/[ab.png"])
def test_invalid_patterns_are_rejected(pattern):
    with pytest.raises(PatternError):
        validate_pattern(pattern)


def test_closed_character_class_is_valid():
    validate_pattern("shots/[ab].png")
    validate_pattern("shots/[]].png")


def test_directory_becomes_all_children(tmp_path):
    assert convert_to_globable(str(tmp_path)) == os.path.join(str(tmp_path), "*")


def test_home_is_expanded(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert convert_to_globable("~/*.png") == os.path.join(str(tmp_path), "*.png")


def test_env_vars_are_expanded(monkeypatch, tmp_path):
    monkeypatch.setenv("CLIVE_PICS", str(tmp_path))
    assert convert_to_globable("$CLIVE_PICS/*.png") == os.path.join(str(tmp_path), "*.png")


@pytest.mark.skipif(os.sep != "/", reason="escaped spaces are a posix shell habit")
def test_escaped_spaces(make_image, tmp_path):
    path = make_image("my pics/a.png")
    escaped = str(tmp_path / "my\\ pics" / "a.png")
    assert match_images(escaped) == [path]


def test_match_drops_non_images_and_directories(make_image, tmp_path):
    png = make_image("a.png")
    make_image("readme.txt")
    os.makedirs(tmp_path / "folder.png")
    assert match_images(str(tmp_path / "*")) == [png]


def test_recursive_double_star(make_image, tmp_path):
    top = make_image("a.png")
    deep = make_image("x/y/b.png")
    found = match_images(str(tmp_path / "**" / "*.png"))
    assert set(found) == {top, deep}


def test_plain_directory_is_not_recursive(make_image, tmp_path):
    top = make_image("a.png")
    make_image("sub/b.png")
    assert match_images(str(tmp_path)) == [top]


def test_multiple_patterns_merge_without_duplicates(make_image, tmp_path):
    a = make_image("a.png")
    b = make_image("b.jpg")
    found = match_images([str(tmp_path / "*.png"), str(tmp_path / "*"), a])
    assert found == [a, b]


def test_no_matches_is_empty(tmp_path):
    assert match_images(str(tmp_path / "*.png")) == []


def test_existing_file_with_glob_characters_matches_literally(make_image):
    odd = make_image("shot[1].png")
    assert match_images(odd) == [odd]


def test_search_root_is_deepest_literal_directory(make_image, tmp_path):
    make_image("pics/a.png")
    assert search_root(str(tmp_path / "pics" / "**" / "*.png")) == str(tmp_path / "pics")
    assert search_root(str(tmp_path / "pics")) == str(tmp_path / "pics")


def test_depth_counts_components_below_root(tmp_path):
    root = str(tmp_path)
    assert path_depth(os.path.join(root, "a.png"), root) == 1
    assert path_depth(os.path.join(root, "x", "y", "b.png"), root) == 3


def test_entries_carry_metadata(make_image, tmp_path):
    path = make_image("sub/a.png", size=42, mtime=1_000_000)
    [entry] = build_entries([path], str(tmp_path))
    assert entry.size == 42
    assert entry.modified == 1_000_000
    assert entry.depth == 2
    assert entry.name == "a.png"
