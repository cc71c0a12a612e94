import os
from pathlib import Path

import pytest

from linkpath.paths import InvalidFileError, absolute_path, contains, resolve


def test_resolve_relative():
    assert resolve(Path("index.html"), Path("./foo.html"), True) == Path(
        os.getcwd()
    ) / "foo.html"


def test_resolve_relative_index():
    assert resolve(Path("./index.html"), Path("./foo.html"), True) == Path(
        os.getcwd()
    ) / "foo.html"


def test_resolve_from_absolute():
    assert resolve(Path("/path/to/index.html"), Path("./foo.html"), True) == Path(
        "/path/to/foo.html"
    )


def test_resolve_parent_directory():
    assert resolve("/some/page.html", "../parent", True) == Path("/parent")


def test_resolve_absolute_ignored():
    assert resolve("/some/page.html", "/other/file.html", True) is None


def test_resolve_absolute_kept():
    assert resolve("/some/page.html", "/other/./x/../file.html", False) == Path(
        "/other/file.html"
    )


def test_resolve_relative_from_root_fails():
    with pytest.raises(InvalidFileError) as info:
        resolve("/", "foo.html", True)
    assert info.value.path == Path("foo.html")


def test_absolute_path_cleans_components():
    assert absolute_path("/a/b/../c/./d") == Path("/a/c/d")


def test_absolute_path_does_not_climb_above_root():
    assert absolute_path("/../../a") == Path("/a")


def test_absolute_path_relative_uses_cwd():
    assert absolute_path("x/y") == Path(os.getcwd()) / "x" / "y"


def test_contains(tmp_path):
    child = tmp_path / "child"
    child.mkdir()
    assert contains(tmp_path, child) is True


def test_contains_itself(tmp_path):
    assert contains(tmp_path, tmp_path) is True


def test_contains_not(tmp_path):
    dir1 = tmp_path / "one"
    dir2 = tmp_path / "two"
    dir1.mkdir()
    dir2.mkdir()
    assert contains(dir1, dir2) is False


def test_contains_one_dir_does_not_exist(tmp_path):
    with pytest.raises(FileNotFoundError):
        contains(tmp_path, tmp_path / "does" / "not" / "exist")


def test_contains_one_dir_relative_path(tmp_path):
    child = tmp_path / "child"
    child.mkdir()
    assert contains(tmp_path, child / "..") is True