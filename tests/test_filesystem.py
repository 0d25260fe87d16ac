import os
from pathlib import Path

import pytest

from elbowengine import filesystem as fs
from elbowengine.filesystem import File, FileSystemError, Folder


@pytest.fixture
def fresh(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(fs, "_project_path", None)
    return tmp_path


@pytest.fixture
def project(fresh):
    root = fresh / "proj"
    root.mkdir()
    fs.set_project_path(str(root))
    return root


def test_combine_adds_slash_once():
    assert fs.combine("a", "b") == "a/b"
    assert fs.combine("a/", "b") == "a/b"


@pytest.mark.parametrize("bad", ["", "   "])
def test_set_project_path_rejects_blank(fresh, bad):
    with pytest.raises(FileSystemError):
        fs.set_project_path(bad)


def test_set_project_path_rejects_folder_without_marker(fresh):
    root = fresh / "proj"
    root.mkdir()
    (root / "other.txt").write_text("x")
    with pytest.raises(FileSystemError):
        fs.set_project_path(str(root))


def test_set_project_path_accepts_marker_folder(fresh):
    root = fresh / "proj"
    root.mkdir()
    (root / ".elbowengine").write_text("")
    fs.set_project_path(str(root))
    assert Path(fs.get_project_path()) == root
    assert Path(os.getcwd()).resolve() == root.resolve()


def test_set_project_path_runs_callbacks(fresh, monkeypatch):
    seen = []
    monkeypatch.setattr(fs, "on_project_path_set", [seen.append])
    root = fresh / "proj"
    root.mkdir()
    fs.set_project_path(str(root))
    assert seen == [str(root)]


def test_get_project_path_unset_raises(fresh):
    with pytest.raises(FileSystemError):
        fs.get_project_path()


def test_get_parent(project):
    assert fs.get_parent("a.txt") == str(project)
    assert fs.get_parent("x/y.txt") == "x"


def test_is_folder_empty(fresh):
    empty = fresh / "empty"
    empty.mkdir()
    full = fresh / "full"
    full.mkdir()
    (full / "f").write_text("")
    assert fs.is_folder_empty(str(empty)) is True
    assert fs.is_folder_empty(str(full)) is False
    assert fs.is_folder_empty(str(fresh / "missing")) is False
    assert fs.is_folder_empty(str(full / "f")) is False


@pytest.fixture
def tree(fresh):
    root = fresh / "tree"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_text("")
    (root / "b.png").write_text("")
    (root / "sub" / "c.txt").write_text("")
    return root


def test_list_files(tree):
    assert sorted(fs.list_files(str(tree))) == ["a.txt", "b.png"]
    assert sorted(fs.list_files(str(tree), True)) == ["a.txt", "b.png", "c.txt"]


def test_list_files_not_a_folder(tree):
    assert fs.list_files(str(tree / "a.txt")) == []
    assert fs.list_files(str(tree / "nope")) == []


def test_list_files_regex(tree):
    assert fs.list_files_regex(str(tree), r".*\.txt") == ["a.txt"]
    assert sorted(fs.list_files_regex(str(tree), r".*\.txt", True)) == ["a.txt", "c.txt"]
    assert fs.list_files_regex(str(tree), r"txt") == []


def test_list_files_filter(tree):
    result = fs.list_files_filter(str(tree), lambda n: n.startswith("b"), True)
    assert result == ["b.png"]


def test_contains_file(tree):
    assert fs.contains_file(str(tree), "a.txt") is True
    assert fs.contains_file(str(tree), "c.txt") is False
    assert fs.contains_file(str(tree), "c.txt", True) is True
    assert fs.contains_file(str(tree / "missing"), "a.txt") is False


def test_create_folder(fresh):
    target = str(fresh / "new")
    assert fs.create_folder(target) is True
    assert fs.is_folder(target)
    assert fs.create_folder(target) is False


def test_create_file_makes_parent(project):
    path = str(project / "dir" / "f.bin")
    fs.create_file(path, fs.FileCreateMode.BINARY)
    assert Path(path).read_bytes() == b""


def test_create_file_no_overwrite_raises(project):
    path = project / "f.txt"
    path.write_text("keep")
    with pytest.raises(FileSystemError):
        fs.create_file(str(path), overwrite=False)
    assert path.read_text() == "keep"


def test_create_file_missing_parent_without_create_raises(project):
    path = project / "nodir" / "f.txt"
    with pytest.raises(FileSystemError):
        fs.create_file(str(path), create_folder=False)
    assert not path.exists()


def test_file_write_read_round_trip(project):
    f = File("notes.txt")
    f.write_text("hello\nworld")
    assert f.exists()
    assert f.read_text() == "hello\nworld"
    f.write_text("short")
    assert f.read_text() == "short"


def test_file_read_missing_raises(project):
    with pytest.raises(FileSystemError):
        File("absent.txt").read_text()


def test_file_path_parts(project):
    f = File("dir/archive.tar.gz")
    assert f.folder == "dir"
    assert f.file_name == "archive.tar.gz"
    assert f.stem == "archive.tar"
    assert f.relative_path == "dir/archive.tar.gz"
    assert f.absolute_path == str(project) + "/dir/archive.tar.gz"


def test_file_equality_by_path():
    assert File("a.txt") == File("a.txt")
    assert File("a.txt") != File("b.txt")


def test_folder_create_and_exists(project):
    folder = Folder("assets")
    assert folder.exists() is False
    assert folder.create() is True
    assert folder.exists() is True
    assert folder.create() is False
    assert folder.absolute_path == fs.combine(str(project), "assets")
    assert folder.relative_path == "assets"