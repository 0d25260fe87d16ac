"""Project-relative file system helpers: paths, files and folders."""

import os
import re
from dataclasses import dataclass
from enum import Enum

PROJECT_MARKER = ".elbowengine"

# Callbacks run with the new project path whenever it is set.
on_project_path_set = []

_project_path = None


class FileSystemError(OSError):
    """A file system operation could not be carried out."""


class FileCreateMode(Enum):
    """How a new file is opened when it is created."""

    TEXT = "text"
    BINARY = "binary"


def combine(left, right):
    """Join two path parts with a single forward slash."""
    if left.endswith("/"):
        return left + right
    return f"{left}/{right}"


def is_exist(path):
    """True when ``path`` names an existing file or folder."""
    return os.path.exists(path)


def is_folder(path):
    """True when ``path`` names an existing folder."""
    return os.path.isdir(path)


def _is_project_path_valid(path):
    if path is None or not is_folder(path):
        return False
    return is_folder_empty(path) or contains_file(path, PROJECT_MARKER)


def set_project_path(path):
    """Make ``path`` the project folder and the working directory.

    The folder must either be empty or hold a project marker file.
    """
    global _project_path
    if not path or path.isspace():
        raise FileSystemError("Project path is empty or pure space!")
    if not _is_project_path_valid(path):
        raise FileSystemError(
            "The project path must either be an empty folder "
            f"or contain an {PROJECT_MARKER} file."
        )
    _project_path = os.path.abspath(path)
    os.chdir(_project_path)
    for callback in list(on_project_path_set):
        callback(_project_path)


def get_project_path():
    """The current project folder; raises when none valid has been set."""
    if not _is_project_path_valid(_project_path):
        raise FileSystemError("Project path is not valid!")
    return _project_path


def get_parent(path):
    """The folder holding ``path``; the project folder for a top-level name."""
    parent = os.path.dirname(path)
    if not parent:
        return get_project_path()
    return parent


def is_folder_empty(path):
    """True when ``path`` is an existing folder with no entries."""
    if not is_folder(path):
        return False
    with os.scandir(path) as entries:
        return next(entries, None) is None


def _walk_file_names(path, recursive):
    with os.scandir(path) as it:
        entries = sorted(it, key=lambda entry: entry.name)
    for entry in entries:
        if entry.is_dir():
            if recursive:
                yield from _walk_file_names(entry.path, recursive)
        else:
            yield entry.name


def list_files_filter(path, predicate, recursive=False):
    """Names of the files under ``path`` for which ``predicate`` holds.

    Returns an empty list when ``path`` is not a folder.
    """
    if not is_folder(path):
        return []
    return [name for name in _walk_file_names(path, recursive) if predicate(name)]


def list_files(path, recursive=False):
    """Names of the files under ``path``; empty when it is not a folder."""
    return list_files_filter(path, lambda _name: True, recursive)


def list_files_regex(path, regex, recursive=False):
    """Names of the files under ``path`` that match ``regex`` in full."""
    pattern = re.compile(regex)
    return list_files_filter(path, lambda name: pattern.fullmatch(name) is not None, recursive)


def contains_file(path, name, recursive=False):
    """True when a file called ``name`` lies in ``path`` (or below, if recursive)."""
    if not is_folder(path):
        return False
    return any(found == name for found in _walk_file_names(path, recursive))


def _make_folder(path):
    try:
        os.mkdir(path)
    except FileExistsError:
        return False
    return True


def create_folder(path):
    """Create one folder; False when it already exists."""
    return _make_folder(path)


def create_file(path, mode=FileCreateMode.TEXT, create_folder=True, overwrite=True):
    """Create an empty file at ``path``, truncating any existing one."""
    if is_exist(path) and not overwrite:
        raise FileSystemError(f"File already exist: {path}")
    parent = get_parent(path)
    if not is_exist(parent):
        if not create_folder:
            raise FileSystemError(f"Parent folder not exist: {parent}")
        if not _make_folder(parent):
            raise FileSystemError(f"Failed to create parent folder: {parent}")
    try:
        with open(path, "wb"):
            pass
    except OSError as exc:
        raise FileSystemError(f"Failed to create file: {path}") from exc


@dataclass(frozen=True)
class File:
    """A file named by a path relative to the project folder."""

    path: str

    @property
    def folder(self):
        return os.path.dirname(self.path)

    @property
    def file_name(self):
        return os.path.basename(self.path)

    @property
    def stem(self):
        return os.path.splitext(os.path.basename(self.path))[0]

    @property
    def absolute_path(self):
        return get_project_path() + "/" + self.path

    @property
    def relative_path(self):
        return self.path

    def exists(self):
        """True when the file exists in the project."""
        return is_exist(self.absolute_path)

    def read_text(self):
        """The whole text of the file."""
        if not self.exists():
            raise FileSystemError(f"File not exist: {self.path}")
        try:
            with open(self.absolute_path, encoding="utf-8") as handle:
                return handle.read()
        except OSError as exc:
            raise FileSystemError(f"Failed to open file: {self.path}") from exc

    def write_text(self, text):
        """Replace the file's contents with ``text``, creating it as needed."""
        self.create()
        try:
            with open(self.absolute_path, "w", encoding="utf-8") as handle:
                handle.write(text)
        except OSError as exc:
            raise FileSystemError(f"Failed to write file: {self.path}") from exc

    def create(self, mode=FileCreateMode.TEXT, create_folder=True, overwrite=True):
        """Create the file empty; see ``create_file``."""
        create_file(self.absolute_path, mode, create_folder, overwrite)


@dataclass(frozen=True)
class Folder:
    """A folder named by a path relative to the project folder."""

    path: str

    def create(self):
        """Create the folder; False when it already exists."""
        return create_folder(self.absolute_path)

    def exists(self):
        """True when the folder exists in the project."""
        return is_exist(self.absolute_path)

    @property
    def absolute_path(self):
        return combine(get_project_path(), self.path)

    @property
    def relative_path(self):
        return self.path