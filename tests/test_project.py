import pytest

from elbowengine import project as project_module
from elbowengine.filesystem import PROJECT_MARKER
from elbowengine.project import (
    Project,
    ProjectError,
    create_instance,
    get_current_project,
)


@pytest.fixture
def no_project(monkeypatch):
    monkeypatch.setattr(project_module, "_loaded_project", None)


def test_yaml_round_trip():
    original = Project("Demo", "/some/where", "1.2.3", "Library/DB")
    assert Project.from_yaml(original.to_yaml()) == original


def test_from_yaml_rejects_non_mapping():
    with pytest.raises(ProjectError):
        Project.from_yaml("- just\n- a list\n")


def test_from_yaml_rejects_broken_yaml():
    with pytest.raises(ProjectError):
        Project.from_yaml("name: [unclosed")


def test_load_empty_marker_creates_defaults(tmp_path):
    (tmp_path / PROJECT_MARKER).write_text("", encoding="utf-8")
    project = Project.load(str(tmp_path))
    assert project.name == "New Project"
    assert project.version == "0.0.1"
    assert project.database_path == "Library/AssetDataBase"
    assert project.path == str(tmp_path)
    written = (tmp_path / PROJECT_MARKER).read_text(encoding="utf-8")
    assert Project.from_yaml(written) == project


def test_load_existing_marker(tmp_path):
    stored = Project("Stored", "/elsewhere", "2.0.0", "DB")
    (tmp_path / PROJECT_MARKER).write_text(stored.to_yaml(), encoding="utf-8")
    assert Project.load(str(tmp_path)) == stored


def test_load_without_marker_fails(tmp_path):
    with pytest.raises(ProjectError):
        Project.load(str(tmp_path))


def test_get_current_project_without_instance(no_project):
    with pytest.raises(ProjectError):
        get_current_project()


def test_create_instance_loads_once(no_project, tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    (first / PROJECT_MARKER).write_text("", encoding="utf-8")
    (second / PROJECT_MARKER).write_text(
        Project("Other", str(second), "9.9.9", "X").to_yaml(), encoding="utf-8"
    )
    loaded = create_instance(str(first))
    again = create_instance(str(second))
    assert again is loaded
    assert get_current_project() is loaded
    assert get_current_project().path == str(first)