"""The project: name, location, version and asset database location."""

import logging
import os
from dataclasses import asdict, dataclass

import yaml

from elbowengine.filesystem import PROJECT_MARKER

_log = logging.getLogger(__name__)

_loaded_project = None


class ProjectError(RuntimeError):
    """A project could not be loaded or created."""


@dataclass
class Project:
    """Basic information about a project.

    ``database_path`` is the folder holding the asset database, relative to the
    project folder.
    """

    name: str = ""
    path: str = ""
    version: str = ""
    database_path: str = ""

    def to_yaml(self):
        """The project as a YAML document."""
        return yaml.safe_dump(asdict(self), sort_keys=False, allow_unicode=True)

    @classmethod
    def from_yaml(cls, text):
        """A project read from a YAML document."""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ProjectError(f"Invalid project meta file: {exc}") from exc
        if not isinstance(data, dict):
            raise ProjectError("Project meta file must hold a mapping.")
        return cls(
            name=str(data.get("name", "")),
            path=str(data.get("path", "")),
            version=str(data.get("version", "")),
            database_path=str(data.get("database_path", "")),
        )

    @classmethod
    def load(cls, path):
        """The project in folder ``path``, read from its marker file.

        An empty marker file makes a new project with default settings and
        writes them to the marker file.
        """
        marker = os.path.join(path, PROJECT_MARKER)
        try:
            with open(marker, encoding="utf-8") as handle:
                text = handle.read()
        except OSError as exc:
            raise ProjectError("Failed to read project meta file.") from exc
        if text:
            return cls.from_yaml(text)
        project = cls(
            name="New Project",
            path=path,
            version="0.0.1",
            database_path="Library/AssetDataBase",
        )
        try:
            with open(marker, "w", encoding="utf-8") as handle:
                handle.write(project.to_yaml())
        except OSError as exc:
            raise ProjectError(f"Failed to create project {project.name}") from exc
        return project


def create_instance(path):
    """Load the project in ``path`` as the current one and return the current one.

    When a project is already loaded the call is ignored with a warning.
    Suitable as a callback in ``filesystem.on_project_path_set``.
    """
    global _loaded_project
    if _loaded_project is not None:
        _log.warning("Project already loaded. This loading will be ignored.")
        return _loaded_project
    _loaded_project = Project.load(path)
    return _loaded_project


def get_current_project():
    """The loaded project; raises ``ProjectError`` when none is loaded."""
    if _loaded_project is None:
        raise ProjectError("No project is loaded.")
    return _loaded_project