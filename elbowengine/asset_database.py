"""The asset database: an SQLite file holding metadata for every asset."""

import os
import sqlite3

from elbowengine.filesystem import FileSystemError, combine, is_folder
from elbowengine.mesh_meta import MeshMeta
from elbowengine.project import get_current_project
from elbowengine.sql_helper import create_table, initialize_database

DATABASE_FILE_NAME = "AssetDataBase.db"
_ASSET_META_TYPES = (MeshMeta,)


class AssetDatabase:
    """Opens the project's asset database and gives access to its meta tables.

    Usable as a context manager that starts up and shuts down the database.
    """

    name = "AssetDataBase"

    def __init__(self, project=None):
        self.project = project
        self._db = None
        self._tables = {}

    def startup(self):
        """Open or create the database and make sure every asset table exists."""
        project = self.project if self.project is not None else get_current_project()
        db_path = project.database_path
        if not os.path.exists(db_path):
            os.makedirs(db_path, exist_ok=True)
        if not is_folder(db_path):
            raise FileSystemError(
                "DataBasePath in project must be a valid folder path."
            )
        self._db = sqlite3.connect(combine(db_path, DATABASE_FILE_NAME))
        initialize_database(self._db)
        for meta_type in _ASSET_META_TYPES:
            self._tables[meta_type] = create_table(self._db, meta_type)

    def shutdown(self):
        """Close the database."""
        if self._db is not None:
            self._db.close()
        self._db = None
        self._tables.clear()

    def __enter__(self):
        self.startup()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.shutdown()

    def table(self, row_type):
        """The table storing ``row_type`` rows, or None when there is none."""
        return self._tables.get(row_type)

    def query_meta(self, row_type, where=""):
        """The first ``row_type`` row matching the SQL condition, or None."""
        table = self._tables.get(row_type)
        if table is None:
            return None
        results = table.query(row_type, where)
        return results[0] if results else None

    def query_meta_by_handle(self, row_type, handle):
        """The ``row_type`` row for the object with ``handle``, or None."""
        return self.query_meta(row_type, f"object_handle = {int(handle)}")