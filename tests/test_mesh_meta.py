import sqlite3

import pytest

from elbowengine.mesh_meta import MeshMeta
from elbowengine.sql_helper import create_table, initialize_database


@pytest.fixture
def db():
    connection = sqlite3.connect(":memory:")
    initialize_database(connection)
    yield connection
    connection.close()


def test_defaults():
    meta = MeshMeta()
    assert meta.id == 0
    assert meta.object_handle == 0
    assert meta.path == ""
    assert meta.triangulate is True
    assert meta.generate_normals is True
    assert meta.generate_smooth_normals is False
    assert meta.merge_duplicate_vertices is True
    assert meta.remove_unused_materials is True
    assert meta.can_be_removed is True


def test_table_is_named_mesh(db):
    assert create_table(db, MeshMeta).table_name == "Mesh"


def test_round_trip(db):
    table = create_table(db, MeshMeta)
    meta = MeshMeta(id=1, object_handle=7, path="Meshes/cube.fbx", triangulate=False)
    table.insert(meta)
    assert table.query(MeshMeta, "object_handle = 7") == [meta]


def test_query_by_handle_misses(db):
    table = create_table(db, MeshMeta)
    table.insert(MeshMeta(id=1, object_handle=7))
    assert table.query(MeshMeta, "object_handle = 8") == []