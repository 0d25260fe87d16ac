"""Import settings stored for every mesh asset."""

from dataclasses import dataclass

from elbowengine.sql_helper import sql_field, sql_table


@sql_table("Mesh")
@dataclass
class MeshMeta:
    """Database row describing a mesh asset and how it is imported."""

    id: int = sql_field(0, primary_key=True)
    object_handle: int = 0
    path: str = ""
    triangulate: bool = True  # turn every polygon face into triangles
    generate_normals: bool = True
    generate_smooth_normals: bool = False
    merge_duplicate_vertices: bool = True
    remove_unused_materials: bool = True
    can_be_removed: bool = True