"""Platform and resource layer of a small game engine: graphics enums, image descriptions,
filesystem helpers, windows, projects and an SQLite asset database."""

__version__ = "0.1.0"

__all__ = [
    "enums",
    "vulkan_enums",
    "image",
    "image_view",
    "config",
    "gfx_context",
    "filesystem",
    "window",
    "sql_helper",
    "mesh_meta",
    "project",
    "asset_database",
    "asset",
]