"""Assets and the mesh asset."""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional

from elbowengine.mesh_meta import MeshMeta


class AssetType(IntEnum):
    """Kinds of asset."""

    MESH = 0
    SHADER = 1
    TEXTURE = 2
    MATERIAL = 3
    ANIMATION = 4
    AUDIO = 5
    FONT = 6
    SCENE = 7
    PREFAB = 8
    COUNT = 9

    @property
    def label(self):
        """Display label of the asset type."""
        return _ASSET_LABELS[self]


_ASSET_LABELS = {
    AssetType.MESH: "网格",
    AssetType.SHADER: "着色器",
    AssetType.TEXTURE: "纹理",
    AssetType.MATERIAL: "材质",
    AssetType.ANIMATION: "动画",
    AssetType.AUDIO: "音频",
    AssetType.FONT: "字体",
    AssetType.SCENE: "场景",
    AssetType.PREFAB: "预制体",
    AssetType.COUNT: "超出范围",
}


class Asset(ABC):
    """A persistent object identified by a handle and loaded on demand."""

    def __init__(self, handle=0):
        self.handle = handle

    @property
    @abstractmethod
    def asset_type(self):
        """The kind of asset this is."""

    @abstractmethod
    def perform_load(self):
        """Load the asset's data."""


@dataclass
class MeshStorage:
    """GPU buffers holding a mesh's vertices and indices."""

    vertex_buffer: Optional[Any] = None
    index_buffer: Optional[Any] = None
    vertex_count: int = 0
    index_count: int = 0

    @property
    def loaded(self):
        """True when both buffers are present."""
        return self.vertex_buffer is not None and self.index_buffer is not None


class Mesh(Asset):
    """A mesh asset whose metadata lives in the asset database."""

    def __init__(self, database, handle=0):
        super().__init__(handle)
        self.database = database
        self.meta = None
        self.storage = None

    @property
    def asset_type(self):
        return AssetType.MESH

    def perform_load(self):
        """Look up the mesh's metadata and check its source file; return the metadata."""
        meta = self.database.query_meta_by_handle(MeshMeta, self.handle)
        if meta is None:
            raise LookupError(f"Load failed, handle = {self.handle}")
        if not os.path.exists(meta.path):
            raise FileNotFoundError(f"Load failed, file does not exist, path = {meta.path}")
        self.meta = meta
        return meta