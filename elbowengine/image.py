"""GPU resource base types: resources, buffers, surfaces and images."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, IntFlag

from elbowengine.enums import BufferMemoryProperty, BufferUsage, Format, SampleCount


class Resource(ABC):
    """Anything backed by a native graphics-API handle."""

    @abstractmethod
    def native_handle(self):
        """The backend's handle for this resource, or None when there is none."""

    def is_valid(self):
        """True when the resource holds a native handle."""
        return self.native_handle() is not None


@dataclass
class BufferCreateInfo:
    """Parameters a buffer is created from."""

    size: int
    usage: BufferUsage
    memory_property: BufferMemoryProperty


class Buffer(Resource):
    """A block of GPU memory."""

    def __init__(self, create_info):
        self.create_info = create_info

    @property
    def size(self):
        return self.create_info.size

    @property
    def usage(self):
        return self.create_info.usage


class Surface(Resource):
    """A presentation surface; windows create these for a graphics context."""


class ImageState(IntEnum):
    """Layout an image is in."""

    UNDEFINED = 0
    RENDER_TARGET = 1
    DEPTH_STENCIL = 2
    SHADER_READ = 3
    TRANSFER_SRC = 4
    TRANSFER_DST = 5
    PRESENT = 6


class ImageUsage(IntFlag):
    """What an image may be used for."""

    TRANSFER_SRC = 0b0000001
    TRANSFER_DST = 0b0000010
    RENDER_TARGET = 0b0000100
    DEPTH_STENCIL = 0b0001000
    SHADER_READ = 0b0010000
    TRANSIENT = 0b0100000
    SWAP_CHAIN = 0b1000000
    MAX = 0b1000001


class ImageDimension(IntEnum):
    """Dimensionality of an image."""

    D1 = 0
    D2 = 1
    D3 = 2
    CUBE = 3
    ARRAY_1D = 4
    ARRAY_2D = 5
    ARRAY_CUBE = 6
    COUNT = 7


@dataclass
class ImageDesc:
    """Description of an image.

    ``depth_or_layers`` is the layer count for 2D images and the depth for 3D.
    """

    name: str
    width: int
    height: int
    usage: ImageUsage
    format: Format
    dimension: ImageDimension = ImageDimension.D2
    depth_or_layers: int = 1
    mip_levels: int = 1
    samples: SampleCount = SampleCount.SC_1
    initial_state: ImageState = ImageState.UNDEFINED

    @classmethod
    def default(cls):
        """A placeholder description that cannot be used to create an image."""
        return cls("Invalid", 0, 0, ImageUsage.MAX, Format.COUNT)


class Image(Resource):
    """A GPU image described by an ``ImageDesc``."""

    def __init__(self, desc=None):
        if desc is None:
            desc = ImageDesc("", 0, 0, ImageUsage.MAX, Format.COUNT)
        self.desc = desc

    @property
    def width(self):
        return self.desc.width

    @property
    def height(self):
        return self.desc.height

    @property
    def usage(self):
        return self.desc.usage

    @property
    def dimension(self):
        return self.desc.dimension

    @property
    def depth_or_layers(self):
        return self.desc.depth_or_layers

    @property
    def mip_levels(self):
        return self.desc.mip_levels

    @property
    def format(self):
        return self.desc.format

    @property
    def sample_count(self):
        return self.desc.samples

    @property
    def state(self):
        return self.desc.initial_state