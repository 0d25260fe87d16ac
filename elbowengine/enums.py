"""Backend-neutral rendering enumerations and small descriptor types."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag


class Format(IntEnum):
    """Pixel and texel formats."""

    R32G32B32_FLOAT = 0  # three 32-bit float components
    R16G16B16A16_UNORM = 1  # four 16-bit components mapped to [0, 1]
    R32G32_UINT = 2  # two 32-bit unsigned integers
    R8G8B8A8_UNORM = 3  # four 8-bit unsigned components mapped to [0, 1]
    R8G8B8A8_SNORM = 4  # four 8-bit signed components mapped to [-1, 1]
    R8G8B8A8_UINT = 5  # four 8-bit unsigned integers [0, 255]
    R8G8B8A8_SINT = 6  # four 8-bit signed integers [-128, 127]
    D32_FLOAT_S8X24_UINT = 7  # 32-bit depth, 8-bit stencil, 24 bits padding
    D32_FLOAT = 8  # 32-bit float depth
    D24_UNORM_S8_UINT = 9  # 24-bit depth [0, 1], 8-bit stencil
    D16_UNORM = 10  # 16-bit depth [0, 1]
    B8G8R8A8_SRGB = 11  # four 8-bit components in sRGB
    B8G8R8A8_UNORM = 12  # four 8-bit components mapped to [0, 1]
    R16G16B16A16_FLOAT = 13  # four 16-bit float components
    A2B10G10R10_UNORM = 14  # a: 2 bits, b/g/r: 10 bits each
    COUNT = 15  # out of range (undefined)


class ColorSpace(IntEnum):
    """Presentation colour spaces."""

    SRGB = 0  # non-linear sRGB, standard displays
    HDR10 = 1
    COUNT = 2


class PresentMode(IntEnum):
    """Swapchain presentation modes."""

    VSYNC = 0
    IMMEDIATE = 1
    TRIPLE_BUFFER = 2
    COUNT = 3


class GraphicsAPI(IntEnum):
    """Graphics APIs a context can be created for."""

    VULKAN = 0
    D3D12 = 1
    OPENGL = 2
    NULL = 3
    COUNT = 4


class SampleCount(IntEnum):
    """MSAA sample counts; the values are single bits, as in Vulkan."""

    SC_1 = 0b0000001
    SC_2 = 0b0000010
    SC_4 = 0b0000100
    SC_8 = 0b0001000
    SC_16 = 0b0010000
    SC_32 = 0b0100000
    SC_64 = 0b1000000
    SC_COUNT = 0b1000001  # out of range


class ImageAspect(IntFlag):
    """Which aspects of an image are accessed."""

    COLOR = 0b1
    DEPTH = 0b10
    STENCIL = 0b100


class BufferUsage(IntFlag):
    """How a buffer is used."""

    VERTEX_BUFFER = 1
    INDEX_BUFFER = 1 << 1
    UNIFORM_BUFFER = 1 << 2


class BufferMemoryProperty(IntFlag):
    """Where buffer memory lives and how the host sees it."""

    DEVICE_LOCAL = 1  # GPU only, not visible to the CPU
    HOST_VISIBLE = 1 << 1  # CPU may access; usually paired with HOST_COHERENT
    HOST_COHERENT = 1 << 2  # CPU writes are visible without manual flushing


@dataclass
class ImageSubresourceRange:
    """A range of an image's mip levels and array layers.

    A value of -1 means "fill in from the image" when an image view is made.
    """

    aspect_mask: int = -1
    base_mip_level: int = 0
    level_count: int = -1
    base_array_layer: int = 0
    layer_count: int = -1


class ImageViewType(IntEnum):
    """Dimensionality of an image view."""

    D1 = 0
    D2 = 1
    D3 = 2
    CUBE = 3
    ARRAY_1D = 4
    ARRAY_2D = 5
    ARRAY_CUBE = 6
    COUNT = 7


class ComponentMappingElement(IntEnum):
    """Source of one colour channel in an image view."""

    IDENTITY = 0
    ZERO = 1
    ONE = 2
    R = 3
    G = 4
    B = 5
    A = 6
    COUNT = 7