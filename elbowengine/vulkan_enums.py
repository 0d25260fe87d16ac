"""Conversions between the neutral rendering enums and Vulkan values."""

from enum import IntEnum, IntFlag
from typing import NamedTuple

from elbowengine.enums import (
    BufferMemoryProperty,
    BufferUsage,
    ColorSpace,
    ComponentMappingElement,
    Format,
    ImageAspect,
    ImageViewType,
    PresentMode,
    SampleCount,
)

VK_MAX_ENUM = 0x7FFFFFFF


class VkFormat(IntEnum):
    UNDEFINED = 0
    R8G8B8A8_UNORM = 37
    R8G8B8A8_SNORM = 38
    R8G8B8A8_UINT = 41
    R8G8B8A8_SINT = 42
    B8G8R8A8_UNORM = 44
    B8G8R8A8_SRGB = 50
    A2B10G10R10_UNORM_PACK32 = 64
    R16G16B16A16_UNORM = 91
    R16G16B16A16_SFLOAT = 97
    R32G32_UINT = 101
    R32G32B32_SFLOAT = 106
    D16_UNORM = 124
    D32_SFLOAT = 126
    D24_UNORM_S8_UINT = 129
    D32_SFLOAT_S8_UINT = 130


class VkColorSpace(IntEnum):
    SRGB_NONLINEAR = 0
    HDR10_ST2084 = 1000104008
    MAX_ENUM = VK_MAX_ENUM


class VkPresentMode(IntEnum):
    IMMEDIATE = 0
    MAILBOX = 1
    FIFO = 2
    FIFO_RELAXED = 3
    MAX_ENUM = VK_MAX_ENUM


class VkSampleCount(IntEnum):
    COUNT_1 = 0x01
    COUNT_2 = 0x02
    COUNT_4 = 0x04
    COUNT_8 = 0x08
    COUNT_16 = 0x10
    COUNT_32 = 0x20
    COUNT_64 = 0x40
    MAX_ENUM = VK_MAX_ENUM


class VkImageAspect(IntFlag):
    COLOR = 0x1
    DEPTH = 0x2
    STENCIL = 0x4


class VkComponentSwizzle(IntEnum):
    IDENTITY = 0
    ZERO = 1
    ONE = 2
    R = 3
    G = 4
    B = 5
    A = 6
    MAX_ENUM = VK_MAX_ENUM


class VkImageViewType(IntEnum):
    TYPE_1D = 0
    TYPE_2D = 1
    TYPE_3D = 2
    CUBE = 3
    TYPE_1D_ARRAY = 4
    TYPE_2D_ARRAY = 5
    CUBE_ARRAY = 6
    MAX_ENUM = VK_MAX_ENUM


class VkBufferUsage(IntFlag):
    UNIFORM_BUFFER = 0x10
    INDEX_BUFFER = 0x40
    VERTEX_BUFFER = 0x80


class VkMemoryProperty(IntFlag):
    DEVICE_LOCAL = 0x1
    HOST_VISIBLE = 0x2
    HOST_COHERENT = 0x4


class VkComponentMapping(NamedTuple):
    r: VkComponentSwizzle
    g: VkComponentSwizzle
    b: VkComponentSwizzle
    a: VkComponentSwizzle


_FORMATS = {
    Format.R32G32B32_FLOAT: VkFormat.R32G32B32_SFLOAT,
    Format.R16G16B16A16_UNORM: VkFormat.R16G16B16A16_UNORM,
    Format.R32G32_UINT: VkFormat.R32G32_UINT,
    Format.R8G8B8A8_UNORM: VkFormat.R8G8B8A8_UNORM,
    Format.R8G8B8A8_SNORM: VkFormat.R8G8B8A8_SNORM,
    Format.R8G8B8A8_UINT: VkFormat.R8G8B8A8_UINT,
    Format.R8G8B8A8_SINT: VkFormat.R8G8B8A8_SINT,
    Format.D32_FLOAT_S8X24_UINT: VkFormat.D32_SFLOAT_S8_UINT,
    Format.D32_FLOAT: VkFormat.D32_SFLOAT,
    Format.D24_UNORM_S8_UINT: VkFormat.D24_UNORM_S8_UINT,
    Format.D16_UNORM: VkFormat.D16_UNORM,
    Format.B8G8R8A8_SRGB: VkFormat.B8G8R8A8_SRGB,
    Format.A2B10G10R10_UNORM: VkFormat.A2B10G10R10_UNORM_PACK32,
    Format.B8G8R8A8_UNORM: VkFormat.B8G8R8A8_UNORM,
    Format.R16G16B16A16_FLOAT: VkFormat.R16G16B16A16_SFLOAT,
}
_FORMATS_BACK = {vk: fmt for fmt, vk in _FORMATS.items()}

_COLOR_SPACES = {
    ColorSpace.SRGB: VkColorSpace.SRGB_NONLINEAR,
    ColorSpace.HDR10: VkColorSpace.HDR10_ST2084,
}
_COLOR_SPACES_BACK = {vk: cs for cs, vk in _COLOR_SPACES.items()}

_PRESENT_MODES = {
    PresentMode.IMMEDIATE: VkPresentMode.IMMEDIATE,
    PresentMode.VSYNC: VkPresentMode.FIFO,
    PresentMode.TRIPLE_BUFFER: VkPresentMode.MAILBOX,
}
_PRESENT_MODES_BACK = {vk: pm for pm, vk in _PRESENT_MODES.items()}

_SAMPLE_COUNTS = {
    SampleCount.SC_1: VkSampleCount.COUNT_1,
    SampleCount.SC_2: VkSampleCount.COUNT_2,
    SampleCount.SC_4: VkSampleCount.COUNT_4,
    SampleCount.SC_8: VkSampleCount.COUNT_8,
    SampleCount.SC_16: VkSampleCount.COUNT_16,
    SampleCount.SC_32: VkSampleCount.COUNT_32,
    SampleCount.SC_64: VkSampleCount.COUNT_64,
    SampleCount.SC_COUNT: VkSampleCount.MAX_ENUM,
}
_SAMPLE_COUNTS_BACK = {vk: sc for sc, vk in _SAMPLE_COUNTS.items()}

_SWIZZLES = {
    ComponentMappingElement.IDENTITY: VkComponentSwizzle.IDENTITY,
    ComponentMappingElement.ZERO: VkComponentSwizzle.ZERO,
    ComponentMappingElement.ONE: VkComponentSwizzle.ONE,
    ComponentMappingElement.R: VkComponentSwizzle.R,
    ComponentMappingElement.G: VkComponentSwizzle.G,
    ComponentMappingElement.B: VkComponentSwizzle.B,
    ComponentMappingElement.A: VkComponentSwizzle.A,
    ComponentMappingElement.COUNT: VkComponentSwizzle.MAX_ENUM,
}
_SWIZZLES_BACK = {vk: el for el, vk in _SWIZZLES.items()}

_VIEW_TYPES = {
    ImageViewType.D1: VkImageViewType.TYPE_1D,
    ImageViewType.D2: VkImageViewType.TYPE_2D,
    ImageViewType.D3: VkImageViewType.TYPE_3D,
    ImageViewType.CUBE: VkImageViewType.CUBE,
    ImageViewType.ARRAY_1D: VkImageViewType.TYPE_1D_ARRAY,
    ImageViewType.ARRAY_2D: VkImageViewType.TYPE_2D_ARRAY,
    ImageViewType.ARRAY_CUBE: VkImageViewType.CUBE_ARRAY,
    ImageViewType.COUNT: VkImageViewType.MAX_ENUM,
}
_VIEW_TYPES_BACK = {vk: vt for vt, vk in _VIEW_TYPES.items()}

_ASPECT_BITS = (
    (ImageAspect.COLOR, VkImageAspect.COLOR),
    (ImageAspect.DEPTH, VkImageAspect.DEPTH),
    (ImageAspect.STENCIL, VkImageAspect.STENCIL),
)
_BUFFER_USAGE_BITS = (
    (BufferUsage.VERTEX_BUFFER, VkBufferUsage.VERTEX_BUFFER),
    (BufferUsage.INDEX_BUFFER, VkBufferUsage.INDEX_BUFFER),
    (BufferUsage.UNIFORM_BUFFER, VkBufferUsage.UNIFORM_BUFFER),
)
_MEMORY_PROPERTY_BITS = (
    (BufferMemoryProperty.DEVICE_LOCAL, VkMemoryProperty.DEVICE_LOCAL),
    (BufferMemoryProperty.HOST_VISIBLE, VkMemoryProperty.HOST_VISIBLE),
    (BufferMemoryProperty.HOST_COHERENT, VkMemoryProperty.HOST_COHERENT),
)


def _translate_bits(value, pairs, empty, forward=True):
    result = empty
    for ours, theirs in pairs:
        source, target = (ours, theirs) if forward else (theirs, ours)
        if int(value) & int(source):
            result |= target
    return result


def format_to_vk(fmt):
    """Vulkan format for ``fmt``; UNDEFINED when it has none."""
    return _FORMATS.get(fmt, VkFormat.UNDEFINED)


def vk_to_format(value):
    """Format for a Vulkan format value; ``Format.COUNT`` when unknown."""
    return _FORMATS_BACK.get(value, Format.COUNT)


def color_space_to_vk(color_space):
    """Vulkan colour space for ``color_space``; MAX_ENUM when it has none."""
    return _COLOR_SPACES.get(color_space, VkColorSpace.MAX_ENUM)


def vk_to_color_space(value):
    """Colour space for a Vulkan value; ``ColorSpace.COUNT`` when unknown."""
    return _COLOR_SPACES_BACK.get(value, ColorSpace.COUNT)


def present_mode_to_vk(mode):
    """Vulkan present mode for ``mode``; MAX_ENUM when it has none."""
    return _PRESENT_MODES.get(mode, VkPresentMode.MAX_ENUM)


def vk_to_present_mode(value):
    """Present mode for a Vulkan value; ``PresentMode.COUNT`` when unknown."""
    return _PRESENT_MODES_BACK.get(value, PresentMode.COUNT)


def sample_count_to_vk(sample_count):
    """Vulkan sample-count bit for ``sample_count``."""
    return _SAMPLE_COUNTS.get(sample_count, VkSampleCount.MAX_ENUM)


def vk_to_sample_count(value):
    """Sample count for a Vulkan bit; ``SampleCount.SC_COUNT`` when unknown."""
    return _SAMPLE_COUNTS_BACK.get(value, SampleCount.SC_COUNT)


def image_aspect_to_vk(aspect):
    """Vulkan aspect mask for a mask of ``ImageAspect`` bits."""
    return _translate_bits(aspect, _ASPECT_BITS, VkImageAspect(0))


def vk_to_image_aspect(value):
    """``ImageAspect`` mask for a Vulkan aspect mask."""
    return _translate_bits(value, _ASPECT_BITS, ImageAspect(0), forward=False)


def component_to_vk_swizzle(element):
    """Vulkan swizzle for one component mapping element."""
    return _SWIZZLES.get(element, VkComponentSwizzle.MAX_ENUM)


def vk_swizzle_to_component(value):
    """Component mapping element for a Vulkan swizzle."""
    return _SWIZZLES_BACK.get(value, ComponentMappingElement.COUNT)


def component_mapping_to_vk(
    r=ComponentMappingElement.IDENTITY,
    g=ComponentMappingElement.IDENTITY,
    b=ComponentMappingElement.IDENTITY,
    a=ComponentMappingElement.IDENTITY,
):
    """Vulkan component mapping for the four channel sources."""
    return VkComponentMapping(
        component_to_vk_swizzle(r),
        component_to_vk_swizzle(g),
        component_to_vk_swizzle(b),
        component_to_vk_swizzle(a),
    )


def image_view_type_to_vk(view_type):
    """Vulkan image view type for ``view_type``."""
    return _VIEW_TYPES.get(view_type, VkImageViewType.MAX_ENUM)


def vk_to_image_view_type(value):
    """Image view type for a Vulkan value; ``ImageViewType.COUNT`` when unknown."""
    return _VIEW_TYPES_BACK.get(value, ImageViewType.COUNT)


def buffer_usage_to_vk(usage):
    """Vulkan buffer usage flags for a ``BufferUsage`` mask."""
    return _translate_bits(usage, _BUFFER_USAGE_BITS, VkBufferUsage(0))


def vk_to_buffer_usage(value):
    """``BufferUsage`` mask for Vulkan buffer usage flags."""
    return _translate_bits(value, _BUFFER_USAGE_BITS, BufferUsage(0), forward=False)


def memory_property_to_vk(prop):
    """Vulkan memory property flags for a ``BufferMemoryProperty`` mask."""
    return _translate_bits(prop, _MEMORY_PROPERTY_BITS, VkMemoryProperty(0))


def vk_to_memory_property(value):
    """``BufferMemoryProperty`` mask for Vulkan memory property flags."""
    return _translate_bits(
        value, _MEMORY_PROPERTY_BITS, BufferMemoryProperty(0), forward=False
    )