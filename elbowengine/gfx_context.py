"""The graphics context: device queries and the process-wide active context."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List

from elbowengine.config import PlatformConfig, Size2D
from elbowengine.enums import ColorSpace, Format, PresentMode


class RHIException(Exception):
    """A rendering-hardware-interface failure."""

    def __init__(self, message):
        super().__init__(f"RHI error:\n{message}")
        self.reason = message


@dataclass
class SurfaceFormat:
    """A format and colour space a surface supports."""

    format: Format = Format.COUNT
    color_space: ColorSpace = ColorSpace.COUNT


@dataclass
class SwapChainSupportInfo:
    """What a surface supports for swapchains."""

    formats: List[SurfaceFormat] = field(default_factory=list)
    present_modes: List[PresentMode] = field(default_factory=list)
    min_image_count: int = 0
    max_image_count: int = 0
    current_extent: Size2D = Size2D(0, 0)
    min_image_extent: Size2D = Size2D(0, 0)
    max_image_extent: Size2D = Size2D(0, 0)
    max_image_array_layers: int = 0


@dataclass
class PhysicalDeviceFeature:
    """Optional device features."""

    sampler_anisotropy: bool = False


@dataclass
class DeviceLimits:
    """Device limits; sample counts are ``SampleCount`` bit masks."""

    framebuffer_color_sample_count: int = 0
    framebuffer_depth_sample_count: int = 0


@dataclass
class PhysicalDeviceInfo:
    """Basic information about a physical device."""

    name: str = ""
    limits: DeviceLimits = field(default_factory=DeviceLimits)


class GfxContext(ABC):
    """A graphics API context created for one backend."""

    def __init__(self, config=None):
        self.config = config if config is not None else PlatformConfig()

    @property
    @abstractmethod
    def api(self):
        """The graphics API this context drives."""

    @property
    def swapchain_image_count(self):
        """Number of swapchain images, taken from the platform configuration."""
        return self.config.swapchain_image_count

    @abstractmethod
    def query_swapchain_support_info(self):
        """Swapchain capabilities of the current surface and device."""

    @abstractmethod
    def query_device_feature(self):
        """Features of the selected device."""

    @abstractmethod
    def query_device_info(self):
        """Name and limits of the selected device."""

    @property
    @abstractmethod
    def default_depth_stencil_format(self):
        """The default depth/stencil image format."""

    @property
    @abstractmethod
    def default_color_format(self):
        """The default colour format, that of the swapchain images."""


# Callbacks run around creation and release of the active context.
on_pre_initialized = []  # called with no arguments
on_post_initialized = []  # called with the new context
on_pre_destroyed = []  # called with the context about to be released
on_post_destroyed = []  # called with no arguments

_backends = {}
_active = None


def register_backend(api, factory):
    """Make ``factory(config)`` the way contexts for ``api`` are created."""
    _backends[api] = factory


def use_graphics_api(api, config=None):
    """Create the active context for ``api`` and return it."""
    global _active
    for hook in list(on_pre_initialized):
        hook()
    factory = _backends.get(api)
    if factory is None:
        raise RHIException("Unsupported Graphics API")
    _active = factory(config if config is not None else PlatformConfig())
    for hook in list(on_post_initialized):
        hook(_active)
    return _active


def get_gfx_context():
    """The active context; raises ``RHIException`` when none was created."""
    if _active is None:
        raise RHIException("GfxContext not initialized")
    return _active


def release_gfx_context():
    """Drop the active context, running the destruction callbacks."""
    global _active
    context = _active
    for hook in list(on_pre_destroyed):
        hook(context)
    _active = None
    for hook in list(on_post_destroyed):
        hook()