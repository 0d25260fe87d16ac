"""Platform configuration: graphics API, window and swapchain settings."""

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import ClassVar, List

from elbowengine.enums import GraphicsAPI, PresentMode


@dataclass(frozen=True)
class Size2D:
    """A width and height in pixels."""

    width: int
    height: int


class WindowLib(IntEnum):
    """Windowing libraries a window can be created with."""

    GLFW = 0
    SDL3 = 1
    COUNT = 2


class WindowFlag(IntFlag):
    """Window creation flags."""

    NO_WINDOW_TITLE = 1 << 0  # no title bar
    NO_RESIZE = 1 << 1  # window cannot be resized


@dataclass
class PlatformConfig:
    """Settings for the platform layer; enum fields accept their integer values."""

    CONFIG_PATH: ClassVar[str] = "Config/Platform/PlatformConfig.cfg"
    CATEGORY: ClassVar[str] = "Platform"

    graphics_api: GraphicsAPI = GraphicsAPI.VULKAN
    window_lib: WindowLib = WindowLib.GLFW
    default_window_size: Size2D = Size2D(1920, 1080)
    window_flag: WindowFlag = WindowFlag(0)
    msaa_sample_count: int = 1
    present_mode: PresentMode = PresentMode.VSYNC
    swapchain_image_count: int = 2
    enable_validation_layer: bool = True
    validation_layer_name: str = "VK_LAYER_KHRONOS_validation"
    required_device_extensions: List[str] = field(
        default_factory=lambda: ["VK_KHR_swapchain"]
    )

    def __post_init__(self):
        self.graphics_api = GraphicsAPI(self.graphics_api)
        self.window_lib = WindowLib(self.window_lib)
        self.present_mode = PresentMode(self.present_mode)
        self.window_flag = WindowFlag(self.window_flag)
        if not isinstance(self.default_window_size, Size2D):
            width, height = self.default_window_size
            self.default_window_size = Size2D(width, height)
        if self.swapchain_image_count < 0:
            raise ValueError("swapchain_image_count must not be negative")
        self.required_device_extensions = list(self.required_device_extensions)