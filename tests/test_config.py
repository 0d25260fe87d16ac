import pytest

from elbowengine.config import PlatformConfig, Size2D, WindowFlag, WindowLib
from elbowengine.enums import GraphicsAPI, PresentMode


def test_defaults_match_platform_settings():
    cfg = PlatformConfig()
    assert cfg.graphics_api == GraphicsAPI.VULKAN
    assert cfg.window_lib == WindowLib.GLFW
    assert cfg.default_window_size == Size2D(1920, 1080)
    assert cfg.window_flag == WindowFlag(0)
    assert cfg.msaa_sample_count == 1
    assert cfg.present_mode == PresentMode.VSYNC
    assert cfg.swapchain_image_count == 2
    assert cfg.enable_validation_layer is True
    assert cfg.validation_layer_name == "VK_LAYER_KHRONOS_validation"
    assert cfg.required_device_extensions == ["VK_KHR_swapchain"]


def test_config_path():
    assert PlatformConfig().CONFIG_PATH == "Config/Platform/PlatformConfig.cfg"


def test_enum_fields_accept_integers():
    cfg = PlatformConfig(
        graphics_api=int(GraphicsAPI.OPENGL),
        window_lib=int(WindowLib.SDL3),
        present_mode=int(PresentMode.IMMEDIATE),
    )
    assert cfg.graphics_api is GraphicsAPI.OPENGL
    assert cfg.window_lib is WindowLib.SDL3
    assert cfg.present_mode is PresentMode.IMMEDIATE


def test_window_flag_combination():
    cfg = PlatformConfig(window_flag=int(WindowFlag.NO_RESIZE | WindowFlag.NO_WINDOW_TITLE))
    assert WindowFlag.NO_RESIZE in cfg.window_flag
    assert WindowFlag.NO_WINDOW_TITLE in cfg.window_flag


def test_window_size_from_tuple():
    cfg = PlatformConfig(default_window_size=(800, 600))
    assert cfg.default_window_size == Size2D(800, 600)


def test_invalid_enum_value_is_rejected():
    with pytest.raises(ValueError):
        PlatformConfig(graphics_api=99)


def test_negative_swapchain_count_is_rejected():
    with pytest.raises(ValueError):
        PlatformConfig(swapchain_image_count=-1)


def test_extension_lists_are_independent():
    first = PlatformConfig()
    second = PlatformConfig()
    first.required_device_extensions.append("VK_EXT_extra")
    assert second.required_device_extensions == ["VK_KHR_swapchain"]


def test_extensions_copied_from_caller():
    given = ("VK_A", "VK_B")
    cfg = PlatformConfig(required_device_extensions=given)
    assert cfg.required_device_extensions == ["VK_A", "VK_B"]