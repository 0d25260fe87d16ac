import pytest

from elbowengine import gfx_context
from elbowengine.config import PlatformConfig, Size2D
from elbowengine.enums import Format, GraphicsAPI
from elbowengine.gfx_context import (
    GfxContext,
    PhysicalDeviceFeature,
    PhysicalDeviceInfo,
    RHIException,
    SurfaceFormat,
    SwapChainSupportInfo,
    get_gfx_context,
    register_backend,
    release_gfx_context,
    use_graphics_api,
)


class _FakeContext(GfxContext):
    @property
    def api(self):
        return GraphicsAPI.VULKAN

    def query_swapchain_support_info(self):
        return SwapChainSupportInfo(formats=[SurfaceFormat(Format.B8G8R8A8_SRGB)])

    def query_device_feature(self):
        return PhysicalDeviceFeature(sampler_anisotropy=True)

    def query_device_info(self):
        return PhysicalDeviceInfo(name="fake")

    @property
    def default_depth_stencil_format(self):
        return Format.D32_FLOAT

    @property
    def default_color_format(self):
        return Format.B8G8R8A8_SRGB


@pytest.fixture(autouse=True)
def _clean_state():
    register_backend(GraphicsAPI.VULKAN, _FakeContext)
    yield
    for hooks in (
        gfx_context.on_pre_initialized,
        gfx_context.on_post_initialized,
        gfx_context.on_pre_destroyed,
        gfx_context.on_post_destroyed,
    ):
        hooks.clear()
    release_gfx_context()


def test_no_context_raises():
    with pytest.raises(RHIException):
        get_gfx_context()


def test_use_graphics_api_sets_active_context():
    ctx = use_graphics_api(GraphicsAPI.VULKAN)
    assert get_gfx_context() is ctx
    assert ctx.api == GraphicsAPI.VULKAN
    assert ctx.default_color_format == Format.B8G8R8A8_SRGB


def test_unsupported_api_raises():
    with pytest.raises(RHIException):
        use_graphics_api(GraphicsAPI.D3D12)


def test_hooks_run_in_order():
    events = []
    gfx_context.on_pre_initialized.append(lambda: events.append("pre_init"))
    gfx_context.on_post_initialized.append(lambda c: events.append(("post_init", c)))
    gfx_context.on_pre_destroyed.append(lambda c: events.append(("pre_destroy", c)))
    gfx_context.on_post_destroyed.append(lambda: events.append("post_destroy"))
    ctx = use_graphics_api(GraphicsAPI.VULKAN)
    release_gfx_context()
    assert events == [
        "pre_init",
        ("post_init", ctx),
        ("pre_destroy", ctx),
        "post_destroy",
    ]


def test_release_clears_context():
    use_graphics_api(GraphicsAPI.VULKAN)
    release_gfx_context()
    with pytest.raises(RHIException):
        get_gfx_context()


def test_swapchain_image_count_from_config():
    config = PlatformConfig(swapchain_image_count=3)
    ctx = use_graphics_api(GraphicsAPI.VULKAN, config)
    assert ctx.config is config
    assert ctx.swapchain_image_count == 3


def test_default_config_used():
    ctx = use_graphics_api(GraphicsAPI.VULKAN)
    assert ctx.swapchain_image_count == PlatformConfig().swapchain_image_count


def test_exception_message_carries_reason():
    err = RHIException("no memory type")
    assert err.reason == "no memory type"
    assert str(err).endswith("no memory type")


def test_swapchain_info_defaults_are_independent():
    first = SwapChainSupportInfo()
    second = SwapChainSupportInfo()
    first.formats.append(SurfaceFormat())
    assert second.formats == []
    assert second.current_extent == Size2D(0, 0)


def test_surface_format_defaults_are_out_of_range():
    fmt = SurfaceFormat()
    assert fmt.format == Format.COUNT
    assert PhysicalDeviceInfo().limits.framebuffer_color_sample_count == 0