import pytest

from fractview.framebuffer import FrameBuffer
from fractview.renderer import Renderer


def test_swapchain_framebuffers_match_images():
    renderer = Renderer(64, 48)
    assert renderer.swapchain is not None
    assert renderer.framebuffers == renderer.swapchain.images
    assert all((fb.width, fb.height) == (64, 48) for fb in renderer.framebuffers)


def test_pipeline_matches_framebuffer_size():
    renderer = Renderer(40, 30)
    assert (renderer.pipeline.width, renderer.pipeline.height) == (40, 30)


def test_frame_index_cycles_through_frames_in_flight():
    renderer = Renderer(16, 16, frames_in_flight=2)
    seen = []
    for _ in range(4):
        assert renderer.begin_frame() is True
        renderer.end_frame()
        seen.append(renderer.current_frame_index)
    assert seen == [1, 0, 1, 0]
    assert renderer.presented_frames == 4


def test_images_are_used_in_turn():
    renderer = Renderer(16, 16)
    count = len(renderer.framebuffers)
    indices = []
    for _ in range(count + 1):
        renderer.begin_frame()
        indices.append(renderer.image_index)
        renderer.end_frame()
    assert indices[:count] == list(range(count))
    assert indices[count] == 0


def test_resize_rebuilds_before_next_frame():
    renderer = Renderer(64, 48)
    renderer.resize(32, 16)
    assert renderer.begin_frame() is False
    assert renderer.begin_frame() is True
    assert (renderer.framebuffer.width, renderer.framebuffer.height) == (32, 16)
    assert renderer.viewport == (32, 16)
    assert renderer.pipeline.width == 32


def test_require_resize_recreates_at_end_of_frame():
    renderer = Renderer(20, 20)
    old = list(renderer.framebuffers)
    renderer.require_resize()
    renderer.begin_frame()
    renderer.end_frame()
    assert all(fb not in old for fb in renderer.framebuffers)
    assert all(not fb.is_alive for fb in old)


def test_render_target_mode():
    target = FrameBuffer(8, 4)
    renderer = Renderer(8, 4, render_target=target)
    assert renderer.swapchain is None
    assert renderer.begin_frame() is True
    assert renderer.framebuffer is target
    assert renderer.image_index == 0
    renderer.end_frame()
    assert renderer.current_frame_index == 0


def test_render_target_cannot_resize():
    renderer = Renderer(8, 4, render_target=FrameBuffer(8, 4))
    with pytest.raises(RuntimeError):
        renderer.resize(10, 10)


def test_end_without_begin_raises():
    renderer = Renderer(8, 8)
    with pytest.raises(RuntimeError):
        renderer.end_frame()


def test_begin_twice_raises():
    renderer = Renderer(8, 8)
    renderer.begin_frame()
    with pytest.raises(RuntimeError):
        renderer.begin_frame()


def test_destroy_releases_and_blocks_frames():
    renderer = Renderer(8, 8)
    images = list(renderer.framebuffers)
    renderer.destroy()
    renderer.destroy()
    assert renderer.is_alive is False
    assert renderer.pipeline.is_alive is False
    assert all(not fb.is_alive for fb in images)
    with pytest.raises(RuntimeError):
        renderer.begin_frame()


def test_destroy_keeps_render_target():
    target = FrameBuffer(4, 4)
    renderer = Renderer(4, 4, render_target=target)
    renderer.destroy()
    assert target.is_alive is True


def test_invalid_arguments():
    with pytest.raises(ValueError):
        Renderer(8, 8, frames_in_flight=0)
    with pytest.raises(ValueError):
        Renderer(0, 8)