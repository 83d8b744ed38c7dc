import pytest

from fractview.swapchain import (
    UNDEFINED_EXTENT,
    PresentMode,
    SurfaceCapabilities,
    SwapChain,
    choose_extent,
    choose_image_count,
    choose_present_mode,
)


def caps(min_count=2, max_count=8, current=(640, 480), lo=(1, 1), hi=(4096, 4096)):
    return SurfaceCapabilities(min_count, max_count, current, lo, hi)


def test_defined_extent_is_used_as_is():
    c = caps(current=(640, 480))
    assert choose_extent(c, (10, 10)) == (640, 480)


def test_undefined_extent_uses_drawable_size():
    c = caps(current=(UNDEFINED_EXTENT, UNDEFINED_EXTENT))
    assert choose_extent(c, (300, 200)) == (300, 200)


def test_undefined_extent_is_clamped():
    c = caps(current=(UNDEFINED_EXTENT, UNDEFINED_EXTENT), lo=(100, 100), hi=(500, 500))
    assert choose_extent(c, (50, 900)) == (100, 500)


def test_image_count_one_above_minimum():
    c = caps(min_count=2, max_count=8)
    assert choose_image_count(c) == c.min_image_count + 1


def test_image_count_capped_by_maximum():
    c = caps(min_count=3, max_count=3)
    assert choose_image_count(c) == c.max_image_count


def test_zero_maximum_means_unlimited():
    c = caps(min_count=5, max_count=0)
    assert choose_image_count(c) == c.min_image_count + 1


@pytest.mark.parametrize("modes", [[], [PresentMode.FIFO], list(PresentMode)])
def test_present_mode_is_immediate(modes):
    assert choose_present_mode(modes) is PresentMode.IMMEDIATE


def test_swapchain_builds_images_of_extent():
    c = caps()
    chain = SwapChain(c, (1, 1))
    assert chain.extent == (640, 480)
    assert len(chain.images) == choose_image_count(c)
    assert all((img.width, img.height) == chain.extent for img in chain.images)
    assert chain.present_mode is PresentMode.IMMEDIATE


def test_recreate_follows_new_surface():
    chain = SwapChain(caps(), (1, 1))
    old = chain.images
    chain.recreate(caps(current=(320, 240), min_count=1), (1, 1))
    assert chain.extent == (320, 240)
    assert all(not img.is_alive for img in old)
    assert all(img.is_alive and img.width == 320 for img in chain.images)
    assert chain.is_alive


def test_destroy_releases_images_once():
    chain = SwapChain(caps(), (1, 1))
    images = chain.images
    chain.destroy()
    assert chain.images == []
    assert all(not img.is_alive for img in images)
    chain.destroy()
    assert not chain.is_alive


def test_zero_extent_raises():
    with pytest.raises(ValueError):
        SwapChain(caps(current=(0, 0)), (0, 0))