"""Choice of presentation settings and the set of images shown in turn."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass

from fractview.framebuffer import FrameBuffer

UNDEFINED_EXTENT = 0xFFFFFFFF


class PresentMode(enum.IntEnum):
    """How finished images are handed to the display."""

    IMMEDIATE = 0
    MAILBOX = 1
    FIFO = 2
    FIFO_RELAXED = 3


@dataclass(frozen=True)
class SurfaceCapabilities:
    """What the display surface supports.

    A ``current_extent`` width of ``UNDEFINED_EXTENT`` means the surface
    takes its size from the images; ``max_image_count`` of 0 means no limit.
    """

    min_image_count: int
    max_image_count: int
    current_extent: tuple[int, int]
    min_image_extent: tuple[int, int]
    max_image_extent: tuple[int, int]


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def choose_extent(
    capabilities: SurfaceCapabilities, drawable_size: tuple[int, int]
) -> tuple[int, int]:
    """Return the image size: the surface's own, else the drawable size clamped."""
    if capabilities.current_extent[0] != UNDEFINED_EXTENT:
        return capabilities.current_extent
    width, height = drawable_size
    return (
        _clamp(width, capabilities.min_image_extent[0], capabilities.max_image_extent[0]),
        _clamp(height, capabilities.min_image_extent[1], capabilities.max_image_extent[1]),
    )


def choose_image_count(capabilities: SurfaceCapabilities) -> int:
    """Return one image more than the minimum, within the surface's maximum."""
    count = capabilities.min_image_count + 1
    if 0 < capabilities.max_image_count < count:
        count = capabilities.max_image_count
    return count


def choose_present_mode(modes: Sequence[PresentMode]) -> PresentMode:
    """Return the present mode to use; images are always shown immediately."""
    return PresentMode.IMMEDIATE


class SwapChain:
    """The images that are drawn to and presented in turn."""

    def __init__(
        self, capabilities: SurfaceCapabilities, drawable_size: tuple[int, int]
    ) -> None:
        self.images: list[FrameBuffer] = []
        self.is_alive = False
        self._create(capabilities, drawable_size)

    def _create(
        self, capabilities: SurfaceCapabilities, drawable_size: tuple[int, int]
    ) -> None:
        self.support = capabilities
        self.extent = choose_extent(capabilities, drawable_size)
        self.present_mode = choose_present_mode([])
        count = choose_image_count(capabilities)
        width, height = self.extent
        self.images = [FrameBuffer(width, height) for _ in range(count)]
        self.is_alive = True

    def recreate(
        self, capabilities: SurfaceCapabilities, drawable_size: tuple[int, int]
    ) -> None:
        """Destroy the images and build them again for the new surface."""
        self.destroy()
        self._create(capabilities, drawable_size)

    def destroy(self) -> None:
        """Release the images; destroying twice does nothing."""
        if not self.is_alive:
            return
        for image in self.images:
            image.destroy()
        self.images = []
        self.is_alive = False