"""Frame bookkeeping: swap-chain images or an offscreen target, frames in flight, resizing."""

from __future__ import annotations

from fractview.framebuffer import FrameBuffer
from fractview.pipeline import GraphicPipeline
from fractview.swapchain import SurfaceCapabilities, SwapChain

MAX_FRAMES_IN_FLIGHT = 3
_MIN_SURFACE_IMAGES = 2


class Renderer:
    """Hands out a framebuffer per frame and cycles the frames in flight.

    Without a ``render_target`` the renderer draws into the images of a swap
    chain sized ``width`` by ``height``; with one, every frame draws into that
    framebuffer and the frame index stays at zero.
    """

    def __init__(
        self,
        width: int,
        height: int,
        render_target: FrameBuffer | None = None,
        frames_in_flight: int = MAX_FRAMES_IN_FLIGHT,
    ) -> None:
        if frames_in_flight < 1:
            raise ValueError("at least one frame must be in flight")
        if width <= 0 or height <= 0:
            raise ValueError(f"cannot render to a {width}x{height} surface")
        self.frames_in_flight = frames_in_flight
        self.render_target = render_target
        self.swapchain: SwapChain | None = None
        self._drawable_size = (width, height)
        if render_target is None:
            self.swapchain = SwapChain(self._capabilities(), self._drawable_size)
            self.framebuffers: list[FrameBuffer] = list(self.swapchain.images)
        else:
            if not render_target.is_alive:
                raise ValueError("the render target has been destroyed")
            self.framebuffers = [render_target]
        first = self.framebuffers[0]
        self.pipeline = GraphicPipeline(first.width, first.height)
        self.viewport = (first.width, first.height)
        self.current_frame_index = 0
        self.image_index = 0
        self.presented_frames = 0
        self._next_image = 0
        self._framebuffer_resized = False
        self._out_of_date = False
        self._recording = False
        self.is_alive = True

    def _capabilities(self) -> SurfaceCapabilities:
        return SurfaceCapabilities(
            min_image_count=_MIN_SURFACE_IMAGES,
            max_image_count=0,
            current_extent=self._drawable_size,
            min_image_extent=(1, 1),
            max_image_extent=self._drawable_size,
        )

    @property
    def framebuffer(self) -> FrameBuffer:
        """The framebuffer of the image being drawn."""
        return self.framebuffers[self.image_index]

    @property
    def recording(self) -> bool:
        """Whether a frame has begun and not yet ended."""
        return self._recording

    def begin_frame(self) -> bool:
        """Start a frame; return False when the surface had to be rebuilt first."""
        if not self.is_alive:
            raise RuntimeError("the renderer has been destroyed")
        if self._recording:
            raise RuntimeError("a frame is already being recorded")
        if self.render_target is None:
            if self._out_of_date:
                self._recreate()
                return False
            self.image_index = self._next_image
            self._next_image = (self._next_image + 1) % len(self.framebuffers)
        else:
            self.image_index = 0
        fb = self.framebuffer
        self.viewport = (fb.width, fb.height)
        self._recording = True
        return True

    def end_frame(self) -> None:
        """Finish the frame, present it and move on to the next frame in flight."""
        if not self._recording:
            raise RuntimeError("no frame is being recorded")
        self._recording = False
        if self.render_target is None:
            self.presented_frames += 1
            if self._out_of_date or self._framebuffer_resized:
                self._framebuffer_resized = False
                self._recreate()
            self.current_frame_index = (self.current_frame_index + 1) % self.frames_in_flight
        else:
            self.current_frame_index = 0

    def require_resize(self) -> None:
        """Ask for the surface to be rebuilt at the end of the next frame."""
        self._framebuffer_resized = True

    def resize(self, width: int, height: int) -> None:
        """Record a new drawable size; the next frame start rebuilds the surface."""
        if self.render_target is not None:
            raise RuntimeError("an offscreen renderer cannot be resized")
        if width <= 0 or height <= 0:
            raise ValueError(f"cannot render to a {width}x{height} surface")
        self._drawable_size = (width, height)
        self._out_of_date = True

    def _recreate(self) -> None:
        assert self.swapchain is not None
        self._out_of_date = False
        self.swapchain.recreate(self._capabilities(), self._drawable_size)
        self.framebuffers = list(self.swapchain.images)
        self.pipeline.destroy()
        first = self.framebuffers[0]
        self.pipeline = GraphicPipeline(first.width, first.height)
        self._next_image = 0
        self.image_index = 0

    def destroy(self) -> None:
        """Release the pipeline and the swap chain; destroying twice does nothing."""
        if not self.is_alive:
            return
        self.pipeline.destroy()
        if self.swapchain is not None:
            self.swapchain.destroy()
        self._recording = False
        self.is_alive = False