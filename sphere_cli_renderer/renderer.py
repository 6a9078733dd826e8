#
# PROJECT: sphere-cli-renderer
# MODULE: sphere_cli_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import itertools
import logging
import time
from typing import Callable, Optional

from .config import RenderConfig
from .canvas import Canvas
from .math_utils import Vec3
from .rasterizer import rasterize_sphere
from .sampler import Sphere
from .scene import Scene, RingComposer

logger = logging.getLogger(__name__)


class Animation:
    """
    Immutable, ordered sequence of rendered frames.

    `interval` is the pause between frames during playback (seconds).
    """
    __slots__ = ('frames', 'interval')

    def __init__(self, frames, interval: float = 0.016):
        self.frames = tuple(frames)
        self.interval = interval

    def __len__(self):
        return len(self.frames)

    def __iter__(self):
        return iter(self.frames)

    def __getitem__(self, index):
        return self.frames[index]

    def cycle(self):
        """Yield the frames in order, forever."""
        return itertools.cycle(self.frames)


class Renderer:
    """
    Turns scenes into frames.

    Every call builds a fresh Canvas, so frames never share state and
    rendering the same scene twice gives the same text.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config if config is not None else RenderConfig()

    def new_canvas(self, width: int, height: int) -> Canvas:
        config = self.config
        return Canvas(width, height, config.viewpoint,
                      scale=config.scale, light_intensity=config.light_intensity)

    def render_scene(self, scene: Scene, width: int, height: int,
                     polar_steps: Optional[int] = None,
                     azimuth_steps: Optional[int] = None) -> str:
        """Rasterize every sphere of `scene` into one canvas, return the frame."""
        config = self.config
        if polar_steps is None:
            polar_steps = config.polar_steps
        if azimuth_steps is None:
            azimuth_steps = config.azimuth_steps

        canvas = self.new_canvas(width, height)
        for sphere in scene:
            rasterize_sphere(canvas, sphere, polar_steps, azimuth_steps,
                             light_direction=config.light_direction)
        return canvas.to_text(config.shade_mapper)

    def render_static(self, width: int, height: int) -> str:
        """The unit sphere at the origin."""
        scene = Scene([Sphere(1.0, Vec3(0.0, 0.0, 0.0))])
        return self.render_scene(scene, width, height)

    def render_animation(self, width: int, height: int, steps: Optional[int] = None,
                         progress: Optional[Callable[[int, int], None]] = None) -> Animation:
        """
        Render every step of the spinning ring before returning.

        `progress(done, total)` is called after each frame.
        """
        config = self.config
        if steps is None:
            steps = config.steps
        if steps < 1:
            raise ValueError(f"steps must be a positive integer, got {steps}")
        composer = RingComposer.from_config(config)

        logger.info("Rendering %d frames of %d spheres at %dx%d",
                    steps, composer.count, width, height)
        started = time.monotonic()
        frames = []
        for step in range(steps):
            frames.append(self.render_scene(composer.compose(step, steps), width, height,
                                            config.ring_polar_steps, config.ring_azimuth_steps))
            if progress:
                progress(step + 1, steps)
        logger.info("Rendered %d frames in %.1fs", steps, time.monotonic() - started)
        return Animation(frames, config.frame_interval)
