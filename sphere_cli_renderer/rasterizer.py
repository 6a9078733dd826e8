#
# PROJECT: sphere-cli-renderer
# MODULE: sphere_cli_renderer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging
import math
from dataclasses import dataclass

from .canvas import Canvas
from .math_utils import Vec3, round_half_away
from .sampler import Sphere

logger = logging.getLogger(__name__)

# Points from the light toward the origin, unnormalized
DEFAULT_LIGHT_DIRECTION = Vec3(-1.0, -1.0, -1.0)

# rasterize_point outcomes
PLOTTED = 'plotted'
OCCLUDED = 'occluded'
OUT_OF_BOUNDS = 'out_of_bounds'
DEGENERATE = 'degenerate'


@dataclass
class RasterStats:
    """Per-outcome sample counts for one rasterization pass."""
    plotted: int = 0
    occluded: int = 0
    out_of_bounds: int = 0
    degenerate: int = 0

    @property
    def total(self) -> int:
        return self.plotted + self.occluded + self.out_of_bounds + self.degenerate

    def record(self, outcome: str):
        setattr(self, outcome, getattr(self, outcome) + 1)


def rasterize_point(canvas: Canvas, point: Vec3, normal: Vec3,
                    light_direction: Vec3 = DEFAULT_LIGHT_DIRECTION) -> str:
    """
    Project one surface sample into the canvas.

    Pipeline:
      1. Perspective divide by the sample's Z distance from the viewpoint
      2. Center on the canvas, halving Y for tall character cells
      3. Bounds check
      4. Depth test (strictly closer wins, ties keep the earlier sample)
      5. Lambert-style light from the normal

    A sample in the viewpoint's Z plane, or one whose projection is not
    finite (NaN/inf geometry), is skipped as DEGENERATE.
    """
    dz = point.z - canvas.viewpoint.z
    if dz == 0 or not math.isfinite(dz):
        return DEGENERATE

    sx = point.x / dz * canvas.scale
    sy = point.y / dz * canvas.scale
    if not (math.isfinite(sx) and math.isfinite(sy)):
        return DEGENERATE

    col = round_half_away(sx) + canvas.width // 2
    row = round_half_away(sy / 2) + canvas.height // 2
    if not canvas.contains(col, row):
        return OUT_OF_BOUNDS

    if not point.z < canvas.pixel(col, row).depth:
        return OCCLUDED

    light = normal.dot(light_direction) * canvas.light_intensity
    canvas.plot(col, row, light, point.z)
    return PLOTTED


def rasterize_sphere(canvas: Canvas, sphere: Sphere,
                     polar_steps: int = 300, azimuth_steps: int = 300,
                     light_direction: Vec3 = DEFAULT_LIGHT_DIRECTION) -> RasterStats:
    """Run every surface sample of `sphere` through rasterize_point."""
    stats = RasterStats()
    for point, normal in sphere.samples(polar_steps, azimuth_steps):
        stats.record(rasterize_point(canvas, point, normal, light_direction))

    if stats.degenerate:
        logger.debug("%r: skipped %d samples in the viewpoint plane or non-finite",
                     sphere, stats.degenerate)
    logger.debug("%r: %d plotted, %d occluded, %d off-canvas",
                 sphere, stats.plotted, stats.occluded, stats.out_of_bounds)
    return stats
