#
# PROJECT: sphere-cli-renderer
# MODULE: sphere_cli_renderer/sampler.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math
from typing import Optional

from .math_utils import Vec3, Mat4


class Sphere:
    """
    A sphere placed in world space.

    `orientation` rotates every surface normal before it is offset by the
    center; the ring composer uses it so the sampled surface turns
    together with the sphere's placement. None means no rotation.
    """
    __slots__ = ('radius', 'center', 'orientation')

    def __init__(self, radius: float = 1.0, center: Optional[Vec3] = None,
                 orientation: Optional[Mat4] = None):
        self.radius = float(radius)
        self.center = center if center is not None else Vec3(0, 0, 0)
        self.orientation = orientation

    def __repr__(self):
        return f"Sphere(radius={self.radius:.2f}, center={self.center!r})"

    def samples(self, polar_steps: int = 300, azimuth_steps: int = 300) -> 'SurfaceSampler':
        return SurfaceSampler(self, polar_steps, azimuth_steps)


class SurfaceSampler:
    """
    Lazy (world_point, normal) pairs over a polar x azimuth grid.

    Iterating starts over from (0, 0) every time, so one sampler can
    feed several canvases.
    """
    __slots__ = ('sphere', 'polar_steps', 'azimuth_steps')

    def __init__(self, sphere: Sphere, polar_steps: int, azimuth_steps: int):
        if polar_steps < 1 or azimuth_steps < 1:
            raise ValueError(
                f"sample grid must be at least 1x1, got {polar_steps}x{azimuth_steps}")
        self.sphere = sphere
        self.polar_steps = polar_steps
        self.azimuth_steps = azimuth_steps

    def __len__(self):
        return self.polar_steps * self.azimuth_steps

    def __iter__(self):
        radius = self.sphere.radius
        center = self.sphere.center
        orientation = self.sphere.orientation
        polar_step = math.pi / self.polar_steps
        azimuth_step = 2.0 * math.pi / self.azimuth_steps

        for i in range(self.polar_steps):
            polar = polar_step * i
            for j in range(self.azimuth_steps):
                normal = Vec3.from_spherical(radius, polar, azimuth_step * j)
                if orientation is not None:
                    normal = orientation.mul_vec3(normal)
                yield center + normal, normal
