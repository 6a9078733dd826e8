#
# PROJECT: sphere-cli-renderer
# MODULE: sphere_cli_renderer/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math

from .math_utils import Vec3, Mat4
from .sampler import Sphere


class Scene:
    """
    Ordered container of spheres.

    Spheres are rasterized in insertion order; with the strict depth
    test, a later sphere only replaces pixels where it is closer.
    """

    def __init__(self, spheres=None):
        self.spheres = list(spheres) if spheres else []

    def __iter__(self):
        return iter(self.spheres)

    def __len__(self):
        return len(self.spheres)

    def add(self, sphere: Sphere):
        """Append a sphere to the scene."""
        self.spheres.append(sphere)

    def clear(self):
        """Remove all spheres from the scene."""
        self.spheres.clear()


def rotation_angle(step: int, steps: int) -> float:
    """Global spin of animation step `step` out of `steps` (radians)."""
    return 2.0 * math.pi * step / steps


class RingComposer:
    """
    Places a ring of spheres for one animation step.

    Sphere m starts at from_spherical(ring_radius, 2*pi*m/count, 0), a
    circle in the XZ plane. The ring is tilted about X, then spun about
    the vertical (Y) axis by rotation_angle(step, steps). The same
    rotation is handed to each sphere as its orientation so the normals
    turn with the placement.
    """
    __slots__ = ('count', 'ring_radius', 'sphere_radius', 'tilt')

    def __init__(self, count: int = 8, ring_radius: float = 1.5,
                 sphere_radius: float = 0.5, tilt: float = math.pi / 6):
        if count < 1:
            raise ValueError(f"ring needs at least one sphere, got {count}")
        self.count = count
        self.ring_radius = ring_radius
        self.sphere_radius = sphere_radius
        self.tilt = tilt

    @classmethod
    def from_config(cls, config) -> 'RingComposer':
        return cls(count=config.ring_count, ring_radius=config.ring_radius,
                   sphere_radius=config.sphere_radius, tilt=config.tilt)

    def placements(self):
        """Untransformed ring centers."""
        return [Vec3.from_spherical(self.ring_radius, 2.0 * math.pi * m / self.count, 0.0)
                for m in range(self.count)]

    def transform(self, step: int, steps: int) -> Mat4:
        return Mat4.rotation_y(rotation_angle(step, steps)) @ Mat4.rotation_x(self.tilt)

    def compose(self, step: int, steps: int) -> Scene:
        rot = self.transform(step, steps)
        scene = Scene()
        for center in self.placements():
            scene.add(Sphere(self.sphere_radius, rot.mul_vec3(center), orientation=rot))
        return scene
