#
# PROJECT: sphere-cli-renderer
# MODULE: sphere_cli_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math
import os
import sys
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .errors import TerminalUnavailableError
from .math_utils import Vec3
from .shading import ShadeMapper, DEFAULT_RAMP


@dataclass
class RenderConfig:
    """Configuration for the rendering pipeline."""
    viewpoint: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, -5.0))
    scale: float = 150.0
    light_intensity: float = 2.0
    light_direction: Vec3 = field(default_factory=lambda: Vec3(-1.0, -1.0, -1.0))

    # Single static sphere
    polar_steps: int = 300
    azimuth_steps: int = 300

    # Animated ring
    ring_polar_steps: int = 150
    ring_azimuth_steps: int = 150
    ring_count: int = 8
    ring_radius: float = 1.5
    sphere_radius: float = 0.5
    tilt: float = math.pi / 6
    steps: int = 120
    frame_interval: float = 0.016

    ramp: str = DEFAULT_RAMP

    # Instance of the ShadeMapper built from `ramp`
    shade_mapper: Optional[ShadeMapper] = field(init=False, repr=False, compare=False, default=None)

    def __post_init__(self):
        for name in ('polar_steps', 'azimuth_steps', 'ring_polar_steps',
                     'ring_azimuth_steps', 'ring_count', 'steps'):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be a positive integer, got {getattr(self, name)}")
        if self.frame_interval < 0:
            raise ValueError(f"frame_interval must not be negative, got {self.frame_interval}")
        self.init_shading()

    def init_shading(self):
        """Rebuild the shade mapper from the current ramp."""
        self.shade_mapper = ShadeMapper(self.ramp)

    @classmethod
    def from_args(cls, args) -> 'RenderConfig':
        """
        Build a config from parsed CLI arguments.
        Options left at None keep the dataclass default.
        """
        overrides = {}
        if args.distance is not None:
            overrides['viewpoint'] = Vec3(0.0, 0.0, -args.distance)
        if args.scale is not None:
            overrides['scale'] = args.scale
        if args.light is not None:
            overrides['light_intensity'] = args.light
        if args.resolution is not None:
            if args.animate:
                overrides['ring_polar_steps'] = args.resolution
                overrides['ring_azimuth_steps'] = args.resolution
            else:
                overrides['polar_steps'] = args.resolution
                overrides['azimuth_steps'] = args.resolution
        if args.spheres is not None:
            overrides['ring_count'] = args.spheres
        if args.ring_radius is not None:
            overrides['ring_radius'] = args.ring_radius
        if args.sphere_radius is not None:
            overrides['sphere_radius'] = args.sphere_radius
        if args.tilt is not None:
            overrides['tilt'] = math.radians(args.tilt)
        if args.steps is not None:
            overrides['steps'] = args.steps
        if args.interval is not None:
            overrides['frame_interval'] = args.interval
        return cls(**overrides)


def terminal_size(stream=None) -> Tuple[int, int]:
    """
    Return (columns, lines) of the terminal behind `stream` (stdout by default).

    Raises TerminalUnavailableError when the stream is not a terminal or the
    size is reported as zero. There is no fallback size.
    """
    stream = stream if stream is not None else sys.stdout
    try:
        size = os.get_terminal_size(stream.fileno())
    except (AttributeError, ValueError, OSError) as e:
        raise TerminalUnavailableError(e) from e
    if size.columns < 1 or size.lines < 1:
        raise TerminalUnavailableError(f"reported size {size.columns}x{size.lines}")
    return size.columns, size.lines
