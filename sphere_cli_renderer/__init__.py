#
# PROJECT: sphere-cli-renderer
# MODULE: sphere_cli_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .math_utils import Vec3, Mat4
from .config import RenderConfig, terminal_size
from .errors import RendererError, TerminalUnavailableError
from .shading import ShadeMapper, DEFAULT_RAMP
from .canvas import Canvas, Pixel
from .sampler import Sphere, SurfaceSampler
from .rasterizer import rasterize_point, rasterize_sphere, RasterStats
from .scene import Scene, RingComposer, rotation_angle
from .renderer import Renderer, Animation
