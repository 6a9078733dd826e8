#
# PROJECT: sphere-cli-renderer
# MODULE: sphere_cli_renderer/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import sys

from .math_utils import Vec3
from .shading import ShadeMapper

# Depth of a pixel nothing has been drawn into yet
FAR_DEPTH = sys.float_info.max


class Pixel:
    __slots__ = ('light', 'depth')

    def __init__(self, light: float = 0.0, depth: float = FAR_DEPTH):
        self.light = light
        self.depth = depth

    def __repr__(self):
        return f"Pixel(light={self.light:.3f}, depth={self.depth:.3f})"


class Canvas:
    """
    Per-frame light/depth buffer.

    Pixels live in one flat row-major list (index = row * width + col).
    The projection parameters travel with the canvas so the rasterizer
    needs nothing else to place a sample.
    """
    __slots__ = ['width', 'height', 'viewpoint', 'scale', 'light_intensity', 'pixels']

    def __init__(self, width: int, height: int, viewpoint: Vec3,
                 scale: float = 150.0, light_intensity: float = 2.0):
        if width < 1 or height < 1:
            raise ValueError(f"canvas must be at least 1x1, got {width}x{height}")
        self.width, self.height = width, height
        self.viewpoint = viewpoint
        self.scale = scale
        self.light_intensity = light_intensity
        self.pixels = [Pixel() for _ in range(width * height)]

    def _offset(self, col: int, row: int) -> int:
        if col < 0 or col >= self.width or row < 0 or row >= self.height:
            raise IndexError(f"pixel ({col}, {row}) outside {self.width}x{self.height} canvas")
        return row * self.width + col

    def contains(self, col: int, row: int) -> bool:
        return 0 <= col < self.width and 0 <= row < self.height

    def pixel(self, col: int, row: int) -> Pixel:
        return self.pixels[self._offset(col, row)]

    def plot(self, col: int, row: int, light: float, depth: float):
        self.pixels[self._offset(col, row)] = Pixel(light, depth)

    def rows(self):
        """Yield each row of pixels, top to bottom."""
        w = self.width
        for start in range(0, w * self.height, w):
            yield self.pixels[start:start + w]

    def to_text(self, shade_mapper: ShadeMapper) -> str:
        """Serialize to a frame: one glyph per pixel, '\\n' after every row."""
        char_for = shade_mapper.char_for
        lines = []
        for row in self.rows():
            lines.append(''.join(char_for(p.light) for p in row))
            lines.append('\n')
        return ''.join(lines)
