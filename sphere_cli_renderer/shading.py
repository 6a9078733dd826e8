#
# PROJECT: sphere-cli-renderer
# MODULE: sphere_cli_renderer/shading.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math

from .math_utils import round_half_away

# Densest glyph first; reversed below so index 0 is the background.
_RAMP_DENSE_FIRST = "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,\"^`'. "

DEFAULT_RAMP = _RAMP_DENSE_FIRST[::-1]


class ShadeMapper:
    """
    Maps a continuous light value to a glyph of an ordered brightness ramp.

    - Negative light clamps to the background glyph (index 0)
    - light * len(ramp) is rounded to the nearest index
    - Anything past the end of the ramp clamps to the brightest glyph
    """
    __slots__ = ('ramp', 'last_idx')

    def __init__(self, ramp: str = DEFAULT_RAMP):
        if not ramp:
            raise ValueError("shade ramp must contain at least one glyph")
        self.ramp = ramp
        self.last_idx = len(ramp) - 1

    @property
    def background(self) -> str:
        return self.ramp[0]

    def index_for(self, light: float) -> int:
        if math.isnan(light) or light <= 0:
            return 0
        scaled = light * len(self.ramp)
        if math.isinf(scaled):
            return self.last_idx
        idx = round_half_away(scaled)
        if idx > self.last_idx: return self.last_idx
        return idx

    def char_for(self, light: float) -> str:
        return self.ramp[self.index_for(light)]
