#
# PROJECT: sphere-cli-renderer
# MODULE: tests/test_config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import io
import math
import os

import pytest

from sphere_cli_renderer.config import RenderConfig, terminal_size
from sphere_cli_renderer.demo import parse_args
from sphere_cli_renderer.errors import RendererError, TerminalUnavailableError
from sphere_cli_renderer.math_utils import Vec3
from sphere_cli_renderer.shading import ShadeMapper


def test_defaults_match_reference_scene():
    config = RenderConfig()
    assert config.viewpoint == Vec3(0, 0, -5)
    assert config.scale == 150.0
    assert config.light_intensity == 2.0
    assert config.light_direction == Vec3(-1, -1, -1)
    assert (config.polar_steps, config.azimuth_steps) == (300, 300)
    assert (config.ring_polar_steps, config.ring_azimuth_steps) == (150, 150)
    assert config.ring_count == 8
    assert config.steps == 120
    assert config.frame_interval == pytest.approx(0.016)
    assert isinstance(config.shade_mapper, ShadeMapper)


def test_custom_ramp_rebuilds_shade_mapper():
    config = RenderConfig(ramp=" #")
    assert config.shade_mapper.ramp == " #"
    config.ramp = " .#"
    config.init_shading()
    assert config.shade_mapper.ramp == " .#"


@pytest.mark.parametrize("field", ["polar_steps", "azimuth_steps", "ring_polar_steps",
                                   "ring_azimuth_steps", "ring_count", "steps"])
def test_non_positive_counts_rejected(field):
    with pytest.raises(ValueError):
        RenderConfig(**{field: 0})


def test_negative_interval_rejected():
    with pytest.raises(ValueError):
        RenderConfig(frame_interval=-0.1)


def test_empty_ramp_rejected():
    with pytest.raises(ValueError):
        RenderConfig(ramp="")


def test_from_args_defaults():
    config = RenderConfig.from_args(parse_args([]))
    assert config == RenderConfig()


def test_from_args_static_overrides():
    args = parse_args(["--scale", "60", "--light", "1.5", "--distance", "8",
                       "--resolution", "90"])
    config = RenderConfig.from_args(args)
    assert config.scale == 60.0
    assert config.light_intensity == 1.5
    assert config.viewpoint == Vec3(0, 0, -8)
    assert (config.polar_steps, config.azimuth_steps) == (90, 90)
    assert config.ring_polar_steps == 150


def test_from_args_animation_overrides():
    args = parse_args(["--animate", "--resolution", "40", "--spheres", "12",
                       "--tilt", "90", "--steps", "60", "--interval", "0.05",
                       "--ring-radius", "2", "--sphere-radius", "0.4"])
    config = RenderConfig.from_args(args)
    assert (config.ring_polar_steps, config.ring_azimuth_steps) == (40, 40)
    assert config.polar_steps == 300
    assert config.ring_count == 12
    assert config.tilt == pytest.approx(math.pi / 2)
    assert config.steps == 60
    assert config.frame_interval == 0.05
    assert config.ring_radius == 2.0
    assert config.sphere_radius == 0.4


def test_terminal_size_fails_fast_without_a_terminal():
    with pytest.raises(TerminalUnavailableError) as excinfo:
        terminal_size(io.StringIO())
    assert isinstance(excinfo.value, RendererError)
    assert "cannot determine terminal size" in str(excinfo.value)


def test_terminal_size_reads_the_stream(monkeypatch):
    seen = []

    def fake_get_terminal_size(fd):
        seen.append(fd)
        return os.terminal_size((132, 43))

    class Stream:
        def fileno(self):
            return 7

    monkeypatch.setattr(os, "get_terminal_size", fake_get_terminal_size)
    assert terminal_size(Stream()) == (132, 43)
    assert seen == [7]


def test_terminal_size_rejects_zero(monkeypatch):
    class Stream:
        def fileno(self):
            return 1

    monkeypatch.setattr(os, "get_terminal_size", lambda fd: os.terminal_size((0, 0)))
    with pytest.raises(TerminalUnavailableError):
        terminal_size(Stream())
