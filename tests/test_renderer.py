#
# PROJECT: sphere-cli-renderer
# MODULE: tests/test_renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import os

import pytest

from sphere_cli_renderer.config import RenderConfig
from sphere_cli_renderer.math_utils import Vec3
from sphere_cli_renderer.renderer import Renderer, Animation
from sphere_cli_renderer.sampler import Sphere
from sphere_cli_renderer.scene import Scene


def fast_config(**kwargs):
    defaults = dict(polar_steps=40, azimuth_steps=40,
                    ring_polar_steps=8, ring_azimuth_steps=8)
    defaults.update(kwargs)
    return RenderConfig(**defaults)


# Whole unit sphere lands on the center pixel at this scale; the nearest
# sample faces the camera, so it is lit at full brightness.
GOLDEN_TINY = (
    "     \n"
    "  $  \n"
    "     \n"
)

# A 4x2 window at the middle of the default 150-scale view sees only the
# front of the sphere, facing the light.
GOLDEN_CENTER_PATCH = (
    "$$$$\n"
    "$$$$\n"
)

GOLDEN_DIR = os.path.join(os.path.dirname(__file__), "golden")


def read_golden(name):
    with open(os.path.join(GOLDEN_DIR, name), encoding="utf-8", newline="") as f:
        return f.read()


def test_golden_tiny_frame():
    frame = Renderer(RenderConfig(scale=2.0)).render_static(5, 3)
    assert frame == GOLDEN_TINY


def test_golden_center_patch():
    frame = Renderer(RenderConfig()).render_static(4, 2)
    assert frame == GOLDEN_CENTER_PATCH


def test_static_frame_shape_and_limb():
    frame = Renderer(fast_config(scale=20.0)).render_static(30, 12)
    lines = frame.split('\n')
    assert len(frame) == 12 * 31
    assert lines[-1] == ''
    assert all(len(line) == 30 for line in lines[:-1])
    # corners are outside the silhouette
    assert lines[0][0] == ' ' and lines[11][29] == ' '
    # center faces the light
    assert lines[6][15] == '$'


def test_rendering_is_deterministic():
    renderer = Renderer(fast_config(scale=25.0))
    assert renderer.render_static(24, 10) == renderer.render_static(24, 10)


def test_closer_sphere_hides_farther_one_regardless_of_order():
    renderer = Renderer(fast_config(scale=20.0, light_direction=Vec3(0, 0, -1)))
    near = Sphere(1.0, Vec3(0, 0, -1))
    far = Sphere(1.0, Vec3(0, 0, 1))
    a = renderer.render_scene(Scene([near, far]), 20, 8)
    b = renderer.render_scene(Scene([far, near]), 20, 8)
    assert a == b


def test_empty_scene_is_blank():
    frame = Renderer(fast_config()).render_scene(Scene(), 6, 2)
    assert frame == "      \n      \n"


def test_animation_has_one_frame_per_step():
    calls = []
    config = fast_config(scale=20.0, ring_count=8)
    animation = Renderer(config).render_animation(16, 8, steps=120,
                                                  progress=lambda d, t: calls.append((d, t)))
    assert isinstance(animation, Animation)
    assert len(animation) == 120
    assert calls[0] == (1, 120) and calls[-1] == (120, 120)
    assert len(calls) == 120
    for frame in animation:
        assert len(frame) == 8 * 17
        assert frame.count('\n') == 8
    assert animation.interval == config.frame_interval


def test_animation_defaults_to_configured_steps():
    animation = Renderer(fast_config(steps=6, ring_count=2)).render_animation(10, 4)
    assert len(animation) == 6


def test_animation_cycle_wraps():
    animation = Animation(["a\n", "b\n", "c\n"], interval=0.5)
    it = animation.cycle()
    assert [next(it) for _ in range(7)] == ["a\n", "b\n", "c\n", "a\n", "b\n", "c\n", "a\n"]
    assert animation[1] == "b\n"
    with pytest.raises(TypeError):
        animation.frames[0] = "x"


def test_untilted_ring_is_visible_in_every_frame():
    config = fast_config(scale=15.0, ring_count=4, tilt=0.0, ring_polar_steps=30,
                         ring_azimuth_steps=30)
    animation = Renderer(config).render_animation(30, 10, steps=4)
    assert len(animation) == 4
    assert all(frame.strip() for frame in animation)


def test_golden_unit_sphere_at_default_settings():
    # 100x40 with every default: 300x300 samples, camera at z=-5, scale 150.
    frame = Renderer(RenderConfig()).render_static(100, 40)
    assert frame == read_golden("unit_sphere_100x40.txt")


@pytest.mark.parametrize("steps", [0, -3])
def test_animation_rejects_non_positive_steps(steps):
    with pytest.raises(ValueError, match="steps must be a positive integer"):
        Renderer(fast_config()).render_animation(4, 2, steps=steps)


@pytest.mark.parametrize("kwargs", [dict(polar_steps=0), dict(azimuth_steps=0)])
def test_render_scene_rejects_zero_sample_steps(kwargs):
    scene = Scene([Sphere(1.0, Vec3(0, 0, 0))])
    with pytest.raises(ValueError):
        Renderer(fast_config()).render_scene(scene, 4, 2, **kwargs)
