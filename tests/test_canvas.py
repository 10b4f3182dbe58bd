"""Test the cairo drawing surface.

Tests for rendering.canvas.GardenCanvas:
    - starts filled with the background color
    - invalid sizes report an unavailable canvas
    - dots, rings, fade, grid and points touch the right pixels
    - resize keeps painted pixels at the same logical position
    - a resize cairo cannot allocate leaves the old surface in place
    - hard clear restores the background

Run:
    pytest tests/test_canvas.py -v
"""

import numpy as np
import pytest

from config import CanvasConfig
from garden import Dot, Ring
from rendering import CanvasUnavailableError, GardenCanvas, hsl_to_rgb

BACKGROUND = (3, 6, 12, 255)


def white_dot(x, y, radius=3.0):
    return Dot(x=x, y=y, radius=radius, hue=0.0, saturation=0.0, lightness=1.0, alpha=1.0)


def test_initial_background(small_canvas):
    rgba = small_canvas.to_rgba()
    assert rgba.shape == (48, 64, 4)
    assert rgba.dtype == np.uint8
    assert (rgba == BACKGROUND).all()


@pytest.mark.parametrize("width, height, dpr", [(0, 10, 1.0), (10, -5, 1.0), (10, 10, 0.0)])
def test_invalid_size_is_unavailable(width, height, dpr):
    with pytest.raises(CanvasUnavailableError):
        GardenCanvas(CanvasConfig(width=width, height=height, device_pixel_ratio=dpr))


def test_ensure_available(small_canvas):
    small_canvas.ensure_available()


def test_draw_dot(small_canvas):
    small_canvas.draw([white_dot(10, 10)])
    rgba = small_canvas.to_rgba()
    assert rgba[10, 10, 0] > 200
    assert tuple(rgba[40, 60]) == BACKGROUND


def test_draw_ring_has_hollow_center(small_canvas):
    small_canvas.draw([Ring(x=32, y=24, radius=15, hue=0.0, lightness=1.0, alpha=1.0)])
    rgba = small_canvas.to_rgba()
    assert tuple(rgba[24, 32]) == BACKGROUND
    assert rgba[24, 47, 0] > 100


def test_unknown_command_raises(small_canvas):
    with pytest.raises(TypeError):
        small_canvas.draw(["not a command"])


def test_fade_darkens_trails(small_canvas, canvas_config):
    small_canvas.draw([white_dot(10, 10)])
    before = int(small_canvas.to_rgba()[10, 10, 0])
    small_canvas.fade(canvas_config.fade_color, 0.12)
    after = int(small_canvas.to_rgba()[10, 10, 0])
    assert 3 < after < before


def test_grid_draws_lines(small_canvas):
    small_canvas.draw_grid(16, (1.0, 1.0, 1.0), 1.0)
    rgba = small_canvas.to_rgba()
    # 1px lines centered on x=16 spill over columns 15 and 16
    assert rgba[5, 15, 0] > BACKGROUND[0] or rgba[5, 16, 0] > BACKGROUND[0]
    assert tuple(rgba[8, 8]) == BACKGROUND


def test_plot_point(small_canvas):
    small_canvas.plot_point(5, 5, (1.0, 1.0, 1.0), 1.0)
    assert small_canvas.to_rgba()[5, 5, 0] == 255


def test_clear_restores_background(small_canvas):
    small_canvas.draw([white_dot(10, 10), white_dot(40, 30)])
    small_canvas.clear()
    assert (small_canvas.to_rgba() == BACKGROUND).all()


def test_resize_preserves_pixels(small_canvas):
    small_canvas.draw([white_dot(10, 10)])
    assert small_canvas.resize(100, 80) is True
    rgba = small_canvas.to_rgba()
    assert rgba.shape == (80, 100, 4)
    assert rgba[10, 10, 0] > 200
    assert tuple(rgba[70, 90]) == BACKGROUND


def test_resize_with_device_pixel_ratio(small_canvas):
    small_canvas.draw([white_dot(10, 10)])
    assert small_canvas.resize(64, 48, 2.0) is True
    assert small_canvas.pixel_size == (128, 96)
    assert small_canvas.width == 64
    rgba = small_canvas.to_rgba()
    assert rgba[20, 20, 0] > 150

    # logical drawing still lands at logical coordinates
    small_canvas.plot_point(30, 30, (1.0, 1.0, 1.0), 1.0)
    assert small_canvas.to_rgba()[61, 61, 0] == 255


@pytest.mark.parametrize("width, height", [(0, 0), (0, 50), (50, 0)])
def test_zero_area_resize_is_noop(small_canvas, width, height):
    assert small_canvas.resize(width, height) is False
    assert small_canvas.pixel_size == (64, 48)


def test_same_size_resize_is_noop(small_canvas):
    assert small_canvas.resize(64, 48, 1.0) is False


def test_to_image(small_canvas):
    image = small_canvas.to_image()
    assert image.size == (64, 48)
    assert image.mode == 'RGBA'


@pytest.mark.parametrize("hue, expected", [
    (0.0, (1.0, 0.0, 0.0)),
    (120.0, (0.0, 1.0, 0.0)),
    (240.0, (0.0, 0.0, 1.0)),
    (360.0, (1.0, 0.0, 0.0)),
])
def test_hsl_to_rgb_primaries(hue, expected):
    assert hsl_to_rgb(hue, 1.0, 0.5) == pytest.approx(expected)


def test_hsl_lightness_extremes():
    assert hsl_to_rgb(200.0, 0.9, 0.0) == pytest.approx((0.0, 0.0, 0.0))
    assert hsl_to_rgb(200.0, 0.9, 1.0) == pytest.approx((1.0, 1.0, 1.0))


def test_oversized_resize_keeps_surface(small_canvas):
    small_canvas.draw([white_dot(10, 10)])
    before = small_canvas.to_rgba()

    assert small_canvas.resize(40000, 10) is False

    assert small_canvas.pixel_size == (64, 48)
    assert small_canvas.width == 64
    assert np.array_equal(small_canvas.to_rgba(), before)
