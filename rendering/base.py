"""
Base renderer class and cairo surface helpers shared by all drawing surfaces.
"""

import cairo
import numpy as np
from abc import ABC, abstractmethod
from typing import Tuple

from config.canvas_config import CanvasConfig


def create_surface(pixel_width: int, pixel_height: int,
                   background: Tuple[float, float, float],
                   antialiasing: bool = True) -> Tuple[cairo.ImageSurface, cairo.Context]:
    surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, pixel_width, pixel_height)
    ctx = cairo.Context(surface)

    if antialiasing:
        ctx.set_antialias(cairo.ANTIALIAS_BEST)

    r, g, b = background
    ctx.set_source_rgb(r, g, b)
    ctx.paint()

    return surface, ctx


def surface_to_numpy(surface: cairo.ImageSurface) -> np.ndarray:
    """Copy the surface into an RGBA uint8 array (cairo stores BGRA)."""
    surface.flush()
    height, width = surface.get_height(), surface.get_width()
    stride = surface.get_stride()
    buf = np.ndarray(
        shape=(height, stride // 4, 4),
        dtype=np.uint8,
        buffer=surface.get_data()
    )
    arr = buf[:, :width, :]
    arr_rgba = np.empty((height, width, 4), dtype=np.uint8)
    arr_rgba[:, :, 0] = arr[:, :, 2]  # R
    arr_rgba[:, :, 1] = arr[:, :, 1]  # G
    arr_rgba[:, :, 2] = arr[:, :, 0]  # B
    arr_rgba[:, :, 3] = arr[:, :, 3]  # A
    return arr_rgba


class Renderer(ABC):
    def __init__(self, config: CanvasConfig):
        self.config = config

    @abstractmethod
    def render_frame(self, *args, **kwargs) -> np.ndarray:
        pass

    @abstractmethod
    def render_animation(self, *args, **kwargs):
        pass
