"""
GardenCanvas - persistent cairo drawing surface for the garden.

Drawing happens in logical (CSS-like) units; the backing buffer is scaled by
the device pixel ratio. The surface is never cleared between frames, which is
what lets the compositor's low-alpha fade leave trails.
"""

import math
from typing import Iterable, Tuple

import cairo
import numpy as np
from PIL import Image

from config.canvas_config import CanvasConfig
from garden.spawner import Dot, Ring
from .base import create_surface, surface_to_numpy
from .color import hsl_to_rgb
from .exporters import export_image

RING_MIN_RADIUS = 2.0


class CanvasUnavailableError(RuntimeError):
    """The drawing surface could not be created; nothing can be rendered."""


class GardenCanvas:
    def __init__(self, config: CanvasConfig = None):
        self.config = config or CanvasConfig()
        self.surface = None
        self.ctx = None
        self._width = float(self.config.width)
        self._height = float(self.config.height)
        self._dpr = float(self.config.device_pixel_ratio)

        if self._width <= 0 or self._height <= 0 or self._dpr <= 0:
            raise CanvasUnavailableError(
                f"Invalid canvas size {self._width}x{self._height} @ {self._dpr}x"
            )

        try:
            self.surface, self.ctx = self._allocate(self._width, self._height, self._dpr)
        except (cairo.Error, MemoryError) as e:
            raise CanvasUnavailableError(f"Could not create drawing surface: {e}") from e

    def _allocate(self, width: float, height: float, dpr: float):
        surface, ctx = create_surface(
            max(1, math.ceil(width * dpr)),
            max(1, math.ceil(height * dpr)),
            self.config.background_color,
            self.config.antialiasing
        )
        ctx.scale(dpr, dpr)
        return surface, ctx

    # ==================== GEOMETRY ====================
    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def device_pixel_ratio(self) -> float:
        return self._dpr

    @property
    def pixel_size(self) -> Tuple[int, int]:
        return self.surface.get_width(), self.surface.get_height()

    def ensure_available(self):
        if self.surface is None or self.ctx is None:
            raise CanvasUnavailableError("Drawing surface is not available")

    def resize(self, width: float, height: float, device_pixel_ratio: float = None) -> bool:
        """
        Reallocate the backing buffer for a new display size.

        Already painted pixels stay at the same logical position. Returns False
        (and does nothing) for zero-area sizes, sizes cairo cannot allocate,
        or when nothing changed.
        """
        dpr = self._dpr if device_pixel_ratio is None else float(device_pixel_ratio)
        if width <= 0 or height <= 0 or dpr <= 0:
            return False
        if (width, height, dpr) == (self._width, self._height, self._dpr):
            return False

        try:
            surface, ctx = self._allocate(width, height, dpr)
        except (cairo.Error, MemoryError) as e:
            print(f"Resize to {width}x{height} @ {dpr}x failed, keeping current surface: {e}")
            return False
        # Old buffer is in old device pixels; bring it back to logical units.
        ctx.save()
        ctx.scale(1 / self._dpr, 1 / self._dpr)
        ctx.set_source_surface(self.surface, 0, 0)
        ctx.paint()
        ctx.restore()

        self.surface, self.ctx = surface, ctx
        self._width, self._height, self._dpr = float(width), float(height), dpr
        return True

    # ==================== PASSES ====================
    def fade(self, color: Tuple[float, float, float], alpha: float):
        r, g, b = color
        self.ctx.set_source_rgba(r, g, b, alpha)
        self.ctx.rectangle(0, 0, self._width, self._height)
        self.ctx.fill()

    def clear(self):
        r, g, b = self.config.background_color
        self.ctx.save()
        self.ctx.set_source_rgb(r, g, b)
        self.ctx.paint()
        self.ctx.restore()

    def draw_grid(self, step: float, color: Tuple[float, float, float], alpha: float):
        ctx = self.ctx
        r, g, b = color
        ctx.save()
        ctx.set_source_rgba(r, g, b, alpha)
        ctx.set_line_width(1.0)
        for x in np.arange(0.0, self._width, step):
            ctx.move_to(x, 0)
            ctx.line_to(x, self._height)
        for y in np.arange(0.0, self._height, step):
            ctx.move_to(0, y)
            ctx.line_to(self._width, y)
        ctx.stroke()
        ctx.restore()

    def plot_point(self, x: float, y: float, color: Tuple[float, float, float], alpha: float):
        r, g, b = color
        self.ctx.set_source_rgba(r, g, b, alpha)
        self.ctx.rectangle(x, y, 1, 1)
        self.ctx.fill()

    # ==================== COMMANDS ====================
    def draw_dot(self, dot: Dot):
        r, g, b = hsl_to_rgb(dot.hue, dot.saturation, dot.lightness)
        self.ctx.set_source_rgba(r, g, b, dot.alpha)
        self.ctx.new_path()
        self.ctx.arc(dot.x, dot.y, dot.radius, 0, 2 * math.pi)
        self.ctx.fill()

    def draw_ring(self, ring: Ring):
        r, g, b = hsl_to_rgb(ring.hue, ring.saturation, ring.lightness)
        self.ctx.set_source_rgba(r, g, b, ring.alpha)
        self.ctx.set_line_width(ring.line_width)
        self.ctx.new_path()
        self.ctx.arc(ring.x, ring.y, max(RING_MIN_RADIUS, ring.radius), 0, 2 * math.pi)
        self.ctx.stroke()

    def draw(self, commands: Iterable):
        for command in commands:
            if isinstance(command, Dot):
                self.draw_dot(command)
            elif isinstance(command, Ring):
                self.draw_ring(command)
            else:
                raise TypeError(f"Unknown draw command: {command!r}")

    # ==================== READBACK ====================
    def to_rgba(self) -> np.ndarray:
        """Pixel-exact RGBA copy of the backing buffer."""
        return surface_to_numpy(self.surface)

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.to_rgba())

    def export_image(self, fmt: str = 'png'):
        return export_image(self, fmt)
