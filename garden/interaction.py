"""
Pointer/touch boundary between a window toolkit and the garden.

Input arrives in viewport (screen) coordinates; seeds live in canvas-local
coordinates, so every event is shifted by the canvas's on-screen top-left.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from .seed import Seed


@dataclass(frozen=True)
class CanvasBounds:
    left: float
    top: float
    width: float = 0.0
    height: float = 0.0


def to_canvas_coords(client_x: float, client_y: float, bounds: CanvasBounds) -> Tuple[float, float]:
    return client_x - bounds.left, client_y - bounds.top


class InteractionSurface:
    def __init__(self, garden, canvas, bounds_provider: Callable[[], CanvasBounds]):
        self.garden = garden
        self.canvas = canvas
        self.bounds_provider = bounds_provider

    def on_pointer_down(self, client_x: float, client_y: float) -> Seed:
        x, y = to_canvas_coords(client_x, client_y, self.bounds_provider())
        return self.garden.plant(x, y)

    def on_touch_start(self, touches: Sequence[Tuple[float, float]]) -> Optional[Seed]:
        """Single-touch planting: only the first contact point counts."""
        if not touches:
            return None
        client_x, client_y = touches[0]
        return self.on_pointer_down(client_x, client_y)

    def clear(self):
        # Hard clear: solid fill, no trail, distinct from the per-frame fade.
        self.canvas.clear()
        self.garden.clear()

    def export(self, fmt: str = 'png'):
        return self.canvas.export_image(fmt)
