"""
Configuration for the drawing surface and the per-frame compositing passes.
"""

from dataclasses import dataclass
from typing import Tuple

# Colors are RGB tuples in [0, 1] (cairo convention).
NIGHT = (3 / 255, 6 / 255, 12 / 255)        # #03060c
SKY = (14 / 255, 165 / 255, 233 / 255)      # #0ea5e9


@dataclass
class CanvasConfig:
    width: int = 960
    height: int = 640
    device_pixel_ratio: float = 1.0

    background_color: Tuple[float, float, float] = NIGHT

    # Trail effect: low-alpha overlay painted instead of a hard clear
    fade_color: Tuple[float, float, float] = NIGHT
    fade_alpha: float = 0.12

    grid_step: float = 40.0
    grid_color: Tuple[float, float, float] = SKY
    grid_alpha: float = 0.06

    # Background ambience ("stars")
    noise_color: Tuple[float, float, float] = SKY
    noise_max_alpha: float = 0.08
    noise_candidates: float = 2.0  # per unit of speed
    noise_probability: float = 0.05

    antialiasing: bool = True

    def __post_init__(self):
        self.background_color = tuple(self.background_color)
        self.fade_color = tuple(self.fade_color)
        self.grid_color = tuple(self.grid_color)
        self.noise_color = tuple(self.noise_color)
