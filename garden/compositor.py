"""
Frame compositor: one tick of the garden.

Fades the previous frame, optionally overlays the grid, grows and renders every
seed, sprinkles background noise, and returns a fresh population snapshot.

The canvas is anything exposing `width`, `height`, `fade`, `draw_grid`, `draw`
and `plot_point` (see rendering.canvas.GardenCanvas).
"""

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from config.canvas_config import CanvasConfig
from .seed import Seed
from .growth import advance
from .spawner import spawn
from .profiling import profile


@dataclass(frozen=True)
class FrameSettings:
    running: bool = True
    speed: float = 1.0
    brush: float = 12.0
    show_grid: bool = False


@dataclass(frozen=True)
class FrameResult:
    seeds: Tuple[Seed, ...]
    expired: Tuple[Seed, ...] = ()
    rendered: bool = True

    @property
    def changed(self) -> bool:
        return len(self.expired) > 0


def draw_noise(canvas, speed: float, rng: np.random.Generator, config: CanvasConfig) -> int:
    """Plot faint background dots independent of any seed. Returns dots drawn."""
    drawn = 0
    for _ in range(math.ceil(config.noise_candidates * speed)):
        if rng.random() < config.noise_probability:
            x = rng.random() * canvas.width
            y = rng.random() * canvas.height
            canvas.plot_point(x, y, config.noise_color, rng.random() * config.noise_max_alpha)
            drawn += 1
    return drawn


@profile
def render_frame(seeds: Tuple[Seed, ...], settings: FrameSettings, canvas,
                 rng: np.random.Generator, config: CanvasConfig = None) -> FrameResult:
    if not settings.running:
        return FrameResult(seeds=tuple(seeds), rendered=False)

    config = config or CanvasConfig()

    # 1. Trail: translucent overlay instead of a hard clear
    canvas.fade(config.fade_color, config.fade_alpha)

    # 2. Grid
    if settings.show_grid:
        canvas.draw_grid(config.grid_step, config.grid_color, config.grid_alpha)

    # 3. Grow + spawn, newest layers drawn last
    survivors = []
    expired = []
    for seed in reversed(seeds):
        grown, is_dead = advance(seed, settings.speed)
        canvas.draw(spawn(grown, settings.brush, settings.speed, rng))
        if is_dead:
            expired.append(grown)
        else:
            survivors.append(grown)
    survivors.reverse()

    # 4. Background ambience
    draw_noise(canvas, settings.speed, rng, config)

    return FrameResult(seeds=tuple(survivors), expired=tuple(expired))
