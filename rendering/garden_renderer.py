"""
Headless garden renderer.

Runs the same frame compositor as the interactive app against an off-screen
cairo canvas, so a garden session can be scripted and saved as an animation.
"""

from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import numpy as np
from tqdm import tqdm

from config.canvas_config import CanvasConfig
from .base import Renderer
from .canvas import GardenCanvas
from .exporters import save_animation, save_frame

Plantings = Dict[int, Sequence[Tuple[float, float]]]


class GardenRenderer(Renderer):
    def __init__(self, config: CanvasConfig = None):
        super().__init__(config or CanvasConfig())
        self.canvas = GardenCanvas(self.config)

    def render_frame(self, garden) -> np.ndarray:
        garden.tick(self.canvas, self.config)
        return self.canvas.to_rgba()

    def save_frame(self, garden, output_path: str) -> Path:
        return save_frame(self.render_frame(garden), output_path)

    def render_frames(self, garden, frames: int, plantings: Plantings = None) -> List[np.ndarray]:
        """
        Advance the garden `frames` times.

        Args:
            garden: garden.Garden to animate (mutated in place).
            frames: number of ticks to render.
            plantings: frame index -> list of (x, y) canvas positions planted
                       right before that frame is rendered.
        """
        plantings = plantings or {}
        rendered = []
        for i in tqdm(range(frames), desc="Rendering garden frames"):
            for x, y in plantings.get(i, ()):
                garden.plant(x, y)
            rendered.append(self.render_frame(garden))
        return rendered

    def render_animation(self, garden, output_path: str, frames: int = 300,
                         fps: int = 30, plantings: Plantings = None) -> Path:
        rendered = self.render_frames(garden, frames, plantings)
        return save_animation(rendered, output_path, fps=fps)
