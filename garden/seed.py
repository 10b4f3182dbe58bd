"""
Seed - a single planted growth point and its evolving state.
"""

import uuid
from dataclasses import dataclass, field

import numpy as np

from .vector import Vector2D

INITIAL_SIZE = 2.0
INITIAL_SIZE_JITTER = 6.0
HUE_JITTER = 0.6


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Seed:
    position: Vector2D
    size: float
    age: float = 0.0
    hue_base: float = 0.0
    id: str = field(default_factory=_new_id)

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def __repr__(self) -> str:
        return (f"Seed({self.id[:7]} at {self.position}, "
                f"size={self.size:.2f}, age={self.age:.2f})")


def plant_seed(x: float, y: float, palette_seed: float, rng: np.random.Generator) -> Seed:
    """Create a fresh seed at canvas-local (x, y), colored from the palette seed."""
    return Seed(
        position=Vector2D(x, y),
        size=INITIAL_SIZE + rng.random() * INITIAL_SIZE_JITTER,
        age=0.0,
        hue_base=(palette_seed + rng.random() * HUE_JITTER) % 1.0,
    )
