"""
Stochastic pixel spawner.

Each frame, every live seed emits a handful of colored dots scattered around
its center plus an occasional faint ring. Output is a list of draw commands;
the seed itself is never touched.
"""

import math
from dataclasses import dataclass
from typing import List, Union

import numpy as np

from .seed import Seed

SPAWN_AGE_FACTOR = 0.05
SPAWN_SPEED_FACTOR = 0.5
SPREAD = 0.9                 # fraction of size pixels may wander from center
CENTER_ALPHA = 0.8
HUE_SHIMMER = 20.0           # degrees

DOT_MIN_RADIUS = 1.0
DOT_RADIUS_BASE = 0.3
DOT_RADIUS_JITTER = 0.8
DOT_SATURATION = 0.9
DOT_LIGHTNESS = 0.45
DOT_LIGHTNESS_JITTER = 0.10

RING_PROBABILITY = 0.08      # per unit of speed
RING_RADIUS_BASE = 0.9
RING_RADIUS_JITTER = 0.4
RING_ALPHA = 0.08
RING_SATURATION = 0.85
RING_LIGHTNESS = 0.55
RING_LINE_WIDTH = 2.0


@dataclass(frozen=True)
class Dot:
    x: float
    y: float
    radius: float
    hue: float          # degrees [0, 360)
    saturation: float   # [0, 1]
    lightness: float    # [0, 1]
    alpha: float


@dataclass(frozen=True)
class Ring:
    x: float
    y: float
    radius: float
    hue: float
    saturation: float = RING_SATURATION
    lightness: float = RING_LIGHTNESS
    alpha: float = RING_ALPHA
    line_width: float = RING_LINE_WIDTH


DrawCommand = Union[Dot, Ring]


def spawn_count(seed: Seed, speed: float, rng: np.random.Generator) -> int:
    """Number of dots a seed emits this frame; older seeds emit more."""
    raw = (rng.random() + seed.age * SPAWN_AGE_FACTOR) * (speed * SPAWN_SPEED_FACTOR)
    return max(0, math.floor(raw))


def pixel_alpha(distance: float, size: float) -> float:
    # size + 1 keeps the denominator positive for size == 0
    alpha = min(1.0, CENTER_ALPHA * (1.0 - distance / (max(size, 0.0) + 1.0)))
    return max(0.0, alpha)


def pixel_hue(seed: Seed, k: int) -> float:
    return (seed.hue_base * 360.0 + math.sin(seed.age + k) * HUE_SHIMMER) % 360.0


def spawn(seed: Seed, brush: float, speed: float, rng: np.random.Generator) -> List[DrawCommand]:
    commands: List[DrawCommand] = []

    for k in range(spawn_count(seed, speed, rng)):
        angle = rng.random() * 2 * math.pi
        distance = rng.random() * max(seed.size, 0.0) * SPREAD
        pos = seed.position.offset(angle, distance)
        commands.append(Dot(
            x=pos.x,
            y=pos.y,
            radius=max(DOT_MIN_RADIUS, brush * (DOT_RADIUS_BASE + rng.random() * DOT_RADIUS_JITTER)),
            hue=pixel_hue(seed, k),
            saturation=DOT_SATURATION,
            lightness=DOT_LIGHTNESS + rng.random() * DOT_LIGHTNESS_JITTER,
            alpha=pixel_alpha(distance, seed.size),
        ))

    if rng.random() < RING_PROBABILITY * speed:
        commands.append(Ring(
            x=seed.x,
            y=seed.y,
            radius=seed.size * (RING_RADIUS_BASE + rng.random() * RING_RADIUS_JITTER),
            hue=(seed.hue_base * 360.0) % 360.0,
        ))

    return commands
