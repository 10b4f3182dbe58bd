"""
Pixel Garden engine.

Seeds planted on a canvas grow procedurally into blooming, color-shifting pixel
clusters. This package holds the simulation and frame loop; drawing surfaces
live in `rendering`.
"""

from .vector import Vector2D
from .seed import Seed, plant_seed
from .growth import advance, is_expired
from .spawner import Dot, Ring, spawn, spawn_count
from .compositor import FrameSettings, FrameResult, render_frame
from .state import Garden
from .driver import AnimationDriver, DriverState, FrameScheduler, ResizeEvents
from .interaction import CanvasBounds, InteractionSurface, to_canvas_coords

__all__ = [
    'Vector2D',
    'Seed',
    'plant_seed',
    'advance',
    'is_expired',
    'Dot',
    'Ring',
    'spawn',
    'spawn_count',
    'FrameSettings',
    'FrameResult',
    'render_frame',
    'Garden',
    'AnimationDriver',
    'DriverState',
    'FrameScheduler',
    'ResizeEvents',
    'CanvasBounds',
    'InteractionSurface',
    'to_canvas_coords'
]
