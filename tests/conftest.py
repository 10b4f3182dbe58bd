"""Shared fixtures for the Pixel Garden test suite.

Fixtures:
    - rng: seeded numpy Generator
    - scheduler: manual frame scheduler (frames fire only when asked)
    - recording_canvas: cairo-free canvas that records every draw call
    - small_canvas: real 64x48 GardenCanvas
    - garden: Garden with a pinned palette and seeded generator
"""

import itertools

import numpy as np
import pytest

from config import CanvasConfig, GardenConfig
from garden import FrameScheduler, Garden
from rendering import CanvasUnavailableError, GardenCanvas


class SequenceRng:
    """Stands in for np.random.Generator.random(), replaying fixed values."""

    def __init__(self, values):
        self._values = itertools.cycle(values)

    def random(self):
        return next(self._values)


class ManualScheduler(FrameScheduler):
    def __init__(self):
        self._next_handle = 0
        self.pending = {}
        self.cancelled = []

    def request_frame(self, callback):
        self._next_handle += 1
        self.pending[self._next_handle] = callback
        return self._next_handle

    def cancel_frame(self, handle):
        self.pending.pop(handle, None)
        self.cancelled.append(handle)

    def run_next(self) -> bool:
        """Fire the oldest pending frame. Returns False when nothing is queued."""
        if not self.pending:
            return False
        handle = min(self.pending)
        callback = self.pending.pop(handle)
        callback()
        return True

    def run(self, frames: int) -> int:
        ran = 0
        for _ in range(frames):
            if not self.run_next():
                break
            ran += 1
        return ran


class RecordingCanvas:
    def __init__(self, width=200.0, height=100.0, available=True):
        self.width = width
        self.height = height
        self.available = available
        self.calls = []
        self.commands = []
        self.points = []
        self.resizes = []

    def ensure_available(self):
        if not self.available:
            raise CanvasUnavailableError("no context")

    def fade(self, color, alpha):
        self.calls.append(('fade', color, alpha))

    def draw_grid(self, step, color, alpha):
        self.calls.append(('grid', step, color, alpha))

    def draw(self, commands):
        commands = list(commands)
        self.calls.append(('draw', len(commands)))
        self.commands.extend(commands)

    def plot_point(self, x, y, color, alpha):
        self.calls.append(('point',))
        self.points.append((x, y, color, alpha))

    def clear(self):
        self.calls.append(('clear',))

    def resize(self, width, height, device_pixel_ratio=1.0):
        if width <= 0 or height <= 0:
            return False
        self.resizes.append((width, height, device_pixel_ratio))
        self.width, self.height = width, height
        return True


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def recording_canvas():
    return RecordingCanvas()


@pytest.fixture
def canvas_config():
    return CanvasConfig(width=64, height=48)


@pytest.fixture
def small_canvas(canvas_config):
    return GardenCanvas(canvas_config)


@pytest.fixture
def garden():
    return Garden(GardenConfig(palette_seed=0.25, random_seed=7))
