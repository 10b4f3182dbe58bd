"""
Garden - the process-wide render state shared by the engine and the front end.

Holds the control values (running, speed, brush, grid, palette) and owns the
seed population. The population is only ever replaced, never mutated: every
plant, clear and tick publishes a new tuple, so observers such as a seed-count
label can hold on to a snapshot safely.
"""

from typing import Callable, List, Optional, Tuple

import numpy as np

from config.app_config import GardenConfig, SPEED_RANGE, BRUSH_RANGE
from config.canvas_config import CanvasConfig
from .seed import Seed, plant_seed
from .compositor import FrameResult, FrameSettings, render_frame

SeedObserver = Callable[[Tuple[Seed, ...]], None]
RunningObserver = Callable[[bool], None]


def _clamp(value: float, bounds: Tuple[float, float]) -> float:
    low, high = bounds
    return min(max(float(value), low), high)


class Garden:
    def __init__(self, config: GardenConfig = None, rng: np.random.Generator = None):
        config = config or GardenConfig()
        self.rng = rng if rng is not None else np.random.default_rng(config.random_seed)

        self._running = config.running
        self.show_grid = config.show_grid
        self._speed = _clamp(config.speed, SPEED_RANGE)
        self._brush = _clamp(config.brush, BRUSH_RANGE)
        if config.palette_seed is None:
            self._palette_seed = float(self.rng.random())
        else:
            self._palette_seed = config.palette_seed

        self._seeds: Tuple[Seed, ...] = ()
        self._observers: List[SeedObserver] = []
        self._running_observers: List[RunningObserver] = []

    # ==================== CONTROLS ====================
    @property
    def running(self) -> bool:
        return self._running

    @running.setter
    def running(self, value: bool):
        value = bool(value)
        if value == self._running:
            return
        self._running = value
        for observer in list(self._running_observers):
            observer(value)

    def subscribe_running(self, observer: RunningObserver) -> Callable[[], None]:
        """Register a pause/resume observer. Returns a callable that unsubscribes."""
        self._running_observers.append(observer)

        def unsubscribe():
            if observer in self._running_observers:
                self._running_observers.remove(observer)

        return unsubscribe

    @property
    def speed(self) -> float:
        return self._speed

    @speed.setter
    def speed(self, value: float):
        self._speed = _clamp(value, SPEED_RANGE)

    @property
    def brush(self) -> float:
        return self._brush

    @brush.setter
    def brush(self, value: float):
        self._brush = _clamp(value, BRUSH_RANGE)

    @property
    def palette_seed(self) -> float:
        return self._palette_seed

    @palette_seed.setter
    def palette_seed(self, value: float):
        # Existing seeds keep their hue; only future plantings are affected.
        self._palette_seed = float(value) % 1.0

    def toggle_pause(self) -> bool:
        self.running = not self.running
        return self.running

    def reroll_palette(self) -> float:
        self.palette_seed = self.rng.random()
        return self._palette_seed

    def settings(self) -> FrameSettings:
        return FrameSettings(
            running=self.running,
            speed=self._speed,
            brush=self._brush,
            show_grid=self.show_grid
        )

    # ==================== POPULATION ====================
    @property
    def seeds(self) -> Tuple[Seed, ...]:
        return self._seeds

    @property
    def seed_count(self) -> int:
        return len(self._seeds)

    def subscribe(self, observer: SeedObserver) -> Callable[[], None]:
        """Register a population observer. Returns a callable that unsubscribes."""
        self._observers.append(observer)

        def unsubscribe():
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _publish(self, seeds: Tuple[Seed, ...]):
        self._seeds = seeds
        for observer in list(self._observers):
            observer(seeds)

    def plant(self, x: float, y: float) -> Seed:
        seed = plant_seed(x, y, self._palette_seed, self.rng)
        self._publish((seed,) + self._seeds)
        return seed

    def clear(self):
        self._publish(())

    def tick(self, canvas, config: Optional[CanvasConfig] = None) -> FrameResult:
        """Run one frame against `canvas` with the current control values."""
        result = render_frame(self._seeds, self.settings(), canvas, self.rng, config)
        if result.changed:
            self._publish(result.seeds)
        else:
            # Grown values still replace the old tuple; no observer churn.
            self._seeds = result.seeds
        return result
