"""Test the garden state surface.

Tests for garden.state.Garden:
    - control values are clamped to their UI ranges
    - palette changes only affect future seeds
    - plant / clear / tick publish fresh snapshots to observers
    - pause/resume observers fire only on real flag changes
    - config validation

Run:
    pytest tests/test_state.py -v
"""

import numpy as np
import pytest

from config import GardenConfig
from garden import FrameSettings, Garden


def test_defaults_from_config():
    garden = Garden(GardenConfig(speed=2.0, brush=20.0, show_grid=True,
                                 running=False, palette_seed=0.4))
    assert garden.settings() == FrameSettings(running=False, speed=2.0,
                                              brush=20.0, show_grid=True)
    assert garden.palette_seed == 0.4


def test_random_palette_seed_in_range():
    garden = Garden(GardenConfig(random_seed=3))
    assert 0.0 <= garden.palette_seed < 1.0


def test_speed_and_brush_are_clamped(garden):
    garden.speed = 10.0
    assert garden.speed == 3.0
    garden.speed = 0.01
    assert garden.speed == 0.2
    garden.brush = 100
    assert garden.brush == 40.0
    garden.brush = 0.5
    assert garden.brush == 2.0


def test_palette_seed_wraps(garden):
    garden.palette_seed = 1.25
    assert garden.palette_seed == pytest.approx(0.25)


def test_toggle_pause(garden):
    assert garden.running
    assert garden.toggle_pause() is False
    assert garden.settings().running is False
    assert garden.toggle_pause() is True


def test_reroll_palette_keeps_existing_hues(garden):
    seed = garden.plant(10, 10)
    hue = seed.hue_base
    palette = garden.reroll_palette()
    assert 0.0 <= palette < 1.0
    assert garden.seeds[0].hue_base == hue


def test_plant_prepends_newest(garden):
    first = garden.plant(1, 1)
    second = garden.plant(2, 2)
    assert garden.seeds == (second, first)
    assert garden.seed_count == 2


def test_clear_empties_population(garden):
    for i in range(5):
        garden.plant(i, i)
    garden.clear()
    assert garden.seeds == ()
    assert garden.seed_count == 0


def test_observers_see_snapshots(garden):
    seen = []
    unsubscribe = garden.subscribe(seen.append)

    garden.plant(3, 4)
    garden.clear()
    assert [len(s) for s in seen] == [1, 0]

    unsubscribe()
    garden.plant(5, 6)
    assert len(seen) == 2


def test_tick_publishes_only_on_removal(garden, recording_canvas):
    garden.plant(10, 10)
    seen = []
    garden.subscribe(seen.append)

    garden.tick(recording_canvas)
    assert seen == []
    assert garden.seeds[0].age == pytest.approx(0.02)


def test_tick_publishes_expiry(garden, recording_canvas):
    garden.speed = 3.0
    garden.plant(10, 10)
    seen = []
    garden.subscribe(seen.append)

    # 120 / (0.02 * 3) = 2000 frames to expire
    for _ in range(2001):
        garden.tick(recording_canvas)

    assert garden.seed_count == 0
    assert seen == [()]


def test_paused_tick_leaves_seeds(garden, recording_canvas):
    seed = garden.plant(10, 10)
    garden.running = False
    result = garden.tick(recording_canvas)
    assert not result.rendered
    assert garden.seeds == (seed,)


def test_injected_generator_is_used():
    rng = np.random.default_rng(5)
    garden = Garden(GardenConfig(palette_seed=0.0), rng=rng)
    assert garden.rng is rng


def test_seeded_gardens_match():
    a = Garden(GardenConfig(random_seed=11))
    b = Garden(GardenConfig(random_seed=11))
    assert a.palette_seed == b.palette_seed
    assert a.plant(0, 0).size == b.plant(0, 0).size


@pytest.mark.parametrize("kwargs", [
    {'speed': 0.0},
    {'brush': -1.0},
    {'palette_seed': 1.0},
])
def test_invalid_config(kwargs):
    with pytest.raises(ValueError):
        GardenConfig(**kwargs)


def test_running_observers(garden):
    seen = []
    unsubscribe = garden.subscribe_running(seen.append)

    garden.toggle_pause()
    garden.running = False
    garden.running = True
    assert seen == [False, True]

    unsubscribe()
    garden.toggle_pause()
    assert seen == [False, True]
