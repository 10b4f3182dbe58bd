"""Test seed creation and the position vector.

Tests for garden.seed and garden.vector:
    - planting draws size and hue from the generator
    - hue wraps into [0, 1)
    - every planting gets a unique id
    - seeds are immutable values

Run:
    pytest tests/test_seed.py -v
"""

import dataclasses
import math

import pytest

from conftest import SequenceRng
from garden import Seed, Vector2D, plant_seed


def test_plant_seed_draws():
    seed = plant_seed(12.0, 34.0, 0.25, SequenceRng([0.5, 0.5]))

    assert seed.position == Vector2D(12.0, 34.0)
    assert (seed.x, seed.y) == (12.0, 34.0)
    assert seed.age == 0.0
    assert seed.size == pytest.approx(5.0)
    assert seed.hue_base == pytest.approx(0.55)


def test_hue_wraps():
    seed = plant_seed(0, 0, 0.9, SequenceRng([0.0, 0.5]))
    assert seed.hue_base == pytest.approx(0.2)


def test_initial_ranges(rng):
    for _ in range(200):
        seed = plant_seed(1.0, 1.0, rng.random(), rng)
        assert 2.0 <= seed.size < 8.0
        assert 0.0 <= seed.hue_base < 1.0


def test_ids_are_unique(rng):
    ids = {plant_seed(5, 5, 0.1, rng).id for _ in range(100)}
    assert len(ids) == 100


def test_seed_is_frozen(rng):
    seed = plant_seed(5, 5, 0.1, rng)
    with pytest.raises(dataclasses.FrozenInstanceError):
        seed.age = 10.0


def test_vector_offset():
    moved = Vector2D(10, 10).offset(math.pi / 2, 5.0)
    assert moved == Vector2D(10, 15)
    assert Vector2D(3, 4).offset(0.0, 0.0).to_tuple() == (3.0, 4.0)
