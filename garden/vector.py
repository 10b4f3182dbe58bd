"""
Minimal immutable 2D vector for canvas-local positions.
"""

import numpy as np


class Vector2D:
    __slots__ = ('_x', '_y')

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self._x = float(x)
        self._y = float(y)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def __repr__(self) -> str:
        return f"Vector2D({self._x:.2f}, {self._y:.2f})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return bool(np.isclose(self._x, other.x) and np.isclose(self._y, other.y))

    def __hash__(self) -> int:
        return hash((self._x, self._y))

    def offset(self, angle: float, distance: float) -> 'Vector2D':
        """Point at `distance` from this one along `angle` (radians)."""
        return Vector2D(self._x + np.cos(angle) * distance,
                        self._y + np.sin(angle) * distance)

    def to_tuple(self) -> tuple:
        return (self._x, self._y)
