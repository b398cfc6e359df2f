from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Vector2:
    x: float
    y: float

    def __add__(self, other):
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, k):
        return Vector2(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y

    def to_array(self):
        return np.array([self.x, self.y], dtype=np.float64)

    @classmethod
    def from_array(cls, array):
        return cls(float(array[0]), float(array[1]))


def add(a, b):
    return a + b


def sub(a, b):
    return a - b


def scale(v, k):
    """Scale a vector by any real factor (values above 1 expand, negatives flip)."""
    return v * k


def average(a, b):
    """Midpoint of two vectors."""
    return Vector2((a.x + b.x) / 2, (a.y + b.y) / 2)


def points_to_array(points):
    """Stack a sequence of vectors into an (n, 2) float64 array."""
    return np.array([[p.x, p.y] for p in points], dtype=np.float64).reshape(-1, 2)


def array_to_points(array):
    return tuple(Vector2(float(x), float(y)) for x, y in array)
