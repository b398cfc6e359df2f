"""Shared fixtures: small seed shapes and default run parameters."""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import pytest

from polyfractal.datatypes import FractalParameters
from polyfractal.fractal import seed_polygon
from polyfractal.shape import Polygon
from polyfractal.transforms import TransformType
from polyfractal.vector import Vector2


@pytest.fixture()
def triangle_points() -> tuple[Vector2, ...]:
    return (Vector2(0.0, 0.0), Vector2(2.0, 0.0), Vector2(1.0, 3.0))


@pytest.fixture()
def square_points() -> tuple[Vector2, ...]:
    return (Vector2(-1.0, -1.0), Vector2(1.0, -1.0), Vector2(1.0, 1.0), Vector2(-1.0, 1.0))


@pytest.fixture()
def triangle(triangle_points) -> Polygon:
    return seed_polygon(triangle_points)


@pytest.fixture()
def square(square_points) -> Polygon:
    return seed_polygon(square_points)


@pytest.fixture()
def parameters() -> FractalParameters:
    return FractalParameters(scale=0.5, transform_type=TransformType.INTERNAL, generations=2)
