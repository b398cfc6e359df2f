from __future__ import annotations

import numpy as np
import pytest

from polyfractal.geometry import InvalidInputError, centroid, exceeds_shape_warning, total_shapes
from polyfractal.vector import Vector2


def test_centroid_of_triangle(triangle_points) -> None:
    assert centroid(triangle_points) == Vector2(1.0, 1.0)


def test_centroid_is_componentwise_mean() -> None:
    rng = np.random.default_rng(12345)
    coords = rng.uniform(-100, 100, size=(5, 2))
    center = centroid([Vector2(x, y) for x, y in coords])
    assert np.allclose(center.to_array(), coords.mean(axis=0))


def test_centroid_of_single_point() -> None:
    assert centroid([Vector2(3.0, -2.0)]) == Vector2(3.0, -2.0)


def test_centroid_rejects_empty_sequence() -> None:
    with pytest.raises(InvalidInputError):
        centroid([])
    assert issubclass(InvalidInputError, ValueError)


@pytest.mark.parametrize(
    "num_points, generations, expected",
    [(3, 0, 1), (3, 1, 4), (4, 2, 21), (3, 2, 13), (5, 10, sum(5**i for i in range(11))), (0, 3, 1)],
)
def test_total_shapes(num_points: int, generations: int, expected: int) -> None:
    assert total_shapes(num_points, generations) == expected


def test_shape_warning_threshold() -> None:
    # 1 + 3 + ... + 3^10 = 88573, 1 + 4 + ... + 4^9 = 349525
    assert not exceeds_shape_warning(3, 10)
    assert exceeds_shape_warning(4, 9)
    assert exceeds_shape_warning(3, 2, threshold=12)
    assert not exceeds_shape_warning(3, 2, threshold=13)
