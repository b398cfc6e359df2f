import numpy as np

from polyfractal.vector import Vector2, points_to_array

SHAPE_WARNING_THRESHOLD = 100_000


class InvalidInputError(ValueError):
    """Raised when geometry is requested for an unusable point sequence."""


def centroid(points):
    """Component-wise mean of a non-empty sequence of points."""
    if len(points) == 0:
        raise InvalidInputError("Cannot compute the center of an empty point sequence.")
    return Vector2.from_array(points_to_array(points).mean(axis=0))


def total_shapes(num_points, generations):
    """
    Number of shapes drawn for a run: num_points^0 + num_points^1 + ... + num_points^generations.
    """
    count = 1
    for i in range(1, generations + 1):
        count += num_points**i
    return count


def exceeds_shape_warning(num_points, generations, threshold=SHAPE_WARNING_THRESHOLD):
    return total_shapes(num_points, generations) > threshold
