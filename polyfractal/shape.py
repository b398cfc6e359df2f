from dataclasses import dataclass
from typing import Protocol

from polyfractal.vector import Vector2, points_to_array


class RenderTarget(Protocol):
    def line(self, a: Vector2, b: Vector2) -> None: ...


@dataclass(frozen=True)
class Polygon:
    center: Vector2
    vertices: tuple

    def __post_init__(self):
        # Own a fresh tuple so callers can never mutate a polygon through a shared list.
        object.__setattr__(self, "vertices", tuple(self.vertices))

    def __len__(self):
        return len(self.vertices)

    def get_vertices(self):
        return self.vertices

    def edges(self):
        """Consecutive vertex pairs, closing from the last vertex back to the first."""
        n = len(self.vertices)
        return [(self.vertices[i], self.vertices[(i + 1) % n]) for i in range(n)]

    def draw(self, target):
        """Draw the closed outline of the polygon onto a render target."""
        for a, b in self.edges():
            target.line(a, b)

    def to_array(self):
        return points_to_array(self.vertices)


class SegmentCollector:
    """Render target that records every line it is asked to draw."""

    def __init__(self):
        self.segments = []

    def line(self, a, b):
        self.segments.append(((a.x, a.y), (b.x, b.y)))

    def __len__(self):
        return len(self.segments)
