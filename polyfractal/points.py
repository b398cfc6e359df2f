from polyfractal.vector import Vector2

MAX_POINTS = 5


class PointCollector:
    """Ordered canvas points for the next fractal; keeps only the most recent `max_points`."""

    def __init__(self, max_points=MAX_POINTS):
        self.max_points = max_points
        self._points = []

    def add(self, x, y):
        self._points.append(Vector2(float(x), float(y)))
        if len(self._points) > self.max_points:
            self._points.pop(0)

    def clear(self):
        self._points.clear()

    def replace(self, points):
        self._points = [Vector2(float(x), float(y)) for x, y in points][-self.max_points:]

    @property
    def points(self):
        return tuple(self._points)

    @property
    def ready(self):
        return len(self._points) > 1

    def __len__(self):
        return len(self._points)

    @staticmethod
    def contains(x, y, width, height):
        """Whether (x, y) falls on the canvas, edges included."""
        return 0 <= x <= width and 0 <= y <= height
