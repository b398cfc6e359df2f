from __future__ import annotations

from polyfractal.points import MAX_POINTS, PointCollector
from polyfractal.vector import Vector2


def test_keeps_most_recent_points() -> None:
    collector = PointCollector()
    for i in range(7):
        collector.add(i, i * 10)
    assert len(collector) == MAX_POINTS == 5
    assert collector.points[0] == Vector2(2.0, 20.0)
    assert collector.points[-1] == Vector2(6.0, 60.0)


def test_ready_needs_two_points() -> None:
    collector = PointCollector()
    collector.add(0, 0)
    assert not collector.ready
    collector.add(1, 1)
    assert collector.ready
    collector.clear()
    assert len(collector) == 0


def test_points_is_a_snapshot() -> None:
    collector = PointCollector(max_points=3)
    collector.add(1, 2)
    snapshot = collector.points
    collector.add(3, 4)
    assert snapshot == (Vector2(1.0, 2.0),)


def test_replace_trims_to_limit() -> None:
    collector = PointCollector(max_points=2)
    collector.replace([(0, 0), (1, 1), (2, 2)])
    assert collector.points == (Vector2(1.0, 1.0), Vector2(2.0, 2.0))


def test_contains_includes_edges() -> None:
    assert PointCollector.contains(0, 0, 100, 50)
    assert PointCollector.contains(100, 50, 100, 50)
    assert not PointCollector.contains(-1, 10, 100, 50)
    assert not PointCollector.contains(10, 51, 100, 50)
